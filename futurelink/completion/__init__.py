from .link import CompletionLink, forward, link

__all__ = ("CompletionLink", "forward", "link")
