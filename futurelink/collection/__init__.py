from .sequence import sequence, sequence_cf, sequenceM

__all__ = (
    # asyncio.Future
    "sequence",
    # concurrent.futures.Future
    "sequence_cf",
    # Generic
    "sequenceM",
)
