from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Coroutine
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from futurelink import failed_status, link  # noqa: E402

BAD_NODE_ID_UNKNOWN = 0x80340000


@dataclass(frozen=True, slots=True)
class Request:
    request_id: int
    node: str


def _empty_values() -> dict[str, object]:
    return {}


@dataclass(slots=True)
class FakeTransport:
    """Answers reads after a delay, out of order when delays differ."""

    values: dict[str, object] = field(default_factory=_empty_values)
    delay_seconds: float = 0.0

    def send(self, request: Request) -> asyncio.Future[object]:
        loop = asyncio.get_running_loop()
        if request.node not in self.values:
            return failed_status(BAD_NODE_ID_UNKNOWN)
        response = loop.create_future()
        loop.call_later(self.delay_seconds, response.set_result, self.values[request.node])
        return response


@dataclass(slots=True)
class FakeClient:
    """Hands out pending futures before the transport has produced anything."""

    transport: FakeTransport
    pending: dict[int, asyncio.Future[object]] = field(default_factory=dict)
    next_id: int = 1

    def read(self, node: str) -> asyncio.Future[object]:
        request = Request(self.next_id, node)
        self.next_id += 1
        target: asyncio.Future[object] = asyncio.get_running_loop().create_future()
        self.pending[request.request_id] = target
        target.add_done_callback(lambda _: self.pending.pop(request.request_id, None))
        return link(target).from_(self.transport.send(request))


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def run(main: Callable[[], Coroutine[object, object, None]]) -> None:  # pragma: no cover (examples only)
    asyncio.run(main())
