from __future__ import annotations

from _infra import FakeClient, FakeTransport, banner, run

from futurelink import StatusError, lift as L, sequence
from kungfu import Error, Ok


async def main() -> None:
    banner("01_quickstart: link + sequence + failed_status")

    client = FakeClient(
        FakeTransport(
            values={"ns=2;s=Temp": 21.5, "ns=2;s=Pressure": 1.01, "ns=2;s=Flow": 3.2},
            delay_seconds=0.01,
        )
    )

    # Responses arrive in any order; the list follows the request order.
    values = await sequence([
        client.read("ns=2;s=Temp"),
        client.read("ns=2;s=Pressure"),
        client.read("ns=2;s=Flow"),
    ])
    print(values)

    result = await L.as_result(sequence([
        client.read("ns=2;s=Temp"),
        client.read("ns=2;s=Missing"),
    ]))
    match result:
        case Ok(values):
            print(values)
        case Error(StatusError() as err):
            print(f"status error: {err.status_code}")
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
