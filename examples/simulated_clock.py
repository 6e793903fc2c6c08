"""
Simulated-time demo
===================

Runs the emitter on a virtual clock so an hour of heartbeats prints instantly.

Usage:
    python examples/simulated_clock.py
"""

import asyncio

from railpack_heartbeat import HeartbeatEmitter, ManualClock, ManualScheduler, StdoutSink


async def main() -> None:
    clock = ManualClock()
    scheduler = ManualScheduler(clock)
    emitter = HeartbeatEmitter(StdoutSink(), scheduler, clock=clock)

    await emitter.start()
    fired = await scheduler.advance(60 * 60_000)
    print(f"-- {fired} heartbeats in one simulated hour --")


if __name__ == "__main__":
    asyncio.run(main())
