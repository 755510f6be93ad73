"""Table change notifications for the read streams.

Every committed write bumps a per-table version. Readers remember the version
they last queried at and wait for it to move before querying again.
"""
import asyncio
from collections import defaultdict
from typing import Dict, Set


class InvalidationTracker:

    def __init__(self) -> None:
        self._versions: Dict[str, int] = defaultdict(int)
        self._waiters: Set[asyncio.Future] = set()

    def version(self, table: str) -> int:
        return self._versions[table]

    def notify(self, *tables: str) -> None:
        for table in tables:
            self._versions[table] += 1
        for waiter in self._waiters:
            if not waiter.done():
                waiter.set_result(None)

    async def wait_for_change(self, table: str, since: int) -> int:
        while self._versions[table] == since:
            waiter = asyncio.get_running_loop().create_future()
            self._waiters.add(waiter)
            try:
                await waiter
            finally:
                self._waiters.discard(waiter)
        return self._versions[table]
