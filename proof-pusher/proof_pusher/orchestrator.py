import asyncio
import logging
import time
from typing import Callable, Optional

from pull_sdk import PullResult

from proof_pusher.core.pusher import ProofPusher
from proof_pusher.core.scheduler import IndexScheduler
from proof_pusher.type_aliases import UnixTimestampMs

logger = logging.getLogger(__name__)


def current_time_ms() -> UnixTimestampMs:
    return int(time.time() * 1000)


class Orchestrator:
    """
    Main loop of the proof pusher: every refresh interval, pushes one proof
    for all the due indexes and marks them updated once it landed on-chain.
    """

    scheduler: IndexScheduler
    pusher: ProofPusher
    refresh_interval_in_s: float

    def __init__(
        self,
        scheduler: IndexScheduler,
        pusher: ProofPusher,
        refresh_interval_in_s: float = 5,
        clock: Callable[[], UnixTimestampMs] = current_time_ms,
    ) -> None:
        self.scheduler = scheduler
        self.pusher = pusher
        self.refresh_interval_in_s = refresh_interval_in_s
        self.clock = clock

    async def run_forever(self) -> None:
        while True:
            await self.run_once()
            await asyncio.sleep(self.refresh_interval_in_s)

    async def run_once(self) -> Optional[PullResult]:
        now_ms = self.clock()
        due_indexes = self.scheduler.due_indexes(now_ms)
        if len(due_indexes) == 0:
            return None

        logger.info(f"💡 ORCHESTRATOR: indexes {due_indexes} need a new proof")
        result = await self.pusher.push(due_indexes)
        if result is not None:
            self.scheduler.mark_updated(due_indexes, now_ms)
        return result
