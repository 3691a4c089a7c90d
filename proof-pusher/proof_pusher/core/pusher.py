import asyncio
import logging
import time
from typing import Callable, List, Optional

from pull_sdk import PullResult, PullServiceClient, pull_and_invoke
from pull_sdk.onchain.connectors.base import ChainConnector

logger = logging.getLogger(__name__)

CONSECUTIVE_PUSH_ERRORS_LIMIT = 10


class ProofPusher:
    client: PullServiceClient
    connector: ChainConnector
    consecutive_push_error: int
    onchain_lock: asyncio.Lock

    def __init__(
        self,
        client: PullServiceClient,
        connector: ChainConnector,
        on_successful_push: Optional[Callable[[], None]] = None,
    ):
        self.client = client
        self.connector = connector
        self.consecutive_push_error = 0
        self.onchain_lock = asyncio.Lock()
        self.on_successful_push = on_successful_push

    async def push(self, pair_indexes: List[int]) -> Optional[PullResult]:
        """
        Pull a proof for the pair indexes & submit it on-chain.

        A failed round is logged and returns None. It is not retried, the next
        round pulls a fresh proof.
        """
        if len(pair_indexes) == 0:
            return None

        logger.info(f"📨 PUSHER: pulling a proof for {len(pair_indexes)} index(es)...")

        try:
            async with self.onchain_lock:
                start_t = time.time()
                result = await pull_and_invoke(self.client, self.connector, pair_indexes)

            end_t = time.time()
            logger.info(
                f"🏋️ PUSHER: ✅ Proof for {pair_indexes} verified in TX "
                f"{result.invocation.tx_hash} (took {(end_t - start_t):.2f}s)"
            )
            self.consecutive_push_error = 0

            if self.on_successful_push:
                self.on_successful_push()

            return result

        except Exception as e:
            self.consecutive_push_error += 1
            logger.error(f"⛔ PUSHER: could not push proof for {pair_indexes}: {e}")

            if self.consecutive_push_error >= CONSECUTIVE_PUSH_ERRORS_LIMIT:
                raise ValueError(
                    f"⛔ PUSHER: Failed to push proofs {self.consecutive_push_error} "
                    "times in a row. Something is wrong!"
                ) from e

            return None
