import logging
from typing import List

from proof_pusher.configs.oracle_config import OracleConfig
from proof_pusher.type_aliases import LastUpdatedPerIndex, PairIndex, UnixTimestampMs

logger = logging.getLogger(__name__)


class IndexScheduler:
    """
    Keeps track of when each price index was last pushed and tells which
    ones need a new proof.

    An index is due once its resolution elapsed since its last push. Indexes
    that were never pushed are due straight away.
    """

    oracles: List[OracleConfig]
    last_updated: LastUpdatedPerIndex

    def __init__(self, oracles: List[OracleConfig]) -> None:
        # Shortest resolutions first
        self.oracles = sorted(oracles, key=lambda oracle: (oracle.resolution_ms, oracle.price_index))
        self.last_updated = {oracle.price_index: 0 for oracle in self.oracles}

    def due_indexes(self, now_ms: UnixTimestampMs) -> List[PairIndex]:
        due = [
            oracle.price_index
            for oracle in self.oracles
            if now_ms - self.last_updated[oracle.price_index] >= oracle.resolution_ms
        ]
        logger.debug(f"🕰️ SCHEDULER: {len(due)}/{len(self.oracles)} index(es) due")
        return due

    def mark_updated(self, indexes: List[PairIndex], now_ms: UnixTimestampMs) -> None:
        for index in indexes:
            if index not in self.last_updated:
                logger.warning(f"SCHEDULER: unknown price index {index}, ignoring...")
                continue
            self.last_updated[index] = now_ms
