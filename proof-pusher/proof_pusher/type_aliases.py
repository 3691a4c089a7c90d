from typing import Dict

UnixTimestampMs = int

PairIndex = int
LastUpdatedPerIndex = Dict[PairIndex, UnixTimestampMs]
