from pull_sdk.common.types.types import ChainType, PairIndex
from pull_sdk.common.types.secret import SecretKey

__all__ = [
    "ChainType",
    "PairIndex",
    "SecretKey",
]
