from pull_sdk.common.types.types import ChainType
from pull_sdk.offchain.client import PullServiceClient
from pull_sdk.offchain.types import PullRequest, PullResponse
from pull_sdk.pull import PullResult, pull_and_invoke

__all__ = [
    "ChainType",
    "PullServiceClient",
    "PullRequest",
    "PullResponse",
    "PullResult",
    "pull_and_invoke",
]
