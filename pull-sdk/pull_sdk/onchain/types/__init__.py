from pull_sdk.onchain.types.types import (
    ChainInvoker,
    ContractCall,
    InvocationResult,
)
from pull_sdk.onchain.types.config import (
    ChainConfig,
    EvmConfig,
    AptosConfig,
    SuiConfig,
    RadixConfig,
    CosmWasmConfig,
)


__all__ = [
    "ChainInvoker",
    "ContractCall",
    "InvocationResult",
    "ChainConfig",
    "EvmConfig",
    "AptosConfig",
    "SuiConfig",
    "RadixConfig",
    "CosmWasmConfig",
]
