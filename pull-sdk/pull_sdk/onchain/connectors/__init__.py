from typing import Dict, Optional, Type

from pull_sdk.common.exceptions import ConfigError
from pull_sdk.common.types.types import ChainType
from pull_sdk.onchain.connectors.base import ChainConnector
from pull_sdk.onchain.connectors.evm import EvmConnector, Web3Invoker
from pull_sdk.onchain.connectors.aptos import AptosConnector
from pull_sdk.onchain.connectors.sui import SuiConnector
from pull_sdk.onchain.connectors.radix import RadixConnector
from pull_sdk.onchain.connectors.cosmwasm import CosmWasmConnector
from pull_sdk.onchain.types import ChainConfig, ChainInvoker

CONNECTORS: Dict[ChainType, Type[ChainConnector]] = {
    ChainType.EVM: EvmConnector,
    ChainType.APTOS: AptosConnector,
    ChainType.SUI: SuiConnector,
    ChainType.RADIX: RadixConnector,
    ChainType.COSMWASM: CosmWasmConnector,
}


async def connect(
    config: ChainConfig,
    invoker: Optional[ChainInvoker] = None,
    check_connection: bool = True,
) -> ChainConnector:
    """
    Build the connector matching the chain type of a configuration.
    """
    chain_type = getattr(config, "chain_type", None)
    connector_type = CONNECTORS.get(chain_type)
    if connector_type is None:
        raise ConfigError(f"No connector for chain type {chain_type}")
    return await connector_type.connect(
        config, invoker=invoker, check_connection=check_connection
    )


__all__ = [
    "CONNECTORS",
    "connect",
    "ChainConnector",
    "EvmConnector",
    "Web3Invoker",
    "AptosConnector",
    "SuiConnector",
    "RadixConnector",
    "CosmWasmConnector",
]
