# pylint: disable=redefined-outer-name

from typing import Any, Dict
from unittest.mock import AsyncMock

import pytest

from pull_sdk.common.types.types import ChainType
from pull_sdk.onchain.types import (
    AptosConfig,
    EvmConfig,
    InvocationResult,
    RadixConfig,
    SuiConfig,
)

ORACLE_URL = "http://oracle.test:9000"
PROOF_URL = f"{ORACLE_URL}/get_proof"

# Well known development key, never holds funds.
DEV_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"

EVM_CONTRACT_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"
APTOS_CONTRACT_ADDRESS = "0x" + "a1" * 32
SUI_PACKAGE_ID = "0x" + "b2" * 32
RADIX_COMPONENT_ADDRESS = (
    "component_tdx_2_1cptxxxxxxxxxfaucetxxxxxxxxx000527798379xxxxxxxxxyulkzl"
)

PAYLOADS: Dict[ChainType, Dict[str, Any]] = {
    ChainType.EVM: {"pair_indexes": [0, 21], "proof_bytes": "0xabc123"},
    ChainType.APTOS: {"pair_indexes": [0, 21], "proof_bytes": [171, 193, 35]},
    ChainType.SUI: {
        "pair_indexes": [0, 21],
        "dkg_object": "0x" + "01" * 32,
        "oracle_holder_object": "0x" + "02" * 32,
        "merkle_root_object": "0x" + "03" * 32,
        "proof_bytes": "0xabc123",
    },
    ChainType.RADIX: {"pair_indexes": [0, 21], "proof_bytes": "0xabc123"},
    ChainType.COSMWASM: {"pair_indexes": [0, 21], "proof_bytes": [171, 193, 35]},
}


@pytest.fixture
def oracle_url() -> str:
    return ORACLE_URL


@pytest.fixture
def proof_url() -> str:
    return PROOF_URL


@pytest.fixture
def payloads() -> Dict[ChainType, Dict[str, Any]]:
    return PAYLOADS


@pytest.fixture
def evm_config() -> EvmConfig:
    return EvmConfig(
        DEV_PRIVATE_KEY,
        "http://evm.test:8545",
        EVM_CONTRACT_ADDRESS,
        500_000,
        chain_id=31337,
    )


@pytest.fixture
def aptos_config() -> AptosConfig:
    return AptosConfig(
        "0x" + "11" * 32,
        "http://aptos.test/v1",
        APTOS_CONTRACT_ADDRESS,
        50_000,
    )


@pytest.fixture
def sui_config() -> SuiConfig:
    return SuiConfig(
        "suiprivkey1qqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqqq",
        "http://sui.test:9000",
        SUI_PACKAGE_ID,
        100_000_000,
    )


@pytest.fixture
def radix_config() -> RadixConfig:
    return RadixConfig(
        "radix-secret",
        "http://radix.test",
        RADIX_COMPONENT_ADDRESS,
        10,
        network_id=2,
    )


def make_invoker(chain_type: ChainType, tx_hash: str = "0x01") -> AsyncMock:
    return AsyncMock(
        return_value=InvocationResult(chain_type=chain_type, tx_hash=tx_hash)
    )


@pytest.fixture
def invoker_factory():
    return make_invoker
