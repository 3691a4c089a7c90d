import re
from typing import Any, ClassVar, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from typing_extensions import Annotated
from yarl import URL

from pull_sdk.common.exceptions import ConfigError
from pull_sdk.common.types.secret import SecretKey
from pull_sdk.common.types.types import ChainType
from pull_sdk.common.utils import is_hex

DEFAULT_RPC_TIMEOUT_IN_S = 30

DEFAULT_EVM_FUNCTION = "verifyOracleProof"
DEFAULT_EVM_ABI: List[Dict[str, Any]] = [
    {
        "inputs": [{"internalType": "bytes", "name": "_bytesProof", "type": "bytes"}],
        "name": DEFAULT_EVM_FUNCTION,
        "outputs": [],
        "stateMutability": "nonpayable",
        "type": "function",
    }
]

_RADIX_COMPONENT_RE = re.compile(r"^component_[a-z0-9_]+$")
_BECH32_RE = re.compile(r"^[a-z]{1,83}1[02-9ac-hj-np-z]{38,58}$")


class ChainConfig(BaseModel):
    """
    Connection configuration of a chain connector.

    :param secret_key: Key material used to sign the transactions. Never logged,
                       never serialized.
    :param rpc_url: RPC endpoint of the destination chain
    :param contract_address: Address of the destination contract
    :param fee_limit: Fee/gas ceiling of a submission, in the chain native unit
    :param timeout: Timeout of the RPC calls, in seconds

    :raises ConfigError: if any of the values is malformed
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    chain_type: ClassVar[ChainType]

    secret_key: SecretKey = Field(exclude=True, repr=False)
    rpc_url: str
    contract_address: str
    fee_limit: Annotated[int, Field(strict=True, ge=0)]
    timeout: Annotated[float, Field(gt=0)] = DEFAULT_RPC_TIMEOUT_IN_S

    def __init__(
        self,
        secret_key: Any = None,
        rpc_url: Any = None,
        contract_address: Any = None,
        fee_limit: Any = None,
        **data: Any,
    ) -> None:
        try:
            super().__init__(
                secret_key=secret_key,
                rpc_url=rpc_url,
                contract_address=contract_address,
                fee_limit=fee_limit,
                **data,
            )
        except ValidationError as e:
            raise ConfigError(
                f"Invalid {self.__class__.__name__}: "
                + "; ".join(
                    f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                )
            ) from e

    @field_validator("secret_key", mode="before")
    def validate_secret_key(cls, value: Any) -> SecretKey:
        if value is None:
            raise ValueError("secret key is required")
        return SecretKey.from_value(value)

    @field_validator("rpc_url")
    def validate_rpc_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("RPC endpoint can't be empty")
        url = URL(value)
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError(f"RPC endpoint must be an http(s) URL, got {value!r}")
        return value.rstrip("/")

    @field_validator("contract_address")
    def validate_contract_address(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("contract address can't be empty")
        return value


class EvmConfig(ChainConfig):
    """
    Configuration of an EVM connector. ``fee_limit`` is a gas limit.

    :param function_name: Name of the contract function receiving the proof
    :param abi: ABI of the contract, must contain ``function_name``
    :param chain_id: Chain id used to sign, read from the node when not set
    :param receipt_timeout: Time to wait for the transaction receipt, in seconds
    """

    chain_type: ClassVar[ChainType] = ChainType.EVM

    function_name: str = DEFAULT_EVM_FUNCTION
    abi: List[Dict[str, Any]] = Field(default_factory=lambda: list(DEFAULT_EVM_ABI))
    chain_id: Optional[Annotated[int, Field(gt=0)]] = None
    receipt_timeout: Annotated[float, Field(gt=0)] = 120

    @field_validator("contract_address")
    def validate_evm_address(cls, value: str) -> str:
        if not is_hex(value, min_len=40, max_len=40):
            raise ValueError(
                f"EVM address must be 0x followed by 40 hex characters, got {value!r}"
            )
        return value


class AptosConfig(ChainConfig):
    """
    Configuration of an Aptos connector. ``fee_limit`` is the max gas amount.
    """

    chain_type: ClassVar[ChainType] = ChainType.APTOS

    module_name: str = "pull_example"
    function_name: str = "verify_oracle_proof"

    @field_validator("contract_address")
    def validate_aptos_address(cls, value: str) -> str:
        if not is_hex(value, min_len=1, max_len=64):
            raise ValueError(
                f"Aptos address must be 0x followed by up to 64 hex characters, got {value!r}"
            )
        return value


class SuiConfig(ChainConfig):
    """
    Configuration of a Sui connector. ``contract_address`` is the package id
    and ``fee_limit`` the gas budget, in MIST.
    """

    chain_type: ClassVar[ChainType] = ChainType.SUI

    module_name: str = "pull_example"
    function_name: str = "verify_oracle_proof"

    @field_validator("contract_address")
    def validate_sui_address(cls, value: str) -> str:
        if not is_hex(value, min_len=1, max_len=64):
            raise ValueError(
                f"Sui package id must be 0x followed by up to 64 hex characters, got {value!r}"
            )
        return value


class RadixConfig(ChainConfig):
    """
    Configuration of a Radix connector. ``contract_address`` is the component
    address and ``fee_limit`` the amount of XRD locked for fees.
    """

    chain_type: ClassVar[ChainType] = ChainType.RADIX

    method_name: str = "verify_proof"
    network_id: Annotated[int, Field(ge=0, le=255)] = 1

    @field_validator("contract_address")
    def validate_component_address(cls, value: str) -> str:
        if not _RADIX_COMPONENT_RE.match(value):
            raise ValueError(f"Radix component address is malformed: {value!r}")
        return value


class CosmWasmConfig(ChainConfig):
    """
    Configuration of a CosmWasm connector. ``fee_limit`` is the gas limit,
    the fee itself being ``fee_amount`` of ``denom``.
    """

    chain_type: ClassVar[ChainType] = ChainType.COSMWASM

    denom: str = "uosmo"
    fee_amount: Annotated[int, Field(ge=0)] = 5000

    @field_validator("contract_address")
    def validate_bech32_address(cls, value: str) -> str:
        if not _BECH32_RE.match(value):
            raise ValueError(f"CosmWasm contract address is malformed: {value!r}")
        return value
