from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from pull_sdk.common.types.secret import SecretKey
from pull_sdk.common.types.types import ChainType


@dataclass(frozen=True)
class ContractCall:
    """
    A contract call ready to be signed & submitted by a chain invoker.

    :param chain_type: Chain family the call targets
    :param rpc_url: RPC endpoint to submit the transaction to
    :param contract_address: Address of the destination contract/package/component
    :param function: Fully qualified function (or method) to call
    :param arguments: Encoded call arguments, in order
    :param fee_limit: Fee/gas ceiling, in the chain native unit
    :param options: Chain specific submission options (e.g the fee denomination)
    """

    chain_type: ChainType
    rpc_url: str
    contract_address: str
    function: str
    arguments: List[Any]
    fee_limit: int
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class InvocationResult:
    chain_type: ChainType
    tx_hash: str
    receipt: Optional[Dict[str, Any]] = None

    def __repr__(self) -> str:
        return f"InvocationResult(chain_type={self.chain_type!r}, tx_hash={self.tx_hash})"


@runtime_checkable
class ChainInvoker(Protocol):
    """
    Signs, submits & confirms a contract call on a chain.

    This is the boundary with the chain SDKs: implementations own the
    transaction building, signing, nonce management & confirmation polling.
    They must raise ``SubmissionError`` when the transaction is rejected,
    reverted or exceeds ``call.fee_limit``, and must not retry.
    """

    async def __call__(
        self, call: ContractCall, secret_key: SecretKey
    ) -> InvocationResult: ...
