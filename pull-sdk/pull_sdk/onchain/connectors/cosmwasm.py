from pull_sdk.common.types.types import ChainType
from pull_sdk.common.utils import add_sync_methods
from pull_sdk.offchain.types import PullResponseCosmWasm
from pull_sdk.onchain.connectors.base import ChainConnector
from pull_sdk.onchain.types import ContractCall, CosmWasmConfig
from pull_sdk.onchain.utils import probe_http

EXECUTE_MSG = "verify_oracle_proof"


@add_sync_methods
class CosmWasmConnector(ChainConnector):
    """
    Executes the ``verify_oracle_proof`` message of a CosmWasm contract.
    ``fee_limit`` is used as the gas limit of the transaction.
    """

    chain_type = ChainType.COSMWASM
    config_type = CosmWasmConfig

    config: CosmWasmConfig

    @classmethod
    async def check_connection(cls, config: CosmWasmConfig) -> None:
        await probe_http(f"{config.rpc_url}/status", timeout=config.timeout)

    def build_call(self, response: PullResponseCosmWasm) -> ContractCall:
        execute_msg = {EXECUTE_MSG: {"bytes_proof": list(response.proof_bytes)}}
        fee = {
            "amount": [
                {"denom": self.config.denom, "amount": str(self.config.fee_amount)}
            ],
            "gas": str(self.config.fee_limit),
        }
        return ContractCall(
            chain_type=self.chain_type,
            rpc_url=self.config.rpc_url,
            contract_address=self.config.contract_address,
            function=EXECUTE_MSG,
            arguments=[execute_msg],
            fee_limit=self.config.fee_limit,
            options={"fee": fee},
        )
