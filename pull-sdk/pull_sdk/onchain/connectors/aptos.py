from pull_sdk.common.types.types import ChainType
from pull_sdk.common.utils import add_sync_methods
from pull_sdk.offchain.types import PullResponseAptos
from pull_sdk.onchain.connectors.base import ChainConnector
from pull_sdk.onchain.types import AptosConfig, ContractCall
from pull_sdk.onchain.utils import probe_http


@add_sync_methods
class AptosConnector(ChainConnector):
    """
    Submits proofs to an Aptos module through an entry function taking the
    proof as a ``vector<u8>``.
    """

    chain_type = ChainType.APTOS
    config_type = AptosConfig

    config: AptosConfig

    @classmethod
    async def check_connection(cls, config: AptosConfig) -> None:
        # The root of the REST API returns the ledger info.
        await probe_http(config.rpc_url, timeout=config.timeout)

    @property
    def entry_function(self) -> str:
        return (
            f"{self.config.contract_address}::"
            f"{self.config.module_name}::{self.config.function_name}"
        )

    def build_call(self, response: PullResponseAptos) -> ContractCall:
        return ContractCall(
            chain_type=self.chain_type,
            rpc_url=self.config.rpc_url,
            contract_address=self.config.contract_address,
            function=self.entry_function,
            arguments=[response.proof_hex],
            fee_limit=self.config.fee_limit,
            options={"type_arguments": []},
        )
