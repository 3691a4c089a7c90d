from pull_sdk.common.types.types import ChainType
from pull_sdk.common.utils import add_sync_methods
from pull_sdk.offchain.types import PullResponseSui
from pull_sdk.onchain.connectors.base import ChainConnector
from pull_sdk.onchain.types import ContractCall, SuiConfig
from pull_sdk.onchain.utils import probe_json_rpc


@add_sync_methods
class SuiConnector(ChainConnector):
    """
    Submits proofs to a Sui package with a move call. The verifier needs the
    DKG, oracle holder & merkle root objects served along the proof.
    """

    chain_type = ChainType.SUI
    config_type = SuiConfig

    config: SuiConfig

    @classmethod
    async def check_connection(cls, config: SuiConfig) -> None:
        await probe_json_rpc(
            config.rpc_url, "sui_getChainIdentifier", timeout=config.timeout
        )

    @property
    def move_call_target(self) -> str:
        return (
            f"{self.config.contract_address}::"
            f"{self.config.module_name}::{self.config.function_name}"
        )

    def build_call(self, response: PullResponseSui) -> ContractCall:
        return ContractCall(
            chain_type=self.chain_type,
            rpc_url=self.config.rpc_url,
            contract_address=self.config.contract_address,
            function=self.move_call_target,
            arguments=[
                response.dkg_object,
                response.oracle_holder_object,
                response.merkle_root_object,
                list(response.proof_bytes),
            ],
            fee_limit=self.config.fee_limit,
            options={"type_arguments": []},
        )
