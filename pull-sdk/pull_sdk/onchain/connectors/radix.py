from pull_sdk.common.types.types import ChainType
from pull_sdk.common.utils import add_sync_methods
from pull_sdk.offchain.types import PullResponseRadix
from pull_sdk.onchain.connectors.base import ChainConnector
from pull_sdk.onchain.types import ContractCall, RadixConfig
from pull_sdk.onchain.utils import probe_http


@add_sync_methods
class RadixConnector(ChainConnector):
    """
    Submits proofs to a Radix component by calling ``config.method_name`` with
    the proof string, as served by the oracle.
    """

    chain_type = ChainType.RADIX
    config_type = RadixConfig

    config: RadixConfig

    @classmethod
    async def check_connection(cls, config: RadixConfig) -> None:
        await probe_http(
            f"{config.rpc_url}/status/gateway-status",
            method="POST",
            json={},
            timeout=config.timeout,
        )

    def build_call(self, response: PullResponseRadix) -> ContractCall:
        return ContractCall(
            chain_type=self.chain_type,
            rpc_url=self.config.rpc_url,
            contract_address=self.config.contract_address,
            function=self.config.method_name,
            arguments=[response.proof_bytes],
            fee_limit=self.config.fee_limit,
            options={"network_id": self.config.network_id},
        )
