from typing import Optional

import aiohttp
from eth_account import Account
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3
from web3.exceptions import ContractLogicError, Web3Exception

from pull_sdk.common.exceptions import ChainConnectionError, SubmissionError
from pull_sdk.common.logging import get_pull_sdk_logger
from pull_sdk.common.types.secret import SecretKey
from pull_sdk.common.types.types import ChainType
from pull_sdk.common.utils import add_sync_methods
from pull_sdk.offchain.types import PullResponseEvm
from pull_sdk.onchain.connectors.base import ChainConnector
from pull_sdk.onchain.types import (
    ChainInvoker,
    ContractCall,
    EvmConfig,
    InvocationResult,
)

logger = get_pull_sdk_logger()


def create_web3(config: EvmConfig) -> AsyncWeb3:
    """
    Create the async web3 client of an EVM configuration. No I/O is done here.
    """
    return AsyncWeb3(
        AsyncHTTPProvider(
            config.rpc_url,
            request_kwargs={"timeout": aiohttp.ClientTimeout(total=config.timeout)},
        )
    )


class Web3Invoker:
    """
    Signs & sends EVM contract calls with web3.

    The gas needed by the call is estimated first and the call is refused if it
    exceeds the fee limit of the call. The transaction is then signed locally,
    sent, and the invoker waits for its receipt. A reverted transaction is
    reported, never resent.

    :param w3: The async web3 client to use
    :param chain_id: Chain id used to sign, read from the node when not set
    :param receipt_timeout: Time to wait for the receipt, in seconds
    """

    def __init__(
        self,
        w3: AsyncWeb3,
        chain_id: Optional[int] = None,
        receipt_timeout: float = 120,
    ):
        self.w3 = w3
        self.chain_id = chain_id
        self.receipt_timeout = receipt_timeout

    async def __call__(
        self, call: ContractCall, secret_key: SecretKey
    ) -> InvocationResult:
        account = Account.from_key(secret_key.reveal())
        contract = self.w3.eth.contract(
            address=Web3.to_checksum_address(call.contract_address),
            abi=call.options["abi"],
        )

        try:
            function = contract.functions[call.function](*call.arguments)
            gas = await function.estimate_gas({"from": account.address})
        except ContractLogicError as e:
            raise SubmissionError(f"Execution reverted during gas estimation: {e}") from e
        except (Web3Exception, ValueError) as e:
            raise SubmissionError(f"Could not estimate gas of {call.function}: {e}") from e

        if gas > call.fee_limit:
            raise SubmissionError(
                f"Estimated gas {gas} exceeds the fee limit {call.fee_limit}"
            )

        try:
            chain_id = self.chain_id or await self.w3.eth.chain_id
            nonce = await self.w3.eth.get_transaction_count(account.address, "pending")
            gas_price = await self.w3.eth.gas_price
            transaction = await function.build_transaction(
                {
                    "from": account.address,
                    "nonce": nonce,
                    "gas": gas,
                    "gasPrice": gas_price,
                    "chainId": chain_id,
                }
            )
            signed = account.sign_transaction(transaction)
            tx_hash = await self.w3.eth.send_raw_transaction(signed.raw_transaction)
        except (Web3Exception, ValueError) as e:
            raise SubmissionError(f"Transaction rejected: {e}") from e

        tx_hash_hex = Web3.to_hex(tx_hash)
        logger.info(f"⏳ Waiting for TX {tx_hash_hex} (nonce={nonce}) receipt...")
        try:
            receipt = await self.w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self.receipt_timeout
            )
        except Web3Exception as e:
            raise SubmissionError(f"No receipt for transaction {tx_hash_hex}: {e}") from e

        if receipt["status"] != 1:
            raise SubmissionError(f"Transaction {tx_hash_hex} reverted")

        return InvocationResult(
            chain_type=ChainType.EVM,
            tx_hash=tx_hash_hex,
            receipt=dict(receipt),
        )


@add_sync_methods
class EvmConnector(ChainConnector):
    """
    Submits proofs to an EVM contract, by calling ``config.function_name``
    with the proof bytes.
    """

    chain_type = ChainType.EVM
    config_type = EvmConfig

    config: EvmConfig

    @classmethod
    async def check_connection(cls, config: EvmConfig) -> None:
        w3 = create_web3(config)
        try:
            connected = await w3.is_connected()
        finally:
            await w3.provider.disconnect()
        if not connected:
            raise ChainConnectionError(f"EVM RPC endpoint {config.rpc_url} is unreachable")

    @classmethod
    def default_invoker(cls, config: EvmConfig) -> ChainInvoker:
        return Web3Invoker(
            create_web3(config),
            chain_id=config.chain_id,
            receipt_timeout=config.receipt_timeout,
        )

    def build_call(self, response: PullResponseEvm) -> ContractCall:
        return ContractCall(
            chain_type=self.chain_type,
            rpc_url=self.config.rpc_url,
            contract_address=self.config.contract_address,
            function=self.config.function_name,
            arguments=[response.proof_bytes],
            fee_limit=self.config.fee_limit,
            options={"abi": self.config.abi},
        )
