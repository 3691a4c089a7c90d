import time
from abc import ABC, abstractmethod
from typing import ClassVar, Optional, Type

from pull_sdk.common.exceptions import (
    BasePullException,
    ConfigError,
    SubmissionError,
)
from pull_sdk.common.logging import get_pull_sdk_logger
from pull_sdk.common.types.types import ChainType
from pull_sdk.common.utils import add_sync_methods, format_indexes
from pull_sdk.offchain.types import PullResponse
from pull_sdk.onchain.types import (
    ChainConfig,
    ChainInvoker,
    ContractCall,
    InvocationResult,
)

logger = get_pull_sdk_logger()


@add_sync_methods
class ChainConnector(ABC):
    """
    Submits proofs pulled from the oracle service to a contract of a chain.

    Connectors are built with ``connect``, which validates the configuration
    and makes sure the RPC endpoint answers. Each call to ``invoke`` sends
    exactly one transaction through the invoker: nothing is deduplicated
    and nothing is retried.

    A connector should not be used by concurrent flows, build one per flow.
    """

    chain_type: ClassVar[ChainType]
    config_type: ClassVar[Type[ChainConfig]]

    config: ChainConfig
    invoker: ChainInvoker

    def __init__(self, config: ChainConfig, invoker: ChainInvoker):
        self._check_config(config)
        if invoker is None:
            raise ConfigError(f"{self.__class__.__name__} requires an invoker")
        self.config = config
        self.invoker = invoker

    @classmethod
    def _check_config(cls, config: ChainConfig) -> None:
        if not isinstance(config, cls.config_type):
            raise ConfigError(
                f"{cls.__name__} expects a {cls.config_type.__name__}, "
                f"got {type(config).__name__}"
            )

    @classmethod
    async def connect(
        cls,
        config: ChainConfig,
        invoker: Optional[ChainInvoker] = None,
        check_connection: bool = True,
    ) -> "ChainConnector":
        """
        Build a connector for the given configuration.

        :param config: Configuration of the connector
        :param invoker: Signs & submits the contract calls. Defaults to the
                        built-in invoker of the chain, if there is one.
        :param check_connection: Probe the RPC endpoint before returning
        :raises ConfigError: if the configuration is not usable by this connector
        :raises ChainConnectionError: if the RPC endpoint is unreachable
        """
        cls._check_config(config)
        if check_connection:
            await cls.check_connection(config)
            logger.debug(f"Connected to {cls.chain_type} RPC {config.rpc_url}")
        if invoker is None:
            invoker = cls.default_invoker(config)
        return cls(config, invoker)

    @classmethod
    @abstractmethod
    async def check_connection(cls, config: ChainConfig) -> None:
        """
        Make sure the RPC endpoint of the configuration answers.

        :raises ChainConnectionError: if it does not
        """

    @classmethod
    def default_invoker(cls, config: ChainConfig) -> ChainInvoker:
        raise ConfigError(
            f"No built-in invoker for {cls.chain_type} chains, one must be provided"
        )

    @abstractmethod
    def build_call(self, response: PullResponse) -> ContractCall:
        """
        Encode the proof into the call expected by the destination contract.
        """

    async def invoke(self, response: PullResponse) -> InvocationResult:
        """
        Submit the proof to the destination contract.

        :param response: A proof pulled for this connector's chain type
        :return: The transaction hash & receipt
        :raises SubmissionError: if the proof is for another chain type, or if the
                                 transaction is rejected, reverted or exceeds the
                                 fee limit
        """
        if response.chain_type != self.chain_type:
            raise SubmissionError(
                f"Can't submit a {response.chain_type} proof with a "
                f"{self.chain_type} connector"
            )
        if self.config.secret_key.is_wiped:
            raise ConfigError("Secret key of the connector has been wiped")

        call = self.build_call(response)
        indexes = format_indexes(response.pair_indexes)
        logger.info(
            f"📨 Submitting {self.chain_type} proof for pair indexes [{indexes}] "
            f"to {call.contract_address} ({call.function})..."
        )

        start_t = time.time()
        try:
            result = await self.invoker(call, self.config.secret_key)
        except BasePullException as e:
            logger.error(f"⛔ Could not submit {self.chain_type} proof: {e.message}")
            raise
        except Exception as e:
            logger.error(f"⛔ Could not submit {self.chain_type} proof: {e}")
            raise SubmissionError(
                f"{self.chain_type} submission to {call.contract_address} failed: {e}"
            ) from e

        end_t = time.time()
        logger.info(
            f"✅ Submitted {self.chain_type} proof in tx {result.tx_hash} "
            f"(took {(end_t - start_t):.2f}s)"
        )
        return result
