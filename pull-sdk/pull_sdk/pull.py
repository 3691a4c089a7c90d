from dataclasses import dataclass
from typing import List

from pull_sdk.common.logging import get_pull_sdk_logger
from pull_sdk.offchain.client import PullServiceClient
from pull_sdk.offchain.types import PullRequest, PullResponse
from pull_sdk.onchain.connectors.base import ChainConnector
from pull_sdk.onchain.types import InvocationResult

logger = get_pull_sdk_logger()


@dataclass(frozen=True)
class PullResult:
    response: PullResponse
    invocation: InvocationResult


async def pull_and_invoke(
    client: PullServiceClient,
    connector: ChainConnector,
    pair_indexes: List[int],
) -> PullResult:
    """
    Pull a proof for the given pair indexes and submit it with the connector.

    The request is built with the chain type of the connector, so the proof is
    always decoded in the shape the connector expects. If the pull fails, the
    error is raised as is and nothing is submitted.

    :param client: Client of the oracle service
    :param connector: Connector of the destination chain
    :param pair_indexes: Indexes of the pairs to pull
    :return: The pulled proof & the submission result
    """
    request = PullRequest(pair_indexes=pair_indexes, chain_type=connector.chain_type)
    response = await client.get_proof(request)
    logger.debug(f"Proof received for pair indexes {response.pair_indexes}")
    invocation = await connector.invoke(response)
    return PullResult(response=response, invocation=invocation)
