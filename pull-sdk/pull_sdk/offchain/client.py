import asyncio
import json
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

import aiohttp
from pydantic import ValidationError
from yarl import URL

from pull_sdk.common.exceptions import (
    ConstructionError,
    DecodeError,
    RemoteError,
    TransportError,
)
from pull_sdk.common.logging import get_pull_sdk_logger
from pull_sdk.common.types.types import ChainType
from pull_sdk.common.utils import add_sync_methods, format_indexes
from pull_sdk.offchain.constants import (
    DEFAULT_TIMEOUT_IN_S,
    GET_PROOF_ENDPOINT,
    MAX_ERROR_BODY_LEN,
)
from pull_sdk.offchain.types import PullRequest, PullResponse

logger = get_pull_sdk_logger()


@add_sync_methods
class PullServiceClient:
    """
    Client for the REST pull oracle service.

    Every call to ``get_proof`` is a single POST request: there is no cache
    and no retry. Proofs are tied to a price snapshot, so callers needing a
    fresh proof simply pull again.

    :param base_url: Base URL of the oracle service, e.g ``http://127.0.0.1:9000``
    :param timeout: Total timeout of a request, in seconds. ``None`` disables it.
    :param session: Optional aiohttp session to reuse. It is never closed by the
                    client. When not provided, a session is opened for each call.
    """

    base_url: str
    timeout: Optional[aiohttp.ClientTimeout]

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = DEFAULT_TIMEOUT_IN_S,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.base_url = self._validate_base_url(base_url)
        if timeout is not None and timeout <= 0:
            raise ConstructionError(f"Timeout must be positive, got {timeout}")
        self.timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None
        self._session = session

    @staticmethod
    def _validate_base_url(base_url: str) -> str:
        if not base_url:
            raise ConstructionError("Base URL of the oracle service can't be empty")
        try:
            url = URL(base_url)
        except (TypeError, ValueError) as e:
            raise ConstructionError(f"Invalid base URL {base_url!r}: {e}") from e
        if url.scheme not in ("http", "https") or not url.host:
            raise ConstructionError(
                f"Invalid base URL {base_url!r}: expected an http(s) URL with a host"
            )
        return base_url.rstrip("/")

    @property
    def proof_url(self) -> str:
        return f"{self.base_url}{GET_PROOF_ENDPOINT}"

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[aiohttp.ClientSession]:
        if self._session is not None:
            yield self._session
            return
        async with aiohttp.ClientSession() as session:
            yield session

    async def get_proof(self, request: PullRequest) -> PullResponse:
        """
        Pull a proof for the pairs of the request.

        The response is decoded with the shape matching ``request.chain_type``.

        :param request: The pull request
        :return: The proof, as the response model of the requested chain type
        :raises TransportError: if the oracle could not be reached
        :raises RemoteError: if the oracle answered with a non-success status
        :raises DecodeError: if the body does not match the expected shape
        """
        response_type = PullResponse.for_chain(request.chain_type)
        indexes = format_indexes(request.pair_indexes)
        logger.debug(
            f"Requesting {request.chain_type} proof for pair indexes [{indexes}]"
        )

        start = time.time()
        body = await self._post(self.proof_url, request.serialize())
        payload = self._decode_json(body)

        try:
            response = response_type.model_validate(payload)
        except ValidationError as e:
            logger.debug(f"Unexpected {request.chain_type} proof body: {body!r}")
            raise DecodeError(
                f"Could not decode {request.chain_type} proof: {e.error_count()} "
                f"validation error(s): {_summarize_errors(e)}"
            ) from e

        end = time.time()
        logger.info(
            f"Pulled {request.chain_type} proof for pair indexes [{indexes}] "
            f"(took {(end - start):.2f}s)"
        )
        return response

    async def get_proof_for(
        self, pair_indexes: List[int], chain_type: ChainType | str
    ) -> PullResponse:
        """
        Pull a proof for the given pair indexes, decoded for the given chain type.
        The request is built from the chain type so it always agrees with the
        decoded response shape.
        """
        request = PullRequest(pair_indexes=pair_indexes, chain_type=chain_type)
        return await self.get_proof(request)

    async def _post(self, url: str, data: Dict[str, Any]) -> str:
        """
        POST some JSON data & return the body of a successful response.
        """
        try:
            async with self._get_session() as session:
                async with session.post(
                    url,
                    json=data,
                    timeout=self.timeout,
                ) as response_raw:
                    status_code: int = response_raw.status
                    raw_body = await response_raw.read()
        except asyncio.TimeoutError as e:
            logger.error(f"Timeout while calling {url}")
            raise TransportError(f"Request to {url} timed out") from e
        except aiohttp.ClientError as e:
            logger.error(f"Could not reach {url}: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not 200 <= status_code < 300:
            body = raw_body.decode("utf-8", errors="replace")
            logger.error(f"Status Code: {status_code}")
            logger.debug(f"Response Text: {body}")
            raise RemoteError(
                status_code,
                f"Oracle service answered with status {status_code} for POST {url}",
                body=body[:MAX_ERROR_BODY_LEN],
            )
        try:
            body = raw_body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"Oracle response is not valid UTF-8: {e}") from e
        logger.debug(f"Success: {body}")
        return body

    @staticmethod
    def _decode_json(body: str) -> Any:
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Oracle response is not valid JSON: {e}") from e


def _summarize_errors(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc']) or '<root>'}: {err['msg']}"
        for err in error.errors()
    )
