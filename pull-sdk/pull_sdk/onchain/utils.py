import asyncio
from typing import Any, Dict, List, Optional

import aiohttp

from pull_sdk.common.exceptions import ChainConnectionError
from pull_sdk.common.logging import get_pull_sdk_logger

logger = get_pull_sdk_logger()


async def probe_http(
    url: str,
    method: str = "GET",
    json: Optional[Dict[str, Any]] = None,
    timeout: float = 5,
) -> Any:
    """
    Sends a single request to an RPC endpoint and returns the JSON body.
    Used to make sure an endpoint is reachable before building a connector.

    :raises ChainConnectionError: if the endpoint can't be reached or answers
                                  with a non-success status
    """
    try:
        async with aiohttp.ClientSession() as session:
            async with session.request(
                method,
                url,
                json=json,
                timeout=aiohttp.ClientTimeout(total=timeout),
            ) as response_raw:
                status_code: int = response_raw.status
                if not 200 <= status_code < 300:
                    raise ChainConnectionError(
                        f"RPC endpoint {url} answered with status {status_code}"
                    )
                return await response_raw.json(content_type=None)
    except asyncio.TimeoutError as e:
        raise ChainConnectionError(f"RPC endpoint {url} timed out") from e
    except (aiohttp.ClientError, ValueError) as e:
        raise ChainConnectionError(f"RPC endpoint {url} is unreachable: {e}") from e


async def probe_json_rpc(
    url: str,
    method: str,
    params: Optional[List[Any]] = None,
    timeout: float = 5,
) -> Any:
    """
    Calls a JSON-RPC method and returns its result.
    e.g probe_json_rpc(url, "sui_getChainIdentifier") -> "35834a8a"

    :raises ChainConnectionError: if the call fails or returns an error
    """
    payload = {"jsonrpc": "2.0", "id": 0, "method": method, "params": params or []}
    response = await probe_http(url, method="POST", json=payload, timeout=timeout)
    if not isinstance(response, dict) or response.get("error"):
        error = response.get("error") if isinstance(response, dict) else response
        raise ChainConnectionError(f"RPC call {method} on {url} failed: {error}")
    if "result" not in response:
        raise ChainConnectionError(f"RPC call {method} on {url} returned no result")
    logger.debug(f"RPC {url} answered {method}: {response['result']}")
    return response["result"]
