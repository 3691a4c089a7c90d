import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from pull_sdk.common.exceptions import RemoteError
from proof_pusher.core.pusher import CONSECUTIVE_PUSH_ERRORS_LIMIT, ProofPusher


@pytest.mark.asyncio
async def test_push_success(caplog):
    caplog.set_level(logging.INFO)
    client, connector = MagicMock(), MagicMock()
    on_successful_push = MagicMock()
    result = MagicMock()
    result.invocation.tx_hash = "0x01"

    pusher = ProofPusher(client, connector, on_successful_push=on_successful_push)
    pusher.consecutive_push_error = 3
    with patch(
        "proof_pusher.core.pusher.pull_and_invoke", AsyncMock(return_value=result)
    ) as pull_and_invoke:
        response = await pusher.push([0, 21])

    assert response is result
    pull_and_invoke.assert_awaited_once_with(client, connector, [0, 21])
    on_successful_push.assert_called_once()
    assert pusher.consecutive_push_error == 0
    assert any("verified in TX 0x01" in record.message for record in caplog.records)


@pytest.mark.asyncio
async def test_push_failure(caplog):
    caplog.set_level(logging.INFO)
    on_successful_push = MagicMock()

    pusher = ProofPusher(MagicMock(), MagicMock(), on_successful_push=on_successful_push)
    with patch(
        "proof_pusher.core.pusher.pull_and_invoke",
        AsyncMock(side_effect=RemoteError(503, "Oracle unavailable")),
    ) as pull_and_invoke:
        response = await pusher.push([0, 21])

    assert response is None
    pull_and_invoke.assert_awaited_once()
    on_successful_push.assert_not_called()
    assert pusher.consecutive_push_error == 1
    assert any(
        "could not push proof for [0, 21]" in record.message for record in caplog.records
    )


@pytest.mark.asyncio
async def test_push_nothing():
    pusher = ProofPusher(MagicMock(), MagicMock())
    with patch("proof_pusher.core.pusher.pull_and_invoke", AsyncMock()) as pull_and_invoke:
        assert await pusher.push([]) is None

    pull_and_invoke.assert_not_awaited()


@pytest.mark.asyncio
async def test_push_too_many_failures():
    pusher = ProofPusher(MagicMock(), MagicMock())
    with patch(
        "proof_pusher.core.pusher.pull_and_invoke",
        AsyncMock(side_effect=RuntimeError("boom")),
    ):
        for _ in range(CONSECUTIVE_PUSH_ERRORS_LIMIT - 1):
            assert await pusher.push([0]) is None

        with pytest.raises(ValueError):
            await pusher.push([0])
