import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from proof_pusher.configs.oracle_config import OracleConfig
from proof_pusher.core.pusher import ProofPusher
from proof_pusher.core.scheduler import IndexScheduler
from proof_pusher.orchestrator import Orchestrator

NOW_MS = 1_700_000_000_000


@pytest.fixture
def scheduler():
    return IndexScheduler(
        [
            OracleConfig(pair="BTC/USDT", price_index=0, resolution_ms=10_000),
            OracleConfig(pair="ETH/USDT", price_index=1, resolution_ms=60_000),
        ]
    )


@pytest.fixture
def mock_pusher():
    return AsyncMock(spec=ProofPusher)


@pytest.mark.asyncio
async def test_run_once_marks_pushed_indexes(scheduler, mock_pusher):
    orchestrator = Orchestrator(scheduler, mock_pusher, clock=lambda: NOW_MS)

    result = await orchestrator.run_once()

    assert result is mock_pusher.push.return_value
    mock_pusher.push.assert_awaited_once_with([0, 1])
    assert scheduler.last_updated == {0: NOW_MS, 1: NOW_MS}

    # Nothing is due until a resolution elapsed
    assert await orchestrator.run_once() is None
    mock_pusher.push.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_once_failed_push_keeps_indexes_due(scheduler, mock_pusher):
    mock_pusher.push.return_value = None
    orchestrator = Orchestrator(scheduler, mock_pusher, clock=lambda: NOW_MS)

    await orchestrator.run_once()
    await orchestrator.run_once()

    assert mock_pusher.push.await_count == 2
    assert scheduler.last_updated == {0: 0, 1: 0}


@pytest.mark.asyncio
async def test_run_forever(scheduler, mock_pusher):
    orchestrator = Orchestrator(scheduler, mock_pusher, refresh_interval_in_s=0.01)
    orchestrator.run_once = AsyncMock()

    run_forever_task = asyncio.create_task(orchestrator.run_forever())
    await asyncio.sleep(0.1)
    run_forever_task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await run_forever_task

    assert orchestrator.run_once.await_count > 1


@pytest.mark.asyncio
async def test_run_forever_stops_on_pusher_error(scheduler, mock_pusher):
    mock_pusher.push.side_effect = ValueError("Failed 10 times in a row")
    orchestrator = Orchestrator(scheduler, mock_pusher, refresh_interval_in_s=0.01)

    with pytest.raises(ValueError):
        await orchestrator.run_forever()
