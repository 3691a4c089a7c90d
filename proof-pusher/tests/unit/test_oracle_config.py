import pytest
from pydantic import ValidationError

from proof_pusher.configs.oracle_config import OracleConfig, PusherConfig

CONFIG = """
oracles:
  - pair: btc/usdt
    price_index: 0
    resolution_ms: 10000
  - pair: ETH / USDT
    price_index: 1
    resolution_ms: 60000
"""


def test_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG)

    config = PusherConfig.from_yaml(str(path))

    assert config.oracles == [
        OracleConfig(pair="BTC/USDT", price_index=0, resolution_ms=10_000),
        OracleConfig(pair="ETH/USDT", price_index=1, resolution_ms=60_000),
    ]


@pytest.mark.parametrize(
    "oracle",
    [
        {"pair": "BTCUSDT", "price_index": 0, "resolution_ms": 1000},
        {"pair": "BTC/", "price_index": 0, "resolution_ms": 1000},
        {"pair": "BTC/USDT", "price_index": -1, "resolution_ms": 1000},
        {"pair": "BTC/USDT", "price_index": 2**32, "resolution_ms": 1000},
        {"pair": "BTC/USDT", "price_index": 0, "resolution_ms": 0},
    ],
)
def test_invalid_oracle(oracle):
    with pytest.raises(ValidationError):
        OracleConfig(**oracle)


def test_duplicated_indexes():
    oracle = {"pair": "BTC/USDT", "price_index": 0, "resolution_ms": 1000}
    with pytest.raises(ValidationError) as excinfo:
        PusherConfig(oracles=[oracle, {**oracle, "pair": "ETH/USDT"}])
    assert "Duplicated price indexes: [0]" in str(excinfo.value)


def test_no_oracles():
    with pytest.raises(ValidationError):
        PusherConfig(oracles=[])


def test_from_empty_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    with pytest.raises(ValidationError) as excinfo:
        PusherConfig.from_yaml(str(path))
    assert "oracles" in str(excinfo.value)
