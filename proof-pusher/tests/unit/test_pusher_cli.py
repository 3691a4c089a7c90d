from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from proof_pusher.main import cli_entrypoint

CONFIG = """
oracles:
  - pair: BTC/USDT
    price_index: 0
    resolution_ms: 10000
"""


def _args(config_path, **overrides):
    options = {
        "--oracle-url": "https://oracle.test",
        "--rpc-url": "http://evm.test:8545",
        "--private-key": "plain:0x" + "42" * 32,
        "--contract-address": "0x5FbDB2315678afecb367f032d93F642f64180aa3",
        **overrides,
    }
    args = ["--config-file", str(config_path)]
    for option, value in options.items():
        args += [option, value]
    return args


def test_cli_rejects_non_http_urls(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(CONFIG)

    with patch("proof_pusher.main.main") as main:
        result = CliRunner().invoke(cli_entrypoint, _args(config_path, **{"--rpc-url": "evm.test"}))

    assert result.exit_code != 0
    assert "rpc-url" in result.output
    main.assert_not_called()


def test_cli_starts_the_pusher(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(CONFIG)

    with patch("proof_pusher.main.asyncio.run") as run, patch(
        "proof_pusher.main.main", new_callable=MagicMock
    ) as main:
        result = CliRunner().invoke(cli_entrypoint, _args(config_path, **{"--fee-limit": "300000"}))

    assert result.exit_code == 0, result.output
    run.assert_called_once_with(main.return_value)
    kwargs = main.call_args.kwargs
    assert kwargs["oracle_url"] == "https://oracle.test"
    assert kwargs["fee_limit"] == 300_000
    assert kwargs["refresh_interval"] == 5
    assert kwargs["private_key"].reveal() == "0x" + "42" * 32
    assert [oracle.price_index for oracle in kwargs["oracle_configs"]] == [0]
