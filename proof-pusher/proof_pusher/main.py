import asyncio
import logging
from typing import List

import click

from pull_sdk import PullServiceClient
from pull_sdk.common.logging import set_pull_sdk_log_level
from pull_sdk.common.types.secret import SecretKey
from pull_sdk.onchain.connectors import EvmConnector
from pull_sdk.onchain.types import EvmConfig

from pull_utils.cli import load_private_key_from_cli_arg
from pull_utils.logger import setup_logging

from proof_pusher.configs.oracle_config import OracleConfig, PusherConfig
from proof_pusher.core.pusher import ProofPusher
from proof_pusher.core.scheduler import IndexScheduler
from proof_pusher.orchestrator import Orchestrator

logger = logging.getLogger(__name__)


async def main(
    oracle_configs: List[OracleConfig],
    oracle_url: str,
    rpc_url: str,
    private_key: SecretKey,
    contract_address: str,
    fee_limit: int,
    refresh_interval: int,
    timeout: float,
) -> None:
    """
    Main function of the proof pusher.
    Create the parts that are then fed to the orchestrator for the main loop.
    """
    logger.info("🔨 Creating pull client...")
    client = PullServiceClient(oracle_url, timeout=timeout)

    logger.info("🔗 Connecting to the EVM chain...")
    connector = await EvmConnector.connect(
        EvmConfig(
            private_key,
            rpc_url,
            contract_address,
            fee_limit,
            timeout=timeout,
        )
    )

    orchestrator = Orchestrator(
        scheduler=IndexScheduler(oracle_configs),
        pusher=ProofPusher(client=client, connector=connector),
        refresh_interval_in_s=refresh_interval,
    )

    logger.info("🚀 Orchestration starting 🚀")
    await orchestrator.run_forever()


@click.command()
@click.option(
    "-c",
    "--config-file",
    type=click.Path(exists=True),
    required=True,
    help="Path to YAML configuration file.",
)
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    help="Logging level.",
)
@click.option(
    "--oracle-url",
    type=click.STRING,
    required=True,
    help="Base URL of the pull oracle service.",
)
@click.option(
    "--rpc-url",
    type=click.STRING,
    required=True,
    help="RPC url used to interact with the chain.",
)
@click.option(
    "-p",
    "--private-key",
    "raw_private_key",
    type=click.STRING,
    required=True,
    help=(
        "Private key of the signer. Format: "
        "aws:secret_name, "
        "plain:private_key, "
        "or env:ENV_VAR_NAME"
    ),
)
@click.option(
    "--contract-address",
    type=click.STRING,
    required=True,
    help="Address of the contract verifying the proofs.",
)
@click.option(
    "--fee-limit",
    type=click.IntRange(min=0),
    required=False,
    default=1_000_000,
    help="Max gas a proof submission may use. Default to 1000000.",
)
@click.option(
    "--refresh-interval",
    type=click.IntRange(min=1),
    required=False,
    default=5,
    help="Interval in seconds between two scheduling rounds. Default to 5 seconds.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    required=False,
    default=30,
    help="Timeout in seconds of the oracle & RPC requests. Default to 30 seconds.",
)
def cli_entrypoint(
    config_file: str,
    log_level: str,
    oracle_url: str,
    rpc_url: str,
    raw_private_key: str,
    contract_address: str,
    fee_limit: int,
    refresh_interval: int,
    timeout: float,
) -> None:
    for option, url in (("oracle-url", oracle_url), ("rpc-url", rpc_url)):
        if not url.startswith("http"):
            raise click.UsageError(
                f'⛔ "{option}" format is incorrect. It must start with http(...)'
            )

    # Update the logger level of the pull_sdk package
    set_pull_sdk_log_level(log_level)

    setup_logging(logger, log_level)
    private_key = SecretKey(load_private_key_from_cli_arg(raw_private_key))
    pusher_config = PusherConfig.from_yaml(config_file)

    asyncio.run(
        main(
            oracle_configs=pusher_config.oracles,
            oracle_url=oracle_url,
            rpc_url=rpc_url,
            private_key=private_key,
            contract_address=contract_address,
            fee_limit=fee_limit,
            refresh_interval=refresh_interval,
            timeout=timeout,
        )
    )


if __name__ == "__main__":
    cli_entrypoint()
