import json
from unittest.mock import MagicMock, patch

import pytest

from pull_utils.aws import PRIVATE_KEY_COLUMN
from pull_utils.cli import load_private_key_from_cli_arg

PRIVATE_KEY = "0x" + "42" * 32


def test_load_plain_private_key():
    assert load_private_key_from_cli_arg(f"plain:{PRIVATE_KEY}") == PRIVATE_KEY


def test_load_env_private_key(monkeypatch):
    monkeypatch.setenv("PULLER_KEY", f"{PRIVATE_KEY}\n")
    assert load_private_key_from_cli_arg("env:PULLER_KEY") == PRIVATE_KEY


def test_load_env_private_key_unset(monkeypatch):
    monkeypatch.delenv("PULLER_KEY", raising=False)
    with pytest.raises(ValueError) as excinfo:
        load_private_key_from_cli_arg("env:PULLER_KEY")
    assert "PULLER_KEY" in str(excinfo.value)


def test_load_aws_private_key():
    client = MagicMock()
    client.get_secret_value.return_value = {
        "SecretString": json.dumps({PRIVATE_KEY_COLUMN: PRIVATE_KEY})
    }
    with patch("pull_utils.aws.boto3.session.Session") as session:
        session.return_value.client.return_value = client

        assert load_private_key_from_cli_arg("aws:puller/testnet") == PRIVATE_KEY

    client.get_secret_value.assert_called_once_with(SecretId="puller/testnet")


@pytest.mark.parametrize(
    "secret_string",
    [json.dumps({"OTHER_KEY": PRIVATE_KEY}), json.dumps({PRIVATE_KEY_COLUMN: ""}), "not json", None],
)
def test_load_aws_private_key_malformed_secret(secret_string):
    client = MagicMock()
    client.get_secret_value.return_value = {"SecretString": secret_string}
    with patch("pull_utils.aws.boto3.session.Session") as session:
        session.return_value.client.return_value = client

        with pytest.raises(ValueError) as excinfo:
            load_private_key_from_cli_arg("aws:puller/testnet")

    assert "puller/testnet" in str(excinfo.value)


@pytest.mark.parametrize("raw", [PRIVATE_KEY, "keystore:/tmp/key:pwd", "plain:", "plain:   "])
def test_load_invalid_private_key(raw):
    with pytest.raises(ValueError):
        load_private_key_from_cli_arg(raw)
