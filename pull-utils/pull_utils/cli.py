import os

from pull_utils.aws import fetch_aws_private_key


def load_private_key_from_cli_arg(private_key: str) -> str:
    """
    Load the private key either from AWS, an environment variable or the provided plain value.

    Args:
        private_key: The private key string, prefixed with 'aws:', 'plain:' or 'env:'.

    Returns:
        The loaded private key.

    Raises:
        ValueError: If the prefix is unknown, the environment variable is unset or the key is empty.
    """
    if private_key.startswith("aws:"):
        secret_name = private_key.split("aws:", 1)[1]
        loaded = fetch_aws_private_key(secret_name)
    elif private_key.startswith("plain:"):
        loaded = private_key.split("plain:", 1)[1]
    elif private_key.startswith("env:"):
        env_var_name = private_key.split("env:", 1)[1]
        if env_var_name not in os.environ:
            raise ValueError(f"Environment variable {env_var_name} is not set")
        loaded = os.environ[env_var_name]
    else:
        raise ValueError("Private key must be prefixed with either 'aws:', 'plain:' or 'env:'")

    if not loaded.strip():
        raise ValueError("Private key is empty")
    return loaded.strip()
