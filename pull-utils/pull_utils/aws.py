import json

import boto3

PRIVATE_KEY_COLUMN = "PULLER_PRIVATE_KEY"
DEFAULT_AWS_REGION = "eu-west-3"


def fetch_aws_private_key(secret_name: str, region: str = DEFAULT_AWS_REGION) -> str:
    """
    Load the key of the puller from AWS Secrets Manager.

    The secret must be a JSON object holding the key under ``PULLER_PRIVATE_KEY``.

    :raises ValueError: if the secret is not a JSON object or has no key
    """
    session = boto3.session.Session()
    client = session.client(service_name="secretsmanager", region_name=region)
    response = client.get_secret_value(SecretId=secret_name)

    try:
        secret = json.loads(response.get("SecretString") or "")
    except json.JSONDecodeError as e:
        raise ValueError(f"AWS secret {secret_name} is not a JSON object") from e
    if not isinstance(secret, dict) or not secret.get(PRIVATE_KEY_COLUMN):
        raise ValueError(f"AWS secret {secret_name} has no {PRIVATE_KEY_COLUMN} entry")
    return str(secret[PRIVATE_KEY_COLUMN])
