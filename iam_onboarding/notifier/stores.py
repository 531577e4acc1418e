"""
stores.py

Read-only access to the two external stores the notifier depends on:
- ParameterDirectory: contact addresses in SSM Parameter Store
- SecretsManagerStore: the shared temporary password in Secrets Manager

Clients are created on first use so importing this module does not need
AWS credentials or a region.
"""

from typing import Optional, Protocol

import boto3
from botocore.exceptions import ClientError

from .errors import ContactLookupError, MalformedSecretError, SecretAccessError

_ssm_client = None
_secrets_client = None


def _ssm():
    global _ssm_client
    if _ssm_client is None:
        _ssm_client = boto3.client("ssm")
    return _ssm_client


def _secretsmanager():
    global _secrets_client
    if _secrets_client is None:
        _secrets_client = boto3.client("secretsmanager")
    return _secrets_client


class Directory(Protocol):
    def lookup(self, key: str) -> str: ...


class SecretStore(Protocol):
    def get_secret(self, secret_id: str) -> str: ...


class ParameterDirectory:
    """Looks up contact addresses stored as SSM parameters."""

    def __init__(self, client=None):
        self._client = client

    def lookup(self, key: str) -> str:
        client = self._client or _ssm()
        try:
            response = client.get_parameter(Name=key)
        except ClientError as e:
            # names with characters SSM rejects (IAM allows @ + = ,) can never have an entry
            if e.response.get("Error", {}).get("Code") in ("ParameterNotFound", "ValidationException"):
                raise ContactLookupError(key) from e
            raise
        return response["Parameter"]["Value"]


class SecretsManagerStore:
    """Returns the raw SecretString of a Secrets Manager secret."""

    def __init__(self, client=None):
        self._client = client

    def get_secret(self, secret_id: str) -> str:
        client = self._client or _secretsmanager()
        try:
            response = client.get_secret_value(SecretId=secret_id)
        except ClientError as e:
            error = e.response.get("Error", {})
            raise SecretAccessError(secret_id, error.get("Code", "")) from e

        secret_string: Optional[str] = response.get("SecretString")
        if secret_string is None:
            # binary secrets have no password field to read
            raise MalformedSecretError(f"Secret {secret_id} has no SecretString")
        return secret_string
