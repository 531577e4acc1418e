"""
Credential Notifier

Runs once per IAM CreateUser event delivered by EventBridge. Looks up the new
user's contact address in Parameter Store and the shared temporary password
in Secrets Manager, then prints both so operators can find them in the
function's CloudWatch log stream.

Configuration comes from the Lambda environment (or a local .env):
- EMAIL_PARAMETER_PREFIX: parameter path prefix for contact addresses
- TEMP_PASSWORD_SECRET_ID: name of the shared temporary password secret
"""

import json
from typing import Optional

from ..config import EMAIL_PARAMETER_PREFIX, TEMP_PASSWORD_SECRET_ID
from .errors import MalformedSecretError
from .stores import Directory, ParameterDirectory, SecretStore, SecretsManagerStore


def get_username(event: dict) -> str:
    """
    Pull the new user's name out of the event.

    EventBridge wraps the CloudTrail record in `detail`; a bare record with
    `requestParameters` at the top level is accepted too.
    """
    record = event.get('detail', event)
    username = (record.get('requestParameters') or {}).get('userName')
    if not username:
        raise ValueError("requestParameters.userName is required in the event")
    return username


def parse_password(secret_string: str) -> str:
    try:
        payload = json.loads(secret_string)
    except (TypeError, ValueError) as e:
        raise MalformedSecretError("Temporary password secret is not valid JSON") from e

    if not isinstance(payload, dict) or 'password' not in payload:
        raise MalformedSecretError("Temporary password secret has no 'password' field")
    if not isinstance(payload['password'], str):
        raise MalformedSecretError("Temporary password secret 'password' is not a string")
    return payload['password']


def notify_user_created(
    username: str,
    directory: Directory,
    secrets: SecretStore,
    email_prefix: Optional[str] = None,
    secret_id: Optional[str] = None,
) -> None:
    """
    Print the new user's contact address and temporary password.

    Args:
        username: Name of the IAM user that was just created
        directory: Store holding contact addresses keyed by parameter name
        secrets: Store holding the shared temporary password
        email_prefix: Overrides EMAIL_PARAMETER_PREFIX
        secret_id: Overrides TEMP_PASSWORD_SECRET_ID

    Both lookups finish before anything is printed.
    """
    prefix = EMAIL_PARAMETER_PREFIX if email_prefix is None else email_prefix
    secret_id = TEMP_PASSWORD_SECRET_ID if secret_id is None else secret_id

    # Retrieve email from Parameter Store
    email = directory.lookup(f"{prefix}{username}")

    # Retrieve password from Secrets Manager
    password = parse_password(secrets.get_secret(secret_id))

    print(f"New IAM user created: {username}")
    print(f"Email: {email}")
    print(f"Temporary Password: {password}")


def lambda_handler(event, context, directory: Optional[Directory] = None, secrets: Optional[SecretStore] = None):
    """
    AWS Lambda handler function.

    The event is an EventBridge "AWS API Call via CloudTrail" record for
    iam:CreateUser. Only detail.requestParameters.userName is read.
    """
    username = get_username(event)

    notify_user_created(
        username,
        directory or ParameterDirectory(),
        secrets or SecretsManagerStore(),
    )

    return {
        'statusCode': 200,
        'body': f'Logged credentials for {username}'
    }
