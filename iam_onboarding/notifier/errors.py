"""
errors.py

Failures raised by the credential notifier. None of them are caught inside
the Lambda; they surface as invocation errors in CloudWatch.
"""


class NotifierError(Exception):
    """Base class for credential notifier failures."""


class ContactLookupError(NotifierError, LookupError):
    """No contact address is stored under the derived parameter name."""

    def __init__(self, key: str):
        super().__init__(f"No contact address found at {key}")
        self.key = key


class SecretAccessError(NotifierError):
    """The shared temporary secret is missing or cannot be read."""

    def __init__(self, secret_id: str, reason: str = ""):
        message = f"Unable to read secret {secret_id}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.secret_id = secret_id


class MalformedSecretError(NotifierError, ValueError):
    """The secret payload is not a JSON object with a password field."""
