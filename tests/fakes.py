"""In-memory stand-ins for Parameter Store and Secrets Manager."""

from iam_onboarding.notifier.errors import ContactLookupError, SecretAccessError


class FakeDirectory:
    def __init__(self, entries):
        self.entries = dict(entries)
        self.reads = []

    def lookup(self, key):
        self.reads.append(key)
        if key not in self.entries:
            raise ContactLookupError(key)
        return self.entries[key]


class FakeSecretStore:
    def __init__(self, secrets):
        self.secrets = dict(secrets)
        self.reads = []

    def get_secret(self, secret_id):
        self.reads.append(secret_id)
        if secret_id not in self.secrets:
            raise SecretAccessError(secret_id, "ResourceNotFoundException")
        return self.secrets[secret_id]
