"""Tests for the Lambda entry point bundled from scripts/iam_user_logger."""

import importlib.util
from pathlib import Path

import pytest

from iam_onboarding.notifier import stores

HANDLER_PATH = Path(__file__).resolve().parent.parent / "scripts" / "iam_user_logger" / "handler.py"


@pytest.fixture
def handler_module():
    spec = importlib.util.spec_from_file_location("iam_user_logger_handler", HANDLER_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_handler_uses_aws_stores(handler_module, create_user_event, directory, secrets, monkeypatch, capsys):
    monkeypatch.setattr(stores.ParameterDirectory, "lookup", lambda self, key: directory.lookup(key))
    monkeypatch.setattr(stores.SecretsManagerStore, "get_secret", lambda self, sid: secrets.get_secret(sid))

    result = handler_module.handler(create_user_event, None)

    assert result["statusCode"] == 200
    assert capsys.readouterr().out.splitlines() == [
        "New IAM user created: ec2-user",
        "Email: ec2-user@example.com",
        "Temporary Password: Xk9!mQ2p",
    ]
    assert directory.reads == ["/user/emails/ec2-user"]
    assert secrets.reads == ["TempUserPassword"]
