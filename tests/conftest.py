import json

import pytest

from fakes import FakeDirectory, FakeSecretStore


@pytest.fixture
def directory():
    return FakeDirectory({
        "/user/emails/ec2-user": "ec2-user@example.com",
        "/user/emails/s3-user": "s3-user@example.com",
    })


@pytest.fixture
def secrets():
    return FakeSecretStore({"TempUserPassword": json.dumps({"password": "Xk9!mQ2p"})})


@pytest.fixture
def create_user_event():
    """EventBridge CloudTrail event for iam:CreateUser."""
    return {
        "version": "0",
        "source": "aws.iam",
        "detail-type": "AWS API Call via CloudTrail",
        "detail": {
            "eventSource": "iam.amazonaws.com",
            "eventName": "CreateUser",
            "requestParameters": {"userName": "ec2-user"},
        },
    }
