#!/usr/bin/env python3

import os
import aws_cdk as cdk
from iam_onboarding.identity_stack import IdentityStack
from iam_onboarding.eventbridge_stack import EventBridgeStack


app = cdk.App()

env = cdk.Environment(
    account=os.getenv('CDK_DEFAULT_ACCOUNT'),
    region=os.getenv('CDK_DEFAULT_REGION')
)

# Deploy the credential logger and the CreateUser rule first
logger_stack = EventBridgeStack(app, "EventBridgeStack", env=env)

# Deploy the users, groups, temporary password and email parameters
identity_stack = IdentityStack(app, "IdentityStack", env=env)

# Users must be created after the rule exists, or their events are missed
identity_stack.add_dependency(logger_stack)

app.synth()

"""
app.py

Main CDK entrypoint for deploying the IAM onboarding infrastructure.

Instructions for developers:
- Add or remove users in the USERS dictionary in iam_onboarding/identity_stack.py.
  • Each user must specify a group from GROUPS and an email address.
- Each user will be deployed with:
  • A console password taken from the TempUserPassword secret (reset required)
  • An email parameter under /user/emails/<username>
- A single EventBridge rule invokes the IAMUserLogger Lambda on every CreateUser call.
- The Lambda prints the new user's email and temporary password to CloudWatch Logs.
- Deploy to us-east-1: IAM CloudTrail events are only delivered there.
"""
