"""
iam_onboarding

This package defines the CDK infrastructure and Lambda code for onboarding IAM users.

Responsibilities:
- Provision IAM users, their read-only groups and a shared temporary password
- Store each user's email address in Parameter Store
- Log new users' email and temporary password when they are created (per notifier/)
- Pass runtime configuration via environment variables

Stacks included:
- identity_stack.py: Deploys the secret, groups, users and email parameters
- eventbridge_stack.py: Deploys the logger Lambda and its CreateUser rule
"""
