"""
IAM User Logger – handler.py

This Lambda function is triggered by the IAMUserCreationRule whenever an
IAM user is created. It logs the new user's email address and the shared
temporary password to CloudWatch so the account admin can hand them over.
"""

from iam_onboarding.notifier.credential_notifier import lambda_handler


def handler(event, context):
    """
    AWS Lambda handler for IAM user creation events.

    Args:
        event: EventBridge CloudTrail event for iam:CreateUser
        context: AWS Lambda context
    """
    return lambda_handler(event, context)
