"""
identity_stack.py

This CDK stack creates the IAM users that get onboarded, together with
the resources their first login depends on.

Responsibilities:
- Stores one temporary password for all users in Secrets Manager
- Defines read-only groups for S3 and EC2 with inline policies
- Creates each user in its group with a console password taken from the
  secret (the user must reset it on first login)
- Stores each user's email address in Parameter Store under
  /user/emails/<username> for the credential logger Lambda

The password is resolved by CloudFormation at deploy time; it never
appears in the synthesized template.
"""

from aws_cdk import (
    Stack,
    aws_iam as iam,
    aws_secretsmanager as secretsmanager,
    aws_ssm as ssm,
)
from constructs import Construct

from .config import EMAIL_PARAMETER_PREFIX, TEMP_PASSWORD_SECRET_ID


# Read-only groups and the actions each one allows
GROUPS = {
    'S3UserGroup': {
        'policy_name': 'S3ReadOnlyPolicy',
        'actions': ['s3:ListBucket', 's3:GetObject'],
    },
    'EC2UserGroup': {
        'policy_name': 'EC2ReadOnlyPolicy',
        'actions': ['ec2:DescribeInstances'],
    },
}

# Users to onboard, their group and contact address
USERS = {
    'ec2-user': {
        'group': 'EC2UserGroup',
        'email': 'ec2-user@example.com',
    },
    's3-user': {
        'group': 'S3UserGroup',
        'email': 's3-user@example.com',
    },
}


def construct_prefix(name: str) -> str:
    """ec2-user -> EC2User, bob-smith -> BobSmith"""
    return ''.join(part.upper() if any(c.isdigit() for c in part) else part.title() for part in name.split('-'))


class IdentityStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Store temporary password in Secrets Manager
        self.temporary_password = secretsmanager.Secret(
            self, "TemporaryPassword",
            secret_name=TEMP_PASSWORD_SECRET_ID,
            description="Temporary password for all IAM users",
            generate_secret_string=secretsmanager.SecretStringGenerator(
                secret_string_template='{"password": ""}',
                generate_string_key="password",
                password_length=12,
                exclude_characters='"@/\\',
            )
        )

        # Create read-only groups
        self.groups = {}
        for group_name, config in GROUPS.items():
            group = iam.Group(self, group_name, group_name=group_name)
            group.attach_inline_policy(
                iam.Policy(
                    self, config['policy_name'],
                    policy_name=config['policy_name'],
                    statements=[
                        iam.PolicyStatement(
                            actions=config['actions'],
                            resources=["*"]
                        )
                    ]
                )
            )
            self.groups[group_name] = group

        # Create users and their email parameters
        self.users = {}
        for username, config in USERS.items():
            prefix = construct_prefix(username)
            user = iam.User(
                self, prefix,
                user_name=username,
                groups=[self.groups[config['group']]],
                password=self.temporary_password.secret_value_from_json("password"),
                password_reset_required=True,
            )
            ssm.StringParameter(
                self, f"{prefix}Email",
                parameter_name=f"{EMAIL_PARAMETER_PREFIX}{username}",
                string_value=config['email'],
            )
            self.users[username] = user
