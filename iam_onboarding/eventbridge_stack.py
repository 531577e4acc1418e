"""
eventbridge_stack.py

This CDK stack creates the credential logger Lambda and the EventBridge rule
that invokes it whenever an IAM user is created.

Responsibilities:
- Defines an execution role allowed to read the email parameters and the
  temporary password secret, and to write CloudWatch logs
- Defines a PythonFunction whose code is scripts/iam_user_logger/handler.py
- Defines a rule matching CloudTrail "CreateUser" calls and targets the Lambda

IAM is a global service: its CloudTrail events are delivered to EventBridge
in us-east-1, so this stack should be deployed there.
"""

from pathlib import Path

from aws_cdk import (
    CfnOutput,
    Duration,
    Stack,
    aws_events as events,
    aws_events_targets as targets,
    aws_iam as iam,
    aws_lambda as lambda_,
)
from aws_cdk.aws_lambda_python_alpha import BundlingOptions, PythonFunction
from constructs import Construct

from .config import EMAIL_PARAMETER_PREFIX, TEMP_PASSWORD_SECRET_ID

# Root directory containing both scripts/ and iam_onboarding/
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class EventBridgeStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Execution role for the logger Lambda
        role = iam.Role(
            self, "IAMUserLoggingLambdaRole",
            role_name="IAMUserLoggerRole",
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            inline_policies={
                "IAMUserLoggerPolicy": iam.PolicyDocument(
                    statements=[
                        iam.PolicyStatement(
                            actions=[
                                'ssm:GetParameter',
                                'secretsmanager:GetSecretValue'
                            ],
                            resources=["*"]
                        ),
                        iam.PolicyStatement(
                            actions=[
                                'logs:CreateLogGroup',
                                'logs:CreateLogStream',
                                'logs:PutLogEvents'
                            ],
                            resources=["*"]
                        ),
                        iam.PolicyStatement(
                            actions=[
                                'lambda:GetFunction',
                                'lambda:ListFunctions',
                                'lambda:DeleteFunction',
                                'lambda:UpdateFunctionConfiguration',
                                'lambda:UpdateFunctionCode'
                            ],
                            resources=["*"]
                        ),
                    ]
                )
            }
        )

        self.logger_fn = PythonFunction(
            self, "IAMUserLoggingLambda",
            entry=str(PROJECT_ROOT),
            index="scripts/iam_user_logger/handler.py",
            handler="handler",
            runtime=lambda_.Runtime.PYTHON_3_12,
            timeout=Duration.seconds(30),
            description="Logs email and temporary password of new IAM users",
            function_name="IAMUserLogger",
            role=role,
            environment={
                'EMAIL_PARAMETER_PREFIX': EMAIL_PARAMETER_PREFIX,
                'TEMP_PASSWORD_SECRET_ID': TEMP_PASSWORD_SECRET_ID,
            },
            bundling=BundlingOptions(
                asset_excludes=['tests', 'cdk.out', '.venv', '.git', '*.md']
            )
        )

        # Rule to detect IAM user creation
        user_creation_rule = events.Rule(
            self, "UserCreationEventRule",
            rule_name="IAMUserCreationRule",
            description="Triggers a Lambda function when a new IAM user is created",
            event_pattern=events.EventPattern(
                source=["aws.iam"],
                detail_type=["AWS API Call via CloudTrail"],
                detail={
                    "eventSource": ["iam.amazonaws.com"],
                    "eventName": ["CreateUser"],
                }
            )
        )
        user_creation_rule.add_target(targets.LambdaFunction(self.logger_fn))

        CfnOutput(
            self, "IAMUserLoggingLambdaARN",
            description="ARN of the Lambda function that logs IAM user credentials",
            value=self.logger_fn.function_arn,
        )
