"""
config.py

Runtime settings shared by the CDK stacks and the IAMUserLogger Lambda.
Values come from the environment, or from a local .env during development.
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()
EMAIL_PARAMETER_PREFIX = os.getenv("EMAIL_PARAMETER_PREFIX", "/user/emails/")
TEMP_PASSWORD_SECRET_ID = os.getenv("TEMP_PASSWORD_SECRET_ID", "TempUserPassword")
