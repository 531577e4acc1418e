"""
Runtime code for the IAMUserLogger Lambda.

- credential_notifier.py: the CreateUser event handler
- stores.py: read-only Parameter Store / Secrets Manager access
- errors.py: failures the handler lets propagate
"""
