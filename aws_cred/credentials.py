"""Credential resolution through the boto3 provider chain."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import boto3
from botocore.exceptions import NoCredentialsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CredentialSet:
    """Credentials resolved for a single invocation."""

    access_key_id: str
    secret_access_key: str
    session_token: Optional[str] = None
    expires_at: Optional[datetime] = None
    account_id: Optional[str] = None
    region: Optional[str] = None
    method: Optional[str] = None

    @property
    def is_temporary(self):
        return bool(self.session_token)

    def __repr__(self):
        return (
            f"CredentialSet(access_key_id={self.access_key_id[:8]}***, "
            f"temporary={self.is_temporary}, region={self.region})"
        )


def create_session(profile_name=None):
    """Create a boto3 session, scoped to ``profile_name`` when given."""
    if profile_name:
        return boto3.Session(profile_name=profile_name)
    return boto3.Session()


def resolve_credentials(session):
    """
    Resolve credentials for a session.

    Args:
        session: boto3 Session to resolve credentials from

    Returns:
        CredentialSet: The resolved credentials

    Raises:
        NoCredentialsError: No provider in the chain produced credentials
        BotoCoreError: Any other resolution failure, propagated unchanged
    """
    credentials = session.get_credentials()
    if credentials is None:
        raise NoCredentialsError()

    # Freezing forces refreshable providers (SSO, assume-role) to fetch now
    frozen = credentials.get_frozen_credentials()
    expires_at = getattr(credentials, '_expiry_time', None)
    if not isinstance(expires_at, datetime):
        expires_at = None

    account_id = getattr(frozen, 'account_id', None) or getattr(credentials, 'account_id', None)

    logger.debug(
        "Resolved credentials via %s (temporary=%s, region=%s)",
        credentials.method, bool(frozen.token), session.region_name,
    )

    return CredentialSet(
        access_key_id=frozen.access_key,
        secret_access_key=frozen.secret_key,
        session_token=frozen.token or None,
        expires_at=expires_at,
        account_id=account_id if isinstance(account_id, str) and account_id else None,
        region=session.region_name or None,
        method=credentials.method,
    )
