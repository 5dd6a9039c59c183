"""Identity verification against AWS STS."""

import logging
from dataclasses import dataclass

from botocore.exceptions import BotoCoreError, ClientError

from .errors import InvalidCredentialsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallerIdentity:
    account_id: str
    arn: str
    user_id: str = ''


def get_caller_identity(session):
    """
    Verify the session's credentials with a single STS GetCallerIdentity call.

    Raises:
        InvalidCredentialsError: STS rejected the credentials, or the call
            could not be made
    """
    sts_client = session.client('sts')

    try:
        identity = sts_client.get_caller_identity()
    except ClientError as e:
        error = e.response.get('Error', {})
        code = error.get('Code', 'Unknown')
        message = error.get('Message', str(e))
        raise InvalidCredentialsError(f"Invalid credentials: {code}: {message}", code=code) from e
    except BotoCoreError as e:
        raise InvalidCredentialsError(f"Invalid credentials: {e}") from e

    result = CallerIdentity(
        account_id=identity.get('Account', ''),
        arn=identity.get('Arn', ''),
        user_id=identity.get('UserId', ''),
    )
    logger.debug("Verified caller identity %s", result.arn)
    return result
