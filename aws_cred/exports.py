"""Shell export statements for resolved AWS credentials."""

import logging
import os

from .credentials import create_session, resolve_credentials
from .expiry import format_rfc3339
from .identity import get_caller_identity
from .shell import (
    ACCESS_KEY_ID,
    ACCOUNT_ID,
    DEFAULT_REGION,
    REGION,
    SECRET_ACCESS_KEY,
    SESSION_EXPIRES_AT,
    SESSION_TOKEN,
    assignment,
    clear_process_environment,
    export_line,
    unset_statement,
)

logger = logging.getLogger(__name__)


def render_exports(credentials, identity):
    """
    Build the shell output for a credential set.

    Args:
        credentials: CredentialSet resolved from the provider chain
        identity: CallerIdentity from STS, used when the credentials carry no account id

    Returns:
        str: Unset statements (one per line) followed by a single export line
    """
    unsets = []
    exports = [
        assignment(ACCESS_KEY_ID, credentials.access_key_id),
        assignment(SECRET_ACCESS_KEY, credentials.secret_access_key),
        assignment(ACCOUNT_ID, credentials.account_id or identity.account_id),
    ]

    if credentials.region:
        exports.append(assignment(DEFAULT_REGION, credentials.region))
        exports.append(assignment(REGION, credentials.region))
    else:
        unsets.append(unset_statement(DEFAULT_REGION))
        unsets.append(unset_statement(REGION))

    if credentials.session_token:
        exports.append(assignment(SESSION_TOKEN, credentials.session_token))
        if credentials.expires_at is not None:
            exports.append(assignment(SESSION_EXPIRES_AT, format_rfc3339(credentials.expires_at)))
        else:
            unsets.append(unset_statement(SESSION_EXPIRES_AT))
    else:
        unsets.append(unset_statement(SESSION_TOKEN))
        unsets.append(unset_statement(SESSION_EXPIRES_AT))

    output = export_line(exports) + "\n"
    if unsets:
        output = "\n".join(unsets) + "\n" + output
    return output


def export_credentials(profile_name=None):
    """
    Resolve, verify and render credentials for the current shell.

    Args:
        profile_name: Optional shared config profile to resolve

    Returns:
        str: Shell statements ready for ``eval``
    """
    # Previously exported values must not feed back into the provider chain
    clear_process_environment(os.environ)

    logger.debug("Resolving credentials for profile %s", profile_name or '(default chain)')
    session = create_session(profile_name)
    credentials = resolve_credentials(session)
    identity = get_caller_identity(session)

    return render_exports(credentials, identity)
