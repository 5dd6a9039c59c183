"""Shell statement rendering for the environment variables managed by cred."""

import shlex

ACCESS_KEY_ID = 'AWS_ACCESS_KEY_ID'
SECRET_ACCESS_KEY = 'AWS_SECRET_ACCESS_KEY'
SESSION_TOKEN = 'AWS_SESSION_TOKEN'
SESSION_EXPIRES_AT = 'AWS_SESSION_EXPIRES_AT'
ACCOUNT_ID = 'AWS_ACCOUNT_ID'
DEFAULT_REGION = 'AWS_DEFAULT_REGION'
REGION = 'AWS_REGION'

MANAGED_VARS = (
    ACCESS_KEY_ID,
    SECRET_ACCESS_KEY,
    SESSION_TOKEN,
    SESSION_EXPIRES_AT,
    ACCOUNT_ID,
    DEFAULT_REGION,
    REGION,
)


def assignment(name, value):
    """Render a NAME=VALUE pair for use after ``export``."""
    return f"{name}={shlex.quote(value)}"


def unset_statement(name):
    """Render an unset statement for a single variable."""
    return f"unset {name};"


def export_line(assignments):
    """Join assignments into a single export statement."""
    return "export " + " ".join(assignments)


def clear_statements():
    """Unset statements for every managed variable, in a fixed order."""
    return [unset_statement(name) for name in MANAGED_VARS]


def clear_process_environment(environ):
    """Remove every managed variable from ``environ`` (usually ``os.environ``)."""
    for name in MANAGED_VARS:
        environ.pop(name, None)
