"""Expiration reporting for credentials exported into the environment."""

import re
from datetime import datetime, timezone

from .errors import (
    CredentialsNotSetError,
    CredentialsNotTemporaryError,
    ExpirationInvalidError,
    ExpirationNotRecordedError,
)
from .shell import ACCESS_KEY_ID, SESSION_EXPIRES_AT, SESSION_TOKEN

_RFC3339_PATTERN = re.compile(
    r'(?P<date>[0-9]{4}-[0-9]{2}-[0-9]{2})T(?P<time>[0-9]{2}:[0-9]{2}:[0-9]{2})'
    r'(?:\.(?P<fraction>[0-9]+))?'
    r'(?P<offset>Z|[+-][0-9]{2}:[0-9]{2})'
)

# Fixed English names so output never depends on the process locale
_DAY_NAMES = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')
_MONTH_NAMES = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
                'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')


def format_rfc3339(moment):
    """Format a datetime as RFC 3339 with second precision (UTC as ``Z``)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    text = moment.replace(microsecond=0).isoformat()
    if moment.utcoffset().total_seconds() == 0:
        text = text[:-len('+00:00')] + 'Z'
    return text


def parse_rfc3339(text):
    """
    Parse an RFC 3339 timestamp into a timezone aware datetime.

    Raises:
        ValueError: If the text is not a valid RFC 3339 timestamp
    """
    match = _RFC3339_PATTERN.fullmatch(text)
    if not match:
        raise ValueError(f"not an RFC 3339 timestamp: {text!r}")

    offset = match.group('offset')
    if offset == 'Z':
        offset = '+00:00'

    fraction = match.group('fraction') or ''
    fraction = f".{fraction[:6].ljust(6, '0')}" if fraction else ''

    return datetime.fromisoformat(f"{match.group('date')}T{match.group('time')}{fraction}{offset}")


def format_rfc1123(moment):
    """Format a timezone aware datetime as ``Mon, 02 Jan 2006 15:04:05 MST``."""
    zone = moment.tzname() or moment.strftime('%z')
    return (
        f"{_DAY_NAMES[moment.weekday()]}, {moment.day:02d} {_MONTH_NAMES[moment.month - 1]} "
        f"{moment.year:04d} {moment.hour:02d}:{moment.minute:02d}:{moment.second:02d} {zone}"
    )


def get_expiry(environ):
    """
    Read the recorded expiration of the credentials in ``environ``.

    Checks run in order and the first failure is raised.

    Args:
        environ: Mapping of environment variables (usually ``os.environ``)

    Returns:
        datetime: The expiration converted to the local timezone
    """
    if not environ.get(ACCESS_KEY_ID):
        raise CredentialsNotSetError("AWS credentials are not set as environment variables")
    if not environ.get(SESSION_TOKEN):
        raise CredentialsNotTemporaryError("AWS credentials in environment variables are not temporary")
    if not environ.get(SESSION_EXPIRES_AT):
        raise ExpirationNotRecordedError(
            "AWS credentials expiration time has not been recorded in your environment"
        )

    try:
        expires_at = parse_rfc3339(environ[SESSION_EXPIRES_AT])
    except ValueError as e:
        raise ExpirationInvalidError(
            "AWS credentials expiration time has not been properly recorded in your environment"
        ) from e

    return expires_at.astimezone()


def describe_expiry(environ):
    """Human readable, local time expiration of the credentials in ``environ``."""
    return format_rfc1123(get_expiry(environ))
