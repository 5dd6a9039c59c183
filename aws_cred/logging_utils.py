"""Logging helpers for the cred CLI."""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL_ENV = 'CRED_LOG_LEVEL'


def resolve_level(verbose=False):
    """Pick the log level from the --verbose flag or CRED_LOG_LEVEL."""
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENV, 'WARNING')
    level = getattr(logging, name.upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose=False):
    """
    Send log records to stderr.

    stdout is reserved for statements the calling shell evaluates.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    level = resolve_level(verbose)
    logging.basicConfig(level=level, handlers=[handler], force=True)

    # botocore DEBUG records include signed request details
    logging.getLogger('botocore').setLevel(max(level, logging.INFO))
    logging.getLogger('boto3').setLevel(max(level, logging.INFO))
    return level
