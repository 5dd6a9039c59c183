"""Command-line interface for cred."""

import argparse
import logging
import os
import sys

from botocore.exceptions import BotoCoreError, ClientError
from tabulate import tabulate

from . import __version__
from .errors import CredError
from .expiry import describe_expiry
from .exports import export_credentials
from .logging_utils import configure_logging
from .profiles import describe_profiles
from .shell import clear_statements

logger = logging.getLogger(__name__)

EXPIRY_ALIASES = ['exp', 'expires', 'expire']
CLEAR_ALIASES = ['unset', 'rm', 'none']
PROFILES_ALIASES = ['ls']


class CredArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def run_export(args):
    """Print export statements for the resolved credentials."""
    sys.stdout.write(export_credentials(profile_name=args.profile))
    return 0


def run_expiry(args):
    """Print when the credentials in the environment expire."""
    print(describe_expiry(os.environ))
    return 0


def run_clear(args):
    """Print unset statements for every managed variable."""
    print("\n".join(clear_statements()))
    return 0


def run_profiles(args):
    """List the profiles available to --profile."""
    rows = describe_profiles()

    if not rows:
        print("No AWS profiles found in the shared credentials or config files")
        return 0

    table_data = [[row['profile'], row['type'], row['region']] for row in rows]
    print(tabulate(table_data, headers=['Profile', 'Type', 'Region'], tablefmt='simple'))
    return 0


def build_parser():
    parser = CredArgumentParser(
        prog='cred',
        description='Fetch AWS credentials and set them as environment variables.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Evaluate the output in order to export AWS credentials as environment variables.

Examples:
  eval $(cred)                     # Export credentials from the default chain
  eval $(cred --profile prod)      # Export credentials for the 'prod' profile
  cred expiry                      # Show when exported credentials expire
  eval $(cred clear)               # Unset all exported AWS variables
  cred profiles                    # List configured profiles
        """
    )

    parser.add_argument(
        '--profile',
        default='',
        metavar='PROFILE',
        help='AWS profile to use'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log debug information to stderr'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.set_defaults(handler=run_export)
    subparsers = parser.add_subparsers(
        dest='command',
        metavar='COMMAND',
        parser_class=CredArgumentParser
    )

    expiry_parser = subparsers.add_parser(
        'expiry',
        aliases=EXPIRY_ALIASES,
        help='Print the time that explicit environment credentials will expire'
    )
    expiry_parser.set_defaults(handler=run_expiry)

    clear_parser = subparsers.add_parser(
        'clear',
        aliases=CLEAR_ALIASES,
        help='Clear AWS environment variables',
        description='Clear AWS environment variables. Evaluate the output, e.g. eval $(cred clear).'
    )
    clear_parser.set_defaults(handler=run_clear)

    profiles_parser = subparsers.add_parser(
        'profiles',
        aliases=PROFILES_ALIASES,
        help='List profiles from the shared AWS config and credentials files'
    )
    profiles_parser.set_defaults(handler=run_profiles)

    return parser


def main(argv=None):
    """Main function to parse arguments and route to the selected command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    try:
        return args.handler(args)
    except (CredError, BotoCoreError, ClientError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
