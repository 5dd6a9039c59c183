"""AWS profile discovery from the shared config and credentials files."""

import configparser
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def get_credentials_path():
    """Path of the shared credentials file, honoring AWS_SHARED_CREDENTIALS_FILE."""
    override = os.environ.get('AWS_SHARED_CREDENTIALS_FILE')
    if override:
        return Path(override).expanduser()
    return Path.home() / '.aws' / 'credentials'


def get_config_path():
    """Path of the shared config file, honoring AWS_CONFIG_FILE."""
    override = os.environ.get('AWS_CONFIG_FILE')
    if override:
        return Path(override).expanduser()
    return Path.home() / '.aws' / 'config'


def _read(path):
    config = configparser.ConfigParser(interpolation=None)
    if path.exists():
        try:
            config.read(path)
        except configparser.Error as e:
            logger.warning("Could not parse %s: %s", path, e)
    return config


def _profile_name(section):
    if section.startswith('profile '):
        return section[len('profile '):].strip()
    return section


def get_aws_profiles():
    """Get sorted list of all AWS profiles from credentials and config files."""
    profiles = set(_read(get_credentials_path()).sections())

    for section in _read(get_config_path()).sections():
        # sso-session and services blocks are not profiles
        if section.startswith(('sso-session ', 'services ')):
            continue
        profiles.add(_profile_name(section))

    return sorted(profiles)


def _config_section(config, profile_name):
    if f'profile {profile_name}' in config:
        return config[f'profile {profile_name}']
    if profile_name in config:
        return config[profile_name]
    return {}


def get_profile_type(profile_name):
    """Classify how a profile obtains its credentials."""
    settings = dict(_config_section(_read(get_config_path()), profile_name))
    credentials = _read(get_credentials_path())
    if profile_name in credentials:
        settings.update(credentials[profile_name])

    if any(key in settings for key in ('sso_start_url', 'sso_session')):
        return 'SSO'
    if 'role_arn' in settings:
        return 'Role'
    if 'credential_process' in settings:
        return 'Process'
    if 'aws_access_key_id' in settings:
        return 'Static'
    return 'Unknown'


def get_profile_region(profile_name):
    """Region configured for a profile, or None."""
    section = _config_section(_read(get_config_path()), profile_name)
    return section.get('region') or None


def describe_profiles():
    """Rows describing every discovered profile."""
    return [
        {
            'profile': name,
            'type': get_profile_type(name),
            'region': get_profile_region(name) or 'N/A',
        }
        for name in get_aws_profiles()
    ]
