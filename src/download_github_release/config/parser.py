"""INI parser utilities for settings.conf."""

import configparser


def create_config_parser() -> configparser.ConfigParser:
    """Create the parser used for settings.conf."""
    return configparser.ConfigParser(
        inline_comment_prefixes=("#", ";"),
        interpolation=None,
    )
