"""
Package information utility.

This module provides a command-line utility for displaying
information about the querystring installation and its active
configuration.
"""

import sys
import platform
from typing import Dict, Any

import pydantic

import querystring
from .config import get_config


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to querystring.

    Returns:
        Dictionary containing system information
    """
    return {
        'python_version': sys.version,
        'platform': platform.platform(),
        'pydantic_version': pydantic.VERSION,
    }


def get_querystring_info() -> Dict[str, Any]:
    """
    Get querystring-specific information.

    Returns:
        Dictionary containing version and effective configuration
    """
    config = get_config()
    return {
        'version': querystring.__version__,
        'author': querystring.__author__,
        'config_file': str(config.config_file) if config.config_file else None,
        'encoder': config.to_dict()['encoder'],
    }


def print_info() -> None:
    """Print formatted information about querystring and the system."""
    print("querystring record encoder")
    print("=" * 40)

    info = get_querystring_info()
    print(f"\nVersion: {info['version']}")
    print(f"Author: {info['author']}")
    print(f"Config File: {info['config_file'] or 'defaults'}")

    encoder = info['encoder']
    print(f"Naming Strategy: {encoder['naming_strategy'] or 'none'}")
    print(f"Skip Sentinel: {encoder['skip_sentinel']!r}")
    print(f"Directive Key: {encoder['directive_key']!r}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Pydantic Version: {system_info['pydantic_version']}")


def main() -> None:
    """Main entry point for the querystring-info command."""
    try:
        print_info()
    except Exception as e:
        print(f"Error getting package information: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
