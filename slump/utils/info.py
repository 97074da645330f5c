"""
Package information utility.

This module provides a command-line utility for displaying
information about the slump installation and active configuration.
"""

import platform
import sys
from importlib.metadata import version
from typing import Any, Dict

import slump
from .config import get_config
from .exceptions import SlumpError


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to slump.

    Returns:
        Dictionary containing system information
    """
    return {
        'python_version': sys.version,
        'platform': platform.platform(),
        'jinja2_version': version("jinja2"),
    }


def get_slump_info() -> Dict[str, Any]:
    """
    Get slump-specific information.

    Returns:
        Dictionary containing version and active configuration
    """
    config = get_config()
    return {
        'version': slump.__version__,
        'author': slump.__author__,
        'config_file': str(config.config_file) if config.config_file else None,
        'delimiters': (config.delimiters.left, config.delimiters.right),
        'autoescape': config.rendering.autoescape,
    }


def print_info() -> None:
    """Print formatted information about slump and the system."""
    print("slump string templates")
    print("=" * 40)

    slump_info = get_slump_info()
    print(f"\nslump Version: {slump_info['version']}")
    print(f"Author: {slump_info['author']}")
    print(f"Config File: {slump_info['config_file'] or 'none'}")
    left, right = slump_info['delimiters']
    print(f"Delimiters: {left} {right}")
    print(f"Autoescape: {slump_info['autoescape']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"Jinja2 Version: {system_info['jinja2_version']}")


def main() -> None:
    """Main entry point for the slump-info command."""
    try:
        print_info()
    except SlumpError as e:
        print(f"Error getting slump information: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
