"""
Package information utility.

This module provides a command-line utility for displaying
information about the namescope installation and configuration.
"""

import platform
import sys
from typing import Any, Dict

import namescope


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to namescope.

    Returns:
        Dictionary containing system information
    """
    info = {
        'python_version': sys.version,
        'platform': platform.platform(),
    }

    try:
        import torch
        info['torch_version'] = torch.__version__
    except ImportError:
        info['torch_version'] = 'Not installed'

    return info


def get_namescope_info() -> Dict[str, Any]:
    """
    Get namescope-specific information.

    Returns:
        Dictionary containing version, profiles and configuration
    """
    info = {
        'version': namescope.__version__,
        'author': namescope.__author__,
        'profiles': namescope.list_profiles(),
    }

    config = namescope.get_config()
    info['config_file'] = str(config.config_file)
    info['profile'] = config.naming.profile
    info['kernel_name'] = config.naming.kernel_name

    try:
        profile = config.profile()
        info['reserved_words'] = len(profile.reserved_words)
        info['predeclared'] = len(profile.predeclared)
    except namescope.ProfileError as e:
        info['profile_error'] = str(e)

    return info


def print_info() -> None:
    """Print formatted information about namescope and the system."""
    print("namescope identifier allocation")
    print("=" * 40)

    ns_info = get_namescope_info()
    print(f"\nnamescope Version: {ns_info['version']}")
    print(f"Author: {ns_info['author']}")
    print(f"Available Profiles: {', '.join(ns_info['profiles'])}")
    print(f"Config File: {ns_info['config_file']}")
    print(f"Active Profile: {ns_info['profile']}")
    print(f"Kernel Name: {ns_info['kernel_name']}")

    if 'profile_error' in ns_info:
        print(f"Profile Error: {ns_info['profile_error']}")
    else:
        print(f"Reserved Words: {ns_info['reserved_words']}")
        print(f"Predeclared Names: {ns_info['predeclared']}")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")

    if system_info['torch_version'] != 'Not installed':
        print(f"PyTorch Version: {system_info['torch_version']}")
    else:
        print("PyTorch: Not installed")


def main() -> None:
    """Main entry point for the namescope-info command."""
    try:
        print_info()
    except Exception as e:
        print(f"Error getting system information: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
