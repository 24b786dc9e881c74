"""
Utility modules for the NL corpus pipeline.

Contains command-line parsing utilities.
"""

from .cli_parser import parse_arguments, validate_arguments, print_configuration

__all__ = [
    'parse_arguments',
    'validate_arguments',
    'print_configuration'
]
