"""
Command-line front end for rangecheck.

Commands:
    rangecheck <lower> <upper>
    rangecheck <lower> <upper> contains <value>
    rangecheck <lower> <upper> subset <lower2> <upper2>
"""

from .commands import (
    Command,
    CommandKind,
    CommandOutcome,
    ContainsCommand,
    DisplayCommand,
    SubsetCommand,
    execute,
)
from .main import CliConfig, UsageError, create_parser, main

__all__ = [
    "Command",
    "CommandKind",
    "CommandOutcome",
    "DisplayCommand",
    "ContainsCommand",
    "SubsetCommand",
    "execute",
    "CliConfig",
    "UsageError",
    "create_parser",
    "main",
]
