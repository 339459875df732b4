"""
nanoargs - A tiny command-line argument partitioner with typed lookups
"""

__version__ = "1.2.0"
__author__ = "Tyler Saari"
__license__ = "MIT"
__description__ = "A tiny command-line argument partitioner with typed lookups"
__project_name__ = "nanoargs"
__copyright__ = f"Copyright {2024-2025} {__author__}"

from nanoargs.core.exceptions import (
    NanoArgsError, ArgumentError, MissingArgumentError, InvalidFormatError,
    ConfigError, DialectError
)
from nanoargs.core.cmdline_tool import CmdLineTool, ArgValue
from nanoargs.core.parsed_args import ParsedArgs, parse_args

__all__ = [
    "CmdLineTool",
    "ArgValue",
    "ParsedArgs",
    "parse_args",
    "NanoArgsError",
    "ArgumentError",
    "MissingArgumentError",
    "InvalidFormatError",
    "ConfigError",
    "DialectError",
]
