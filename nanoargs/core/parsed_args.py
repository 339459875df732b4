# nanoargs/core/parsed_args.py

import sys
from typing import Any, Iterable, List, Optional

from .converters import convert
from .dialect import LONG_WITH_EQUALS, ParserDialect
from .exceptions import MissingArgumentError
from .tokenizer import Partition, partition

# Sentinel marking a lookup as required
_REQUIRED = object()

class ParsedArgs:
    """
    Named-accessor view of a parsed argument vector.

    Only '--name' tokens are options or flags, '--name=value' is accepted,
    and names may be given with or without the leading '--'.
    """

    def __init__(self, parsed: Partition, dialect: ParserDialect = LONG_WITH_EQUALS):
        self._partition = parsed
        self._dialect = dialect

    def _raw(self, name: str) -> Optional[str]:
        return self._partition.lookup(self._dialect.canonical_name(name))

    def flag(self, name: str) -> bool:
        return self._dialect.canonical_name(name) in self._partition.flags

    def has(self, name: str) -> bool:
        return self._partition.contains(self._dialect.canonical_name(name))

    def get(self, name: str) -> str:
        """
        Return the raw value of an argument, '' for a flag.

        Raises:
            MissingArgumentError: If the argument was not supplied
        """
        raw = self._raw(name)
        if raw is None:
            raise MissingArgumentError(name)
        return raw

    def get_or(self, name: str, default: str) -> str:
        raw = self._raw(name)
        return default if raw is None else raw

    def _get_typed(self, name: str, target_type: type, default: Any) -> Any:
        raw = self._raw(name)
        if raw is None:
            if default is _REQUIRED:
                raise MissingArgumentError(name)
            return default
        return convert(name, raw, target_type)

    def get_int(self, name: str, default: Any = _REQUIRED) -> int:
        """
        Return an argument as an integer.

        The default is used only when the argument is absent; a present
        value that is not an integer always raises InvalidFormatError.
        """
        return self._get_typed(name, int, default)

    def get_double(self, name: str, default: Any = _REQUIRED) -> float:
        """Return an argument as a float, see get_int for default handling"""
        return self._get_typed(name, float, default)

    def positional(self) -> List[str]:
        return list(self._partition.positional)

    def program_name(self) -> str:
        return self._partition.program_name

    @property
    def partition(self) -> Partition:
        return self._partition


def parse_args(argv: Optional[Iterable[str]] = None, argc: Optional[int] = None,
               dialect: ParserDialect = LONG_WITH_EQUALS) -> ParsedArgs:
    """
    Parse an argument vector, sys.argv by default.

    Args:
        argv: Argument vector with the program name first
        argc: Optional count of tokens of argv to read
        dialect: Classification rules, long options with '=' joining by default

    Returns:
        ParsedArgs: Read-only accessor object
    """
    if argv is None:
        argv = sys.argv
    return ParsedArgs(partition(argv, dialect, argc=argc), dialect)
