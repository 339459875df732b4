# nanoargs/core/tokenizer.py

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple, Dict

from .dialect import ParserDialect

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class Partition:
    """Immutable result of one pass over an argument vector"""
    program_name: str = ""
    positional: Tuple[str, ...] = ()
    flags: Mapping[str, bool] = field(default_factory=lambda: MappingProxyType({}))
    options: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    separator_seen: bool = False

    def lookup(self, key: str) -> Optional[str]:
        """Raw value for a key: the option value, '' for a flag, None if absent"""
        if key in self.options:
            return self.options[key]
        if key in self.flags:
            return ""
        return None

    def contains(self, key: str) -> bool:
        return key in self.options or key in self.flags


def _take_tokens(argv: Optional[Iterable], argc: Optional[int]) -> List[str]:
    """Copy the first argc tokens of argv as strings"""
    if argv is None:
        return []
    tokens = [str(token) for token in argv]
    if argc is not None:
        tokens = tokens[:max(argc, 0)]
    return tokens


def partition(argv: Optional[Iterable], dialect: ParserDialect, argc: Optional[int] = None) -> Partition:
    """
    Split an argument vector into program name, positional values, flags and options.

    Token 0 is the program name. Everything after the separator marker is
    positional. A prefixed token followed by a bare token takes that token
    as its value; otherwise it is a flag.

    Args:
        argv: Argument vector, program name first
        dialect: Classification rules
        argc: Optional count limiting how many tokens of argv are read

    Returns:
        Partition: Read-only view of the classified tokens
    """
    tokens = _take_tokens(argv, argc)
    if not tokens:
        return Partition()

    program_name = tokens[0]
    args = tokens[1:]
    positional: List[str] = []
    flags: Dict[str, bool] = {}
    options: Dict[str, str] = {}
    separator_seen = False

    def set_option(key: str, value: str):
        flags.pop(key, None)
        options[key] = value

    def set_flag(key: str):
        options.pop(key, None)
        flags[key] = True

    i = 0
    while i < len(args):
        token = args[i]

        if token == dialect.separator:
            separator_seen = True
            positional.extend(args[i + 1:])
            break

        if dialect.is_option_token(token):
            joined = dialect.split_equals(token)
            if joined is not None:
                set_option(*joined)
                i += 1
                continue

            if i + 1 < len(args):
                following = args[i + 1]
                if following != dialect.separator and not dialect.is_option_token(following):
                    set_option(token, following)
                    i += 2
                    continue

            set_flag(token)
            i += 1
            continue

        positional.append(token)
        i += 1

    logger.debug(
        f"Partitioned {len(args)} argument(s) for {program_name!r} with dialect '{dialect.name}': "
        f"{len(positional)} positional, {len(flags)} flag(s), {len(options)} option(s)"
        + (", separator seen" if separator_seen else "")
    )

    return Partition(
        program_name=program_name,
        positional=tuple(positional),
        flags=MappingProxyType(flags),
        options=MappingProxyType(options),
        separator_seen=separator_seen,
    )
