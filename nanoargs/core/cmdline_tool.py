# nanoargs/core/cmdline_tool.py

import sys
from typing import Any, Generic, Iterable, List, Optional, Type, TypeVar

from .converters import convert
from .dialect import SHORT_AND_LONG
from .exceptions import MissingArgumentError
from .tokenizer import partition

T = TypeVar("T")

class ArgValue(Generic[T]):
    """Result of a typed lookup: either a converted value or nothing"""

    __slots__ = ("_name", "_value", "_present")

    def __init__(self, name: str, value: Optional[T] = None, present: bool = False):
        self._name = name
        self._value = value
        self._present = present

    @property
    def name(self) -> str:
        return self._name

    @property
    def has_value(self) -> bool:
        return self._present

    def value(self) -> T:
        """
        Return the converted value.

        Raises:
            MissingArgumentError: If the argument was not supplied
        """
        if not self._present:
            raise MissingArgumentError(self._name)
        return self._value

    def value_or(self, default: Any) -> Any:
        return self._value if self._present else default

    def __bool__(self) -> bool:
        return self._present

    def __eq__(self, other) -> bool:
        if not isinstance(other, ArgValue):
            return NotImplemented
        return (self._name, self._present, self._value) == (other._name, other._present, other._value)

    def __repr__(self) -> str:
        if self._present:
            return f"ArgValue({self._name!r}, {self._value!r})"
        return f"ArgValue({self._name!r}, <missing>)"


class CmdLineTool:
    """
    Class-based accessor over an argc/argv pair.

    Both '-x' and '--name' tokens are recognized and keys are looked up
    exactly as they were typed, prefix included.
    """

    dialect = SHORT_AND_LONG

    def __init__(self, argc: int, argv: Optional[Iterable[str]]):
        self._partition = partition(argv, self.dialect, argc=argc)

    @classmethod
    def from_argv(cls, argv: Optional[List[str]] = None) -> "CmdLineTool":
        """Build from a full argument list, sys.argv by default"""
        if argv is None:
            argv = sys.argv
        argv = list(argv)
        return cls(len(argv), argv)

    def flag(self, name: str) -> bool:
        return name in self._partition.flags

    def has(self, name: str) -> bool:
        return self._partition.contains(name)

    def get(self, name: str, type_: Type[T] = str) -> ArgValue[T]:
        """
        Look up an argument and convert it to type_.

        A flag given without a value reads as the empty string.

        Raises:
            InvalidFormatError: If the value is present but not a valid type_
        """
        raw = self._partition.lookup(name)
        if raw is None:
            return ArgValue(name)
        return ArgValue(name, convert(name, raw, type_), present=True)

    def get_or(self, name: str, default: str) -> str:
        raw = self._partition.lookup(name)
        return default if raw is None else raw

    def positional(self) -> List[str]:
        return list(self._partition.positional)

    def program_name(self) -> str:
        return self._partition.program_name

    def __repr__(self) -> str:
        p = self._partition
        return (
            f"CmdLineTool(program={p.program_name!r}, positional={list(p.positional)!r}, "
            f"flags={sorted(p.flags)!r}, options={dict(p.options)!r})"
        )
