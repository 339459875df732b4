# nanoargs/core/dialect.py

import logging
from typing import Dict, Optional, Tuple
from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import DialectError

logger = logging.getLogger(__name__)

class ParserDialect(BaseModel):
    """Token classification rules shared by both accessor styles"""

    model_config = ConfigDict(frozen=True)

    name: str = "custom"
    prefixes: Tuple[str, ...] = ("--",)
    allow_equals_join: bool = False
    separator: str = "--"
    qualify_lookups: bool = False
    lookup_prefix: str = "--"

    @field_validator('prefixes')
    def validate_prefixes(cls, v):
        """Reject empty prefix sets and empty prefixes; longest prefix first"""
        if not v:
            raise DialectError("At least one prefix is required", config_key="prefixes", invalid_value=v)
        if any(not p for p in v):
            raise DialectError("Prefixes must not be empty strings", config_key="prefixes", invalid_value=v)
        return tuple(sorted(dict.fromkeys(v), key=len, reverse=True))

    @field_validator('separator')
    def validate_separator(cls, v):
        if not v:
            raise DialectError("Separator must not be empty", config_key="separator", invalid_value=v)
        return v

    def is_option_token(self, token: str) -> bool:
        """True when the token looks like a flag or option key"""
        return any(token.startswith(p) for p in self.prefixes)

    def split_equals(self, token: str) -> Optional[Tuple[str, str]]:
        """
        Split an equals-joined option token at its first '='.

        Returns:
            (key, value) or None when joining is disabled or the token has no '='
        """
        if not self.allow_equals_join or "=" not in token:
            return None
        key, value = token.split("=", 1)
        return key, value

    def canonical_name(self, name: str) -> str:
        """Map a lookup name onto the key stored in the partition"""
        if self.qualify_lookups and not self.is_option_token(name):
            return f"{self.lookup_prefix}{name}"
        return name


# Short '-x' and long '--name' tokens, space-separated values, exact-key lookups
SHORT_AND_LONG = ParserDialect(
    name="short-and-long",
    prefixes=("--", "-"),
    allow_equals_join=False,
    qualify_lookups=False,
)

# Long '--name' tokens only, '--name=value' joining, bare-name lookups
LONG_WITH_EQUALS = ParserDialect(
    name="long-with-equals",
    prefixes=("--",),
    allow_equals_join=True,
    qualify_lookups=True,
    lookup_prefix="--",
)

DIALECTS: Dict[str, ParserDialect] = {
    SHORT_AND_LONG.name: SHORT_AND_LONG,
    LONG_WITH_EQUALS.name: LONG_WITH_EQUALS,
}

def get_dialect(name: str) -> ParserDialect:
    """
    Resolve a built-in dialect by name.

    Raises:
        DialectError: If no dialect has that name
    """
    try:
        return DIALECTS[name]
    except KeyError:
        logger.debug(f"Unknown dialect requested: {name!r}")
        raise DialectError(
            f"Unknown dialect '{name}', expected one of: {', '.join(sorted(DIALECTS))}",
            dialect=name,
            config_key="dialect",
            invalid_value=name
        ) from None
