# nanoargs/cli/argument_parser.py

import sys
from typing import List, Optional

from nanoargs.core.dialect import get_dialect
from nanoargs.core.parsed_args import ParsedArgs, parse_args


def parse_arguments(argv: Optional[List[str]] = None, dialect_name: str = "long-with-equals") -> ParsedArgs:
    """
    Parse command line arguments with a named dialect.

    Raises:
        DialectError: If dialect_name is not a built-in dialect
    """
    dialect = get_dialect(dialect_name)
    return parse_args(sys.argv if argv is None else argv, dialect=dialect)
