# nanoargs/cli/application.py

import sys
import logging
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from nanoargs import __version__, __project_name__
from nanoargs.cli.argument_parser import parse_arguments
from nanoargs.core.config_manager import ConfigManager
from nanoargs.core.exceptions import NanoArgsError
from nanoargs.core.logger_setup import setup_logging
from nanoargs.core.tokenizer import Partition

logger = logging.getLogger(__name__)


def build_table(parsed: Partition, dialect_name: str) -> Table:
    """Render a partition as a Rich table, one row per classified token"""
    table = Table(title=f"{__project_name__} v{__version__} ({dialect_name})")
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Value", style="green")

    table.add_row("program", "", parsed.program_name)
    for index, value in enumerate(parsed.positional):
        table.add_row("positional", str(index), value)
    for name in parsed.flags:
        table.add_row("flag", name, "")
    for name, value in parsed.options.items():
        table.add_row("option", name, value)
    return table


def report_error(console: Console, error: NanoArgsError):
    console.print(f"Error: {error}", style="bold red", markup=False)
    for step in error.recovery_steps:
        console.print(f"  - {step}", markup=False)


def main(argv: Optional[List[str]] = None, config_path=None, console: Optional[Console] = None) -> int:
    """
    Show how an argument vector is classified.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    console = console or Console()
    config = ConfigManager(config_path).load_config()
    setup_logging(
        log_level=getattr(logging, config.log_level),
        log_to_file=config.log_to_file,
        log_file_rotation=config.log_file_rotation,
        log_file_max_size=config.log_file_max_size
    )

    try:
        args = parse_arguments(sys.argv if argv is None else argv, dialect_name=config.dialect)
    except NanoArgsError as e:
        logger.error(f"Cannot inspect arguments: {e}")
        report_error(console, e)
        return 1

    console.print(build_table(args.partition, config.dialect))
    return 0
