"""
cliopts

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Inspect how an argument vector is scanned against an option file:

    python -m cliopts --file=options.yaml -- -c123 --count=456 input.txt
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Any, Sequence

from rich.markup import escape
from rich.table import Table

from cliopts.config import loader
from cliopts.console import console
from cliopts.exceptions import CliOptionsError
from cliopts.logger import logger
from cliopts.parser import CliOptionParser
from cliopts.utils import setup_logging

PASSTHROUGH_MARKER = "--"


def get_inspector_parser() -> CliOptionParser:
    program = "python -m cliopts"
    parser = CliOptionParser(
        header=(
            f"usage: {program} [-h] [-v] [--json] -fPATH -- [ARGS ...]\n\n"
            "Scan ARGS against the options declared in a YAML or TOML file."
        ),
        footer="Tokens after '--' are scanned with the loaded options.",
    )
    parser.register_option("-h", "--help", "Show this help message.", "help")
    parser.register_option("-v", "--verbose", "Enable debug logging.", "verbose")
    parser.register_option(
        "-f",
        "--file",
        "Option file to load (.yaml, .yml or .toml).\nUse --file=PATH or -fPATH.",
        "file",
    )
    parser.register_option(None, "--json", "Print the scan result as JSON.", "json")
    return parser


def split_passthrough(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split `argv` at the first `--` into own and passthrough tokens."""
    tokens = list(argv)
    if PASSTHROUGH_MARKER in tokens:
        index = tokens.index(PASSTHROUGH_MARKER)
        return tokens[:index], tokens[index + 1 :]
    return tokens, []


def scan_result(parser: CliOptionParser, positional: list[str]) -> dict[str, Any]:
    options = {
        definition["name"]: {
            "enabled": parser.is_enabled(definition["name"]),
            "values": list(parser.get_option_values(definition["name"])),
        }
        for definition in parser.to_definition_list()
    }
    return {"options": options, "positional": positional}


def render_table(parser: CliOptionParser, positional: list[str]) -> None:
    table = Table(title="Options", show_lines=False)
    table.add_column("Name", style="bold")
    table.add_column("Short")
    table.add_column("Long")
    table.add_column("Enabled")
    table.add_column("Values")
    for definition in parser.to_definition_list():
        name = definition["name"]
        table.add_row(
            name,
            definition["short_form"] or "",
            definition["long_form"] or "",
            "yes" if parser.is_enabled(name) else "no",
            ", ".join(repr(value) for value in parser.get_option_values(name)),
        )
    console.print(table)
    console.print(f"positional: {positional}", markup=False)


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    own_args, passthrough = split_passthrough(argv)

    inspector = get_inspector_parser()
    own_positional = inspector.parse_from(own_args)

    if inspector.is_enabled("verbose"):
        setup_logging(console_log_level=logging.DEBUG)

    file_values = inspector["file"] or own_positional
    if inspector.is_enabled("help") or not file_values:
        inspector.render_help()
        return 0

    try:
        parser = loader(file_values[-1])
    except (CliOptionsError, FileNotFoundError) as error:
        logger.debug("Failed to load option file: %s", error)
        console.print(f"[bold red]error:[/] {escape(str(error))}", soft_wrap=True)
        return 1

    positional = parser.parse_from(passthrough)
    if inspector.is_enabled("json"):
        console.print(
            json.dumps(scan_result(parser, positional), indent=2),
            markup=False,
            soft_wrap=True,
        )
    else:
        render_table(parser, positional)
    return 0


if __name__ == "__main__":
    sys.exit(main())
