# cliopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CliOptionParser`, a small lenient option scanner.

Options are registered under a caller-facing name with a short form (`-c`),
a long form (`--count`), or both. Scanning classifies every raw token as an
option hit or a positional argument and collects option values as it goes.

Accepted spellings:
- `--long` and `--long=value` (split on the first `=` only)
- `-x` and `-xVALUE` (the first two characters are the flag)
- anything without a leading `-` is positional

Unknown flags are dropped: they raise nothing and never show up among the
positional arguments.

Example Usage:
    parser = CliOptionParser(header="usage: tool [options]", footer="")
    parser.register_option("-c", "--count", "Number of items", "count")

    positional = parser.parse_from(["tool", "-c123", "--count=456", "file"])

    # positional == ["tool", "file"]
    # parser.get_option_values("count") == ["123", "456"]

    print(parser.help_text())
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Iterable

from rich.console import Console

from cliopts.console import console as shared_console
from cliopts.exceptions import (
    LongFormConflictError,
    MissingOptionFormError,
    OptionAlreadyExistsError,
    ShortFormConflictError,
)
from cliopts.logger import logger
from cliopts.option import CliOption, OptionValue

LONG_PREFIX = "--"
SHORT_PREFIX = "-"
VALUE_SEPARATOR = "="


class CliOptionParser:
    """
    Registers options, scans argument vectors and answers lookups.

    Ignores invalid arguments passed. The parser owns four tables: definitions
    and value states keyed by option name, and the short and long form indexes
    pointing back at names. They are only changed by `register_option()` and
    the scanning methods.
    """

    def __init__(
        self,
        header: str = "",
        footer: str = "",
        console: Console | None = None,
    ) -> None:
        self._header: str = header
        self._footer: str = footer
        self.console: Console = console or shared_console
        self._options: dict[str, CliOption] = {}
        self._values: dict[str, OptionValue] = {}
        self._short_forms: dict[str, str] = {}
        self._long_forms: dict[str, str] = {}
        self._empty_values: list[str] = []

    @property
    def header(self) -> str:
        return self._header

    @property
    def footer(self) -> str:
        return self._footer

    def register_option(
        self,
        short_form: str | None,
        long_form: str | None,
        help_text: str,
        name: str,
    ) -> None:
        """
        Register an option that can later be looked up by `name`.

        Args:
            short_form (str | None): Short flag, e.g. `-c`.
            long_form (str | None): Long flag, e.g. `--count`.
            help_text (str): Help text shown by `help_text()`.
            name (str): Unique key for `is_enabled()` and `get_option_values()`.

        Raises:
            OptionAlreadyExistsError: `name` is already registered.
            MissingOptionFormError: both forms are None.
            ShortFormConflictError: `short_form` is bound to another option.
            LongFormConflictError: `long_form` is bound to another option.
        """
        if name in self._options:
            raise OptionAlreadyExistsError(name)

        if short_form is None and long_form is None:
            raise MissingOptionFormError(name)

        if short_form is not None and short_form in self._short_forms:
            raise ShortFormConflictError(short_form, self._short_forms[short_form])

        if long_form is not None and long_form in self._long_forms:
            raise LongFormConflictError(long_form, self._long_forms[long_form])

        if short_form is not None:
            self._short_forms[short_form] = name
        if long_form is not None:
            self._long_forms[long_form] = name

        self._options[name] = CliOption(
            name=name,
            short_form=short_form,
            long_form=long_form,
            help_text=help_text,
        )
        self._values[name] = OptionValue()
        logger.debug(
            "Registered option '%s' (short=%s, long=%s)", name, short_form, long_form
        )

    def parse(self) -> list[str]:
        """Scan the process argument vector. See `parse_from()`."""
        return self.parse_from(sys.argv)

    def parse_from(self, tokens: Iterable[str]) -> list[str]:
        """
        Scan `tokens`, recording option hits, and return the positional arguments.

        The first token is not special-cased: a program name passed in
        position 0 comes back as the first positional argument.

        Args:
            tokens (Iterable[str]): Raw argument tokens, in order.

        Returns:
            list[str]: Tokens without a `-` prefix, in their original order.
        """
        positional: list[str] = []
        for token in tokens:
            if token.startswith(LONG_PREFIX):
                self._handle_long(token)
            elif token.startswith(SHORT_PREFIX):
                self._handle_short(token)
            else:
                positional.append(token)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Scan finished: %d positional, enabled=%s",
                len(positional),
                [name for name, state in self._values.items() if state.is_enabled],
            )
        return positional

    def _handle_long(self, token: str) -> None:
        if VALUE_SEPARATOR in token:
            option_text, _, value_text = token.partition(VALUE_SEPARATOR)
            self._enable(self._long_forms, option_text, token, value_text)
        else:
            self._enable(self._long_forms, token, token)

    def _handle_short(self, token: str) -> None:
        if len(token) > 1:
            option_text, value_text = token[:2], token[2:]
            self._enable(self._short_forms, option_text, token, value_text)
        else:
            self._enable(self._short_forms, token, token)

    def _enable(
        self,
        form_index: dict[str, str],
        option_text: str,
        token: str,
        value: str | None = None,
    ) -> None:
        name = form_index.get(option_text)
        if name is None:
            logger.debug("Ignoring unrecognized argument: %s", token)
            return
        self._values.setdefault(name, OptionValue()).enable(value)

    def is_enabled(self, name: str) -> bool:
        """Check if an option with the given `name` was present in the scanned input."""
        state = self._values.get(name)
        if state is None:
            return False
        return state.is_enabled

    def get_option_values(self, name: str) -> list[str]:
        """
        Return the values collected for `name`, in scan order.

        An option that is unknown or was not enabled yields a shared empty
        list. Callers must not mutate it.
        """
        if not self.is_enabled(name):
            return self._empty_values
        return self._values[name].values

    def __getitem__(self, name: str) -> list[str]:
        return self.get_option_values(name)

    def get_option(self, name: str) -> CliOption | None:
        """Return the registered definition for `name`, if any."""
        return self._options.get(name)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert registered options into a serializable list of dicts.

        The entries use the same keys an option configuration file accepts.
        """
        return [option.to_dict() for option in self._options.values()]

    def help_text(self) -> str:
        """
        Render the help message.

        Layout: header, blank line, one row per option, blank line, footer,
        trailing blank line. Each row holds the short form column, the long
        form column and the help text. A form column is left out when no
        option has that form. Extra help lines are indented to the help column.
        """
        short_width = max(
            (len(option.short_form or "") for option in self._options.values()),
            default=0,
        )
        long_width = max(
            (len(option.long_form or "") for option in self._options.values()),
            default=0,
        )
        widths = [width for width in (short_width, long_width) if width]
        continuation = "\n\t" + " " * sum(width + 1 for width in widths)

        rows = []
        for option in self._options.values():
            columns = []
            if short_width:
                columns.append((option.short_form or "").ljust(short_width))
            if long_width:
                columns.append((option.long_form or "").ljust(long_width))
            columns.append(option.help_text.replace("\n", continuation))
            rows.append("\t" + " ".join(columns))

        lines = [self._header, "", *rows, "", self._footer, ""]
        return "\n".join(lines) + "\n"

    def render_help(self) -> None:
        """
        Print the help message to the parser's console.

        Rich expands tabs while printing, so the output equals
        `help_text().expandtabs(self.console.tab_size)`.
        """
        self.console.print(
            self.help_text(), markup=False, highlight=False, end="", soft_wrap=True
        )

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __len__(self) -> int:
        return len(self._options)

    def __str__(self) -> str:
        enabled = sum(state.is_enabled for state in self._values.values())
        return (
            f"CliOptionParser(options={len(self._options)}, "
            f"short_forms={len(self._short_forms)}, "
            f"long_forms={len(self._long_forms)}, enabled={enabled})"
        )

    def __repr__(self) -> str:
        return str(self)
