# cliopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads option declarations for `CliOptionParser` from YAML or TOML files."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from cliopts.exceptions import OptionConfigError
from cliopts.logger import logger
from cliopts.parser import CliOptionParser


class RawOption(BaseModel):
    """One option entry of a configuration file."""

    name: str
    short_form: str | None = None
    long_form: str | None = None
    help_text: str = ""

    @field_validator("short_form", "long_form")
    @classmethod
    def validate_form(cls, value: str | None) -> str | None:
        if value is not None and not value.startswith("-"):
            raise ValueError(f"Option form '{value}' must start with '-'")
        return value


class OptionsConfig(BaseModel):
    """Option set model: help header/footer plus the options to register."""

    header: str = ""
    footer: str = ""
    options: list[RawOption] = Field(default_factory=list)

    def to_parser(self) -> CliOptionParser:
        parser = CliOptionParser(header=self.header, footer=self.footer)
        for option in self.options:
            parser.register_option(
                option.short_form, option.long_form, option.help_text, option.name
            )
        return parser


def load_raw_config(path: Path) -> Any:
    suffix = path.suffix
    if suffix not in (".yaml", ".yml", ".toml"):
        raise OptionConfigError(f"Unsupported config format: {suffix}")
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix == ".toml":
                return toml.load(config_file)
            return yaml.safe_load(config_file)
    except (yaml.YAMLError, toml.TomlDecodeError, UnicodeDecodeError) as error:
        raise OptionConfigError(f"Could not parse {path}: {error}") from error


def loader(file_path: Path | str) -> CliOptionParser:
    """
    Load an option set from a YAML or TOML file and build a parser from it.

    The file should contain a mapping with an `options` list and optional
    `header` and `footer` strings. Each option entry has a `name`, at least
    one of `short_form` / `long_form`, and an optional `help_text`.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        CliOptionParser: A parser with every option registered in file order.

    Raises:
        TypeError: If `file_path` is neither a string nor a Path.
        FileNotFoundError: If the file does not exist.
        OptionConfigError: If the format is unsupported or the contents are invalid.
        CliOptionsError: If the declared options conflict with each other.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = load_raw_config(path)
    if not isinstance(raw_config, dict):
        raise OptionConfigError(
            "Configuration file must contain a mapping with a list of options.\n"
            "Example:\n"
            "header: 'usage: tool [options]'\n"
            "options:\n"
            "  - name: 'count'\n"
            "    short_form: '-c'\n"
            "    long_form: '--count'\n"
            "    help_text: 'Number of items'"
        )

    try:
        config = OptionsConfig.model_validate(raw_config)
    except ValidationError as error:
        raise OptionConfigError(f"Invalid option config {path}:\n{error}") from error

    logger.debug("Loaded %d options from %s", len(config.options), path)
    return config.to_parser()
