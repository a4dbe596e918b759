# cliopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the data records kept by `CliOptionParser`.

- `CliOption`: the immutable declaration of one option (name, forms, help).
- `OptionValue`: the mutable scan state of one option (enabled flag, values).
"""
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CliOption:
    """
    Represents a registered command-line option.

    Attributes:
        name (str): Caller-facing key used for lookups.
        short_form (str | None): Short flag token, e.g. `-c`.
        long_form (str | None): Long flag token, e.g. `--count`.
        help_text (str): Help text, may span several lines.
    """

    name: str
    short_form: str | None = None
    long_form: str | None = None
    help_text: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "short_form": self.short_form,
            "long_form": self.long_form,
            "help_text": self.help_text,
        }


@dataclass
class OptionValue:
    """Tracks whether an option was seen and the values it collected."""

    is_enabled: bool = False
    values: list[str] = field(default_factory=list)

    def enable(self, value: str | None = None) -> None:
        """Mark the option as seen, appending `value` when one was given."""
        self.is_enabled = True
        if value is not None:
            self.values.append(value)
