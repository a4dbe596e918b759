# cliopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by cliopts.

Registration errors signal a defect in the calling program's setup code: an
option name or form registered twice, or an option declared without any form.
They are raised before the parser tables are touched, so a failed registration
never leaves partial state behind.

Scanning never raises. Unknown flags are dropped silently.

Exception Hierarchy:
- CliOptionsError
    ├── OptionAlreadyExistsError
    ├── MissingOptionFormError
    ├── ShortFormConflictError
    ├── LongFormConflictError
    └── OptionConfigError
"""


class CliOptionsError(Exception):
    """Base exception for cliopts."""


class OptionAlreadyExistsError(CliOptionsError):
    """Exception raised when an option with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"name : {name} already registered as option")
        self.name = name


class MissingOptionFormError(CliOptionsError):
    """Exception raised when an option has neither a short nor a long form."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Both long form and short form cannot be none for name : {name}"
        )
        self.name = name


class ShortFormConflictError(CliOptionsError):
    """Exception raised when a short form is already bound to another option."""

    def __init__(self, short_form: str, existing: str) -> None:
        super().__init__(
            f"Short form {short_form} already defined for option '{existing}'"
        )
        self.short_form = short_form
        self.existing = existing


class LongFormConflictError(CliOptionsError):
    """Exception raised when a long form is already bound to another option."""

    def __init__(self, long_form: str, existing: str) -> None:
        super().__init__(
            f"Long form {long_form} already defined for option '{existing}'"
        )
        self.long_form = long_form
        self.existing = existing


class OptionConfigError(CliOptionsError):
    """Exception raised when an option configuration file cannot be used."""
