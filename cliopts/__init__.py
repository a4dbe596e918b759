"""
cliopts

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    CliOptionsError,
    LongFormConflictError,
    MissingOptionFormError,
    OptionAlreadyExistsError,
    OptionConfigError,
    ShortFormConflictError,
)
from .option import CliOption, OptionValue
from .parser import CliOptionParser

__all__ = [
    "CliOptionParser",
    "CliOption",
    "OptionValue",
    "CliOptionsError",
    "OptionAlreadyExistsError",
    "MissingOptionFormError",
    "ShortFormConflictError",
    "LongFormConflictError",
    "OptionConfigError",
]
