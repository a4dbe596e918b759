# cliopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""Package-wide logger for cliopts."""
import logging

logger: logging.Logger = logging.getLogger("cliopts")
