"""
OBJDIST Errors
==============

Only input failures are structured. Field and filename parse failures are
handled where they happen; output failures are left to propagate and end
the process.
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class ObjdistError(Exception):
    """Base class for objdist errors."""
    pass


class InputError(ObjdistError):
    """
    Raised when the input directory or an input file cannot be read.

    The run cannot continue; the CLI prints the message and exits with
    exit_code.
    """

    def __init__(self, message: str, exit_code: int = 1, internal_error: Optional[Exception] = None):
        self.message = message
        self.exit_code = exit_code
        self.internal_error = internal_error

        if internal_error is not None:
            logger.debug(f"{message} (internal: {internal_error!r})")

        super().__init__(message)
