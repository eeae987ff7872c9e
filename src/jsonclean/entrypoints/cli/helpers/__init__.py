"""CLI helpers for JSONCLEAN.

Utilities used by the command-line interface: OSC-8 terminal hyperlinks when
supported, NAME=LEVEL logger-level parsing, and message emitters that write to
stderr with emoji→ASCII fallbacks.
"""

from .hyperlinks import hyperlink
from .log_level_parser import parse_log_level
from .messages import error, success, warn

__all__ = ["error", "hyperlink", "parse_log_level", "success", "warn"]
