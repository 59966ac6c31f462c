"""Utility functions and helpers"""

from .helpers import safe_print, make_logger, run_command
from .encoding import normalize_cue_text, read_cue_file

__all__ = ["safe_print", "make_logger", "run_command", "normalize_cue_text", "read_cue_file"]
