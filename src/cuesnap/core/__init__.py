"""Core functionality modules"""

from .paths import validate_paths, resolve_cue_path, resolve_output_folder
from .cue_reader import parse_cue_text, TrackList
from .command import build_output_format, build_command, to_command_line
from .splitter import Splitter

__all__ = [
    "validate_paths",
    "resolve_cue_path",
    "resolve_output_folder",
    "parse_cue_text",
    "TrackList",
    "build_output_format",
    "build_command",
    "to_command_line",
    "Splitter",
]
