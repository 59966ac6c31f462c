"""
cuesnap - Split an audio file into tracks using a cue sheet

This package provides functionality to:
- Validate an audio file and its cue sheet
- Parse the cue sheet into a track list
- Build a safely quoted mp3splt command line
- Run mp3splt and report whether the split succeeded
"""

__version__ = "1.0.0"
__author__ = "cuesnap Project"

from .config import SplitOptions
from .core.splitter import Splitter
from .errors import (
    CueSnapError,
    AudioFileNotFound,
    CueFileNotFound,
    CueFileTooLarge,
    CueParseError,
)

__all__ = [
    "SplitOptions",
    "Splitter",
    "CueSnapError",
    "AudioFileNotFound",
    "CueFileNotFound",
    "CueFileTooLarge",
    "CueParseError",
]
