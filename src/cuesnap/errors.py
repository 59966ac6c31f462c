"""Exceptions raised while preparing or running a split"""


class CueSnapError(Exception):
    """Base exception for all cuesnap errors."""


class AudioFileNotFound(CueSnapError):
    """Raised when the audio file to split does not exist."""


class CueFileNotFound(CueSnapError):
    """Raised when the cue sheet for the audio file does not exist."""


class CueFileTooLarge(CueSnapError):
    """Raised when the cue sheet is bigger than the allowed size."""

    def __init__(self, message="Only cue files less than 1MB are allowed."):
        super().__init__(message)


class CueParseError(CueSnapError):
    """Raised when the cue sheet text cannot be parsed."""
