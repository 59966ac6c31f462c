"""Split options and their defaults"""
import os
from dataclasses import dataclass, fields


DEFAULT_SPLITTER = "mp3splt"

TRUE_VALUES = ("true", "1", "yes")


def env_flag(value):
    """Interpret an environment variable value as a boolean"""
    return str(value).strip().lower() in TRUE_VALUES


@dataclass(frozen=True)
class SplitOptions:
    """
    Options for one split.

    Attributes:
        no_numbers: Do not prefix output file names with the track number
        output_folder: Destination directory (default: audio file name)
        format: Custom mp3splt output template, used verbatim
        quiet: Ask mp3splt to keep quiet (-Q)
        cue_encoding: Decode the cue sheet with this codec
        detect_encoding: Guess the cue sheet codec with chardet
        splitter: Splitter executable
        logfile: Append the splitter's output to this file
    """
    no_numbers: bool = False
    output_folder: str = None
    format: str = None
    quiet: bool = False
    cue_encoding: str = None
    detect_encoding: bool = False
    splitter: str = DEFAULT_SPLITTER
    logfile: str = None

    @classmethod
    def from_mapping(cls, mapping=None):
        """
        Build options from a plain mapping. Unknown keys are ignored.

        Args:
            mapping: Dict-like object, an existing SplitOptions, or None

        Returns:
            SplitOptions instance
        """
        if isinstance(mapping, cls):
            return mapping
        if not mapping:
            return cls()

        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in mapping.items() if k in known}
        return cls(**values)

    @classmethod
    def from_env(cls, environ=None):
        """Read defaults from CUESNAP_* environment variables"""
        if environ is None:
            environ = os.environ

        values = {}
        for key in ("quiet", "no_numbers", "detect_encoding"):
            env_key = "CUESNAP_" + key.upper()
            if env_key in environ:
                values[key] = env_flag(environ[env_key])
        for key in ("output_folder", "format", "cue_encoding", "splitter", "logfile"):
            env_value = environ.get("CUESNAP_" + key.upper())
            if env_value:
                values[key] = env_value

        return cls(**values)
