"""Audio and cue sheet path resolution and validation"""
import os

from ..errors import AudioFileNotFound, CueFileNotFound, CueFileTooLarge


MAX_CUE_SIZE_MB = 1.0


def audio_basename(audio_path):
    """Base name of the audio file without its extension"""
    return os.path.splitext(os.path.basename(audio_path))[0]


def default_cue_path(audio_path):
    """The cue sheet expected next to the audio file, e.g. album.mp3 -> album.cue"""
    directory = os.path.dirname(audio_path)
    return os.path.abspath(os.path.join(directory, audio_basename(audio_path) + ".cue"))


def resolve_cue_path(audio_path, cue_path=None):
    """Use the given cue path unless it is missing or blank"""
    if cue_path and cue_path.strip():
        return cue_path
    return default_cue_path(audio_path)


def default_output_folder(audio_path):
    return audio_basename(audio_path)


def resolve_output_folder(audio_path, options):
    """The output_folder option, falling back to the audio file name"""
    return options.output_folder or default_output_folder(audio_path)


def validate_paths(audio_path, cue_path):
    """
    Make sure the audio file and cue sheet can be used for a split.

    Args:
        audio_path: Path to the audio file
        cue_path: Path to the cue sheet

    Raises:
        AudioFileNotFound: The audio file does not exist
        CueFileNotFound: The cue sheet does not exist
        CueFileTooLarge: The cue sheet is bigger than 1MB
    """
    if not audio_path or not os.path.isfile(audio_path):
        raise AudioFileNotFound(f"Audio file not found: {audio_path}")

    if not os.path.isfile(cue_path):
        raise CueFileNotFound(f"Cue file not found: {cue_path}")

    if os.path.getsize(cue_path) / 2 ** 20 > MAX_CUE_SIZE_MB:
        raise CueFileTooLarge()
