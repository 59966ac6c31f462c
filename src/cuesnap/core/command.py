"""mp3splt output format and command line construction"""
import shlex

from ..config import DEFAULT_SPLITTER


DEFAULT_FORMAT = "@p - @t"


def number_width(track_count):
    """Digits needed to number the tracks, based on track_count + 1"""
    return len(str(track_count + 1))


def number_placeholder(track_count):
    """mp3splt track number placeholder, zero padded when more than one digit is needed"""
    width = number_width(track_count)
    return f"@N{width if width > 1 else ''}"


def build_output_format(track_count, options):
    """
    Get the mp3splt output file name template.

    A custom format from the options is used as is. Otherwise the template
    is "performer - title", prefixed with the track number unless the
    no_numbers option is set.

    Args:
        track_count: Number of tracks in the cue sheet
        options: SplitOptions for this split

    Returns:
        Template string, not yet escaped for the shell
    """
    if options.format:
        return options.format

    output_format = DEFAULT_FORMAT
    if not options.no_numbers:
        output_format = f"{number_placeholder(track_count)} {output_format}"
    return output_format


def build_command(audio_path, cue_path, output_folder, output_format,
                  quiet=False, splitter=DEFAULT_SPLITTER):
    """
    Build the mp3splt argument list.

    Returns:
        List of arguments, executable first and audio file last
    """
    cmd = [splitter,
           "-d", output_folder,
           "-o", output_format,
           "-c", cue_path]
    if quiet:
        cmd.append("-Q")
    cmd.append(audio_path)
    return cmd


def to_command_line(cmd):
    """Join an argument list into a shell command line, quoting every argument"""
    return " ".join(shlex.quote(str(c)) for c in cmd)
