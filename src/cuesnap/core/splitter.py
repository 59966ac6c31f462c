"""Split an audio file into tracks described by a cue sheet"""
from ..config import SplitOptions
from ..utils.encoding import read_cue_file
from ..utils.helpers import run_command
from .command import build_command, build_output_format, to_command_line
from .cue_reader import parse_cue_text
from .paths import resolve_cue_path, resolve_output_folder, validate_paths


def _silent(msg):
    pass


class Splitter:
    """
    One split of an audio file, driven by mp3splt.

    The audio file and cue sheet are checked when the splitter is created.
    The cue sheet itself is only read when split() is called, and read again
    on every call, so edits made in between are picked up.
    """

    def __init__(self, audio_path, cue_path=None, options=None, runner=None, log_func=None):
        """
        Args:
            audio_path: Path to the audio file to split
            cue_path: Path to the cue sheet (default: audio file name with .cue)
            options: SplitOptions or a mapping of option names to values;
                unknown names are ignored
            runner: Function running a shell command line and returning its
                exit code (default: run_command)
            log_func: Function to call for logging messages

        Raises:
            AudioFileNotFound, CueFileNotFound, CueFileTooLarge
        """
        self._audio_path = audio_path
        self._cue_path = resolve_cue_path(audio_path, cue_path)
        self._options = SplitOptions.from_mapping(options)
        self._output_folder = resolve_output_folder(audio_path, self._options)
        self.runner = runner or run_command
        self.log = log_func or _silent

        validate_paths(self._audio_path, self._cue_path)

    @property
    def audio_path(self):
        return self._audio_path

    @property
    def cue_path(self):
        return self._cue_path

    @property
    def output_folder(self):
        return self._output_folder

    @property
    def options(self):
        return self._options

    def parse_cue_file(self):
        """Read and parse the cue sheet; raises CueParseError on bad input"""
        text = read_cue_file(
            self._cue_path,
            encoding=self._options.cue_encoding,
            detect=self._options.detect_encoding,
            log_func=self.log,
        )
        return parse_cue_text(text)

    def build_command(self):
        """Parse the cue sheet and build the mp3splt argument list"""
        tracks = self.parse_cue_file()
        self.log(f"📊 Found {len(tracks)} track(s) in {self._cue_path}")

        output_format = build_output_format(len(tracks), self._options)
        return build_command(
            self._audio_path,
            self._cue_path,
            self._output_folder,
            output_format,
            quiet=self._options.quiet,
            splitter=self._options.splitter,
        )

    def command_line(self):
        """The shell command line split() would run"""
        return to_command_line(self.build_command())

    def split(self):
        """
        Split the audio file into the output folder.

        Returns:
            True if the splitter exited successfully, False otherwise

        Raises:
            CueParseError: The cue sheet could not be parsed
        """
        cmd = self.command_line()
        self.log(f"✂️ Splitting {self._audio_path} into {self._output_folder} ...")
        self.log(f"📋 Command: {cmd}")

        exit_code = self.runner(cmd, logfile=self._options.logfile)
        if exit_code != 0:
            self.log(f"❌ {self._options.splitter} failed with exit code {exit_code}")
            return False

        self.log("✅ Splitting completed successfully")
        return True
