"""
cuesnap - Command Line Entry Point

Split an audio file into tracks using its cue sheet and mp3splt.
"""
import sys
import shutil
import argparse

from .config import SplitOptions
from .errors import CueSnapError
from .core.splitter import Splitter
from .utils.helpers import safe_print, make_logger


def parse_arguments(argv=None, environ=None):
    """Parse command line arguments, with defaults from CUESNAP_* environment variables"""
    env = SplitOptions.from_env(environ)

    parser = argparse.ArgumentParser(
        prog="cuesnap",
        description="Split an audio file into tracks using a cue sheet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s album.mp3
  %(prog)s album.mp3 other.cue --output-folder tracks --quiet

Environment Variables:
  CUESNAP_OUTPUT_FOLDER  - Destination directory
  CUESNAP_FORMAT         - Custom mp3splt output format
  CUESNAP_NO_NUMBERS     - Leave out track numbers (true/false, --numbers overrides)
  CUESNAP_QUIET          - Quiet mp3splt (true/false, --no-quiet overrides)
  CUESNAP_SPLITTER       - Splitter executable
  CUESNAP_LOGFILE        - File to append splitter output to
"""
    )

    parser.add_argument("audio_file", help="Audio file to split")
    parser.add_argument(
        "cue_file",
        nargs="?",
        default=None,
        help="Cue sheet (default: audio file name with .cue)"
    )
    parser.add_argument(
        "-o", "--output-folder",
        default=env.output_folder,
        help="Destination directory (default: audio file name, env: CUESNAP_OUTPUT_FOLDER)"
    )
    parser.add_argument(
        "-f", "--format",
        default=env.format,
        help="Custom mp3splt output format (env: CUESNAP_FORMAT)"
    )
    numbers = parser.add_mutually_exclusive_group()
    numbers.add_argument(
        "-n", "--no-numbers",
        dest="no_numbers",
        action="store_true",
        default=env.no_numbers,
        help=f"Do not prefix file names with track numbers (default: {env.no_numbers}, env: CUESNAP_NO_NUMBERS)"
    )
    numbers.add_argument(
        "--numbers",
        dest="no_numbers",
        action="store_false",
        help="Prefix file names with track numbers, overriding CUESNAP_NO_NUMBERS"
    )
    parser.add_argument(
        "-q", "--quiet",
        action=argparse.BooleanOptionalAction,
        default=env.quiet,
        help="Keep mp3splt quiet (env: CUESNAP_QUIET)"
    )
    parser.add_argument(
        "--cue-encoding",
        default=env.cue_encoding,
        help="Cue sheet character encoding (default: UTF-8)"
    )
    parser.add_argument(
        "--detect-encoding",
        action=argparse.BooleanOptionalAction,
        default=env.detect_encoding,
        help="Guess the cue sheet character encoding"
    )
    parser.add_argument(
        "--splitter",
        default=env.splitter,
        help=f"Splitter executable (default: {env.splitter}, env: CUESNAP_SPLITTER)"
    )
    parser.add_argument(
        "--logfile",
        default=env.logfile,
        help="Append splitter output to this file (env: CUESNAP_LOGFILE)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        help="Only print the command that would be run"
    )

    return parser.parse_args(argv)


def options_from_args(args):
    return SplitOptions.from_mapping(vars(args))


def main(argv=None, environ=None):
    """Main entry point; returns the process exit code"""
    args = parse_arguments(argv, environ)
    options = options_from_args(args)
    log = make_logger("cuesnap")

    try:
        splitter = Splitter(args.audio_file, args.cue_file, options, log_func=log)

        if args.dry_run:
            safe_print(splitter.command_line())
            return 0

        if not shutil.which(options.splitter):
            log(f"⚠️ '{options.splitter}' not found on PATH")

        return 0 if splitter.split() else 1
    except (CueSnapError, OSError) as e:
        log(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
