"""
Tests for the mp3splt output format and command line
"""
import shlex
import unittest

from cuesnap.config import SplitOptions
from cuesnap.core import command


class TestOutputFormat(unittest.TestCase):

    def test_number_placeholder_width(self):
        for count in range(0, 9):
            self.assertEqual(command.number_placeholder(count), "@N")
        for count in (9, 42, 98):
            self.assertEqual(command.number_placeholder(count), "@N2")
        self.assertEqual(command.number_placeholder(99), "@N3")

    def test_default_format_with_numbers(self):
        self.assertEqual(command.build_output_format(5, SplitOptions()), "@N @p - @t")
        self.assertEqual(command.build_output_format(12, SplitOptions()), "@N2 @p - @t")

    def test_no_numbers(self):
        options = SplitOptions(no_numbers=True)
        self.assertEqual(command.build_output_format(12, options), "@p - @t")

    def test_custom_format_used_verbatim(self):
        options = SplitOptions(format="custom", no_numbers=False)
        self.assertEqual(command.build_output_format(12, options), "custom")

    def test_zero_tracks(self):
        self.assertEqual(command.build_output_format(0, SplitOptions()), "@N @p - @t")


class TestBuildCommand(unittest.TestCase):

    def test_argument_order(self):
        cmd = command.build_command("album.mp3", "album.cue", "album", "@N @p - @t")
        self.assertEqual(cmd, [
            "mp3splt", "-d", "album", "-o", "@N @p - @t", "-c", "album.cue", "album.mp3",
        ])

    def test_quiet_flag_before_audio(self):
        cmd = command.build_command("a.mp3", "a.cue", "a", "@t", quiet=True, splitter="splt")
        self.assertEqual(cmd[0], "splt")
        self.assertEqual(cmd[-2:], ["-Q", "a.mp3"])

    def test_command_line_keeps_each_argument_as_one_token(self):
        cmd = command.build_command(
            "/music/My Song.mp3", "/music/My Song.cue", "My Song", "@N2 @p - @t")
        line = command.to_command_line(cmd)
        self.assertEqual(shlex.split(line), cmd)
        self.assertIn("'/music/My Song.mp3'", line)

    def test_shell_metacharacters_are_quoted(self):
        cmd = command.build_command("x; rm -rf ~.mp3", "$(id).cue", "`out`", "@t & @p")
        self.assertEqual(shlex.split(command.to_command_line(cmd)), cmd)

    def test_custom_format_is_escaped_as_is(self):
        line = command.to_command_line(["mp3splt", "-o", "custom"])
        self.assertEqual(line, "mp3splt -o custom")


if __name__ == "__main__":
    unittest.main()
