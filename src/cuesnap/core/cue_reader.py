"""Cue sheet parsing through the cueparser library"""
from collections import namedtuple

import cueparser

from ..errors import CueParseError


Track = namedtuple("Track", ["number", "title", "performer"])


class TrackList:
    """Tracks of a parsed cue sheet, in cue sheet order"""

    def __init__(self, tracks, title=None, performer=None):
        self.tracks = list(tracks)
        self.title = title
        self.performer = performer

    def __len__(self):
        return len(self.tracks)

    def __iter__(self):
        return iter(self.tracks)

    def __getitem__(self, index):
        return self.tracks[index]


def _to_track(position, cue_track):
    number = getattr(cue_track, "number", None) or position
    return Track(
        number=number,
        title=getattr(cue_track, "title", None),
        performer=getattr(cue_track, "performer", None),
    )


def _drop_blank_lines(text):
    return "\n".join(line for line in text.splitlines() if line.strip())


def parse_cue_text(text):
    """
    Parse cue sheet text.

    Args:
        text: Cue sheet content, already cleaned up by normalize_cue_text

    Returns:
        TrackList with one entry per TRACK command

    Raises:
        CueParseError: The text is not a usable cue sheet
    """
    if not text or not text.strip():
        raise CueParseError("Cue sheet is empty")

    cue_sheet = cueparser.CueSheet()
    cue_sheet.setOutputFormat('', '')
    try:
        # cueparser stops at the first empty line
        cue_sheet.setData(_drop_blank_lines(text))
        cue_sheet.parse()
    except Exception as e:
        raise CueParseError(f"Could not parse cue sheet: {e}") from e

    tracks = [_to_track(i, t) for i, t in enumerate(cue_sheet.tracks or [], 1)]
    return TrackList(
        tracks,
        title=getattr(cue_sheet, "title", None),
        performer=getattr(cue_sheet, "performer", None),
    )
