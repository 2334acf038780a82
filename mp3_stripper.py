#!/usr/bin/env python3
"""
MP3 tag stripper

Deletes a fixed set of ID3v2 frames from MP3 files in place. Audio data is left
alone; mutagen only rewrites the tag region.

Profiles
- comments: COMM, TXXX, USLT, SYLT
- metadata: the comment frames plus cover art (APIC), copyright (TCOP) and
  every URL frame (WXXX, WOAF, WOAR, WOAS, WORS, WCOM, WPUB)
"""

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional, Tuple

from mutagen import MutagenError
from mutagen.id3 import ID3, ID3NoHeaderError

# -------- Config --------
BAR_WIDTH = 40
BAR_FILL = "█"

COMMENT_FRAMES = (
    "COMM",  # comment
    "TXXX",  # user-defined text
    "USLT",  # unsynchronised lyrics
    "SYLT",  # synchronised lyrics
)

URL_FRAMES = (
    "WXXX",  # user-defined URL
    "WOAF",  # official audio file page
    "WOAR",  # official artist page
    "WOAS",  # official audio source page
    "WORS",  # official radio station homepage
    "WCOM",  # commercial information
    "WPUB",  # publisher page
)

METADATA_FRAMES = COMMENT_FRAMES + ("APIC", "TCOP") + URL_FRAMES

# -------- Profiles --------

@dataclass(frozen=True)
class StripProfile:
    name: str
    frames: Tuple[str, ...]
    require_comment: bool
    headline: str
    nothing_found: str


COMMENT_PROFILE = StripProfile(
    name="comments",
    frames=COMMENT_FRAMES,
    require_comment=True,
    headline="The following MP3 files will have their COMMENT removed:",
    nothing_found="No MP3 files with comments found.",
)

METADATA_PROFILE = StripProfile(
    name="metadata",
    frames=METADATA_FRAMES,
    require_comment=False,
    headline="The following MP3 files will have comments, lyrics, cover art, copyright and URLs removed:",
    nothing_found="No MP3 files found.",
)

# -------- Editing --------

@dataclass
class StripResult:
    path: Path
    status: str
    removed: Tuple[str, ...] = field(default_factory=tuple)
    detail: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.status in ("open-error", "save-error")


def _save_version(tags: ID3) -> int:
    # mutagen writes v2.3 or v2.4 only; keep v2.3 tags as v2.3
    return 3 if tags.version[:2] == (2, 3) else 4


def strip_frames(path: Path, frame_ids: Iterable[str]) -> StripResult:
    """
    Delete every frame named in frame_ids and save the file.

    Missing frames are fine. When nothing matched the file is not written at all,
    so running this twice on the same file changes nothing the second time.
    """
    try:
        tags = ID3(path, translate=False)
    except ID3NoHeaderError:
        return StripResult(path, "clean", detail="no ID3 tag")
    except (MutagenError, OSError) as e:
        return StripResult(path, "open-error", detail=str(e))

    # v2.3 frames are written back untouched; anything else goes out as v2.4
    if tags.version[:2] != (2, 3):
        tags.update_to_v24()

    removed = []
    for frame_id in frame_ids:
        if tags.getall(frame_id):
            tags.delall(frame_id)
            removed.append(frame_id)

    if not removed:
        return StripResult(path, "clean")

    try:
        tags.save(path, v2_version=_save_version(tags))
    except (MutagenError, OSError) as e:
        return StripResult(path, "save-error", removed=tuple(removed), detail=str(e))
    return StripResult(path, "ok", removed=tuple(removed))

# -------- Progress --------

def format_progress_bar(current: int, total: int, width: int = BAR_WIDTH) -> str:
    filled = int(current / total * width) if total else width
    filled = max(0, min(width, filled))
    return f"[{BAR_FILL * filled}{' ' * (width - filled)}] {current}/{total}"


def draw_progress_bar(current: int, total: int, stream=None):
    stream = stream or sys.stdout
    print("\r" + format_progress_bar(current, total), end="", flush=True, file=stream)
