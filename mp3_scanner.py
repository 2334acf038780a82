#!/usr/bin/env python3
"""
MP3 scanner

Walks a folder tree and collects the MP3 files a strip run should touch.

- Only files whose extension (case-insensitive) is in the music set are considered
- Optionally keeps only files whose ID3 tag carries a non-empty comment
- Never fails: unreadable files and broken tags are skipped, not reported
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from mutagen import MutagenError
from mutagen.id3 import ID3

# -------- Config --------
MUSIC_EXTS = frozenset({".mp3"})

# -------- Records --------

@dataclass(frozen=True)
class FileCandidate:
    path: Path
    ext: str
    comment: Optional[str] = None


@dataclass(frozen=True)
class ScanOutcome:
    """Either a candidate or the reason the file was left out."""
    candidate: Optional[FileCandidate] = None
    skipped: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.candidate is not None


def _skip(reason: str) -> ScanOutcome:
    return ScanOutcome(skipped=reason)

# -------- ID3 helpers --------

def read_comment(tags: ID3) -> Optional[str]:
    """Text of the first non-empty COMM frame; multiple values are joined with "/"."""
    for frame in tags.getall("COMM"):
        values = [str(t) for t in frame.text]
        if any(values):
            return "/".join(values)
    return None

# -------- Walk --------

def iter_music_files(root: Path, exts: Iterable[str] = MUSIC_EXTS) -> Iterator[Path]:
    """Yield music files under root in lexical depth-first order. Directory symlinks are not entered."""
    exts = {e.lower() for e in exts}
    try:
        entries = sorted(os.scandir(root), key=lambda e: e.name)
    except OSError:
        return
    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            yield from iter_music_files(Path(entry.path), exts)
            continue
        if os.path.splitext(entry.name)[1].lower() in exts:
            yield Path(entry.path)


def inspect_file(path: Path, require_comment: bool = False) -> ScanOutcome:
    ext = path.suffix.lower()
    try:
        with path.open("rb") as fh:
            if not require_comment:
                return ScanOutcome(candidate=FileCandidate(path, ext))
            try:
                tags = ID3(fh)
            except MutagenError:
                return _skip("no readable tag")
    except OSError:
        return _skip("cannot open")

    comment = read_comment(tags)
    if not comment:
        return _skip("no comment")
    return ScanOutcome(candidate=FileCandidate(path, ext, comment))


def scan(root: Path, require_comment: bool = False, exts: Iterable[str] = MUSIC_EXTS) -> List[FileCandidate]:
    results = (inspect_file(p, require_comment) for p in iter_music_files(root, exts))
    return [r.candidate for r in results if r.ok]
