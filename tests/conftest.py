from pathlib import Path

import pytest
from mutagen.id3 import APIC, COMM, ID3, TCOP, TIT2, TPE1, TXXX, USLT, WOAR, WXXX

# fake MPEG frame header followed by filler; mutagen's ID3 class never looks at it
PAYLOAD = b"\xff\xfb\x90\x64" + bytes(range(256)) * 16


def make_mp3(path: Path, frames=(), payload: bytes = PAYLOAD, v2_version: int = 3) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(payload)
    if frames:
        tags = ID3()
        for frame in frames:
            tags.add(frame)
        tags.save(path, v2_version=v2_version)
    return path


def comment(text):
    return COMM(encoding=3, lang="eng", desc="", text=text)


def title(text="Song"):
    return TIT2(encoding=3, text=text)


def full_frame_set():
    return [
        title(),
        TPE1(encoding=3, text="Artist"),
        comment("ripped by X"),
        TXXX(encoding=3, desc="SOURCE", text="rip"),
        USLT(encoding=3, lang="eng", desc="", text="la la la"),
        APIC(encoding=3, mime="image/jpeg", type=3, desc="Cover", data=b"\xff\xd8\xff" + b"0" * 64),
        TCOP(encoding=3, text="2020 Someone"),
        WXXX(encoding=0, desc="home", url="http://example.com"),
        WOAR(url="http://example.com/artist"),
    ]


@pytest.fixture
def mp3(tmp_path):
    def _make(name, frames=(), **kw):
        return make_mp3(tmp_path / name, frames, **kw)
    return _make
