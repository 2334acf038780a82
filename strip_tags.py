#!/usr/bin/env python3
"""
MP3 comment / metadata stripper

Drop it next to your music folder and run it. It scans every MP3 below its own
directory, lists the files it would change and asks before touching anything.

Commands:
  strip-mp3-comments [--dry-run]   remove comments, user text and lyrics
  strip-mp3-metadata [--dry-run]   also remove cover art, copyright and URLs

  --dry-run   show what would be changed, but do not write anything

Usage examples:
  python strip_tags.py
  python strip_tags.py --dry-run
"""

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from colorama import Fore, Style, just_fix_windows_console

from mp3_scanner import MUSIC_EXTS, FileCandidate, scan
from mp3_stripper import COMMENT_PROFILE, METADATA_PROFILE, StripProfile, draw_progress_bar, strip_frames

# -------- Config --------
DRY_RUN_DELAY = 0.05  # seconds; only there so the bar is visible
AFFIRMATIVE = ("y", "yes")


@dataclass(frozen=True)
class RunConfig:
    root: Path
    profile: StripProfile
    dry_run: bool = False
    dry_run_delay: float = DRY_RUN_DELAY
    extensions: frozenset = MUSIC_EXTS


def app_root() -> Path:
    """Folder of the running program (the frozen executable, or the launched script)."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(sys.argv[0]).resolve().parent

# -------- CLI --------

def parse_args(argv=None, prog=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog=prog,
        description="Strip ID3 comment frames (or all extra metadata) from MP3s next to this program.",
    )
    p.add_argument("--dry-run", action="store_true",
                   help="Show what would be changed, but do not write anything")
    return p.parse_args(argv)

# -------- Review --------

def is_affirmative(answer: str) -> bool:
    return answer.strip().lower() in AFFIRMATIVE


def ask_confirmation(read_line: Optional[Callable[[str], str]] = None) -> bool:
    try:
        answer = (read_line or input)("Continue? (y/N): ")
    except EOFError:
        answer = ""
    return is_affirmative(answer)


def print_review(candidates: List[FileCandidate], config: RunConfig):
    print(Fore.CYAN + config.profile.headline + Style.RESET_ALL + "\n")
    for item in candidates:
        if item.comment is not None:
            print(f" - {item.path} {Fore.YELLOW}(comment: {item.comment!r}){Style.RESET_ALL}")
        else:
            print(f" - {item.path}")
    print(f"\n{Fore.GREEN}Total: {len(candidates)} files{Style.RESET_ALL}\n")
    if config.dry_run:
        print(Fore.YELLOW + "[DRY RUN] No changes will be written.\n" + Style.RESET_ALL)

# -------- Processing --------

def process(candidates: List[FileCandidate], config: RunConfig, sleep=time.sleep) -> dict:
    total = len(candidates)
    counts = {"stripped": 0, "clean": 0, "err": 0}
    print()

    for i, item in enumerate(candidates, start=1):
        if config.dry_run:
            sleep(config.dry_run_delay)
            counts["stripped"] += 1
        else:
            res = strip_frames(item.path, config.profile.frames)
            if res.status == "open-error":
                counts["err"] += 1
                print(f"\n{Fore.RED}Error opening MP3: {item.path}{Style.RESET_ALL}")
            elif res.status == "save-error":
                counts["err"] += 1
                print(f"\n{Fore.RED}Error saving MP3: {item.path}{Style.RESET_ALL}")
            elif res.status == "ok":
                counts["stripped"] += 1
            else:
                counts["clean"] += 1
        draw_progress_bar(i, total)

    print("\n" + Fore.GREEN + "Completed successfully." + Style.RESET_ALL)
    label = "would strip" if config.dry_run else "stripped"
    print(f"[i] Done. {label}={counts['stripped']} clean={counts['clean']} "
          f"err={counts['err']} of {total}")
    return counts


def run(config: RunConfig, read_line: Optional[Callable[[str], str]] = None, sleep=time.sleep) -> int:
    """Scan, review, confirm and strip. Returns the number of files handed to the editor."""
    candidates = scan(config.root, config.profile.require_comment, config.extensions)

    if not candidates:
        print(Fore.YELLOW + config.profile.nothing_found + Style.RESET_ALL)
        return 0

    print_review(candidates, config)

    if not ask_confirmation(read_line):
        print(Fore.RED + "Cancelled." + Style.RESET_ALL)
        return 0

    process(candidates, config, sleep=sleep)
    return len(candidates)

# -------- Main --------

def main(argv=None, profile: StripProfile = COMMENT_PROFILE, prog=None):
    args = parse_args(argv, prog=prog)
    just_fix_windows_console()
    config = RunConfig(root=app_root(), profile=profile, dry_run=args.dry_run)
    run(config)


def main_comments():
    main(profile=COMMENT_PROFILE, prog="strip-mp3-comments")


def main_metadata():
    main(profile=METADATA_PROFILE, prog="strip-mp3-metadata")


if __name__ == "__main__":
    main()
