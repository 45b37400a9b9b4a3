from __future__ import annotations

import subprocess
from pathlib import Path
from typing import NamedTuple, Optional


class BuildInfo(NamedTuple):
    commit: Optional[str]
    date: Optional[str]
    dirty: bool


def _run_git(args: list[str], cwd: Path) -> Optional[str]:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(cwd), stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, FileNotFoundError, OSError):
        return None
    return out.decode().strip() or None


def _from_git_repo() -> Optional[BuildInfo]:
    here = Path(__file__).resolve().parent
    root = _run_git(["rev-parse", "--show-toplevel"], cwd=here)
    if not root:
        return None
    root_path = Path(root)
    commit = _run_git(["rev-parse", "HEAD"], cwd=root_path)
    date = _run_git(["show", "-s", "--format=%cI", "HEAD"], cwd=root_path)
    status = _run_git(["status", "--porcelain"], cwd=root_path)
    return BuildInfo(commit=commit, date=date, dirty=bool(status))


def _from_embedded_file() -> Optional[BuildInfo]:
    # Generated at build time by hatch build hook
    try:
        from . import _build_info  # type: ignore
    except ImportError:
        return None
    commit = getattr(_build_info, "COMMIT", None)
    date = getattr(_build_info, "DATE", None)
    return BuildInfo(commit=commit, date=date, dirty=False)


def get_build_info() -> BuildInfo:
    # Priority: live git repo -> embedded file -> unknowns
    for getter in (_from_git_repo, _from_embedded_file):
        info = getter()
        if info and (info.commit or info.date):
            return info
    return BuildInfo(commit=None, date=None, dirty=False)


def get_version_string() -> str:
    info = get_build_info()
    dirty_suffix = "-dirty" if info.dirty else ""
    # Use short (7-character) git hashes when available
    commit = info.commit[:7] if info.commit else "unknown"
    date = info.date or "unknown"
    return f"{commit}{dirty_suffix} {date}"
