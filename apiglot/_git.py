"""Data ostatniej modyfikacji pliku — z git lub z systemu plików."""

from __future__ import annotations

import subprocess
from datetime import datetime, timezone
from pathlib import Path

from data_model.translation import LastModified


class GitError(RuntimeError):
    pass


def _git(*args: str, cwd: Path | None = None) -> str:
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise GitError("Nie znaleziono programu git.") from e
    except subprocess.CalledProcessError as e:
        raise GitError(f"git {' '.join(args)}: {e.stderr.strip() or e}") from e
    return proc.stdout


def filesystem_last_modified(path: Path) -> LastModified:
    mtime = path.stat().st_mtime
    return LastModified(
        source="filesystem",
        timestamp=datetime.fromtimestamp(mtime, tz=timezone.utc).isoformat(),
    )


def is_file_modified(path: str | Path) -> bool:
    """True gdy plik jest zmieniony lub nieśledzony (git status --porcelain)."""
    path = Path(path)
    out = _git("status", "--porcelain", "--", path.name, cwd=path.parent)
    return bool(out.strip())


def get_last_modified(path: str | Path) -> LastModified:
    """
    Zmieniony plik → mtime z systemu plików; czysty → data ostatniego commitu.

    Raises:
        GitError: git niedostępny lub katalog poza repozytorium.
    """
    path = Path(path)
    if is_file_modified(path):
        return filesystem_last_modified(path)
    out = _git("log", "-1", "--format=%cd", "--date=iso-strict", "--", path.name, cwd=path.parent)
    stamp = out.strip()
    if not stamp:
        return filesystem_last_modified(path)
    return LastModified(source="git", timestamp=stamp)


def file_created(path: str | Path) -> str:
    """Czas utworzenia pliku (st_birthtime, gdy system go udostępnia)."""
    st = Path(path).stat()
    created = getattr(st, "st_birthtime", None) or st.st_ctime
    return datetime.fromtimestamp(created, tz=timezone.utc).isoformat()
