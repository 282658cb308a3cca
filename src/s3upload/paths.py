"""Local path discovery and object-key derivation.

Nothing in here raises for filesystem trouble: a directory that cannot be
listed, or an entry that cannot be stat'ed, simply contributes no files.
Callers that need visibility can pass an ``on_error`` callback to
:func:`find_files`.

Symlinked directories are followed and there is no cycle detection. A
symlink loop under the root is walked until the kernel refuses to resolve
the path (ELOOP, roughly 40 links deep), so files inside the loop are
returned once per level it managed to descend.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

ListingErrorHandler = Callable[[Path, OSError], None]


def _log_listing_error(path: Path, exc: OSError) -> None:
    logger.debug("Skipping %s: %s", path, exc)


def _is_dir(path: Path) -> bool:
    # Path.is_dir() re-raises EACCES on Python < 3.13
    try:
        return path.is_dir()
    except OSError:
        return False


def find_files(root: str | Path, on_error: ListingErrorHandler | None = None) -> list[str]:
    """Return absolute paths of every regular file under ``root``.

    A file root yields itself. Directory entries are walked recursively with
    no depth limit; directories themselves are never returned.
    """
    handler = on_error or _log_listing_error
    root_path = Path(os.path.abspath(root))

    if not _is_dir(root_path):
        return [str(root_path)]

    files: list[str] = []
    _collect(root_path, files, handler)
    return files


def _collect(directory: Path, files: list[str], on_error: ListingErrorHandler) -> None:
    try:
        entries = sorted(directory.iterdir())
    except OSError as exc:
        on_error(directory, exc)
        return

    for entry in entries:
        try:
            is_dir = entry.is_dir()
            is_file = not is_dir and entry.is_file()
        except OSError as exc:
            on_error(entry, exc)
            continue
        if is_dir:
            _collect(entry, files, on_error)
        elif is_file:
            files.append(str(entry))


def _relative_suffix(full_file_path: str, root_absolute: str) -> str:
    """Strip ``root_absolute`` from the front of ``full_file_path``.

    The leading separator is kept (``/a/b.txt``). A file outside the root is
    returned whole.
    """
    if not full_file_path.startswith(root_absolute):
        return full_file_path
    rest = full_file_path[len(root_absolute) :]
    # /data must not match /database/x
    if rest and not rest.startswith(os.sep) and not root_absolute.endswith(os.sep):
        return full_file_path
    return rest


def derive_key(full_file_path: str, root_path: str | Path, key: str | None) -> str:
    """Build the object key for a file found under ``root_path``.

    With a ``key`` the result is ``key`` + ``/`` + relative path. The ``/`` is
    only added when the relative part lacks one, so ``"prefix/"`` gives
    ``"prefix//a/b.txt"``. Without a key the relative path is used with one
    leading ``/`` dropped.
    """
    root_absolute = os.path.abspath(root_path)
    suffix = _relative_suffix(full_file_path, root_absolute)
    if os.sep != "/":
        suffix = suffix.replace(os.sep, "/")

    if key is not None:
        if not suffix.startswith("/"):
            return f"{key}/{suffix}"
        return f"{key}{suffix}"

    if suffix.startswith("/"):
        suffix = suffix[1:]
    return suffix


def key_if_null(path: str | Path, key: str | None) -> str:
    """Key for a single-file upload: ``key`` or the file's base name."""
    if key is not None:
        return key
    return Path(path).name


def plan_uploads(
    path: str | Path,
    key: str | None,
    on_error: ListingErrorHandler | None = None,
) -> list[tuple[str, str]]:
    """Return the ``(object_key, local_file)`` pairs for one run."""
    if _is_dir(Path(path)):
        return [(derive_key(f, path, key), f) for f in find_files(path, on_error)]
    return [(key_if_null(path, key), str(path))]
