"""File-name, relative-path, description-file and driver-archive helpers."""

from __future__ import annotations

import os
import zipfile
from pathlib import Path
from typing import Optional

VERSION_FILE_MARKER = "Version.txt"


def _key_value(line: str) -> Optional[tuple[str, str]]:
    """Split a ``key: value`` line; None when the line holds no colon."""
    if ":" not in line:
        return None
    parts = line.split(":")
    return parts[0].strip(), parts[1].strip()


def file_extension(path: str) -> str:
    """Text after the last dot of the file name in ``path``, or ``""``."""
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def remove_extension(file_name: str, extension: str) -> str:
    """Drop ``extension`` from the end of ``file_name``, ignoring case."""
    if extension and file_name.casefold().endswith(extension.casefold()):
        return file_name[: len(file_name) - len(extension)]
    return file_name


def switch_file_format(original: str, new_extension: str) -> Optional[str]:
    """Replace everything from the last dot with ``new_extension``.

    ``new_extension`` includes its own dot. Returns None when ``original``
    has no dot, leaving the caller's name as it was.
    """
    dot = original.rfind(".")
    if dot == -1:
        return None
    return original[:dot] + new_extension


def _directory_of(src_path: str) -> str:
    normalized = src_path.replace("\\", "/")
    return normalized[: normalized.rfind("/") + 1]


def full_to_relative_path(dst_path: str, src_path: str) -> str:
    """Express ``dst_path`` relative to the directory of the file ``src_path``.

    Paths that do not share their first character are returned unchanged.
    """
    src_dir = _directory_of(src_path)
    if dst_path[:1] != src_dir[:1]:
        return dst_path

    slow = 0
    fast = src_dir.find("/")
    while fast != -1:
        if dst_path[:fast] != src_dir[:fast]:
            break
        slow = fast
        fast = src_dir.find("/", slow + 1)

    if fast != -1:
        levels = len(src_dir[fast + 1 :].split("/"))
        return "../" * levels + dst_path[slow + 1 :]
    return "." + dst_path[slow:]


def relative_to_full_path(dst_path: str, src_path: str) -> str:
    """Resolve a ``./`` or ``../`` path against the directory of ``src_path``.

    Paths not starting with a dot are returned unchanged.
    """
    src_dir = _directory_of(src_path)
    if not dst_path.startswith("."):
        return dst_path
    if dst_path.startswith("./"):
        return src_dir + dst_path[2:]

    offset = 0
    while dst_path[offset : offset + 3] == "../":
        offset += 3
    levels = offset // 3

    for _ in range(levels + 1):
        cut = src_dir.rfind("/")
        if cut != -1:
            src_dir = src_dir[:cut]

    start = levels * 3 - 1
    tail = dst_path if start < 0 else dst_path[start:]
    return src_dir + tail


def read_des_value(file_name: str, key: str) -> str:
    """Value of the first ``key: value`` line for ``key`` in a text file, or ``""``."""
    try:
        with open(file_name, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                pair = _key_value(line)
                if pair is not None and pair[0] == key:
                    return pair[1]
    except OSError:
        return ""
    return ""


def _open_zip(zip_path: str) -> Optional[zipfile.ZipFile]:
    try:
        return zipfile.ZipFile(zip_path)
    except (OSError, zipfile.BadZipFile):
        return None


def driver_version(zip_path: str, ver_name: str) -> str:
    """Read ``ver_name`` from the version file packed in a driver archive.

    The last matching line of any entry named like ``Version.txt`` wins;
    an unreadable archive or a missing key gives ``""``.
    """
    archive = _open_zip(zip_path)
    if archive is None:
        return ""
    result = ""
    with archive:
        for info in archive.infolist():
            if VERSION_FILE_MARKER not in info.filename or info.is_dir():
                continue
            text = archive.read(info).decode("utf-8", errors="replace")
            for line in text.split("\n"):
                pair = _key_value(line)
                if pair is not None and pair[0] == ver_name:
                    result = pair[1]
    return result


def extract_archive(zip_path: str, dest_dir: str) -> list[str]:
    """Unpack every file of the archive into ``dest_dir``; return the written paths.

    Entries that would land outside ``dest_dir`` or cannot be written are skipped.
    An unreadable archive gives an empty list.
    """
    archive = _open_zip(zip_path)
    if archive is None:
        return []
    root = Path(dest_dir).resolve()
    written: list[str] = []
    with archive:
        for info in archive.infolist():
            if info.is_dir():
                continue
            target = (root / info.filename).resolve()
            if root != target and root not in target.parents:
                continue
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_bytes(archive.read(info))
            except OSError:
                continue
            written.append(os.fspath(Path(dest_dir) / info.filename))
    return written