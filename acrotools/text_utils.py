"""String, path and file helpers used throughout the tools."""

from __future__ import annotations

import os


def trim_char(text: str, ch: str) -> str:
    """Remove every leading and trailing occurrence of the single character ``ch``."""
    if len(ch) != 1:
        raise ValueError("ch must be a single character")
    return text.strip(ch)


def trim_left(text: str) -> str:
    """Remove leading whitespace."""
    return text.lstrip()


def trim_right(text: str) -> str:
    """Remove trailing whitespace."""
    return text.rstrip()


def find_one_of(text: str, chars: str) -> int:
    """Index of the first character of ``text`` found in ``chars``, or -1."""
    wanted = set(chars)
    return next((i for i, c in enumerate(text) if c in wanted), -1)


def compare_no_case(text: str, other: str) -> int:
    """Case-insensitive comparison: negative, zero or positive."""
    a, b = text.casefold(), other.casefold()
    return (a > b) - (a < b)


def extract_file_path(path: str) -> str:
    """Directory part of ``path`` with forward slashes and a trailing slash.

    A path without any separator is returned unchanged.
    """
    normalized = path.replace("\\", "/")
    index = normalized.rfind("/")
    if index == -1:
        return path
    return normalized[: index + 1]


def extract_file_name(path: str) -> str:
    """The part of ``path`` after its last slash or backslash."""
    index = path.replace("\\", "/").rfind("/")
    if index == -1:
        return path
    return path[index + 1 :]


def file_size(path: str) -> int:
    """Size of the file in bytes, or 0 if it does not exist."""
    try:
        return os.path.getsize(path)
    except OSError:
        return 0


def delete_file(path: str) -> bool:
    """Delete the file; return whether it was removed."""
    directory = extract_file_path(path)
    name = extract_file_name(path)
    target = os.path.join(directory, name) if directory != path else path
    try:
        os.remove(target)
    except OSError:
        return False
    return True


def format_string(template: str, *args) -> str:
    """Replace ``%1``, ``%2``, ... in turn with the given arguments."""
    result = template
    for number, value in enumerate(args, start=1):
        result = result.replace(f"%{number}", str(value))
    return result


def _scale_rate(dpi: float) -> float:
    rate = dpi / 96.0
    if rate < 1.1:
        return 1.0
    if rate < 1.4:
        return 1.25
    if rate < 1.6:
        return 1.5
    if rate < 1.8:
        return 1.75
    return 2.0


def smart_scale(spec: int, dpi: float) -> int:
    """Scale a pixel size for a screen of logical ``dpi``, in fixed steps."""
    return int(spec * _scale_rate(dpi))