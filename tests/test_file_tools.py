import zipfile
from pathlib import Path

import pytest

from acrotools.file_tools import (
    driver_version,
    extract_archive,
    file_extension,
    full_to_relative_path,
    read_des_value,
    relative_to_full_path,
    remove_extension,
    switch_file_format,
)


def _make_zip(path: Path, entries: dict) -> str:
    with zipfile.ZipFile(path, "w") as archive:
        for name, data in entries.items():
            archive.writestr(name, data)
    return str(path)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("C:/drv/archive.tar.gz", "gz"),
        ("C:\\drv\\chip.drv", "drv"),
        ("noext", ""),
        ("dir.with.dot/noext", ""),
    ],
)
def test_file_extension(path, expected):
    assert file_extension(path) == expected


def test_remove_extension_case_insensitive():
    assert remove_extension("chip.DRV", ".drv") == "chip"


def test_remove_extension_not_matching_keeps_name():
    assert remove_extension("chip.bin", ".drv") == "chip.bin"


def test_switch_file_format_replaces_last_extension():
    assert switch_file_format("task.tar.eapr", ".xml") == "task.tar.xml"


def test_switch_file_format_without_dot_gives_none():
    assert switch_file_format("noext", ".xml") is None


def test_full_to_relative_same_directory():
    assert full_to_relative_path("C:/a/b/proj.eapr", "C:/a/b/task.tsk") == "./proj.eapr"


def test_full_to_relative_sibling_directory():
    assert full_to_relative_path("C:/a/x/p.eapr", "C:/a/b/t.tsk") == "../x/p.eapr"


def test_full_to_relative_different_drive_unchanged():
    assert full_to_relative_path("D:/a/p.eapr", "C:/a/t.tsk") == "D:/a/p.eapr"


@pytest.mark.parametrize(
    "dst, src",
    [
        ("C:/a/b/proj.eapr", "C:/a/b/task.tsk"),
        ("C:/a/x/p.eapr", "C:/a/b/t.tsk"),
        ("C:/a/b/c/d.eapr", "C:/a/b/t.tsk"),
        ("C:/z/y/p.eapr", "C:\\a\\b\\t.tsk"),
    ],
)
def test_relative_round_trip(dst, src):
    relative = full_to_relative_path(dst, src)
    assert relative.startswith(".")
    assert relative_to_full_path(relative, src) == dst


def test_relative_to_full_absolute_unchanged():
    assert relative_to_full_path("C:/a/p.eapr", "C:/b/t.tsk") == "C:/a/p.eapr"


def test_relative_to_full_dot_slash():
    assert relative_to_full_path("./p.eapr", "C:/b/t.tsk") == "C:/b/p.eapr"


def test_read_des_value(tmp_path):
    des = tmp_path / "chip.des"
    des.write_text("Name : Chip\nnoise line\nVersion: 2.1 \n", encoding="utf-8")
    assert read_des_value(str(des), "Version") == "2.1"
    assert read_des_value(str(des), "Name") == "Chip"
    assert read_des_value(str(des), "Missing") == ""


def test_read_des_value_missing_file(tmp_path):
    assert read_des_value(str(tmp_path / "none.des"), "Version") == ""


def test_driver_version_reads_key(tmp_path):
    archive = _make_zip(
        tmp_path / "drv.zip",
        {"Version.txt": b"DrvVer: 1.2.3\r\nOther: x\n", "chip.bin": b"\x00\x01"},
    )
    assert driver_version(archive, "DrvVer") == "1.2.3"
    assert driver_version(archive, "Absent") == ""


def test_driver_version_last_match_wins(tmp_path):
    archive = _make_zip(tmp_path / "drv.zip", {"Version.txt": b"V: 1\nV: 2\n"})
    assert driver_version(archive, "V") == "2"


def test_driver_version_bad_archive(tmp_path):
    bogus = tmp_path / "bogus.zip"
    bogus.write_bytes(b"not a zip")
    assert driver_version(str(bogus), "V") == ""


def test_extract_archive_writes_files(tmp_path):
    contents = {"a.bin": b"\x01\x02", "sub/b.xml": b"<x/>"}
    archive = _make_zip(tmp_path / "pkg.zip", contents)
    dest = tmp_path / "out"
    dest.mkdir()
    written = extract_archive(archive, str(dest))
    assert len(written) == len(contents)
    for name, data in contents.items():
        assert (dest / name).read_bytes() == data


def test_extract_archive_skips_escaping_entries(tmp_path):
    archive = _make_zip(tmp_path / "pkg.zip", {"../evil.bin": b"x", "ok.bin": b"y"})
    dest = tmp_path / "out"
    dest.mkdir()
    written = extract_archive(archive, str(dest))
    assert [Path(p).name for p in written] == ["ok.bin"]
    assert not (tmp_path / "evil.bin").exists()


def test_extract_archive_bad_archive(tmp_path):
    bogus = tmp_path / "bogus.zip"
    bogus.write_bytes(b"garbage")
    assert extract_archive(str(bogus), str(tmp_path)) == []