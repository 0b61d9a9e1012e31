import os
import stat

import pytest

from acrotools.paths import (
    Language,
    PathResolver,
    ViewMode,
    delete_directory,
    ensure_file_exists,
    ensure_path_exists,
)


@pytest.fixture
def resolver(tmp_path):
    return PathResolver(str(tmp_path))


@pytest.mark.parametrize(
    "language, suffix",
    [
        (Language.ENGLISH, "/Translations/agclient_en.qm"),
        (Language.CHINESE, "/Translations/agclient_zh.qm"),
        (Language.JAPANESE, "/Translations/agclient_ja.qm"),
    ],
)
def test_translation_path(resolver, tmp_path, language, suffix):
    assert resolver.translation_path(language) == str(tmp_path) + suffix


def test_translation_path_unknown_language(resolver, tmp_path):
    assert resolver.translation_path(99) == str(tmp_path)


def test_skin_paths(resolver, tmp_path):
    assert resolver.skin_path(ViewMode.LIGHT) == str(tmp_path) + "/Skin/Light/"
    assert resolver.skin_file("main", ViewMode.DARK) == str(tmp_path) + "/Skin/Dark/main.qss"
    assert resolver.skin_file("main", ViewMode.DARK, True) == ":/Skin/Dark/main.qss"


def test_plain_paths(resolver, tmp_path):
    app = str(tmp_path)
    assert resolver.font_path() == app + "/Fonts/"
    assert resolver.db_path("a.db") == app + "/LocalDB/a.db"
    assert resolver.parsers_path() == app + "/Plugins/Parsers"
    assert resolver.report_temp_path() == app + "/data/"
    assert resolver.automatic_plugin_path() == app + "/Plugins/AutoMatic"
    assert resolver.device_drv_file_path("chip") == app + "/Drv/chip.drv"
    assert resolver.master_drv_file_path("chip") == app + "/Mst/chip.drv"


def test_log_path_fallback(tmp_path):
    resolver = PathResolver(str(tmp_path), str(tmp_path / "missing"))
    assert resolver.log_path() == str(tmp_path) + "/log"


def test_log_path_existing_dir(tmp_path):
    logs = tmp_path / "mylogs"
    logs.mkdir()
    resolver = PathResolver(str(tmp_path), str(logs))
    assert resolver.log_path() == str(logs)


def test_log_file_is_created_and_cached(resolver):
    first = resolver.log_file()
    assert os.path.isfile(first)
    assert os.path.basename(first).startswith("acroview_")
    assert first.endswith(".log")
    assert resolver.log_file() == first


def test_event_file_independent_of_recreate(resolver):
    event = resolver.event_file()
    assert os.path.basename(event).startswith("acroviewEvent_")
    resolver.recreate_log_file()
    new_log = resolver.log_file()
    assert os.path.isfile(new_log)
    assert resolver.event_file() == event


def test_global_setting_file_created(resolver, tmp_path):
    path = resolver.global_setting_file()
    assert path == str(tmp_path) + "/Localcfg.ini"
    assert os.path.isfile(path)


def test_project_and_task_dirs_created(resolver):
    assert os.path.isdir(resolver.project_path())
    assert os.path.isdir(resolver.task_path())
    assert resolver.project_path().endswith("/project")


def test_temp_folder_and_files(resolver):
    temp = resolver.temp_folder_path()
    assert os.path.isdir(temp)
    assert temp.endswith("/")
    assert resolver.driver_file_path("drv") == temp + "drv.adrv"
    assert resolver.fpga_file_path("fpga") == temp + "fpga.bin"


def test_ensure_file_exists_keeps_content(tmp_path):
    target = tmp_path / "keep.txt"
    target.write_text("data")
    ensure_file_exists(str(target))
    assert target.read_text() == "data"


def test_ensure_path_exists_nested(tmp_path):
    target = tmp_path / "a" / "b" / "c"
    ensure_path_exists(str(target))
    assert target.is_dir()


def test_delete_directory_with_readonly_file(tmp_path):
    root = tmp_path / "tree"
    (root / "sub").mkdir(parents=True)
    locked = root / "sub" / "locked.txt"
    locked.write_text("x")
    os.chmod(locked, stat.S_IREAD)
    delete_directory(str(root))
    assert not root.exists()


def test_delete_directory_missing(tmp_path):
    target = tmp_path / "absent"
    delete_directory(str(target))
    assert not target.exists()