"""Locations of logs, skins, drivers and other files below the application directory."""

from __future__ import annotations

import os
import shutil
import stat
import sys
from datetime import datetime
from enum import IntEnum
from typing import Optional, Union

PathLike = Union[str, "os.PathLike[str]"]


class Language(IntEnum):
    ENGLISH = 0
    CHINESE = 1
    JAPANESE = 2


class ViewMode(IntEnum):
    LIGHT = 0
    DARK = 1


_TRANSLATION_FILES = {
    Language.ENGLISH: "/Translations/agclient_en.qm",
    Language.CHINESE: "/Translations/agclient_zh.qm",
    Language.JAPANESE: "/Translations/agclient_ja.qm",
}

_SKIN_FOLDERS = {
    ViewMode.LIGHT: "Light/",
    ViewMode.DARK: "Dark/",
}


def ensure_path_exists(path: PathLike) -> None:
    """Create the directory and any missing parents."""
    os.makedirs(path, exist_ok=True)


def ensure_file_exists(path: PathLike) -> None:
    """Create an empty file if nothing exists at ``path``; existing files are untouched."""
    if not os.path.exists(path):
        with open(path, "w", encoding="utf-8"):
            pass


def _make_writable_and_remove(root: str) -> None:
    for current, dirs, files in os.walk(root, topdown=False):
        for name in files:
            full = os.path.join(current, name)
            try:
                os.chmod(full, stat.S_IWRITE | stat.S_IREAD)
                os.remove(full)
            except OSError:
                pass
        for name in dirs:
            full = os.path.join(current, name)
            try:
                os.chmod(full, stat.S_IRWXU)
            except OSError:
                pass


def delete_directory(path: PathLike) -> None:
    """Remove a directory tree, making read-only files writable when needed."""
    path = os.fspath(path)
    if not os.path.exists(path):
        return
    try:
        shutil.rmtree(path)
        return
    except OSError:
        pass
    _make_writable_and_remove(path)
    shutil.rmtree(path, ignore_errors=True)


def _session_stamp() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def _make_dir(path: str) -> None:
    if not os.path.isdir(path):
        try:
            os.mkdir(path)
        except FileExistsError:
            pass


class PathResolver:
    """Resolves the application's well-known paths relative to ``app_dir``."""

    def __init__(self, app_dir: PathLike, log_dir: Optional[PathLike] = None) -> None:
        self.app_dir = os.fspath(app_dir)
        self.log_dir = os.fspath(log_dir) if log_dir else ""
        self._log_file = ""
        self._event_file = ""

    def log_path(self) -> str:
        """Configured log directory, falling back to ``<app>/log`` when unset or missing."""
        if not self.log_dir or not os.path.isdir(self.log_dir):
            self.log_dir = self.app_dir + "/log"
        return self.log_dir

    def _log_folder(self) -> str:
        folder = self.log_path() + "/"
        ensure_path_exists(folder)
        return folder

    def log_file(self) -> str:
        """Log file of this session, created on first use."""
        if not self._log_file:
            self._log_file = self._log_folder() + "acroview_" + _session_stamp() + ".log"
        ensure_file_exists(self._log_file)
        return self._log_file

    def event_file(self) -> str:
        """Key-event log file of this session, created on first use."""
        if not self._event_file:
            self._event_file = self._log_folder() + "acroviewEvent_" + _session_stamp() + ".log"
        ensure_file_exists(self._event_file)
        return self._event_file

    def recreate_log_file(self) -> None:
        """Forget the current log file so the next call to ``log_file`` starts a new one."""
        self._log_file = ""

    def translation_path(self, language: int) -> str:
        """Translation file for ``language``; an unknown language gives the app directory."""
        try:
            suffix = _TRANSLATION_FILES[Language(language)]
        except ValueError:
            suffix = ""
        return self.app_dir + suffix

    @staticmethod
    def _skin_folder(mode: int) -> str:
        try:
            return _SKIN_FOLDERS[ViewMode(mode)]
        except ValueError:
            return ""

    def skin_path(self, mode: int) -> str:
        """Folder of the skin style sheets for ``mode`` on disk."""
        return self.app_dir + "/Skin/" + self._skin_folder(mode)

    def skin_file(self, name: str, mode: int, relative: bool = False) -> str:
        """Style sheet ``name``.qss, on disk or as a resource path when ``relative``."""
        folder = ":/Skin/" + self._skin_folder(mode) if relative else self.skin_path(mode)
        return folder + name + ".qss"

    def font_path(self) -> str:
        return self.app_dir + "/Fonts/"

    def global_setting_file(self) -> str:
        """Local settings file, created empty if missing."""
        path = self.app_dir + "/Localcfg.ini"
        ensure_file_exists(path)
        return path

    def db_path(self, db_file: str) -> str:
        return self.app_dir + "/LocalDB/" + db_file

    def parsers_path(self) -> str:
        return self.app_dir + "/Plugins/Parsers"

    def report_temp_path(self) -> str:
        return self.app_dir + "/data/"

    def project_path(self) -> str:
        """Project folder, created if missing."""
        path = self.app_dir + "/project"
        _make_dir(path)
        return path

    def task_path(self) -> str:
        """Task folder, created if missing."""
        path = self.app_dir + "/task"
        _make_dir(path)
        return path

    def automatic_plugin_path(self) -> str:
        return self.app_dir + "/Plugins/AutoMatic"

    def device_drv_file_path(self, name: str) -> str:
        return self.app_dir + "/Drv/" + name + ".drv"

    def master_drv_file_path(self, name: str) -> str:
        return self.app_dir + "/Mst/" + name + ".drv"

    def temp_folder_path(self) -> str:
        """Temporary folder, created if missing (hidden by its name outside Windows)."""
        folder = "/temp/" if sys.platform.startswith("win") else "/.temp/"
        path = self.app_dir + folder
        _make_dir(path)
        return path

    def driver_file_path(self, name: str) -> str:
        return self.temp_folder_path() + name + ".adrv"

    def fpga_file_path(self, name: str) -> str:
        return self.temp_folder_path() + name + ".bin"