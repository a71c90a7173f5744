"""Locating asset directories and choosing interface translations."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable
from pathlib import Path

from lemonjudge.jsonutil import file_exists_in, get_file_list

logger = logging.getLogger(__name__)

_APP_DIR_NAME = "lemon-lime"
_QM_MAGIC = bytes(
    [0x3C, 0xB8, 0x64, 0x18, 0xCA, 0xEF, 0x9C, 0x95, 0xCD, 0x21, 0x1C, 0xBF, 0x60, 0xA1, 0xBD, 0xDD]
)


def _default_app_dir() -> str:
    return str(Path(sys.argv[0] or ".").resolve().parent)


def _user_base_dirs() -> list[str]:
    home = os.path.expanduser("~")
    if sys.platform.startswith("win"):
        return [value for value in (os.environ.get("APPDATA"), os.environ.get("LOCALAPPDATA")) if value]
    if sys.platform == "darwin":
        return [
            os.path.join(home, "Library", "Application Support"),
            os.path.join(home, "Library", "Preferences"),
        ]
    data_home = os.environ.get("XDG_DATA_HOME") or os.path.join(home, ".local", "share")
    data_dirs = (os.environ.get("XDG_DATA_DIRS") or "/usr/local/share:/usr/share").split(":")
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(home, ".config")
    config_dirs = (os.environ.get("XDG_CONFIG_DIRS") or "/etc/xdg").split(":")
    return [data_home, *data_dirs, config_home, *config_dirs]


def _existing_user_dirs(dir_name: str) -> list[str]:
    found = []
    for base in _user_base_dirs():
        if not base:
            continue
        candidate = os.path.join(base, _APP_DIR_NAME, dir_name)
        if os.path.isdir(candidate):
            found.append(os.path.abspath(candidate))
    return found


def asset_paths(dir_name: str, app_dir: str | os.PathLike | None = None) -> list[str]:
    """Directories that may hold assets named ``dir_name``, most specific first, without duplicates."""
    base = str(app_dir) if app_dir is not None else _default_app_dir()
    paths = [os.path.abspath(os.path.join(base, dir_name))]
    paths.append(str(Path(__file__).resolve().parent / dir_name))
    paths.extend(_existing_user_dirs(dir_name))
    if sys.platform.startswith("linux"):
        for prefix in (
            "/lib/lemon-lime/",
            "/usr/lib/lemon-lime/",
            "/usr/local/lib/lemon-lime/",
            "/usr/share/lemon-lime/",
            "/usr/local/share/lemon-lime/",
        ):
            paths.append(os.path.abspath(prefix + dir_name))
        snap = os.environ.get("SNAP")
        if snap is not None:
            paths.append(os.path.abspath(snap + "/usr/share/lemon-lime/" + dir_name))
        if "APPIMAGE" in os.environ:
            paths.append(os.path.abspath(os.path.join(base, "..", "share", _APP_DIR_NAME, dir_name)))
    elif sys.platform == "darwin":
        paths.append(os.path.abspath(os.path.join(base, "..", "Resources", dir_name)))
    return list(dict.fromkeys(paths))


def language_search_paths(app_dir: str | os.PathLike | None = None) -> list[str]:
    """Directories searched for ``.qm`` translation files."""
    return asset_paths("lang", app_dir)


class Translator:
    """Finds available translations and keeps track of the installed one."""

    def __init__(
        self,
        search_paths: Iterable[str | os.PathLike] | None = None,
        app_dir: str | os.PathLike | None = None,
    ) -> None:
        self._fixed_paths = [str(path) for path in search_paths] if search_paths is not None else None
        self._app_dir = app_dir
        self.search_paths: list[str] = []
        self.languages: list[str] = []
        self.current: str | None = None
        self.translation_file: Path | None = None
        self.data: bytes = b""
        self.loaded = False
        self.refresh()

    @property
    def available_languages(self) -> list[str]:
        """Language codes such as ``zh_CN`` for which a translation file was found."""
        return list(self.languages)

    def refresh(self) -> None:
        """Scan the search paths again for translation files."""
        if self._fixed_paths is not None:
            self.search_paths = list(self._fixed_paths)
        else:
            self.search_paths = language_search_paths(self._app_dir)
        languages = []
        for path in self.search_paths:
            if not os.path.isdir(path):
                continue
            languages.extend(name.replace(".qm", "") for name in get_file_list(path) if name.endswith(".qm"))
        self.languages = list(dict.fromkeys(languages))
        logger.debug("Found translations: %s", " ".join(self.languages))

    def install(self, code: str) -> bool:
        """Install the translation for ``code`` from the first path holding it; False if none does."""
        file_name = code + ".qm"
        for path in self.search_paths:
            if not file_exists_in(path, file_name):
                continue
            logger.debug("Found %s in folder: %s", code, path)
            target = Path(path) / file_name
            try:
                data = target.read_bytes()
            except OSError:
                data = b""
            loaded = data.startswith(_QM_MAGIC)
            if not loaded:
                logger.info("Cannot load translation: %s", code)
            if self.current is not None:
                logger.info("Removed translations")
            self.current = code
            self.translation_file = target
            self.data = data
            self.loaded = loaded
            logger.info("Successfully installed a translator for %s", code)
            return True
        return False