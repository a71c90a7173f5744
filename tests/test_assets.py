import os
from pathlib import Path

import lemonjudge.assets as assets_module
from lemonjudge.assets import Translator, asset_paths, language_search_paths

QM_MAGIC = bytes(
    [0x3C, 0xB8, 0x64, 0x18, 0xCA, 0xEF, 0x9C, 0x95, 0xCD, 0x21, 0x1C, 0xBF, 0x60, 0xA1, 0xBD, 0xDD]
)


def test_asset_paths_start_with_app_dir(tmp_path):
    paths = asset_paths("lang", tmp_path)
    assert paths[0] == os.path.abspath(os.path.join(str(tmp_path), "lang"))


def test_asset_paths_have_no_duplicates(tmp_path):
    paths = asset_paths("themes", tmp_path)
    assert len(paths) == len(set(paths))


def test_asset_paths_include_package_directory(tmp_path):
    package_dir = str(Path(assets_module.__file__).resolve().parent / "lang")
    assert package_dir in asset_paths("lang", tmp_path)


def test_language_search_paths_use_lang(tmp_path):
    assert language_search_paths(tmp_path) == asset_paths("lang", tmp_path)


def test_translator_lists_languages_without_duplicates(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    (first / "zh_CN.qm").write_bytes(QM_MAGIC)
    (first / "notes.txt").write_text("x")
    (second / "en_US.qm").write_bytes(QM_MAGIC)
    (second / "zh_CN.qm").write_bytes(QM_MAGIC)
    translator = Translator([first, second])
    assert translator.available_languages == ["zh_CN", "en_US"]


def test_translator_install_from_first_path(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    (first / "zh_CN.qm").write_bytes(QM_MAGIC + b"body")
    (second / "zh_CN.qm").write_bytes(QM_MAGIC)
    translator = Translator([first, second])
    assert translator.install("zh_CN") is True
    assert translator.translation_file == first / "zh_CN.qm"
    assert translator.current == "zh_CN"
    assert translator.loaded is True


def test_translator_install_unknown_code(tmp_path):
    (tmp_path / "en_US.qm").write_bytes(QM_MAGIC)
    translator = Translator([tmp_path])
    assert translator.install("en_US") is True
    assert translator.install("fr_FR") is False
    assert translator.current == "en_US"


def test_translator_install_invalid_file_still_installs(tmp_path):
    (tmp_path / "de_DE.qm").write_bytes(b"not a translation")
    translator = Translator([tmp_path])
    assert translator.install("de_DE") is True
    assert translator.loaded is False


def test_translator_refresh_sees_new_files(tmp_path):
    translator = Translator([tmp_path])
    assert translator.available_languages == []
    (tmp_path / "ja_JP.qm").write_bytes(QM_MAGIC)
    translator.refresh()
    assert translator.available_languages == ["ja_JP"]


def test_translator_skips_missing_directories(tmp_path):
    translator = Translator([tmp_path / "absent"])
    assert translator.available_languages == []
    assert translator.install("en_US") is False