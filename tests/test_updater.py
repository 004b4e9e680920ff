import pytest

from pubspec_bump import VersionUpdater
from pubspec_bump.exceptions import MissingArgumentError, VersionFieldNotFoundError

PUBSPEC = """name: my_app
description: A new Flutter project.
publish_to: 'none'

version: {version}

environment:
  sdk: '>=3.0.0 <4.0.0'

dependencies:
  flutter:
    sdk: flutter
"""


@pytest.fixture
def pubspec(tmp_path):
    def make(version):
        path = tmp_path / "pubspec.yaml"
        path.write_text(PUBSPEC.format(version=version), encoding="utf-8")
        return path
    return make


def test_increments_build_number(pubspec):
    path = pubspec("1.2.3+41")

    result = VersionUpdater(path).run("1.3.0")

    assert result.old_version == "1.2.3+41"
    assert result.new_version == "1.3.0+42"
    assert result.build_number == 42
    assert path.read_text(encoding="utf-8") == PUBSPEC.format(version="1.3.0+42")


@pytest.mark.parametrize("version", ["1.0.0", "1.0.0+abc"])
def test_default_build_number(pubspec, version):
    path = pubspec(version)

    result = VersionUpdater(path).run("1.0.1")

    assert result.new_version == "1.0.1+2"
    assert path.read_text(encoding="utf-8") == PUBSPEC.format(version="1.0.1+2")


def test_build_number_progresses(pubspec):
    path = pubspec("2.0.0+5")
    updater = VersionUpdater(path)

    first = updater.run("2.0.0")
    second = updater.run("2.0.0")

    assert first.new_version == "2.0.0+6"
    assert second.new_version == "2.0.0+7"
    assert second.old_version == "2.0.0+6"


def test_missing_base_version_leaves_file(pubspec):
    path = pubspec("1.0.0+1")
    before = path.read_bytes()

    with pytest.raises(MissingArgumentError, match="Version parameter required"):
        VersionUpdater(path).run("")

    assert path.read_bytes() == before


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="pubspec.yaml not found"):
        VersionUpdater(tmp_path / "pubspec.yaml").run("1.0.0")


def test_missing_version_field(tmp_path):
    path = tmp_path / "pubspec.yaml"
    path.write_text("name: my_app\n", encoding="utf-8")

    with pytest.raises(VersionFieldNotFoundError, match="Version field not found in pubspec.yaml"):
        VersionUpdater(path).run("1.0.0")

    assert path.read_text(encoding="utf-8") == "name: my_app\n"
