import os
from pathlib import Path

import pytest

from sass_extra.destinations import normalize_css_path
from sass_extra.destinations import normalize_map_path
from sass_extra.destinations import resolve_out_file
from sass_extra.destinations import resolve_source_map_file
from sass_extra.errors import InvalidDestinationError


class SourceRecorder:
    def __init__(self, return_value: object) -> None:
        self.return_value = return_value
        self.calls: list[tuple[object, ...]] = []

    def __call__(self, *args: object) -> object:
        self.calls.append(args)
        return self.return_value


@pytest.mark.parametrize("dest", ["dest/a.sass", "dest/a.css", "dest/a.scss"])
def test_resolve_out_file_normalizes_extension(dest: str) -> None:
    resolved = resolve_out_file("src/a.scss", dest)

    assert os.path.isabs(resolved)
    assert resolved == os.path.abspath("dest/a.css")


def test_resolve_out_file_appends_css_to_foreign_suffix() -> None:
    assert resolve_out_file("src/a.scss", "dest/a.min").endswith(os.path.join("dest", "a.min.css"))


def test_resolve_out_file_directory_uses_source_basename() -> None:
    resolved = resolve_out_file("src/sub/a.scss", "dest")

    assert resolved == os.path.abspath(os.path.join("dest", "a.css"))


def test_resolve_out_file_calls_function_with_source() -> None:
    recorder = SourceRecorder("build/out")

    resolved = resolve_out_file("src/theme.sass", recorder)

    assert recorder.calls == [("src/theme.sass",)]
    assert resolved == os.path.abspath(os.path.join("build", "out", "theme.css"))


def test_resolve_out_file_accepts_path_objects_from_function(tmp_path: Path) -> None:
    resolved = resolve_out_file("src/a.scss", lambda source: tmp_path / "bundle.css")

    assert resolved == str(tmp_path / "bundle.css")


def test_resolve_out_file_data_requires_file_destination() -> None:
    with pytest.raises(InvalidDestinationError) as exc:
        resolve_out_file("body { color: red; }", "dest")

    assert "valid file path" in str(exc.value)


def test_resolve_out_file_data_with_file_destination() -> None:
    assert resolve_out_file("body { color: red; }", "dest/out.scss") == os.path.abspath("dest/out.css")


def test_resolve_out_file_data_function_returning_directory() -> None:
    with pytest.raises(InvalidDestinationError):
        resolve_out_file("body { color: red; }", lambda source: "dest")


def test_resolve_out_file_function_returning_non_string() -> None:
    with pytest.raises(InvalidDestinationError):
        resolve_out_file("src/a.scss", lambda source: None)  # type: ignore[arg-type, return-value]


def test_resolve_source_map_true_uses_out_file(tmp_path: Path) -> None:
    out_file = str(tmp_path / "out.css")

    assert resolve_source_map_file(out_file, True) == out_file + ".map"


def test_resolve_source_map_file_path_and_directory(tmp_path: Path) -> None:
    out_file = str(tmp_path / "out.css")

    assert resolve_source_map_file(out_file, str(tmp_path / "maps" / "out.css.map")) == str(
        tmp_path / "maps" / "out.css.map"
    )
    assert resolve_source_map_file(out_file, str(tmp_path / "maps")) == str(tmp_path / "maps" / "out.css.map")


def test_resolve_source_map_does_not_duplicate_map_suffix() -> None:
    assert resolve_source_map_file(os.path.abspath("out.css"), "maps/out.map") == os.path.abspath("maps/out.map")


def test_resolve_source_map_function_receives_out_file_and_source() -> None:
    recorder = SourceRecorder(True)
    out_file = os.path.abspath("dest/a.css")

    resolved = resolve_source_map_file(out_file, recorder, "src/a.scss")

    assert recorder.calls == [(out_file, "src/a.scss")]
    assert resolved == out_file + ".map"


def test_resolve_source_map_function_with_single_parameter() -> None:
    out_file = os.path.abspath("dest/a.css")

    resolved = resolve_source_map_file(out_file, lambda out: out.replace("dest", "maps"), "src/a.scss")

    assert resolved == os.path.abspath("maps/a.css.map")


@pytest.mark.parametrize("value", [False, None, 3])
def test_resolve_source_map_function_returning_non_path(value: object) -> None:
    with pytest.raises(InvalidDestinationError):
        resolve_source_map_file(os.path.abspath("out.css"), lambda out, source: value)  # type: ignore[arg-type, return-value]


def test_normalizers() -> None:
    assert normalize_css_path("a.scss") == "a.css"
    assert normalize_css_path("a.css") == "a.css"
    assert normalize_css_path("a.txt") == "a.txt.css"
    assert normalize_map_path("a.css") == "a.css.map"
    assert normalize_map_path("a.css.map") == "a.css.map"
