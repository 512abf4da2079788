from pathlib import Path

import pytest

from sass_extra.errors import InvalidRequestError
from sass_extra.models import RenderOptions


def test_coerce_splits_known_fields_and_compiler_options() -> None:
    opts = RenderOptions.coerce(
        {
            "file": ["a.scss"],
            "output": "dist",
            "sourceMap": True,
            "globOptions": {"include_hidden": True},
            "include_paths": ["vendor"],
        }
    )

    assert opts.file == ["a.scss"]
    assert opts.output == "dist"
    assert opts.source_map is True
    assert opts.glob_options == {"include_hidden": True}
    assert opts.compiler_options == {"include_paths": ["vendor"]}


def test_coerce_merges_explicit_compiler_options() -> None:
    opts = RenderOptions.coerce({"data": "a {}", "compiler_options": {"precision": 3}, "output_style": "compact"})

    assert opts.compiler_options == {"precision": 3, "output_style": "compact"}


def test_coerce_converts_paths(tmp_path: Path) -> None:
    opts = RenderOptions.coerce({"file": [tmp_path / "a.scss"], "output": tmp_path / "dist"})

    assert opts.file == [str(tmp_path / "a.scss")]
    assert opts.output == str(tmp_path / "dist")


def test_coerce_keeps_callables() -> None:
    def mapper(source: str) -> str:
        return source

    opts = RenderOptions.coerce({"file": "a.scss", "out_file": mapper, "source_map": lambda out, src: True})

    assert opts.out_file is mapper
    assert callable(opts.source_map)


def test_destination_prefers_output() -> None:
    opts = RenderOptions(output="a.css", out_file="b.css")

    assert opts.destination == "a.css"
    assert opts.persists is True
    assert RenderOptions(out_file="b.css").persists is False


def test_coerce_wraps_validation_errors() -> None:
    with pytest.raises(InvalidRequestError):
        RenderOptions.coerce({"data": {"not": "a string"}})


def test_coerce_rejects_non_mappings() -> None:
    with pytest.raises(InvalidRequestError):
        RenderOptions.coerce("a.scss")  # type: ignore[arg-type]
