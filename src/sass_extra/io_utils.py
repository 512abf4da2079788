"""Input/output helpers."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import anyio

logger = logging.getLogger(__name__)


def ensure_parent_dir(path: str | os.PathLike[str]) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    return out_path


def write_output(path: str | os.PathLike[str], content: str) -> None:
    out_path = ensure_parent_dir(path)
    out_path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s", out_path)


async def write_output_async(path: str | os.PathLike[str], content: str) -> None:
    out_path = anyio.Path(path)
    await out_path.parent.mkdir(parents=True, exist_ok=True)
    await out_path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s", out_path)


@contextmanager
def temporary_entry(content: str, beside: str | os.PathLike[str]) -> Iterator[str]:
    """
    Write ``content`` to a hidden .scss file in the directory of ``beside``.
    The file is removed when the block exits.
    """
    parent = ensure_parent_dir(beside).parent
    with tempfile.NamedTemporaryFile(
        "w", suffix=".scss", prefix=".sass-extra-", dir=parent, delete=False, encoding="utf-8"
    ) as tmp:
        tmp.write(content)
    logger.debug("Wrote entry file %s", tmp.name)
    try:
        yield tmp.name
    finally:
        Path(tmp.name).unlink(missing_ok=True)
