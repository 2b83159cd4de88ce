"""Shared fixtures for the grep-wrapper test suite.

Output assertions compare plain text, so every processor built here uses a
disabled `Styler` unless a test asks for color explicitly.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest

from grepwrap.config import Config
from grepwrap.processor import Processor
from grepwrap.style import Styler, set_color_output

RunFn = Callable[..., str]


@pytest.fixture(autouse=True)
def _no_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.fixture
def run(tmp_path: Path) -> RunFn:
    """Feed lines through a Processor rooted at 'tmp_path' and return its output."""

    def _run(*lines: str | bytes, styler: Styler | None = None, **settings: Any) -> str:
        settings.setdefault("current_dir", tmp_path)
        cfg = Config(**settings)
        processor = Processor(
            config=cfg,
            highlight_pattern=cfg.compile_highlight(),
            styler=styler or Styler(enabled=False),
        )
        src = io.BytesIO(b"".join(
            (line if isinstance(line, bytes) else line.encode("utf-8")) + b"\n" for line in lines
        ))
        dst = io.StringIO()
        processor.process_stream(src, dst)
        return dst.getvalue()

    return _run


@pytest.fixture
def color_output() -> Iterator[None]:
    """Turn yachalk colors on for one test and back off afterwards."""
    set_color_output(True)
    yield
    set_color_output(False)
