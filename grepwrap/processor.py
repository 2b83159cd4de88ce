from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import BinaryIO, Iterable, Pattern, TextIO

from .config import Config, parse_line
from .highlight import split_highlights
from .paths import display_path, is_openable, join_path
from .style import Role, Styler
from .types import ParsedLine

logger = logging.getLogger(__name__)


@dataclass
class Processor:
    config: Config
    highlight_pattern: Pattern[str] | None = None
    styler: Styler = field(default_factory=Styler)

    def process_stream(self, src: BinaryIO | Iterable[bytes], dst: TextIO) -> None:
        """Reformat every line of 'src' onto 'dst'.

        Lines are read as bytes so that one badly encoded line is reported and
        skipped instead of ending the run.
        """
        for line_number, raw_line in enumerate(src, start=1):
            try:
                line = _strip_terminator(raw_line).decode("utf-8")
            except UnicodeDecodeError as e:
                logger.error("line %d: %s", line_number, e)
                continue
            self.process_line(line, dst)

    def process_line(self, line: str, dst: TextIO) -> None:
        parsed = parse_line(line)
        if parsed is None:
            self._emit(line, dst)
            return
        formatted = self.format_line(parsed)
        if formatted is not None:
            self._emit(formatted, dst)

    def format_line(self, parsed: ParsedLine) -> str | None:
        """Render 'parsed' as path:row:col: contents, or None when filtered out."""
        path = display_path(
            join_path(parsed.filepath, parsed.prefix, self.config.prefix),
            self.config.current_dir,
        )
        if self.config.check_exists and not is_openable(path, self.config.current_dir):
            return None

        paint = self.styler.paint
        head = "{}:{}:{}: ".format(
            paint(Role.PATH, path),
            paint(Role.ROW, parsed.row_text),
            paint(Role.COLUMN, parsed.column_text),
        )
        body = "".join(
            paint(Role.MATCH, span.text) if span.matched else span.text
            for span in split_highlights(parsed.contents, self.highlight_pattern)
        )
        return head + body

    def _emit(self, text: str, dst: TextIO) -> None:
        try:
            dst.write(text + "\n")
        except (OSError, UnicodeEncodeError) as e:
            logger.debug("write failed: %s", e)


def _strip_terminator(raw_line: bytes) -> bytes:
    if raw_line.endswith(b"\n"):
        raw_line = raw_line[:-1]
        if raw_line.endswith(b"\r"):
            raw_line = raw_line[:-1]
    return raw_line
