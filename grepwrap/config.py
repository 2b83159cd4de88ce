from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Literal, Pattern

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .types import ParsedLine

# path[:row[:col]]: message, with an optional leading "root/prefix:" chunk.
# Searched, not anchored; group boundaries follow first-match semantics.
LINE_RE: Pattern[str] = re.compile(
    r"(?:[^:/]+/?(?P<prefix>[^:]+):)?"
    r"(?P<filepath>[^:]+)"
    r"(?::(?P<row>\d+))?"
    r"(?::(?P<column>\d+))?"
    r":\s*(?P<contents>.*)"
)


class Config(BaseModel):
    """Settings for one grep-wrapper run, fixed before the first line is read."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    prefix: str | None = Field(default=None, description="String prepended to every reconstructed file path")
    highlight: str | None = Field(default=None, description="Case-insensitive regex marked inside message contents")
    check_exists: bool = Field(default=False, description="Drop lines whose file cannot be opened")
    color: Literal["auto", "always", "never"] = Field(default="auto", description="When to emit terminal colors")
    current_dir: Path = Field(default_factory=Path.cwd, description="Directory display paths are made relative to")

    @field_validator("highlight")
    @classmethod
    def _validate_highlight(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            re.compile(v, re.IGNORECASE)
        except re.error as e:
            raise ValueError(f"invalid highlight pattern {v!r}: {e}")
        return v

    @field_validator("current_dir")
    @classmethod
    def _validate_current_dir(cls, v: Path) -> Path:
        return Path(v).absolute()

    def compile_highlight(self) -> Pattern[str] | None:
        if self.highlight is None:
            return None
        return re.compile(self.highlight, re.IGNORECASE)


def load_config(path: str | Path | None = None, **overrides: Any) -> Config:
    """Build a Config from the YAML file at 'path' (if any) and explicit overrides.

    Overrides whose value is None are ignored so that unset command-line
    options fall back to the file, then to the model defaults.
    """
    data: dict[str, Any] = {}
    if path is not None:
        with open(path, "r", encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"{path}: {e}")
        if not isinstance(loaded, dict):
            raise ValueError(f"{path}: expected a mapping at the top level")
        data.update(loaded)
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        # Re-raise with a cleaner message for CLI users
        raise ValueError(str(e))


def parse_line(line: str) -> ParsedLine | None:
    """Recognize a grep-like line, or return None when it has no location part."""
    m = LINE_RE.search(line)
    if not m:
        return None
    return ParsedLine(
        filepath=m.group("filepath"),
        contents=m.group("contents"),
        prefix=m.group("prefix"),
        row=m.group("row"),
        column=m.group("column"),
    )
