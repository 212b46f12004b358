"""
--------------------------------------------------------------------------------
<pqtools project>
src/pqtools/src/config.py

Validated option models for the `sample` command and the Parquet reader.

Module Author(s): Eric J. South
--------------------------------------------------------------------------------
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import OptionsError
from .projection import ColumnProjection, projection_of

BATCH_SIZE_ENV: str = "PQTOOLS_BATCH_SIZE"
DEFAULT_SAMPLE: int = 100


class ReaderSettings(BaseModel):
    # rows decoded per record batch; bounds memory while streaming
    batch_size: int = Field(default=1024, ge=1)

    @classmethod
    def from_env(cls) -> "ReaderSettings":
        raw = os.environ.get(BATCH_SIZE_ENV, "").strip()
        if not raw:
            return cls()
        try:
            return cls(batch_size=int(raw))
        except (ValueError, ValidationError) as e:
            raise OptionsError(
                f"{BATCH_SIZE_ENV} must be a positive integer, got {raw!r}"
            ) from e


class SampleOptions(BaseModel):
    path: Path
    columns: Optional[List[str]] = None
    sample: int = Field(default=DEFAULT_SAMPLE, ge=0)
    format: Literal["table"] = "table"

    @field_validator("path")
    @classmethod
    def _existing_file(cls, v: Path):
        if not v.is_file():
            raise ValueError(f"File does not exist: {v}")
        return v

    @property
    def projection(self) -> ColumnProjection:
        return projection_of(self.columns)

    @classmethod
    def build(cls, **kwargs) -> "SampleOptions":
        """Construct options, converting pydantic failures into OptionsError."""
        try:
            return cls(**kwargs)
        except ValidationError as e:
            first = e.errors()[0]
            loc = ".".join(str(p) for p in first.get("loc", ())) or "options"
            raise OptionsError(f"Invalid value for '{loc}': {first.get('msg')}") from e
