# Author: Bradley R. Kinnard — where types go to be validated

"""
Pydantic models for a normalization run. Job in, report out.
Frozen where mutation would be a bug.
"""

import codecs
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

TARGET_NAME = "ObjectFactory.java"


class NormalizationJob(BaseModel):
    """What to do. Built once by the caller, never touched during the run."""
    model_config = ConfigDict(frozen=True)

    root: Path
    encoding: str
    skip: bool = False

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        # fail before touching any file, not halfway through the tree
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(str(e)) from e


@dataclass
class StripMarkerState:
    """scanner state for one file. reset whenever a candidate block falls apart"""
    in_comment_block: bool = False
    seen_generator_signature: bool = False
    begin: int = -1


@dataclass(frozen=True)
class StripRegion:
    begin: int  # inclusive
    end: int  # inclusive, the closing marker


class FileStatus(str, Enum):
    STRIPPED = "stripped"
    UNCHANGED = "unchanged"
    FAILED = "failed"


class FileOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    status: FileStatus
    error_kind: str | None = None  # transform_failed / replace_failed
    message: str | None = None


class RunReport(BaseModel):
    """Per-run accumulation. Failures live here instead of blowing up the walk."""
    root: Path
    skipped: bool = False
    files: list[FileOutcome] = Field(default_factory=list)
    took_ms: int = 0

    def _count(self, status: FileStatus) -> int:
        return sum(1 for f in self.files if f.status is status)

    @computed_field
    @property
    def stripped(self) -> int:
        return self._count(FileStatus.STRIPPED)

    @computed_field
    @property
    def unchanged(self) -> int:
        return self._count(FileStatus.UNCHANGED)

    @computed_field
    @property
    def failed(self) -> int:
        return self._count(FileStatus.FAILED)
