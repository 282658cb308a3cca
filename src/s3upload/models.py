"""Data models for s3upload runs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class UploadRequest(BaseModel):
    """What to upload and where (bucket is validated by the orchestrator)."""

    model_config = ConfigDict(frozen=True)

    bucket: str | None = None
    path: str
    key: str | None = None  # prefix for directories, full key for a single file
    region: str | None = None


class UploadedObject(BaseModel):
    """A single object written to the bucket."""

    key: str
    file: Path


class UploadSummary(BaseModel):
    """Result of a completed run."""

    bucket: str
    objects: list[UploadedObject] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.objects)
