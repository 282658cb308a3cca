"""Upload configuration loaded from environment variables."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from s3upload.errors import ConfigurationError
from s3upload.models import UploadRequest


def _env(name: str) -> str | None:
    value = os.environ.get(name, "").strip()
    return value or None


class UploadConfig(BaseModel):
    """Settings for one run. Any field may be overridden from the CLI."""

    bucket: str | None = Field(default=None, description="Target S3 bucket")
    path: str | None = Field(default=None, description="Local file or directory to upload")
    key: str | None = Field(default=None, description="Object key, or key prefix for directories")
    region: str | None = Field(default=None, description="AWS region")
    debug: bool = False

    @classmethod
    def from_env(cls) -> UploadConfig:
        """Load configuration from S3_UPLOAD_* environment variables."""
        return cls(
            bucket=_env("S3_UPLOAD_BUCKET"),
            path=_env("S3_UPLOAD_PATH"),
            key=_env("S3_UPLOAD_KEY"),
            region=_env("S3_UPLOAD_REGION") or _env("AWS_REGION"),
            debug=bool(_env("S3_UPLOAD_DEBUG")),
        )

    def merged(self, **overrides: str | bool | None) -> UploadConfig:
        """Return a copy with every non-None override applied."""
        changes = {name: value for name, value in overrides.items() if value is not None}
        return self.model_copy(update=changes)

    def to_request(self) -> UploadRequest:
        """Build the UploadRequest. The bucket is checked by the orchestrator."""
        if not self.path:
            raise ConfigurationError("You need to specify a path to upload")
        return UploadRequest(
            bucket=self.bucket,
            path=self.path,
            key=self.key,
            region=self.region,
        )
