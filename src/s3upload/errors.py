"""Exception taxonomy for s3upload runs.

Every error here is fatal for the run: nothing is retried and objects already
uploaded are left in place.
"""

from __future__ import annotations

CREDENTIALS_DOCS_URL = (
    "https://boto3.amazonaws.com/v1/documentation/api/latest/guide/credentials.html"
)


class S3UploadError(Exception):
    """Base class for all s3upload failures."""


class ConfigurationError(S3UploadError):
    """Required input is missing. Raised before any I/O."""


class AuthenticationError(S3UploadError):
    """No usable credential source was found."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(
            "Unable to authenticate to S3 with the available credentials. Make sure to "
            "define the environment variables or shared credentials described in "
            f"{CREDENTIALS_DOCS_URL}\nDetail: {detail}"
        )


class TransferError(S3UploadError):
    """A single object upload failed; remaining uploads are aborted."""

    def __init__(self, bucket: str, key: str, file: str, detail: str) -> None:
        self.bucket = bucket
        self.key = key
        self.file = file
        self.detail = detail
        super().__init__(f"Upload of {file} to s3://{bucket}/{key} failed: {detail}")
