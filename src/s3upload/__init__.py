"""Upload a local file or directory tree to an S3 bucket."""

from s3upload.errors import AuthenticationError, ConfigurationError, S3UploadError, TransferError
from s3upload.models import UploadedObject, UploadRequest, UploadSummary
from s3upload.upload import execute

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "S3UploadError",
    "TransferError",
    "UploadRequest",
    "UploadSummary",
    "UploadedObject",
    "execute",
]
