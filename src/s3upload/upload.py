"""Upload orchestrator: validate, authenticate, classify, upload.

One synchronous pass. Each file is put exactly once, in traversal order, and
the first failure aborts the rest of the run.
"""

from __future__ import annotations

import logging

from s3upload.errors import ConfigurationError, TransferError
from s3upload.models import UploadedObject, UploadRequest, UploadSummary
from s3upload.paths import ListingErrorHandler, plan_uploads
from s3upload.storage.base import Connector, StorageClient

logger = logging.getLogger(__name__)


def _default_connector() -> Connector:
    from s3upload.storage.s3 import connect

    return connect


def _put(client: StorageClient, bucket: str, key: str, file: str) -> None:
    try:
        client.put_object(bucket, key, file)
    except TransferError:
        raise
    except Exception as exc:
        raise TransferError(bucket, key, file, str(exc)) from exc


def execute(
    request: UploadRequest,
    connector: Connector | None = None,
    on_listing_error: ListingErrorHandler | None = None,
) -> UploadSummary:
    """Upload ``request.path`` to ``request.bucket``.

    Args:
        request: Bucket, local path, optional key/prefix and region.
        connector: Builds the storage client; defaults to the boto3 connector.
        on_listing_error: Called for directories that cannot be listed.

    Returns:
        UploadSummary listing every object written.

    Raises:
        ConfigurationError: bucket is missing (nothing else is touched).
        AuthenticationError: the connector found no usable credentials.
        TransferError: an upload failed; later files are not attempted.
    """
    if not request.bucket:
        raise ConfigurationError("You need to specify a bucket for the s3-upload configuration")
    bucket = request.bucket

    connect = connector or _default_connector()
    client = connect(credentials=None, region=request.region, endpoint=None, path_style=False)

    summary = UploadSummary(bucket=bucket)
    for key, file in plan_uploads(request.path, request.key, on_listing_error):
        _put(client, bucket, key, file)
        logger.info("Uploaded %s to s3://%s/%s", file, bucket, key)
        summary.objects.append(UploadedObject(key=key, file=file))

    if not summary.objects:
        logger.warning("No files found under %s", request.path)
    return summary
