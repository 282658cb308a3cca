"""boto3-backed storage client."""

from __future__ import annotations

import logging
from typing import Any

from s3upload.errors import AuthenticationError, TransferError
from s3upload.storage.base import Credentials

logger = logging.getLogger(__name__)


class S3StorageClient:
    """Wraps a boto3 S3 client."""

    def __init__(self, client: Any) -> None:
        self._client = client

    def put_object(self, bucket: str, key: str, file: str) -> None:
        from boto3.exceptions import S3UploadFailedError
        from botocore.exceptions import BotoCoreError, ClientError

        try:
            self._client.upload_file(file, bucket, key)
        except (ClientError, BotoCoreError, S3UploadFailedError, OSError) as exc:
            raise TransferError(bucket, key, file, str(exc)) from exc


def connect(
    credentials: Credentials | None = None,
    region: str | None = None,
    endpoint: str | None = None,
    path_style: bool = False,
) -> S3StorageClient:
    """Build an S3 client from explicit credentials or the default chain.

    The default chain covers environment variables, shared credentials and
    config files, and instance/container metadata.
    """
    import boto3
    from botocore.config import Config
    from botocore.exceptions import BotoCoreError

    if credentials is not None:
        session = boto3.Session(
            aws_access_key_id=credentials.access_key,
            aws_secret_access_key=credentials.secret_key,
            aws_session_token=credentials.session_token,
            region_name=region,
        )
    else:
        session = boto3.Session(region_name=region)

    try:
        resolved = session.get_credentials()
    except BotoCoreError as exc:
        raise AuthenticationError(str(exc)) from exc
    if resolved is None:
        raise AuthenticationError("no credentials found in the default provider chain")

    config = Config(s3={"addressing_style": "path"}) if path_style else None
    try:
        client = session.client("s3", endpoint_url=endpoint or None, config=config)
    except BotoCoreError as exc:
        raise AuthenticationError(str(exc)) from exc

    logger.debug(
        "Connected to S3 (region=%s, endpoint=%s, path_style=%s)",
        client.meta.region_name,
        endpoint or "default",
        path_style,
    )
    return S3StorageClient(client)
