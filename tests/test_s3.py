"""Tests for the boto3 storage client and connector."""

from __future__ import annotations

import pytest
from botocore.exceptions import ClientError

from s3upload.errors import AuthenticationError, TransferError
from s3upload.storage.base import Credentials
from s3upload.storage.s3 import S3StorageClient, connect

_AWS_ENV = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_SECURITY_TOKEN",
    "AWS_PROFILE",
    "AWS_DEFAULT_PROFILE",
    "AWS_CONTAINER_CREDENTIALS_RELATIVE_URI",
    "AWS_CONTAINER_CREDENTIALS_FULL_URI",
    "AWS_WEB_IDENTITY_TOKEN_FILE",
    "AWS_ROLE_ARN",
    "AWS_ENDPOINT_URL",
    "AWS_ENDPOINT_URL_S3",
)


@pytest.fixture
def no_aws_credentials(tmp_path, monkeypatch):
    for name in _AWS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "missing-credentials"))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "missing-config"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")


class _RecordingBotoClient:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, str, str]] = []
        self.error = error

    def upload_file(self, filename, bucket, key):
        if self.error:
            raise self.error
        self.calls.append((filename, bucket, key))


def test_connect_without_credentials_raises(no_aws_credentials):
    with pytest.raises(AuthenticationError) as exc_info:
        connect(region="us-east-1")

    message = str(exc_info.value)
    assert "Unable to authenticate" in message
    assert "credentials.html" in message


def test_connect_reads_environment_credentials(no_aws_credentials, monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIDEXAMPLE")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "secret")

    client = connect(region="eu-west-1")

    assert isinstance(client, S3StorageClient)
    assert client._client.meta.region_name == "eu-west-1"


def test_connect_explicit_credentials_endpoint_and_path_style(no_aws_credentials):
    client = connect(
        credentials=Credentials(access_key="minio", secret_key="minio123"),
        region="us-east-1",
        endpoint="http://localhost:9000",
        path_style=True,
    )

    meta = client._client.meta
    assert meta.endpoint_url == "http://localhost:9000"
    assert meta.config.s3["addressing_style"] == "path"


def test_put_object_passes_file_bucket_key():
    boto_client = _RecordingBotoClient()

    S3StorageClient(boto_client).put_object("my-bucket", "a/b.txt", "/data/a/b.txt")

    assert boto_client.calls == [("/data/a/b.txt", "my-bucket", "a/b.txt")]


def test_put_object_client_error_becomes_transfer_error():
    error = ClientError(
        {"Error": {"Code": "NoSuchBucket", "Message": "The specified bucket does not exist"}},
        "PutObject",
    )
    boto_client = _RecordingBotoClient(error=error)

    with pytest.raises(TransferError) as exc_info:
        S3StorageClient(boto_client).put_object("missing", "a.txt", "/data/a.txt")

    exc = exc_info.value
    assert exc.bucket == "missing"
    assert exc.key == "a.txt"
    assert "NoSuchBucket" in str(exc)
    assert exc.__cause__ is error


def test_put_object_missing_local_file_becomes_transfer_error():
    boto_client = _RecordingBotoClient(error=FileNotFoundError(2, "No such file", "/nope"))

    with pytest.raises(TransferError, match="/nope"):
        S3StorageClient(boto_client).put_object("b", "nope", "/nope")
