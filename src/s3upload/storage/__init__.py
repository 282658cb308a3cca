"""Storage collaborators: the client protocol and its boto3 implementation."""

from s3upload.storage.base import Connector, Credentials, StorageClient

__all__ = ["Connector", "Credentials", "StorageClient"]
