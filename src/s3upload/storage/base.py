"""StorageClient and Connector protocols."""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict


class Credentials(BaseModel):
    """Explicit access keys. Normally ``None`` so the default chain is used."""

    model_config = ConfigDict(frozen=True)

    access_key: str
    secret_key: str
    session_token: str | None = None


class StorageClient(Protocol):
    """Capability to write single objects into a bucket."""

    def put_object(self, bucket: str, key: str, file: str) -> None:
        """Upload ``file`` to ``bucket`` under ``key``.

        Content type and length are inferred by the client; no metadata,
        ACL or storage class is set.

        Raises:
            TransferError: the upload did not complete.
        """
        ...


class Connector(Protocol):
    """Produces an authenticated StorageClient."""

    def __call__(
        self,
        credentials: Credentials | None = None,
        region: str | None = None,
        endpoint: str | None = None,
        path_style: bool = False,
    ) -> StorageClient:
        """Authenticate and build a client.

        Args:
            credentials: Explicit keys, or None for the default credential chain.
            region: AWS region name, or None for the SDK default.
            endpoint: Custom endpoint URL, or None for the AWS endpoint.
            path_style: Put the bucket name in the request path.

        Raises:
            AuthenticationError: no usable credential source.
        """
        ...
