"""Main DirectCloudClient class for talking to DirectCloud-BOX."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx

from directcloud_uploader._internal.api import DEFAULT_ENDPOINT, ApiError, DirectCloudAPI
from directcloud_uploader.classifier import content_type_for
from directcloud_uploader.exceptions import (
    AuthenticationError,
    FolderCreationError,
    UploadError,
)
from directcloud_uploader.models import Credentials, Session

logger = logging.getLogger(__name__)


class DirectCloudClient:
    """Client for the DirectCloud-BOX open API.

    The client holds no authentication state: authenticate() returns a
    Session that callers pass to every folder and upload call.

    Example:
        with DirectCloudClient() as client:
            session = client.authenticate(credentials)
            node = client.create_folder(session, "42", "reports")
            client.upload_file(session, node, Path("reports/summary.pdf"))
    """

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            endpoint: API base URL
            transport: Optional httpx transport, mainly for tests
        """
        self._api: DirectCloudAPI | None = DirectCloudAPI(endpoint, transport=transport)

    def __enter__(self) -> DirectCloudClient:
        """Enter context manager."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Exit context manager."""
        self.close()

    def _get_api(self) -> DirectCloudAPI:
        if self._api is None:
            raise RuntimeError("Client is closed")
        return self._api

    def authenticate(self, credentials: Credentials) -> Session:
        """Exchange credentials for an access token and session cookie.

        Raises:
            AuthenticationError: If the request fails or the server refuses it
        """
        try:
            data, cookies = self._get_api().fetch_token(credentials.as_form())
        except ApiError as e:
            raise AuthenticationError(f"Failed to get access token: {e}") from e

        token = data.get("access_token")
        if not data.get("success") or not token:
            raise AuthenticationError(
                "Failed to get access token. Please check your environment variables"
            )
        logger.debug(f"Authenticated with {len(cookies)} session cookie(s)")
        return Session(cookie=tuple(cookies), access_token=str(token))

    def create_folder(self, session: Session, parent: str, name: str) -> str:
        """Create a child folder under parent.

        Returns:
            Identifier of the new node

        Raises:
            FolderCreationError: If the server rejects the request
        """
        try:
            data = self._get_api().create_folder(session.headers(), str(parent), name)
        except ApiError as e:
            raise FolderCreationError(name, str(e)) from e

        new_node = data.get("node")
        if not data.get("success") or new_node is None:
            raise FolderCreationError(name, data.get("all"))
        logger.info(f"{name} is successfully created (id: {new_node})")
        return str(new_node)

    def upload_file(self, session: Session, node: str, local_path: Path | str) -> None:
        """Upload one local file into node.

        The whole file is read into memory before sending.

        Raises:
            UploadError: If the file cannot be read or the upload is rejected
        """
        local_path = Path(local_path)
        try:
            content = local_path.read_bytes()
        except OSError as e:
            raise UploadError(local_path, e.strerror or str(e)) from e

        content_type = content_type_for(local_path)
        try:
            data = self._get_api().upload(
                session.headers(), str(node), local_path.name, content, content_type
            )
        except ApiError as e:
            raise UploadError(local_path, str(e)) from e

        if not data.get("success"):
            raise UploadError(local_path)
        logger.info(f"{local_path} is successfully uploaded")

    def close(self) -> None:
        """Close the client and clean up resources."""
        if self._api is not None:
            self._api.close()
            self._api = None
