"""Thin httpx wrapper for the DirectCloud open API."""

from __future__ import annotations

from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import Any

import httpx

DEFAULT_ENDPOINT = "https://api.directcloud.jp"

TOKEN_PATH = "/openapi/jauth/token"
CREATE_FOLDER_PATH = "/openapp/v1/folders/create/"
UPLOAD_PATH = "/openapp/v1/files/upload/"

DEFAULT_PARAMS = {"lang": "eng"}


class ApiError(Exception):
    """Raised when a response cannot be obtained or decoded."""

    pass


class DirectCloudAPI:
    """Issues requests against the three endpoints the uploader needs."""

    def __init__(
        self,
        endpoint: str = DEFAULT_ENDPOINT,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.endpoint = endpoint.rstrip("/")
        # Session cookies travel only in explicit headers; never store any here
        jar = CookieJar(policy=DefaultCookiePolicy(allowed_domains=[]))
        self._client = httpx.Client(transport=transport, cookies=jar)

    def _post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        data: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
    ) -> httpx.Response:
        url = f"{self.endpoint}{path}"
        try:
            response = self._client.post(
                url, params=DEFAULT_PARAMS, headers=headers, data=data, files=files
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ApiError(f"HTTP {e.response.status_code} from {path}") from e
        except httpx.HTTPError as e:
            raise ApiError(f"Request to {path} failed: {e}") from e
        return response

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as e:
            raise ApiError("Response body is not valid JSON") from e
        if not isinstance(payload, dict):
            raise ApiError("Unexpected response body")
        return payload

    def fetch_token(self, form: dict[str, str]) -> tuple[dict[str, Any], list[str]]:
        """Exchange credentials for a token.

        Returns the decoded body and the raw Set-Cookie header values.
        """
        response = self._post(TOKEN_PATH, data=form)
        cookies = response.headers.get_list("set-cookie")
        return self._json(response), cookies

    def create_folder(
        self, headers: dict[str, str], parent: str, name: str
    ) -> dict[str, Any]:
        response = self._post(
            f"{CREATE_FOLDER_PATH}{parent}", headers=headers, data={"name": name}
        )
        return self._json(response)

    def upload(
        self,
        headers: dict[str, str],
        node: str,
        file_name: str,
        content: bytes,
        content_type: str,
    ) -> dict[str, Any]:
        response = self._post(
            f"{UPLOAD_PATH}{node}",
            headers=headers,
            files={"Filedata": (file_name, content, content_type)},
        )
        return self._json(response)

    def close(self) -> None:
        self._client.close()
