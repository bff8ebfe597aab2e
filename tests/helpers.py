"""Shared test helpers for directcloud_uploader tests."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any
from urllib.parse import parse_qs

import httpx

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
PDF_BYTES = b"%PDF-1.4 test content"

_FILENAME_RE = re.compile(rb'name="Filedata"; filename="([^"]*)"\r\nContent-Type: ([^\r\n]+)')


def build_tree(root: Path, layout: dict[str, Any]) -> Path:
    """Create files (bytes/str values) and directories (dict values) under root."""
    root.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        path = root / name
        if isinstance(value, dict):
            build_tree(path, value)
        elif isinstance(value, bytes):
            path.write_bytes(value)
        else:
            path.write_text(value)
    return root


class FakeDirectCloud:
    """In-memory stand-in for the DirectCloud API, served via httpx.MockTransport."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.token_success = True
        self.failing_folders: set[str] = set()
        self.failing_uploads: set[str] = set()
        self.folders: list[tuple[str, str, str]] = []  # (parent, name, node)
        self.uploads: list[tuple[str, str, str]] = []  # (node, filename, content type)
        self._next_node = 99

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        path = request.url.path
        if path == "/openapi/jauth/token":
            return self._token()
        if path.startswith("/openapp/v1/folders/create/"):
            return self._create_folder(path.rsplit("/", 1)[-1], request)
        if path.startswith("/openapp/v1/files/upload/"):
            return self._upload(path.rsplit("/", 1)[-1], request)
        return httpx.Response(404, json={"success": False})

    def _token(self) -> httpx.Response:
        if not self.token_success:
            return httpx.Response(200, json={"success": False})
        return httpx.Response(
            200,
            json={"success": True, "access_token": "token-123"},
            headers=[
                ("set-cookie", "sid=abc; Path=/; HttpOnly"),
                ("set-cookie", "lb=node1; Path=/"),
            ],
        )

    def _create_folder(self, parent: str, request: httpx.Request) -> httpx.Response:
        name = parse_qs(request.content.decode())["name"][0]
        if name in self.failing_folders:
            return httpx.Response(200, json={"success": False, "all": "Folder already exists"})
        node = str(self._next_node)
        self._next_node += 1
        self.folders.append((parent, name, node))
        return httpx.Response(200, json={"success": True, "node": node, "all": ""})

    def _upload(self, node: str, request: httpx.Request) -> httpx.Response:
        match = _FILENAME_RE.search(request.content)
        assert match is not None
        filename = match.group(1).decode()
        content_type = match.group(2).decode()
        if filename in self.failing_uploads:
            return httpx.Response(200, json={"success": False})
        self.uploads.append((node, filename, content_type))
        return httpx.Response(200, json={"success": True})
