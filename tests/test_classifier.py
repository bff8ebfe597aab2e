"""Tests for content type detection."""

from __future__ import annotations

from pathlib import Path

from helpers import PDF_BYTES, PNG_BYTES

from directcloud_uploader import DEFAULT_CONTENT_TYPE, classify, content_type_for


class TestClassify:
    """Tests for classify and content_type_for."""

    def test_png_is_detected(self, tmp_path: Path) -> None:
        """Test that PNG magic bytes are recognized regardless of extension."""
        path = tmp_path / "image.dat"
        path.write_bytes(PNG_BYTES)

        assert classify(path) == "image/png"

    def test_pdf_is_detected(self, tmp_path: Path) -> None:
        """Test that PDF magic bytes are recognized."""
        path = tmp_path / "doc"
        path.write_bytes(PDF_BYTES)

        assert classify(path) == "application/pdf"

    def test_plain_text_is_unknown(self, tmp_path: Path) -> None:
        """Test that text has no signature."""
        path = tmp_path / "a.txt"
        path.write_text("hello world")

        assert classify(path) is None
        assert content_type_for(path) == DEFAULT_CONTENT_TYPE == "text/plain"

    def test_empty_file_is_unknown(self, tmp_path: Path) -> None:
        """Test that zero-length files do not raise."""
        path = tmp_path / "empty"
        path.touch()

        assert classify(path) is None

    def test_missing_file_is_unknown(self, tmp_path: Path) -> None:
        """Test that unreadable paths do not raise."""
        assert classify(tmp_path / "missing") is None
        assert content_type_for(tmp_path / "missing") == "text/plain"
