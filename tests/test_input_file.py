"""Tests for attachment variants and the InputFile construction helpers."""

import io
import sys
import os

import pytest
from pydantic import ValidationError

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from telebind.exceptions import InputFileError
from telebind.input_file import (
    DEFAULT_CONTENT_TYPE,
    EmptyFile,
    FileType,
    InputFile,
    InputFileId,
    InputFileStream,
    InputFileUrl,
    requires_multipart,
)


# ── Variants ─────────────────────────────────────────────────────────────────


class TestVariants:
    """Each variant carries its own discriminator and is immutable."""

    def test_discriminators(self) -> None:
        assert EmptyFile().type is FileType.EMPTY
        assert InputFileId(file_id="ABC").type is FileType.FILE_ID
        assert InputFileUrl(url="https://example.com/a.mp4").type is FileType.URL
        assert InputFileStream(content=b"x", filename="a.bin").type is FileType.STREAM

    def test_frozen(self) -> None:
        file_id = InputFileId(file_id="ABC")
        with pytest.raises(ValidationError):
            file_id.file_id = "DEF"

    def test_stream_repr_hides_content(self) -> None:
        stream = InputFileStream(content=b"secret-bytes", filename="a.bin")
        assert "secret-bytes" not in repr(stream)
        assert stream.size == len(b"secret-bytes")

    def test_requires_multipart_only_for_stream(self) -> None:
        assert requires_multipart(InputFileStream(content=b"x", filename="a.bin")) is True
        assert requires_multipart(InputFileId(file_id="ABC")) is False
        assert requires_multipart(InputFileUrl(url="https://example.com/a")) is False
        assert requires_multipart(EmptyFile()) is False
        assert requires_multipart(None) is False


# ── from_file_id / from_url ──────────────────────────────────────────────────


class TestRemoteReferences:
    """file_id and URL helpers validate eagerly."""

    def test_from_file_id(self) -> None:
        assert InputFile.from_file_id("ABC123") == InputFileId(file_id="ABC123")

    @pytest.mark.parametrize("bad", ["", "   ", None, 42])
    def test_from_file_id_rejects_blank(self, bad: object) -> None:
        with pytest.raises(InputFileError):
            InputFile.from_file_id(bad)  # type: ignore[arg-type]

    @pytest.mark.parametrize("url", ["https://example.com/clip.mp4", "http://cdn.example.org/x?y=1"])
    def test_from_url(self, url: str) -> None:
        assert InputFile.from_url(url).url == url

    @pytest.mark.parametrize("bad", ["ftp://example.com/a", "example.com/a.mp4", "https://", "not a url"])
    def test_from_url_rejects_malformed(self, bad: str) -> None:
        with pytest.raises(InputFileError):
            InputFile.from_url(bad)

    def test_empty(self) -> None:
        assert InputFile.empty() == EmptyFile()


# ── from_path ────────────────────────────────────────────────────────────────


class TestFromPath:
    """Local files are read into stream attachments."""

    def test_reads_file(self, tmp_path) -> None:
        clip = tmp_path / "clip.mp4"
        clip.write_bytes(b"\x00\x00\x00\x18ftypmp42")
        stream = InputFile.from_path(clip)
        assert stream.filename == "clip.mp4"
        assert stream.content == b"\x00\x00\x00\x18ftypmp42"
        assert stream.content_type == "video/mp4"

    def test_accepts_str_path_and_explicit_type(self, tmp_path) -> None:
        blob = tmp_path / "note.bin"
        blob.write_bytes(b"abc")
        stream = InputFile.from_path(str(blob), content_type="video/mp4")
        assert stream.content_type == "video/mp4"

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(InputFileError):
            InputFile.from_path(tmp_path / "missing.mp4")

    def test_directory_rejected(self, tmp_path) -> None:
        with pytest.raises(InputFileError):
            InputFile.from_path(tmp_path)

    def test_unsupported_path_type(self) -> None:
        with pytest.raises(InputFileError):
            InputFile.from_path(12345)  # type: ignore[arg-type]


# ── from_stream ──────────────────────────────────────────────────────────────


class TestFromStream:
    """In-memory buffers and readable objects become stream attachments."""

    def test_bytes(self) -> None:
        stream = InputFile.from_stream(b"data", "clip.mp4", "video/mp4")
        assert stream.content == b"data"
        assert stream.filename == "clip.mp4"
        assert stream.content_type == "video/mp4"

    def test_buffer_is_copied(self) -> None:
        buffer = bytearray(b"original")
        stream = InputFile.from_stream(buffer, "clip.mp4")
        buffer[:] = b"reused!!"
        assert stream.content == b"original"

    def test_memoryview(self) -> None:
        stream = InputFile.from_stream(memoryview(b"view"), "clip.mp4")
        assert stream.content == b"view"

    def test_readable_object(self) -> None:
        stream = InputFile.from_stream(io.BytesIO(b"from-io"), "clip.mp4")
        assert stream.content == b"from-io"
        assert stream.content_type == "video/mp4"

    def test_unknown_extension_defaults_content_type(self) -> None:
        stream = InputFile.from_stream(b"x", "payload.zzqqzz")
        assert stream.content_type == DEFAULT_CONTENT_TYPE

    def test_text_stream_rejected(self) -> None:
        with pytest.raises(InputFileError):
            InputFile.from_stream(io.StringIO("text"), "clip.mp4")

    def test_unsupported_source_rejected(self) -> None:
        with pytest.raises(InputFileError):
            InputFile.from_stream(12345, "clip.mp4")

    def test_empty_content_and_filename_pass_through(self) -> None:
        stream = InputFile.from_stream(b"", "")
        assert stream.content == b""
        assert stream.filename == ""
