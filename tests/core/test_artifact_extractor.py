import zipfile
from unittest.mock import patch

import pytest

from lambda_builder.core.artifact_extractor import extract_archive
from lambda_builder.core.exceptions import ExtractionError


class TestExtractArchive:
    """Tests for build archive extraction."""

    def test_extracts_all_entries(self, tmp_path, write_zip):
        archive = write_zip(tmp_path / "lambda.zip", {
            "bootstrap": "binary",
            "lib/helper.py": "print('hi')",
        })
        destination = tmp_path / "out"
        destination.mkdir()

        extract_archive(archive, destination)

        assert (destination / "bootstrap").read_text() == "binary"
        assert (destination / "lib" / "helper.py").read_text() == "print('hi')"

    def test_missing_archive(self, tmp_path):
        with pytest.raises(ExtractionError, match="not found"):
            extract_archive(tmp_path / "lambda.zip", tmp_path)

    def test_corrupt_archive(self, tmp_path):
        archive = tmp_path / "lambda.zip"
        archive.write_bytes(b"definitely not a zip")
        with pytest.raises(ExtractionError, match="error extracting lambda.zip") as exc_info:
            extract_archive(archive, tmp_path)
        assert isinstance(exc_info.value.__cause__, zipfile.BadZipFile)

    def test_rejects_path_traversal(self, tmp_path, write_zip):
        archive = write_zip(tmp_path / "lambda.zip", {"../escape.txt": "nope"})
        destination = tmp_path / "out"
        destination.mkdir()

        with pytest.raises(ExtractionError, match="outside of build directory"):
            extract_archive(archive, destination)
        assert not (tmp_path / "escape.txt").exists()

    def test_damaged_compressed_data(self, tmp_path):
        archive = tmp_path / "lambda.zip"
        with zipfile.ZipFile(archive, "w", zipfile.ZIP_DEFLATED) as zf:
            zf.writestr("app.py", "".join(f"line {i} of the handler module\n" for i in range(2000)))
        data = bytearray(archive.read_bytes())
        for i in range(60, 400):
            data[i] ^= 0xFF
        archive.write_bytes(bytes(data))
        destination = tmp_path / "out"
        destination.mkdir()

        with pytest.raises(ExtractionError, match="error extracting lambda.zip"):
            extract_archive(archive, destination)

    def test_truncated_compressed_stream(self, tmp_path):
        with patch("zipfile.ZipFile.extractall", side_effect=EOFError("truncated")):
            archive = tmp_path / "lambda.zip"
            with zipfile.ZipFile(archive, "w") as zf:
                zf.writestr("app.py", "x")
            with pytest.raises(ExtractionError) as exc_info:
                extract_archive(archive, tmp_path)
        assert isinstance(exc_info.value.__cause__, EOFError)
