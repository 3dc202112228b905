"""Screenshot storage tests."""

import pytest

from snippet_vault.services.screenshot_storage import InvalidImageError, ScreenshotStorage


def test_save_and_delete(tmp_path):
    """Test images are written under the upload dir and removed by URL."""
    storage = ScreenshotStorage(tmp_path / "uploads", max_bytes=1024)

    url = storage.save(b"GIF89a....", "image/gif")
    stored = tmp_path / "uploads" / url.rsplit("/", 1)[-1]
    assert url.startswith("/uploads/") and url.endswith(".gif")
    assert stored.read_bytes() == b"GIF89a...."

    storage.delete(url)
    assert not stored.exists()


def test_rejects_oversized_files(tmp_path):
    """Test files over the limit are refused."""
    storage = ScreenshotStorage(tmp_path, max_bytes=10)

    with pytest.raises(InvalidImageError, match="too large"):
        storage.save(b"x" * 11, "image/png")
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("content_type", [None, "", "text/plain", "image/svg+xml"])
def test_rejects_other_types(tmp_path, content_type):
    """Test only raster image types are accepted."""
    storage = ScreenshotStorage(tmp_path, max_bytes=1024)

    with pytest.raises(InvalidImageError):
        storage.save(b"data", content_type)


def test_delete_ignores_paths_outside_upload_dir(tmp_path):
    """Test delete only touches files directly inside the upload dir."""
    outside = tmp_path / "keep.txt"
    outside.write_text("keep")
    storage = ScreenshotStorage(tmp_path / "uploads", max_bytes=1024)

    storage.delete("/uploads/../keep.txt")
    storage.delete("https://example.com/keep.txt")
    assert outside.exists()
