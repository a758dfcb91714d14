"""Tests for the image storage backends."""

from __future__ import annotations

import base64
from io import BytesIO

import pytest
from werkzeug.datastructures import FileStorage

from storage import FileImageStore, InlineImageStore


def test_file_store_lifecycle(tmp_path):
    store = FileImageStore(str(tmp_path / "uploads"), public_url="https://cdn.example/uploads/")

    reference = store.store(BytesIO(b"image-bytes"), "photo.png")

    assert reference == "photo.png"
    assert store.exists(reference)
    assert (tmp_path / "uploads" / "photo.png").read_bytes() == b"image-bytes"
    assert store.resolve(reference) == "https://cdn.example/uploads/photo.png"
    assert store.resolve(None) is None

    store.discard(reference)
    assert not store.exists(reference)
    # discarding twice is harmless
    store.discard(reference)


def test_file_store_sanitises_names(tmp_path):
    store = FileImageStore(str(tmp_path))

    reference = store.store(BytesIO(b"x"), "../../etc/passwd.png")

    assert "/" not in reference
    assert (tmp_path / reference).exists()


def test_file_store_refuses_path_traversal_on_discard(tmp_path):
    store = FileImageStore(str(tmp_path / "uploads"))
    outside = tmp_path / "keep.txt"
    outside.write_text("keep")

    with pytest.raises(ValueError):
        store.discard("../keep.txt")
    assert outside.exists()
    assert store.exists("../keep.txt") is False


def test_inline_store_encodes_data_uri():
    store = InlineImageStore()
    upload = FileStorage(stream=BytesIO(b"\x89PNG"), filename="a.png", content_type="image/png")

    reference = store.store(upload, "a.png")

    assert reference == "data:image/png;base64," + base64.b64encode(b"\x89PNG").decode()
    assert store.resolve(reference) == reference
    assert store.exists(reference)
    store.discard(reference)
    assert store.resolve(None) is None


def test_inline_store_guesses_mimetype_from_filename():
    reference = InlineImageStore().store(BytesIO(b"jpeg"), "photo.jpg")

    assert reference.startswith("data:image/jpeg;base64,")
