"""Validation helpers for uploaded doctor images."""

from __future__ import annotations

import os
import uuid
from pathlib import Path
from typing import Iterable

from flask import current_app
from werkzeug.datastructures import FileStorage

from errors import ValidationError

MAX_UPLOAD_SIZE_DEFAULT = 5 * 1024 * 1024  # 5 MB
ALLOWED_EXTENSIONS_DEFAULT = {"jpg", "jpeg", "png", "gif", "webp"}


def allowed_extensions() -> set[str]:
    configured = current_app.config.get("ALLOWED_IMAGE_TYPES")
    if not configured:
        return set(ALLOWED_EXTENSIONS_DEFAULT)
    if isinstance(configured, str):
        values: Iterable[str] = configured.split(",")
    else:
        values = configured

    normalized: set[str] = set()
    for raw in values:
        if not isinstance(raw, str):
            continue

        item = raw.strip().lower()
        if "/" in item and not item.startswith("."):
            item = item.rsplit("/", 1)[-1]

        item = item.lstrip(".")
        if item:
            normalized.add(item)

    if not normalized:
        return set(ALLOWED_EXTENSIONS_DEFAULT)
    if "jpeg" in normalized:
        normalized.add("jpg")
    if "jpg" in normalized:
        normalized.add("jpeg")
    return normalized


def get_uploaded_image(files, field: str = "image") -> FileStorage | None:
    """Return the validated upload for ``field``, or None when nothing was sent."""

    file = files.get(field)
    if not isinstance(file, FileStorage) or not (file.filename or "").strip():
        return None

    validate_image(file)
    return file


def validate_image(file: FileStorage) -> None:
    filename = file.filename or ""
    extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if extension not in allowed_extensions():
        allowed = ", ".join(sorted(allowed_extensions()))
        raise ValidationError(f"Image type not allowed. Allowed types: {allowed}.")

    max_size = int(current_app.config.get("MAX_UPLOAD_SIZE", MAX_UPLOAD_SIZE_DEFAULT))
    file.stream.seek(0, os.SEEK_END)
    size = file.stream.tell()
    file.stream.seek(0)
    if size > max_size:
        raise ValidationError(f"Image exceeds the maximum upload size of {max_size} bytes.")


def build_unique_filename(original: str) -> str:
    suffix = Path(original).suffix.lower()
    return f"{uuid.uuid4().hex}{suffix}"
