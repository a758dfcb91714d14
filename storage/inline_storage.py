"""Inline storage: images live in the database row as base64 data URIs."""

from __future__ import annotations

import base64
import mimetypes
from typing import IO

from .abstract_storage import ImageStore

DATA_URI_PREFIX = "data:"


class InlineImageStore(ImageStore):
    """Encode images as ``data:`` URIs so no filesystem is needed."""

    def store(self, file_obj: IO[bytes], filename: str) -> str:
        mimetype = getattr(file_obj, "mimetype", None)
        if not mimetype or not mimetype.startswith("image/"):
            mimetype = mimetypes.guess_type(filename)[0] or "application/octet-stream"

        payload = base64.b64encode(file_obj.read()).decode("ascii")
        return f"{DATA_URI_PREFIX}{mimetype};base64,{payload}"

    def resolve(self, reference: str | None) -> str | None:
        return reference or None

    def discard(self, reference: str) -> None:
        # The blob is removed together with the row that holds it.
        return None

    def exists(self, reference: str) -> bool:
        return bool(reference) and reference.startswith(DATA_URI_PREFIX)
