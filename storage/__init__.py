"""Storage backends."""

from flask import current_app, has_request_context, request

from .abstract_storage import ImageStore
from .inline_storage import InlineImageStore
from .local_storage import FileImageStore

IMAGE_STORAGE_MODES = ("file", "inline")


def get_image_store() -> ImageStore:
    """Build the image store selected by the ``IMAGE_STORAGE`` setting."""

    mode = (current_app.config.get("IMAGE_STORAGE") or "file").strip().lower()
    if mode == "inline":
        return InlineImageStore()
    if mode != "file":
        raise RuntimeError(
            f"IMAGE_STORAGE must be one of {', '.join(IMAGE_STORAGE_MODES)}, got {mode!r}."
        )

    public_url = current_app.config.get("UPLOADS_BASE_URL")
    if not public_url:
        host = request.host_url.rstrip("/") if has_request_context() else ""
        public_url = f"{host}/uploads"
    return FileImageStore(current_app.config.get("UPLOAD_DIR"), public_url=public_url)


__all__ = ["ImageStore", "FileImageStore", "InlineImageStore", "get_image_store"]
