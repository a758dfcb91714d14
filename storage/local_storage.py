"""Local filesystem storage implementation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import IO

from werkzeug.utils import secure_filename

from config import Config

from .abstract_storage import ImageStore


class FileImageStore(ImageStore):
    """Persist images to the local filesystem under the configured upload directory."""

    def __init__(self, upload_dir: str | None = None, public_url: str = "/uploads"):
        self.base_directory = Path(upload_dir or Config.UPLOAD_DIR)
        self.public_url = public_url.rstrip("/")
        os.makedirs(self.base_directory, exist_ok=True)

    def _path_for(self, reference: str) -> Path:
        safe_name = secure_filename(reference)
        if not safe_name or safe_name != reference:
            raise ValueError(f"Invalid image reference: {reference!r}")
        return self.base_directory / safe_name

    def store(self, file_obj: IO[bytes], filename: str) -> str:
        """Save an image and return its file name within the upload directory."""

        safe_name = secure_filename(filename)
        if not safe_name:
            raise ValueError("Filename must contain at least one valid character.")

        destination = self.base_directory / safe_name
        if hasattr(file_obj, "save"):
            file_obj.save(destination)  # type: ignore[arg-type]
        else:
            with open(destination, "wb") as output:
                output.write(file_obj.read())

        return str(destination.relative_to(self.base_directory))

    def resolve(self, reference: str | None) -> str | None:
        if not reference:
            return None
        return f"{self.public_url}/{reference}"

    def discard(self, reference: str) -> None:
        """Delete the file; a file that is already gone is not an error."""

        self._path_for(reference).unlink(missing_ok=True)

    def exists(self, reference: str) -> bool:
        """Return True if the given file exists within the upload directory."""

        try:
            return self._path_for(reference).exists()
        except ValueError:
            return False
