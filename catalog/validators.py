"""Upload validators for catalogue photos."""
from __future__ import annotations

import mimetypes
from pathlib import Path

from django.core.exceptions import ValidationError


ALLOWED_MIME = {
    "image/jpeg",
    "image/png",
    "image/gif",
}
ALLOWED_EXT = {".jpg", ".jpeg", ".png", ".gif"}
MAX_BYTES = 2048 * 1024


def validate_photo(file) -> None:
    """Validate photo size and a conservative type check.

    Decoding is left to the image field (Pillow); this only caps size
    and rejects extensions outside jpeg/png/gif.
    """
    size = getattr(file, "size", None)
    if size is not None and size > MAX_BYTES:
        raise ValidationError("The photo may not be greater than 2048 kilobytes.")
    name = getattr(file, "name", "") or ""
    ext = Path(name).suffix.lower()
    if ext not in ALLOWED_EXT:
        raise ValidationError("The photo must be a file of type: jpeg, png, jpg, gif.")
    guessed, _ = mimetypes.guess_type(name)
    if guessed and guessed not in ALLOWED_MIME:
        raise ValidationError("The photo must be a file of type: jpeg, png, jpg, gif.")
