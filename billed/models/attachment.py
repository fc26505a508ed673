from __future__ import annotations

from pydantic import BaseModel

ALLOWED_ATTACHMENT_TYPES = frozenset({"image/jpeg", "image/jpg", "image/png"})

CONTENT_TYPE_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/png": ".png",
}


def media_type_essence(media_type: str | None) -> str:
    """``"IMAGE/PNG; charset=binary"`` -> ``"image/png"``."""
    if not media_type:
        return ""
    return media_type.split(";", 1)[0].strip().lower()


class Attachment(BaseModel):
    filename: str
    content_type: str | None = None
    data: bytes = b""

    @property
    def size(self) -> int:
        return len(self.data)
