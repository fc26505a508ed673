from __future__ import annotations

from billed.models.attachment import ALLOWED_ATTACHMENT_TYPES, media_type_essence


def is_acceptable(media_type: str | None) -> bool:
    """True for the image types the Store accepts as a bill attachment."""
    return media_type_essence(media_type) in ALLOWED_ATTACHMENT_TYPES


def is_within_size(size: int, limit: int) -> bool:
    return 0 < size <= limit
