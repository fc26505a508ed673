from __future__ import annotations

import logging
from pathlib import PurePosixPath

from ulid import ULID

from billed.dates import parse_iso
from billed.models.attachment import CONTENT_TYPE_EXTENSIONS, Attachment, media_type_essence
from billed.models.bill import Bill
from billed.settings import settings
from billed.storage.base import StorageBackend
from billed.store.base import BillStore, Store

logger = logging.getLogger(__name__)


def _attachment_key(bill_id: str, attachment: Attachment) -> str:
    suffix = PurePosixPath(attachment.filename).suffix.lower()
    ext = CONTENT_TYPE_EXTENSIONS.get(media_type_essence(attachment.content_type), suffix)
    prefix = settings.storage_prefix
    if prefix:
        return f"{prefix}/{bill_id}{ext}"
    return f"{bill_id}{ext}"


class InMemoryBillStore(BillStore):
    """Keeps bills in a dict and attachment files in a StorageBackend.

    With ``owner_email`` set, ``list()`` only returns that employee's bills.
    """

    def __init__(
        self,
        storage: StorageBackend,
        owner_email: str | None = None,
        bills: list[Bill] | None = None,
    ) -> None:
        self.storage = storage
        self.owner_email = owner_email
        self._bills: dict[str, Bill] = {}
        for bill in bills or []:
            if bill.id is None:
                raise ValueError("Seed bills must have an id")
            self._bills[bill.id] = bill

    async def list(self) -> list[Bill]:
        result = [
            bill.model_copy()
            for bill in self._bills.values()
            if self.owner_email is None or bill.email == self.owner_email
        ]
        logger.debug("Listed %d bills for owner=%s", len(result), self.owner_email)
        return result

    async def create(self, bill: Bill, attachment: Attachment | None = None) -> Bill:
        if not bill.is_draft:
            raise ValueError(f"Bill already persisted: {bill.id}")

        bill_id = str(ULID())
        changes: dict[str, object] = {"id": bill_id, "date": parse_iso(bill.date).isoformat()}

        if attachment is not None:
            key = _attachment_key(bill_id, attachment)
            self.storage.save(key, attachment.data, content_type=attachment.content_type or "")
            changes["file_url"] = self.storage.get_url(key)
            changes["file_name"] = attachment.filename
            logger.info("Attachment stored at %s for bill %s", key, bill_id)

        created = bill.model_copy(update=changes)
        self._bills[bill_id] = created
        logger.info("Bill created: id=%s, email=%s, name=%s", bill_id, created.email, created.name)
        return created.model_copy()

    async def update(self, bill: Bill) -> Bill:
        if bill.id is None:
            raise ValueError("Cannot update bill without an id")
        existing = self._bills.get(bill.id)
        if existing is None:
            raise LookupError(f"Bill not found: {bill.id}")

        updated = Bill.model_validate(
            bill.model_dump() | {"email": existing.email, "date": parse_iso(bill.date).isoformat()}
        )
        self._bills[bill.id] = updated
        logger.info("Bill updated: id=%s, amount=%d", updated.id, updated.amount)
        return updated.model_copy()


class InMemoryStore(Store):
    def __init__(self, storage: StorageBackend, owner_email: str | None = None) -> None:
        self._bills = InMemoryBillStore(storage, owner_email=owner_email)

    def bills(self) -> InMemoryBillStore:
        return self._bills
