"""Submission state machine behind the new-bill form.

The form adapter wires the file input's change event to :meth:`select_file`
and the form's submit event to :meth:`submit`. One instance tracks one bill
in progress. Calls are expected to be sequential: selecting another file or
submitting again while a submission is still pending is the adapter's job to
prevent.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum

from billed.constants import ROUTES_PATH
from billed.models.attachment import Attachment
from billed.models.bill import Bill, BillForm, BillStatus
from billed.models.session import SessionContext
from billed.services.file_validator import is_acceptable, is_within_size
from billed.settings import settings
from billed.store.base import Store

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    NO_FILE = "no_file"
    FILE_INVALID = "file_invalid"
    FILE_VALID = "file_valid"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    SUBMIT_FAILED = "submit_failed"


class NewBillService:
    def __init__(
        self,
        store: Store,
        session: SessionContext,
        on_navigate: Callable[[str], None],
        max_attachment_size: int | None = None,
    ) -> None:
        self.store = store
        self.session = session
        self.on_navigate = on_navigate
        self.max_attachment_size = max_attachment_size or settings.max_attachment_size

        self.state = SubmissionState.NO_FILE
        self.attachment: Attachment | None = None
        self.file_name: str | None = None
        self.file_url: str | None = None
        self.bill_id: str | None = None

    @property
    def is_file_valid(self) -> bool:
        # Mirrors the only state submit() accepts.
        return self.state == SubmissionState.FILE_VALID

    @property
    def show_file_error(self) -> bool:
        return self.state == SubmissionState.FILE_INVALID

    def select_file(self, attachment: Attachment) -> bool:
        if not is_acceptable(attachment.content_type) or not is_within_size(
            attachment.size, self.max_attachment_size
        ):
            logger.warning(
                "Attachment rejected: file=%s type=%s size=%d",
                attachment.filename,
                attachment.content_type,
                attachment.size,
            )
            self.state = SubmissionState.FILE_INVALID
            self.attachment = None
            self.file_name = None
            self.file_url = None
            return False

        self.attachment = attachment
        self.file_name = attachment.filename
        self.file_url = None
        self.state = SubmissionState.FILE_VALID
        logger.info("Attachment accepted: file=%s type=%s", attachment.filename, attachment.content_type)
        return True

    async def submit(self, fields: BillForm | Mapping[str, object]) -> Bill | None:
        """Create and save the bill, then go back to the bills list.

        Returns ``None`` without touching the Store when no valid file is selected.
        """
        if self.state != SubmissionState.FILE_VALID:
            logger.warning("Submit refused: state=%s", self.state.value)
            return None

        form = fields if isinstance(fields, BillForm) else BillForm.model_validate(fields)
        bill = Bill(
            email=self.session.email,
            status=BillStatus.PENDING,
            **form.model_dump(),
        )
        return await self.create_bill(bill)

    async def create_bill(self, bill: Bill) -> Bill:
        self.state = SubmissionState.SUBMITTING
        try:
            created = await self.store.bills().create(bill, self.attachment)
        except Exception:
            self.state = SubmissionState.SUBMIT_FAILED
            logger.warning("Bill creation failed: email=%s name=%s", bill.email, bill.name)
            raise

        self.bill_id = created.id
        if created.file_url is not None:
            self.file_url = created.file_url
            self.file_name = created.file_name
        logger.info("Bill created: id=%s", created.id)
        return await self.update_bill(created)

    async def update_bill(self, bill: Bill) -> Bill:
        changes: dict[str, object] = {}
        if self.bill_id is not None:
            changes["id"] = self.bill_id
        if self.file_url is not None and self.file_name is not None:
            changes["file_url"] = self.file_url
            changes["file_name"] = self.file_name
        merged = bill.model_copy(update=changes)
        if merged.id is None:
            raise ValueError("Cannot update bill without an id")

        try:
            updated = await self.store.bills().update(merged)
        except Exception:
            self.state = SubmissionState.SUBMIT_FAILED
            logger.warning("Bill update failed: id=%s", merged.id)
            raise

        self.state = SubmissionState.SUBMITTED
        logger.info("Bill updated: id=%s, navigating to bills", merged.id)
        self.on_navigate(ROUTES_PATH["Bills"])
        return updated

    async def get_bills(self) -> list[Bill]:
        return await self.store.bills().list()
