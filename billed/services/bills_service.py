from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date

from billed.constants import ROUTES_PATH
from billed.dates import parse_iso
from billed.models.bill import Bill
from billed.store.base import Store

logger = logging.getLogger(__name__)


def _date_key(bill: Bill) -> tuple[int, date]:
    try:
        return 0, parse_iso(bill.date)
    except ValueError:
        return 1, date.max


def sort_bills(bills: Iterable[Bill]) -> list[Bill]:
    """Oldest first. Bills with an unreadable date go last, in their original order."""
    return sorted(bills, key=_date_key)


class BillsService:
    def __init__(self, store: Store, on_navigate: Callable[[str], None] | None = None) -> None:
        self.store = store
        self.on_navigate = on_navigate

    async def list_bills(self) -> list[Bill]:
        bills = await self.store.bills().list()
        if not bills:
            logger.debug("No bills to display")
            return []
        result = sort_bills(bills)
        logger.debug("Listed %d bills", len(result))
        return result

    def new_bill(self) -> None:
        if self.on_navigate is None:
            raise RuntimeError("Navigation not configured")
        self.on_navigate(ROUTES_PATH["NewBill"])
