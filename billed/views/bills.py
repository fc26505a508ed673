from __future__ import annotations

import logging
from typing import Protocol

from pydantic import BaseModel
from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from billed.constants import BILLS_PAGE_TITLE, EMPTY_BILLS_MESSAGE, LOADING_MESSAGE
from billed.dates import format_date, format_status
from billed.models.bill import Bill
from billed.services.bills_service import BillsService

logger = logging.getLogger(__name__)


class ImagePreviewer(Protocol):
    def show(self, url: str) -> None: ...


class ConsoleImagePreviewer:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show(self, url: str) -> None:
        self.console.print(f"[bold]Justificatif:[/bold] {url}")


class BillRow(BaseModel):
    id: str | None = None
    type: str
    name: str
    date: str
    amount: int
    status: str
    file_url: str | None = None

    @classmethod
    def from_bill(cls, bill: Bill) -> BillRow:
        try:
            shown_date = format_date(bill.date)
        except ValueError:
            # Corrupted stored date: show it as-is rather than drop the bill.
            logger.warning("Unformattable date %r for bill %s", bill.date, bill.id)
            shown_date = bill.date
        return cls(
            id=bill.id,
            type=bill.type,
            name=bill.name,
            date=shown_date,
            amount=bill.amount,
            status=format_status(bill.status),
            file_url=bill.file_url,
        )


class BillsPage(BaseModel):
    loading: bool = False
    error: str | None = None
    rows: list[BillRow] = []

    @property
    def show_empty_message(self) -> bool:
        return not self.loading and self.error is None and not self.rows


async def load_bills_page(service: BillsService) -> BillsPage:
    try:
        bills = await service.list_bills()
    except Exception as exc:
        logger.exception("Failed to load bills")
        return BillsPage(error=str(exc))
    return BillsPage(rows=[BillRow.from_bill(bill) for bill in bills])


def build_bills_table(rows: list[BillRow]) -> Table:
    table = Table(title=BILLS_PAGE_TITLE)
    table.add_column("Type")
    table.add_column("Nom")
    table.add_column("Date")
    table.add_column("Montant", justify="right")
    table.add_column("Statut", justify="center")
    table.add_column("Actions", justify="center")

    for row in rows:
        table.add_row(
            row.type,
            row.name,
            row.date,
            f"{row.amount} €",
            row.status,
            "voir" if row.file_url else "",
        )
    return table


def render_bills_page(page: BillsPage) -> RenderableType:
    if page.loading:
        return Text(LOADING_MESSAGE)
    if page.error is not None:
        return Group(Text("Erreur", style="bold red"), Text(page.error))
    if page.show_empty_message:
        return Group(Text(BILLS_PAGE_TITLE, style="bold"), Text(EMPTY_BILLS_MESSAGE))
    return build_bills_table(page.rows)


class BillsView:
    """Bills list screen: holds the current page and dispatches row actions."""

    def __init__(
        self,
        service: BillsService,
        previewer: ImagePreviewer,
        console: Console | None = None,
    ) -> None:
        self.service = service
        self.previewer = previewer
        self.console = console or Console()
        self.page = BillsPage()

    async def refresh(self) -> BillsPage:
        self.page = BillsPage(loading=True)
        self.page = await load_bills_page(self.service)
        return self.page

    def render(self) -> None:
        self.console.print(render_bills_page(self.page))

    def show_proof(self, index: int) -> None:
        row = self.page.rows[index]
        if not row.file_url:
            logger.warning("Bill %s has no attachment to preview", row.id)
            return
        self.previewer.show(row.file_url)

    def click_new_bill(self) -> None:
        self.service.new_bill()
