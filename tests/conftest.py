"""Shared fixtures: an employee session, a handful of bills, and a mocked Store."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from billed.models.attachment import Attachment
from billed.models.bill import Bill, BillStatus
from billed.models.session import SessionContext


@pytest.fixture
def session() -> SessionContext:
    return SessionContext(email="employee@test.tld", type="Employee")


@pytest.fixture
def bills() -> list[Bill]:
    return [
        Bill(
            id="47qAXb6fIm2zOKkLzMro",
            email="a@a",
            type="Hôtel et logement",
            name="encore",
            date="2004-04-04",
            amount=400,
            vat=80,
            pct=20,
            commentary="séminaire billed",
            file_url="https://test.storage.tld/preview-facture-free.jpg",
            file_name="preview-facture-free-201801-pdf-1.jpg",
            status=BillStatus.PENDING,
        ),
        Bill(
            id="BeKy5Mo4jkmdfPGYpTxZ",
            email="a@a",
            type="Transports",
            name="test1",
            date="2001-01-01",
            amount=100,
            vat=10,
            pct=20,
            commentary="plop",
            status=BillStatus.REFUSED,
        ),
        Bill(
            id="UIUZtnPQvnbFnB0ozvJh",
            email="a@a",
            type="Services en ligne",
            name="test3",
            date="2003-03-03",
            amount=300,
            vat=60,
            pct=20,
            status=BillStatus.ACCEPTED,
        ),
        Bill(
            id="qcCK3SzECmaZAGRrHjaC",
            email="a@a",
            type="Restaurants et bars",
            name="test2",
            date="2002-02-02",
            amount=200,
            vat=40,
            pct=20,
            status=BillStatus.REFUSED,
        ),
    ]


@pytest.fixture
def jpeg_attachment() -> Attachment:
    return Attachment(filename="facture.jpg", content_type="image/jpeg", data=b"\xff\xd8\xff-jpeg")


@pytest.fixture
def pdf_attachment() -> Attachment:
    return Attachment(filename="facture.pdf", content_type="application/pdf", data=b"%PDF-fake")


@pytest.fixture
def mock_store() -> MagicMock:
    """Store whose ``bills()`` accessor returns the same resource with async methods."""
    store = MagicMock()
    resource = store.bills.return_value
    resource.list = AsyncMock(return_value=[])
    resource.create = AsyncMock()
    resource.update = AsyncMock()
    return store
