from __future__ import annotations

from abc import ABC, abstractmethod

from billed.models.attachment import Attachment
from billed.models.bill import Bill


class BillStore(ABC):
    @abstractmethod
    async def list(self) -> list[Bill]:
        """Bills belonging to the store's session."""
        ...

    @abstractmethod
    async def create(self, bill: Bill, attachment: Attachment | None = None) -> Bill:
        """Persist a draft bill, uploading its attachment if given. Returns it with ``id`` set."""
        ...

    @abstractmethod
    async def update(self, bill: Bill) -> Bill: ...


class Store(ABC):
    @abstractmethod
    def bills(self) -> BillStore: ...
