# product_api/domain/repositories/base.py

from __future__ import annotations
from typing import Any, Optional, Protocol

Record = dict[str, Any]


class DocumentStore(Protocol):
    """
    Persistence contract the product handlers depend on.
    Records are plain dicts; the store assigns the string ``id`` on insert.
    """

    async def insert(self, record: Record) -> Record: ...

    async def find_all(self) -> list[Record]: ...

    async def find_by_id(self, record_id: str) -> Optional[Record]: ...

    async def update_by_id(self, record_id: str, partial: Record) -> Optional[Record]: ...

    async def delete_by_id(self, record_id: str) -> bool: ...
