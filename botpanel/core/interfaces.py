"""Interfaces for data access.

The template engine only reads through DataStore, so tests and previews
can swap in any object with these four lookups.
"""

from typing import Protocol

from botpanel.core.types import Business, Client, Order, Promotion


class DataStore(Protocol):
    """Point lookups by ID.

    Every method returns None when the row does not exist and raises
    botpanel.database.StoreError when the backing store fails.
    """

    def get_client(self, client_id: str) -> Client | None: ...

    def get_business(self, user_id: str) -> Business | None: ...

    def get_promotion(self, promotion_id: str) -> Promotion | None: ...

    def get_order(self, order_id: str) -> Order | None: ...
