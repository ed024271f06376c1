"""Template context dataclasses.

VariableContext is what a caller asks for (IDs), TemplateContext is what
the ContextBuilder fetched for it (records). Variable extractors only ever
see TemplateContext.
"""

from dataclasses import dataclass
from datetime import datetime

from botpanel.core import (
    Business,
    Client,
    ClientRef,
    Order,
    Platform,
    Promotion,
    client_ref_from_id,
)


@dataclass(frozen=True)
class VariableContext:
    """Entity references for one resolution call."""

    user_id: str
    platform: Platform = Platform.WHATSAPP
    client: ClientRef | None = None
    promotion_id: str | None = None
    order_id: str | None = None

    @classmethod
    def from_ids(
        cls,
        user_id: str,
        platform: Platform | str = Platform.WHATSAPP,
        client_id: str | None = None,
        promotion_id: str | None = None,
        order_id: str | None = None,
    ) -> "VariableContext":
        """Build a context from raw request IDs.

        The reserved preview client ID becomes a PreviewClient reference.
        """
        return cls(
            user_id=user_id,
            platform=Platform(platform),
            client=client_ref_from_id(client_id),
            promotion_id=promotion_id or None,
            order_id=order_id or None,
        )


@dataclass
class TemplateContext:
    """Fetched records for template resolution.

    A None record means the entity was not requested, not found, or its
    lookup failed; its variables are then left out of the value table.
    """

    now: datetime
    client: Client | None = None
    business: Business | None = None
    promotion: Promotion | None = None
    order: Order | None = None
