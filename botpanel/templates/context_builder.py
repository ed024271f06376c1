"""Context builder for template resolution.

Fetches the client, business, promotion and order records referenced by a
VariableContext and assembles a TemplateContext. This is the bridge between
the data store and the template engine.
"""

import logging
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from datetime import datetime
from functools import partial

from botpanel.config import Config
from botpanel.core import PREVIEW_CLIENT, DataStore, PreviewClient, RealClient
from botpanel.database import StoreError
from botpanel.templates.context import TemplateContext, VariableContext
from botpanel.utilities.tz import now_user

logger = logging.getLogger(__name__)


class ContextBuilder:
    """Builds TemplateContext from entity IDs.

    Lookups run concurrently, one thread each. A lookup that is not found,
    fails in the store, or exceeds the timeout yields None for that record;
    anything else it raises propagates to the caller.

    Usage:
        builder = ContextBuilder(store)
        ctx = builder.build(VariableContext.from_ids(user_id, "whatsapp", client_id=cid))
        # Use ctx with TemplateResolver
    """

    def __init__(
        self,
        store: DataStore,
        clock: Callable[[], datetime] = now_user,
        lookup_timeout: float | None = None,
    ):
        self._store = store
        self._clock = clock
        self._lookup_timeout = lookup_timeout

    @property
    def lookup_timeout(self) -> float:
        if self._lookup_timeout is not None:
            return self._lookup_timeout
        return Config.LOOKUP_TIMEOUT

    def build(self, context: VariableContext) -> TemplateContext:
        """Fetch every record the context references.

        The business profile is always fetched (user_id is required). The
        preview client is served from a constant without a lookup.
        """
        lookups: dict[str, Callable[[], object]] = {
            "business": partial(self._store.get_business, context.user_id),
        }

        client = None
        if isinstance(context.client, PreviewClient):
            client = PREVIEW_CLIENT
        elif isinstance(context.client, RealClient):
            lookups["client"] = partial(self._store.get_client, context.client.client_id)

        if context.promotion_id:
            lookups["promotion"] = partial(self._store.get_promotion, context.promotion_id)
        if context.order_id:
            lookups["order"] = partial(self._store.get_order, context.order_id)

        records = self._run_lookups(lookups)

        return TemplateContext(
            now=self._clock(),
            client=client or records.get("client"),
            business=records.get("business"),
            promotion=records.get("promotion"),
            order=records.get("order"),
        )

    def _run_lookups(self, lookups: dict[str, Callable[[], object]]) -> dict[str, object]:
        """Run lookups in parallel under one shared deadline."""
        executor = ThreadPoolExecutor(max_workers=len(lookups), thread_name_prefix="lookup")
        try:
            futures = {name: executor.submit(fn) for name, fn in lookups.items()}
            deadline = time.monotonic() + self.lookup_timeout
            records: dict[str, object] = {}

            for name, future in futures.items():
                remaining = max(0.0, deadline - time.monotonic())
                try:
                    records[name] = future.result(timeout=remaining)
                except FuturesTimeoutError:
                    logger.warning(f"{name} lookup timed out after {self.lookup_timeout}s")
                    records[name] = None
                except StoreError as e:
                    logger.warning(f"{name} lookup failed: {e}")
                    records[name] = None

                if records[name] is None:
                    logger.debug(f"No {name} data for template resolution")

            return records
        finally:
            # Don't wait on a lookup that already missed the deadline
            executor.shutdown(wait=False, cancel_futures=True)


def build_context(
    context: VariableContext,
    store: DataStore,
) -> TemplateContext:
    """Convenience function to build a context with default settings."""
    return ContextBuilder(store).build(context)
