"""Concurrency-safe in-process record store.

Records live in a lock-striped map: keys are spread over a fixed number of
stripes, each a plain ``dict`` guarded by its own ``threading.Lock``. Writers
to different stripes never contend, and every read or write of a single key
is atomic. ``values()`` walks the stripes one at a time, so it is a live view
rather than a whole-store snapshot: a record written concurrently may or may
not appear, but each record returned was stored as a whole.
"""

import logging
import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from document_manager.domain.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

V = TypeVar("V")


class _Stripe(Generic[V]):
    __slots__ = ("lock", "records")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.records: dict[str, V] = {}


class RecordStore(Generic[V]):
    """Thread-safe ``str`` → record map with per-key atomicity."""

    def __init__(self, stripes: int = 16):
        if stripes < 1:
            raise InvalidArgumentError("stripes", "must be at least 1")
        self._stripes: tuple[_Stripe[V], ...] = tuple(_Stripe() for _ in range(stripes))
        logger.debug("RecordStore created with %d stripes", stripes)

    def _stripe_for(self, key: str) -> _Stripe[V]:
        return self._stripes[hash(key) % len(self._stripes)]

    @staticmethod
    def _check_key(key: str) -> None:
        if not isinstance(key, str) or not key:
            raise InvalidArgumentError("key", "must be a non-empty string")

    def put(self, key: str, value: V) -> None:
        """Insert or replace the record stored under ``key``."""
        self._check_key(key)
        stripe = self._stripe_for(key)
        with stripe.lock:
            stripe.records[key] = value

    def get(self, key: str) -> V | None:
        """Return the record under ``key``, or ``None`` when absent."""
        if not isinstance(key, str) or not key:
            return None
        stripe = self._stripe_for(key)
        with stripe.lock:
            return stripe.records.get(key)

    def compute(self, key: str, remapping: Callable[[V | None], V]) -> V:
        """Atomically replace the record under ``key`` with ``remapping(current)``.

        ``remapping`` receives the current record (or ``None``) and runs while
        the key's stripe is locked, so it must not touch the store itself.
        """
        self._check_key(key)
        stripe = self._stripe_for(key)
        with stripe.lock:
            value = remapping(stripe.records.get(key))
            stripe.records[key] = value
        return value

    def values(self) -> list[V]:
        """Return every stored record, gathered stripe by stripe."""
        collected: list[V] = []
        for stripe in self._stripes:
            with stripe.lock:
                collected.extend(stripe.records.values())
        return collected

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        stripe = self._stripe_for(key)
        with stripe.lock:
            return key in stripe.records

    def __len__(self) -> int:
        total = 0
        for stripe in self._stripes:
            with stripe.lock:
                total += len(stripe.records)
        return total
