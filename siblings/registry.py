"""In-memory registry of resolved sibling endpoints."""
from __future__ import annotations

import enum
import logging

from siblings.endpoint import EndpointRecord
from siblings.utils.locks import ReadWriteLock

logger = logging.getLogger(__name__)


class Sibling(enum.Enum):
    """Siblings known ahead of time.

    Each well-known sibling has a dedicated slot in the
    [`EndpointRegistry`][siblings.registry.EndpointRegistry]. The enum value
    is the sibling name used for store keys.
    """

    AUGUST = 'august'
    BANK_STATEMENT = 'bank-statement'
    K9 = 'k9'
    MATRIX = 'matrix'
    PANDORA = 'pandora'
    RETINA = 'retina'
    SCHEMATRON = 'schematron'
    SENTRY = 'sentry'
    THUMBNAILER = 'thumbnailer'
    XCHANGE = 'xchange'


_WELL_KNOWN = {sibling.value: sibling for sibling in Sibling}


def sibling_name(sibling: str | Sibling) -> str:
    """Get the name of a sibling."""
    return sibling.value if isinstance(sibling, Sibling) else sibling


def well_known(sibling: str | Sibling) -> Sibling | None:
    """Get the well-known sibling matching a name, if any."""
    if isinstance(sibling, Sibling):
        return sibling
    return _WELL_KNOWN.get(sibling)


class EndpointRegistry:
    """Concurrency-safe map of sibling name to endpoint record.

    Well-known siblings are stored in their own slot and any other name in
    an open mapping keyed by the literal name. Reads take a shared lock so
    any number of threads can read at once. Writes and
    [`flush()`][siblings.registry.EndpointRegistry.flush] take an exclusive
    lock.

    Args:
        records: Optional records to populate the registry with.
    """

    def __init__(
        self,
        records: dict[str | Sibling, EndpointRecord] | None = None,
    ) -> None:
        self._lock = ReadWriteLock()
        self._slots: dict[Sibling, EndpointRecord | None] = dict.fromkeys(
            Sibling,
        )
        self._siblings: dict[str, EndpointRecord] = {}

        if records is not None:
            for sibling, record in records.items():
                self.put(sibling, record)

    def __len__(self) -> int:
        with self._lock.read():
            populated = sum(r is not None for r in self._slots.values())
            return populated + len(self._siblings)

    def __contains__(self, sibling: object) -> bool:
        if not isinstance(sibling, (str, Sibling)):
            return False
        return self.get(sibling) is not None

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(records={len(self)})'

    def get(self, sibling: str | Sibling) -> EndpointRecord | None:
        """Get the record of a sibling.

        Returns:
            The record or `None` if the sibling has not been populated.
        """
        slot = well_known(sibling)
        with self._lock.read():
            if slot is not None:
                return self._slots[slot]
            return self._siblings.get(sibling_name(sibling))

    def put(self, sibling: str | Sibling, record: EndpointRecord) -> None:
        """Insert or overwrite the record of a sibling."""
        slot = well_known(sibling)
        with self._lock.write():
            if slot is not None:
                self._slots[slot] = record
            else:
                self._siblings[sibling_name(sibling)] = record
        logger.debug(f'Populated endpoint of {sibling_name(sibling)}')

    def names(self) -> list[str]:
        """Get the names of all populated siblings."""
        with self._lock.read():
            known = [s.value for s, r in self._slots.items() if r is not None]
            return known + list(self._siblings)

    def flush(self) -> None:
        """Remove all records.

        Readers that obtained a record before the flush keep using it.
        """
        with self._lock.write():
            self._slots = dict.fromkeys(Sibling)
            self._siblings = {}
