"""Geographic routing regions."""
from __future__ import annotations

import enum

from siblings.exceptions import UnsupportedRegionError


class Region(enum.Enum):
    """Region used to select a region-specific endpoint.

    The enum value matches the field name used for the region override in
    serialized endpoint records.
    """

    IN = 'in'
    US = 'us'

    @classmethod
    def parse(cls, value: str | Region) -> Region:
        """Parse a region from a case-insensitive string or alias.

        Example:
            ```python
            >>> Region.parse('ind')
            <Region.IN: 'in'>
            >>> Region.parse('USA')
            <Region.US: 'us'>
            ```

        Args:
            value: Region string (e.g., `'IN'`, `'IND'`, `'US'`, `'USA'`) or
                an existing region which is returned as-is.

        Returns:
            Parsed region.

        Raises:
            UnsupportedRegionError: If `value` is not a recognized alias.
        """
        if isinstance(value, Region):
            return value
        try:
            return _REGION_ALIASES[value.upper()]
        except (AttributeError, KeyError):
            raise UnsupportedRegionError(value) from None


_REGION_ALIASES = {
    'IN': Region.IN,
    'IND': Region.IN,
    'US': Region.US,
    'USA': Region.US,
}
