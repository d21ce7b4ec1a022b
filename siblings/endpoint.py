"""Endpoint record model."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import StrictStr

from siblings.regions import Region


class EndpointRecord(BaseModel):
    """Addresses of a single sibling service.

    Records are immutable once created. The serialized form is a JSON object
    with a required `default` key and optional `in` and `us` keys.

    Example:
        ```python
        >>> record = EndpointRecord.from_json(
        ...     b'{"default": "https://a", "in": "https://a-in"}',
        ... )
        >>> record.resolve(Region.IN)
        'https://a-in'
        >>> record.resolve(Region.US)
        'https://a'
        ```

    Attributes:
        default: Address used when no region is requested or when the
            requested region has no override.
        ind: Optional override for [`Region.IN`][siblings.regions.Region].
        usa: Optional override for [`Region.US`][siblings.regions.Region].
    """

    model_config = ConfigDict(extra='ignore', frozen=True)

    default: StrictStr
    ind: Optional[StrictStr] = Field(None, alias='in')  # noqa: UP007
    usa: Optional[StrictStr] = Field(None, alias='us')  # noqa: UP007

    def override(self, region: Region) -> str | None:
        """Get the region-specific override, if one exists."""
        if region is Region.IN:
            return self.ind
        return self.usa

    def resolve(self, region: Region | None = None) -> str:
        """Resolve the address to use for a region.

        Args:
            region: Optional region. If `None`, the default address is
                returned.

        Returns:
            The override for `region` if present, otherwise the default.
        """
        if region is not None:
            address = self.override(region)
            if address is not None:
                return address
        return self.default

    @classmethod
    def from_json(cls, data: bytes | str) -> EndpointRecord:
        """Deserialize a record from JSON.

        Raises:
            pydantic.ValidationError: If the data is not a JSON object with a
                string `default` field.
        """
        return cls.model_validate_json(data)

    def to_json(self) -> bytes:
        """Serialize the record to JSON bytes, omitting missing overrides."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode()
