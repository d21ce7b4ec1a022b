"""Exceptions raised by the sibling resolver."""
from __future__ import annotations


class SiblingsError(Exception):
    """Base exception class for sibling resolution errors."""

    pass


class UnsupportedRegionError(SiblingsError, ValueError):
    """Exception raised when a region string is not a recognized alias.

    Args:
        value: Region string that failed to parse.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f'Region "{value}" is not supported.')


class InvalidEnvironmentError(SiblingsError, ValueError):
    """Exception raised when the deployment environment is not recognized."""

    pass


class EndpointFetchError(SiblingsError):
    """Exception raised when an endpoint record cannot be read from a store.

    Args:
        key: Namespaced store key that was being read.
        message: Description of the failure.
    """

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f'Failed to fetch endpoint "{key}": {message}')


class EndpointDecodeError(EndpointFetchError):
    """Exception raised when a stored endpoint payload is malformed."""

    pass
