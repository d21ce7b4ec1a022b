"""Utilities related to the deployment environment."""
from __future__ import annotations

import enum
import os

from siblings.exceptions import InvalidEnvironmentError

ENVIRONMENT_VAR = 'X_ENV'
LOCAL_VAR = 'X_LOCAL'


class Environment(enum.Enum):
    """Deployment environment used to namespace backing-store keys."""

    PROD = 'prod'
    DEV = 'dev'

    @classmethod
    def parse(cls, value: str | Environment) -> Environment:
        """Parse an environment name case-insensitively.

        Raises:
            InvalidEnvironmentError: If `value` is not `prod` or `dev`.
        """
        if isinstance(value, Environment):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidEnvironmentError(
                f'Invalid environment "{value}". Expected "prod" or "dev".',
            ) from None

    @classmethod
    def from_env(cls) -> Environment:
        """Get the environment from `$X_ENV`.

        Defaults to [`DEV`][siblings.environment.Environment.DEV] if unset.
        """
        value = os.environ.get(ENVIRONMENT_VAR)
        if value is None:
            return cls.DEV
        return cls.parse(value)

    def namespace(self, key: str) -> str:
        """Prefix a store key with `dev-` in the dev environment."""
        if self is Environment.DEV:
            return f'dev-{key}'
        return key


def local_mode() -> bool:
    """Check if `$X_LOCAL` enables local endpoint overrides."""
    return os.environ.get(LOCAL_VAR) == 'TRUE'
