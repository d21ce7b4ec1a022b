"""Read and write TOML config files using Pydantic models."""
from __future__ import annotations

import sys
from typing import BinaryIO
from typing import TypeVar

import tomli_w
from pydantic import BaseModel

if sys.version_info >= (3, 11):  # pragma: >=3.11 cover
    import tomllib
else:  # pragma: <3.11 cover
    import tomli as tomllib

BaseModelT = TypeVar('BaseModelT', bound=BaseModel)


def dump(model: BaseModel, fp: BinaryIO) -> None:
    """Write a config model as TOML to a binary file-like object.

    TOML has no null type so `None` attributes are omitted.

    Args:
        model: Config model instance to write.
        fp: File-like bytes stream to write to.
    """
    tomli_w.dump(model.model_dump(exclude_none=True), fp)


def load(model: type[BaseModelT], fp: BinaryIO) -> BaseModelT:
    """Parse a config model from a binary TOML file-like object.

    Args:
        model: Config model type to validate the TOML data with.
        fp: File-like bytes stream to read from.

    Returns:
        Model initialized from the TOML data.
    """
    return model.model_validate(tomllib.load(fp))
