"""
Options Service — looks up registered enums and builds their option lists.

Enums are registered by key (see domain.enums.OPTION_ENUMS); every lookup
takes the registry explicitly so callers can supply their own.
"""
import logging
from enum import Enum
from typing import Any, Mapping, Optional, Type

from domain.errors import NotFoundError
from models import EnumOptionOut, OptionEnumSummary
from utils.enum_options import build_enum_options

logger = logging.getLogger(__name__)


def get_enum_type(registry: Mapping[str, Type[Enum]], enum_key: str) -> Type[Enum]:
    """
    Look up an enum type by its registry key.

    Raises:
        NotFoundError: if no enum is registered under enum_key
    """
    enum_type = registry.get(enum_key)
    if enum_type is None:
        raise NotFoundError("Option enum", enum_key, details={"available": sorted(registry)})
    return enum_type


def list_option_enums(registry: Mapping[str, Type[Enum]]) -> list[dict]:
    """Summaries of all registered enums, sorted by key."""
    return [
        OptionEnumSummary(key=key, name=registry[key].__name__, count=len(registry[key])).model_dump()
        for key in sorted(registry)
    ]


def get_options(
    registry: Mapping[str, Type[Enum]],
    enum_key: str,
    selected: Optional[Any] = None,
) -> list[dict]:
    """Option list of a registered enum as JSON-ready dicts."""
    enum_type = get_enum_type(registry, enum_key)
    options = build_enum_options(enum_type, selected)
    logger.info(f"Built {len(options)} options for {enum_key} (selected={selected!r})")
    return [EnumOptionOut.from_option(option).model_dump() for option in options]
