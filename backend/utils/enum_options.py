"""
Enum → drop-down option list utilities.

Labels are attached to enum members out-of-band with the `display_names`
class decorator and resolved per member, falling back to the member name:

    @display_names(OneDay="In 24 hours")
    class DeliveryTime(IntEnum):
        OneDay = 0
        TwoDays = 1

    build_enum_options(DeliveryTime, DeliveryTime.TwoDays)
    # [EnumOption("OneDay", "In 24 hours", False),
    #  EnumOption("TwoDays", "TwoDays", True)]
"""
import logging
from enum import Enum
from typing import Any, Callable, List, NamedTuple, Optional, Tuple, Type, TypeVar

from domain.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DISPLAY_NAMES_ATTR = "__display_names__"

E = TypeVar("E", bound=Type[Enum])


class EnumOption(NamedTuple):
    """One entry of a drop-down option list."""
    value: str
    label: str
    selected: bool = False


def is_enum_type(obj: Any) -> bool:
    """True for Enum subclasses only (members and other classes are rejected)."""
    return isinstance(obj, type) and issubclass(obj, Enum)


def _require_enum_type(enum_type: Any) -> None:
    if not is_enum_type(enum_type):
        type_name = getattr(enum_type, "__name__", type(enum_type).__name__)
        raise InvalidArgumentError(
            f"Type provided must be an Enum: {type_name}",
            argument="enum_type",
        )


def display_names(**labels: str) -> Callable[[E], E]:
    """
    Class decorator attaching human-readable labels to enum members.

    Args:
        **labels: member name → display label. Members left out keep their name.

    Raises:
        InvalidArgumentError: if the decorated class is not an Enum, or a key
            does not name one of its members.
    """
    def decorator(enum_type: E) -> E:
        _require_enum_type(enum_type)
        unknown = [key for key in labels if key not in enum_type.__members__]
        if unknown:
            raise InvalidArgumentError(
                f"Unknown {enum_type.__name__} members: {', '.join(sorted(unknown))}",
                argument="labels",
            )
        # Aliases resolve to their canonical member
        mapping = {enum_type.__members__[key].name: label for key, label in labels.items()}
        setattr(enum_type, DISPLAY_NAMES_ATTR, mapping)
        return enum_type

    return decorator


def get_display_name(member: Enum) -> str:
    """
    Resolve the label shown to users for an enum member.

    Returns the label attached with `display_names`, verbatim, when present and
    non-empty, otherwise the member name.
    """
    labels = getattr(type(member), DISPLAY_NAMES_ATTR, None) or {}
    label = labels.get(member.name)
    if label:
        return label
    logger.debug(f"No display name for {type(member).__name__}.{member.name}, using member name")
    return member.name


def _resolve_selected(enum_type: Type[Enum], selected_value: Any) -> Optional[Enum]:
    """
    Map a member, member name or raw member value onto a member of enum_type.

    Strings that name no member are also compared with str(member.value), so a
    value posted from a form ("2") still selects an IntEnum member.
    Booleans never select anything.
    """
    if selected_value is None or isinstance(selected_value, bool):
        return None
    if isinstance(selected_value, Enum):
        # A member of another enum never matches, even if the values compare equal
        return selected_value if isinstance(selected_value, enum_type) else None
    if isinstance(selected_value, str) and selected_value in enum_type.__members__:
        return enum_type[selected_value]
    try:
        return enum_type(selected_value)
    except (ValueError, TypeError):
        pass
    if isinstance(selected_value, str):
        for member in enum_type:
            if str(member.value) == selected_value:
                return member
    logger.debug(f"Selected value {selected_value!r} matches no {enum_type.__name__} member")
    return None


def build_enum_options(enum_type: Type[Enum], selected_value: Any = None) -> List[EnumOption]:
    """
    Build the ordered option list for an enum type.

    Args:
        enum_type: The Enum subclass to enumerate
        selected_value: Currently selected member, member name or member value (optional)

    Returns:
        One EnumOption per member, in declaration order (aliases excluded).
        At most one option is selected.

    Raises:
        InvalidArgumentError: if enum_type is not an Enum subclass
    """
    _require_enum_type(enum_type)
    selected = _resolve_selected(enum_type, selected_value)

    return [
        EnumOption(
            value=member.name,
            label=get_display_name(member),
            selected=member is selected,
        )
        for member in enum_type
    ]


def enum_choices(enum_type: Type[Enum]) -> List[Tuple[str, str]]:
    """(value, label) pairs for an enum type, without selection state."""
    return [(option.value, option.label) for option in build_enum_options(enum_type)]
