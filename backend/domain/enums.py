"""
Domain enums exposed as drop-down option lists.
"""

from enum import Enum, IntEnum

from utils.enum_options import display_names


@display_names(
    OneDay="In 24 hours",
    TwoDays="In 2 days",
    ThreeDays="In 3 days",
)
class DeliveryTime(IntEnum):
    OneDay = 0
    TwoDays = 1
    ThreeDays = 2
    OneWeekOrMore = 3


@display_names(
    STANDARD="Standard shipping",
    EXPRESS="Express shipping",
)
class DeliveryType(str, Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    PICKUP = "pickup"


# Enums reachable through /options/{enum_key}
OPTION_ENUMS: dict[str, type[Enum]] = {
    "delivery-time": DeliveryTime,
    "delivery-type": DeliveryType,
}
