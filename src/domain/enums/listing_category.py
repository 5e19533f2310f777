from enum import Enum


class ListingCategory(str, Enum):
    """Fixed set of categories a listing can be filed under."""

    ELECTRONICS = "electronics"
    APPAREL = "apparel"
    HOME_GOODS = "home-goods"
    VEHICLES = "vehicles"
    PROPERTY = "property"
    HOBBIES = "hobbies"
    OTHER = "other"

    @classmethod
    def values(cls) -> list[str]:
        return [c.value for c in cls]
