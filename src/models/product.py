# src/models/product.py

"""Product data model for inter-module data flow."""

from dataclasses import dataclass

# Optional fields are left out of the JSON form when empty.
_OPTIONAL_JSON_FIELDS: list[tuple[str, str]] = [
    ("price", "price"),
    ("rating", "rating"),
    ("review_count", "reviewCount"),
    ("seller", "seller"),
    ("link", "link"),
    ("detailed_description", "detailedDescription"),
]


@dataclass
class Product:
    """A single product listing scraped from (or substituted for) the store.

    Every field is best-effort text taken from markup; prices and
    ratings are not parsed into numbers.
    """

    id: str = ""
    title: str = ""
    image: str = ""
    store_name: str = ""
    price: str = ""
    rating: str = ""
    review_count: str = ""
    seller: str = ""
    link: str = ""
    detailed_description: str = ""

    def to_dict(self) -> dict[str, str]:
        """Serialise to the camelCase JSON shape served by the API."""
        data: dict[str, str] = {
            "id": self.id,
            "title": self.title,
            "image": self.image,
            "storeName": self.store_name,
        }
        for attr, key in _OPTIONAL_JSON_FIELDS:
            value: str = getattr(self, attr)
            if value:
                data[key] = value
        return data
