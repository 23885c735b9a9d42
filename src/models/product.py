"""Product model for document representation."""

from dataclasses import dataclass, field, replace
from typing import Any, List, Optional

# Fields stored in a product document body
PRODUCT_FIELDS = ("name", "price", "quantity", "tags")


@dataclass
class Product:
    """Product data model.

    ``id`` is the document key. It is never written into the stored body.
    """

    name: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None
    tags: Optional[List[Optional[str]]] = None
    id: Optional[str] = field(default=None, compare=False)

    def to_document(self) -> dict[str, Any]:
        """Body to store: exactly the product fields, without the key."""
        return {name: getattr(self, name) for name in PRODUCT_FIELDS}

    @classmethod
    def from_document(cls, document: dict[str, Any], key: Optional[str] = None) -> "Product":
        """Build a product from a stored body; unknown fields are ignored."""
        return cls(id=key, **{name: document.get(name) for name in PRODUCT_FIELDS})

    def with_id(self, key: str) -> "Product":
        return replace(self, id=key)
