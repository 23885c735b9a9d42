"""GraphQL schema for the product catalog."""

from typing import List, Optional

import strawberry
from strawberry.extensions import MaskErrors
from strawberry.types import Info

from src.clients.catalog_store import CatalogStore
from src.models import Product
from src.resolvers import products


@strawberry.type(name="Product")
class ProductType:
    """A catalog product. ``id`` is the document key."""

    id: Optional[str] = None
    name: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None
    tags: Optional[List[Optional[str]]] = None

    @classmethod
    def from_model(cls, product: Product) -> "ProductType":
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            quantity=product.quantity,
            tags=product.tags,
        )


@strawberry.input(name="ProductInput")
class ProductInput:
    name: Optional[str] = None
    price: Optional[float] = None
    quantity: Optional[int] = None
    tags: Optional[List[Optional[str]]] = None

    def to_model(self) -> Product:
        return Product(
            name=self.name,
            price=self.price,
            quantity=self.quantity,
            tags=list(self.tags) if self.tags is not None else None,
        )


def _store(info: Info) -> CatalogStore:
    return info.context["store"]


@strawberry.type
class Query:
    @strawberry.field
    async def get_product(self, info: Info, id: str) -> Optional[ProductType]:
        product = await products.get_product(_store(info), id)
        return ProductType.from_model(product)

    @strawberry.field
    async def get_all_products_with_term(self, info: Info, term: str) -> List[ProductType]:
        found = await products.get_all_products_with_term(_store(info), term)
        return [ProductType.from_model(product) for product in found]


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_product(self, info: Info, product: ProductInput) -> Optional[ProductType]:
        created = await products.create_product(_store(info), product.to_model())
        return ProductType.from_model(created)

    @strawberry.mutation
    async def delete_product(self, info: Info, id: str) -> bool:
        return await products.delete_product(_store(info), id)

    @strawberry.mutation
    async def update_product(self, info: Info, id: str, product: ProductInput) -> Optional[ProductType]:
        updated = await products.update_product(_store(info), id, product.to_model())
        return ProductType.from_model(updated)

    @strawberry.mutation
    async def set_quantity(self, info: Info, id: str, quantity: int) -> bool:
        return await products.set_quantity(_store(info), id, quantity)


def create_schema(mask_errors: bool = False) -> strawberry.Schema:
    """Build the schema; with mask_errors, clients get a generic error message."""
    extensions = [MaskErrors()] if mask_errors else []
    return strawberry.Schema(query=Query, mutation=Mutation, extensions=extensions)
