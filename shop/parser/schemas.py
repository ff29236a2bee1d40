"""
Pydantic schemas for the persisted cart document.

Items are stored as a tagged union: every item carries a `type`
discriminator ("real" / "virtual") next to its variant fields, and a
mis-tagged item fails validation.
"""
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from shop.cart import Cart
from shop.items import Item, RealItem, VirtualItem


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class RealItemSchema(_CamelModel):
    """Real item as stored on disk."""
    type: Literal["real"] = "real"
    name: Optional[str] = None
    price: float = 0.0
    weight: float = 0.0

    def to_item(self) -> RealItem:
        return RealItem(name=self.name, price=self.price, weight=self.weight)


class VirtualItemSchema(_CamelModel):
    """Virtual item as stored on disk."""
    type: Literal["virtual"] = "virtual"
    name: Optional[str] = None
    price: float = 0.0
    size_on_disk: float = 0.0

    def to_item(self) -> VirtualItem:
        return VirtualItem(name=self.name, price=self.price, size_on_disk=self.size_on_disk)


def item_to_schema(item: Item) -> Union[RealItemSchema, VirtualItemSchema]:
    """Map a domain item onto its tagged schema."""
    if isinstance(item, RealItem):
        return RealItemSchema(name=item.name, price=item.price, weight=item.weight)
    if isinstance(item, VirtualItem):
        return VirtualItemSchema(name=item.name, price=item.price, size_on_disk=item.size_on_disk)
    raise TypeError(f"Unsupported item type: {type(item).__name__}")


class CartDocument(_CamelModel):
    """
    Whole-cart JSON document.

    `total_price` is persisted and restored verbatim; it is never
    recomputed from the items on load.
    """
    cart_name: str
    real_items: List[RealItemSchema] = Field(default_factory=list)
    virtual_items: List[VirtualItemSchema] = Field(default_factory=list)
    total_price: float = 0.0

    @classmethod
    def from_cart(cls, cart: Cart) -> "CartDocument":
        return cls(
            cart_name=cart.cart_name,
            real_items=[item_to_schema(item) for item in cart.real_items],
            virtual_items=[item_to_schema(item) for item in cart.virtual_items],
            total_price=cart.total_price,
        )

    def to_cart(self) -> Cart:
        return Cart(
            cart_name=self.cart_name,
            real_items=[item.to_item() for item in self.real_items],
            virtual_items=[item.to_item() for item in self.virtual_items],
            total_price=self.total_price,
        )


__all__ = [
    "RealItemSchema",
    "VirtualItemSchema",
    "CartDocument",
    "item_to_schema",
]
