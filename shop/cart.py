"""Shopping cart aggregating real and virtual items."""
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from .items import Item, RealItem, VirtualItem

TAX = 0.2


def _remove_by_identity(items: List[Item], item: Optional[Item]) -> None:
    for index, candidate in enumerate(items):
        if candidate is item:
            del items[index]
            return


@dataclass
class Cart:
    """
    Named cart with a tax-inclusive running total.

    `total_price` is accumulated on every add and is NOT adjusted when items
    are deleted, so after a deletion it reports the pre-deletion total.
    Use `calculate_total()` to price the current contents instead.
    """
    cart_name: str
    real_items: List[RealItem] = field(default_factory=list)
    virtual_items: List[VirtualItem] = field(default_factory=list)
    total_price: float = 0.0

    def add_real_item(self, item: Optional[RealItem]) -> None:
        """Append a real item and add its taxed price to the total. None is ignored."""
        if item is None:
            return
        self.real_items.append(item)
        self.total_price += item.price * (1 + TAX)

    def add_virtual_item(self, item: Optional[VirtualItem]) -> None:
        """Append a virtual item and add its taxed price to the total. None is ignored."""
        if item is None:
            return
        self.virtual_items.append(item)
        self.total_price += item.price * (1 + TAX)

    def delete_real_item(self, item: Optional[RealItem]) -> None:
        """Remove the first occurrence of this exact item object; total is unchanged."""
        _remove_by_identity(self.real_items, item)

    def delete_virtual_item(self, item: Optional[VirtualItem]) -> None:
        """Remove the first occurrence of this exact item object; total is unchanged."""
        _remove_by_identity(self.virtual_items, item)

    def get_total_price(self) -> float:
        return self.total_price

    def get_cart_name(self) -> str:
        return self.cart_name

    @property
    def items(self) -> Iterator[Item]:
        """All items, real first, each group in insertion order."""
        yield from self.real_items
        yield from self.virtual_items

    def calculate_total(self) -> float:
        """Tax-inclusive total of the items currently in the cart. Does not touch `total_price`."""
        return sum(item.price for item in self.items) * (1 + TAX)

    def recalculate_total(self) -> float:
        """Replace the stored total with `calculate_total()` and return it."""
        self.total_price = self.calculate_total()
        return self.total_price

    def __len__(self) -> int:
        return len(self.real_items) + len(self.virtual_items)
