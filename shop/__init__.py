"""
Cart Store

Shopping-cart model with JSON file persistence:
- items: RealItem / VirtualItem
- cart: Cart aggregate with tax-inclusive total
- parser: JsonParser (write_to_file / read_from_file)
- errors: parser exception taxonomy
"""
from .cart import TAX, Cart
from .items import Item, RealItem, VirtualItem

__all__ = [
    "TAX",
    "Cart",
    "Item",
    "RealItem",
    "VirtualItem",
]
