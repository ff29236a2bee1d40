"""Parser package: JSON persistence of carts."""
from .json_parser import JsonParser
from .schemas import CartDocument, RealItemSchema, VirtualItemSchema

__all__ = [
    "JsonParser",
    "CartDocument",
    "RealItemSchema",
    "VirtualItemSchema",
]
