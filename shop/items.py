"""Purchasable items: physical goods with weight and digital goods with disk size."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple


@dataclass
class Item(ABC):
    """
    Named, priced entity. Values are not validated.

    Whole numbers assigned to numeric fields are stored as floats, so
    `price=100` renders as `100.0` both before and after persistence.
    """
    _float_fields: ClassVar[Tuple[str, ...]] = ("price",)

    name: Optional[str] = None
    price: float = 0.0

    def __setattr__(self, key, value):
        # Covers dataclass __init__ as well as later assignments
        if key in self._float_fields and isinstance(value, int):
            value = float(value)
        super().__setattr__(key, value)

    @abstractmethod
    def _extra_fields(self) -> List[Tuple[str, float]]:
        """Variant-specific (label, value) pairs appended to the text form."""

    def __str__(self) -> str:
        parts = [
            ("Class", type(self).__name__),
            ("Name", self.name),
            ("Price", self.price),
        ]
        parts.extend(self._extra_fields())
        return "; ".join(f"{label}: {value}" for label, value in parts)


@dataclass
class RealItem(Item):
    """Physical item."""
    _float_fields: ClassVar[Tuple[str, ...]] = ("price", "weight")

    weight: float = 0.0  # grams

    def _extra_fields(self) -> List[Tuple[str, float]]:
        return [("Weight", self.weight)]


@dataclass
class VirtualItem(Item):
    """Digital item."""
    _float_fields: ClassVar[Tuple[str, ...]] = ("price", "size_on_disk")

    size_on_disk: float = 0.0  # megabytes

    def _extra_fields(self) -> List[Tuple[str, float]]:
        return [("Size on disk", self.size_on_disk)]
