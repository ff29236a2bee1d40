"""Pytest configuration and fixtures"""
import os
from pathlib import Path

import pytest

# Set test environment variables before the package configures logging
os.environ.setdefault("LOG_LEVEL", "WARNING")

from shop import Cart, RealItem, VirtualItem  # noqa: E402
from shop.parser import JsonParser  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding stored cart documents"""
    return FIXTURES_DIR


@pytest.fixture
def resources_dir(tmp_path) -> Path:
    """Per-test resources directory for written carts"""
    return tmp_path / "resources"


@pytest.fixture
def parser(resources_dir) -> JsonParser:
    """Parser writing into the per-test resources directory"""
    return JsonParser(resources_dir)


@pytest.fixture
def car() -> RealItem:
    """Sample real item"""
    return RealItem(name="Audi", price=32026.9, weight=1560)


@pytest.fixture
def game() -> VirtualItem:
    """Sample virtual item"""
    return VirtualItem(name="Cyberpunk 2077", price=59.99, size_on_disk=70000)


@pytest.fixture
def sample_cart(car, game) -> Cart:
    """Cart with one real and one virtual item"""
    cart = Cart("test-cart")
    cart.add_real_item(car)
    cart.add_virtual_item(game)
    return cart
