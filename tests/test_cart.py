"""
Tests for Cart
"""

import pytest

from shop import TAX, Cart, RealItem, VirtualItem


class TestCartBasics:
    """Tests for creating and filling a cart."""

    def test_create_empty_cart(self):
        """Test a new cart is empty with zero total."""
        cart = Cart("empty")

        assert cart.get_cart_name() == "empty"
        assert cart.cart_name == "empty"
        assert cart.real_items == []
        assert cart.virtual_items == []
        assert cart.get_total_price() == 0
        assert len(cart) == 0

    def test_add_real_item(self):
        """Test adding a real item appends it and adds taxed price."""
        cart = Cart("cart")
        item = RealItem(name="Bike", price=100.0)

        cart.add_real_item(item)

        assert cart.real_items == [item]
        assert cart.get_total_price() == pytest.approx(120.0)

    def test_add_virtual_item(self):
        """Test adding a virtual item appends it and adds taxed price."""
        cart = Cart("cart")
        item = VirtualItem(name="Game", price=50.0)

        cart.add_virtual_item(item)

        assert cart.virtual_items == [item]
        assert cart.get_total_price() == pytest.approx(60.0)

    @pytest.mark.parametrize("price", [0.0, -40.0, 19.99, 1e12])
    def test_add_increments_by_taxed_price(self, price):
        """Test each add raises the total by exactly price * (1 + TAX)."""
        cart = Cart("cart")
        cart.add_real_item(RealItem(price=10.0))
        before = cart.get_total_price()

        cart.add_virtual_item(VirtualItem(price=price))

        assert cart.get_total_price() == before + price * (1 + TAX)

    def test_total_with_multiple_items(self):
        """Test total sums all items with tax."""
        cart = Cart("cart")
        cart.add_real_item(RealItem(price=200.0))
        cart.add_virtual_item(VirtualItem(price=100.0))
        cart.add_real_item(RealItem(price=300.0))

        assert cart.get_total_price() == pytest.approx((200.0 + 100.0 + 300.0) * 1.2)

    def test_adding_duplicate_items(self):
        """Test the same item object can be added twice."""
        cart = Cart("cart")
        item = RealItem(price=200.0)

        cart.add_real_item(item)
        cart.add_real_item(item)

        assert cart.real_items == [item, item]
        assert cart.get_total_price() == pytest.approx(2 * 200.0 * 1.2)

    def test_add_none_is_noop(self):
        """Test adding None neither raises nor changes the cart."""
        cart = Cart("cart")

        cart.add_real_item(None)
        cart.add_virtual_item(None)

        assert len(cart) == 0
        assert cart.get_total_price() == 0

    def test_items_keep_insertion_order(self):
        """Test items are iterated real first, each in insertion order."""
        cart = Cart("cart")
        first, second = RealItem(name="1"), RealItem(name="2")
        disk = VirtualItem(name="3")
        cart.add_real_item(first)
        cart.add_virtual_item(disk)
        cart.add_real_item(second)

        assert [item.name for item in cart.items] == ["1", "2", "3"]


class TestCartDeletion:
    """Tests for removing items."""

    def test_delete_keeps_stale_total(self):
        """Test deleting an item leaves the total at its post-add value."""
        cart = Cart("cart")
        item = RealItem(price=100.0)
        cart.add_real_item(item)
        total_after_add = cart.get_total_price()

        cart.delete_real_item(item)

        assert cart.real_items == []
        assert cart.get_total_price() == total_after_add
        assert cart.get_total_price() == pytest.approx(120.0)

    def test_delete_virtual_item(self):
        """Test deleting a virtual item removes it from the list only."""
        cart = Cart("cart")
        item = VirtualItem(price=10.0)
        cart.add_virtual_item(item)

        cart.delete_virtual_item(item)

        assert cart.virtual_items == []
        assert cart.get_total_price() == pytest.approx(12.0)

    def test_delete_nonexistent_item(self):
        """Test removing an item that is not in the cart changes nothing."""
        cart = Cart("cart")
        item = RealItem(price=200.0)
        cart.add_real_item(item)
        total_before = cart.get_total_price()

        cart.delete_real_item(RealItem(price=500.0))

        assert cart.real_items == [item]
        assert cart.get_total_price() == total_before

    def test_delete_matches_identity_not_equality(self):
        """Test an equal but distinct item is not removed."""
        cart = Cart("cart")
        item = RealItem(name="Bike", price=10.0)
        cart.add_real_item(item)

        cart.delete_real_item(RealItem(name="Bike", price=10.0))

        assert cart.real_items == [item]

    def test_delete_removes_first_occurrence_only(self):
        """Test deleting a duplicated item removes one copy."""
        cart = Cart("cart")
        item = RealItem(price=10.0)
        cart.add_real_item(item)
        cart.add_real_item(item)

        cart.delete_real_item(item)

        assert cart.real_items == [item]

    def test_delete_none_is_noop(self):
        """Test deleting None does not raise."""
        cart = Cart("cart")
        cart.add_real_item(RealItem(price=1.0))

        cart.delete_real_item(None)
        cart.delete_virtual_item(None)

        assert len(cart) == 1


class TestCartRecalculation:
    """Tests for pricing the current contents."""

    def test_calculate_total_reflects_deletions(self):
        """Test calculate_total prices current items without touching the stored total."""
        cart = Cart("cart")
        kept = RealItem(price=100.0)
        removed = VirtualItem(price=50.0)
        cart.add_real_item(kept)
        cart.add_virtual_item(removed)
        cart.delete_virtual_item(removed)

        assert cart.calculate_total() == pytest.approx(120.0)
        assert cart.get_total_price() == pytest.approx(180.0)

    def test_recalculate_total_stores_result(self):
        """Test recalculate_total replaces the stored total."""
        cart = Cart("cart")
        item = RealItem(price=100.0)
        cart.add_real_item(item)
        cart.delete_real_item(item)

        assert cart.recalculate_total() == 0
        assert cart.get_total_price() == 0
