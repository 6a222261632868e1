"""Tests for the Cart aggregate and its LineItem entities."""

import dataclasses

import pytest
from ordering.cart.cart import Cart, CartSnapshot, LineItemSnapshot, line_total


def _make_cart():
    return Cart.create(customer_id="cust-001")


def _add(cart, line_id=1, name="Laptop", price=1000.0, quantity=1, discount=10.0):
    return cart.append_item(line_id=line_id, name=name, price=price, quantity=quantity, discount=discount)


class TestLineTotal:
    def test_price_times_quantity_less_discount(self):
        assert line_total(25.0, 4, 5.0) == pytest.approx(95.0)

    def test_discount_may_exceed_gross_amount(self):
        assert line_total(1.0, 1, 5.0) == pytest.approx(-4.0)


class TestCartCreation:
    def test_create_cart(self):
        cart = _make_cart()
        assert cart.customer_id == "cust-001"
        assert len(cart.items) == 0
        assert cart.created_at is not None
        assert cart.updated_at == cart.created_at


class TestAppendItem:
    def test_append_item_computes_total(self):
        cart = _make_cart()
        item = _add(cart, price=20.0, quantity=3, discount=5.0)
        assert item.total == pytest.approx(55.0)
        assert len(cart.items) == 1

    def test_items_keep_insertion_order(self):
        cart = _make_cart()
        _add(cart, line_id=1, name="Laptop")
        _add(cart, line_id=2, name="Mouse")
        _add(cart, line_id=3, name="Keyboard")
        assert [item.name for item in cart.items] == ["Laptop", "Mouse", "Keyboard"]


class TestFindItem:
    def test_find_existing_item(self):
        cart = _make_cart()
        _add(cart, line_id=7)
        assert cart.find_item(7).line_id == 7

    def test_unknown_line_id(self):
        cart = _make_cart()
        _add(cart, line_id=7)
        assert cart.find_item(8) is None

    @pytest.mark.parametrize("line_id", [0, None])
    def test_unassigned_line_id_never_matches(self, line_id):
        cart = _make_cart()
        _add(cart, line_id=1)
        assert cart.find_item(line_id) is None


class TestIncreaseQuantity:
    def test_quantity_is_added_and_total_recomputed(self):
        cart = _make_cart()
        item = _add(cart, price=100.0, quantity=2, discount=10.0)
        cart.increase_quantity(item, 3)
        assert item.quantity == 5
        assert item.total == pytest.approx(490.0)

    def test_discount_is_kept(self):
        cart = _make_cart()
        item = _add(cart, price=100.0, quantity=1, discount=10.0)
        cart.increase_quantity(item, 1)
        assert item.discount == 10.0


class TestUpdateDiscount:
    def test_discount_replaced_and_total_recomputed(self):
        cart = _make_cart()
        item = _add(cart, price=100.0, quantity=2, discount=10.0)
        cart.update_discount(item, 25.0)
        assert item.discount == 25.0
        assert item.total == pytest.approx(175.0)


class TestSnapshot:
    def test_snapshot_copies_items(self):
        cart = _make_cart()
        _add(cart, line_id=1, name="Laptop", price=1000.0, quantity=1, discount=10.0)
        snapshot = cart.snapshot()
        assert isinstance(snapshot, CartSnapshot)
        assert snapshot.customer_id == "cust-001"
        assert snapshot.items == (
            LineItemSnapshot(line_id=1, name="Laptop", price=1000.0, quantity=1, discount=10.0, total=990.0),
        )

    def test_snapshot_is_detached_from_cart(self):
        cart = _make_cart()
        item = _add(cart)
        snapshot = cart.snapshot()
        cart.increase_quantity(item, 4)
        assert snapshot.items[0].quantity == 1

    def test_snapshot_is_read_only(self):
        snapshot = _make_cart().snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.customer_id = "someone-else"

    def test_empty_snapshot(self):
        assert _make_cart().snapshot().is_empty
