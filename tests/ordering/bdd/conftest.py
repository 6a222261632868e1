"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.cart.engine import CartEngine, LineItemDraft
from ordering.cart.store import CartStore
from protean.exceptions import InvalidStateError, ValidationError
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Scalar fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def engine(directory):
    return CartEngine(store=CartStore(), directory=directory)


@pytest.fixture()
def result():
    """Container for the outcome of a When step."""
    return {"item": None, "invoice": None, "exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('customer "{customer_id}" has an empty cart'))
def empty_cart(engine, customer_id):
    engine.delete_cart(customer_id)


@given(
    parsers.cfparse(
        'customer "{customer_id}" added "{name}" at {price:f} with quantity {quantity:d} and discount {discount:f}'
    )
)
def added_item(engine, result, customer_id, name, price, quantity, discount):
    result["item"] = engine.add_or_update_line_item(
        customer_id,
        LineItemDraft(name=name, price=price, quantity=quantity, discount=discount),
    )


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the request is rejected as invalid")
def rejected_as_invalid(result):
    assert isinstance(result["exc"], ValidationError)


@then(parsers.cfparse('the request is rejected because "{reason}"'))
def rejected_for_state(result, reason):
    assert isinstance(result["exc"], InvalidStateError)
    assert reason in str(result["exc"])


@then(parsers.cfparse('the cart of customer "{customer_id}" has {count:d} line items'))
def cart_line_count(engine, customer_id, count):
    cart = engine.get_cart(customer_id)
    assert (len(cart.items) if cart is not None else 0) == count
