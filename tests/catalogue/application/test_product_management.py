"""Application tests for product management commands."""

import pytest
from catalogue.product.management import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
    get_product,
    list_products,
)
from catalogue.product.product import Product
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError


def _create_product(**overrides):
    defaults = {
        "name": "Laptop",
        "description": "14 inch ultrabook",
        "price": 1000.0,
        "quantity": 5,
        "category": "Electronics",
    }
    defaults.update(overrides)
    return current_domain.process(CreateProduct(**defaults), asynchronous=False)


def _update_product(product_id, **overrides):
    defaults = {
        "product_id": product_id,
        "name": "Laptop Pro",
        "description": "16 inch workstation",
        "price": 1800.0,
        "quantity": 3,
        "category": "Computers",
    }
    defaults.update(overrides)
    return current_domain.process(UpdateProduct(**defaults), asynchronous=False)


class TestCreateProductCommand:
    def test_create_persists(self):
        product_id = _create_product()
        product = current_domain.repository_for(Product).get(product_id)
        assert product.name == "Laptop"
        assert product.price == 1000.0

    def test_create_with_zero_price_rejected(self):
        with pytest.raises(ValidationError):
            _create_product(price=0.0)
        assert list_products() == []


class TestUpdateProductCommand:
    def test_update_persists(self):
        product_id = _create_product()
        _update_product(product_id)
        product = get_product(product_id)
        assert product.name == "Laptop Pro"
        assert product.quantity == 3
        assert product.category == "Computers"

    def test_update_missing_product_is_noop(self):
        _update_product("missing-product")
        assert list_products() == []

    def test_invalid_update_rejected_for_missing_product(self):
        with pytest.raises(ValidationError):
            _update_product("missing-product", quantity=0)

    def test_invalid_update_leaves_product_unchanged(self):
        product_id = _create_product()
        with pytest.raises(ValidationError):
            _update_product(product_id, price=-1.0)
        assert get_product(product_id).price == 1000.0


class TestDeleteProductCommand:
    def test_delete_product(self):
        product_id = _create_product()
        current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
        with pytest.raises(ObjectNotFoundError):
            get_product(product_id)

    def test_delete_missing_product_is_noop(self):
        _create_product()
        current_domain.process(DeleteProduct(product_id="missing-product"), asynchronous=False)
        assert len(list_products()) == 1


class TestProductQueries:
    def test_list_products_returns_more_than_one_page(self):
        for i in range(105):
            _create_product(name=f"Laptop {i}")
        assert len(list_products()) == 105
