"""FastAPI endpoints for the Catalogue domain."""

from fastapi import APIRouter, Response
from protean.utils.globals import current_domain

from catalogue.api.schemas import (
    CategoryIdResponse,
    CategoryRequest,
    CategoryResponse,
    ProductIdResponse,
    ProductRequest,
    ProductResponse,
)
from catalogue.category.management import (
    CreateCategory,
    DeleteCategory,
    UpdateCategory,
    get_category,
    list_categories,
)
from catalogue.product.management import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
    get_product,
    list_products,
)

product_router = APIRouter(prefix="/products", tags=["products"])
category_router = APIRouter(prefix="/categories", tags=["categories"])


# --- Product endpoints ---


@product_router.get("", response_model=list[ProductResponse])
async def get_products() -> list[ProductResponse]:
    return [ProductResponse.from_product(product) for product in list_products()]


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product_by_id(product_id: str) -> ProductResponse:
    return ProductResponse.from_product(get_product(product_id))


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def create_product(body: ProductRequest) -> ProductIdResponse:
    command = CreateProduct(
        name=body.name,
        description=body.description,
        price=body.price,
        quantity=body.quantity,
        category=body.category,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.put("/{product_id}", status_code=204)
async def update_product(product_id: str, body: ProductRequest) -> Response:
    command = UpdateProduct(
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        quantity=body.quantity,
        category=body.category,
    )
    current_domain.process(command, asynchronous=False)
    return Response(status_code=204)


@product_router.delete("/{product_id}", status_code=204)
async def delete_product(product_id: str) -> Response:
    current_domain.process(DeleteProduct(product_id=product_id), asynchronous=False)
    return Response(status_code=204)


# --- Category endpoints ---


@category_router.get("", response_model=list[CategoryResponse])
async def get_categories() -> list[CategoryResponse]:
    return [CategoryResponse.from_category(category) for category in list_categories()]


@category_router.get("/{category_id}", response_model=CategoryResponse)
async def get_category_by_id(category_id: str) -> CategoryResponse:
    return CategoryResponse.from_category(get_category(category_id))


@category_router.post("", status_code=201, response_model=CategoryIdResponse)
async def create_category(body: CategoryRequest) -> CategoryIdResponse:
    command = CreateCategory(name=body.name, description=body.description)
    result = current_domain.process(command, asynchronous=False)
    return CategoryIdResponse(category_id=result)


@category_router.put("/{category_id}", status_code=204)
async def update_category(category_id: str, body: CategoryRequest) -> Response:
    command = UpdateCategory(
        category_id=category_id,
        name=body.name,
        description=body.description,
    )
    current_domain.process(command, asynchronous=False)
    return Response(status_code=204)


@category_router.delete("/{category_id}", status_code=204)
async def delete_category(category_id: str) -> Response:
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)
    return Response(status_code=204)
