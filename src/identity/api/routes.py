"""FastAPI endpoints for the Identity domain."""

from fastapi import APIRouter, Response
from protean.utils.globals import current_domain

from identity.api.schemas import CustomerIdResponse, CustomerRequest, CustomerResponse
from identity.customer.details import RemoveCustomer, UpdateCustomer
from identity.customer.queries import get_customer, list_customers
from identity.customer.registration import RegisterCustomer

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=list[CustomerResponse])
async def get_customers() -> list[CustomerResponse]:
    return [CustomerResponse.from_customer(customer) for customer in list_customers()]


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer_by_id(customer_id: str) -> CustomerResponse:
    return CustomerResponse.from_customer(get_customer(customer_id))


@router.post("", status_code=201, response_model=CustomerIdResponse)
async def register_customer(body: CustomerRequest) -> CustomerIdResponse:
    command = RegisterCustomer(
        name=body.name,
        email=body.email,
        address=body.address,
        contact_number=body.contact_number,
    )
    result = current_domain.process(command, asynchronous=False)
    return CustomerIdResponse(customer_id=result)


@router.put("/{customer_id}", status_code=204)
async def update_customer(customer_id: str, body: CustomerRequest) -> Response:
    command = UpdateCustomer(
        customer_id=customer_id,
        name=body.name,
        email=body.email,
        address=body.address,
        contact_number=body.contact_number,
    )
    current_domain.process(command, asynchronous=False)
    return Response(status_code=204)


@router.delete("/{customer_id}", status_code=204)
async def remove_customer(customer_id: str) -> Response:
    current_domain.process(RemoveCustomer(customer_id=customer_id), asynchronous=False)
    return Response(status_code=204)
