"""
Payment Routes - REST endpoints for payments.
"""
from fastapi import APIRouter, Depends, Query
from models import PaymentCreate, PaymentUpdate
from service_modules.listing import SortConfig
from service_modules.member_service import MemberService, get_member_service
from service_modules.payment_service import (
    PaymentService, get_payment_service, PAYMENT_SORT_KEYS, DEFAULT_PAYMENT_SORT
)

router = APIRouter()


@router.get("/api/payments")
async def list_payments(
    q: str = None,
    status: str = None,
    sort: str = Query(None, alias="_sort"),
    order: str = Query(None, alias="_order"),
    service: PaymentService = Depends(get_payment_service),
    members: MemberService = Depends(get_member_service)
):
    """Payments, newest first unless another column is requested."""
    # Member lookups are only needed when searching by name/email
    member_list = members.get_members() if q else []
    config = SortConfig.parse(sort, order, PAYMENT_SORT_KEYS, default=DEFAULT_PAYMENT_SORT)
    return service.search_payments(member_list, q, status, config)


@router.get("/api/payments/{payment_id}")
async def get_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    return service.get_payment(payment_id)


@router.post("/api/payments", status_code=201)
async def create_payment(payment: PaymentCreate, service: PaymentService = Depends(get_payment_service)):
    return service.create_payment(payment.model_dump())


@router.put("/api/payments/{payment_id}")
async def replace_payment(
    payment_id: int,
    payment: PaymentCreate,
    service: PaymentService = Depends(get_payment_service)
):
    return service.update_payment(payment_id, payment.model_dump())


@router.patch("/api/payments/{payment_id}")
async def patch_payment(
    payment_id: int,
    payment: PaymentUpdate,
    service: PaymentService = Depends(get_payment_service)
):
    return service.update_payment(payment_id, payment.model_dump(exclude_unset=True))


@router.delete("/api/payments/{payment_id}")
async def delete_payment(payment_id: int, service: PaymentService = Depends(get_payment_service)):
    return service.delete_payment(payment_id)
