"""
Member Routes - REST endpoints for gym members.
"""
from fastapi import APIRouter, Depends, Query
from models import MemberCreate, MemberUpdate
from service_modules.listing import SortConfig
from service_modules.member_service import MemberService, get_member_service, MEMBER_SORT_KEYS

router = APIRouter()


@router.get("/api/members")
async def list_members(
    q: str = None,
    status: str = None,
    sort: str = Query(None, alias="_sort"),
    order: str = Query(None, alias="_order"),
    service: MemberService = Depends(get_member_service)
):
    """All members, optionally searched, filtered by status and sorted."""
    return service.search_members(q, status, SortConfig.parse(sort, order, MEMBER_SORT_KEYS))


@router.get("/api/members/{member_id}")
async def get_member(member_id: int, service: MemberService = Depends(get_member_service)):
    return service.get_member(member_id)


@router.post("/api/members", status_code=201)
async def create_member(member: MemberCreate, service: MemberService = Depends(get_member_service)):
    return service.create_member(member.model_dump())


@router.put("/api/members/{member_id}")
async def replace_member(
    member_id: int,
    member: MemberCreate,
    service: MemberService = Depends(get_member_service)
):
    return service.update_member(member_id, member.model_dump())


@router.patch("/api/members/{member_id}")
async def patch_member(
    member_id: int,
    member: MemberUpdate,
    service: MemberService = Depends(get_member_service)
):
    return service.update_member(member_id, member.model_dump(exclude_unset=True))


@router.delete("/api/members/{member_id}")
async def delete_member(member_id: int, service: MemberService = Depends(get_member_service)):
    return service.delete_member(member_id)
