"""
Schedule Routes - REST endpoints for gym classes.
"""
from fastapi import APIRouter, Depends, Query
from models import GymClassCreate, GymClassUpdate
from service_modules.listing import SortConfig
from service_modules.schedule_service import ScheduleService, get_schedule_service, CLASS_SORT_KEYS

router = APIRouter()


@router.get("/api/classes")
async def list_classes(
    q: str = None,
    day: str = None,
    sort: str = Query(None, alias="_sort"),
    order: str = Query(None, alias="_order"),
    service: ScheduleService = Depends(get_schedule_service)
):
    return service.search_classes(q, day, SortConfig.parse(sort, order, CLASS_SORT_KEYS))


@router.get("/api/classes/{class_id}")
async def get_class(class_id: int, service: ScheduleService = Depends(get_schedule_service)):
    return service.get_class(class_id)


@router.post("/api/classes", status_code=201)
async def create_class(gym_class: GymClassCreate, service: ScheduleService = Depends(get_schedule_service)):
    return service.create_class(gym_class.model_dump())


@router.put("/api/classes/{class_id}")
async def replace_class(
    class_id: int,
    gym_class: GymClassCreate,
    service: ScheduleService = Depends(get_schedule_service)
):
    return service.update_class(class_id, gym_class.model_dump())


@router.patch("/api/classes/{class_id}")
async def patch_class(
    class_id: int,
    gym_class: GymClassUpdate,
    service: ScheduleService = Depends(get_schedule_service)
):
    return service.update_class(class_id, gym_class.model_dump(exclude_unset=True))


@router.delete("/api/classes/{class_id}")
async def delete_class(class_id: int, service: ScheduleService = Depends(get_schedule_service)):
    return service.delete_class(class_id)
