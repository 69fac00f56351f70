"""
Trainer Routes - REST endpoints for trainers.
"""
from fastapi import APIRouter, Depends, Query
from models import TrainerCreate, TrainerUpdate
from service_modules.listing import SortConfig
from service_modules.trainer_service import TrainerService, get_trainer_service, TRAINER_SORT_KEYS

router = APIRouter()


@router.get("/api/trainers")
async def list_trainers(
    q: str = None,
    sort: str = Query(None, alias="_sort"),
    order: str = Query(None, alias="_order"),
    service: TrainerService = Depends(get_trainer_service)
):
    return service.search_trainers(q, SortConfig.parse(sort, order, TRAINER_SORT_KEYS))


@router.get("/api/trainers/{trainer_id}")
async def get_trainer(trainer_id: int, service: TrainerService = Depends(get_trainer_service)):
    return service.get_trainer(trainer_id)


@router.post("/api/trainers", status_code=201)
async def create_trainer(trainer: TrainerCreate, service: TrainerService = Depends(get_trainer_service)):
    return service.create_trainer(trainer.model_dump())


@router.put("/api/trainers/{trainer_id}")
async def replace_trainer(
    trainer_id: int,
    trainer: TrainerCreate,
    service: TrainerService = Depends(get_trainer_service)
):
    return service.update_trainer(trainer_id, trainer.model_dump())


@router.patch("/api/trainers/{trainer_id}")
async def patch_trainer(
    trainer_id: int,
    trainer: TrainerUpdate,
    service: TrainerService = Depends(get_trainer_service)
):
    return service.update_trainer(trainer_id, trainer.model_dump(exclude_unset=True))


@router.delete("/api/trainers/{trainer_id}")
async def delete_trainer(trainer_id: int, service: TrainerService = Depends(get_trainer_service)):
    return service.delete_trainer(trainer_id)
