"""
Trainer Service - handles trainer CRUD operations.
"""
from .base import (
    HTTPException, logging,
    get_db_session, TrainerORM, apply_fields, dump_list, load_list
)
from .listing import SortConfig, apply_filters, sort_items

logger = logging.getLogger("gym_admin")

TRAINER_SEARCH_FIELDS = ("name", "email", "specialties")
TRAINER_SORT_KEYS = ("id", "name", "email", "hireDate")

_COLUMNS = ("name", "email", "phone", "hire_date", "bio", "schedule", "image_url")


class TrainerService:
    """Service for managing trainers."""

    def get_trainers(self) -> list:
        db = get_db_session()
        try:
            trainers = db.query(TrainerORM).order_by(TrainerORM.id).all()
            return [self._trainer_to_dict(t) for t in trainers]
        finally:
            db.close()

    def search_trainers(self, term: str = None, sort: SortConfig = None) -> list:
        """Trainers matching name, email or any specialty."""
        trainers = apply_filters(self.get_trainers(), term=term, search_fields=TRAINER_SEARCH_FIELDS)
        return sort_items(trainers, sort or SortConfig())

    def get_trainer(self, trainer_id: int) -> dict:
        db = get_db_session()
        try:
            trainer = db.query(TrainerORM).filter(TrainerORM.id == trainer_id).first()
            if not trainer:
                raise HTTPException(status_code=404, detail="Trainer not found")
            return self._trainer_to_dict(trainer)
        finally:
            db.close()

    def create_trainer(self, data: dict) -> dict:
        db = get_db_session()
        try:
            trainer = TrainerORM()
            self._apply(trainer, data)
            db.add(trainer)
            db.commit()
            db.refresh(trainer)
            logger.info(f"Created trainer {trainer.id} ({trainer.name})")
            return self._trainer_to_dict(trainer)
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=f"Failed to create trainer: {str(e)}")
        finally:
            db.close()

    def update_trainer(self, trainer_id: int, data: dict) -> dict:
        db = get_db_session()
        try:
            trainer = db.query(TrainerORM).filter(TrainerORM.id == trainer_id).first()
            if not trainer:
                raise HTTPException(status_code=404, detail="Trainer not found")

            self._apply(trainer, data)
            db.commit()
            db.refresh(trainer)
            logger.info(f"Updated trainer {trainer_id}")
            return self._trainer_to_dict(trainer)
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=f"Failed to update trainer: {str(e)}")
        finally:
            db.close()

    def delete_trainer(self, trainer_id: int) -> dict:
        # Classes keep their trainer id; the schedule shows "Unknown" for it
        db = get_db_session()
        try:
            trainer = db.query(TrainerORM).filter(TrainerORM.id == trainer_id).first()
            if not trainer:
                raise HTTPException(status_code=404, detail="Trainer not found")

            db.delete(trainer)
            db.commit()
            logger.info(f"Deleted trainer {trainer_id}")
            return {"status": "success", "message": "Trainer deleted"}
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=f"Failed to delete trainer: {str(e)}")
        finally:
            db.close()

    def _apply(self, trainer: TrainerORM, data: dict):
        apply_fields(trainer, data, _COLUMNS)
        # Handle list columns as JSON
        if "specialties" in data:
            trainer.specialties_json = dump_list(data["specialties"])
        if "certifications" in data:
            trainer.certifications_json = dump_list(data["certifications"])

    def _trainer_to_dict(self, t: TrainerORM) -> dict:
        return {
            "id": t.id,
            "name": t.name,
            "email": t.email,
            "phone": t.phone,
            "hireDate": t.hire_date,
            "specialties": load_list(t.specialties_json),
            "certifications": load_list(t.certifications_json),
            "bio": t.bio or "",
            "schedule": t.schedule or "",
            "imageUrl": t.image_url or "",
        }


# Singleton instance
trainer_service = TrainerService()

def get_trainer_service() -> TrainerService:
    """Dependency injection helper."""
    return trainer_service
