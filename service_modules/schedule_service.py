"""
Schedule Service - handles the weekly class schedule.
"""
from .base import (
    HTTPException, logging,
    get_db_session, GymClassORM, apply_fields, dump_list, load_list
)
from .listing import SortConfig, filter_contains, search, sort_items, lookup_field

logger = logging.getLogger("gym_admin")

CLASS_SEARCH_FIELDS = ("name", "location", "description")
CLASS_SORT_KEYS = ("id", "name", "timeStart", "timeEnd", "capacity", "enrolled", "location", "trainer")

_COLUMNS = ("name", "trainer_id", "time_start", "time_end", "capacity", "enrolled", "location", "description")


class ScheduleService:
    """Service for managing gym classes."""

    def get_classes(self) -> list:
        db = get_db_session()
        try:
            classes = db.query(GymClassORM).order_by(GymClassORM.id).all()
            return [self._class_to_dict(c) for c in classes]
        finally:
            db.close()

    def search_classes(self, term: str = None, day: str = None, sort: SortConfig = None) -> list:
        """Classes held on the given weekday ("All" for every day)."""
        classes = filter_contains(self.get_classes(), "days", day)
        classes = search(classes, term, CLASS_SEARCH_FIELDS)
        return sort_items(classes, sort or SortConfig())

    def get_class(self, class_id: int) -> dict:
        db = get_db_session()
        try:
            gym_class = db.query(GymClassORM).filter(GymClassORM.id == class_id).first()
            if not gym_class:
                raise HTTPException(status_code=404, detail="Class not found")
            return self._class_to_dict(gym_class)
        finally:
            db.close()

    def create_class(self, data: dict) -> dict:
        db = get_db_session()
        try:
            gym_class = GymClassORM()
            self._apply(gym_class, data)
            db.add(gym_class)
            db.commit()
            db.refresh(gym_class)
            logger.info(f"Created class {gym_class.id} ({gym_class.name})")
            return self._class_to_dict(gym_class)
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=f"Failed to create class: {str(e)}")
        finally:
            db.close()

    def update_class(self, class_id: int, data: dict) -> dict:
        db = get_db_session()
        try:
            gym_class = db.query(GymClassORM).filter(GymClassORM.id == class_id).first()
            if not gym_class:
                raise HTTPException(status_code=404, detail="Class not found")

            self._apply(gym_class, data)
            db.commit()
            db.refresh(gym_class)
            logger.info(f"Updated class {class_id}")
            return self._class_to_dict(gym_class)
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=f"Failed to update class: {str(e)}")
        finally:
            db.close()

    def delete_class(self, class_id: int) -> dict:
        db = get_db_session()
        try:
            gym_class = db.query(GymClassORM).filter(GymClassORM.id == class_id).first()
            if not gym_class:
                raise HTTPException(status_code=404, detail="Class not found")

            db.delete(gym_class)
            db.commit()
            logger.info(f"Deleted class {class_id}")
            return {"status": "success", "message": "Class deleted"}
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=f"Failed to delete class: {str(e)}")
        finally:
            db.close()

    @staticmethod
    def trainer_name(trainers: list, trainer_id) -> str:
        return lookup_field(trainers, trainer_id, "name", "Unknown")

    def _apply(self, gym_class: GymClassORM, data: dict):
        apply_fields(gym_class, data, _COLUMNS)
        if "days" in data:
            gym_class.days_json = dump_list(data["days"])

    def _class_to_dict(self, c: GymClassORM) -> dict:
        return {
            "id": c.id,
            "name": c.name,
            "trainer": c.trainer_id,
            "timeStart": c.time_start,
            "timeEnd": c.time_end,
            "days": load_list(c.days_json),
            "capacity": c.capacity or 0,
            "enrolled": c.enrolled or 0,
            "location": c.location or "",
            "description": c.description or "",
        }


# Singleton instance
schedule_service = ScheduleService()

def get_schedule_service() -> ScheduleService:
    """Dependency injection helper."""
    return schedule_service
