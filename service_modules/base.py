"""
Base service utilities and shared imports.
All services should import from here for common functionality.
"""
from fastapi import HTTPException
import json
import logging
from datetime import date, datetime, timedelta

from database import get_db_session
from models_orm import MemberORM, TrainerORM, GymClassORM, PaymentORM

# Re-export for convenience
__all__ = [
    'HTTPException', 'json', 'logging', 'date', 'datetime', 'timedelta',
    'get_db_session',
    'MemberORM', 'TrainerORM', 'GymClassORM', 'PaymentORM',
    'dump_list', 'load_list', 'apply_fields',
]

logger = logging.getLogger("gym_admin")


def dump_list(values) -> str:
    return json.dumps(list(values or []))


def load_list(raw) -> list:
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except ValueError:
        logger.warning(f"Discarding malformed list column: {raw!r}")
        return []
    return value if isinstance(value, list) else []


def apply_fields(row, data: dict, columns):
    """Copy data keys onto ORM attributes. columns is a {data_key: column} map or a list of shared names."""
    if not isinstance(columns, dict):
        columns = {name: name for name in columns}
    for key, column in columns.items():
        if key in data:
            setattr(row, column, data[key])
