from sqlalchemy import Column, Integer, String, Float, Text
from database import Base
from datetime import datetime

# --- GYM ENTITIES ---
# References between records (payment -> member, class -> trainer) are plain
# integers; nothing enforces that the target exists.

class MemberORM(Base):
    __tablename__ = "members"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True)
    email = Column(String, index=True)
    phone = Column(String)
    join_date = Column(String)  # YYYY-MM-DD
    membership_type = Column(String)  # Basic, Standard, Premium
    membership_status = Column(String, index=True)  # Active, Inactive
    membership_end = Column(String)  # YYYY-MM-DD
    emergency_contact = Column(String, nullable=True)  # "Name: Phone"
    age = Column(Integer)
    gender = Column(String)
    goals = Column(Text, nullable=True)
    created_at = Column(String, default=lambda: datetime.utcnow().isoformat())


class TrainerORM(Base):
    __tablename__ = "trainers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True)
    email = Column(String)
    phone = Column(String)
    hire_date = Column(String)  # YYYY-MM-DD

    # Lists stored as JSON strings (Schema: list of str)
    specialties_json = Column(String, nullable=True)
    certifications_json = Column(String, nullable=True)

    bio = Column(Text, nullable=True)
    schedule = Column(String, nullable=True)  # Free text, e.g. "Mon-Fri: 9AM-5PM"
    image_url = Column(String, nullable=True)
    created_at = Column(String, default=lambda: datetime.utcnow().isoformat())


class GymClassORM(Base):
    __tablename__ = "classes"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, index=True)
    trainer_id = Column(Integer, index=True, nullable=True)
    time_start = Column(String)  # HH:MM, 24h
    time_end = Column(String)  # HH:MM, 24h
    days_json = Column(String)  # JSON list of weekday names
    capacity = Column(Integer, default=0)
    enrolled = Column(Integer, default=0)
    location = Column(String, nullable=True)
    description = Column(Text, nullable=True)


class PaymentORM(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    member_id = Column(Integer, index=True)
    amount = Column(Float)
    date = Column(String, index=True)  # YYYY-MM-DD
    type = Column(String)  # Membership, Personal Training, ...
    status = Column(String, index=True)  # Paid, Pending, Overdue
    method = Column(String)  # Credit Card, Cash, ...
