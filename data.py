import json
import logging
import os
from datetime import date, timedelta

from models_orm import MemberORM, TrainerORM, GymClassORM, PaymentORM

logger = logging.getLogger("gym_admin")

SEED_DEMO_DATA = os.getenv("SEED_DEMO_DATA", "1").lower() not in ("0", "false", "no")


def _days_ago(n: int) -> str:
    return (date.today() - timedelta(days=n)).isoformat()

def _days_ahead(n: int) -> str:
    return (date.today() + timedelta(days=n)).isoformat()


# --- MOCK DATABASE ---
MEMBERS = [
    {"name": "John Smith", "email": "john.smith@example.com", "phone": "555-123-4567",
     "join_date": _days_ago(120), "membership_type": "Premium", "membership_status": "Active",
     "membership_end": _days_ahead(245), "emergency_contact": "Jane Smith: 555-987-6543",
     "age": 34, "gender": "Male", "goals": "Muscle gain, Strength"},
    {"name": "Emily Johnson", "email": "emily.j@example.com", "phone": "555-234-5678",
     "join_date": _days_ago(90), "membership_type": "Standard", "membership_status": "Active",
     "membership_end": _days_ahead(90), "emergency_contact": "Mark Johnson: 555-876-5432",
     "age": 28, "gender": "Female", "goals": "Weight loss, General fitness"},
    {"name": "Michael Brown", "email": "mbrown@example.com", "phone": "555-345-6789",
     "join_date": _days_ago(400), "membership_type": "Basic", "membership_status": "Inactive",
     "membership_end": _days_ago(35), "emergency_contact": "",
     "age": 45, "gender": "Male", "goals": "Cardio endurance"},
    {"name": "Sophia Garcia", "email": "sophia.garcia@example.com", "phone": "555-456-7890",
     "join_date": _days_ago(45), "membership_type": "Premium", "membership_status": "Active",
     "membership_end": _days_ahead(320), "emergency_contact": "Luis Garcia: 555-765-4321",
     "age": 31, "gender": "Female", "goals": "Flexibility, Yoga"},
    {"name": "Daniel Lee", "email": "dlee@example.com", "phone": "555-567-8901",
     "join_date": _days_ago(15), "membership_type": "Standard", "membership_status": "Active",
     "membership_end": _days_ahead(15), "emergency_contact": "",
     "age": 22, "gender": "Male", "goals": "Muscle gain"},
    {"name": "Olivia Martinez", "email": "olivia.m@example.com", "phone": "555-678-9012",
     "join_date": _days_ago(200), "membership_type": "Basic", "membership_status": "Inactive",
     "membership_end": _days_ago(10), "emergency_contact": "Ana Martinez: 555-654-3210",
     "age": 39, "gender": "Female", "goals": "General fitness"},
    {"name": "James Wilson", "email": "jwilson@example.com", "phone": "555-789-0123",
     "join_date": _days_ago(60), "membership_type": "Premium", "membership_status": "Active",
     "membership_end": _days_ahead(300), "emergency_contact": "",
     "age": 50, "gender": "Male", "goals": "Weight loss"},
]

TRAINERS = [
    {"name": "Alex Rivera", "email": "alex.rivera@gymflex.com", "phone": "555-111-2222",
     "hire_date": "2021-03-15", "specialties": ["Weight training", "HIIT"],
     "certifications": ["NASM CPT", "CrossFit L1"], "schedule": "Mon-Fri: 6AM-2PM",
     "bio": "Strength coach focused on progressive overload and clean technique.",
     "image_url": ""},
    {"name": "Priya Patel", "email": "priya.patel@gymflex.com", "phone": "555-222-3333",
     "hire_date": "2022-01-10", "specialties": ["Yoga", "Pilates"],
     "certifications": ["RYT-500"], "schedule": "Tue-Sat: 8AM-4PM",
     "bio": "Yoga instructor helping members build mobility and balance.",
     "image_url": ""},
    {"name": "Marcus Chen", "email": "marcus.chen@gymflex.com", "phone": "555-333-4444",
     "hire_date": "2020-07-01", "specialties": ["Boxing", "Cardio"],
     "certifications": ["ACE CPT", "USA Boxing Coach"], "schedule": "Mon-Thu: 12PM-8PM",
     "bio": "Former amateur boxer running conditioning and boxing classes.",
     "image_url": ""},
]

# trainer_index refers to the position in TRAINERS
CLASSES = [
    {"name": "Morning HIIT", "trainer_index": 0, "time_start": "06:30", "time_end": "07:15",
     "days": ["Monday", "Wednesday", "Friday"], "capacity": 20, "enrolled": 17,
     "location": "Studio A", "description": "High intensity intervals to start the day."},
    {"name": "Power Yoga", "trainer_index": 1, "time_start": "09:00", "time_end": "10:00",
     "days": ["Tuesday", "Thursday", "Saturday"], "capacity": 15, "enrolled": 9,
     "location": "Yoga Room", "description": "Flowing sequences building strength and flexibility."},
    {"name": "Boxing Basics", "trainer_index": 2, "time_start": "18:00", "time_end": "19:00",
     "days": ["Monday", "Thursday"], "capacity": 12, "enrolled": 5,
     "location": "Ring", "description": "Footwork, combinations and bag work."},
    {"name": "Weekend Strength", "trainer_index": 0, "time_start": "10:30", "time_end": "11:30",
     "days": ["Saturday", "Sunday"], "capacity": 16, "enrolled": 12,
     "location": "Weight Floor", "description": "Compound lifts with coaching."},
]

# member_index refers to the position in MEMBERS
PAYMENTS = [
    {"member_index": 0, "amount": 99.99, "date": _days_ago(3), "type": "Membership", "status": "Paid", "method": "Credit Card"},
    {"member_index": 1, "amount": 59.99, "date": _days_ago(12), "type": "Membership", "status": "Paid", "method": "Debit Card"},
    {"member_index": 2, "amount": 29.99, "date": _days_ago(40), "type": "Membership", "status": "Overdue", "method": "Cash"},
    {"member_index": 3, "amount": 150.0, "date": _days_ago(7), "type": "Personal Training", "status": "Paid", "method": "Credit Card"},
    {"member_index": 4, "amount": 59.99, "date": _days_ago(1), "type": "Membership", "status": "Pending", "method": "Bank Transfer"},
    {"member_index": 6, "amount": 99.99, "date": _days_ago(65), "type": "Membership", "status": "Paid", "method": "Credit Card"},
    {"member_index": 0, "amount": 45.0, "date": _days_ago(20), "type": "Class Pass", "status": "Paid", "method": "Cash"},
]


def seed_demo_data(db) -> bool:
    """Populate an empty store. Returns True when rows were inserted."""
    if not SEED_DEMO_DATA:
        return False
    if db.query(MemberORM).first() or db.query(TrainerORM).first():
        return False

    members = [MemberORM(**m) for m in MEMBERS]
    trainers = []
    for t in TRAINERS:
        fields = dict(t)
        fields["specialties_json"] = json.dumps(fields.pop("specialties"))
        fields["certifications_json"] = json.dumps(fields.pop("certifications"))
        trainers.append(TrainerORM(**fields))
    db.add_all(members + trainers)
    db.flush()

    for c in CLASSES:
        fields = dict(c)
        fields["trainer_id"] = trainers[fields.pop("trainer_index")].id
        fields["days_json"] = json.dumps(fields.pop("days"))
        db.add(GymClassORM(**fields))

    for p in PAYMENTS:
        fields = dict(p)
        fields["member_id"] = members[fields.pop("member_index")].id
        db.add(PaymentORM(**fields))

    db.commit()
    logger.info(f"Seeded demo data: {len(MEMBERS)} members, {len(TRAINERS)} trainers, "
                f"{len(CLASSES)} classes, {len(PAYMENTS)} payments")
    return True
