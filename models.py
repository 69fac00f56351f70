from datetime import date
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel
from typing import Annotated, ClassVar, List, Optional, Literal

# Wire format is camelCase (joinDate, membershipType, ...); snake_case names
# are accepted too so services and forms can build models directly.

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


def _calendar_date(value: str) -> str:
    # The pattern only checks the shape; 2024-02-30 still has to be rejected
    date.fromisoformat(value)
    return value


IsoDate = Annotated[str, Field(pattern=DATE_PATTERN), AfterValidator(_calendar_date)]

MembershipType = Literal["Basic", "Standard", "Premium"]
MembershipStatus = Literal["Active", "Inactive"]
Gender = Literal["Male", "Female", "Other"]
PaymentStatus = Literal["Paid", "Pending", "Overdue"]
Weekday = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PartialModel(CamelModel):
    """Body of a PATCH: omitted fields stay as they are, explicit nulls are refused."""
    nullable_fields: ClassVar[frozenset] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.model_fields_set - self.nullable_fields:
            if getattr(self, name) is None:
                raise ValueError(f"{name} may not be null")
        return self


# --- MEMBER ---
class MemberCreate(CamelModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    join_date: IsoDate
    membership_type: MembershipType = "Standard"
    membership_status: MembershipStatus = "Active"
    membership_end: IsoDate
    emergency_contact: str = ""
    age: int = Field(default=18, ge=14, le=100)
    gender: Gender = "Male"
    goals: str = ""

class MemberUpdate(PartialModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=1)
    join_date: Optional[IsoDate] = None
    membership_type: Optional[MembershipType] = None
    membership_status: Optional[MembershipStatus] = None
    membership_end: Optional[IsoDate] = None
    emergency_contact: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=14, le=100)
    gender: Optional[Gender] = None
    goals: Optional[str] = None

# --- TRAINER ---
class TrainerCreate(CamelModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    hire_date: IsoDate
    specialties: List[str] = []
    certifications: List[str] = []
    bio: str = ""
    schedule: str = ""
    image_url: str = ""

class TrainerUpdate(PartialModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=1)
    hire_date: Optional[IsoDate] = None
    specialties: Optional[List[str]] = None
    certifications: Optional[List[str]] = None
    bio: Optional[str] = None
    schedule: Optional[str] = None
    image_url: Optional[str] = None

# --- CLASS SCHEDULE ---
class GymClassCreate(CamelModel):
    name: str = Field(min_length=1)
    trainer_id: Optional[int] = Field(default=None, alias="trainer")
    time_start: str = Field(pattern=TIME_PATTERN)
    time_end: str = Field(pattern=TIME_PATTERN)
    days: List[Weekday] = []
    capacity: int = Field(default=0, ge=0)
    enrolled: int = Field(default=0, ge=0)
    location: str = ""
    description: str = ""

class GymClassUpdate(PartialModel):
    nullable_fields: ClassVar[frozenset] = frozenset({"trainer_id"})

    name: Optional[str] = Field(default=None, min_length=1)
    trainer_id: Optional[int] = Field(default=None, alias="trainer")
    time_start: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    time_end: Optional[str] = Field(default=None, pattern=TIME_PATTERN)
    days: Optional[List[Weekday]] = None
    capacity: Optional[int] = Field(default=None, ge=0)
    enrolled: Optional[int] = Field(default=None, ge=0)
    location: Optional[str] = None
    description: Optional[str] = None

# --- PAYMENT ---
class PaymentCreate(CamelModel):
    member_id: int
    amount: float = Field(ge=0)
    date: IsoDate
    type: str = "Membership"
    status: PaymentStatus = "Pending"
    method: str = ""

class PaymentUpdate(PartialModel):
    member_id: Optional[int] = None
    amount: Optional[float] = Field(default=None, ge=0)
    date: Optional[IsoDate] = None
    type: Optional[str] = None
    status: Optional[PaymentStatus] = None
    method: Optional[str] = None
