"""
Member Service - handles member CRUD operations.
"""
from .base import (
    HTTPException, logging,
    get_db_session, MemberORM, apply_fields
)
from .listing import SortConfig, apply_filters, sort_items

logger = logging.getLogger("gym_admin")

MEMBER_SEARCH_FIELDS = ("name", "email", "phone")
MEMBER_SORT_KEYS = ("id", "name", "email", "membershipType", "membershipStatus", "joinDate", "membershipEnd", "age")

_COLUMNS = (
    "name", "email", "phone", "join_date", "membership_type", "membership_status",
    "membership_end", "emergency_contact", "age", "gender", "goals",
)


class MemberService:
    """Service for managing gym members."""

    def get_members(self) -> list:
        db = get_db_session()
        try:
            members = db.query(MemberORM).order_by(MemberORM.id).all()
            return [self._member_to_dict(m) for m in members]
        finally:
            db.close()

    def search_members(self, term: str = None, status: str = None, sort: SortConfig = None) -> list:
        """Members narrowed by status and a name/email/phone search."""
        members = apply_filters(
            self.get_members(),
            term=term,
            search_fields=MEMBER_SEARCH_FIELDS,
            status=status,
            status_field="membershipStatus",
        )
        return sort_items(members, sort or SortConfig())

    def get_member(self, member_id: int) -> dict:
        db = get_db_session()
        try:
            member = db.query(MemberORM).filter(MemberORM.id == member_id).first()
            if not member:
                raise HTTPException(status_code=404, detail="Member not found")
            return self._member_to_dict(member)
        finally:
            db.close()

    def create_member(self, data: dict) -> dict:
        db = get_db_session()
        try:
            member = MemberORM()
            apply_fields(member, data, _COLUMNS)
            db.add(member)
            db.commit()
            db.refresh(member)
            logger.info(f"Created member {member.id} ({member.name})")
            return self._member_to_dict(member)
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=f"Failed to create member: {str(e)}")
        finally:
            db.close()

    def update_member(self, member_id: int, data: dict) -> dict:
        """Apply the given fields; PUT passes every field, PATCH only the changed ones."""
        db = get_db_session()
        try:
            member = db.query(MemberORM).filter(MemberORM.id == member_id).first()
            if not member:
                raise HTTPException(status_code=404, detail="Member not found")

            apply_fields(member, data, _COLUMNS)
            db.commit()
            db.refresh(member)
            logger.info(f"Updated member {member_id}")
            return self._member_to_dict(member)
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=f"Failed to update member: {str(e)}")
        finally:
            db.close()

    def delete_member(self, member_id: int) -> dict:
        db = get_db_session()
        try:
            member = db.query(MemberORM).filter(MemberORM.id == member_id).first()
            if not member:
                raise HTTPException(status_code=404, detail="Member not found")

            db.delete(member)
            db.commit()
            logger.info(f"Deleted member {member_id}")
            return {"status": "success", "message": "Member deleted"}
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=f"Failed to delete member: {str(e)}")
        finally:
            db.close()

    def _member_to_dict(self, m: MemberORM) -> dict:
        return {
            "id": m.id,
            "name": m.name,
            "email": m.email,
            "phone": m.phone,
            "joinDate": m.join_date,
            "membershipType": m.membership_type,
            "membershipStatus": m.membership_status,
            "membershipEnd": m.membership_end,
            "emergencyContact": m.emergency_contact or "",
            "age": m.age,
            "gender": m.gender,
            "goals": m.goals or "",
        }


# Singleton instance
member_service = MemberService()

def get_member_service() -> MemberService:
    """Dependency injection helper."""
    return member_service
