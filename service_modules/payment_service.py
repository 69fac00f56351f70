"""
Payment Service - handles payment records and the payments summary.
"""
from .base import (
    HTTPException, logging,
    get_db_session, PaymentORM, apply_fields
)
from .listing import DESC, SortConfig, apply_filters, sort_items, lookup_field

logger = logging.getLogger("gym_admin")

PAYMENT_SORT_KEYS = ("id", "memberId", "amount", "date", "type", "method", "status")
DEFAULT_PAYMENT_SORT = SortConfig("date", DESC)

_COLUMNS = ("member_id", "amount", "date", "type", "status", "method")


def member_name(members: list, member_id) -> str:
    return lookup_field(members, member_id, "name", "Unknown Member")


def member_email(members: list, member_id) -> str:
    return lookup_field(members, member_id, "email", "Unknown Email")


def payment_search_fields(members: list) -> tuple:
    """Member name and email (resolved by id), amount and method."""
    def name(payment):
        return lookup_field(members, payment.get("memberId"), "name", None)

    def email(payment):
        return lookup_field(members, payment.get("memberId"), "email", None)

    return (name, email, "amount", "method")


def summarize(payments: list) -> dict:
    total = sum(p.get("amount") or 0 for p in payments)
    count = len(payments)
    return {
        "totalAmount": total,
        "count": count,
        "average": total / count if count else 0.0,
    }


class PaymentService:
    """Service for managing member payments."""

    def get_payments(self) -> list:
        db = get_db_session()
        try:
            payments = db.query(PaymentORM).order_by(PaymentORM.id).all()
            return [self._payment_to_dict(p) for p in payments]
        finally:
            db.close()

    def search_payments(self, members: list, term: str = None, status: str = None,
                        sort: SortConfig = None) -> list:
        """Payments narrowed by status and a search over member, amount and method."""
        payments = apply_filters(
            self.get_payments(),
            term=term,
            search_fields=payment_search_fields(members),
            status=status,
            status_field="status",
        )
        return sort_items(payments, sort or DEFAULT_PAYMENT_SORT)

    def get_payment(self, payment_id: int) -> dict:
        db = get_db_session()
        try:
            payment = db.query(PaymentORM).filter(PaymentORM.id == payment_id).first()
            if not payment:
                raise HTTPException(status_code=404, detail="Payment not found")
            return self._payment_to_dict(payment)
        finally:
            db.close()

    def create_payment(self, data: dict) -> dict:
        db = get_db_session()
        try:
            payment = PaymentORM()
            apply_fields(payment, data, _COLUMNS)
            db.add(payment)
            db.commit()
            db.refresh(payment)
            logger.info(f"Recorded payment {payment.id} for member {payment.member_id}")
            return self._payment_to_dict(payment)
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=f"Failed to create payment: {str(e)}")
        finally:
            db.close()

    def update_payment(self, payment_id: int, data: dict) -> dict:
        db = get_db_session()
        try:
            payment = db.query(PaymentORM).filter(PaymentORM.id == payment_id).first()
            if not payment:
                raise HTTPException(status_code=404, detail="Payment not found")

            apply_fields(payment, data, _COLUMNS)
            db.commit()
            db.refresh(payment)
            logger.info(f"Updated payment {payment_id}")
            return self._payment_to_dict(payment)
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=f"Failed to update payment: {str(e)}")
        finally:
            db.close()

    def delete_payment(self, payment_id: int) -> dict:
        db = get_db_session()
        try:
            payment = db.query(PaymentORM).filter(PaymentORM.id == payment_id).first()
            if not payment:
                raise HTTPException(status_code=404, detail="Payment not found")

            db.delete(payment)
            db.commit()
            logger.info(f"Deleted payment {payment_id}")
            return {"status": "success", "message": "Payment deleted"}
        except HTTPException:
            raise
        except Exception as e:
            db.rollback()
            raise HTTPException(status_code=500, detail=f"Failed to delete payment: {str(e)}")
        finally:
            db.close()

    def _payment_to_dict(self, p: PaymentORM) -> dict:
        return {
            "id": p.id,
            "memberId": p.member_id,
            "amount": p.amount,
            "date": p.date,
            "type": p.type,
            "status": p.status,
            "method": p.method or "",
        }


# Singleton instance
payment_service = PaymentService()

def get_payment_service() -> PaymentService:
    """Dependency injection helper."""
    return payment_service
