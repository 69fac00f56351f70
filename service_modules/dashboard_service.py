"""
Dashboard Service - headline numbers for the landing page.
"""
from .base import logging, date, datetime, timedelta
from .listing import filter_equal

logger = logging.getLogger("gym_admin")

RECENT_PAYMENT_DAYS = 30
ACTIVE_MEMBER_PREVIEW = 5


def _parse_date(value):
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
    except ValueError:
        return None


class DashboardService:

    def get_stats(self, members: list, trainers: list, classes: list, payments: list,
                  today: date = None) -> dict:
        today = today or date.today()
        cutoff = today - timedelta(days=RECENT_PAYMENT_DAYS)
        active = filter_equal(members, "membershipStatus", "Active")

        recent = 0
        for payment in payments:
            paid_on = _parse_date(payment.get("date"))
            if paid_on is not None and paid_on > cutoff:
                recent += 1

        return {
            "totalMembers": len(members),
            "activeMembers": len(active),
            "totalTrainers": len(trainers),
            "totalClasses": len(classes),
            "recentPayments": recent,
        }

    def active_member_preview(self, members: list) -> list:
        return filter_equal(members, "membershipStatus", "Active")[:ACTIVE_MEMBER_PREVIEW]


# Singleton instance
dashboard_service = DashboardService()

def get_dashboard_service() -> DashboardService:
    """Dependency injection helper."""
    return dashboard_service
