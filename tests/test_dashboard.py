from datetime import date

from service_modules.dashboard_service import DashboardService

TODAY = date(2024, 6, 30)


def _member(name, status="Active"):
    return {"name": name, "membershipStatus": status}


def test_stats_counts():
    members = [_member("Ann"), _member("Ben", "Inactive"), _member("Cal")]
    payments = [
        {"date": "2024-05-31"},            # exactly 30 days old
        {"date": "2024-06-01"},            # 29 days old
        {"date": "2024-06-30T09:00:00Z"},
        {"date": "not a date"},
        {"date": None},
    ]
    stats = DashboardService().get_stats(members, [{"id": 1}, {"id": 2}], [{"id": 1}], payments, today=TODAY)

    assert stats == {
        "totalMembers": 3,
        "activeMembers": 2,
        "totalTrainers": 2,
        "totalClasses": 1,
        "recentPayments": 2,
    }


def test_stats_empty():
    stats = DashboardService().get_stats([], [], [], [], today=TODAY)
    assert set(stats.values()) == {0}


def test_active_member_preview_is_capped():
    members = [_member(f"Member {i}") for i in range(6)] + [_member("Gone", "Inactive")]
    preview = DashboardService().active_member_preview(members)

    assert [m["name"] for m in preview] == [f"Member {i}" for i in range(5)]
    assert DashboardService().active_member_preview([_member("Solo", "Inactive")]) == []
