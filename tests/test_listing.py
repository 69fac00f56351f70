from service_modules.listing import (
    ALL, ASC, DESC, SortConfig, apply_filters, filter_contains, filter_equal,
    find_by_id, lookup_field, matches_search, search, sort_items,
)

MEMBERS = [
    {"id": 1, "name": "John Smith", "email": "john@example.com", "phone": "555-1234", "membershipStatus": "Active"},
    {"id": 2, "name": "Emily Johnson", "email": "emily@example.com", "phone": "555-9876", "membershipStatus": "Inactive"},
    {"id": 3, "name": "Sam Lee", "email": "sam@EXAMPLE.com", "phone": "555-4321", "membershipStatus": "Active"},
]


def test_all_disables_status_filter():
    assert filter_equal(MEMBERS, "membershipStatus", ALL) == MEMBERS
    assert filter_equal(MEMBERS, "membershipStatus", None) == MEMBERS
    assert filter_equal(MEMBERS, "membershipStatus", "") == MEMBERS


def test_status_filter_is_exact():
    active = filter_equal(MEMBERS, "membershipStatus", "Active")
    assert [m["id"] for m in active] == [1, 3]
    assert filter_equal(MEMBERS, "membershipStatus", "active") == []


def test_search_is_case_insensitive():
    assert [m["id"] for m in search(MEMBERS, "JOHN", ("name", "email"))] == [1, 2]
    assert [m["id"] for m in search(MEMBERS, "example.COM", ("email",))] == [1, 2, 3]


def test_empty_search_keeps_everything():
    assert search(MEMBERS, "", ("name",)) == MEMBERS
    assert search(MEMBERS, None, ("name",)) == MEMBERS


def test_filters_intersect():
    result = apply_filters(MEMBERS, term="john", search_fields=("name",),
                           status="Active", status_field="membershipStatus")
    assert [m["id"] for m in result] == [1]


def test_search_over_list_values():
    trainers = [
        {"id": 1, "name": "Alex", "specialties": ["Weight training", "HIIT"]},
        {"id": 2, "name": "Priya", "specialties": ["Yoga"]},
        {"id": 3, "name": "Marcus", "specialties": []},
    ]
    assert [t["id"] for t in search(trainers, "hiit", ("name", "specialties"))] == [1]
    assert [t["id"] for t in search(trainers, "yog", ("name", "specialties"))] == [2]


def test_search_with_derived_field():
    payments = [{"id": 10, "memberId": 1}, {"id": 11, "memberId": 99}]
    name = lambda p: lookup_field(MEMBERS, p["memberId"], "name", None)
    assert [p["id"] for p in search(payments, "smith", (name,))] == [10]


def test_whole_numbers_match_without_decimal_suffix():
    assert matches_search({"amount": 50.0}, "50", ("amount",))
    assert not matches_search({"amount": 50.0}, "50.0", ("amount",))
    assert matches_search({"amount": 49.99}, "49.9", ("amount",))


def test_missing_values_never_match():
    assert not matches_search({"name": None}, "none", ("name", "email"))


def test_filter_contains_list_field():
    classes = [{"id": 1, "days": ["Monday", "Friday"]}, {"id": 2, "days": ["Saturday"]}, {"id": 3, "days": []}]
    assert [c["id"] for c in filter_contains(classes, "days", "Monday")] == [1]
    assert len(filter_contains(classes, "days", ALL)) == 3


def test_sort_ascending_and_descending():
    assert [m["id"] for m in sort_items(MEMBERS, SortConfig("name", ASC))] == [2, 1, 3]
    assert [m["id"] for m in sort_items(MEMBERS, SortConfig("name", DESC))] == [3, 1, 2]


def test_sort_without_key_keeps_order():
    assert sort_items(MEMBERS, SortConfig()) == MEMBERS


def test_sort_returns_new_list():
    items = list(MEMBERS)
    sort_items(items, SortConfig("name", DESC))
    assert items == MEMBERS


def test_sort_keeps_input_order_for_ties():
    rows = [{"id": 1, "status": "Paid"}, {"id": 2, "status": "Paid"}, {"id": 3, "status": "Overdue"}]
    assert [r["id"] for r in sort_items(rows, SortConfig("status", ASC))] == [3, 1, 2]
    assert [r["id"] for r in sort_items(rows, SortConfig("status", DESC))] == [1, 2, 3]


def test_sort_puts_missing_values_last_ascending():
    rows = [{"id": 1, "amount": None}, {"id": 2, "amount": 5}, {"id": 3, "amount": 1}]
    assert [r["id"] for r in sort_items(rows, SortConfig("amount", ASC))] == [3, 2, 1]


def test_sort_toggle():
    config = SortConfig("date", DESC)
    assert config.toggle("date") == SortConfig("date", ASC)
    assert SortConfig("date", ASC).toggle("date") == SortConfig("date", DESC)
    assert SortConfig("date", ASC).toggle("amount") == SortConfig("amount", ASC)


def test_sort_config_parse_ignores_unknown_columns():
    default = SortConfig("date", DESC)
    assert SortConfig.parse("password", "asc", ("date", "amount"), default) == default
    assert SortConfig.parse("amount", "DESC", ("date", "amount"), default) == SortConfig("amount", DESC)
    assert SortConfig.parse("amount", "sideways", ("date", "amount")) == SortConfig("amount", ASC)


def test_find_by_id_and_lookup_fallback():
    assert find_by_id(MEMBERS, 3)["name"] == "Sam Lee"
    assert find_by_id(MEMBERS, 42) is None
    assert lookup_field(MEMBERS, 42, "name", "Unknown Member") == "Unknown Member"
