from service_modules.member_service import get_member_service
from service_modules.payment_service import get_payment_service
from service_modules.schedule_service import get_schedule_service
from service_modules.trainer_service import get_trainer_service
from main import app


class BrokenService:
    """Stands in for a backend that cannot be reached."""

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise ConnectionError("backend unavailable")
        return fail


def test_pages_require_login(client):
    for path in ("/dashboard", "/members", "/trainers", "/schedule", "/payments", "/members/new"):
        response = client.get(path, follow_redirects=False)
        assert response.status_code == 302, path
        assert response.headers["location"] == "/login"


def test_root_redirects_to_dashboard(admin_client):
    response = admin_client.get("/", follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/dashboard"


def test_dashboard(admin_client):
    response = admin_client.get("/dashboard")
    assert response.status_code == 200
    assert "text/html" in response.headers["content-type"]
    assert "Gym Admin" in response.text
    assert "John Smith" in response.text
    # Inactive members are not in the preview
    assert "Michael Brown" not in response.text


def test_members_page_filters(admin_client):
    response = admin_client.get("/members", params={"status": "Inactive"})
    assert response.status_code == 200
    assert "Michael Brown" in response.text
    assert "John Smith" not in response.text

    response = admin_client.get("/members", params={"search": "nobody-matches"})
    assert "No members found" in response.text


def test_members_fetch_failure_shows_notification(admin_client):
    app.dependency_overrides[get_member_service] = lambda: BrokenService()
    response = admin_client.get("/members")
    assert response.status_code == 200
    assert "Failed to load members" in response.text
    assert "toast-error" in response.text


def test_trainers_fetch_failure_shows_notification(admin_client):
    app.dependency_overrides[get_trainer_service] = lambda: BrokenService()
    response = admin_client.get("/trainers")
    assert "Failed to load trainers" in response.text


def test_schedule_fetch_failure_shows_notification(admin_client):
    app.dependency_overrides[get_schedule_service] = lambda: BrokenService()
    response = admin_client.get("/schedule")
    assert "Failed to load schedule" in response.text


def test_payments_fetch_failure_shows_notification(admin_client):
    app.dependency_overrides[get_payment_service] = lambda: BrokenService()
    response = admin_client.get("/payments")
    assert "Failed to load payments" in response.text
    assert "$0.00" in response.text


def test_add_member_through_form(admin_client):
    form = admin_client.get("/members/new")
    assert form.status_code == 200
    assert "Add New Member" in form.text

    response = admin_client.post("/members", data={
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "phone": "555-101-2020",
        "joinDate": "2024-02-01",
        "membershipType": "Basic",
        "membershipStatus": "Active",
        "membershipEnd": "2024-03-02",
        "emergencyContact": "",
        "age": "36",
        "gender": "Female",
        "goals": "",
    }, follow_redirects=False)
    assert response.status_code == 303
    assert "Member+added+successfully" in response.headers["location"]

    page = admin_client.get(response.headers["location"])
    assert "Ada Lovelace" in page.text
    assert "Member added successfully" in page.text
    assert any(m["name"] == "Ada Lovelace" for m in admin_client.get("/api/members").json())


def test_invalid_member_form_is_rerendered(admin_client):
    response = admin_client.post("/members", data={
        "name": "Too Young",
        "email": "kid@example.com",
        "phone": "555",
        "joinDate": "2024-02-01",
        "membershipEnd": "2024-03-02",
        "age": "9",
    })
    assert response.status_code == 422
    assert "Too Young" in response.text
    assert "toast-error" in response.text


def test_edit_and_delete_member(admin_client):
    member = admin_client.get("/api/members").json()[0]
    edit = admin_client.get(f"/members/{member['id']}/edit")
    assert "Edit Member" in edit.text
    assert member["email"] in edit.text

    payload = {**member, "name": "John Smithson", "age": str(member["age"])}
    payload.pop("id")
    response = admin_client.post(f"/members/{member['id']}", data=payload)
    assert "Member updated successfully" in response.text
    assert admin_client.get(f"/api/members/{member['id']}").json()["name"] == "John Smithson"

    response = admin_client.post(f"/members/{member['id']}/delete")
    assert "Member deleted successfully" in response.text
    assert admin_client.get(f"/api/members/{member['id']}").status_code == 404


def test_delete_missing_member_reports_failure(admin_client):
    response = admin_client.post("/members/9999/delete")
    assert "Failed to delete member" in response.text


def test_add_trainer_with_tags(admin_client):
    response = admin_client.post("/trainers", data={
        "name": "Rocky Balboa",
        "email": "rocky@gymflex.com",
        "phone": "555-777-8888",
        "hireDate": "2024-01-15",
        "specialties": "Boxing, , Endurance ",
        "certifications": "",
        "bio": "",
        "schedule": "",
        "imageUrl": "",
    })
    assert "Trainer added successfully" in response.text
    trainer = [t for t in admin_client.get("/api/trainers").json() if t["name"] == "Rocky Balboa"][0]
    assert trainer["specialties"] == ["Boxing", "Endurance"]
    assert trainer["certifications"] == []

    found = admin_client.get("/trainers", params={"search": "endur"})
    assert "Rocky Balboa" in found.text
    assert "Priya Patel" not in found.text


def test_schedule_day_tabs(admin_client):
    response = admin_client.get("/schedule", params={"day": "Saturday"})
    assert response.status_code == 200
    assert "Power Yoga" in response.text
    assert "Weekend Strength" in response.text
    assert "Boxing Basics" not in response.text
    assert "6:00 PM" not in response.text

    response = admin_client.get("/schedule")
    assert "6:00 PM - 7:00 PM" in response.text
    assert "Marcus Chen" in response.text


def test_schedule_unknown_trainer(admin_client):
    trainer_id = admin_client.get("/api/classes").json()[0]["trainer"]
    admin_client.delete(f"/api/trainers/{trainer_id}")
    response = admin_client.get("/schedule")
    assert "Trainer: Unknown" in response.text


def test_payments_summary_and_lookup(admin_client):
    response = admin_client.get("/payments", params={"status": "Overdue"})
    assert response.status_code == 200
    assert "Michael Brown" in response.text
    assert 'id="total-amount">$29.99<' in response.text
    assert 'id="total-count">1<' in response.text
    assert 'id="average-amount">$29.99<' in response.text


def test_payments_sort_links_toggle(admin_client):
    response = admin_client.get("/payments", params={"sort": "amount", "direction": "asc"})
    assert "sort=amount&amp;direction=desc" in response.text
    assert "sort=date&amp;direction=asc" in response.text


def test_payments_unknown_member(admin_client):
    admin_client.post("/api/payments", json={"memberId": 4242, "amount": 10, "date": "2024-01-01"})
    response = admin_client.get("/payments")
    assert "Unknown Member" in response.text
    assert "Unknown Email" in response.text


def test_not_found_page(admin_client):
    response = admin_client.get("/no-such-page")
    assert response.status_code == 404
    assert "Page not found" in response.text


def test_post_only_page_path_renders_not_found(admin_client):
    # /members/{id} only accepts the edit form submission
    response = admin_client.get("/members/1")
    assert response.status_code == 404
    assert "text/html" in response.headers["content-type"]
    assert "Page not found" in response.text


def test_api_not_found_stays_json(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json()["detail"] == "Not Found"
