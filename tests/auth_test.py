import os
from datetime import timedelta

from auth import (
    ADMIN_USERNAME, authenticate, create_access_token, get_password_hash, verify_password,
)

ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


def test_password_hash_round_trip():
    hashed = get_password_hash("s3cret")
    assert hashed != "s3cret"
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)


def test_authenticate():
    user = authenticate(ADMIN_USERNAME, ADMIN_PASSWORD)
    assert user["username"] == ADMIN_USERNAME
    assert authenticate(ADMIN_USERNAME, "wrong") is None
    assert authenticate("someone-else", ADMIN_PASSWORD) is None
    assert authenticate("", "") is None


def test_login_page(client):
    response = client.get("/login")
    assert response.status_code == 200
    assert "Sign in" in response.text


def test_login_rejects_bad_credentials(client):
    response = client.post("/login", data={"username": ADMIN_USERNAME, "password": "nope"})
    assert response.status_code == 401
    assert "Invalid username or password" in response.text
    assert "access_token" not in response.cookies


def test_login_and_logout(client):
    response = client.post("/login", data={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD},
                           follow_redirects=False)
    assert response.status_code == 302
    assert response.headers["location"] == "/dashboard"
    assert client.get("/dashboard", follow_redirects=False).status_code == 200

    # Already signed in: the login page forwards to the dashboard
    assert client.get("/login", follow_redirects=False).status_code == 302

    client.get("/logout")
    assert client.get("/dashboard", follow_redirects=False).status_code == 302


def test_expired_token_is_rejected(client):
    token = create_access_token({"sub": ADMIN_USERNAME}, expires_delta=timedelta(minutes=-1))
    client.cookies.set("access_token", token)
    assert client.get("/dashboard", follow_redirects=False).status_code == 302


def test_tampered_token_is_rejected(client):
    client.cookies.set("access_token", "not-a-jwt")
    assert client.get("/dashboard", follow_redirects=False).status_code == 302
