"""
Login and logout for the admin dashboard.
"""
from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse, RedirectResponse
from typing import Optional

from auth import COOKIE_NAME, authenticate, create_access_token, get_current_admin
from templating import templates

simple_auth_router = APIRouter()


# --- LOGIN PAGE ---
@simple_auth_router.get("/login", response_class=HTMLResponse)
async def show_login(request: Request, user: Optional[dict] = Depends(get_current_admin)):
    if user:
        return RedirectResponse(url="/dashboard", status_code=302)
    return templates.TemplateResponse(request, "login.html", {"error": None, "username": ""})

# --- LOGIN POST ---
@simple_auth_router.post("/login")
async def do_login(request: Request):
    form = await request.form()
    username = form.get("username")
    password = form.get("password")

    user = authenticate(username, password)
    if not user:
        return templates.TemplateResponse(request, "login.html", {
            "error": "Invalid username or password",
            "username": username or "",
        }, status_code=401)

    token = create_access_token({"sub": user["username"], "name": user["name"]})
    response = RedirectResponse(url="/dashboard", status_code=302)
    response.set_cookie(key=COOKIE_NAME, value=token, httponly=True, samesite="lax")
    return response

# --- LOGOUT ---
@simple_auth_router.get("/logout")
async def logout():
    response = RedirectResponse(url="/login", status_code=302)
    response.delete_cookie(COOKIE_NAME)
    return response
