from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import os
import uvicorn

from auth import get_current_admin
from database import init_db
from route_modules import combined_router
from simple_auth import simple_auth_router
from templating import templates

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("gym_admin")

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")

# Tables and demo data exist before the first request
init_db()

app = FastAPI(title="Gym Admin Dashboard")

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
app.include_router(simple_auth_router)
app.include_router(combined_router)


@app.middleware("http")
async def add_no_cache_header(request, call_next):
    response = await call_next(request)
    # Pages always reflect the latest backend state
    if not request.url.path.startswith("/static"):
        response.headers["Cache-Control"] = "no-cache, no-store, must-revalidate, max-age=0"
        response.headers["Pragma"] = "no-cache"
        response.headers["Expires"] = "0"
    return response


@app.exception_handler(StarletteHTTPException)
async def not_found_page(request: Request, exc: StarletteHTTPException):
    # API clients keep the JSON error body; a page path with only a POST route is still a missing page
    if exc.status_code not in (404, 405) or request.url.path.startswith("/api"):
        return await http_exception_handler(request, exc)
    return templates.TemplateResponse(request, "not_found.html", {
        "user": get_current_admin(request),
    }, status_code=404)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 9007))
    uvicorn.run(app, host="0.0.0.0", port=port)
