"""
Page Routes - server rendered dashboard pages.

Every page fetches its lists from the services, runs the filter/sort chain
and renders. Failures are caught here, logged, and shown as a notification.
Writes redirect back to the list with the outcome in the query string.
"""
import logging
from typing import Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from auth import get_current_admin
from models import MemberCreate, TrainerCreate
from templating import templates
from service_modules import formatting
from service_modules.listing import ALL, SortConfig
from service_modules.member_service import MemberService, get_member_service
from service_modules.trainer_service import TrainerService, get_trainer_service
from service_modules.schedule_service import ScheduleService, get_schedule_service
from service_modules.payment_service import (
    PaymentService, get_payment_service, summarize, member_name, member_email,
    PAYMENT_SORT_KEYS, DEFAULT_PAYMENT_SORT
)
from service_modules.dashboard_service import DashboardService, get_dashboard_service

logger = logging.getLogger("gym_admin")

router = APIRouter()

MEMBER_STATUSES = ["Active", "Inactive"]
MEMBERSHIP_TYPES = ["Basic", "Standard", "Premium"]
GENDERS = ["Male", "Female", "Other"]
PAYMENT_STATUSES = ["Paid", "Pending", "Overdue"]


# --- HELPERS ---

def login_redirect() -> RedirectResponse:
    return RedirectResponse(url="/login", status_code=302)


def redirect_with_notice(path: str, message: str, level: str = "success") -> RedirectResponse:
    return RedirectResponse(url=f"{path}?{urlencode({'notice': message, 'level': level})}", status_code=303)


def render(request: Request, template: str, user: dict, active: str, status_code: int = 200, **context):
    notices = []
    if request.query_params.get("notice"):
        notices.append({
            "message": request.query_params["notice"],
            "level": request.query_params.get("level", "success"),
        })
    for message in context.pop("errors", []):
        notices.append({"message": message, "level": "error"})

    context.update({"user": user, "active": active, "notices": notices})
    return templates.TemplateResponse(request, template, context, status_code=status_code)


def validation_message(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ()))
    return f"Invalid {field}: {first.get('msg')}" if field else first.get("msg", "Invalid input")


# --- ROOT ---

@router.get("/")
async def index():
    return RedirectResponse(url="/dashboard", status_code=302)


# --- DASHBOARD ---

@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard_page(
    request: Request,
    user: Optional[dict] = Depends(get_current_admin),
    members: MemberService = Depends(get_member_service),
    trainers: TrainerService = Depends(get_trainer_service),
    schedule: ScheduleService = Depends(get_schedule_service),
    payments: PaymentService = Depends(get_payment_service),
    dashboard: DashboardService = Depends(get_dashboard_service)
):
    if not user:
        return login_redirect()

    errors = []
    stats = {"totalMembers": 0, "activeMembers": 0, "totalTrainers": 0, "totalClasses": 0, "recentPayments": 0}
    active_members = []
    try:
        member_list = members.get_members()
        stats = dashboard.get_stats(
            member_list, trainers.get_trainers(), schedule.get_classes(), payments.get_payments()
        )
        active_members = dashboard.active_member_preview(member_list)
    except Exception as e:
        logger.error(f"Error fetching dashboard data: {e}", exc_info=True)
        errors.append("Failed to load dashboard data")

    return render(request, "dashboard.html", user, "dashboard",
                  greeting=formatting.greeting(), stats=stats,
                  active_members=active_members, errors=errors)


# --- MEMBERS ---

@router.get("/members", response_class=HTMLResponse)
async def members_page(
    request: Request,
    search: str = "",
    status: str = ALL,
    user: Optional[dict] = Depends(get_current_admin),
    service: MemberService = Depends(get_member_service)
):
    if not user:
        return login_redirect()

    errors = []
    try:
        members = service.search_members(search, status)
    except Exception as e:
        logger.error(f"Error fetching members: {e}", exc_info=True)
        members = []
        errors.append("Failed to load members")

    return render(request, "members.html", user, "members",
                  members=members, search=search, status=status,
                  statuses=MEMBER_STATUSES, errors=errors)


def _member_form(request: Request, user: dict, form: dict, member_id: Optional[int] = None,
                 errors=None, status_code: int = 200):
    return render(request, "member_form.html", user, "members", status_code=status_code,
                  form=form, member_id=member_id, is_editing=member_id is not None,
                  membership_types=MEMBERSHIP_TYPES, statuses=MEMBER_STATUSES,
                  genders=GENDERS, errors=errors or [])


@router.get("/members/new", response_class=HTMLResponse)
async def new_member_page(request: Request, user: Optional[dict] = Depends(get_current_admin)):
    if not user:
        return login_redirect()
    return _member_form(request, user, formatting.default_member_form())


@router.get("/members/{member_id}/edit", response_class=HTMLResponse)
async def edit_member_page(
    member_id: int,
    request: Request,
    user: Optional[dict] = Depends(get_current_admin),
    service: MemberService = Depends(get_member_service)
):
    if not user:
        return login_redirect()
    try:
        member = service.get_member(member_id)
    except Exception as e:
        logger.error(f"Error fetching member {member_id}: {e}")
        return redirect_with_notice("/members", "Failed to load member", "error")
    return _member_form(request, user, member, member_id)


@router.post("/members")
async def create_member(
    request: Request,
    user: Optional[dict] = Depends(get_current_admin),
    service: MemberService = Depends(get_member_service)
):
    if not user:
        return login_redirect()
    form = dict(await request.form())
    try:
        member = MemberCreate.model_validate(form)
    except ValidationError as e:
        return _member_form(request, user, form, errors=[validation_message(e)], status_code=422)

    try:
        service.create_member(member.model_dump())
    except Exception as e:
        logger.error(f"Error saving member: {e}")
        return redirect_with_notice("/members", "Failed to add member", "error")
    return redirect_with_notice("/members", "Member added successfully")


@router.post("/members/{member_id}")
async def update_member(
    member_id: int,
    request: Request,
    user: Optional[dict] = Depends(get_current_admin),
    service: MemberService = Depends(get_member_service)
):
    if not user:
        return login_redirect()
    form = dict(await request.form())
    try:
        member = MemberCreate.model_validate(form)
    except ValidationError as e:
        return _member_form(request, user, form, member_id, errors=[validation_message(e)], status_code=422)

    try:
        service.update_member(member_id, member.model_dump())
    except Exception as e:
        logger.error(f"Error saving member {member_id}: {e}")
        return redirect_with_notice("/members", "Failed to update member", "error")
    return redirect_with_notice("/members", "Member updated successfully")


@router.post("/members/{member_id}/delete")
async def delete_member(
    member_id: int,
    user: Optional[dict] = Depends(get_current_admin),
    service: MemberService = Depends(get_member_service)
):
    if not user:
        return login_redirect()
    try:
        service.delete_member(member_id)
    except Exception as e:
        logger.error(f"Error deleting member {member_id}: {e}")
        return redirect_with_notice("/members", "Failed to delete member", "error")
    return redirect_with_notice("/members", "Member deleted successfully")


# --- TRAINERS ---

@router.get("/trainers", response_class=HTMLResponse)
async def trainers_page(
    request: Request,
    search: str = "",
    user: Optional[dict] = Depends(get_current_admin),
    service: TrainerService = Depends(get_trainer_service)
):
    if not user:
        return login_redirect()

    errors = []
    try:
        trainers = service.search_trainers(search)
    except Exception as e:
        logger.error(f"Error fetching trainers: {e}", exc_info=True)
        trainers = []
        errors.append("Failed to load trainers")

    return render(request, "trainers.html", user, "trainers",
                  trainers=trainers, search=search, errors=errors)


def _trainer_form_data(form: dict) -> dict:
    data = dict(form)
    data["specialties"] = formatting.parse_tags(form.get("specialties", ""))
    data["certifications"] = formatting.parse_tags(form.get("certifications", ""))
    return data


def _trainer_form(request: Request, user: dict, form: dict, trainer_id: Optional[int] = None,
                  errors=None, status_code: int = 200):
    return render(request, "trainer_form.html", user, "trainers", status_code=status_code,
                  form=form, trainer_id=trainer_id, is_editing=trainer_id is not None,
                  errors=errors or [])


@router.get("/trainers/new", response_class=HTMLResponse)
async def new_trainer_page(request: Request, user: Optional[dict] = Depends(get_current_admin)):
    if not user:
        return login_redirect()
    return _trainer_form(request, user, formatting.default_trainer_form())


@router.get("/trainers/{trainer_id}/edit", response_class=HTMLResponse)
async def edit_trainer_page(
    trainer_id: int,
    request: Request,
    user: Optional[dict] = Depends(get_current_admin),
    service: TrainerService = Depends(get_trainer_service)
):
    if not user:
        return login_redirect()
    try:
        trainer = service.get_trainer(trainer_id)
    except Exception as e:
        logger.error(f"Error fetching trainer {trainer_id}: {e}")
        return redirect_with_notice("/trainers", "Failed to load trainer", "error")
    return _trainer_form(request, user, trainer, trainer_id)


@router.post("/trainers")
async def create_trainer(
    request: Request,
    user: Optional[dict] = Depends(get_current_admin),
    service: TrainerService = Depends(get_trainer_service)
):
    if not user:
        return login_redirect()
    form = _trainer_form_data(await request.form())
    try:
        trainer = TrainerCreate.model_validate(form)
    except ValidationError as e:
        return _trainer_form(request, user, form, errors=[validation_message(e)], status_code=422)

    try:
        service.create_trainer(trainer.model_dump())
    except Exception as e:
        logger.error(f"Error saving trainer: {e}")
        return redirect_with_notice("/trainers", "Failed to add trainer", "error")
    return redirect_with_notice("/trainers", "Trainer added successfully")


@router.post("/trainers/{trainer_id}")
async def update_trainer(
    trainer_id: int,
    request: Request,
    user: Optional[dict] = Depends(get_current_admin),
    service: TrainerService = Depends(get_trainer_service)
):
    if not user:
        return login_redirect()
    form = _trainer_form_data(await request.form())
    try:
        trainer = TrainerCreate.model_validate(form)
    except ValidationError as e:
        return _trainer_form(request, user, form, trainer_id, errors=[validation_message(e)], status_code=422)

    try:
        service.update_trainer(trainer_id, trainer.model_dump())
    except Exception as e:
        logger.error(f"Error saving trainer {trainer_id}: {e}")
        return redirect_with_notice("/trainers", "Failed to update trainer", "error")
    return redirect_with_notice("/trainers", "Trainer updated successfully")


@router.post("/trainers/{trainer_id}/delete")
async def delete_trainer(
    trainer_id: int,
    user: Optional[dict] = Depends(get_current_admin),
    service: TrainerService = Depends(get_trainer_service)
):
    if not user:
        return login_redirect()
    try:
        service.delete_trainer(trainer_id)
    except Exception as e:
        logger.error(f"Error deleting trainer {trainer_id}: {e}")
        return redirect_with_notice("/trainers", "Failed to delete trainer", "error")
    return redirect_with_notice("/trainers", "Trainer deleted successfully")


# --- SCHEDULE ---

@router.get("/schedule", response_class=HTMLResponse)
async def schedule_page(
    request: Request,
    day: str = ALL,
    user: Optional[dict] = Depends(get_current_admin),
    schedule: ScheduleService = Depends(get_schedule_service),
    trainers: TrainerService = Depends(get_trainer_service)
):
    if not user:
        return login_redirect()

    if day != ALL and day not in formatting.WEEKDAY_NAMES:
        day = ALL

    errors = []
    classes, trainer_list = [], []
    try:
        classes = schedule.search_classes(day=day)
        trainer_list = trainers.get_trainers()
    except Exception as e:
        logger.error(f"Error fetching schedule data: {e}", exc_info=True)
        errors.append("Failed to load schedule")

    for c in classes:
        c["trainerName"] = schedule.trainer_name(trainer_list, c["trainer"])

    return render(request, "schedule.html", user, "schedule",
                  classes=classes, selected_day=day, errors=errors)


# --- PAYMENTS ---

@router.get("/payments", response_class=HTMLResponse)
async def payments_page(
    request: Request,
    search: str = "",
    status: str = ALL,
    sort: str = None,
    direction: str = None,
    user: Optional[dict] = Depends(get_current_admin),
    payments: PaymentService = Depends(get_payment_service),
    members: MemberService = Depends(get_member_service)
):
    if not user:
        return login_redirect()

    config = SortConfig.parse(sort, direction, PAYMENT_SORT_KEYS, default=DEFAULT_PAYMENT_SORT)
    errors = []
    rows, member_list = [], []
    try:
        member_list = members.get_members()
        rows = payments.search_payments(member_list, search, status, config)
    except Exception as e:
        logger.error(f"Error fetching payments data: {e}", exc_info=True)
        errors.append("Failed to load payments")

    for p in rows:
        p["memberName"] = member_name(member_list, p["memberId"])
        p["memberEmail"] = member_email(member_list, p["memberId"])

    sort_links = {}
    for key in ("memberId", "amount", "date", "type", "method", "status"):
        nxt = config.toggle(key)
        sort_links[key] = "/payments?" + urlencode({
            "search": search, "status": status, "sort": nxt.key, "direction": nxt.direction,
        })

    return render(request, "payments.html", user, "payments",
                  payments=rows, summary=summarize(rows), search=search, status=status,
                  statuses=PAYMENT_STATUSES, sort=config, sort_links=sort_links, errors=errors)
