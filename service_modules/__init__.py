"""
Services package - one module per gym entity plus the shared list utilities.
"""
from .member_service import MemberService, member_service, get_member_service
from .trainer_service import TrainerService, trainer_service, get_trainer_service
from .schedule_service import ScheduleService, schedule_service, get_schedule_service
from .payment_service import PaymentService, payment_service, get_payment_service
from .dashboard_service import DashboardService, dashboard_service, get_dashboard_service

__all__ = [
    'MemberService',
    'member_service',
    'get_member_service',
    'TrainerService',
    'trainer_service',
    'get_trainer_service',
    'ScheduleService',
    'schedule_service',
    'get_schedule_service',
    'PaymentService',
    'payment_service',
    'get_payment_service',
    'DashboardService',
    'dashboard_service',
    'get_dashboard_service',
]
