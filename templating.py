import os
from fastapi.templating import Jinja2Templates

from service_modules import formatting

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)

templates.env.filters["time12"] = formatting.format_time
templates.env.filters["currency"] = formatting.format_currency
templates.env.filters["date"] = formatting.format_date
templates.env.filters["short_day"] = formatting.short_day
templates.env.globals["WEEKDAYS"] = formatting.WEEKDAYS
templates.env.globals["enrollment_percentage"] = formatting.enrollment_percentage
templates.env.globals["enrollment_level"] = formatting.enrollment_level
