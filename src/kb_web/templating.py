"""Jinja2 environment shared by the page router and the error handlers."""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from src.kb_common.usd import format_amount, format_fixed

TEMPLATES_DIR = Path(__file__).with_name("templates")

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["amount"] = format_amount
templates.env.filters["fixed"] = format_fixed

# Every page reflects live exchange state
NO_STORE_HEADERS = {"Cache-Control": "no-store"}
