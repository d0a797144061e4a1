"""Balance pages: two HTML routes sharing one fetch/aggregate routine.

GET /            single-tenant: credentials and stake from Settings
GET /{username}  multi-tenant: credentials and stake from the account store

An unknown username raises UserNotFoundError before any exchange call;
the app-level handler renders the not-found page.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from config.settings import Settings
from src.kb_accounts.application.service import AccountResolverService
from src.kb_accounts.infrastructure.env_source import credentials_from_settings
from src.kb_balance.application.service import BalanceApplicationService
from src.kb_balance.domain.models import BalanceReport
from src.kb_web.api.dependencies import (
    get_account_resolver,
    get_balance_service,
    get_settings,
)
from src.kb_web.templating import NO_STORE_HEADERS, templates

router = APIRouter(tags=["pages"])


def _render_report(
    request: Request, report: BalanceReport, username: str | None = None
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "report.html",
        {"report": report, "username": username},
        headers=NO_STORE_HEADERS,
    )


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    app_settings: Annotated[Settings, Depends(get_settings)],
    balances: Annotated[BalanceApplicationService, Depends(get_balance_service)],
) -> HTMLResponse:
    report = await balances.build_report(
        credentials_from_settings(app_settings), app_settings.INITIAL_STAKE
    )
    return _render_report(request, report)


@router.get("/{username}", response_class=HTMLResponse)
async def user_page(
    username: str,
    request: Request,
    resolver: Annotated[AccountResolverService, Depends(get_account_resolver)],
    balances: Annotated[BalanceApplicationService, Depends(get_balance_service)],
) -> HTMLResponse:
    account = await resolver.resolve(username)
    report = await balances.build_report(account.credentials(), account.initial_stake)
    return _render_report(request, report, username=account.username)
