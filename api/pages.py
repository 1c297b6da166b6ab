# HTML-екрани: меню та форми калькуляторів

from datetime import date

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse

from core.config import settings
from core.templates import render
from llm import summarizer
from llm.summarizer import SummarizerError
from models.screen import MENU_ITEMS, Screen
from services import policy_service, tax_service
from services.policy_service import PolicyPeriodValidationError

router = APIRouter()


def _page(screen: Screen, template_name: str, **context) -> HTMLResponse:
    html = render(
        template_name,
        app_title=settings.APP_TITLE,
        screen=screen.value,
        **context,
    )
    return HTMLResponse(html)


def _parse_date(raw: str | None) -> date | None:
    if not raw:
        return None
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


@router.get("/", response_class=HTMLResponse)
def main_menu():
    return _page(Screen.MAIN_MENU, "menu.html", menu_items=MENU_ITEMS)


# --- ÖTV & KDV ---
@router.get("/tax", response_class=HTMLResponse)
def tax_form():
    return _page(Screen.TAX_CALCULATOR, "tax.html", amount="", result=None)


@router.post("/tax", response_class=HTMLResponse)
def tax_submit(amount: str = Form("")):
    result = tax_service.calculate_from_input(amount)
    return _page(Screen.TAX_CALCULATOR, "tax.html", amount=amount, result=result)


# --- Поліс ---
@router.get("/policy", response_class=HTMLResponse)
def policy_form():
    return _page(
        Screen.POLICY_PERIOD_CALCULATOR,
        "policy.html",
        form={"start_date": "", "end_date": "", "total_amount": "", "is_passenger_car": False},
        summary=None,
        error=None,
    )


@router.post("/policy", response_class=HTMLResponse)
def policy_submit(
    start_date: str = Form(""),
    end_date: str = Form(""),
    total_amount: str = Form(""),
    is_passenger_car: str | None = Form(None),
):
    form = {
        "start_date": start_date,
        "end_date": end_date,
        "total_amount": total_amount,
        "is_passenger_car": is_passenger_car is not None,
    }
    summary = None
    error = None
    try:
        start = _parse_date(start_date)
        end = _parse_date(end_date)
        amount = policy_service.validate_policy_input(start, end, total_amount)
        results = policy_service.split_into_quarters(start, end, amount, form["is_passenger_car"])
        summary = policy_service.summarize_periods(results, form["is_passenger_car"])
    except PolicyPeriodValidationError as e:
        error = e.message

    return _page(
        Screen.POLICY_PERIOD_CALCULATOR,
        "policy.html",
        form=form,
        summary=summary,
        error=error,
    )


# --- AI ---
@router.get("/summarize", response_class=HTMLResponse)
def summarize_form():
    return _page(Screen.AI_SUMMARIZER, "summarize.html", text="", result=None, error=None)


@router.post("/summarize", response_class=HTMLResponse)
async def summarize_submit(text: str = Form("")):
    result = None
    error = None
    try:
        result = await summarizer.summarize_text(text)
    except SummarizerError as e:
        error = e.message

    return _page(Screen.AI_SUMMARIZER, "summarize.html", text=text, result=result, error=error)
