import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .config import settings
from .engine import (
    BmiInputError,
    BmiResult,
    ErrorKind,
    compute_bmi_imperial_height,
    compute_bmi_metric,
    parse_measurement,
)
from .exceptions import (
    BmiValidationError,
    bmi_validation_error_handler,
    request_validation_error_handler,
)
from .logging_config import setup_logging
from .rules import BMI_CATEGORIES
from .schemas import BmiResponse, ErrorResponse, ImperialInput, MetricInput
from .state import FormState, normalize_mode

setup_logging()
logger = logging.getLogger(__name__)

# directory of this file: .../bmicalc
BASE_DIR = Path(__file__).resolve().parent

app = FastAPI(title=settings.app_title)

app.add_exception_handler(BmiValidationError, bmi_validation_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_error_handler)

# static files under /static
app.mount(
    "/static",
    StaticFiles(directory=BASE_DIR / "static"),
    name="static",
)

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


def _render_form(request: Request, state: FormState) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": settings.app_title,
            "state": state,
        },
    )


def _previous_result(bmi: str, category: str) -> Optional[BmiResult]:
    """Rebuild the result the page was showing from its hidden fields."""
    if not bmi or category not in BMI_CATEGORIES:
        return None
    try:
        value = parse_measurement(bmi, ErrorKind.INVALID_HEIGHT)
    except BmiInputError:
        return None
    if not value > 0:
        return None
    return BmiResult(bmi=f"{value:.1f}", category=category)


@app.get("/", response_class=HTMLResponse)
async def read_form(request: Request, mode: Optional[str] = Query(None)):
    """
    Empty calculator form; ?mode=imperial switches height to feet + inches
    """
    state = FormState(mode=normalize_mode(mode, settings.default_mode))
    return _render_form(request, state)


@app.post("/", response_class=HTMLResponse)
async def submit_form(
    request: Request,
    mode: str = Form(""),
    height: str = Form(""),
    height_inches: str = Form(""),
    weight: str = Form(""),
    last_bmi: str = Form(""),
    last_category: str = Form(""),
):
    """
    Calculate button. Missing fields arrive as "" so the engine reports
    them instead of the framework.
    """
    state = FormState(
        mode=normalize_mode(mode, settings.default_mode),
        height=height,
        height_inches=height_inches,
        weight=weight,
        result=_previous_result(last_bmi, last_category),
    )
    outcome = state.calculate()
    if outcome.ok:
        logger.info(
            "BMI calculated (%s): %s %s",
            state.mode, outcome.result.bmi, outcome.result.category,
        )
    state = state.after(outcome, settings.clear_result_on_error)
    return _render_form(request, state)


@app.post(
    "/api/bmi/metric",
    response_model=BmiResponse,
    responses={422: {"model": ErrorResponse}},
)
async def api_bmi_metric(payload: MetricInput):
    """
    JSON endpoint, height in cm:
    - input: {"height_cm": "170", "weight_kg": "70"}
    - output: {"bmi": "24.2", "category": "Normal"}
    """
    outcome = compute_bmi_metric(payload.height_cm, payload.weight_kg)
    if not outcome.ok:
        raise BmiValidationError.from_outcome(outcome)
    return BmiResponse(bmi=outcome.result.bmi, category=outcome.result.category)


@app.post(
    "/api/bmi/imperial",
    response_model=BmiResponse,
    responses={422: {"model": ErrorResponse}},
)
async def api_bmi_imperial(payload: ImperialInput):
    """
    JSON endpoint, height in feet + inches, weight in kg
    """
    outcome = compute_bmi_imperial_height(
        payload.height_feet, payload.height_inches, payload.weight_kg
    )
    if not outcome.ok:
        raise BmiValidationError.from_outcome(outcome)
    return BmiResponse(bmi=outcome.result.bmi, category=outcome.result.category)


@app.get("/health")
async def health():
    return {"status": "ok"}
