import logging
import math
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from ..services.errors import PersistenceError, ValidationError
from ..services.health import HealthService
from ..services.marks import MarksService
from .marks import get_marks_service, marks_doc_to_out

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()

TEXT_FIELDS = ("roll_number", "name", "grade", "section", "subject")


def filter_by_roll_number(records: list, term: str) -> list:
    """Substring match on the roll number; an empty term keeps everything."""
    if not term:
        return records
    return [r for r in records if term in str(r.roll_number)]


def validate_new_record(form: dict) -> dict:
    missing = [f for f in TEXT_FIELDS if not form.get(f, "").strip()]
    if missing:
        raise ValidationError("All fields are required")
    try:
        marks = float(form.get("marks", ""))
    except ValueError:
        raise ValidationError("Marks must be a number")
    if not math.isfinite(marks):
        raise ValidationError("Marks must be a number")
    if marks < 0:
        raise ValidationError("Marks cannot be negative")
    record = {f: form[f].strip() for f in TEXT_FIELDS}
    record["marks"] = marks
    return record


def _is_connected() -> bool:
    try:
        return HealthService.check_health().get("success", False)
    except Exception:
        logger.exception("while checking health")
        return False


def _render(
    request: Request,
    service: MarksService,
    search: str = "",
    form: dict | None = None,
    form_error: str | None = None,
    status_code: int = 200,
):
    error = None
    records = []
    try:
        records = [marks_doc_to_out(d) for d in service.get_marks_data()]
    except PersistenceError as e:
        error = str(e)
    context = {
        "records": filter_by_roll_number(records, search),
        "search": search,
        "error": error,
        "connected": _is_connected(),
        "form": form or {},
        "form_error": form_error,
    }
    return templates.TemplateResponse(request, "marks.html", context, status_code=status_code)


@router.get("", response_class=HTMLResponse)
def marks_page(
    request: Request,
    search: str = "",
    service: MarksService = Depends(get_marks_service),
):
    return _render(request, service, search.strip())


@router.post("", response_class=HTMLResponse)
def add_marks_record(
    request: Request,
    roll_number: str = Form("", alias="rollNumber"),
    name: str = Form(""),
    grade: str = Form(""),
    section: str = Form(""),
    subject: str = Form(""),
    marks: str = Form(""),
    service: MarksService = Depends(get_marks_service),
):
    form = {
        "roll_number": roll_number,
        "name": name,
        "grade": grade,
        "section": section,
        "subject": subject,
        "marks": marks,
    }
    try:
        record = validate_new_record(form)
        service.add_marks(**record)
    except ValidationError as e:
        return _render(request, service, form=form, form_error=str(e), status_code=400)
    except PersistenceError as e:
        return _render(request, service, form=form, form_error=str(e), status_code=500)
    # Redirect so the table is re-read from the store.
    return RedirectResponse(url=request.url.path, status_code=303)
