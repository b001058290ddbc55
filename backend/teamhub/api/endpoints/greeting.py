"""Greeting page."""
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


@router.get("/hi/{name}", response_class=HTMLResponse)
async def greeting(request: Request, name: str) -> HTMLResponse:
    return templates.TemplateResponse(request, "hello.html", {"name": name})
