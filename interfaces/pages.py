import os

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)
router = APIRouter()

ENDPOINTS = [
    ("GET", "/api/health", "Health check"),
    ("GET", "/api/tasks", "Get all tasks"),
    ("POST", "/api/tasks", "Create new task"),
    ("GET", "/api/tasks/{id}", "Get task by ID"),
    ("PUT", "/api/tasks/{id}", "Update task"),
    ("DELETE", "/api/tasks/{id}", "Delete task"),
]


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Serves the API documentation page."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"title": request.app.title, "version": request.app.version, "endpoints": ENDPOINTS},
    )
