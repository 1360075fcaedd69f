# interfaces/web.py
"""The single HTML page: task form, task list, and per-task controls.

Every control posts a form and is answered with a 303 redirect back to ``/``,
so the page always renders the store's current state.
"""
from datetime import date
from pathlib import Path
from typing import Optional
import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from application.edit_state import EditState
from application.use_cases import TaskStore
from domain.entities import Priority, TaskDraft
from interfaces.dependencies import get_edit_state, get_store

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def _back_to_page() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


def _render(request: Request, store: TaskStore, edits: EditState, form_open: bool = False,
            draft: Optional[dict] = None, error: Optional[str] = None):
    edits.prune()
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "tasks": store.tasks,
            "pending": store.pending_count(),
            "edits": edits,
            "today": date.today(),
            "priorities": [p.value for p in Priority],
            "form_open": form_open,
            "draft": draft or {"title": "", "description": "", "priority": Priority.MEDIUM.value, "due_date": ""},
            "error": error,
        },
    )


def _parse_priority(raw: str) -> Priority:
    try:
        return Priority(raw)
    except ValueError:
        return Priority.MEDIUM


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    new: bool = False,
    store: TaskStore = Depends(get_store),
    edits: EditState = Depends(get_edit_state),
):
    return _render(request, store, edits, form_open=new)


@router.post("/tasks", response_class=HTMLResponse)
async def add_task(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    priority: str = Form(Priority.MEDIUM.value),
    due_date: str = Form(""),
    store: TaskStore = Depends(get_store),
    edits: EditState = Depends(get_edit_state),
):
    form = {"title": title, "description": description, "priority": priority, "due_date": due_date}
    try:
        due = date.fromisoformat(due_date) if due_date else None
    except ValueError:
        logger.debug(f"Rejecting draft with bad due date {due_date!r}")
        return _render(request, store, edits, form_open=True, draft=form, error="Invalid due date")

    draft = TaskDraft(
        title=title,
        description=description or None,
        priority=_parse_priority(priority),
        due_date=due,
    )
    if not store.add(draft):
        # form stays open with what was typed
        return _render(request, store, edits, form_open=True, draft=form)
    return _back_to_page()


@router.post("/tasks/{task_id}/toggle")
async def toggle_task(task_id: str, store: TaskStore = Depends(get_store)):
    store.toggle_complete(task_id)
    return _back_to_page()


@router.post("/tasks/{task_id}/delete")
async def delete_task(
    task_id: str,
    store: TaskStore = Depends(get_store),
    edits: EditState = Depends(get_edit_state),
):
    store.delete(task_id)
    edits.cancel(task_id)
    return _back_to_page()


@router.post("/tasks/{task_id}/edit")
async def edit_task(task_id: str, edits: EditState = Depends(get_edit_state)):
    edits.toggle(task_id)
    return _back_to_page()


@router.post("/tasks/{task_id}/cancel")
async def cancel_edit(task_id: str, edits: EditState = Depends(get_edit_state)):
    edits.cancel(task_id)
    return _back_to_page()


@router.post("/tasks/{task_id}/save")
async def save_edit(
    task_id: str,
    title: str = Form(""),
    description: str = Form(""),
    edits: EditState = Depends(get_edit_state),
):
    if not edits.is_editing(task_id):
        edits.begin(task_id)
    edits.update(task_id, title=title, description=description)
    edits.commit(task_id)
    return _back_to_page()
