# interfaces/api.py
from fastapi import APIRouter, HTTPException, Depends, status
from schemas.task import TaskCreate, TaskUpdate, TaskResponse
from application.edit_state import EditState
from application.use_cases import TaskStore
from domain.entities import TaskDraft
from interfaces.dependencies import get_edit_state, get_store
from typing import List
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/tasks", response_model=List[TaskResponse])
async def get_all_tasks(store: TaskStore = Depends(get_store)):
    return [TaskResponse.from_task(task) for task in store.tasks]


@router.get("/tasks/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    task = store.get_task(task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return TaskResponse.from_task(task)


@router.post("/tasks", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(task: TaskCreate, store: TaskStore = Depends(get_store)):
    draft = TaskDraft(
        title=task.title,
        description=task.description,
        priority=task.priority,
        due_date=task.due_date
    )
    created_task = store.add(draft)
    if not created_task:
        raise HTTPException(status_code=400, detail="Title must not be empty")
    return TaskResponse.from_task(created_task)


@router.put("/tasks/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: str,
    task: TaskUpdate,
    store: TaskStore = Depends(get_store),
    edits: EditState = Depends(get_edit_state),
):
    updated_task = store.save_edit(task_id, task.title, task.description)
    if not updated_task:
        raise HTTPException(status_code=404, detail="Task not found")
    # drop any page edit buffer still holding the old values
    edits.cancel(task_id)
    return TaskResponse.from_task(updated_task)


@router.put("/tasks/{task_id}/toggle-complete", response_model=TaskResponse)
async def toggle_task_completion(task_id: str, store: TaskStore = Depends(get_store)):
    updated_task = store.toggle_complete(task_id)
    if not updated_task:
        raise HTTPException(status_code=404, detail="Task not found")
    return TaskResponse.from_task(updated_task)


@router.delete("/tasks/{task_id}")
async def delete_task(
    task_id: str,
    store: TaskStore = Depends(get_store),
    edits: EditState = Depends(get_edit_state),
):
    if not store.delete(task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    edits.cancel(task_id)
    return {"message": "Task deleted"}
