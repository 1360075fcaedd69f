from fastapi import Request

from application.edit_state import EditState
from application.use_cases import TaskStore


async def get_store(request: Request) -> TaskStore:
    return request.app.state.store


async def get_edit_state(request: Request) -> EditState:
    return request.app.state.edit_state
