import logging
from typing import List

from fastapi import APIRouter, Depends, Response
from fastapi.responses import PlainTextResponse
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.database import get_session
from todo_api.entity import Todo
from todo_api.errors import APIError
from todo_api.models import CreateTodoModel, TodoModel, UpdateTodoModel

logger = logging.getLogger(__name__)

router = APIRouter()

# asyncpg raises bare OSError subclasses for refused or dropped connections.
DATASTORE_ERRORS = (SQLAlchemyError, OSError)


def internal_error(err: Exception) -> APIError:
    logger.error(f"Datastore error: {err}")
    return APIError.internal(str(err))


async def find_todo(session: AsyncSession, todo_id: int) -> Todo:
    try:
        todo = await session.get(Todo, todo_id)
    except DATASTORE_ERRORS as err:
        raise internal_error(err) from err
    if todo is None:
        raise APIError.not_found()
    return todo


@router.get("/", response_class=PlainTextResponse)
async def hello():
    return "Hello, world!"


@router.get("/todos", response_model=List[TodoModel])
async def list_todos(session: AsyncSession = Depends(get_session)):
    """Return every todo; row order is whatever the database yields."""
    try:
        result = await session.execute(select(Todo))
    except DATASTORE_ERRORS as err:
        raise internal_error(err) from err
    return [TodoModel.model_validate(item) for item in result.scalars().all()]


@router.post("/create_todo", response_class=Response)
async def create_todo(data: CreateTodoModel, session: AsyncSession = Depends(get_session)):
    todo = Todo(todo=data.todo, completed=data.completed)
    session.add(todo)
    try:
        await session.commit()
    except DATASTORE_ERRORS as err:
        raise internal_error(err) from err
    logger.info(f"Created todo {todo.id}")
    return Response()


@router.put("/{todo_id}/update_todo", response_class=Response)
async def update_todo(todo_id: int, data: UpdateTodoModel, session: AsyncSession = Depends(get_session)):
    """Replace both mutable fields of an existing todo."""
    todo = await find_todo(session, todo_id)
    todo.todo = data.todo
    todo.completed = data.completed
    try:
        await session.commit()
    except DATASTORE_ERRORS as err:
        # Includes a row deleted between the lookup and this write.
        raise internal_error(err) from err
    logger.info(f"Updated todo {todo_id}")
    return Response()


@router.delete("/{todo_id}/delete_todo", response_class=Response)
async def delete_todo(todo_id: int, session: AsyncSession = Depends(get_session)):
    todo = await find_todo(session, todo_id)
    try:
        await session.execute(delete(Todo).where(Todo.id == todo.id))
        await session.commit()
    except DATASTORE_ERRORS as err:
        raise internal_error(err) from err
    logger.info(f"Deleted todo {todo_id}")
    return Response()
