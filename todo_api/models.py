from pydantic import BaseModel, ConfigDict


class TodoModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    todo: str
    completed: bool


class CreateTodoModel(BaseModel):
    todo: str
    completed: bool


class UpdateTodoModel(BaseModel):
    todo: str
    completed: bool
