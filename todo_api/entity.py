from sqlalchemy import Boolean, Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Todo(Base):
    """Row of the ``todo`` table. The schema itself is managed outside this service."""

    __tablename__ = "todo"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    todo: Mapped[str] = mapped_column(Text, nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False)

    def __repr__(self):
        return f"Todo(id={self.id!r}, todo={self.todo!r}, completed={self.completed!r})"
