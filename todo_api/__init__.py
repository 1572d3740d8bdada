"""Todo API: a FastAPI CRUD service over a SQLAlchemy-mapped todo table."""

__version__ = "1.0.0"
