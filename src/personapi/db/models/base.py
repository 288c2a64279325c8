# Shared SQLAlchemy declarative base
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
