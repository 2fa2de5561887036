#timelogger/models/base.py
"""
Base class for all ORM models of the project.

Use it as Base when declaring models:
    from timelogger.models.base import Base
"""

from sqlalchemy.orm import declarative_base

Base = declarative_base()
