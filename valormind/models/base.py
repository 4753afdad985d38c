from sqlalchemy.orm import declarative_base
from sqlalchemy import Column, DateTime, func, Boolean

Base = declarative_base()

class TimestampMixin:
    """Mixin to add created_at and updated_at timestamps to models"""
    created_at = Column(DateTime(timezone=True), default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=func.now(), onupdate=func.now(), nullable=False)
    is_deleted = Column(Boolean, default=False, nullable=False)


def enum_values(enum_cls):
    """Persist enum values ("avatar-therapy") rather than member names"""
    return [member.value for member in enum_cls]
