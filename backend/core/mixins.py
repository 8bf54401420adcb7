from sqlalchemy import Boolean, Column, DateTime
from sqlalchemy.sql import func


class TimestampMixin:
    created_at = Column(DateTime, default=func.now(), nullable=False)
    updated_at = Column(DateTime, default=func.now(),
                        onupdate=func.now(), nullable=False)


class ActiveMixin:
    """Flag for records that can be hidden without being deleted"""
    active = Column(Boolean, default=True, nullable=False)
