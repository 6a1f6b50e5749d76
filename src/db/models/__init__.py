# SQLAlchemy models
from .base import Base
from .progress import ProgressSnapshotRow

__all__ = [
    "Base",
    "ProgressSnapshotRow",
]
