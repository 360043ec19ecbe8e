from app.models.driver import Driver, DEFAULT_STATUS
from app.models.work import WorkSession

__all__ = [
    "Driver",
    "DEFAULT_STATUS",
    "WorkSession",
]
