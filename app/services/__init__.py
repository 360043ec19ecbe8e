from app.services.driver_registry import DriverRegistry
from app.services.work_log import WorkLog

__all__ = ["DriverRegistry", "WorkLog"]
