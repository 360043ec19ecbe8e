from sqlalchemy import Column, String, DateTime, Date, Integer, Float, Text
from sqlalchemy.sql import func
from app.database import Base


class WorkSession(Base):
    __tablename__ = "works"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Refers to drivers.id; only resolved by the join when listing, so a
    # session outlives its driver and just drops out of the list
    driver_id = Column(Integer, nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    machine = Column(String(100), index=True)

    # Wall-clock "HH:MM"
    start_time = Column(String(5))
    end_time = Column(String(5))

    odometer_start = Column(Float)
    odometer_end = Column(Float)
    description = Column(Text)
    location = Column(String(255))

    # Derived on every write
    total_hours = Column(Float, nullable=True)
    total_km = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
