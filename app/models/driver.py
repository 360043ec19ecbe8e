from sqlalchemy import Column, String, DateTime, Integer, Text
from sqlalchemy.sql import func
from app.database import Base

DEFAULT_STATUS = "active"


class Driver(Base):
    __tablename__ = "drivers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    phone = Column(String(50))
    address = Column(Text)

    # Licence and identity
    license_no = Column(String(100))
    license_expiry = Column(String(50))
    aadhaar = Column(String(50))  # National ID, stored as submitted

    # Path under the upload directory, e.g. uploads/1700000000000-photo.jpg
    profile_photo = Column(String(500), nullable=True)

    # Free text; "active" unless the client says otherwise
    status = Column(String(50), nullable=False, default=DEFAULT_STATUS)
    assigned_vehicle = Column(String(100))

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), server_default=func.now())
