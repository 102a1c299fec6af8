"""
Parcel database model.

One row per tracked parcel; the number is assigned by the backend.
"""

from sqlalchemy import Column, Integer, String, Text, Enum
from tracker.app.db.session import Base
from tracker.app.models.parcel_enums import ParcelStatus


class ParcelRecord(Base):
    """
    Parcel table mapping.
    
    Status is stored as its lowercase value ("registered", not "REGISTERED")
    and created_at as RFC3339 text exactly as the caller supplied it.
    """
    __tablename__ = "parcel"
    # AUTOINCREMENT keeps SQLite from reusing the number of a deleted row
    __table_args__ = {"sqlite_autoincrement": True}
    
    number = Column(Integer, primary_key=True, autoincrement=True)
    
    # Ownership - opaque client identifier, no foreign key
    client = Column(Integer, nullable=False, index=True)
    
    status = Column(
        Enum(
            ParcelStatus,
            name="parcel_status",
            native_enum=False,
            length=32,
            values_callable=lambda enum_cls: [member.value for member in enum_cls],
        ),
        default=ParcelStatus.REGISTERED,
        nullable=False,
    )
    address = Column(Text, nullable=False)
    
    # Write-once creation timestamp
    created_at = Column(String(40), nullable=False)
    
    def __repr__(self):
        return f"<ParcelRecord(number={self.number}, client={self.client}, status='{self.status}')>"


parcel_table = ParcelRecord.__table__
