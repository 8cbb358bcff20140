import uuid
from sqlalchemy import Column, String, Date, DateTime, Boolean, Numeric, Text, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from shared.core.database import Base


class Tenant(Base):
    """A lease record binding a named occupant to a space for a date range."""
    __tablename__ = "tenants"

    tenant_id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    space_id = Column(UUID(as_uuid=True), ForeignKey(
        "spaces.space_id"), nullable=False, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(200), nullable=False)
    phone_number = Column(String(32))
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    rent_amount = Column(Numeric(12, 2), default=0, nullable=False)
    security_deposit = Column(Numeric(12, 2), default=0, nullable=False)
    notes = Column(Text)
    # status and is_deleted move together: "deleted" <=> is_deleted
    status = Column(String(16), default="active", nullable=False)
    is_deleted = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    space = relationship("Space", back_populates="tenants")
