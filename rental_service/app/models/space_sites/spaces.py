from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy import Boolean, Column, String, Integer, Text, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
import uuid

from shared.core.database import Base


class Space(Base):
    __tablename__ = "spaces"

    space_id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    host_id = Column(UUID(as_uuid=True), ForeignKey(
        "users.user_id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    space_type = Column(String(50), nullable=False)
    capacity = Column(Integer, nullable=False)
    street_address = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    zip_code = Column(String(20), nullable=False)
    country = Column(String(100), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    is_deleted = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    tenants = relationship("Tenant", back_populates="space")
