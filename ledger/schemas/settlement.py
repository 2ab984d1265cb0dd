"""Settlement schemas"""
from datetime import datetime
from uuid import UUID
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SettlementCreate(BaseModel):
    """Schema for recording a settlement"""
    from_email: EmailStr
    to_email: EmailStr
    amount: int = Field(..., description="Amount in minor currency units")


class SettlementResponse(BaseModel):
    """Recorded settlement"""
    id: UUID
    group_id: UUID
    from_user_id: UUID
    to_user_id: UUID
    amount: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
