"""Expense schemas"""

from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ledger.engine.records import SplitKind


class SplitInput(BaseModel):
    """One participant of a new expense"""

    email: EmailStr
    value: int = Field(..., description="Amount owed for EXACT, percentage for PERCENTAGE")


class ExpenseCreate(BaseModel):
    """Schema for creating an expense"""

    description: str = Field(..., max_length=500, min_length=1)
    amount: int = Field(..., description="Total in minor currency units")
    payer_email: EmailStr
    split_type: SplitKind
    splits: List[SplitInput] = Field(default_factory=list)


class ExpenseSplitResponse(BaseModel):
    """Response schema for one split of an expense"""

    user_id: UUID
    amount: int

    model_config = ConfigDict(from_attributes=True)


class ExpenseResponse(BaseModel):
    """Complete expense response schema"""

    id: UUID
    group_id: UUID
    payer_id: UUID
    description: str
    amount: int
    split_type: SplitKind = Field(..., validation_alias="split_kind")
    splits: List[ExpenseSplitResponse]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
