"""Expense split model"""
import uuid
from sqlalchemy import BigInteger, Column, ForeignKey, Integer, UniqueConstraint, CheckConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from ledger.database import Base


class ExpenseSplit(Base):
    """Amount one user owes for one expense"""

    __tablename__ = "expense_splits"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    expense_id = Column(UUID(as_uuid=True), ForeignKey("expenses.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(BigInteger, nullable=False)
    position = Column(Integer, nullable=False)

    # Constraints
    __table_args__ = (
        UniqueConstraint('expense_id', 'user_id', name='uq_expense_split_user'),
        CheckConstraint('amount >= 0', name='check_split_amount_non_negative'),
    )

    # Relationships
    expense = relationship("Expense", back_populates="splits")
    user = relationship("User")

    def __repr__(self) -> str:
        return f"<ExpenseSplit(expense_id={self.expense_id}, user_id={self.user_id}, amount={self.amount})>"
