"""SQLAlchemy models"""
from ledger.models.user import User
from ledger.models.group import Group
from ledger.models.group_member import GroupMember
from ledger.models.expense import Expense
from ledger.models.expense_split import ExpenseSplit
from ledger.models.settlement import Settlement

__all__ = ["User", "Group", "GroupMember", "Expense", "ExpenseSplit", "Settlement"]
