"""Database seeding script (one group, four members, a few expenses)"""
import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import ledger modules
sys.path.append(str(Path(__file__).parent.parent))

from sqlalchemy import select
from ledger.core.security import create_access_token
from ledger.database import AsyncSessionLocal, create_tables, engine
from ledger.engine.records import SplitKind
from ledger.models.group import Group
from ledger.models.group_member import GroupMember
from ledger.models.user import User
from ledger.repositories.user_repository import UserRepository
from ledger.schemas.expense import ExpenseCreate, SplitInput
from ledger.services.expense_service import ExpenseService
from ledger.services.sql_ledger_store import SqlLedgerStore


USERS = [
    {"email": "alice@example.com", "full_name": "Alice"},
    {"email": "bob@example.com", "full_name": "Bob"},
    {"email": "carol@example.com", "full_name": "Carol"},
    {"email": "dave@example.com", "full_name": "Dave"},
]

GROUP_NAME = "Lisbon trip"


async def seed_users(session) -> dict:
    """Create the seed users, skipping those that already exist"""
    users = {}

    for user_data in USERS:
        user = await UserRepository.get_by_email(session, user_data["email"])

        if user:
            print(f"  User '{user_data['email']}' already exists, skipping...")
        else:
            user = await UserRepository.create(
                session,
                User(email=user_data["email"], full_name=user_data["full_name"], is_active=True),
            )
            print(f"  Created user '{user_data['email']}'")

        users[user.email] = user

    return users


async def seed_group(session, users: dict) -> tuple:
    """
    Create the seed group with every seed user as a member.

    Returns:
        (group, created); created is False when the group already existed
    """
    result = await session.execute(select(Group).where(Group.name == GROUP_NAME))
    group = result.scalar_one_or_none()
    if group:
        print(f"  Group '{GROUP_NAME}' already exists, skipping...")
        return group, False

    group = Group(name=GROUP_NAME)
    session.add(group)
    await session.flush()

    for user in users.values():
        session.add(GroupMember(group_id=group.id, user_id=user.id))
    await session.flush()

    print(f"  Created group '{GROUP_NAME}' with {len(users)} members")
    return group, True


async def seed_expenses(session, users: dict, group: Group) -> None:
    """Record a few expenses through the expense service"""
    store = SqlLedgerStore(session)
    actor = users["alice@example.com"]

    expenses = [
        ExpenseCreate(
            description="Dinner",
            amount=10000,
            payer_email="alice@example.com",
            split_type=SplitKind.EQUAL,
            splits=[SplitInput(email=email, value=1) for email in users],
        ),
        ExpenseCreate(
            description="Taxi",
            amount=2500,
            payer_email="bob@example.com",
            split_type=SplitKind.EXACT,
            splits=[
                SplitInput(email="bob@example.com", value=1000),
                SplitInput(email="carol@example.com", value=1500),
            ],
        ),
        ExpenseCreate(
            description="Museum tickets",
            amount=4999,
            payer_email="dave@example.com",
            split_type=SplitKind.PERCENTAGE,
            splits=[
                SplitInput(email="dave@example.com", value=50),
                SplitInput(email="carol@example.com", value=50),
            ],
        ),
    ]

    for expense_data in expenses:
        expense = await ExpenseService.add_expense(store, actor.id, group.id, expense_data)
        print(f"  Recorded '{expense.description}' ({expense.amount}) as {expense.id}")


async def main():
    """Main function to run seeding"""
    print("Seeding database...\n")

    await create_tables()

    async with AsyncSessionLocal() as session:
        users = await seed_users(session)
        group, created = await seed_group(session, users)
        await session.commit()
        if created:
            await seed_expenses(session, users, group)
        else:
            print("  Group already seeded, skipping expenses...")

    print(f"\nGroup ID: {group.id}")
    for email, user in users.items():
        print(f"  {email}: {create_access_token(user.id)}")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
