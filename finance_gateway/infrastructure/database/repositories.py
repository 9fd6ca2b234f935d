"""Data access layer for users and ledger entries"""

import uuid
from datetime import date
from typing import Any, Dict, List, Optional, Type, Union
from sqlalchemy import func
from sqlalchemy.orm import Session
from finance_gateway.infrastructure.database.models import User, Income, Expense
from finance_gateway.domain.models import LedgerEntry
from finance_gateway.domain.exceptions import DuplicateUserError, EntryNotFoundError

EntryModel = Union[Income, Expense]

UPDATABLE_FIELDS = ("title", "amount", "category", "entry_date", "note")


class UserRepository:
    """Repository for registered users"""

    def __init__(self, db: Session):
        self.db = db

    def create_user(self, email: str, name: str, password_hash: str) -> User:
        """Persist a new user; emails are stored lower-cased"""
        email = email.strip().lower()
        if self.get_by_email(email) is not None:
            raise DuplicateUserError(f"Email {email} is already registered")

        db_user = User(email=email, name=name, password_hash=password_hash)
        self.db.add(db_user)
        self.db.flush()  # Get ID without committing
        return db_user

    def get_by_email(self, email: str) -> Optional[User]:
        return (
            self.db.query(User)
            .filter(User.email == email.strip().lower())
            .first()
        )

    def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()


class EntryRepository:
    """Repository for income or expense entries, selected by ORM model"""

    def __init__(self, db: Session, model: Type[EntryModel]):
        self.db = db
        self.model = model

    def create_entry(
        self,
        user_id: uuid.UUID,
        title: str,
        amount: float,
        category: str,
        entry_date: date,
        note: Optional[str] = None,
    ) -> EntryModel:
        """Persist a ledger entry for a user"""
        db_entry = self.model(
            user_id=user_id,
            title=title,
            amount=amount,
            category=category,
            entry_date=entry_date,
            note=note,
        )
        self.db.add(db_entry)
        self.db.flush()
        return db_entry

    def list_for_user(self, user_id: uuid.UUID) -> List[EntryModel]:
        """Entries for a user, most recent entry date first"""
        return (
            self.db.query(self.model)
            .filter(self.model.user_id == user_id)
            .order_by(self.model.entry_date.desc(), self.model.created_at.desc())
            .all()
        )

    def get_for_user(self, user_id: uuid.UUID, entry_id: uuid.UUID) -> Optional[EntryModel]:
        """Fetch one entry, only if it belongs to the user"""
        return (
            self.db.query(self.model)
            .filter(self.model.id == entry_id, self.model.user_id == user_id)
            .first()
        )

    def update_entry(self, user_id: uuid.UUID, entry_id: uuid.UUID, changes: Dict[str, Any]) -> EntryModel:
        """
        Apply a partial update.

        Raises:
            EntryNotFoundError: Unknown id or entry owned by another user
        """
        db_entry = self.get_for_user(user_id, entry_id)
        if db_entry is None:
            raise EntryNotFoundError(f"{self.model.__name__} {entry_id} not found")

        for name, value in changes.items():
            if name in UPDATABLE_FIELDS:
                setattr(db_entry, name, value)

        self.db.flush()
        return db_entry

    def delete_entry(self, user_id: uuid.UUID, entry_id: uuid.UUID) -> None:
        """
        Raises:
            EntryNotFoundError: Unknown id or entry owned by another user
        """
        db_entry = self.get_for_user(user_id, entry_id)
        if db_entry is None:
            raise EntryNotFoundError(f"{self.model.__name__} {entry_id} not found")

        self.db.delete(db_entry)
        self.db.flush()

    def total_for_user(self, user_id: uuid.UUID) -> float:
        """Sum of all entry amounts for a user (0.0 when none)"""
        total = (
            self.db.query(func.coalesce(func.sum(self.model.amount), 0.0))
            .filter(self.model.user_id == user_id)
            .scalar()
        )
        return float(total)

    def ledger_entries_for_user(self, user_id: uuid.UUID) -> List[LedgerEntry]:
        """Entries converted to domain objects for aggregation"""
        return [
            LedgerEntry(
                title=e.title,
                amount=e.amount,
                category=e.category,
                entry_date=e.entry_date,
            )
            for e in self.list_for_user(user_id)
        ]
