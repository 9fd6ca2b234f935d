"""/income and /expenses - ledger entry CRUD and category summaries

Both resources share one shape, so a single router factory serves them.
"""

import uuid
import logging
from typing import List, Type
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from finance_gateway.api.v1.schemas import CategoryTotalSchema, EntryCreate, EntryResponse, EntryUpdate
from finance_gateway.api.dependencies import get_current_user, get_request_id
from finance_gateway.infrastructure.database.session import get_db
from finance_gateway.infrastructure.database.repositories import EntryModel, EntryRepository
from finance_gateway.infrastructure.database.models import User
from finance_gateway.infrastructure.observability.metrics import record_ledger_mutation
from finance_gateway.domain.summaries import summarize_by_category
from finance_gateway.utils.money_utils import round_cents
from finance_gateway.domain.exceptions import EntryNotFoundError


def to_entry_response(entry: EntryModel) -> EntryResponse:
    return EntryResponse(
        id=str(entry.id),
        title=entry.title,
        amount=entry.amount,
        category=entry.category,
        entry_date=entry.entry_date,
        note=entry.note,
        created_at=entry.created_at.isoformat(),
    )


def _parse_entry_id(entry_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(entry_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid entry ID format")


def build_entry_router(model: Type[EntryModel], kind: str) -> APIRouter:
    """
    Create CRUD routes for one ledger model.

    Args:
        model: Income or Expense ORM class
        kind: Label used in metrics and messages ("income" | "expense")
    """
    router = APIRouter()

    @router.post("", response_model=EntryResponse, status_code=201)
    def create_entry(
        request_body: EntryCreate,
        request: Request,
        user: User = Depends(get_current_user),
        db: Session = Depends(get_db),
    ):
        request_id = get_request_id(request)
        try:
            entry = EntryRepository(db, model).create_entry(
                user_id=user.id,
                title=request_body.title,
                amount=request_body.amount,
                category=request_body.category,
                entry_date=request_body.entry_date,
                note=request_body.note,
            )
            db.commit()
            db.refresh(entry)
        except Exception as e:
            db.rollback()
            logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
            raise HTTPException(status_code=500, detail="Internal server error")

        record_ledger_mutation(kind, "create")
        return to_entry_response(entry)

    @router.get("", response_model=List[EntryResponse])
    def list_entries(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
        """All entries for the caller, most recent first"""
        entries = EntryRepository(db, model).list_for_user(user.id)
        return [to_entry_response(e) for e in entries]

    @router.get("/summary", response_model=List[CategoryTotalSchema])
    def summarize_entries(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
        """Totals per category for the dashboard pie chart"""
        ledger = EntryRepository(db, model).ledger_entries_for_user(user.id)
        return [
            CategoryTotalSchema(category=c.category, total=round_cents(c.total), count=c.count)
            for c in summarize_by_category(ledger)
        ]

    @router.put("/{entry_id}", response_model=EntryResponse)
    def update_entry(
        entry_id: str,
        request_body: EntryUpdate,
        request: Request,
        user: User = Depends(get_current_user),
        db: Session = Depends(get_db),
    ):
        entry_uuid = _parse_entry_id(entry_id)
        # Explicit nulls only clear the optional note
        changes = {
            name: value
            for name, value in request_body.model_dump(exclude_unset=True).items()
            if value is not None or name == "note"
        }

        try:
            entry = EntryRepository(db, model).update_entry(user.id, entry_uuid, changes)
            db.commit()
            db.refresh(entry)
        except EntryNotFoundError:
            db.rollback()
            raise HTTPException(status_code=404, detail=f"{kind.capitalize()} entry not found")

        logging.info(f"Updated {kind} entry", extra={"request_id": get_request_id(request), "entry_id": entry_id})
        record_ledger_mutation(kind, "update")
        return to_entry_response(entry)

    @router.delete("/{entry_id}", status_code=204)
    def delete_entry(
        entry_id: str,
        request: Request,
        user: User = Depends(get_current_user),
        db: Session = Depends(get_db),
    ):
        entry_uuid = _parse_entry_id(entry_id)

        try:
            EntryRepository(db, model).delete_entry(user.id, entry_uuid)
            db.commit()
        except EntryNotFoundError:
            db.rollback()
            raise HTTPException(status_code=404, detail=f"{kind.capitalize()} entry not found")

        logging.info(f"Deleted {kind} entry", extra={"request_id": get_request_id(request), "entry_id": entry_id})
        record_ledger_mutation(kind, "delete")
        return Response(status_code=204)

    return router
