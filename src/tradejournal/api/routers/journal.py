"""Journal entry endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from tradejournal.api.deps import get_current_user, get_journal_service
from tradejournal.api.schemas import (
    JournalEntryCreateRequest,
    JournalEntryUpdateRequest,
    JournalEntryResponse,
    JournalPageResponse,
)
from tradejournal.domain.models import User
from tradejournal.services import JournalService

router = APIRouter(prefix="/journal", tags=["journal"])


@router.get("", response_model=JournalPageResponse)
def list_entries(
    ticker: Optional[str] = Query(None, description="Only entries for this ticker"),
    offset: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1, le=500),
    user: User = Depends(get_current_user),
    service: JournalService = Depends(get_journal_service),
) -> JournalPageResponse:
    """Entries newest first; pass offset + limit of the last page to display more."""
    page = service.list_entries(user.user_id, ticker=ticker, offset=offset, limit=limit)
    return JournalPageResponse(
        entries=[JournalEntryResponse.model_validate(e) for e in page.entries],
        total=page.total,
        offset=page.offset,
        limit=page.limit,
        has_more=page.has_more,
    )


@router.post("", response_model=JournalEntryResponse, status_code=status.HTTP_201_CREATED)
def add_entry(
    data: JournalEntryCreateRequest,
    user: User = Depends(get_current_user),
    service: JournalService = Depends(get_journal_service),
) -> JournalEntryResponse:
    entry = service.add_entry(user.user_id, data.ticker, data.content)
    return JournalEntryResponse.model_validate(entry)


@router.patch("/{entry_id}", response_model=JournalEntryResponse)
def update_entry(
    entry_id: str,
    data: JournalEntryUpdateRequest,
    user: User = Depends(get_current_user),
    service: JournalService = Depends(get_journal_service),
) -> JournalEntryResponse:
    """Replace an entry's content."""
    entry = service.update_entry(user.user_id, entry_id, data.content)
    return JournalEntryResponse.model_validate(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_entry(
    entry_id: str,
    user: User = Depends(get_current_user),
    service: JournalService = Depends(get_journal_service),
) -> Response:
    service.delete_entry(user.user_id, entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
