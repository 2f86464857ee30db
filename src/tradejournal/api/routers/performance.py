"""Performance table and realized P/L endpoints."""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from tradejournal.api.deps import get_current_user, get_performance_service
from tradejournal.api.schemas import PerformanceResponse, RealizedPnlResponse
from tradejournal.core.exceptions import ValidationError
from tradejournal.core.timezone import parse_datetime_eastern
from tradejournal.domain.models import User
from tradejournal.services import PerformanceService

router = APIRouter(prefix="/performance", tags=["performance"])


def _parse_as_of(as_of: Optional[str]) -> Optional[datetime]:
    if not as_of:
        return None
    try:
        return parse_datetime_eastern(as_of)
    except (ValueError, OverflowError):
        raise ValidationError(f"Invalid as_of timestamp: {as_of!r}") from None


@router.get("", response_model=PerformanceResponse)
def get_performance(
    as_of: Optional[str] = Query(None, description="Evaluation time (US/Eastern when naive)"),
    user: User = Depends(get_current_user),
    service: PerformanceService = Depends(get_performance_service),
) -> PerformanceResponse:
    """Open positions with live prices plus year-to-date realized P/L."""
    view = service.get_performance(user.user_id, _parse_as_of(as_of))
    return PerformanceResponse.model_validate(view)


@router.get("/realized", response_model=RealizedPnlResponse)
def get_realized(
    as_of: Optional[str] = Query(None, description="Evaluation time (US/Eastern when naive)"),
    user: User = Depends(get_current_user),
    service: PerformanceService = Depends(get_performance_service),
) -> RealizedPnlResponse:
    view = service.realized_pnl(user.user_id, _parse_as_of(as_of))
    return RealizedPnlResponse.model_validate(view)
