"""Trade recording and history endpoints."""

from fastapi import APIRouter, Depends, status

from tradejournal.api.deps import get_current_user, get_trade_service
from tradejournal.api.schemas import TradeCreateRequest, TradeResponse, TradeListResponse
from tradejournal.domain.models import User
from tradejournal.services import TradeCreate, TradeService

router = APIRouter(prefix="/trades", tags=["trades"])


@router.get("", response_model=TradeListResponse)
def list_trades(
    user: User = Depends(get_current_user),
    service: TradeService = Depends(get_trade_service),
) -> TradeListResponse:
    """List all of the user's trades, oldest first."""
    trades = service.list_trades(user.user_id)
    return TradeListResponse(
        trades=[TradeResponse.model_validate(t) for t in trades],
        total=len(trades),
    )


@router.post("", response_model=TradeResponse, status_code=status.HTTP_201_CREATED)
def record_trade(
    data: TradeCreateRequest,
    user: User = Depends(get_current_user),
    service: TradeService = Depends(get_trade_service),
) -> TradeResponse:
    """Record a BUY or SELL."""
    trade = service.record_trade(
        user.user_id,
        TradeCreate(
            ticker=data.ticker,
            side=data.side,
            shares=data.shares,
            price=data.price,
            traded_at=data.traded_at,
        ),
    )
    return TradeResponse.model_validate(trade)


@router.get("/{ticker}/history", response_model=TradeListResponse)
def trade_history(
    ticker: str,
    user: User = Depends(get_current_user),
    service: TradeService = Depends(get_trade_service),
) -> TradeListResponse:
    """Trade history for one ticker, oldest first."""
    trades = service.trade_history(user.user_id, ticker)
    return TradeListResponse(
        trades=[TradeResponse.model_validate(t) for t in trades],
        total=len(trades),
    )
