from typing import List

from fastapi import APIRouter, HTTPException
from loguru import logger

from calculator.errors import CalculatorError
from calculator.models import CalculatorDefaults, CurrencyPair, LotSizeRequest, LotSizeResponse
from calculator.pip_values import default_table
from calculator.presenter import DEFAULT_FORM, DISCLAIMER, format_result, risk_warnings
from calculator.service import RiskRequest, calculate_position_size
from settings import settings

router = APIRouter(prefix="/api/lot-size", tags=["Calculator"])


@router.post("", response_model=LotSizeResponse)
def lot_size_api(data: LotSizeRequest):
    request = RiskRequest(
        symbol=data.symbol,
        account_balance=data.account_balance,
        risk_percent=data.risk_percent,
        stop_loss_pips=data.stop_loss_pips,
    )

    try:
        result = calculate_position_size(request, table=default_table())
    except CalculatorError as e:
        logger.warning(f"Rejected lot size request for {data.symbol}: {e}")
        raise HTTPException(status_code=400, detail=e.to_dict())

    logger.info(
        f"Lot size {data.symbol}: balance={request.account_balance} risk={request.risk_percent}% "
        f"sl={request.stop_loss_pips} -> {result.lot_size:.4f} lots"
    )

    return LotSizeResponse(
        **result.as_dict(),
        display=format_result(result),
        warnings=risk_warnings(request, settings.HIGH_RISK_PERCENT),
    )


@router.get("/symbols", response_model=List[CurrencyPair])
def supported_symbols():
    return default_table().pairs()


@router.get("/defaults", response_model=CalculatorDefaults)
def calculator_defaults():
    return {
        **DEFAULT_FORM,
        "high_risk_percent": settings.HIGH_RISK_PERCENT,
        "disclaimer": DISCLAIMER,
    }
