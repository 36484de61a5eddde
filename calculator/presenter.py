from typing import Dict, List

# Defaults the dashboard form resets to
DEFAULT_FORM = {
    "symbol": "EURUSD",
    "account_balance": 10000.0,
    "risk_percent": 1.0,
    "stop_loss_pips": 50.0,
}

DISCLAIMER = (
    "This calculator provides estimates only. Actual results may vary based on broker "
    "spreads, slippage, and market conditions. Always verify with your broker."
)

HIGH_RISK_WARNING = "High risk! Consider reducing to 1-2%"
OVER_ACCOUNT_WARNING = "Risk exceeds 100% of the account balance"
NO_STOP_LOSS_WARNING = "No stop loss set: position size is zero"

MONEY_FIELDS = ("risk_amount", "pip_value_per_lot", "pip_value_for_size", "potential_loss")
LOT_FIELDS = ("lot_size", "mini_lots", "micro_lots")


def round_result(result) -> Dict[str, float]:
    """Display numbers: money and lots to 2 dp, units to whole units."""
    data = {field: round(getattr(result, field), 2) for field in MONEY_FIELDS + LOT_FIELDS}
    data["units"] = round(result.units)
    return data


def format_result(result) -> Dict[str, str]:
    data = {field: f"{getattr(result, field):.2f}" for field in MONEY_FIELDS + LOT_FIELDS}
    data["units"] = f"{result.units:.0f}"
    return data


def risk_warnings(request, high_risk_percent: float = 2.0) -> List[str]:
    warnings = []

    if request.risk_percent > 100:
        warnings.append(OVER_ACCOUNT_WARNING)
    elif request.risk_percent > high_risk_percent:
        warnings.append(HIGH_RISK_WARNING)

    if request.stop_loss_pips == 0:
        warnings.append(NO_STOP_LOSS_WARNING)

    return warnings
