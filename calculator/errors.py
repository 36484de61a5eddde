from typing import List, Optional

FIELD_LABELS = {
    "account_balance": "Account balance",
    "risk_percent": "Risk percent",
    "stop_loss_pips": "Stop loss pips",
}

# dashboard form spelling -> backend spelling
FIELD_ALIASES = {
    "accountBalance": "account_balance",
    "riskPercent": "risk_percent",
    "stopLossPips": "stop_loss_pips",
}


class CalculatorError(ValueError):
    """Bad calculator input. Subclasses ValueError so routers can keep mapping it to 400."""

    code = "calculator_error"

    def to_dict(self) -> dict:
        return {"error": self.code, "message": str(self)}


class InvalidInput(CalculatorError):
    code = "invalid_input"

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        return {"error": self.code, "field": self.field, "message": str(self)}


class UnknownInstrument(CalculatorError):
    code = "unknown_instrument"

    def __init__(self, symbol: str):
        super().__init__(f"Unsupported symbol: {symbol}")
        self.symbol = symbol

    def to_dict(self) -> dict:
        return {"error": self.code, "symbol": self.symbol, "message": str(self)}


class TransportError(RuntimeError):
    """Remote calculator unreachable or answered with something we can't use."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def invalid_input_from(errors: List[dict]) -> InvalidInput:
    """First pydantic request error as an InvalidInput, worded like the calculator's own checks."""
    first = errors[0] if errors else {}
    loc = [part for part in first.get("loc", ()) if part != "body"]

    field = loc[0] if loc and isinstance(loc[0], str) else "body"
    field = FIELD_ALIASES.get(field, field)
    label = FIELD_LABELS.get(field)

    if first.get("type") == "missing":
        message = f"{label or field} is required"
    elif label:
        message = f"{label} must be a number"
    else:
        message = f"{field}: {first.get('msg', 'invalid value')}"

    return InvalidInput(field, message)
