import json
import math
from typing import Dict, List, Literal, Optional

from calculator.errors import UnknownInstrument
from settings import settings

UnknownInstrumentPolicy = Literal["error", "defaultValue"]

# Pip value per standard lot (100,000 units), quoted in the account currency.
# No FX conversion: these are approximations, not live rates.
PIP_VALUES: Dict[str, float] = {
    "EURUSD": 10.0,
    "GBPUSD": 10.0,
    "USDJPY": 9.09,
    "AUDUSD": 10.0,
    "USDCAD": 7.58,
    "NZDUSD": 10.0,
    "USDCHF": 10.38,
    "EURGBP": 12.50,
    "GBPJPY": 9.0,
    "EURAUD": 10.0,
    "XAUUSD": 1.0,
}

POLICIES = ("error", "defaultValue")


def _check_pip_value(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number")
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive finite number")
    return float(value)


def pair_label(symbol: str) -> str:
    # EURUSD -> EUR/USD, anything else is shown as-is
    if len(symbol) == 6 and symbol.isalpha():
        return f"{symbol[:3]}/{symbol[3:]}"
    return symbol


class PipValueTable:
    def __init__(
        self,
        values: Optional[Dict[str, float]] = None,
        on_unknown: UnknownInstrumentPolicy = "error",
        default_pip_value: float = 10.0,
    ):
        if on_unknown not in POLICIES:
            raise ValueError(f"on_unknown must be one of {POLICIES}, got {on_unknown!r}")

        source = PIP_VALUES if values is None else values
        self._values = {
            symbol: _check_pip_value(f"pip value for {symbol}", value)
            for symbol, value in source.items()
        }
        self.on_unknown = on_unknown
        self.default_pip_value = _check_pip_value("default_pip_value", default_pip_value)

    def __contains__(self, symbol) -> bool:
        return symbol in self._values

    def __len__(self) -> int:
        return len(self._values)

    def lookup(self, symbol: str) -> float:
        if symbol in self._values:
            return self._values[symbol]

        if self.on_unknown == "defaultValue":
            return self.default_pip_value

        raise UnknownInstrument(symbol)

    def symbols(self) -> List[str]:
        return list(self._values)

    def pairs(self) -> List[dict]:
        return [
            {"value": symbol, "label": pair_label(symbol), "pip_value_per_lot": value}
            for symbol, value in self._values.items()
        ]


def default_table() -> PipValueTable:
    values = json.loads(settings.PIP_VALUES_JSON) if settings.PIP_VALUES_JSON else None
    if values is not None and not isinstance(values, dict):
        raise ValueError(f"PIP_VALUES_JSON must be a JSON object of symbol -> pip value, got {type(values).__name__}")

    return PipValueTable(
        values=values,
        on_unknown=settings.UNKNOWN_INSTRUMENT_POLICY,
        default_pip_value=settings.DEFAULT_PIP_VALUE,
    )
