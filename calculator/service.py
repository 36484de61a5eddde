import math
from dataclasses import asdict, dataclass
from typing import Optional

from calculator.errors import FIELD_LABELS, InvalidInput
from calculator.pip_values import PipValueTable, default_table
from calculator.presenter import round_result

STANDARD_LOT_UNITS = 100_000
MINI_LOTS_PER_LOT = 10
MICRO_LOTS_PER_LOT = 100


@dataclass(frozen=True)
class RiskRequest:
    symbol: str
    account_balance: float
    risk_percent: float
    stop_loss_pips: float


@dataclass(frozen=True)
class RiskResult:
    # full precision, rounding belongs to calculator.presenter
    symbol: str
    pip_value_per_lot: float
    risk_amount: float
    lot_size: float
    mini_lots: float
    micro_lots: float
    units: float
    pip_value_for_size: float
    potential_loss: float

    def as_dict(self) -> dict:
        return asdict(self)


def _validate(field: str, value) -> float:
    label = FIELD_LABELS[field]

    # bool is an int subclass, but True pips is not a stop loss
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(field, f"{label} must be a number")

    try:
        number = float(value)
    except OverflowError:
        raise InvalidInput(field, f"{label} is too large")

    if not math.isfinite(number):
        raise InvalidInput(field, f"{label} must be finite")

    if number < 0:
        raise InvalidInput(field, f"{label} must be >= 0")

    return number


def _check_range(result: RiskResult, stop_loss_pips: float) -> RiskResult:
    # float overflow or subnormal precision loss would break potential_loss == risk_amount
    if not math.isfinite(result.risk_amount):
        raise InvalidInput("account_balance", "Risk amount is out of range")

    if not math.isfinite(result.lot_size):
        raise InvalidInput("stop_loss_pips", "Stop loss pips is too small for this risk amount")

    values = (result.mini_lots, result.micro_lots, result.units, result.pip_value_for_size, result.potential_loss)
    if not all(math.isfinite(v) for v in values):
        raise InvalidInput("account_balance", "Position size is out of range")

    if stop_loss_pips > 0 and not math.isclose(result.potential_loss, result.risk_amount, rel_tol=1e-9):
        raise InvalidInput("account_balance", "Risk amount is too small to size precisely")

    return result


def calculate_position_size(
    request: RiskRequest,
    table: Optional[PipValueTable] = None,
) -> RiskResult:
    """
    Lot size = (balance * risk%) / (stop loss pips * pip value per lot)

    A zero stop loss yields a zero size instead of dividing by zero.
    """
    account_balance = _validate("account_balance", request.account_balance)
    risk_percent = _validate("risk_percent", request.risk_percent)
    stop_loss_pips = _validate("stop_loss_pips", request.stop_loss_pips)

    if table is None:
        table = default_table()
    pip_value_per_lot = table.lookup(request.symbol)

    risk_amount = account_balance * (risk_percent / 100)

    if stop_loss_pips == 0:
        lot_size = 0.0
    else:
        lot_size = risk_amount / (stop_loss_pips * pip_value_per_lot)

    result = RiskResult(
        symbol=request.symbol,
        pip_value_per_lot=pip_value_per_lot,
        risk_amount=risk_amount,
        lot_size=lot_size,
        mini_lots=lot_size * MINI_LOTS_PER_LOT,
        micro_lots=lot_size * MICRO_LOTS_PER_LOT,
        units=lot_size * STANDARD_LOT_UNITS,
        pip_value_for_size=pip_value_per_lot * lot_size,
        potential_loss=stop_loss_pips * pip_value_per_lot * lot_size,
    )

    return _check_range(result, stop_loss_pips)


def calculate_lot_size(symbol, account_balance, risk_percent, stop_loss_pips, table=None):
    # rounded for display; use calculate_position_size for chained math
    result = calculate_position_size(
        RiskRequest(
            symbol=symbol,
            account_balance=account_balance,
            risk_percent=risk_percent,
            stop_loss_pips=stop_loss_pips,
        ),
        table=table,
    )
    return round_result(result)
