from typing import Dict, List, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictFloat, StrictInt

# no "50" -> 50.0 coercion, the calculator rejects strings and bools itself
Number = Union[StrictInt, StrictFloat]


class LotSizeRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    # snake_case for the backend, camelCase for the dashboard form
    symbol: str
    account_balance: Number = Field(validation_alias=AliasChoices("account_balance", "accountBalance"))
    risk_percent: Number = Field(validation_alias=AliasChoices("risk_percent", "riskPercent"))
    stop_loss_pips: Number = Field(validation_alias=AliasChoices("stop_loss_pips", "stopLossPips"))


class LotSizeResponse(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    symbol: str
    lot_size: float
    risk_amount: float
    pip_value_per_lot: float
    mini_lots: float
    micro_lots: float
    units: float
    pip_value_for_size: float
    potential_loss: float

    display: Dict[str, str] = {}
    warnings: List[str] = []


class CurrencyPair(BaseModel):
    value: str
    label: str
    pip_value_per_lot: float


class CalculatorDefaults(BaseModel):
    symbol: str
    account_balance: float
    risk_percent: float
    stop_loss_pips: float
    high_risk_percent: float
    disclaimer: str
