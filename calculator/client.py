from dataclasses import asdict, fields
from typing import Optional

import requests
from loguru import logger
from pydantic import ValidationError

from calculator.errors import InvalidInput, TransportError, UnknownInstrument
from calculator.models import LotSizeResponse
from calculator.service import RiskRequest, RiskResult
from settings import settings

RESULT_FIELDS = [f.name for f in fields(RiskResult)]


class RemoteCalculator:
    """
    Same contract as calculate_position_size, computed by the backend.

    One request per call, no retries. Dropping the return value is all the
    cancellation there is: the endpoint has no side effects.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, session=None):
        self.base_url = (base_url or settings.CALCULATOR_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.CALCULATOR_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url}/api/lot-size"

    def calculate(self, request: RiskRequest) -> RiskResult:
        try:
            res = self.session.post(self.url, json=asdict(request), timeout=self.timeout)
        except requests.Timeout as e:
            logger.warning(f"Lot size request timed out after {self.timeout}s: {e}")
            raise TransportError(f"Calculator timed out after {self.timeout}s") from e
        except requests.RequestException as e:
            logger.warning(f"Lot size request failed: {e}")
            raise TransportError(f"Calculator unreachable: {e}") from e

        if res.status_code == 400:
            self._raise_input_error(res)

        if not 200 <= res.status_code < 300:
            raise TransportError(f"Calculator returned HTTP {res.status_code}", status_code=res.status_code)

        try:
            body = LotSizeResponse.model_validate(res.json(), strict=True)
        except (ValidationError, ValueError) as e:
            raise TransportError(f"Malformed calculator response: {e}", status_code=res.status_code) from e

        return RiskResult(**{name: getattr(body, name) for name in RESULT_FIELDS})

    def _raise_input_error(self, res):
        try:
            body = res.json()
        except ValueError:
            body = {}

        detail = body.get("detail") if isinstance(body, dict) else None

        if not isinstance(detail, dict):
            detail = {}

        error = detail.get("error")
        if error == InvalidInput.code:
            raise InvalidInput(detail.get("field", ""), detail.get("message", "Invalid input"))
        if error == UnknownInstrument.code:
            raise UnknownInstrument(detail.get("symbol", ""))

        raise TransportError("Calculator rejected the request", status_code=res.status_code)
