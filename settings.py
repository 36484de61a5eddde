import os


class Settings:
    # "error" | "defaultValue"
    UNKNOWN_INSTRUMENT_POLICY: str = os.getenv("UNKNOWN_INSTRUMENT_POLICY", "error")
    DEFAULT_PIP_VALUE: float = float(os.getenv("DEFAULT_PIP_VALUE", "10"))
    # JSON object, e.g. '{"EURUSD": 10, "XAUUSD": 1}' replaces the built-in table
    PIP_VALUES_JSON: str = os.getenv("PIP_VALUES_JSON", "")

    HIGH_RISK_PERCENT: float = float(os.getenv("HIGH_RISK_PERCENT", "2"))

    CALCULATOR_API_URL: str = os.getenv("CALCULATOR_API_URL", "http://127.0.0.1:8000")
    CALCULATOR_TIMEOUT_SECONDS: float = float(os.getenv("CALCULATOR_TIMEOUT_SECONDS", "5"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
