import os
from typing import Optional

from dotenv import load_dotenv

from forecasting.regions import get_region

from .config import build_settings, Settings

def _parse_balance(raw) -> float:
    if raw is None or str(raw).strip() == "":
        return 0.0
    try:
        return float(str(raw).replace(",", "").strip())
    except ValueError as exc:
        raise ValueError(f"FORECAST_BALANCE must be a number, got {raw!r}") from exc

def load_settings(
    input_csv=None,
    output_dir=None,
    region=None,
    balance=None,
    store_dir=None,
    user_key=None,
    require_input: bool = True,
) -> Settings:
    """Explicit arguments win over FORECAST_* environment variables (.env is loaded first)."""
    load_dotenv()
    input_csv = input_csv or os.getenv("FORECAST_INPUT_CSV")
    output_dir = output_dir or os.getenv("FORECAST_OUTPUT_DIR")
    region = region or os.getenv("FORECAST_REGION", "IN")
    balance = balance if balance is not None else os.getenv("FORECAST_BALANCE")
    store_dir = store_dir or os.getenv("FORECAST_STORE_DIR")
    user_key = user_key or os.getenv("FORECAST_USER_KEY", "default")

    if not output_dir:
        raise ValueError("FORECAST_OUTPUT_DIR must be provided")
    if require_input and not input_csv:
        raise ValueError("FORECAST_INPUT_CSV and FORECAST_OUTPUT_DIR must be provided")

    # Fail early on a bad region code
    region = get_region(region).code
    return build_settings(input_csv, output_dir, region, _parse_balance(balance), store_dir, user_key)

def ensure_dirs(s: Settings):
    s.output_dir.mkdir(parents=True, exist_ok=True)
    s.charts_dir.mkdir(parents=True, exist_ok=True)
    s.tables_dir.mkdir(parents=True, exist_ok=True)
