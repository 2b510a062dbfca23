from dataclasses import dataclass
from pathlib import Path
from typing import Optional

@dataclass(frozen=True)
class Settings:
    input_csv: Optional[Path]
    output_dir: Path
    charts_dir: Path
    tables_dir: Path
    region: str
    balance: float
    store_dir: Optional[Path]
    user_key: str

def build_settings(
    input_csv: Optional[str],
    output_dir: str,
    region: str = "IN",
    balance: float = 0.0,
    store_dir: Optional[str] = None,
    user_key: str = "default",
) -> Settings:
    out = Path(output_dir)
    return Settings(
        input_csv=Path(input_csv) if input_csv else None,
        output_dir=out,
        charts_dir=out / "charts",
        tables_dir=out / "tables",
        region=region.strip().upper(),
        balance=float(balance),
        store_dir=Path(store_dir) if store_dir else None,
        user_key=user_key,
    )
