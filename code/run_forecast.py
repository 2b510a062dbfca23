#!/usr/bin/env python3
"""
run_forecast.py

Single entrypoint: ledger CSV -> normalize -> forecast -> actions -> reports.

Flow:
- Settings from CLI args, falling back to FORECAST_* variables in .env / env.
- If a store is configured, the user's saved snapshot is loaded and freshly
  imported rows are merged in front of it; the result is saved back.
- Forecast and actions are always recomputed from the full list.

Outputs (under output_dir):
- tables/transactions.csv, tables/forecast.csv, tables/actions.csv,
  tables/balance_path.csv, tables/category_totals.csv, tables/status_totals.csv
- cashflow_forecast.xlsx (one sheet per table)
- charts/balance.png

Usage examples:
  python run_forecast.py --input ledger.csv --output_dir out --region US --balance 15000
  python run_forecast.py --demo --output_dir out
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from analytics.aggregates import category_totals, status_totals
from analytics.charts import plot_balance
from analytics.io import ensure_dirs, load_settings
from analytics.report import actions_frame, chart_frame, forecast_frame, save_csv, save_excel
from analytics.transforms import transactions_frame
from forecasting.actions import format_short_date, generate_actions
from forecasting.engine import calculate_forecast, parse_day
from forecasting.errors import ForecastingError
from forecasting.ledger import demo_snapshot, merge_import
from forecasting.links import action_link, crunch_alert_link
from forecasting.logging_setup import configure_logging
from forecasting.models import Snapshot
from forecasting.normalize import normalize_file
from forecasting.regions import format_money, get_region
from forecasting.store import JsonFileRepository


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Project bank balance and suggest cash actions.")
    ap.add_argument("--input", type=str, help="Ledger CSV to import")
    ap.add_argument("--output_dir", type=str, help="Directory to write outputs")
    ap.add_argument("--region", type=str, choices=["IN", "US"], help="Region (default: IN)")
    ap.add_argument("--balance", type=float, help="Current bank balance")
    ap.add_argument("--store_dir", type=str, help="Directory holding saved snapshots")
    ap.add_argument("--user", type=str, help="Snapshot key (default: default)")
    ap.add_argument("--demo", action="store_true", help="Use the built-in demo ledger")
    ap.add_argument("--log-level", type=str, default=None, help="Logging level (default: INFO)")
    return ap


def run(argv: Optional[List[str]] = None) -> Snapshot:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    s = load_settings(
        input_csv=args.input,
        output_dir=args.output_dir,
        region=args.region,
        balance=args.balance,
        store_dir=args.store_dir,
        user_key=args.user,
        require_input=not args.demo,
    )
    ensure_dirs(s)

    repo = JsonFileRepository(s.store_dir) if s.store_dir else None

    if args.demo:
        snapshot = demo_snapshot()
    else:
        stored = repo.load(s.user_key) if repo else None
        existing = stored.transactions if stored else []
        # --region, then the stored snapshot, then env / default
        region = args.region or (stored.region if stored else s.region)
        imported = []
        if s.input_csv:
            imported = normalize_file(s.input_csv, region)
            print(f"[INFO] Imported {len(imported)} rows from {s.input_csv}")
        snapshot = Snapshot(
            transactions=merge_import(imported, existing),
            balance=s.balance if args.balance is not None or stored is None else stored.balance,
            region=get_region(region).code,
        )

    if repo:
        repo.save(s.user_key, snapshot)

    profile = get_region(snapshot.region)
    forecast = calculate_forecast(snapshot.transactions, snapshot.balance)
    actions = generate_actions(snapshot.transactions, snapshot.balance, snapshot.region)

    tx_df = transactions_frame(snapshot.transactions)
    tables = {
        "Transactions": tx_df.drop(columns=["Day"]),
        "Forecast": forecast_frame(forecast),
        "Actions": actions_frame(actions),
        "Balance_Path": chart_frame(forecast.chart_data),
        "Category_Totals": category_totals(tx_df),
        "Status_Totals": status_totals(tx_df),
    }
    for name, t in tables.items():
        save_csv(t, s.tables_dir / f"{name.lower()}.csv")
    save_excel(tables, s.output_dir / "cashflow_forecast.xlsx")

    plot_balance(forecast.chart_data, s.charts_dir / "balance.png", "Projected Balance")

    print("=" * 60)
    print("CASH FORECAST")
    print("=" * 60)
    print(f"Transactions:   {len(snapshot.transactions)}")
    print(f"Balance:        {format_money(snapshot.balance, profile)}")
    print(f"Monthly burn:   {format_money(forecast.monthly_burn, profile)}")
    if forecast.runway_unbounded:
        print("Runway:         unbounded")
    else:
        print(f"Runway:         {forecast.runway_months} months (until {forecast.runway_end_date})")
    if forecast.crunch_date:
        pretty = format_short_date(parse_day(forecast.crunch_date))
        print(f"Crunch date:    {pretty}")
        print(f"Share alert:    {crunch_alert_link(pretty)}")
    else:
        print("Crunch date:    none")
    print(f"\nActions ({len(actions)}):")
    for a in actions:
        print(f"  [{a.priority}] {a.title}: {a.description}")
        print(f"      {action_link(a)}")
    print(f"\nOutputs written to: {s.output_dir.resolve()}")

    return snapshot


def main() -> None:
    try:
        run()
    except (ForecastingError, ValueError, FileNotFoundError) as e:
        print(f"[ERROR] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
