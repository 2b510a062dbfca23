"""Tabular reports, charts and settings for run_forecast.py."""
