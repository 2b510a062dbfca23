import pandas as pd

from forecasting.engine import parse_day

def transactions_frame(transactions):
    cols = ["id", "date", "payee", "description", "amount", "type", "category", "status"]
    df = pd.DataFrame([t.to_dict() for t in transactions], columns=cols)
    df["Day"] = pd.to_datetime(df["date"].map(parse_day), errors="coerce")
    df["Month"] = df["Day"].dt.to_period("M").astype(str)
    return df
