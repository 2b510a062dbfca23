import pandas as pd

def forecast_frame(result):
    rows = [
        ("Monthly_Burn", result.monthly_burn),
        ("Monthly_Inflow", result.monthly_inflow),
        ("Net_Burn", result.net_burn),
        ("Runway_Months", result.runway_months),
        ("Runway_End_Date", result.runway_end_date),
        ("Crunch_Date", result.crunch_date),
        ("Recurring_Items", ", ".join(result.recurring_items)),
    ]
    return pd.DataFrame(rows, columns=["Metric", "Value"])

def actions_frame(actions):
    cols = ["id", "title", "description", "amount", "priority", "action_type", "contact_name", "crunch_date"]
    return pd.DataFrame([a.to_dict() for a in actions], columns=cols)

def chart_frame(chart_data):
    return pd.DataFrame([{"Date": p.date, "Balance": p.balance} for p in chart_data], columns=["Date", "Balance"])

def save_csv(df, path):
    df.to_csv(path, index=False)

def save_excel(tables, path):
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        for name, df in tables.items():
            df.to_excel(writer, sheet_name=name[:31], index=False)
