def category_totals(df):
    out = df[df["type"] == "OUT"]
    return (
        out.groupby(["Month", "category"])["amount"]
           .sum()
           .reset_index(name="Outflow")
    )

def status_totals(df):
    return (
        df.groupby(["status", "type"])["amount"]
          .sum()
          .reset_index(name="Total")
    )
