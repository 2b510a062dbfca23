import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

def plot_balance(chart_data, outpath, title):
    df = pd.DataFrame([{"Date": p.date, "Balance": p.balance} for p in chart_data])
    fig, ax = plt.subplots(figsize=(8, 4))
    if not df.empty:
        df["Date"] = pd.to_datetime(df["Date"])
        ax.step(df["Date"], df["Balance"], where="post", marker="o")
    ax.axhline(0, color="red", linewidth=1, linestyle="--")
    ax.set_title(title)
    ax.set_ylabel("Balance")
    fig.autofmt_xdate()
    fig.tight_layout()
    fig.savefig(outpath)
    plt.close(fig)
