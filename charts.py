# charts.py: monthly income vs. spending chart

import pandas as pd
import plotly.graph_objects as go

from formatting import month_label


def income_vs_expense_monthly(summary: pd.DataFrame):
    """
    Grouped bar chart of Income vs Expenses per month.
    Expects the frame built by aggregator.monthly_summary.
    """
    labels = [month_label(m) for m in summary["Month"]]

    fig = go.Figure()
    fig.add_trace(go.Bar(x=labels, y=summary["Income"], name="Income", marker_color="#28a745"))
    fig.add_trace(go.Bar(x=labels, y=summary["Expense"], name="Spending", marker_color="#dc3545"))

    fig.update_layout(barmode="group", title="Income vs Spending by Month", height=400, yaxis_title="HUF")
    return fig
