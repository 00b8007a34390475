"""portfolio_qa.viz.answer_frames

Turns an answer's opaque `data` payload into things Streamlit can render.

- KPIs: top-level numeric fields and a nested `metrics` dict
- Tables: any list of row dicts (topHoldings, sectors, topDividendStocks, ...)
- Charts: `chart: {type, data}` series, plus a bar chart for sector tables (Plotly)

Fallback answers (data.isUnmatched) yield no visuals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

import pandas as pd

# Display order for KPI cards; unknown numeric keys follow in payload order.
KPI_LABELS = {
    "ytdReturn": "YTD Return (%)",
    "benchmarkReturn": "Benchmark Return (%)",
    "excess": "Excess Return (%)",
    "excessReturn": "Excess Return (%)",
    "volatility": "Volatility (%)",
    "beta": "Beta",
    "sharpeRatio": "Sharpe Ratio",
    "maxDrawdown": "Max Drawdown (%)",
    "var95": "VaR 95% (%)",
    "currentYield": "Current Yield (%)",
    "annualIncome": "Annual Income ($)",
    "totalWeight": "Top 10 Weight (%)",
    "avgPE": "Avg P/E",
}


@dataclass
class AnswerVisuals:
    kpis: list[tuple[str, float]] = field(default_factory=list)
    tables: dict[str, pd.DataFrame] = field(default_factory=dict)
    charts: list[Any] = field(default_factory=list)


def _label(key: str) -> str:
    return KPI_LABELS.get(key, key)


def extract_kpis(data: dict[str, Any], max_kpis: int = 6) -> list[tuple[str, float]]:
    flat: dict[str, float] = {}
    for k, v in data.items():
        if isinstance(v, bool):
            continue
        if isinstance(v, (int, float)):
            flat[k] = float(v)
    metrics = data.get("metrics")
    if isinstance(metrics, dict):
        for k, v in metrics.items():
            if isinstance(v, (int, float)) and not isinstance(v, bool):
                flat.setdefault(k, float(v))

    ordered = [k for k in KPI_LABELS if k in flat] + [k for k in flat if k not in KPI_LABELS]
    return [(_label(k), flat[k]) for k in ordered[:max_kpis]]


def extract_tables(data: dict[str, Any]) -> dict[str, pd.DataFrame]:
    tables: dict[str, pd.DataFrame] = {}
    for k, v in data.items():
        if isinstance(v, list) and v and all(isinstance(r, dict) for r in v):
            tables[k] = pd.DataFrame(v)
    return tables


def chart_frame(data: dict[str, Any]) -> Optional[pd.DataFrame]:
    chart = data.get("chart")
    if not isinstance(chart, dict):
        return None
    rows = chart.get("data") or []
    if not rows:
        return None
    return pd.DataFrame(rows)


def render_charts(data: dict[str, Any], title: Optional[str] = None) -> list[Any]:
    """Build Plotly figures for the payload."""
    import plotly.express as px

    figs: list[Any] = []
    df = chart_frame(data)
    if df is not None and len(df.columns) >= 2:
        ctype = str(data["chart"].get("type") or "line").lower()
        x, y = df.columns[0], df.columns[1]
        if ctype == "bar":
            figs.append(px.bar(df, x=x, y=y, title=title))
        else:
            figs.append(px.line(df, x=x, y=y, title=title, markers=True))

    sectors = data.get("sectors")
    if isinstance(sectors, list) and sectors:
        sdf = pd.DataFrame(sectors)
        value_cols = [c for c in ("portfolio", "benchmark") if c in sdf.columns]
        if "name" in sdf.columns and value_cols:
            long = sdf.melt(id_vars="name", value_vars=value_cols, var_name="series", value_name="weight")
            figs.append(px.bar(long, x="name", y="weight", color="series", barmode="group", title="Sector weights (%)"))
    return figs


def build_visuals(answer: Optional[dict[str, Any]], with_charts: bool = True) -> AnswerVisuals:
    if not answer:
        return AnswerVisuals()
    data = answer.get("data")
    if not isinstance(data, dict) or data.get("isUnmatched"):
        return AnswerVisuals()

    tables = extract_tables(data)
    if "chart" in data:
        df = chart_frame(data)
        if df is not None:
            tables["chart"] = df

    return AnswerVisuals(
        kpis=extract_kpis(data),
        tables=tables,
        charts=render_charts(data, answer.get("title")) if with_charts else [],
    )
