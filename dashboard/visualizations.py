from __future__ import annotations

import html

from dashboard.constants import DAY_LABELS, EMPTY_CELL_COLOR, MOODS, MOOD_TO_INT, mood_meta
from dashboard.theme import get_active_theme


def _active_theme():
    return get_active_theme()[1]


def apply_common_plot_style(fig, title, show_xgrid=True, show_ygrid=True):
    theme = _active_theme()
    fig.update_layout(
        title=title,
        title_font=dict(color=theme["text_main"], size=16, family="Crimson Text"),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color=theme["text_main"], family="IBM Plex Sans"),
        margin=dict(l=40, r=20, t=40, b=30),
        xaxis=dict(
            showgrid=show_xgrid,
            gridcolor=theme["plot_grid"],
            tickfont=dict(color=theme["text_soft"]),
            zeroline=False,
            showline=True,
            linecolor=theme["border"],
            mirror=True,
        ),
        yaxis=dict(
            showgrid=show_ygrid,
            gridcolor=theme["plot_grid"],
            zeroline=False,
            tickfont=dict(color=theme["text_soft"]),
            showline=True,
            linecolor=theme["border"],
            mirror=True,
        ),
    )
    return fig


def heatmap_matrix(columns):
    """Turn week columns of calendar cells into (z, hover_text, x_labels, y_labels)."""
    import numpy as np

    weeks = len(columns)
    z = np.full((7, weeks), np.nan)
    text = [["" for _ in range(weeks)] for _ in range(7)]
    for col, cells in enumerate(columns):
        for row, cell in enumerate(cells):
            entry = cell["entry"]
            label = cell["date"].isoformat()
            if entry:
                mood = entry.get("mood")
                z[row, col] = MOOD_TO_INT.get(mood, np.nan)
                meta = mood_meta(mood)
                text[row][col] = f"{label} • {meta['label']} • productivity {entry.get('productivity')}/10"
            else:
                text[row][col] = f"{label} • No entry"
    x_labels = [cells[0]["date"].strftime("%b %d") for cells in columns]
    y_labels = [cells["date"].strftime("%a") for cells in columns[-1]] if columns else []
    return z, text, x_labels, y_labels


def mood_heatmap(z, hover_text, x_labels, y_labels, title=""):
    """Plotly heatmap with one discrete colour band per mood value."""
    import plotly.graph_objects as go

    n = len(MOODS)
    colorscale = []
    for i, mood in enumerate(MOODS):
        color = mood_meta(mood)["color"]
        colorscale.extend([(i / n, color), ((i + 1) / n - 1e-6, color)])

    fig = go.Figure(
        data=go.Heatmap(
            z=z,
            text=hover_text,
            hoverinfo="text",
            colorscale=colorscale,
            showscale=False,
            zmin=0,
            zmax=n - 1,
            xgap=2,
            ygap=2,
        )
    )
    apply_common_plot_style(fig, title, show_xgrid=False, show_ygrid=False)
    fig.update_layout(margin=dict(l=20, r=20, t=40, b=20))
    fig.update_xaxes(
        tickmode="array",
        tickvals=list(range(len(x_labels))),
        ticktext=x_labels,
        side="top",
        tickfont=dict(size=11),
    )
    fig.update_yaxes(
        tickmode="array",
        tickvals=list(range(len(y_labels))),
        ticktext=y_labels,
        autorange="reversed",
        tickfont=dict(size=10),
    )
    return fig


def dot_chart(values, dates, title, color, height=260):
    import plotly.graph_objects as go

    fig = go.Figure(
        data=go.Scatter(
            x=list(dates),
            y=list(values),
            mode="lines+markers",
            line=dict(color=color, width=2),
            marker=dict(size=8, color=color, line=dict(width=1, color=_active_theme()["plot_marker_line"])),
        )
    )
    apply_common_plot_style(fig, title, show_xgrid=True, show_ygrid=True)
    fig.update_layout(height=height)
    fig.update_yaxes(range=[0, 10.5])
    fig.update_xaxes(tickfont=dict(size=10, color=_active_theme()["text_soft"]))
    return fig


def category_breakdown_chart(breakdown, title="Expense breakdown", height=300):
    import plotly.graph_objects as go

    labels = [row["label"] for row in breakdown]
    fig = go.Figure(
        data=go.Bar(
            x=[row["total"] for row in breakdown],
            y=labels,
            orientation="h",
            marker=dict(color=[row["color"] for row in breakdown]),
            text=[f"{row['percentage']:.1f}%" for row in breakdown],
            textposition="auto",
            hovertemplate="%{y}: $%{x:.2f}<extra></extra>",
        )
    )
    apply_common_plot_style(fig, title, show_xgrid=True, show_ygrid=False)
    fig.update_layout(height=height)
    fig.update_yaxes(categoryorder="array", categoryarray=list(reversed(labels)), automargin=True)
    return fig


def _cell_html(cell, compact=False):
    entry = cell["entry"]
    classes = ["calendar-cell"]
    if cell["is_today"]:
        classes.append("today")
    if cell["is_future"]:
        classes.append("future")
    if not compact and not cell["in_month"]:
        classes.append("outside")
    if entry:
        meta = mood_meta(entry.get("mood"))
        title = html.escape(f"{meta['label']} • {entry.get('productivity')}/10 • {entry.get('task') or ''}")
        body = (
            f"<div class='calendar-mood' style='background:{meta['color']};' title='{title}'>"
            f"{meta['emoji']}</div>"
        )
    else:
        body = f"<div class='calendar-mood empty' style='background:{EMPTY_CELL_COLOR};'></div>"
    return (
        f"<td class='{' '.join(classes)}'>"
        f"<div class='calendar-day'>{cell['date'].day}</div>"
        f"{body}"
        "</td>"
    )


def build_mood_calendar_html(cells, period):
    """Render week/month grids Sunday-first; the rolling 30-day view wraps every 7 cells."""
    if period in {"week", "month"}:
        header_cells = "".join(f"<th>{label}</th>" for label in DAY_LABELS)
        thead = f"<thead><tr>{header_cells}</tr></thead>"
    else:
        thead = ""
    rows = []
    for start in range(0, len(cells), 7):
        chunk = cells[start:start + 7]
        rows.append("<tr>" + "".join(_cell_html(cell, compact=period != "month") for cell in chunk) + "</tr>")
    return (
        "<div class='calendar-month'>"
        "<table class='calendar-table'>"
        f"{thead}"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table>"
        "</div>"
    )


def build_trend_html(colors):
    squares = "".join(
        f"<span class='trend-cell' style='background:{color};'></span>" for color in colors
    )
    return f"<div class='trend-row'>{squares}</div>"


def build_share_bar_html(label, percent, color):
    width = max(0.0, min(100.0, float(percent or 0)))
    return (
        "<div class='share-row'>"
        f"<span class='share-dot' style='background:{color};'></span>"
        f"<div class='share-track'><div class='share-fill' style='width:{width:.1f}%;background:{color};'></div></div>"
        f"<span class='share-label'>{html.escape(label)}</span>"
        "</div>"
    )
