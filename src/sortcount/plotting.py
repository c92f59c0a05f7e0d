# src/sortcount/plotting.py
from __future__ import annotations

from typing import List

import numpy as np
import plotly.graph_objects as go

from .experiment import ExperimentResult

COLORS = [
    '#4285f4',  # Blue
    '#ea4335',  # Red
    '#34a853',  # Green
    '#fbbc04',  # Yellow
    '#9c27b0',  # Purple
    '#00bcd4',  # Cyan
]
REF_COLOR = '#64748b'


def _apply_layout(fig: go.Figure, title: str, x_title: str) -> None:
    fig.update_layout(
        title=dict(
            text=title,
            font=dict(size=22, color='#1e293b', family="Inter, sans-serif"),
            x=0.5,
        ),
        xaxis_title=x_title,
        yaxis_title="Comparisons",
        template="plotly_white",
        plot_bgcolor='rgba(0,0,0,0)',
        paper_bgcolor='rgba(0,0,0,0)',
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="left", x=0.01),
        margin=dict(l=80, r=40, t=100, b=80),
        height=550,
        font=dict(family="Inter, sans-serif", size=13, color='#374151'),
    )


def counts_figure(result: ExperimentResult) -> go.Figure:
    """
    Per-trial comparison counts for one experiment, with the n*log2(n)
    estimate and the final running average as horizontal references.
    """
    counts = np.asarray(result.stats.counts, dtype=float)
    x = np.arange(counts.size)
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=x, y=counts, mode="markers", name=result.label,
        marker=dict(size=7, color=COLORS[0], line=dict(width=1, color='white')),
        hovertemplate="Trial %{x}<br>Comparisons: %{y}<extra></extra>",
    ))
    fig.add_hline(
        y=result.estimate, line=dict(dash="dot", width=2, color=REF_COLOR),
        annotation_text="n·log2(n)", annotation_position="top left",
    )
    fig.add_hline(
        y=result.stats.average, line=dict(dash="dash", width=2, color=COLORS[1]),
        annotation_text="average", annotation_position="bottom left",
    )

    _apply_layout(fig, f"{result.label} sort (n={result.config.n})", "Trial")
    return fig


def comparison_figure(results: List[ExperimentResult]) -> go.Figure:
    """Box plot of the count distributions of several experiments side by side."""
    fig = go.Figure()
    for i, r in enumerate(results):
        fig.add_trace(go.Box(
            y=r.stats.counts, name=r.label, boxmean=True,
            marker=dict(color=COLORS[i % len(COLORS)]),
        ))

    estimates = {r.estimate for r in results}
    if len(estimates) == 1:
        fig.add_hline(
            y=estimates.pop(), line=dict(dash="dot", width=2, color=REF_COLOR),
            annotation_text="n·log2(n)", annotation_position="top left",
        )

    _apply_layout(fig, "Comparison counts by algorithm", "Algorithm")
    return fig
