# src/sortcount/report.py
from __future__ import annotations

import importlib.resources as pkg_resources
from typing import Any, Dict, List, Optional

import plotly.io as pio
from jinja2 import BaseLoader, Environment
from markupsafe import escape

from .experiment import ExperimentResult
from .plotting import comparison_figure, counts_figure


def load_template_text() -> str:
    """Load the Jinja2 report template shipped inside the package."""
    tmpl = pkg_resources.files("sortcount").joinpath("templates/report.html.j2")
    return tmpl.read_text(encoding="utf-8")


def fig_to_div(fig) -> str:
    # plotly.js comes from the CDN tag in the template
    return pio.to_html(fig, include_plotlyjs=False, full_html=False, default_width="100%")


def summary_rows(results: List[ExperimentResult]) -> List[Dict[str, Any]]:
    rows = []
    for r in results:
        ci = r.ci
        rows.append({
            "algorithm": r.label,
            "n": r.config.n,
            "trials": r.stats.trials,
            "estimate": round(r.estimate),
            "min": r.stats.minimum,
            "average": r.stats.average,
            "max": r.stats.maximum,
            "ci_lower": ci.lower,
            "ci_upper": ci.upper,
        })
    return rows


def build_report_html(
    results: List[ExperimentResult],
    title: str = "Comparison Count Report",
    notes: Optional[str] = None,
) -> str:
    """
    Render experiment results as a standalone HTML page: a summary table and
    one counts figure per experiment, plus a box plot when there are several.
    The page is returned as a string.
    """
    if not results:
        raise ValueError("results must contain at least one ExperimentResult.")

    env = Environment(loader=BaseLoader(), autoescape=True)
    tpl = env.from_string(load_template_text())

    figures = {r.label: fig_to_div(counts_figure(r)) for r in results}
    overview_div = fig_to_div(comparison_figure(results)) if len(results) > 1 else ""

    return tpl.render(
        title=escape(title),
        notes=escape(notes) if notes else None,
        rows=summary_rows(results),
        figures=figures,
        overview_div=overview_div,
    )
