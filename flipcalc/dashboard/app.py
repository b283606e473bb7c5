"""Plotly Dash application — deal editor and reports."""

import sys
from pathlib import Path

# `python flipcalc/dashboard/app.py` only puts this directory on sys.path.
# Without the project root, `flipcalc.*` is unimportable from an uninstalled
# checkout, in the reloader's child process too.
_project_root = str(Path(__file__).resolve().parent.parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import logging

from dash import Dash, html, page_container

from flipcalc.config import settings

logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title="Flip Analyzer",
)

app.layout = html.Div([
    html.Nav([
        html.Div([
            html.H1("Flip Analyzer", style={"fontSize": "1.5rem", "margin": "0"}),
            html.Span("Buy, renovate, then sell or rent",
                      style={"fontSize": "0.9rem", "opacity": "0.8"}),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "1200px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style={
        "backgroundColor": "#1a1a2e",
        "color": "white",
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    html.Div(
        page_container,
        style={"maxWidth": "1200px", "margin": "0 auto", "padding": "0 1rem"},
    ),

    html.Footer(
        "Estimates only. Not financial or tax advice.",
        style={"textAlign": "center", "color": "#888", "fontSize": "0.8rem", "margin": "3rem 0 1rem"},
    ),
])


if __name__ == "__main__":
    app.run(debug=settings.debug, port=8050)
