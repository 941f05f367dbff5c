"""Report output."""

from manualcheck.ui.report import render_json, render_text

__all__ = ["render_json", "render_text"]
