from __future__ import annotations  # Scorecard export package

from .pdf import generate_report_pdf

__all__ = ["generate_report_pdf"]
