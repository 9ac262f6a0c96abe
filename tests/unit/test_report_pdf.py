from datetime import datetime

from session_reports import generate_report_pdf
import session_reports.pdf as pdf_mod


def test_pdf_bytes_for_report(sample_report, job_config):
    payload = generate_report_pdf(sample_report, job_config, generated=datetime(2026, 1, 5, 9, 30))
    assert isinstance(payload, bytes)
    assert payload.startswith(b"%PDF")


def test_pdf_without_config_and_with_unicode_text(sample_report, monkeypatch):
    monkeypatch.setattr(pdf_mod, "DEJAVU_SANS", "/nonexistent/font.ttf")
    report = sample_report.model_copy(update={"summary": "Strong — “clear” reasoning • concise", "weaknesses": []})
    payload = generate_report_pdf(report)
    assert payload.startswith(b"%PDF")


def test_score_color_bands():
    assert pdf_mod._score_color(95) == pdf_mod.RECOMMENDATION_COLORS["Strong Hire"]
    assert pdf_mod._score_color(60) == pdf_mod.RECOMMENDATION_COLORS["Hire"]
    assert pdf_mod._score_color(40) == pdf_mod.RECOMMENDATION_COLORS["Weak Hire"]
    assert pdf_mod._score_color(0) == pdf_mod.RECOMMENDATION_COLORS["No Hire"]
