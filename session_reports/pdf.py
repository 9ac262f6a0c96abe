from __future__ import annotations  # Styled PDF rendering for screening scorecards

import os
from datetime import datetime
from typing import Any, List, Optional, Sequence, Tuple

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from screening.models import EvaluationMetric, FinalReport, JobConfig


DEJAVU_SANS = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"  # System font
DEJAVU_SANS_BOLD = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"  # System font

ACCENT = (79, 70, 229)  # Palette accent
TEXT = (30, 41, 59)  # Primary text color
MUTED = (100, 116, 139)  # Secondary text color
RULE = (226, 232, 240)  # Divider color
SOFT_ACCENT_BG = (238, 242, 255)  # Highlight background

RECOMMENDATION_COLORS = {
    "Strong Hire": (22, 163, 74),
    "Hire": (37, 99, 235),
    "Weak Hire": (217, 119, 6),
    "No Hire": (220, 38, 38),
}


def _effective_width(pdf: FPDF) -> float:  # Compute effective page width
    return float(pdf.w) - float(pdf.l_margin) - float(pdf.r_margin)


def _score_color(score: int) -> Tuple[int, int, int]:
    if score >= 80:
        return RECOMMENDATION_COLORS["Strong Hire"]
    if score >= 60:
        return RECOMMENDATION_COLORS["Hire"]
    if score >= 40:
        return RECOMMENDATION_COLORS["Weak Hire"]
    return RECOMMENDATION_COLORS["No Hire"]


class ScorecardPDF(FPDF):  # PDF with custom header/footer styling
    def __init__(self, *args, header_title: str = "Candidate Scorecard", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.header_title = header_title
        self._font_regular = "Helvetica"
        self._font_bold = "Helvetica"
        self._supports_unicode = False

    def use_unicode_font(self) -> None:
        self.add_font("DejaVu", "", DEJAVU_SANS)
        self.add_font("DejaVu", "B", DEJAVU_SANS_BOLD)
        self._font_regular = "DejaVu"
        self._font_bold = "DejaVu"
        self._supports_unicode = True

    def prepare_text(self, text: Any) -> str:  # Sanitize text for non-unicode fonts
        value = "" if text is None else str(text)
        if self._supports_unicode:
            return value
        cleaned = value.replace("•", "-").replace("’", "'").replace("–", "-").replace("—", "-")
        return cleaned.encode("latin-1", "ignore").decode("latin-1")

    def header(self) -> None:  # Render header banner on the first page, a rule on later ones
        if self.page_no() == 1:
            self.set_fill_color(*ACCENT)
            self.rect(0, 0, self.w, 22, style="F")
            self.set_text_color(255, 255, 255)
            self.set_font(self._font_bold, "B", 16)
            self.set_xy(self.l_margin, 7)
            self.cell(0, 8, self.prepare_text(self.header_title))
            self.set_y(28)
        else:
            self.set_text_color(*MUTED)
            self.set_font(self._font_bold, "B", 11)
            self.set_xy(self.l_margin, 8)
            self.cell(0, 6, self.prepare_text(self.header_title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            self.set_draw_color(*ACCENT)
            self.set_line_width(0.4)
            self.line(self.l_margin, self.get_y() + 1, self.w - self.r_margin, self.get_y() + 1)
            self.ln(5)
        self.set_text_color(*TEXT)

    def footer(self) -> None:  # Render footer with pagination
        self.set_y(-12)
        self.set_draw_color(*RULE)
        self.set_line_width(0.2)
        self.line(self.l_margin, self.get_y(), self.w - self.r_margin, self.get_y())
        self.set_text_color(*MUTED)
        self.set_font(self._font_regular, "", 9)
        self.cell(0, 10, f"Page {self.page_no()}/{{nb}}", align="R")


def _section_title(pdf: ScorecardPDF, title: str) -> None:  # Render styled section title
    pdf.ln(2)
    pdf.set_text_color(*TEXT)
    pdf.set_x(pdf.l_margin)
    pdf.set_font(pdf._font_bold, "B", 13)
    pdf.cell(0, 9, pdf.prepare_text(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
    pdf.set_draw_color(*RULE)
    pdf.set_line_width(0.2)
    y = pdf.get_y()
    pdf.line(pdf.l_margin, y, pdf.l_margin + _effective_width(pdf), y)
    pdf.ln(2)


def _paragraph(pdf: ScorecardPDF, text: str, *, size: int = 11, color: Tuple[int, int, int] = TEXT) -> None:
    pdf.set_x(pdf.l_margin)
    pdf.set_text_color(*color)
    pdf.set_font(pdf._font_regular, "", size)
    pdf.multi_cell(_effective_width(pdf), 6, pdf.prepare_text(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)


def _render_overview(pdf: ScorecardPDF, report: FinalReport, config: Optional[JobConfig], generated: datetime) -> None:
    rows: List[Tuple[str, str]] = []
    if config is not None:
        rows.append(("Role", config.role))
        rows.append(("Level", config.level))
        if config.topics:
            rows.append(("Topics", ", ".join(config.topics)))
    rows.append(("Generated", generated.strftime("%d %b %Y, %H:%M")))
    label_width = 30
    for label, value in rows:
        pdf.set_x(pdf.l_margin)
        pdf.set_text_color(*MUTED)
        pdf.set_font(pdf._font_regular, "", 10)
        pdf.cell(label_width, 6, pdf.prepare_text(label))
        pdf.set_text_color(*TEXT)
        pdf.set_font(pdf._font_bold, "B", 10)
        pdf.multi_cell(
            _effective_width(pdf) - label_width, 6, pdf.prepare_text(value), new_x=XPos.LMARGIN, new_y=YPos.NEXT
        )

    pdf.ln(3)
    top = pdf.get_y()
    pdf.set_fill_color(*SOFT_ACCENT_BG)
    pdf.rect(pdf.l_margin, top, _effective_width(pdf), 16, style="F")
    pdf.set_xy(pdf.l_margin + 6, top + 5)
    pdf.set_text_color(*MUTED)
    pdf.set_font(pdf._font_regular, "", 10)
    pdf.cell(60, 6, "Recommendation")
    pdf.set_text_color(*RECOMMENDATION_COLORS[report.hire_recommendation])
    pdf.set_font(pdf._font_bold, "B", 14)
    pdf.cell(_effective_width(pdf) - 72, 6, report.hire_recommendation, align="R")
    pdf.set_y(top + 20)
    pdf.set_text_color(*TEXT)


def _render_metrics(pdf: ScorecardPDF, metrics: Sequence[EvaluationMetric]) -> None:  # Draw metric table
    width = _effective_width(pdf)
    widths = [width * 0.3, width * 0.12, width * 0.58]
    pdf.set_font(pdf._font_bold, "B", 10)
    pdf.set_fill_color(*SOFT_ACCENT_BG)
    pdf.set_x(pdf.l_margin)
    for header, col in zip(("Category", "Score", "Feedback"), widths):
        pdf.cell(col, 8, header, fill=True)
    pdf.ln(8)
    for metric in metrics:
        pdf.set_x(pdf.l_margin)
        top = pdf.get_y()
        pdf.set_text_color(*TEXT)
        pdf.set_font(pdf._font_bold, "B", 10)
        pdf.multi_cell(widths[0], 6, pdf.prepare_text(metric.category), new_x=XPos.RIGHT, new_y=YPos.TOP)
        pdf.set_text_color(*_score_color(metric.score))
        pdf.cell(widths[1], 6, f"{metric.score}/100", new_x=XPos.RIGHT, new_y=YPos.TOP)
        pdf.set_text_color(*TEXT)
        pdf.set_font(pdf._font_regular, "", 10)
        pdf.multi_cell(widths[2], 6, pdf.prepare_text(metric.feedback), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        bottom = max(pdf.get_y(), top + 6)
        pdf.set_draw_color(*RULE)
        pdf.line(pdf.l_margin, bottom + 1, pdf.l_margin + width, bottom + 1)
        pdf.set_y(bottom + 2)


def _render_bullets(pdf: ScorecardPDF, items: Sequence[str], empty: str) -> None:
    if not items:
        _paragraph(pdf, empty, size=10, color=MUTED)
        return
    bullet = "•" if pdf._supports_unicode else "-"
    for item in items:
        _paragraph(pdf, f"{bullet} {item}", size=10)


def generate_report_pdf(  # Build PDF payload for a final report
    report: FinalReport,
    config: Optional[JobConfig] = None,
    *,
    generated: Optional[datetime] = None,
) -> bytes:
    title = f"Candidate Scorecard: {config.role}" if config is not None else "Candidate Scorecard"
    pdf = ScorecardPDF(orientation="P", unit="mm", format="A4", header_title=title)
    if os.path.exists(DEJAVU_SANS) and os.path.exists(DEJAVU_SANS_BOLD):
        pdf.use_unicode_font()
    pdf.alias_nb_pages()
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.add_page()

    _render_overview(pdf, report, config, generated or datetime.now())

    _section_title(pdf, "Summary")
    _paragraph(pdf, report.summary)

    _section_title(pdf, "Evaluation Metrics")
    _render_metrics(pdf, report.metrics)

    _section_title(pdf, "Strengths")
    _render_bullets(pdf, report.strengths, "No strengths recorded.")

    _section_title(pdf, "Areas for Improvement")
    _render_bullets(pdf, report.weaknesses, "No weaknesses recorded.")

    return bytes(pdf.output())


__all__ = ["generate_report_pdf"]
