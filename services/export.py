"""PDF export of a :class:`ProposalDocument` with ReportLab."""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence
from xml.sax.saxutils import escape

import requests
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.platypus import (
    Image as PlatypusImage,
    ListFlowable,
    ListItem,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from config import EXPORT_BACKGROUND_COLOR, EXPORT_IMAGE_TIMEOUT, EXPORT_SCALE
from services.document import ProposalDocument, Segment
from theme import THEME_COLORS

log = logging.getLogger(__name__)

MAX_LOGO_WIDTH = 60 * mm
MAX_LOGO_HEIGHT = 16 * mm
PAGE_MARGIN = 18 * mm
CONTENT_WIDTH = A4[0] - 2 * PAGE_MARGIN


class ExportError(RuntimeError):
    """Raised when the PDF could not be produced."""


@dataclass(frozen=True)
class ExportConfig:
    """Rendering options for the PDF export.

    ``use_cors`` allows remote images to be fetched at all; ``allow_taint``
    accepts responses that do not declare an image content type. ``scale``
    is the number of image pixels per PDF point.
    """

    scale: float = EXPORT_SCALE
    use_cors: bool = True
    allow_taint: bool = True
    background_color: str = EXPORT_BACKGROUND_COLOR
    image_timeout: float = EXPORT_IMAGE_TIMEOUT


DEFAULT_EXPORT_CONFIG = ExportConfig()
ImageLoader = Callable[[str, ExportConfig], Optional[bytes]]


def fetch_image(url: str, config: ExportConfig) -> Optional[bytes]:
    """Download an image for embedding. Returns ``None`` when it can't be used."""

    if not url:
        return None
    if not config.use_cors:
        log.info("Remote images disabled; skipping %s", url)
        return None
    try:
        response = requests.get(url, timeout=config.image_timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout:
        log.warning("Image load timed out after %ss: %s", config.image_timeout, url)
        return None
    except requests.RequestException as exc:
        log.warning("Image load failed for %s: %s", url, exc)
        return None
    content_type = response.headers.get("Content-Type", "")
    if not config.allow_taint and not content_type.startswith("image/"):
        log.warning("Rejected %s: content type %r is not an image", url, content_type)
        return None
    return response.content


def _logo_flowable(data: Optional[bytes], config: ExportConfig) -> Optional[PlatypusImage]:
    if not data:
        return None
    try:
        width_px, height_px = ImageReader(io.BytesIO(data)).getSize()
    except Exception as exc:  # ReportLab/Pillow raise a variety of decode errors
        log.warning("Skipping undecodable logo image: %s", exc)
        return None
    if not width_px or not height_px:
        return None
    scale = config.scale if config.scale > 0 else 1.0
    width, height = width_px / scale, height_px / scale
    shrink = min(1.0, MAX_LOGO_WIDTH / width, MAX_LOGO_HEIGHT / height)
    return PlatypusImage(io.BytesIO(data), width=width * shrink, height=height * shrink)


def _segments_markup(segments: Sequence[Segment], accent: str) -> str:
    parts = []
    for text, emphasised in segments:
        if emphasised:
            parts.append(f'<font color="{accent}"><b>{escape(text)}</b></font>')
        else:
            parts.append(escape(text))
    return "".join(parts)


def create_pdf(
    document: ProposalDocument,
    *,
    config: ExportConfig = DEFAULT_EXPORT_CONFIG,
    image_loader: ImageLoader = fetch_image,
) -> bytes:
    """Render *document* to A4 PDF bytes.

    Images that fail to load are left out and the export carries on.
    """

    try:
        background = colors.HexColor(config.background_color)
    except ValueError as exc:
        raise ExportError(f"invalid background colour {config.background_color!r}") from exc

    accent = THEME_COLORS["accent"]
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ProposalTitle",
        parent=styles["Title"],
        fontSize=18,
        leading=22,
        alignment=0,
        textColor=colors.HexColor(THEME_COLORS["primary"]),
    )
    subtitle_style = ParagraphStyle(
        "ProposalSubtitle",
        parent=styles["Normal"],
        fontSize=10,
        textColor=colors.HexColor(THEME_COLORS["text_subtle"]),
    )
    heading_style = ParagraphStyle(
        "ProposalHeading",
        parent=styles["Heading3"],
        textColor=colors.HexColor(THEME_COLORS["primary"]),
    )
    body_style = ParagraphStyle(
        "ProposalBody",
        parent=styles["Normal"],
        fontSize=10.5,
        leading=15,
        textColor=colors.HexColor(THEME_COLORS["text"]),
    )
    card_label_style = ParagraphStyle(
        "StatLabel", parent=body_style, fontSize=9, alignment=1, textColor=colors.HexColor(THEME_COLORS["text_subtle"])
    )
    card_value_style = ParagraphStyle(
        "StatValue", parent=body_style, fontSize=20, leading=24, alignment=1, textColor=colors.HexColor(accent)
    )
    note_style = ParagraphStyle(
        "ProposalNote", parent=body_style, fontSize=9, leading=12, textColor=colors.HexColor(THEME_COLORS["text_subtle"])
    )

    story: List = []
    header_text = [Paragraph(escape(document.title), title_style), Paragraph(escape(document.subtitle), subtitle_style)]
    client_logo = _logo_flowable(image_loader(document.client_logo_url, config), config)
    if client_logo is not None:
        header = Table([[header_text, client_logo]], colWidths=[CONTENT_WIDTH - MAX_LOGO_WIDTH, MAX_LOGO_WIDTH])
        header.setStyle(
            TableStyle(
                [
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("ALIGN", (1, 0), (1, 0), "RIGHT"),
                    ("LEFTPADDING", (0, 0), (-1, -1), 0),
                    ("RIGHTPADDING", (0, 0), (-1, -1), 0),
                ]
            )
        )
        story.append(header)
    else:
        story.extend(header_text)
    story.append(Spacer(1, 14))

    story.append(Paragraph(escape(document.summary_title), heading_style))
    cells = [
        [Paragraph(escape(card.label), card_label_style), Paragraph(escape(card.value), card_value_style)]
        for card in document.stat_cards
    ]
    rows = [cells[i : i + 2] for i in range(0, len(cells), 2)]
    if rows and len(rows[-1]) == 1:
        rows[-1].append("")
    card_table = Table(rows, colWidths=[CONTENT_WIDTH / 2, CONTENT_WIDTH / 2])
    card_table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, -1), colors.HexColor(THEME_COLORS["surface_alt"])),
                ("BOX", (0, 0), (-1, -1), 0.5, colors.HexColor(THEME_COLORS["neutral"])),
                ("INNERGRID", (0, 0), (-1, -1), 3, background),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ("TOPPADDING", (0, 0), (-1, -1), 8),
                ("BOTTOMPADDING", (0, 0), (-1, -1), 8),
            ]
        )
    )
    story.append(card_table)
    story.append(Spacer(1, 14))

    for paragraph in document.paragraphs:
        story.append(Paragraph(_segments_markup(paragraph, accent), body_style))
        story.append(Spacer(1, 6))
    story.append(Spacer(1, 8))

    story.append(Paragraph(escape(document.package_name), heading_style))
    bullets = [bullet for bullet in document.bullets if bullet.strip()]
    if bullets:
        story.append(
            ListFlowable(
                [ListItem(Paragraph(escape(bullet), body_style)) for bullet in bullets],
                bulletType="bullet",
                leftIndent=12,
            )
        )
    if document.notes:
        story.append(Spacer(1, 8))
        story.append(Paragraph(escape(document.notes).replace("\n", "<br/>"), body_style))
    story.append(Spacer(1, 16))

    story.append(Paragraph(f"<b>{escape(document.next_steps_title)}</b>", note_style))
    story.append(Paragraph(escape(document.next_steps), note_style))
    story.append(Spacer(1, 10))
    agency_logo = _logo_flowable(image_loader(document.agency_logo_url, config), config)
    if agency_logo is not None:
        agency_logo.hAlign = "LEFT"
        story.append(agency_logo)
        story.append(Spacer(1, 4))
    story.append(Paragraph(f"<b>{escape(document.signature)}</b>", note_style))
    if document.contact:
        story.append(Paragraph(escape(document.contact), note_style))

    def _paint_background(canvas, doc) -> None:
        canvas.saveState()
        canvas.setFillColor(background)
        canvas.rect(0, 0, doc.pagesize[0], doc.pagesize[1], stroke=0, fill=1)
        canvas.restoreState()

    buffer = io.BytesIO()
    pdf = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        title=document.title,
        author=document.signature,
        leftMargin=PAGE_MARGIN,
        rightMargin=PAGE_MARGIN,
        topMargin=16 * mm,
        bottomMargin=16 * mm,
    )
    try:
        pdf.build(story, onFirstPage=_paint_background, onLaterPages=_paint_background)
    except Exception as exc:
        raise ExportError(f"PDF generation failed: {exc}") from exc
    return buffer.getvalue()


__all__ = [
    "DEFAULT_EXPORT_CONFIG",
    "ExportConfig",
    "ExportError",
    "ImageLoader",
    "create_pdf",
    "fetch_image",
]
