"""Pedigree certificate: a fixed five-column binary-tree page rendered as SVG.

Layout is computed first (``layout_pedigree``) and drawn second
(``render_pedigree_document``). Generation ``g`` always has ``2**g`` equal
slots whether or not the individuals in them are known; an individual in
slot ``s`` has its father in slot ``2s`` and its mother in ``2s + 1`` of the
next column. Unknown parents keep their slots and render as dashed
placeholders, so slot height is simply ``content_height / 2**g``.

The layout recurses once per generation. With five columns that is five
frames deep; a taller page would want an explicit stack instead.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Optional
from xml.etree import ElementTree as ET
from app.core.errors import NotFoundError
from app.models.individual import Individual

logger = logging.getLogger(__name__)

COLORS = {
    "primary": "#0d9488",
    "secondary": "#f59e0b",
    "male": "#3b82f6",
    "female": "#f43f5e",
    "unknown": "#94a3b8",
    "card_bg": "#f8fafc",
    "border": "#e2e8f0",
    "text": "#1e293b",
    "muted": "#64748b",
    "white": "#ffffff",
}

GENERATION_LABELS = ["Subject", "Parents", "Grandparents", "Great-grandparents", "Gg-grandparents"]
GENDER_SYMBOLS = {"male": "♂", "female": "♀"}
FONT_FAMILY = "Helvetica, Arial, sans-serif"

# (baseline offset, font size, bold, colour) for the up-to-four label lines of a card
LABEL_LINES = [
    (11.5, 7.5, True, "text"),
    (21.0, 6.5, False, "muted"),
    (29.5, 6.0, False, "muted"),
    (38.5, 6.0, False, "secondary"),
]


@dataclass(frozen=True)
class PageGeometry:
    # A4 landscape in points
    width: float = 842.0
    height: float = 595.0
    margin: float = 30.0
    header_height: float = 56.0
    content_top: float = 70.0
    bottom_reserve: float = 40.0
    footer_height: float = 28.0
    generations: int = 5
    card_height: float = 44.0
    card_gap: float = 4.0
    column_padding: float = 5.0

    @property
    def content_height(self) -> float:
        return self.height - self.content_top - self.bottom_reserve

    @property
    def column_width(self) -> float:
        return (self.width - self.margin * 2) / self.generations

    @property
    def card_width(self) -> float:
        return self.column_width - self.column_padding * 2

    def column_x(self, generation: int) -> float:
        return self.margin + generation * self.column_width + self.column_padding

    def slot_height(self, generation: int) -> float:
        return self.content_height / 2 ** generation

    def slot_center(self, generation: int, index: int) -> float:
        slot_h = self.slot_height(generation)
        return self.content_top + index * slot_h + slot_h / 2


@dataclass
class Slot:
    generation: int
    index: int
    individual: Optional[Individual]
    x: float
    y: float
    width: float
    height: float

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2


@dataclass
class PedigreeLayout:
    subject: Individual
    page: PageGeometry
    slots: list[Slot] = field(default_factory=list)
    connectors: list[list[tuple[float, float]]] = field(default_factory=list)

    def slots_in(self, generation: int) -> list[Slot]:
        return sorted((s for s in self.slots if s.generation == generation), key=lambda s: s.index)


def layout_pedigree(pedigree: dict[int, Individual], subject_id: int,
                    page: PageGeometry = PageGeometry()) -> PedigreeLayout:
    subject = pedigree.get(subject_id)
    if subject is None:
        raise NotFoundError(f"Individual {subject_id} not found")
    layout = PedigreeLayout(subject=subject, page=page)

    def place(individual_id: Optional[int], generation: int, index: int) -> None:
        if generation >= page.generations:
            return
        slot_h = page.slot_height(generation)
        card_h = min(page.card_height, slot_h - page.card_gap)
        x = page.column_x(generation)
        y = page.content_top + index * slot_h + (slot_h - card_h) / 2
        ind = pedigree.get(individual_id) if individual_id is not None else None
        layout.slots.append(Slot(generation, index, ind, x, y, page.card_width, card_h))

        if ind is not None and generation < page.generations - 1:
            trailing_x = x + page.card_width
            next_x = page.column_x(generation + 1)
            mid_x = trailing_x + (next_x - trailing_x) / 2
            card_mid_y = y + card_h / 2
            for parent_index in (index * 2, index * 2 + 1):
                parent_y = page.slot_center(generation + 1, parent_index)
                layout.connectors.append([
                    (trailing_x, card_mid_y),
                    (mid_x, card_mid_y),
                    (mid_x, parent_y),
                    (next_x, parent_y),
                ])

        father_id = ind.fatherId if ind is not None else None
        mother_id = ind.motherId if ind is not None else None
        place(father_id, generation + 1, index * 2)
        place(mother_id, generation + 1, index * 2 + 1)

    place(subject_id, 0, 0)
    return layout


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def _truncate(text: str, width: float, font_size: float) -> str:
    max_chars = max(int(width / (font_size * 0.55)), 1)
    if len(text) <= max_chars:
        return text
    return text[: max_chars - 1] + "…"


def card_label(ind: Individual, species_name: Optional[str] = None) -> list[str]:
    lines = []
    if ind.name:
        lines.append(ind.name)
    if ind.ringId:
        lines.append(f"Ring: {ind.ringId}")
    if species_name:
        lines.append(species_name)
    if ind.colorMutation:
        lines.append(ind.colorMutation)
    return lines or [f"#{ind.id}"]


def gender_color(gender: str) -> str:
    if gender in ("male", "female"):
        return COLORS[gender]
    return COLORS["unknown"]


def _text(parent: ET.Element, x: float, y: float, content: str, size: float, fill: str,
          bold: bool = False, anchor: Optional[str] = None) -> ET.Element:
    attrs = {
        "x": _fmt(x),
        "y": _fmt(y),
        "font-family": FONT_FAMILY,
        "font-size": str(size),
        "fill": fill,
    }
    if bold:
        attrs["font-weight"] = "bold"
    if anchor:
        attrs["text-anchor"] = anchor
    el = ET.SubElement(parent, "text", attrs)
    el.text = content
    return el


def _draw_card(parent: ET.Element, slot: Slot, species_names: dict[int, str]) -> None:
    ind = slot.individual
    if ind is None:
        ET.SubElement(parent, "rect", {
            "x": _fmt(slot.x), "y": _fmt(slot.y),
            "width": _fmt(slot.width), "height": _fmt(slot.height),
            "rx": "5", "fill": "none",
            "stroke": COLORS["border"], "stroke-width": "0.5", "stroke-dasharray": "3,2",
        })
        _text(parent, slot.x + slot.width / 2, slot.center_y + 2.5, "Unknown", 7, COLORS["muted"], anchor="middle")
        return

    gc = gender_color(ind.gender)
    group = ET.SubElement(parent, "g", {"id": f"individual-{ind.id}-g{slot.generation}s{slot.index}"})
    ET.SubElement(group, "rect", {
        "x": _fmt(slot.x), "y": _fmt(slot.y),
        "width": _fmt(slot.width), "height": _fmt(slot.height),
        "rx": "5", "fill": COLORS["card_bg"], "stroke": gc, "stroke-width": "0.7",
    })
    ET.SubElement(group, "rect", {
        "x": _fmt(slot.x), "y": _fmt(slot.y),
        "width": "3", "height": _fmt(slot.height), "fill": gc,
    })
    _text(group, slot.x + 6, slot.y + 11, GENDER_SYMBOLS.get(ind.gender, "?"), 9, gc, bold=True)

    text_x = slot.x + 16
    text_w = slot.width - 20
    species_name = species_names.get(ind.speciesId) if ind.speciesId is not None else None
    for line, (offset, size, bold, colour) in zip(card_label(ind, species_name), LABEL_LINES):
        # short cards in the outer columns only fit the first lines
        if offset + 2 > slot.height:
            break
        _text(group, text_x, slot.y + offset, _truncate(line, text_w, size), size, COLORS[colour], bold=bold)


def render_layout(layout: PedigreeLayout, species_names: dict[int, str],
                  generated_on: Optional[date] = None) -> bytes:
    page = layout.page
    subject = layout.subject
    subject_species = species_names.get(subject.speciesId) if subject.speciesId is not None else None

    svg = ET.Element("svg", {
        "xmlns": "http://www.w3.org/2000/svg",
        "version": "1.1",
        "width": _fmt(page.width),
        "height": _fmt(page.height),
        "viewBox": f"0 0 {_fmt(page.width)} {_fmt(page.height)}",
    })
    title = ET.SubElement(svg, "title")
    title.text = f"Pedigree: {subject.display_name}"

    # Header
    ET.SubElement(svg, "rect", {
        "x": "0", "y": "0", "width": _fmt(page.width), "height": _fmt(page.header_height),
        "fill": COLORS["primary"],
    })
    _text(svg, page.margin, 30, "Aviary Manager · Pedigree Certificate", 18, COLORS["white"], bold=True)
    subtitle = subject.display_name + (f" · {subject_species}" if subject_species else "")
    _text(svg, page.margin, 48, subtitle, 11, COLORS["white"])

    for generation in range(page.generations):
        label = GENERATION_LABELS[generation] if generation < len(GENERATION_LABELS) else f"Generation {generation}"
        _text(svg, page.margin + generation * page.column_width + page.column_width / 2,
              page.content_top - 5, label, 7, COLORS["muted"], anchor="middle")

    connectors = ET.SubElement(svg, "g", {
        "id": "connectors", "fill": "none", "stroke": COLORS["border"], "stroke-width": "0.5",
    })
    for points in layout.connectors:
        (x0, y0), *rest = points
        d = f"M {_fmt(x0)} {_fmt(y0)} " + " ".join(f"L {_fmt(x)} {_fmt(y)}" for x, y in rest)
        ET.SubElement(connectors, "path", {"d": d})

    cards = ET.SubElement(svg, "g", {"id": "cards"})
    for slot in layout.slots:
        _draw_card(cards, slot, species_names)

    # Footer
    footer_y = page.height - page.footer_height
    ET.SubElement(svg, "rect", {
        "x": "0", "y": _fmt(footer_y), "width": _fmt(page.width), "height": _fmt(page.footer_height),
        "fill": COLORS["card_bg"],
    })
    footer = "Generated by Aviary Manager"
    if generated_on is not None:
        footer += f" · {generated_on.day:02d} {generated_on:%B %Y}"
    _text(svg, page.width / 2, footer_y + 17, footer, 7, COLORS["muted"], anchor="middle")

    return ET.tostring(svg, encoding="utf-8", xml_declaration=True)


def render_pedigree_document(pedigree: dict[int, Individual], subject_id: int,
                             species_names: dict[int, str],
                             generated_on: Optional[date] = None,
                             page: PageGeometry = PageGeometry()) -> bytes:
    """Render the pedigree certificate for ``subject_id`` from an already-resolved ancestry map.

    Raises NotFoundError when the subject is not in ``pedigree``. Identical
    input yields identical bytes; pass ``generated_on`` to stamp a date.
    """
    layout = layout_pedigree(pedigree, subject_id, page)
    document = render_layout(layout, species_names, generated_on)
    logger.info("Rendered pedigree for individual %s (%d bytes)", subject_id, len(document))
    return document
