from __future__ import annotations
import math
from html import escape
from typing import Dict, List, Sequence

from core.score import ScoredSkill

SIZE = 130
RADIUS = 90
RINGS = 4
LABEL_OFFSET = 18
EMPTY_AXES = 5

RING_FILL = ("#ffffff", "#f3f6ff")
GRID_STROKE = "#d9e2ff"
POLY_FILL = "rgba(47, 91, 255, 0.3)"
POLY_STROKE = "#2f5bff"
LABEL_FILL = "#516080"


def _fmt(v: float) -> str:
    return f"{v:.2f}".rstrip("0").rstrip(".")


def radar_points(skills: Sequence[ScoredSkill]) -> List[Dict[str, object]]:
    axes = len(skills) or EMPTY_AXES
    points: List[Dict[str, object]] = []
    for i, skill in enumerate(skills):
        angle = 2 * math.pi * i / axes - math.pi / 2
        value = skill.score / 100 * RADIUS
        points.append({
            "x": SIZE + value * math.cos(angle),
            "y": SIZE + value * math.sin(angle),
            "label_x": SIZE + (RADIUS + LABEL_OFFSET) * math.cos(angle),
            "label_y": SIZE + (RADIUS + LABEL_OFFSET) * math.sin(angle),
            "label": skill.name,
        })
    return points


def render_radar_svg(skills: Sequence[ScoredSkill]) -> str:
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{SIZE * 2}" height="{SIZE * 2}" '
        f'viewBox="0 0 {SIZE * 2} {SIZE * 2}">'
    ]
    for ring in range(1, RINGS + 1):
        r = RADIUS / RINGS * ring
        parts.append(
            f'<circle cx="{SIZE}" cy="{SIZE}" r="{_fmt(r)}" '
            f'fill="{RING_FILL[1] if ring % 2 == 0 else RING_FILL[0]}" stroke="{GRID_STROKE}" />'
        )

    points = radar_points(skills)
    polygon = " ".join(f"{_fmt(p['x'])},{_fmt(p['y'])}" for p in points)
    parts.append(
        f'<polygon points="{polygon}" fill="{POLY_FILL}" stroke="{POLY_STROKE}" stroke-width="2" />'
    )
    for p in points:
        parts.append(
            f'<line x1="{SIZE}" y1="{SIZE}" x2="{_fmt(p["x"])}" y2="{_fmt(p["y"])}" stroke="{GRID_STROKE}" />'
        )
        parts.append(
            f'<text x="{_fmt(p["label_x"])}" y="{_fmt(p["label_y"])}" text-anchor="middle" '
            f'dominant-baseline="middle" font-size="11" fill="{LABEL_FILL}">{escape(str(p["label"]))}</text>'
        )
    parts.append("</svg>")
    return "".join(parts)
