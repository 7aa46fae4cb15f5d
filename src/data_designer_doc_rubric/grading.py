"""Score-to-display mappers. Pure step functions, boundaries inclusive."""

from __future__ import annotations

# lowest score labelled "Ready"
READY_THRESHOLD = 70


def get_grade(score: float) -> str:
    if score >= 90:
        return "A"
    if score >= 80:
        return "B"
    if score >= 70:
        return "C"
    if score >= 60:
        return "D"
    return "F"


def get_score_color(score: float) -> str:
    if score >= 70:
        return "green"
    if score >= 50:
        return "yellow"
    if score >= 30:
        return "orange"
    return "red"


def get_score_label(score: float) -> str:
    if score >= 80:
        return "Excellent"
    if score >= READY_THRESHOLD:
        return "Ready"
    if score >= 50:
        return "Needs Work"
    if score >= 30:
        return "Draft"
    return "Incomplete"
