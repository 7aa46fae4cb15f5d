"""Human-readable indicator lines derived from detector signals.

Detectors return only structured ``Signal`` values. Each rubric module registers
``(condition, message)`` rules per signal type here, and ``explain`` renders the
rules whose condition holds. Indicators are an audit trail for the author and
never feed back into scoring.
"""

from __future__ import annotations

from typing import Any, Callable, Union

from data_designer_doc_rubric.core import Signal

Message = Union[str, Callable[[Any], str]]
Indicator = tuple[Callable[[Any], bool], Message]

_INDICATORS: dict[type[Signal], tuple[Indicator, ...]] = {}


def register_indicators(signal_type: type[Signal], *rules: Indicator) -> None:
    _INDICATORS[signal_type] = tuple(rules)


def explain(signal: Signal) -> list[str]:
    lines: list[str] = []
    for condition, message in _INDICATORS.get(type(signal), ()):
        if condition(signal):
            lines.append(message(signal) if callable(message) else message)
    return lines
