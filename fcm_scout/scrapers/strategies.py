"""Ordered extraction strategies and stat-label matching.

A field is described by a tuple of ``Strategy`` objects. Each strategy is one
CSS selector (optionally reading an attribute instead of the text) probed
against a scope: a single card element or the whole document. The first
strategy that yields a non-empty value wins; when upstream markup changes, a
new strategy is added to the tuple instead of rewriting the extractor.

Tie-break policy is first-match-wins everywhere, including stats: once a stat
is populated, later stat elements never overwrite it.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from bs4 import Tag

from fcm_scout.common.parsing import clean_text, first_int
from fcm_scout.domain.models import STAT_NAMES

STAT_CLASS_SELECTOR = '[class*="stat"]'

_AFTER_LABEL_RE = re.compile(r"^\W*(\d+)")
_BEFORE_LABEL_RE = re.compile(r"(\d+)\W*$")


@dataclass(frozen=True)
class Strategy:
    selector: str
    attr: Optional[str] = None

    def probe(self, scope: Tag) -> str:
        """First non-empty value among the elements *selector* finds in *scope*."""
        for el in scope.select(self.selector):
            if self.attr:
                raw = el.get(self.attr)
                if isinstance(raw, list):
                    raw = " ".join(raw)
                value = clean_text(raw)
            else:
                value = clean_text(el.get_text(" ", strip=True))
            if value:
                return value
        return ""


def text(*selectors: str) -> tuple[Strategy, ...]:
    return tuple(Strategy(s) for s in selectors)


def attr(attribute: str, *selectors: str) -> tuple[Strategy, ...]:
    return tuple(Strategy(s, attribute) for s in selectors)


def first_match(scope: Tag, strategies: Sequence[Strategy]) -> str:
    for strategy in strategies:
        value = strategy.probe(scope)
        if value:
            return value
    return ""


# -------------------- Stats -------------------- #

def stat_surface_forms(stat: str) -> tuple[str, str, str]:
    """Full word uppercase, capitalized word, three-letter abbreviation.

    Longer forms come first so "PACE 90" is read at the full label, not at "PAC".
    """
    return stat.upper(), stat.capitalize(), stat[:3].upper()


def stat_value(text_: str, stat: str) -> Optional[int]:
    """Value for *stat* in *text_*, or None if no label form occurs.

    The digit run right after the label wins ("PAC: 95"), then the one right
    before it ("95 PAC"), then the first digit run anywhere in the text.
    """
    for form in stat_surface_forms(stat):
        idx = text_.find(form)
        if idx < 0:
            continue
        after = _AFTER_LABEL_RE.match(text_[idx + len(form):])
        if after:
            return int(after.group(1))
        before = _BEFORE_LABEL_RE.search(text_[:idx])
        if before:
            return int(before.group(1))
        return first_int(text_)
    return None


def stat_elements(scope: Tag) -> list[Tag]:
    """Stat-classed elements, innermost ones first, wrapping ones after.

    A wrapper such as ``.player-stats`` holds the text of every stat, so it
    is only consulted for stats its children did not yield.
    """
    elements = scope.select(STAT_CLASS_SELECTOR)
    inner = [el for el in elements if el.select_one(STAT_CLASS_SELECTOR) is None]
    outer = [el for el in elements if el.select_one(STAT_CLASS_SELECTOR) is not None]
    return inner + outer


def extract_stats(scope: Tag, into: Optional[dict[str, int]] = None) -> dict[str, int]:
    stats: dict[str, int] = dict(into or {})
    for el in stat_elements(scope):
        content = clean_text(el.get_text(" ", strip=True))
        if not content:
            continue
        for stat in STAT_NAMES:
            if stat in stats:
                continue
            value = stat_value(content, stat)
            if value is not None:
                stats[stat] = value
    return stats


__all__ = [
    "Strategy",
    "text",
    "attr",
    "first_match",
    "stat_surface_forms",
    "stat_value",
    "stat_elements",
    "extract_stats",
]
