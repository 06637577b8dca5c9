"""
Text primitives shared by the scorer and the highlighter.

Everything here works on *normalized* text: lowercased, NFD-decomposed
with combining marks dropped, and trimmed.  Match spans produced by
``find_matches`` index into that normalized form; use
``to_original_spans`` to project them back onto the raw string before
rendering.
"""

from __future__ import annotations

import unicodedata
from typing import Sequence

from rapidfuzz.distance import Levenshtein

Span = tuple[int, int]


# ---------------------------
# Normalization
# ---------------------------

def normalize_with_offsets(text: str) -> tuple[str, list[int]]:
    """
    Normalize ``text`` and return, alongside it, the index of the raw
    character each normalized character was produced from.
    """
    if not text:
        return "", []

    # Lowercase the whole string so context rules (Greek final sigma) apply.
    # Per-character lengths still line up: only the sigma rule is contextual.
    lowered = text.lower()
    chars: list[str] = []
    offsets: list[int] = []
    pos = 0
    for idx, ch in enumerate(text):
        width = len(ch.lower())
        pieces = lowered[pos:pos + width]
        pos += width
        for piece in unicodedata.normalize("NFD", pieces):
            if unicodedata.combining(piece):
                continue
            chars.append(piece)
            offsets.append(idx)

    start, end = 0, len(chars)
    while start < end and chars[start].isspace():
        start += 1
    while end > start and chars[end - 1].isspace():
        end -= 1
    return "".join(chars[start:end]), offsets[start:end]


def normalize(text: str) -> str:
    """Lowercase, strip diacritics and trim."""
    return normalize_with_offsets(text)[0]


# ---------------------------
# Edit distance
# ---------------------------

def levenshtein_distance(a: str, b: str) -> int:
    return Levenshtein.distance(a, b)


def fuzzy_match(a: str, b: str, max_distance: int = 2) -> bool:
    return Levenshtein.distance(normalize(a), normalize(b), score_cutoff=max_distance) <= max_distance


# ---------------------------
# Match spans
# ---------------------------

def find_matches(text: str, query: str) -> list[Span]:
    """
    All occurrences of ``query`` inside ``text``, as (start, end) spans over
    the normalized text.  The cursor advances one past each found start, so
    overlapping occurrences are reported too.
    """
    haystack = normalize(text)
    needle = normalize(query)
    if not needle:
        return []

    spans: list[Span] = []
    pos = haystack.find(needle)
    while pos != -1:
        spans.append((pos, pos + len(needle)))
        pos = haystack.find(needle, pos + 1)
    return spans


def to_original_spans(text: str, spans: Sequence[Span]) -> list[Span]:
    """
    Map spans over ``normalize(text)`` back onto ``text`` itself.  Combining
    marks that trail the last matched character are pulled into the span.
    """
    _, offsets = normalize_with_offsets(text)
    mapped: list[Span] = []
    for start, end in spans:
        if start < 0 or end <= start or end > len(offsets):
            continue
        raw_start = offsets[start]
        raw_end = offsets[end - 1] + 1
        while raw_end < len(text) and unicodedata.combining(text[raw_end]):
            raw_end += 1
        mapped.append((raw_start, raw_end))
    return mapped


def merge_spans(spans: Sequence[Span]) -> list[Span]:
    merged: list[Span] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            prev_start, prev_end = merged[-1]
            merged[-1] = (prev_start, max(prev_end, end))
        else:
            merged.append((start, end))
    return merged


def highlight(text: str, query: str, marker: str = "**") -> str:
    """Wrap every match of ``query`` in the raw ``text`` with ``marker``."""
    spans = merge_spans(to_original_spans(text, find_matches(text, query)))
    if not spans:
        return text

    parts: list[str] = []
    cursor = 0
    for start, end in spans:
        parts.append(text[cursor:start])
        parts.append(f"{marker}{text[start:end]}{marker}")
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)
