"""
Styled text with clickable, tagged ranges.

An `AnnotatedString` is plain text plus two kinds of ranges: span styles (how
a range looks) and string annotations (a tag and payload attached to a range).
`clickable_text` renders it and reports clicks as a character offset, leaving
it to the caller to look up which annotation, if any, sits at that offset.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from functools import partial
from html import escape
from typing import Callable, List, Optional, Tuple

import streamlit as st


@dataclass(frozen=True)
class SpanStyle:
    color: Optional[str] = None
    font_weight: Optional[str] = None  # "normal" | "bold"
    font_size: Optional[str] = None

    def merge(self, other: "SpanStyle") -> "SpanStyle":
        return SpanStyle(
            color=other.color or self.color,
            font_weight=other.font_weight or self.font_weight,
            font_size=other.font_size or self.font_size,
        )

    def css(self) -> str:
        rules = []
        if self.color:
            rules.append(f"color:{self.color}")
        if self.font_weight:
            rules.append(f"font-weight:{self.font_weight}")
        if self.font_size:
            rules.append(f"font-size:{self.font_size}")
        return ";".join(rules)


@dataclass(frozen=True)
class StyleRange:
    style: SpanStyle
    start: int
    end: int


@dataclass(frozen=True)
class StringAnnotation:
    tag: str
    item: str
    start: int
    end: int


@dataclass(frozen=True)
class AnnotatedString:
    text: str
    span_styles: Tuple[StyleRange, ...] = field(default_factory=tuple)
    annotations: Tuple[StringAnnotation, ...] = field(default_factory=tuple)

    def get_string_annotations(self, tag: str, start: int, end: int) -> List[StringAnnotation]:
        """Annotations with ``tag`` intersecting ``[start, end)``.

        A collapsed range (``start == end``) is a single offset and matches
        annotations with ``a.start <= offset < a.end``.
        """
        found = []
        for a in self.annotations:
            if a.tag != tag:
                continue
            if start == end:
                hit = a.start <= start < a.end
            else:
                hit = max(start, a.start) < min(end, a.end)
            if hit:
                found.append(a)
        return found

    def style_at(self, offset: int) -> SpanStyle:
        style = SpanStyle()
        for r in self.span_styles:
            if r.start <= offset < r.end:
                style = style.merge(r.style)
        return style


class AnnotatedStringBuilder:
    def __init__(self):
        self._parts: List[str] = []
        self._length = 0
        self._styles: List[StyleRange] = []
        self._annotations: List[StringAnnotation] = []

    def append(self, text: str):
        self._parts.append(text)
        self._length += len(text)
        return self

    @contextmanager
    def with_style(self, style: SpanStyle):
        start = self._length
        yield self
        self._styles.append(StyleRange(style, start, self._length))

    @contextmanager
    def string_annotation(self, tag: str, item: str):
        start = self._length
        yield self
        self._annotations.append(StringAnnotation(tag, item, start, self._length))

    def to_annotated_string(self) -> AnnotatedString:
        return AnnotatedString("".join(self._parts), tuple(self._styles), tuple(self._annotations))


@dataclass(frozen=True)
class Segment:
    start: int
    end: int
    annotation: Optional[StringAnnotation]


def segments(text: AnnotatedString) -> List[Segment]:
    """Split ``text`` into runs that are either plain or covered by one annotation."""
    cuts = {0, len(text.text)}
    for a in text.annotations:
        cuts.update((a.start, a.end))
    bounds = sorted(c for c in cuts if 0 <= c <= len(text.text))
    result: List[Segment] = []
    for start, end in zip(bounds, bounds[1:]):
        if start == end:
            continue
        covering = next((a for a in text.annotations if a.start <= start < a.end), None)
        if result and result[-1].annotation is covering and covering is not None:
            result[-1] = Segment(result[-1].start, end, covering)
        else:
            result.append(Segment(start, end, covering))
    return result


def _html_run(text: AnnotatedString, start: int, end: int) -> str:
    pieces = []
    for offset in range(start, end):
        css = text.style_at(offset).css()
        char = escape(text.text[offset])
        if pieces and pieces[-1][0] == css:
            pieces[-1] = (css, pieces[-1][1] + char)
        else:
            pieces.append((css, char))
    return "".join(f"<span style='{css}'>{chunk}</span>" if css else chunk for css, chunk in pieces)


def clickable_text(text: AnnotatedString, on_click: Callable[[int], None], key: str):
    """
    Renders ``text`` on one row. Annotated runs become link-style buttons that
    call ``on_click`` with the offset of the run's first character.
    """
    runs = segments(text)
    if not runs:
        return
    columns = st.columns([max(r.end - r.start, 1) for r in runs], vertical_alignment="center", gap="small")
    for i, (run, column) in enumerate(zip(runs, columns)):
        with column:
            if run.annotation is None:
                st.markdown(
                    f"<div style='text-align:right'>{_html_run(text, run.start, run.end)}</div>",
                    unsafe_allow_html=True,
                )
                continue
            label = text.text[run.start:run.end]
            if text.style_at(run.start).font_weight == "bold":
                label = f"**{label}**"
            st.button(label, key=f"{key}_link_{i}", on_click=partial(on_click, run.start), type="tertiary")
