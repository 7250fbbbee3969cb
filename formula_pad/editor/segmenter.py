"""
Delimiter Segmenter

Splits free text into plain-text and math spans:
    $$...$$  -> BlockMath
    $...$    -> InlineMath
    anything else (including a lone or empty-content $) -> PlainText

Content between delimiters is one or more non-$ characters, matched
non-greedily, with the block form tried first at each position. Segmentation
never fails and always round-trips:

    reconstruct(segment(text)) == text
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class SpanTag(Enum):
    """Kinds of span produced by the segmenter."""
    PLAIN_TEXT = "plain"
    INLINE_MATH = "inline"
    BLOCK_MATH = "block"


DELIMITERS = {
    SpanTag.PLAIN_TEXT: "",
    SpanTag.INLINE_MATH: "$",
    SpanTag.BLOCK_MATH: "$$",
}

MATH_PATTERN = re.compile(r'\$\$([^$]+?)\$\$|\$([^$]+?)\$')


@dataclass(frozen=True)
class Span:
    """A typed run of the source text. Math content excludes its delimiters."""
    tag: SpanTag
    content: str
    start: int = 0
    end: int = 0

    @property
    def is_math(self) -> bool:
        return self.tag is not SpanTag.PLAIN_TEXT

    @property
    def delimiter(self) -> str:
        return DELIMITERS[self.tag]

    @property
    def source(self) -> str:
        """The span as it appears in the text, delimiters included."""
        return f"{self.delimiter}{self.content}{self.delimiter}"

    def to_dict(self) -> Dict:
        return {
            'tag': self.tag.value,
            'content': self.content,
            'start': self.start,
            'end': self.end,
        }


def segment(text: str) -> List[Span]:
    """
    Partition text into spans, left to right.

    Empty text yields no spans, and no empty PlainText span is ever emitted.
    Adjacent spans of the same tag are kept separate.
    """
    spans = []
    pos = 0

    for m in MATH_PATTERN.finditer(text):
        if m.start() > pos:
            spans.append(Span(SpanTag.PLAIN_TEXT, text[pos:m.start()], pos, m.start()))

        if m.group(1) is not None:
            spans.append(Span(SpanTag.BLOCK_MATH, m.group(1), m.start(), m.end()))
        else:
            spans.append(Span(SpanTag.INLINE_MATH, m.group(2), m.start(), m.end()))
        pos = m.end()

    if pos < len(text):
        spans.append(Span(SpanTag.PLAIN_TEXT, text[pos:], pos, len(text)))

    return spans


def reconstruct(spans: List[Span]) -> str:
    """Join spans back into the text they were cut from."""
    return "".join(span.source for span in spans)


def has_math(text: str) -> bool:
    return MATH_PATTERN.search(text) is not None
