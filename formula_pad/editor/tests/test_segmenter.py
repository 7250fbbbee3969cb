"""
Tests for the Delimiter Segmenter

Tests:
1. Plain text, inline math, block math
2. Unmatched and empty delimiters degrade to plain text
3. Round-trip: spans always reconstruct the input
4. Span offsets
"""

from formula_pad.editor.segmenter import (
    Span,
    SpanTag,
    segment,
    reconstruct,
    has_math,
)


def tags(spans):
    return [(s.tag, s.content) for s in spans]


def test_plain_text():
    print("\n" + "=" * 60)
    print("TEST: Plain Text")
    print("=" * 60)

    spans = segment("plain")
    assert tags(spans) == [(SpanTag.PLAIN_TEXT, "plain")]
    assert not has_math("plain")

    print("  PASSED!")


def test_inline_math():
    print("\n" + "=" * 60)
    print("TEST: Inline Math")
    print("=" * 60)

    spans = segment("a $x+1$ b")
    assert tags(spans) == [
        (SpanTag.PLAIN_TEXT, "a "),
        (SpanTag.INLINE_MATH, "x+1"),
        (SpanTag.PLAIN_TEXT, " b"),
    ]
    assert spans[1].source == "$x+1$"
    assert spans[1].is_math

    print("  PASSED!")


def test_block_math():
    print("\n" + "=" * 60)
    print("TEST: Block Math")
    print("=" * 60)

    spans = segment("$$E=mc^2$$")
    assert tags(spans) == [(SpanTag.BLOCK_MATH, "E=mc^2")]
    assert spans[0].source == "$$E=mc^2$$"

    spans = segment("before $$x$$ mid $y$ after")
    assert [s.tag for s in spans] == [
        SpanTag.PLAIN_TEXT, SpanTag.BLOCK_MATH, SpanTag.PLAIN_TEXT,
        SpanTag.INLINE_MATH, SpanTag.PLAIN_TEXT,
    ]

    print("  PASSED!")


def test_empty_text():
    print("\n" + "=" * 60)
    print("TEST: Empty Text")
    print("=" * 60)

    assert segment("") == []
    assert reconstruct([]) == ""

    print("  PASSED!")


def test_empty_delimiters_are_plain():
    print("\n" + "=" * 60)
    print("TEST: Empty Delimiters")
    print("=" * 60)

    assert tags(segment("$$")) == [(SpanTag.PLAIN_TEXT, "$$")]
    assert tags(segment("$$$$")) == [(SpanTag.PLAIN_TEXT, "$$$$")]
    assert tags(segment("a $ b")) == [(SpanTag.PLAIN_TEXT, "a $ b")]

    print("  PASSED!")


def test_ambiguous_dollars():
    print("\n" + "=" * 60)
    print("TEST: Ambiguous Dollars")
    print("=" * 60)

    text = "cost is $5 and $10"
    spans = segment(text)
    print(f"  {tags(spans)}")

    assert reconstruct(spans) == text
    assert spans[0].tag is SpanTag.PLAIN_TEXT
    assert spans[-1] == Span(SpanTag.PLAIN_TEXT, "10", 16, 18)

    # A trailing unmatched dollar stays literal
    spans = segment("price: $5")
    assert tags(spans) == [(SpanTag.PLAIN_TEXT, "price: $5")]

    print("  PASSED!")


def test_adjacent_spans_not_merged():
    print("\n" + "=" * 60)
    print("TEST: Adjacent Spans")
    print("=" * 60)

    spans = segment("$a$$b$")
    assert tags(spans) == [
        (SpanTag.INLINE_MATH, "a"),
        (SpanTag.INLINE_MATH, "b"),
    ]

    print("  PASSED!")


def test_round_trip():
    print("\n" + "=" * 60)
    print("TEST: Round Trip")
    print("=" * 60)

    cases = [
        "",
        "plain",
        "$",
        "$$",
        "$$$",
        "$$$x$$",
        "$x$$",
        "a $b$ c $$d$$ e",
        "cost is $5 and $10",
        "$$unclosed block",
        "unopened$$ block$$$",
        "multi\nline $$\n\\int f\n$$ end",
        "emoji 😀 $\\alpha$ 😀",
    ]
    for text in cases:
        spans = segment(text)
        assert reconstruct(spans) == text, f"round trip failed for {text!r}"
        assert all(s.content for s in spans), f"empty span for {text!r}"
        for s in spans:
            assert text[s.start:s.end] == s.source

    print(f"  {len(cases)} cases round-trip")
    print("  PASSED!")


def run_all_tests():
    """Run all tests."""
    tests = [
        test_plain_text,
        test_inline_math,
        test_block_math,
        test_empty_text,
        test_empty_delimiters_are_plain,
        test_ambiguous_dollars,
        test_adjacent_spans_not_merged,
        test_round_trip,
    ]

    passed = 0
    failed = 0
    for test in tests:
        try:
            test()
            passed += 1
        except Exception as e:
            print(f"\n  FAILED: {e}")
            import traceback
            traceback.print_exc()
            failed += 1

    print("\n" + "=" * 60)
    print(f"RESULTS: {passed} passed, {failed} failed")
    print("=" * 60)
    return failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    exit(0 if success else 1)
