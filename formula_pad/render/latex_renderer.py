r"""
Math Span Renderer

Renders math spans to HTML fragments with matplotlib's mathtext engine, so
the preview works without a TeX installation. Mathtext covers the common
subset of LaTeX math (fractions, sub/superscripts, Greek, operators, ...);
anything it cannot parse raises, and the failure is shown inline in place of
the span instead of breaking the preview.

Output formats:
    - svg: inline <svg> markup (default, scales with the page)
    - png: autocropped bitmap embedded as a data URI

Usage:
    from formula_pad.render import MathtextRenderer, render_spans
    from formula_pad.editor import segment

    renderer = MathtextRenderer(fmt="svg")
    fragments = render_spans(segment(r"Area: $\pi r^2$"), renderer)
"""

import base64
import io
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, List, Optional

import matplotlib
from markupsafe import Markup, escape
from matplotlib import mathtext
from matplotlib.font_manager import FontProperties
from PIL import Image, ImageOps

from ..editor.segmenter import Span, SpanTag

logger = logging.getLogger(__name__)

FORMATS = ("svg", "png")


# =============================================================================
# Core Rendering
# =============================================================================

@lru_cache(maxsize=512)
def render_mathtext(content: str, fmt: str = "svg", dpi: int = 120,
                    fontsize: float = 14.0) -> bytes:
    """
    Render a math expression (without delimiters) to SVG or PNG bytes.

    Results are cached: the preview re-renders every span on each keystroke.

    Raises:
        ValueError: mathtext could not parse the expression
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format {fmt!r}, expected one of {FORMATS}")

    buf = io.BytesIO()
    mathtext.math_to_image(
        f"${content}$", buf,
        prop=FontProperties(size=fontsize),
        dpi=dpi,
        format=fmt,
    )
    return buf.getvalue()


def autocrop_image(image: Image.Image, padding: int = 4) -> Image.Image:
    """Auto-crop whitespace (and transparency) from image."""
    if image.mode in ("RGBA", "LA"):
        background = Image.new("RGB", image.size, "white")
        background.paste(image, mask=image.getchannel("A"))
        image = background

    gray = image.convert('L')
    inverted = ImageOps.invert(gray)
    bbox = inverted.getbbox()

    if bbox:
        left = max(0, bbox[0] - padding)
        top = max(0, bbox[1] - padding)
        right = min(image.width, bbox[2] + padding)
        bottom = min(image.height, bbox[3] + padding)
        return image.crop((left, top, right, bottom))

    return image


class MathtextRenderer:
    """
    Renderer collaborator backed by matplotlib mathtext.

    Args:
        fmt: "svg" or "png"
        dpi: Resolution (PNG) / scale (SVG)
        fontsize: Base font size in points for inline math
        block_scale: Font size multiplier for block math
        padding: Autocrop padding in pixels (PNG only)
    """

    def __init__(self, fmt: str = "svg", dpi: int = 120,
                 fontsize: float = 14.0, block_scale: float = 1.4,
                 padding: int = 4):
        if fmt not in FORMATS:
            raise ValueError(f"Unknown format {fmt!r}, expected one of {FORMATS}")
        self.fmt = fmt
        self.dpi = dpi
        self.fontsize = fontsize
        self.block_scale = block_scale
        self.padding = padding

    def render(self, content: str, display: bool = False) -> str:
        """Render content to an HTML fragment; raises on malformed math."""
        if not content.strip():
            raise ValueError("empty math expression")

        fontsize = self.fontsize * (self.block_scale if display else 1.0)
        data = render_mathtext(content, self.fmt, self.dpi, fontsize)

        if self.fmt == "svg":
            svg = data.decode("utf-8")
            # Drop the XML prolog and doctype so the markup can be inlined
            start = svg.find("<svg")
            return svg[start:] if start >= 0 else svg

        image = autocrop_image(Image.open(io.BytesIO(data)), self.padding)
        out = io.BytesIO()
        image.save(out, format="PNG")
        encoded = base64.b64encode(out.getvalue()).decode("ascii")
        return f'<img src="data:image/png;base64,{encoded}" alt="{escape(content)}">'


# =============================================================================
# Span Rendering
# =============================================================================

@dataclass
class RenderedSpan:
    """A span with its HTML fragment; error is set when the renderer failed."""
    span: Span
    html: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        data = self.span.to_dict()
        data.update({'html': self.html, 'error': self.error})
        return data


def _wrap(span: Span, inner) -> str:
    if span.tag is SpanTag.BLOCK_MATH:
        return Markup('<div class="math-block">{}</div>').format(Markup(inner))
    return Markup('<span class="math-inline">{}</span>').format(Markup(inner))


def render_span(span: Span, renderer) -> RenderedSpan:
    """Render one span; renderer failures become an inline error fragment."""
    if not span.is_math:
        html = Markup('<span class="plain">{}</span>').format(span.content)
        return RenderedSpan(span, str(html))

    try:
        inner = renderer.render(span.content, display=span.tag is SpanTag.BLOCK_MATH)
    except Exception as e:
        logger.debug(f"Render failed for {span.source!r}: {e}")
        message = str(e).strip().splitlines()[0] if str(e).strip() else type(e).__name__
        html = Markup('<span class="math-error" title="{}">{}</span>').format(
            message, span.source
        )
        return RenderedSpan(span, str(html), error=message)

    return RenderedSpan(span, str(_wrap(span, inner)))


def render_spans(spans: List[Span], renderer) -> List[RenderedSpan]:
    return [render_span(span, renderer) for span in spans]


def render_html(spans: List[Span], renderer) -> str:
    """Render spans and join them into one HTML string."""
    return "".join(r.html for r in render_spans(spans, renderer))


# =============================================================================
# Utility Functions
# =============================================================================

def get_render_capabilities() -> Dict[str, Any]:
    """Get information about rendering capabilities."""
    info = render_mathtext.cache_info()
    return {
        'engine': 'matplotlib.mathtext',
        'matplotlib_version': matplotlib.__version__,
        'formats': list(FORMATS),
        'cache_hits': info.hits,
        'cache_size': info.currsize,
    }


# =============================================================================
# CLI
# =============================================================================

def main():
    """Test math rendering."""
    import sys
    if sys.platform == 'win32':
        sys.stdout.reconfigure(encoding='utf-8', errors='replace')

    print("=" * 60)
    print("Math Renderer")
    print("=" * 60)

    caps = get_render_capabilities()
    print(f"\nEngine: {caps['engine']} (matplotlib {caps['matplotlib_version']})")

    test_expressions = [
        r"x^2 + y^2 = r^2",
        r"\frac{1}{2}",
        r"\int_0^\infty e^{-x} dx",
        r"\sum_{n=1}^{\infty} \frac{1}{n^2}",
        r"\frac{1}{",
    ]

    for fmt in FORMATS:
        print("\n" + "-" * 40)
        print(f"Format: {fmt}")
        print("-" * 40)
        renderer = MathtextRenderer(fmt=fmt, dpi=100)
        for expr in test_expressions:
            try:
                html = renderer.render(expr)
                print(f"  ✓ {expr[:30]:30} -> {len(html)} chars")
            except ValueError as e:
                print(f"  ✗ {expr[:30]:30} -> FAILED ({str(e).splitlines()[0]})")

    print("\n" + "=" * 60)
    print("Math renderer test complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
