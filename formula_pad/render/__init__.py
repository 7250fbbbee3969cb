"""
Rendering for Formula Pad previews.

Modules:
    latex_renderer: matplotlib mathtext renderer and span -> HTML rendering
"""

from .latex_renderer import (
    MathtextRenderer,
    RenderedSpan,
    render_mathtext,
    render_span,
    render_spans,
    render_html,
    autocrop_image,
    get_render_capabilities,
)

__all__ = [
    'MathtextRenderer',
    'RenderedSpan',
    'render_mathtext',
    'render_span',
    'render_spans',
    'render_html',
    'autocrop_image',
    'get_render_capabilities',
]
