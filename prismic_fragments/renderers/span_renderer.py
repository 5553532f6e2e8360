"""
Inline HTML rendering of a text block and its spans.

Spans are intervals over the characters of the block text. They are laid
over the text with a single sweep and a stack of open buffers:

- at every position, spans ending there are closed first. Each close pops
  the *top* of the stack, whatever span it holds, renders it and appends
  the result to the buffer below (or to the output when the stack is empty);
- spans starting there are then opened, in declaration order;
- the escaped character goes to the top buffer (or to the output).

Closing is strictly LIFO. Crossing spans, e.g. A(0, 10) and B(5, 15), come
out as B nested in A and closed at 10, with A closed at 15; the crossing is
never split into separate intervals. Existing rendered output depends on
this ordering.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..exceptions import RenderingError
from ..models.spans import Em, Hyperlink, Label, Span, Strong
from ..utils.html_utils import convert_line_breaks, escape_attribute, escape_text
from .config import DEFAULT_CONFIG, HTMLRenderConfig
from .link_resolver import LinkResolverLike, link_href, link_target

logger = logging.getLogger(__name__)

HtmlSerializer = Callable[[Any, str], Optional[str]]


@dataclass
class _OpenSpan:
    """A span waiting for its end position, with the HTML gathered so far."""

    span: Span
    parts: List[str] = field(default_factory=list)


class SpanRenderer:
    """
    Render one block's text with its spans as inline HTML.

    Instances hold no per-call state and can be shared.
    """

    def __init__(
        self,
        link_resolver: Optional[LinkResolverLike] = None,
        html_serializer: Optional[HtmlSerializer] = None,
        config: Optional[HTMLRenderConfig] = None,
    ) -> None:
        """
        Initialize span renderer.

        Args:
            link_resolver: Resolver for document links in hyperlink spans
            html_serializer: Optional ``(span, content) -> Optional[str]``
                override, consulted before the default mapping
            config: Rendering settings
        """
        self.link_resolver = link_resolver
        self.html_serializer = html_serializer
        self.config = config or DEFAULT_CONFIG

    def render(self, text: str, spans: Sequence[Span]) -> str:
        """
        Render text with its spans.

        Args:
            text: Block text
            spans: Spans over ``text``; may overlap

        Returns:
            Inline HTML with escaped text and newlines turned into line breaks
        """
        starts: Dict[int, List[Span]] = defaultdict(list)
        ends: Dict[int, List[Span]] = defaultdict(list)
        for span in spans:
            if span.start < 0 or span.end <= span.start:
                logger.debug(f"Ignoring span with invalid range: {span!r}")
                continue
            starts[span.start].append(span)
            ends[span.end].append(span)

        output: List[str] = []
        stack: List[_OpenSpan] = []

        for pos, char in enumerate(text):
            for _ in ends.get(pos, ()):
                self._close_top(stack, output)
            for span in starts.get(pos, ()):
                stack.append(_OpenSpan(span))
            escaped = escape_text(char)
            if stack:
                stack[-1].parts.append(escaped)
            else:
                output.append(escaped)

        while stack:
            self._close_top(stack, output)

        return convert_line_breaks("".join(output), self.config.line_break)

    def _close_top(self, stack: List[_OpenSpan], output: List[str]) -> None:
        if not stack:
            return
        closed = stack.pop()
        html = self.serialize(closed.span, "".join(closed.parts))
        if stack:
            stack[-1].parts.append(html)
        else:
            output.append(html)

    def serialize(self, span: Span, content: str) -> str:
        """
        Wrap rendered content in the markup of a span.

        The custom serializer wins when it returns a string.
        """
        if self.html_serializer is not None:
            custom = self.html_serializer(span, content)
            if custom is not None:
                return custom

        if isinstance(span, Strong):
            return f"<strong>{content}</strong>"
        if isinstance(span, Em):
            return f"<em>{content}</em>"
        if isinstance(span, Label):
            return f'<span class="{escape_attribute(span.label)}">{content}</span>'
        if isinstance(span, Hyperlink):
            href = link_href(span.link, self.link_resolver, self.config)
            attributes = " ".join((f'href="{escape_attribute(href)}"',) + link_target(span.link, self.config))
            return f"<a {attributes}>{content}</a>"
        raise RenderingError("Unsupported span kind", type(span).__name__)


def render_spans(
    text: str,
    spans: Sequence[Span],
    link_resolver: Optional[LinkResolverLike] = None,
    html_serializer: Optional[HtmlSerializer] = None,
) -> str:
    """Shortcut for ``SpanRenderer(...).render(text, spans)``."""
    return SpanRenderer(link_resolver, html_serializer).render(text, spans)
