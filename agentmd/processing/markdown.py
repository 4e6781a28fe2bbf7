"""Default HTML-to-Markdown converter injected into the pipeline."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from .normalize import normalize

logger = logging.getLogger(__name__)

_DROP_TAGS = ("script", "style", "noscript", "svg", "template")


def html_to_markdown(html: str) -> str:
    """Convert *html* to clean Markdown.

    Uses markdownify with ATX headings, ``-`` bullets and fenced code whose
    language comes from ``language-*`` classes.  Script-like tags are dropped
    first.  If markdownify fails the plain text of the document is used.
    """
    if not html or not html.strip():
        return ""

    soup = BeautifulSoup(html, "lxml")
    for tag in soup.find_all(_DROP_TAGS):
        tag.decompose()

    try:
        from markdownify import markdownify  # type: ignore[import-untyped]

        md = markdownify(
            str(soup),
            heading_style="ATX",
            bullets="-",
            code_language_callback=_detect_lang,
        )
    except Exception as exc:
        logger.debug("markdownify failed, falling back to plain text: %s", exc)
        md = soup.get_text(separator="\n")

    return normalize(md)


def _detect_lang(el: object) -> str:
    """Return the ``language-*`` hint of a ``<pre>`` element or its ``<code>`` child."""
    candidates = [el]
    find = getattr(el, "find", None)
    if find is not None:
        code = find("code")
        if code is not None:
            candidates.append(code)
    for node in candidates:
        getter = getattr(node, "get", None)
        classes = (getter("class") if getter else None) or []
        for cls in classes:
            if isinstance(cls, str) and cls.startswith("language-"):
                return cls[len("language-"):]
    return ""
