"""HTML sanitization for user supplied text."""
import re

import bleach

ALLOWED_TAGS = frozenset({
    "a", "abbr", "b", "blockquote", "br", "code", "del", "div", "em",
    "h1", "h2", "h3", "h4", "h5", "h6", "hr", "i", "img", "li", "ol",
    "p", "pre", "s", "small", "span", "strong", "sub", "sup",
    "table", "tbody", "td", "th", "thead", "tr", "u", "ul",
})

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
    "td": ["colspan", "rowspan"],
    "th": ["colspan", "rowspan"],
}

ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

_TAG = re.compile(r"(<[^>]*>)")


def clean_html(value: str | None) -> str | None:
    """Escape disallowed tags and drop disallowed attributes.

    ``<script>`` and friends are kept as visible text (``&lt;script&gt;``)
    rather than removed, so readers still see what was submitted. Bare
    ampersands in text are left as typed; only ``<`` and ``>`` are escaped.
    """
    if value is None:
        return None
    cleaned = bleach.clean(
        value,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=False,
    )
    # 태그 밖의 텍스트에서만 &amp; 를 되돌립니다. (태그 속성값은 그대로)
    return "".join(
        part if part.startswith("<") else part.replace("&amp;", "&")
        for part in _TAG.split(cleaned)
    )
