"""HTML-related utility helpers."""

from __future__ import annotations

import logging
import math
import re
from html import escape as _html_escape
from typing import Any, Mapping, Optional, Union

from blockrender.constants import DEPS_HTML, FILE_TYPE_COLORS, FILE_TYPE_DEFAULT_COLOR, UNSAFE_URL_SCHEMES
from blockrender.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)

_BYTE_UNITS = ("Bytes", "KB", "MB", "GB")

# Browsers drop these while parsing a URL scheme
_URL_IGNORED_CHARS = re.compile(r"[\x00-\x20\x7f]+")

# Appended after the author's own declarations so they win on duplicates
_ENFORCED_IFRAME_STYLES = (
    "display:block",
    "width:100%",
    "height:100%",
    "position:absolute",
    "inset:0",
    "border:none",
    "border-radius:0",
)

_FILE_CATEGORIES: dict[str, frozenset[str]] = {
    "document": frozenset({".doc", ".docx", ".pdf", ".txt", ".rtf"}),
    "spreadsheet": frozenset({".xls", ".xlsx", ".csv"}),
    "presentation": frozenset({".ppt", ".pptx"}),
    "archive": frozenset({".zip", ".rar", ".7z", ".tar", ".gz"}),
    "code": frozenset({".js", ".ts", ".jsx", ".tsx", ".css", ".html", ".json", ".xml", ".sql"}),
    "ebook": frozenset({".epub", ".mobi"}),
}


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def html_attrs(attributes: Mapping[str, Union[str, int, bool, None]]) -> str:
    """Build an attribute string with a leading space per attribute.

    ``None`` and ``False`` values are omitted, ``True`` renders a bare
    attribute, and empty strings are omitted for ``class`` only.

    Examples
    --------
    >>> html_attrs({"id": "h2-2", "class": "", "controls": True})
    ' id="h2-2" controls'

    """
    parts: list[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        if name == "class" and value == "":
            continue
        parts.append(f' {name}="{escape_html(str(value))}"')
    return "".join(parts)


def is_safe_url(url: str) -> bool:
    """Return False for URLs with a script-capable or inline-data scheme."""
    return not _URL_IGNORED_CHARS.sub("", url).lower().startswith(UNSAFE_URL_SCHEMES)


def _filter_style(style: str) -> list[str]:
    declarations = []
    for declaration in style.split(";"):
        name, sep, value = declaration.partition(":")
        if not sep:
            continue
        name = name.strip().lower()
        if name in ("width", "height") or not name:
            continue
        declarations.append(f"{name}:{value.strip()}")
    return declarations


@requires_dependencies("video embeds", DEPS_HTML)
def sanitize_iframe_html(markup: str) -> str:
    """Reduce embed markup to its iframes, forced to fill their container.

    Only ``<iframe>`` elements are kept. On each one the ``width`` and
    ``height`` attributes and the width/height style declarations are
    removed, event-handler and ``srcdoc`` attributes are stripped, iframes
    whose source uses an unsafe scheme (``javascript:``, ``vbscript:``,
    ``data:``) are dropped, and fill styles are appended to the inline style.

    Parameters
    ----------
    markup : str
        Embed HTML supplied by the document author

    Returns
    -------
    str
        Sanitized iframe markup (empty when there is no iframe)

    """
    from bs4 import BeautifulSoup

    soup = BeautifulSoup(markup, "html.parser")
    iframes = []
    for iframe in soup.find_all("iframe"):
        for attr in list(iframe.attrs):
            if attr.lower() in ("width", "height", "srcdoc") or attr.lower().startswith("on"):
                del iframe[attr]
        if not is_safe_url(str(iframe.get("src", ""))):
            logger.debug("Dropping iframe with unsafe source")
            continue
        declarations = _filter_style(str(iframe.get("style", "")))
        iframe["style"] = ";".join(declarations + list(_ENFORCED_IFRAME_STYLES)) + ";"
        iframe.clear()
        iframes.append(str(iframe))
    return "".join(iframes)


def format_bytes(size: Any) -> Optional[str]:
    """Format a byte count with binary units.

    Parameters
    ----------
    size : Any
        Byte count; anything that is not a non-negative number yields None

    Returns
    -------
    str or None
        Human-readable size such as ``"1.5 KB"``

    Examples
    --------
    >>> format_bytes(1536)
    '1.5 KB'
    >>> format_bytes(0)
    '0 Bytes'

    """
    if isinstance(size, bool) or not isinstance(size, (int, float)) or size < 0 or not math.isfinite(size):
        return None
    if size == 0:
        return "0 Bytes"
    value = float(size)
    exponent = 0
    while value >= 1024 and exponent < len(_BYTE_UNITS) - 1:
        value /= 1024
        exponent += 1
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{text} {_BYTE_UNITS[exponent]}"


def get_file_category(extension: Optional[str]) -> str:
    """Classify a file extension (``".pdf"``) into a broad category."""
    ext = (extension or "").lower()
    for category, extensions in _FILE_CATEGORIES.items():
        if ext in extensions:
            return category
    return "file"


def file_type_color(extension: Optional[str]) -> str:
    """Return the color classes for a file badge."""
    return FILE_TYPE_COLORS.get((extension or "").lower(), FILE_TYPE_DEFAULT_COLOR)


__all__ = [
    "escape_html",
    "file_type_color",
    "format_bytes",
    "get_file_category",
    "html_attrs",
    "sanitize_iframe_html",
]
