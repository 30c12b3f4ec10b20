#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Translated labels used in rendered output.

Rendered pages contain a handful of user-visible strings (copy button
labels, the default image alt text, diagram error messages). They are looked
up through a :class:`Translator`, a callable ``t(key, params)`` that returns
the string for the configured locale.

Lookup falls back to English for locales or keys the catalog lacks, and to
the key itself when even English has no entry, so a missing translation
never breaks rendering.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional

from blockrender.constants import DEFAULT_LOCALE

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

BUILTIN_CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "article.copy": "Copy",
        "article.copied": "Copied",
        "article.copyCode": "Copy {language} code",
        "article.codeSample": "Code sample in {language}",
        "article.defaultImageAlt": "Article image",
        "article.download": "Download",
        "article.videoUnsupported": "Your browser does not support the video element.",
        "article.audioUnsupported": "Your browser does not support the audio element.",
        "article.tableOfContents": "Table of contents",
        "mermaid.error.noCode": "No diagram code provided",
        "mermaid.error.renderFailed": "Diagram rendering failed",
        "mermaid.error.mermaidRenderWithDetail": "Diagram rendering failed: {error}",
        "mermaid.loading.renderingMermaid": "Rendering diagram...",
    },
    "zh": {
        "article.copy": "复制",
        "article.copied": "已复制",
        "article.copyCode": "复制 {language} 代码",
        "article.codeSample": "{language} 代码示例",
        "article.defaultImageAlt": "文章图片",
        "article.download": "下载",
        "article.videoUnsupported": "您的浏览器不支持视频播放。",
        "article.audioUnsupported": "您的浏览器不支持音频播放。",
        "article.tableOfContents": "目录",
        "mermaid.error.noCode": "未提供图表代码",
        "mermaid.error.renderFailed": "图表渲染失败",
        "mermaid.error.mermaidRenderWithDetail": "图表渲染失败：{error}",
        "mermaid.loading.renderingMermaid": "正在渲染图表...",
    },
}


def _interpolate(template: str, params: Optional[Mapping[str, Any]]) -> str:
    if not params:
        return template
    # Unknown placeholders are left as written
    return _PLACEHOLDER.sub(lambda m: str(params[m.group(1)]) if m.group(1) in params else m.group(0), template)


class Translator:
    """Message lookup for one locale.

    Parameters
    ----------
    locale : str, default "en"
        Requested locale; a regional tag such as ``"zh-CN"`` falls back to its
        base language
    catalogs : mapping, optional
        Message catalogs keyed by locale. Entries are merged over the
        built-in catalogs, so a partial catalog only overrides what it
        defines.

    Examples
    --------
    >>> t = Translator("zh")
    >>> t("article.copy")
    '复制'
    >>> t("mermaid.error.mermaidRenderWithDetail", {"error": "bad arrow"})
    '图表渲染失败：bad arrow'

    """

    def __init__(self, locale: str = DEFAULT_LOCALE, catalogs: Optional[Mapping[str, Mapping[str, str]]] = None):
        merged: dict[str, dict[str, str]] = {name: dict(messages) for name, messages in BUILTIN_CATALOGS.items()}
        for name, messages in (catalogs or {}).items():
            merged.setdefault(name, {}).update(messages)
        self._catalogs = merged
        self.locale = self._resolve_locale(locale)

    def _resolve_locale(self, locale: str) -> str:
        if locale in self._catalogs:
            return locale
        base = locale.replace("_", "-").split("-", 1)[0].lower()
        if base in self._catalogs:
            return base
        logger.debug("No catalog for locale %r, using %r", locale, DEFAULT_LOCALE)
        return DEFAULT_LOCALE

    def translate(self, key: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Return the message for ``key`` in the active locale.

        Parameters
        ----------
        key : str
            Dotted message key, e.g. ``"article.copy"``
        params : mapping, optional
            Values substituted for ``{name}`` placeholders

        Returns
        -------
        str
            The translated message, the English message, or ``key`` itself

        """
        template = self._catalogs.get(self.locale, {}).get(key)
        if template is None:
            template = self._catalogs.get(DEFAULT_LOCALE, {}).get(key)
        if template is None:
            logger.debug("Missing translation for key %r", key)
            return key
        return _interpolate(template, params)

    __call__ = translate

    @property
    def available_locales(self) -> list[str]:
        """Locales with a catalog, sorted."""
        return sorted(self._catalogs)
