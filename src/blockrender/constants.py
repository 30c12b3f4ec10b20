#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the blockrender library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Block Type Tags - the closed set of editor block tags understood on input
3. Presentation Classes - utility class tables used by the style resolver and renderers
4. Rendering Defaults - default option values
5. Optional Dependencies - packages used by lazily loaded collaborators
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

Alignment = Literal["left", "center", "right", "justify"]
ColorScheme = Literal["light", "dark"]
ColumnSizingMode = Literal["unsized", "mixed", "percent"]
ColumnUnit = Literal["px", "%"]

# =============================================================================
# Block Type Tags
# =============================================================================

BLOCK_PARAGRAPH = "paragraph"
BLOCK_HEADING = "heading"
BLOCK_QUOTE = "quote"
BLOCK_BULLET_ITEM = "bulletListItem"
BLOCK_NUMBERED_ITEM = "numberedListItem"
BLOCK_CODE = "codeBlock"
BLOCK_TABLE = "table"
BLOCK_DIVIDER = "divider"
BLOCK_IMAGE = "enhancedImage"
BLOCK_VIDEO = "enhancedVideo"
BLOCK_AUDIO = "enhancedAudio"
BLOCK_FILE = "enhancedFile"
BLOCK_DIAGRAM = "mermaid"

# Stock editor media tags map onto the enhanced variants
BLOCK_TYPE_ALIASES: dict[str, str] = {
    "image": BLOCK_IMAGE,
    "video": BLOCK_VIDEO,
    "audio": BLOCK_AUDIO,
    "file": BLOCK_FILE,
}

INLINE_TEXT = "text"
INLINE_LINK = "link"
TABLE_CELL = "tableCell"

DEFAULT_COLOR = "default"

# =============================================================================
# Presentation Classes
# =============================================================================

# Named editor color -> (foreground class, background class)
COLOR_PALETTE: dict[str, tuple[str, str]] = {
    "gray": ("text-gray-400", "bg-gray-200"),
    "brown": ("text-stone-700", "bg-stone-100"),
    "red": ("text-red-600", "bg-red-100"),
    "orange": ("text-orange-600", "bg-orange-100"),
    "yellow": ("text-yellow-600", "bg-yellow-100"),
    "green": ("text-teal-700", "bg-teal-100"),
    "blue": ("text-sky-700", "bg-sky-100"),
    "purple": ("text-violet-600", "bg-violet-100"),
    "pink": ("text-pink-600", "bg-pink-100"),
}

# Evaluation order of boolean text styles is significant
TEXT_STYLE_CLASSES: dict[str, str] = {
    "bold": "font-bold",
    "italic": "italic",
    "underline": "underline underline-offset-4",
    "strike": "line-through",
    "code": "font-mono bg-gray-100 dark:bg-gray-800 px-1 rounded text-sm",
}

# Left is the implicit baseline and has no entry
ALIGNMENT_CLASSES: dict[str, str] = {
    "center": "text-center",
    "right": "text-right",
    "justify": "text-justify",
}

_HEADING_BASE = "text-gray-900 dark:text-gray-100"

HEADING_CLASSES: dict[int, str] = {
    1: f"font-extrabold {_HEADING_BASE} text-3xl leading-normal sm:text-4xl sm:leading-normal "
    "md:text-5xl md:leading-normal",
    2: f"font-bold {_HEADING_BASE} text-2xl leading-normal sm:text-3xl sm:leading-normal "
    "md:text-4xl md:leading-normal",
    3: f"font-bold {_HEADING_BASE} text-xl leading-normal sm:text-2xl sm:leading-normal "
    "md:text-3xl md:leading-normal",
    4: f"font-semibold {_HEADING_BASE} text-lg leading-relaxed sm:text-xl sm:leading-relaxed "
    "md:text-2xl md:leading-relaxed",
    5: f"font-semibold {_HEADING_BASE} text-base leading-relaxed sm:text-lg sm:leading-relaxed "
    "md:text-xl md:leading-relaxed",
    6: f"font-medium {_HEADING_BASE} text-base leading-relaxed",
}

# Marker styles cycle with nesting depth
BULLET_LIST_STYLES: tuple[str, ...] = ("list-disc", "list-[circle]", "list-[square]", "list-dash")
NUMBERED_LIST_STYLES: tuple[str, ...] = (
    "list-decimal",
    "list-decimal-paren",
    "list-[lower-alpha]",
    "list-[lower-roman]",
)
LIST_CONTAINER_CLASSES = "mb-4 space-y-2 pl-6"
LIST_ITEM_CLASSES = "wrap-break-word leading-relaxed"
CHILDREN_CONTAINER_CLASSES = "mt-1 ml-2 w-full"

PARAGRAPH_CLASSES = "mb-4 leading-relaxed"
QUOTE_CLASSES = (
    "rounded-lg border-l-4 border-gray-300 bg-gray-50 py-2 pr-2 pl-4 text-gray-700 italic "
    "dark:border-gray-600 dark:bg-gray-800/50 dark:text-gray-300"
)
QUOTE_SPACING_CLASSES = "mb-4 leading-relaxed"
DIVIDER_CLASSES = "my-6 border-t border-gray-300 dark:border-gray-600"
LINK_CLASSES = (
    "inline-block max-w-full rounded wrap-break-word text-blue-600 decoration-2 underline-offset-2 "
    "transition-colors hover:text-blue-800 hover:underline focus:ring-2 focus:ring-blue-300 "
    "focus:outline-none dark:text-blue-300 dark:hover:text-blue-100 dark:focus:ring-blue-700"
)

TABLE_CLASSES = "min-w-full table-fixed border-collapse"
TABLE_WRAPPER_CLASSES = "my-4"
TABLE_CARD_CLASSES = (
    "overflow-hidden rounded-lg border-t border-l border-b border-gray-200 bg-white shadow-sm "
    "dark:border-gray-700 dark:bg-gray-800"
)
TABLE_SCROLL_CLASSES = "overflow-x-auto"
TABLE_BODY_ROW_CLASSES = "transition-colors hover:bg-gray-50 dark:hover:bg-gray-900/50"
TABLE_CELL_BASE_CLASSES = "px-2 py-2 text-sm border-b border-r border-gray-200 dark:border-gray-700"
TABLE_HEADER_CELL_CLASSES = "py-3 font-semibold text-gray-900 bg-gray-50 dark:bg-gray-900 dark:text-gray-100"
TABLE_BODY_CELL_CLASSES = "text-gray-700 dark:text-gray-200"
TABLE_EMPTY_CELL_CLASSES = "text-gray-400 dark:text-gray-500"

MEDIA_JUSTIFY_CLASSES: dict[str, str] = {"left": "justify-start", "right": "justify-end"}
MEDIA_JUSTIFY_DEFAULT = "justify-center"
FILE_ALIGNMENT_CLASSES: dict[str, str] = {"center": "mx-auto", "right": "ml-auto", "left": "mr-auto"}

FIGCAPTION_CLASSES = (
    "border-t border-gray-100 bg-gray-50 px-4 py-3 text-center text-sm leading-relaxed font-medium "
    "text-gray-600 dark:border-gray-700 dark:bg-gray-800 dark:text-gray-300"
)
MEDIA_FRAME_CLASSES = (
    "relative overflow-hidden rounded-lg bg-white shadow-sm transition-shadow duration-200 "
    "hover:shadow-md dark:bg-gray-900"
)

FILE_TYPE_COLORS: dict[str, str] = {
    ".pdf": "text-red-600 bg-red-50 border-red-200",
    ".doc": "text-blue-600 bg-blue-50 border-blue-200",
    ".docx": "text-blue-600 bg-blue-50 border-blue-200",
    ".xls": "text-green-600 bg-green-50 border-green-200",
    ".xlsx": "text-green-600 bg-green-50 border-green-200",
    ".ppt": "text-orange-600 bg-orange-50 border-orange-200",
    ".pptx": "text-orange-600 bg-orange-50 border-orange-200",
    ".txt": "text-gray-600 bg-gray-50 border-gray-200",
    ".zip": "text-purple-600 bg-purple-50 border-purple-200",
    ".rar": "text-purple-600 bg-purple-50 border-purple-200",
}
FILE_TYPE_DEFAULT_COLOR = "text-gray-600 bg-gray-50 border-gray-200"

# =============================================================================
# Rendering Defaults
# =============================================================================

# Anchors below this index belong to the article title and summary
DEFAULT_START_HEADING_INDEX = 2
DEFAULT_LOCALE = "en"
DEFAULT_COLOR_SCHEME: ColorScheme = "light"
DEFAULT_CODE_THEME_LIGHT = "solarized-light"
DEFAULT_CODE_THEME_DARK = "dracula"
DEFAULT_FILE_URL_PREFIX = "/files"
DEFAULT_IMAGE_WIDTH = 800
DEFAULT_IMAGE_HEIGHT = 600
DEFAULT_VIDEO_WIDTH = "560px"
DEFAULT_VIDEO_HEIGHT = "315px"
DEFAULT_OBJECT_FIT = "contain"
OBJECT_FIT_VALUES = frozenset({"contain", "cover", "fill", "scale-down", "none"})
DEFAULT_DIAGRAM_THEME_LIGHT = "default"
DEFAULT_DIAGRAM_THEME_DARK = "dark"
DEFAULT_DOCUMENT_TITLE = "Document"

# Link and embed sources with these schemes are never emitted
UNSAFE_URL_SCHEMES = ("javascript:", "vbscript:", "data:")

# Short editor language tags expanded before highlighting
CODE_LANGUAGE_ALIASES: dict[str, str] = {
    "ts": "typescript",
    "js": "javascript",
    "py": "python",
    "sh": "bash",
    "yml": "yaml",
    "md": "markdown",
}

# =============================================================================
# Optional Dependencies
# =============================================================================

DEPS_HIGHLIGHT = [("Pygments", "pygments", ">=2.15")]
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12")]
