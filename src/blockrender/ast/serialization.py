#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/blockrender/ast/serialization.py
"""Loading block documents from editor JSON, and dumping them back.

Block-editor payloads are untrusted: they come from a database column, an
API client or an older editor version, and any field may be missing or have
the wrong type. The loader here never raises for a malformed node. Instead:

- fields of the wrong type are treated as absent
- list entries that are not objects are skipped
- unknown block and inline types become ``UnknownBlock`` / ``UnknownInline``
- a block without an id gets a positional fallback id (``block-0.2``)

Only input that cannot be decoded as a document at all (invalid JSON, or JSON
that is neither a block list nor an object holding one) raises
:class:`~blockrender.exceptions.DocumentLoadError`.

Examples
--------
    >>> from blockrender.ast.serialization import json_to_blocks
    >>> blocks = json_to_blocks('[{"id": "a", "type": "paragraph", "content": "Hi"}]')
    >>> blocks[0].content[0].text
    'Hi'

"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from blockrender.ast.nodes import (
    Audio,
    Block,
    BlockProps,
    BulletListItem,
    CodeBlock,
    Diagram,
    Divider,
    File,
    Heading,
    Image,
    Inline,
    Link,
    NumberedListItem,
    Paragraph,
    Quote,
    StyledText,
    Table,
    TableCell,
    TableContent,
    TableRow,
    TextStyles,
    UnknownBlock,
    UnknownInline,
    Video,
)
from blockrender.constants import BLOCK_TYPE_ALIASES, INLINE_LINK, INLINE_TEXT, TABLE_CELL
from blockrender.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)

_COMMON_PROP_KEYS = ("textColor", "backgroundColor", "textAlignment")
_STYLE_FLAGS = ("bold", "italic", "underline", "strike", "code")


# ============================================================================
# Defensive field readers
# ============================================================================


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_int(value: Any) -> Optional[int]:
    # bool is an int subclass but never a meaningful number here
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return None


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def _as_size(value: Any) -> Union[int, str, None]:
    """Read a media dimension, which editors store as either a number or a string."""
    if isinstance(value, str):
        return value
    return _as_int(value)


def _as_span(value: Any) -> int:
    span = _as_int(value)
    return span if span is not None and span >= 1 else 1


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


# ============================================================================
# Inline content
# ============================================================================


def _parse_styles(data: Any) -> TextStyles:
    data = _as_mapping(data)
    return TextStyles(
        **{flag: data.get(flag) is True for flag in _STYLE_FLAGS},
        text_color=_as_str(data.get("textColor")),
        background_color=_as_str(data.get("backgroundColor")),
    )


def _parse_styled_text(data: Mapping[str, Any]) -> StyledText:
    return StyledText(text=_as_str(data.get("text")) or "", styles=_parse_styles(data.get("styles")))


def _parse_link(data: Mapping[str, Any]) -> Link:
    raw_content = data.get("content")
    content: list[StyledText] = []
    if isinstance(raw_content, str):
        content.append(StyledText(text=raw_content))
    elif isinstance(raw_content, list):
        for item in raw_content:
            if isinstance(item, Mapping) and item.get("type", INLINE_TEXT) == INLINE_TEXT:
                content.append(_parse_styled_text(item))
            else:
                logger.debug("Skipping non-text item inside link: %r", item)
    return Link(href=_as_str(data.get("href")) or "", content=content)


def parse_inline_content(data: Any) -> list[Inline]:
    """Parse an inline content array.

    A bare string (as some editor versions store simple content) becomes a
    single unstyled text run. Anything else that is not a list yields an empty
    list.

    Parameters
    ----------
    data : Any
        Raw ``content`` value

    Returns
    -------
    list of Inline
        Parsed inline nodes in input order

    """
    if isinstance(data, str):
        return [StyledText(text=data)] if data else []
    if not isinstance(data, list):
        return []

    items: list[Inline] = []
    for item in data:
        if not isinstance(item, Mapping):
            logger.debug("Skipping non-object inline item: %r", item)
            continue
        item_type = item.get("type")
        if item_type == INLINE_TEXT:
            items.append(_parse_styled_text(item))
        elif item_type == INLINE_LINK:
            items.append(_parse_link(item))
        else:
            items.append(UnknownInline(type_name=str(item_type or ""), raw=dict(item)))
    return items


# ============================================================================
# Block properties and tables
# ============================================================================


def _parse_props(data: Any, consumed: tuple[str, ...] = ()) -> BlockProps:
    data = _as_mapping(data)
    skip = set(_COMMON_PROP_KEYS) | set(consumed)
    return BlockProps(
        text_color=_as_str(data.get("textColor")),
        background_color=_as_str(data.get("backgroundColor")),
        text_alignment=_as_str(data.get("textAlignment")),
        extra={key: value for key, value in data.items() if key not in skip},
    )


def _parse_table_cell(data: Any) -> TableCell:
    if isinstance(data, list):
        return TableCell(content=parse_inline_content(data))
    if isinstance(data, Mapping) and (data.get("type") == TABLE_CELL or "content" in data):
        props = _as_mapping(data.get("props"))
        return TableCell(
            content=parse_inline_content(data.get("content")),
            colspan=_as_span(props.get("colspan")),
            rowspan=_as_span(props.get("rowspan")),
            props=_parse_props(props, consumed=("colspan", "rowspan")),
        )
    # Keep the column position even when the cell itself is unusable
    logger.debug("Treating unrecognised table cell as empty: %r", data)
    return TableCell()


def _parse_table_content(data: Any) -> Optional[TableContent]:
    if not isinstance(data, Mapping):
        return None

    raw_widths = data.get("columnWidths")
    column_widths = [_as_number(width) for width in raw_widths] if isinstance(raw_widths, list) else []

    rows: list[TableRow] = []
    raw_rows = data.get("rows")
    if isinstance(raw_rows, list):
        for raw_row in raw_rows:
            if not isinstance(raw_row, Mapping):
                logger.debug("Skipping non-object table row: %r", raw_row)
                continue
            raw_cells = raw_row.get("cells")
            cells = [_parse_table_cell(cell) for cell in raw_cells] if isinstance(raw_cells, list) else []
            rows.append(TableRow(cells=cells))

    return TableContent(column_widths=column_widths, rows=rows)


# ============================================================================
# Block deserializers
# ============================================================================


def _content_fields(data: Mapping[str, Any], props: Mapping[str, Any]) -> dict[str, Any]:
    return {"content": parse_inline_content(data.get("content"))}


def _heading_fields(data: Mapping[str, Any], props: Mapping[str, Any]) -> dict[str, Any]:
    return {"level": _as_int(props.get("level")), "content": parse_inline_content(data.get("content"))}


def _code_fields(data: Mapping[str, Any], props: Mapping[str, Any]) -> dict[str, Any]:
    return {"language": _as_str(props.get("language")), "content": parse_inline_content(data.get("content"))}


def _table_fields(data: Mapping[str, Any], props: Mapping[str, Any]) -> dict[str, Any]:
    return {"table": _parse_table_content(data.get("content"))}


def _no_fields(data: Mapping[str, Any], props: Mapping[str, Any]) -> dict[str, Any]:
    return {}


def _image_fields(data: Mapping[str, Any], props: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "src": _as_str(props.get("src")) or _as_str(props.get("url")),
        "alt": _as_str(props.get("alt")),
        "caption": _as_str(props.get("caption")),
        "width": _as_size(props.get("width") if "width" in props else props.get("previewWidth")),
        "height": _as_size(props.get("height")),
        "alignment": _as_str(props.get("alignment")),
        "object_fit": _as_str(props.get("objectFit")),
    }


def _video_fields(data: Mapping[str, Any], props: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "source": _as_str(props.get("content")) or _as_str(props.get("url")),
        "width": _as_size(props.get("width")),
        "height": _as_size(props.get("height")),
        "title": _as_str(props.get("title")) or _as_str(props.get("caption")),
        "alignment": _as_str(props.get("alignment")),
    }


def _audio_fields(data: Mapping[str, Any], props: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "source": _as_str(props.get("content")) or _as_str(props.get("url")),
        "title": _as_str(props.get("title")) or _as_str(props.get("caption")),
        "artist": _as_str(props.get("artist")),
        "alignment": _as_str(props.get("alignment")),
    }


def _file_fields(data: Mapping[str, Any], props: Mapping[str, Any]) -> dict[str, Any]:
    size = _as_int(props.get("size"))
    return {
        "filename": _as_str(props.get("filename")),
        "original_name": _as_str(props.get("originalName")) or _as_str(props.get("name")),
        "size": size if size is not None and size >= 0 else None,
        "extension": _as_str(props.get("fileExtension")),
        "alignment": _as_str(props.get("alignment")),
    }


def _diagram_fields(data: Mapping[str, Any], props: Mapping[str, Any]) -> dict[str, Any]:
    return {"code": _as_str(props.get("code")), "theme": _as_str(props.get("theme"))}


# block type -> (node class, field reader, prop keys consumed by the reader)
_DESERIALIZATION_DISPATCH: dict[str, tuple[type[Block], Callable[..., dict[str, Any]], tuple[str, ...]]] = {
    Paragraph.block_type: (Paragraph, _content_fields, ()),
    Quote.block_type: (Quote, _content_fields, ()),
    BulletListItem.block_type: (BulletListItem, _content_fields, ()),
    NumberedListItem.block_type: (NumberedListItem, _content_fields, ()),
    Heading.block_type: (Heading, _heading_fields, ("level",)),
    CodeBlock.block_type: (CodeBlock, _code_fields, ("language",)),
    Table.block_type: (Table, _table_fields, ()),
    Divider.block_type: (Divider, _no_fields, ()),
    Image.block_type: (
        Image,
        _image_fields,
        ("src", "url", "alt", "caption", "width", "previewWidth", "height", "alignment", "objectFit"),
    ),
    Video.block_type: (Video, _video_fields, ("content", "url", "width", "height", "title", "caption", "alignment")),
    Audio.block_type: (Audio, _audio_fields, ("content", "url", "title", "caption", "artist", "alignment")),
    File.block_type: (File, _file_fields, ("filename", "originalName", "name", "size", "fileExtension", "alignment")),
    Diagram.block_type: (Diagram, _diagram_fields, ("code", "theme")),
}


def dict_to_block(data: Any, path: str = "0") -> Optional[Block]:
    """Convert one editor block object into a block node.

    Parameters
    ----------
    data : Any
        Raw block object as decoded from JSON
    path : str, default "0"
        Position of the block in the document (``"2"``, ``"2.0"`` for its
        first child, ...), used only to build a fallback id

    Returns
    -------
    Block or None
        The parsed block, or None when ``data`` is not an object

    Examples
    --------
    >>> block = dict_to_block({"id": "h", "type": "heading", "props": {"level": 2}, "content": "Intro"})
    >>> block.level
    2

    """
    if not isinstance(data, Mapping):
        logger.debug("Skipping non-object block at %s: %r", path, data)
        return None

    block_id = _as_str(data.get("id")) or f"block-{path}"
    raw_props = _as_mapping(data.get("props"))
    children = dicts_to_blocks(data.get("children"), _parent_path=path)

    raw_type = _as_str(data.get("type")) or ""
    block_type = BLOCK_TYPE_ALIASES.get(raw_type, raw_type)
    entry = _DESERIALIZATION_DISPATCH.get(block_type)
    if entry is None:
        logger.debug("Unknown block type %r at %s", raw_type, path)
        return UnknownBlock(
            id=block_id,
            props=_parse_props(raw_props),
            children=children,
            type_name=raw_type,
            raw=dict(data),
        )

    cls, read_fields, consumed = entry
    return cls(
        id=block_id,
        props=_parse_props(raw_props, consumed=consumed),
        children=children,
        **read_fields(data, raw_props),
    )


def dicts_to_blocks(items: Any, _parent_path: Optional[str] = None) -> list[Block]:
    """Convert a list of editor block objects into block nodes.

    Non-object entries are skipped; anything other than a list yields an
    empty list.

    Parameters
    ----------
    items : Any
        Raw block list

    Returns
    -------
    list of Block
        Parsed blocks in input order

    """
    if not isinstance(items, list):
        return []

    blocks: list[Block] = []
    for position, item in enumerate(items):
        path = str(position) if _parent_path is None else f"{_parent_path}.{position}"
        block = dict_to_block(item, path)
        if block is not None:
            blocks.append(block)
    return blocks


def json_to_blocks(json_str: Union[str, bytes]) -> list[Block]:
    """Decode a JSON document into block nodes.

    The top level may be a block list, or an object holding the list under
    ``blocks`` or ``content``.

    Parameters
    ----------
    json_str : str or bytes
        Serialized document

    Returns
    -------
    list of Block
        Parsed blocks

    Raises
    ------
    DocumentLoadError
        If the input is not valid JSON or has no block list at the top level

    """
    try:
        data = json.loads(json_str)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Document is not valid JSON: {e}", original_error=e) from e

    if isinstance(data, Mapping):
        for key in ("blocks", "content"):
            if isinstance(data.get(key), list):
                return dicts_to_blocks(data[key])
        raise DocumentLoadError("Document object has no 'blocks' or 'content' list")

    if not isinstance(data, list):
        raise DocumentLoadError(f"Document must be a list of blocks, got {type(data).__name__}")

    return dicts_to_blocks(data)


# ============================================================================
# Serialization back to editor JSON
# ============================================================================


def _props_to_dict(props: BlockProps) -> dict[str, Any]:
    result: dict[str, Any] = dict(props.extra)
    for key, value in zip(_COMMON_PROP_KEYS, (props.text_color, props.background_color, props.text_alignment)):
        if value is not None:
            result[key] = value
    return result


def _styles_to_dict(styles: TextStyles) -> dict[str, Any]:
    result: dict[str, Any] = {flag: True for flag in _STYLE_FLAGS if getattr(styles, flag)}
    if styles.text_color is not None:
        result["textColor"] = styles.text_color
    if styles.background_color is not None:
        result["backgroundColor"] = styles.background_color
    return result


def inline_to_dict(node: Inline) -> dict[str, Any]:
    """Convert an inline node back to its editor representation."""
    if isinstance(node, StyledText):
        return {"type": INLINE_TEXT, "text": node.text, "styles": _styles_to_dict(node.styles)}
    if isinstance(node, Link):
        return {"type": INLINE_LINK, "href": node.href, "content": [inline_to_dict(item) for item in node.content]}
    return dict(node.raw) if node.raw else {"type": node.type_name}


def _table_to_dict(table: TableContent) -> dict[str, Any]:
    rows = []
    for row in table.rows:
        cells = []
        for cell in row.cells:
            cell_props = _props_to_dict(cell.props)
            cell_props["colspan"] = cell.colspan
            cell_props["rowspan"] = cell.rowspan
            cells.append(
                {"type": TABLE_CELL, "content": [inline_to_dict(item) for item in cell.content], "props": cell_props}
            )
        rows.append({"cells": cells})
    return {"type": "tableContent", "columnWidths": list(table.column_widths), "rows": rows}


# node attribute -> editor prop key, per block type
_PROP_KEYS: dict[type[Block], tuple[tuple[str, str], ...]] = {
    Heading: (("level", "level"),),
    CodeBlock: (("language", "language"),),
    Image: (
        ("src", "src"),
        ("alt", "alt"),
        ("caption", "caption"),
        ("width", "width"),
        ("height", "height"),
        ("alignment", "alignment"),
        ("object_fit", "objectFit"),
    ),
    Video: (("source", "content"), ("width", "width"), ("height", "height"), ("title", "title"), ("alignment", "alignment")),
    Audio: (("source", "content"), ("title", "title"), ("artist", "artist"), ("alignment", "alignment")),
    File: (
        ("filename", "filename"),
        ("original_name", "originalName"),
        ("size", "size"),
        ("extension", "fileExtension"),
        ("alignment", "alignment"),
    ),
    Diagram: (("code", "code"), ("theme", "theme")),
}


def block_to_dict(block: Block) -> dict[str, Any]:
    """Convert a block node back to its editor representation.

    Unknown blocks are returned as their original payload.

    Parameters
    ----------
    block : Block
        Block to convert

    Returns
    -------
    dict
        Editor block object with ``id``, ``type``, ``props``, ``content`` and
        ``children``

    """
    if isinstance(block, UnknownBlock):
        return dict(block.raw) if block.raw else {"id": block.id, "type": block.type_name}

    props = _props_to_dict(block.props)
    for attr, key in _PROP_KEYS.get(type(block), ()):
        value = getattr(block, attr)
        if value is not None:
            props[key] = value

    result: dict[str, Any] = {"id": block.id, "type": block.block_type, "props": props}
    if isinstance(block, Table):
        result["content"] = _table_to_dict(block.table) if block.table is not None else None
    elif hasattr(block, "content"):
        result["content"] = [inline_to_dict(item) for item in getattr(block, "content")]
    result["children"] = [block_to_dict(child) for child in block.children]
    return result


def blocks_to_json(blocks: list[Block], indent: Optional[int] = None) -> str:
    """Serialize blocks to an editor JSON string (Unicode preserved)."""
    return json.dumps([block_to_dict(block) for block in blocks], indent=indent, ensure_ascii=False)


__all__ = [
    "block_to_dict",
    "blocks_to_json",
    "dict_to_block",
    "dicts_to_blocks",
    "inline_to_dict",
    "json_to_blocks",
    "parse_inline_content",
]
