from __future__ import annotations

import html
import logging
from typing import Any, Callable, Literal, Mapping

from pydantic import BaseModel, Field, JsonValue

logger = logging.getLogger(__name__)

FieldType = Literal["text", "number", "textarea", "children"]


class ComponentField(BaseModel):
    type: FieldType
    defaultValue: JsonValue = None


class ComponentSpec(BaseModel):
    fields: dict[str, ComponentField] = Field(default_factory=dict)

    def defaults(self) -> dict[str, Any]:
        return {
            name: f.defaultValue
            for name, f in self.fields.items()
            if f.type != "children" and f.defaultValue is not None
        }


# Reusable blocks offered by the editor. Field types map 1:1 onto Puck's.
COMPONENTS: dict[str, ComponentSpec] = {
    # A statistic card with a title and numeric value.
    "StatCard": ComponentSpec(
        fields={
            "title": ComponentField(type="text", defaultValue="Untitled Stat"),
            "value": ComponentField(type="number", defaultValue=0),
        }
    ),
    # Arranges its children into equal columns.
    "Grid": ComponentSpec(
        fields={
            "columns": ComponentField(type="number", defaultValue=2),
            "children": ComponentField(type="children"),
        }
    ),
    # Raw markup injected as-is; no markdown conversion happens.
    "Markdown": ComponentSpec(
        fields={
            "content": ComponentField(type="textarea", defaultValue="# Hello world"),
        }
    ),
}


def component_catalogue() -> dict[str, Any]:
    """JSON shape handed to the editor page: {"components": {name: {"fields": ...}}}."""
    return {
        "components": {
            name: spec.model_dump(mode="json", exclude_none=True) for name, spec in COMPONENTS.items()
        }
    }


def _display(value: Any) -> str:
    # Mirrors what React prints for a scalar child: nothing for null and booleans.
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _render_stat_card(props: Mapping[str, Any], _children: str) -> str:
    title = html.escape(_display(props.get("title")))
    value = html.escape(_display(props.get("value")))
    return (
        '<div style="padding: 1rem; border: 1px solid #ccc; border-radius: 4px">'
        f"<strong>{title}</strong><p>{value}</p></div>"
    )


def _render_grid(props: Mapping[str, Any], children: str) -> str:
    try:
        columns = max(1, int(props.get("columns", 2)))
    except (TypeError, ValueError, OverflowError):
        columns = 2
    return (
        f'<div style="display: grid; grid-template-columns: repeat({columns}, 1fr); gap: 1rem">'
        f"{children}</div>"
    )


def _render_markdown(props: Mapping[str, Any], _children: str) -> str:
    return f"<div>{props.get('content', '')}</div>"


RENDERERS: dict[str, Callable[[Mapping[str, Any], str], str]] = {
    "StatCard": _render_stat_card,
    "Grid": _render_grid,
    "Markdown": _render_markdown,
}


def _render_blocks(blocks: Any) -> str:
    if not isinstance(blocks, list):
        return ""
    out: list[str] = []
    for block in blocks:
        if not isinstance(block, dict):
            continue
        block_type = block.get("type")
        spec = COMPONENTS.get(block_type) if isinstance(block_type, str) else None
        renderer = RENDERERS.get(block_type) if isinstance(block_type, str) else None
        if spec is None or renderer is None:
            logger.debug("Skipping unknown block type %r", block_type)
            continue
        raw_props = block.get("props")
        props = {**spec.defaults(), **(raw_props if isinstance(raw_props, dict) else {})}
        children = _render_blocks(props.get("children"))
        out.append(renderer(props, children))
    return "".join(out)


def render_document(data: Any) -> str:
    """
    Render a stored editor document ({"content": [...], "root": {...}}) to HTML.

    Anything that isn't an object renders as an empty page.
    """
    if not isinstance(data, dict):
        return ""
    return _render_blocks(data.get("content"))
