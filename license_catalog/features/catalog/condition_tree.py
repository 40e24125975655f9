from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from license_catalog.domain.enums import NodeType
from license_catalog.features.catalog.localize import DEFAULT_LANGUAGE, localize
from license_catalog.features.catalog.models import RenderedCondition
from license_catalog.features.catalog.reference_index import ReferenceIndex
from license_catalog.features.catalog.schemas import ConditionRecord, as_record_id

logger = logging.getLogger(__name__)

_BRANCH_TYPES = (NodeType.and_.value, NodeType.or_.value)


def _render_leaf(
    node: Mapping[str, Any],
    conditions: ReferenceIndex[ConditionRecord],
    depth: int,
    language: str,
) -> RenderedCondition | None:
    ref = as_record_id(node.get("ref"))
    condition = conditions.get(ref) if isinstance(ref, str) else None
    if condition is None:
        logger.debug("Skipping dangling condition ref %r", ref)
        return None
    name = localize(condition.name, language)
    description = localize(condition.description, language)
    if not name and not description:
        return None
    return RenderedCondition(
        kind=NodeType.leaf.value,
        depth=depth,
        condition_type=condition.condition_type,
        name=name,
        description=description,
    )


def render_condition_tree(
    node: Mapping[str, Any],
    conditions: ReferenceIndex[ConditionRecord],
    depth: int = 0,
    *,
    language: str = DEFAULT_LANGUAGE,
) -> RenderedCondition | None:
    """Render a raw condition tree, pruning everything with nothing to show.

    - LEAF: resolved through `conditions`; dangling refs and leaves whose
      name and description both localize to "" give None.
    - AND/OR: children are rendered at `depth + 1` in order; a branch with no
      visible child gives None.
    - Any other node type gives None.

    Walks with an explicit stack, so nesting depth is not bounded by the
    interpreter's recursion limit.
    """

    root: list[RenderedCondition] = []
    # ("visit", node, depth, sink) or ("close", kind, depth, sink, children)
    stack: list[tuple] = [("visit", node, depth, root)]

    while stack:
        frame = stack.pop()

        if frame[0] == "close":
            _, kind, level, sink, children = frame
            if children:
                sink.append(RenderedCondition(kind=kind, depth=level, children=tuple(children)))
            continue

        _, current, level, sink = frame
        if not isinstance(current, Mapping):
            logger.debug("Ignoring malformed condition node %r", current)
            continue

        node_type = current.get("type")
        if node_type == NodeType.leaf.value:
            leaf = _render_leaf(current, conditions, level, language)
            if leaf is not None:
                sink.append(leaf)
        elif node_type in _BRANCH_TYPES:
            children: list[RenderedCondition] = []
            stack.append(("close", node_type, level, sink, children))
            for child in reversed(current.get("children") or []):
                stack.append(("visit", child, level + 1, children))
        else:
            logger.debug("Ignoring condition node of unknown type %r", node_type)

    return root[0] if root else None
