from __future__ import annotations

import logging
from dataclasses import dataclass

from license_catalog.features.catalog.condition_tree import render_condition_tree
from license_catalog.features.catalog.localize import DEFAULT_LANGUAGE, localize
from license_catalog.features.catalog.models import ActionEntry, LicenseCard, NoticeEntry, PermissionSection
from license_catalog.features.catalog.reference_index import ReferenceIndex
from license_catalog.features.catalog.schemas import (
    ActionRecord,
    ConditionRecord,
    LicenseRecord,
    NoticeRecord,
    PermissionRecord,
    Ref,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogIndices:
    actions: ReferenceIndex[ActionRecord]
    conditions: ReferenceIndex[ConditionRecord]
    notices: ReferenceIndex[NoticeRecord]


def _resolve_actions(refs: list[Ref], actions: ReferenceIndex[ActionRecord], language: str) -> list[ActionEntry]:
    out: list[ActionEntry] = []
    for r in refs:
        action = actions.get(r.ref) if r.ref is not None else None
        if action is None:
            logger.debug("Skipping dangling action ref %r", r.ref)
            continue
        name = localize(action.name, language)
        description = localize(action.description, language)
        if name or description:
            out.append(ActionEntry(name=name, description=description))
    return out


def _resolve_notices(refs: list[Ref], notices: ReferenceIndex[NoticeRecord], language: str) -> list[NoticeEntry]:
    out: list[NoticeEntry] = []
    for r in refs:
        notice = notices.get(r.ref) if r.ref is not None else None
        if notice is None:
            logger.debug("Skipping dangling notice ref %r", r.ref)
            continue
        description = localize(notice.description, language)
        content = localize(notice.content, language)
        if description or content:
            out.append(NoticeEntry(description=description, content=content))
    return out


def compose_permission(
    permission: PermissionRecord,
    indices: CatalogIndices,
    *,
    language: str = DEFAULT_LANGUAGE,
) -> PermissionSection | None:
    """Resolve one permission; None when nothing in it is displayable."""

    summary = localize(permission.summary, language)
    description = localize(permission.description, language)
    actions = _resolve_actions(permission.actions, indices.actions, language)
    conditions = None
    if permission.condition_head is not None:
        conditions = render_condition_tree(permission.condition_head, indices.conditions, language=language)

    if not (summary or description or actions or conditions):
        return None
    return PermissionSection(
        summary=summary,
        description=description,
        actions=tuple(actions),
        conditions=conditions,
    )


def compose_card(
    license: LicenseRecord,
    indices: CatalogIndices,
    *,
    language: str = DEFAULT_LANGUAGE,
) -> LicenseCard:
    """Build the card for one license.

    Never raises on missing data: unresolvable permissions and notices are
    dropped and the card degrades to its header.
    """

    permissions = (compose_permission(p, indices, language=language) for p in license.permissions)
    return LicenseCard(
        name=license.name,
        spdx=license.spdx,
        summary=localize(license.summary, language),
        description=localize(license.description, language),
        permissions=tuple(p for p in permissions if p is not None),
        notices=tuple(_resolve_notices(license.notices, indices.notices, language)),
        content=license.content,
    )
