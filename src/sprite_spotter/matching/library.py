"""Fixed sprite catalogue and its expansion into matchable variants."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .template import (
    Role,
    Template,
    body_anchor,
    combined_cells,
    mirror_horizontal,
    visor_anchor,
)

logger = logging.getLogger(__name__)

_ = Role.BACKGROUND
V = Role.VISOR
B = Role.BODY
X = Role.WILDCARD

BASE_TEMPLATES: tuple[Template, ...] = (
    Template.from_rows("backpack_tall", [
        [_, B, B, B],
        [B, B, V, V],
        [B, B, B, B],
        [_, B, B, B],
        [X, B, _, B],
        [X, B, _, B],
    ]),
    Template.from_rows("backpack_standing", [
        [_, B, B, B],
        [B, B, V, V],
        [B, B, B, B],
        [_, B, B, B],
        [X, B, _, B],
    ]),
    Template.from_rows("backpack_raised", [
        [_, B, B, B],
        [B, B, V, V],
        [_, B, B, B],
        [_, B, B, B],
        [X, B, _, B],
    ]),
    Template.from_rows("backpack_raised_short", [
        [_, B, B, B],
        [B, B, V, V],
        [_, B, B, B],
        [X, B, _, B],
    ]),
    Template.from_rows("backpack_squat", [
        [_, B, B, B],
        [B, B, V, V],
        [B, B, B, B],
        [_, B, _, B],
    ]),
    Template.from_rows("backpack_lowered", [
        [_, B, B, B],
        [_, B, V, V],
        [B, B, B, B],
        [_, B, B, B],
        [X, B, _, B],
    ]),
    # Cell (0, 3) accepts background or body; kept as found, pending review
    Template.from_rows("backpack_shadow", [
        [_, B, B, B],
        [B, B, V, V],
        [B, B, B, B],
        [_ | B, B, B, B],
        [_, B, _, B],
    ]),
    Template.from_rows("slim_tall", [
        [B, B, B],
        [B, V, V],
        [B, B, B],
        [B, B, B],
        [B, _, B],
    ]),
    Template.from_rows("slim_short", [
        [B, B, B],
        [B, V, V],
        [B, B, B],
        [B, _, B],
    ]),
)


@dataclass(frozen=True)
class TemplateVariant:
    """A template as the engine matches it, with anchors computed from its own grid."""

    index: int
    template: Template
    mirrored: bool
    body_anchor: tuple[int, int]
    visor_anchor: tuple[int, int]

    @property
    def name(self) -> str:
        return self.template.name


def _make_variant(index: int, template: Template, mirrored: bool) -> TemplateVariant:
    return TemplateVariant(
        index=index,
        template=template,
        mirrored=mirrored,
        body_anchor=body_anchor(template),
        visor_anchor=visor_anchor(template),
    )


def build_library(catalog: Sequence[Template] = BASE_TEMPLATES) -> tuple[TemplateVariant, ...]:
    """
    Expand the catalogue into ``[base0, mirror0, base1, mirror1, ...]``.

    Order is match priority. Raises MalformedTemplate if any variant lacks
    a body or visor anchor.
    """
    variants: list[TemplateVariant] = []
    for template in catalog:
        for cell in combined_cells(template):
            logger.debug("Template %s has combined-role cell %s", template.name, cell)
        variants.append(_make_variant(len(variants), template, mirrored=False))
        variants.append(
            _make_variant(len(variants), mirror_horizontal(template), mirrored=True)
        )

    logger.debug("Built template library with %d variants", len(variants))
    return tuple(variants)


LIBRARY = build_library()
