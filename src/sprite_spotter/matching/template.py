"""Sprite templates: grids of pixel roles with anchor lookup and mirroring."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Flag


class Role(Flag):
    BACKGROUND = 0b0001
    VISOR = 0b0010
    BODY = 0b0100
    WILDCARD = 0b1000


# Single-role cells; anything else is a combination of these
SINGLE_ROLES = (Role.BACKGROUND, Role.VISOR, Role.BODY, Role.WILDCARD)

MIRROR_SUFFIX = "_mirrored"


class MalformedTemplate(ValueError):
    """A template is missing its body or visor anchor."""


@dataclass(frozen=True)
class Template:
    """Jagged grid of roles; ``rows[dy][dx]`` is the cell at offset (dx, dy)."""

    name: str
    rows: tuple[tuple[Role, ...], ...]

    @classmethod
    def from_rows(cls, name: str, rows: Sequence[Sequence[Role]]) -> Template:
        return cls(name=name, rows=tuple(tuple(row) for row in rows))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.rows), default=0)

    def cells(self) -> Iterator[tuple[int, int, Role]]:
        """Yield (dx, dy, role) in row-major order."""
        for dy, row in enumerate(self.rows):
            for dx, role in enumerate(row):
                yield dx, dy, role


def _find_first(template: Template, role: Role) -> tuple[int, int]:
    for dx, dy, cell in template.cells():
        if cell == role:
            return dx, dy
    raise MalformedTemplate(
        f"template {template.name!r} has no {role.name.lower()} cell"
    )


def body_anchor(template: Template) -> tuple[int, int]:
    """(col, row) of the first cell that is exactly BODY."""
    return _find_first(template, Role.BODY)


def visor_anchor(template: Template) -> tuple[int, int]:
    """(col, row) of the first cell that is exactly VISOR."""
    return _find_first(template, Role.VISOR)


def mirror_horizontal(template: Template) -> Template:
    """Return a left-right flipped copy; row count and lengths are unchanged."""
    if template.name.endswith(MIRROR_SUFFIX):
        name = template.name[: -len(MIRROR_SUFFIX)]
    else:
        name = template.name + MIRROR_SUFFIX
    return Template(name=name, rows=tuple(row[::-1] for row in template.rows))


def combined_cells(template: Template) -> list[tuple[int, int, Role]]:
    """Cells carrying more than one role."""
    return [(dx, dy, role) for dx, dy, role in template.cells() if role not in SINGLE_ROLES]
