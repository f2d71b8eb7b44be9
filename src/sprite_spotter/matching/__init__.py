"""Template matching core: color comparison, templates, library, scan and compositing."""

from sprite_spotter.matching.color import color_distance, is_same
from sprite_spotter.matching.compositor import composite, dim
from sprite_spotter.matching.engine import ScanResult, claim_cells, scan, variant_hits
from sprite_spotter.matching.library import (
    BASE_TEMPLATES,
    LIBRARY,
    TemplateVariant,
    build_library,
)
from sprite_spotter.matching.template import (
    MalformedTemplate,
    Role,
    Template,
    body_anchor,
    combined_cells,
    mirror_horizontal,
    visor_anchor,
)

__all__ = [
    # Color
    "color_distance",
    "is_same",
    # Templates
    "Role",
    "Template",
    "MalformedTemplate",
    "body_anchor",
    "visor_anchor",
    "mirror_horizontal",
    "combined_cells",
    # Library
    "BASE_TEMPLATES",
    "LIBRARY",
    "TemplateVariant",
    "build_library",
    # Engine
    "ScanResult",
    "variant_hits",
    "claim_cells",
    "scan",
    # Compositor
    "dim",
    "composite",
]
