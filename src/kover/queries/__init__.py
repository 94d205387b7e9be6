"""Scene query tools.

- bounding_box / format_bounding_box: extent of everything in the scene
- summarize: element counts
- describe: full listing sorted by identifier
- scene_to_dict: plain-data export for JSON output
"""

from kover.queries.scene import (
    bounding_box,
    describe,
    format_bounding_box,
    scene_to_dict,
    summarize,
)

__all__ = [
    "bounding_box",
    "describe",
    "format_bounding_box",
    "scene_to_dict",
    "summarize",
]
