"""Small downtown scene: proof of concept.

Three buildings side by side and three antennas:

   (-13,7)
     +-----+            north_mast (0,12) r=6
     | lib |  +--------+
     |     |  |  hall  |  +-----------+
     +-----+  +--------+  |  station  |
                          +-----------+
                                  harbor (14,-8) r=3

rooftop_1 sits on top of the library, which is allowed:
buildings and antennas never conflict with each other.
"""

from pathlib import Path

from kover.errors import SceneError
from kover.parser import parse_scene, read_scene
from kover.queries import describe, format_bounding_box

scene_file = Path(__file__).parent / "downtown.scene"

with scene_file.open() as f:
    scene = read_scene(f)

print(describe(scene))
print(format_bounding_box(scene))

# --- A rejected variant: the annex overlaps city hall ---
try:
    parse_scene(scene_file.read_text().replace(
        "end scene", "building annex 3 0 2 2\nend scene"
    ))
except SceneError as e:
    print(f"Rejected (line {e.line_num}): {e}")
