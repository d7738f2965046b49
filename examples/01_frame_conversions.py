"""
Example 01: Frame Conversions & Bounding Boxes

Demonstrates:
1. Building a small 2D scene graph (world -> robot -> sensor frames).
2. Converting sensor readings into world coordinates with place_in and back
   with relative_to.
3. Lifting the 2D scene onto a tilted plane in 3D with a PlanarFrame3d.
4. Bounding the results, both with the scalar API and with torch tensors.
5. Plotting the frames and boxes with matplotlib.
"""

import math
import os
from functools import partial

import matplotlib.pyplot as plt
import torch

from geomalg import (
    BoundingBox2d,
    Direction3d,
    Frame2d,
    Frame3d,
    Point2d,
)
from geomalg.euclid import compose, place_in, relative_to
from geomalg.ops import bounding_box_of, points_place_in
from geomalg.utils import degrees, setup_logging, to_json

# =============================================================================
# 1. Scene Graph
# =============================================================================

setup_logging("INFO")

world = Frame2d.at_origin()
robot = Frame2d.with_angle(degrees(30), Point2d(4.0, 2.0))
# Sensor mounted 0.5 ahead of the robot center, looking 90 degrees left
sensor_local = Frame2d.with_angle(degrees(90), Point2d(0.5, 0.0))
sensor = sensor_local.place_in(robot)

print("Robot frame:  ", to_json(robot))
print("Sensor frame: ", to_json(sensor))

# =============================================================================
# 2. Sensor Readings
# =============================================================================

readings = [Point2d.from_polar(3.0, degrees(a)) for a in range(-40, 41, 10)]

sensor_to_world = partial(place_in, sensor)
world_hits = [sensor_to_world(p) for p in readings]

# Same hits seen from the robot: compose the two conversions
sensor_to_robot = compose(partial(place_in, sensor), partial(relative_to, robot))
robot_hits = [sensor_to_robot(p) for p in readings]
print("Closest hit relative to robot:", min(robot_hits, key=lambda p: p.distance_from(Point2d.origin())))

for local, hit in zip(readings[:3], world_hits[:3]):
    print(f"sensor {local.coordinates} -> world ({hit.x:.3f}, {hit.y:.3f})")

# =============================================================================
# 3. Lift onto a Tilted Plane
# =============================================================================

ground = Frame3d.with_z_direction(Direction3d.from_azimuth_and_elevation(0.0, math.radians(75)))
planar = ground.xy_planar_frame()
hits_3d = [planar.place_in_3d(p) for p in world_hits]
print("First lifted hit:", hits_3d[0])
assert planar.project_into(hits_3d[0]).equal_within(1e-9, world_hits[0])

# =============================================================================
# 4. Bounding Boxes
# =============================================================================

box = BoundingBox2d.containing(world_hits)
print("Hits bounding box:", box.extrema())

# Bulk version: the same conversion for a whole scan in one matrix product
scan = torch.tensor([p.coordinates for p in readings], dtype=torch.float64)
tensor_box = bounding_box_of(points_place_in(sensor, scan))
print("Tensor bounding box:", tensor_box.extrema())

# =============================================================================
# 5. Plot
# =============================================================================


def draw_frame(ax, frame, label, length=1.0):
    o = frame.origin_point
    for direction, color in ((frame.x_direction, "tab:red"), (frame.y_direction, "tab:green")):
        ax.arrow(o.x, o.y, length * direction.x, length * direction.y,
                 head_width=0.1, color=color, length_includes_head=True)
    ax.annotate(label, (o.x, o.y), textcoords="offset points", xytext=(-10, -12))


def draw_box(ax, box, color):
    corners = box.corners() + box.corners()[:1]
    ax.plot([c.x for c in corners], [c.y for c in corners], color=color, linestyle="--")


fig, ax = plt.subplots(1, 1, figsize=(8, 8))
draw_frame(ax, world, "world")
draw_frame(ax, robot, "robot")
draw_frame(ax, sensor, "sensor", length=0.6)
ax.scatter([p.x for p in world_hits], [p.y for p in world_hits], s=12, color="tab:blue")
draw_box(ax, box, "tab:gray")
ax.set_aspect("equal")
ax.grid(alpha=0.3)
ax.set_title("Sensor hits placed in world coordinates")

os.makedirs("output", exist_ok=True)
fig.savefig("output/01_frame_conversions.png", dpi=100)
print("Saved output/01_frame_conversions.png")
