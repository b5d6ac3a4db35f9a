"""The interactive demo: pick a pipeline stage and watch it render in a window."""

from __future__ import annotations

import argparse
import enum
import sys
import time
from dataclasses import replace
from typing import Any, MutableMapping, Optional, Sequence

import numpy as np

from softrender.geometry import Frustum
from softrender.matrices import build_model_matrix, build_projection_matrix
from softrender.meshes import (
    MeshLoadError,
    cube,
    cube_view_space,
    house_clip,
    house_screen,
    load_obj,
)
from softrender.raster import Canvas, Color
from softrender.scenes import (
    Camera,
    Transform,
    camera_preset,
    draw_clip_mesh,
    draw_local_mesh,
    draw_matrix_mesh,
    draw_screen_mesh,
    draw_view_mesh,
    draw_world_mesh,
)

DEFAULT_MODEL = "models/bunny.obj"
FOVY = 60.0
NEAR = 0.1
FAR = 100.0

_CUBE_SPIN = 0.0001
_BUNNY_DRIFT = 0.001
_BUNNY_SPIN = 0.001


class Demo(enum.Enum):
    """The stages of the pipeline that can be shown."""

    STATIC_2D = "static2d"
    CLIP_SPACE = "clip"
    VERTEX_3D = "vertex3d"
    VIEW_SPACE = "view"
    WORLD_SPACE = "world"
    LOCAL_SPACE = "local"
    MATRICES = "matrices"
    MODEL = "model"

    @property
    def needs_model(self) -> bool:
        return self in (Demo.MODEL, Demo.MATRICES)

    @property
    def has_camera_presets(self) -> bool:
        return self in (Demo.WORLD_SPACE, Demo.LOCAL_SPACE)


def _bunny() -> Transform:
    return Transform(position=(0.0, -1.0, -2.5), scale=(9.0, 9.0, 9.0))


def _local_scene() -> list[Transform]:
    return [
        Transform(position=(-1.5, 0.0, 0.0), orientation=(np.pi / 12, np.pi / 8, 0.0)),
        Transform(position=(0.0, 0.0, -3.0), scale=(2.0, 2.0, 2.0)),
        Transform(position=(0.5, 0.0, 1.0), orientation=(0.0, 0.0, np.pi / 12)),
    ]


_LOCAL_COLORS = (Color.RED, Color.GREEN, Color.BLUE)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Read the command line."""
    parser = argparse.ArgumentParser(
        prog="softrender", description="Render wireframe meshes in software."
    )
    parser.add_argument(
        "--demo",
        type=Demo,
        choices=list(Demo),
        default=Demo.LOCAL_SPACE,
        metavar="{" + ",".join(demo.value for demo in Demo) + "}",
        help="which pipeline stage to show",
    )
    parser.add_argument("--model", default=DEFAULT_MODEL, help="OBJ file for the model demos")
    parser.add_argument("--width", type=int, default=1280)
    parser.add_argument("--height", type=int, default=720)
    parser.add_argument("--fullscreen", action="store_true")
    parser.add_argument(
        "--frames", type=int, default=0, help="stop after this many frames (0: run until closed)"
    )
    parser.add_argument("--no-fps", dest="log_fps", action="store_false", help="do not log FPS")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")
    if args.frames < 0:
        parser.error("frames must not be negative")
    return args


def _prepare(demo: Demo, canvas: Canvas, state: MutableMapping[str, Any]) -> None:
    state.setdefault("frustum", Frustum.from_fov(FOVY, canvas.width / canvas.height, NEAR, FAR))
    if demo.has_camera_presets:
        state.setdefault("camera", camera_preset(1))
    else:
        state.setdefault("camera", Camera())
    if demo is Demo.LOCAL_SPACE:
        state.setdefault("transforms", _local_scene())
    if demo.needs_model:
        if "mesh" not in state:
            raise ValueError(f"the {demo.value} demo needs a mesh in its state")
        state.setdefault("bunny", _bunny())


def _advance(demo: Demo, state: MutableMapping[str, Any]) -> None:
    if demo is Demo.LOCAL_SPACE:
        first = state["transforms"][0]
        pitch, yaw, roll = first.orientation
        state["transforms"][0] = replace(first, orientation=(pitch, yaw + _CUBE_SPIN, roll))
    elif demo is Demo.MODEL:
        bunny = state["bunny"]
        x, y, z = bunny.position
        state["bunny"] = replace(bunny, position=(x, y, z + _BUNNY_DRIFT))
    elif demo is Demo.MATRICES:
        bunny = state["bunny"]
        pitch, yaw, roll = bunny.orientation
        state["bunny"] = replace(bunny, orientation=(pitch, yaw + _BUNNY_SPIN, roll))


def render_frame(demo: Demo, canvas: Canvas, state: MutableMapping[str, Any]) -> int:
    """Advance the demo's animation by one frame and draw it; return triangles drawn.

    ``state`` holds the scene between frames. Missing entries are filled in on
    the first call; the model demos need ``state["mesh"]`` set beforehand.
    """
    _prepare(demo, canvas, state)
    _advance(demo, state)
    canvas.clear(Color.BLACK)

    frustum: Frustum = state["frustum"]
    camera: Camera = state["camera"]
    if demo is Demo.STATIC_2D:
        return draw_screen_mesh(canvas, house_screen(), Color.WHITE)
    if demo is Demo.CLIP_SPACE:
        return draw_clip_mesh(canvas, house_clip(), Color.WHITE)
    if demo is Demo.VERTEX_3D:
        return draw_clip_mesh(canvas, cube(), Color.WHITE)
    if demo is Demo.VIEW_SPACE:
        return draw_view_mesh(canvas, frustum, cube_view_space(), Color.WHITE)
    if demo is Demo.WORLD_SPACE:
        return draw_world_mesh(canvas, frustum, camera, cube(), Color.RED)
    if demo is Demo.LOCAL_SPACE:
        mesh = cube()
        return sum(
            draw_local_mesh(canvas, frustum, camera, transform, mesh, color)
            for transform, color in zip(state["transforms"], _LOCAL_COLORS)
        )
    bunny: Transform = state["bunny"]
    if demo is Demo.MODEL:
        return draw_local_mesh(canvas, frustum, camera, bunny, state["mesh"], Color.WHITE)
    model = build_model_matrix(bunny.position, bunny.orientation, bunny.scale)
    view = np.identity(4)
    projection = build_projection_matrix(frustum)
    return draw_matrix_mesh(canvas, model, view, projection, state["mesh"], Color.WHITE)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open a window and render the chosen demo until it is closed."""
    args = parse_args(argv)
    demo: Demo = args.demo

    state: dict[str, Any] = {}
    if demo.needs_model:
        try:
            state["mesh"] = load_obj(args.model)
        except MeshLoadError as error:
            print(f"error loading model: {error}", file=sys.stderr)
            return 1

    import pygame

    pygame.init()
    try:
        if args.fullscreen:
            screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("softrender")
        width, height = screen.get_size()
        canvas = Canvas(width, height)

        preset_keys = {
            pygame.K_1: 1,
            pygame.K_2: 2,
            pygame.K_3: 3,
            pygame.K_4: 4,
        }
        last = time.perf_counter()
        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break

            if demo.has_camera_presets:
                pressed = pygame.key.get_pressed()
                chosen = next((n for key, n in preset_keys.items() if pressed[key]), None)
                if chosen is not None:
                    state["camera"] = camera_preset(chosen)

            if args.log_fps:
                now = time.perf_counter()
                elapsed = now - last
                last = now
                if elapsed > 0:
                    print(f"{1 / elapsed} FPS")

            render_frame(demo, canvas, state)
            pygame.surfarray.blit_array(screen, canvas.pixels[:, :, :3].swapaxes(0, 1))
            pygame.display.flip()

            frames += 1
            if args.frames and frames >= args.frames:
                running = False
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())