import argparse
import logging
import sys

import pygame

from settings import WIDTH, HEIGHT, FPS, BACKGROUND_COLOR, LOG_FORMAT

from core.frame_stats import FrameStats
from core.geometry import Direction
from core.input_manager import InputManager
from core.renderer import draw_scene
from core.speed_controls import SpeedControls

from data.light_stats import LIGHT_STATS
from hud import StatsHud
from scenes import DefaultScene, SceneBase

log = logging.getLogger("rays")

# Held action -> direction the light steps in
MOVE_ACTIONS = [
    ("move_up", Direction.UP),
    ("move_down", Direction.DOWN),
    ("move_left", Direction.LEFT),
    ("move_right", Direction.RIGHT),
]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Light rays cast across rotatable walls")
    parser.add_argument("--scene", type=str, default=None,
                        help="Scene JSON file to load (default: built-in scene)")
    parser.add_argument("--rays", type=int, default=None,
                        help="Number of rays cast from the light")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.rays is not None and args.rays <= 0:
        parser.error("--rays must be positive")
    return args


def load_scene(args):
    if args.scene:
        scene = SceneBase.from_json(args.scene)
    else:
        scene = DefaultScene(light_stats=LIGHT_STATS["sun"])
    if args.rays is not None:
        scene.light.ray_count = args.rays
    return scene


def apply_input(scene, input_manager, controls, dt):
    """Run one frame of player commands against ``scene``.

    Walls rotate first, then the light moves, then rays are cast from the
    new position.  Returns the ray list, or None when casting is not held.
    """
    # -----------------------------
    # Rotate walls (before casting)
    # -----------------------------
    if input_manager.is_down("rotate_cw"):
        scene.rotate_walls(controls.speed_rot * dt)
    elif input_manager.is_down("rotate_ccw"):
        scene.rotate_walls(-controls.speed_rot * dt)

    # -----------------------------
    # Move light (mouse wins over WASD)
    # -----------------------------
    if not scene.light.follow_mouse(input_manager.get_mouse_pos()):
        step = controls.speed_mov * dt
        for action, direction in MOVE_ACTIONS:
            if input_manager.is_down(action):
                scene.move_light(direction, step)

    return scene.cast_rays() if input_manager.is_casting() else None


def main():
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    scene = load_scene(args)
    log.info("Scene ready: %d obstacles, %d rays", len(scene.obstacles), scene.light.ray_count)

    pygame.init()

    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Rays")

    clock = pygame.time.Clock()

    input_manager = InputManager()
    controls = SpeedControls()
    frame_stats = FrameStats()
    hud = StatsHud(controls, frame_stats)

    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        frame_stats.tick(dt)

        # -----------------------------
        # Events
        # -----------------------------
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        # -----------------------------
        # Input
        # -----------------------------
        input_manager.update()
        controls.update(input_manager)

        # -----------------------------
        # Commands, then rays
        # -----------------------------
        rays = apply_input(scene, input_manager, controls, dt)

        # -----------------------------
        # Draw
        # -----------------------------
        screen.fill(BACKGROUND_COLOR)
        draw_scene(screen, scene, rays)
        hud.draw(screen)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
