"""Main pygame loop hosting the fish tank."""

from __future__ import annotations

import logging
import random
import sys
from pathlib import Path
from typing import Optional, Sequence, Tuple

import pygame

from ..config import settings
from ..config.settings import SimulationSettings
from ..rendering.canvas import PygameCanvas
from ..rendering.feed_button import FeedButton
from ..rendering.ocean_renderer import OceanRenderer
from .scene import Scene, TickInfo


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

def _initialise_logger() -> logging.Logger:
    log_dir = settings.LOG_DIRECTORY
    if not isinstance(log_dir, Path):
        log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / settings.DEBUG_LOG_FILE

    logger = logging.getLogger("phishtank")
    if logger.handlers:
        return logger

    level_name = str(settings.DEBUG_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)

    file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    file_handler.setLevel(level)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)
    logger.propagate = False

    logger.info("Debug logging initialised at %s", log_path)
    return logger


# ---------------------------------------------------------------------------
# Opbouw
# ---------------------------------------------------------------------------

def build_tank(runtime: SimulationSettings) -> Tuple[Scene, OceanRenderer]:
    """Create the scene and its backdrop, each with its own random stream.

    The backdrop never draws from the scene's RNG, so sparkle count and
    resize history leave the fish untouched.
    """

    seed = runtime.SEED or None
    scene = Scene.from_settings(runtime)
    ocean = OceanRenderer(
        runtime.WINDOW_WIDTH,
        runtime.WINDOW_HEIGHT,
        random.Random(seed),
        runtime.SPARKLE_COUNT,
    )
    return scene, ocean


# ---------------------------------------------------------------------------
# Event handling
# ---------------------------------------------------------------------------

def handle_pointer_down(scene: Scene, button: FeedButton, position) -> None:
    """Route a click: the feed button toggles, anything else may drop food."""

    if button.hit(position):
        scene.toggle_feeding_mode()
        return
    if scene.feeding_mode:
        scene.feed(*position)


# ---------------------------------------------------------------------------
# Hoofd-loop
# ---------------------------------------------------------------------------

def run(sim_settings: Optional[SimulationSettings] = None) -> None:
    """Open the window and animate the tank until it is closed."""

    runtime = sim_settings or settings.current_settings()
    logger = _initialise_logger()

    pygame.init()
    screen = pygame.display.set_mode((runtime.WINDOW_WIDTH, runtime.WINDOW_HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption("Phish Tank")
    clock = pygame.time.Clock()

    scene, ocean = build_tank(runtime)
    feed_button = FeedButton(pygame.font.Font(None, 24))
    feed_button.layout(runtime.WINDOW_WIDTH, runtime.WINDOW_HEIGHT)
    canvas = PygameCanvas(screen)
    logger.info("Tank started: %d fish at %d FPS", len(scene.controllers), runtime.FPS)

    elapsed_ms = 0
    running = True
    while running:
        elapsed_ms += clock.tick(runtime.FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_f:
                    scene.toggle_feeding_mode()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                handle_pointer_down(scene, feed_button, event.pos)
            elif event.type == pygame.VIDEORESIZE:
                width, height = max(1, event.w), max(1, event.h)
                screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
                canvas = PygameCanvas(screen)
                ocean.resize(width, height)
                feed_button.layout(width, height)
                scene.resize(width, height)

        width, height = screen.get_size()
        scene.tick(TickInfo(width, height, elapsed_ms))

        ocean.draw_background(screen)
        scene.render(canvas)
        ocean.draw_water_lines(screen, scene.frame)
        ocean.draw_sparkles(screen, elapsed_ms / 1000.0)
        feed_button.draw(screen, scene.feeding_mode)
        pygame.display.flip()

    logger.info("Tank closed after %d frames", scene.frame)
    pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> None:
    runtime_settings = settings.load_runtime_settings(sys.argv[1:] if argv is None else argv)
    settings.apply_runtime_settings(runtime_settings)
    run(runtime_settings)
