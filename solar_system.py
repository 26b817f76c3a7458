#!/usr/bin/env python3
"""
Solar system orrery application entry point.

What this module does
- Builds the body registry from the built-in catalog (or a JSON catalog given on the
  command line) and an OrbitSimulator drawing onto a pygame viewport.
- Opens a Dear PyGui control panel with Add/Remove buttons for each planet.

Threading model
- One loop on the main thread: pump pygame events, run the scheduled frame tick, flip
  the display, run queued Dear PyGui callbacks, render the panel, wait for the next
  frame. Toggles from the panel and frame ticks therefore never overlap and no locks
  are needed.

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python solar_system.py` (or `orrery` once installed)

Keys
- Space pauses/resumes the animation (in either window). Closing either window exits.
"""
import argparse
import logging
import sys

import pygame

from orrery.catalog import CatalogError, default_catalog, load_catalog
from orrery.constants import CENTER, DEFAULT_FPS, VIEW_HEIGHT, VIEW_WIDTH
from orrery.controls import ControlPanel
from orrery.data_models import CentralBody
from orrery.registry import BodyRegistry
from orrery.rendering import PygameFrameClock, PygameSurface
from orrery.simulator import OrbitSimulator

log = logging.getLogger("orrery")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Animated 2D solar system with toggleable planets.")
    parser.add_argument("--catalog", metavar="PATH", help="JSON catalog to load instead of the built-in system")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="frame rate cap (default: %(default)s)")
    parser.add_argument("--no-labels", action="store_true", help="do not draw body names")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_loop(simulator: OrbitSimulator, clock: PygameFrameClock, panel: ControlPanel) -> None:
    clock.schedule_next(simulator.tick)
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                panel.on_toggle_pause()
        if not running:
            break

        clock.run_pending()
        pygame.display.flip()

        panel.run_callbacks()
        if not panel.render_frame():
            break
        clock.wait()


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.catalog:
            catalog, central = load_catalog(args.catalog)
        else:
            catalog, central = default_catalog(), CentralBody()
    except CatalogError as e:
        log.error("%s", e)
        return 2

    registry = BodyRegistry(catalog)
    log.info("Starting with %d bodies: %s", len(registry.bodies), ", ".join(registry.names()))

    pygame.init()
    pygame.display.set_caption("Orrery - Viewport")
    screen = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT))
    clock = PygameFrameClock(fps=max(1, args.fps))
    simulator = OrbitSimulator(
        registry,
        PygameSurface(screen),
        clock,
        center=CENTER,
        central_body=central,
        show_labels=not args.no_labels,
    )
    panel = ControlPanel(registry, simulator)

    try:
        run_loop(simulator, clock, panel)
    finally:
        panel.close()
        pygame.quit()
        log.info("Stopped after %d frames", simulator.frame_count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
