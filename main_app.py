"""
Star Quiz - Main Application

Pannable, zoomable RA/Dec star chart with a "name this star" quiz:
- Star field screen (pan, zoom, grid)
- Quiz / feedback / results popups
- State management (one StateManager for the whole session)

The loop blocks on input and only redraws after a state change.
"""

import argparse
import dataclasses
import logging
import random
import sys
from pathlib import Path

import pygame

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from core.config import ChartConfig
from game.state_manager import StateManager
from ui_new.screen_starfield import StarfieldScreen
from ui_new.theme import get_theme

logger = logging.getLogger("StarQuiz")


class StarQuizApp:
    """
    Main application

    Owns the window, the state manager and the star field screen.
    """

    def __init__(self, config: ChartConfig, rng: random.Random = None):
        """Initialize window and load the catalog before the first frame"""
        pygame.init()

        self.config = config
        self.screen = pygame.display.set_mode((config.width, config.height), pygame.RESIZABLE)
        pygame.display.set_caption(config.title)

        self.theme = get_theme()
        self.state_manager = StateManager(config, rng)
        self.state_manager.load_catalog()

        self.starfield = StarfieldScreen(self.state_manager)
        self.starfield.on_enter()

        self.running = True
        logger.info("%s initialized (%dx%d)", config.title, config.width, config.height)

    def run(self):
        """Event-driven main loop"""
        logger.info("Starting main loop")
        self.redraw()

        while self.running:
            # Block until something happens, then drain the queue
            events = [pygame.event.wait()]
            events.extend(pygame.event.get())

            needs_redraw = False
            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    needs_redraw |= self.handle_resize(event.w, event.h)
                elif event.type in (pygame.WINDOWEXPOSED, pygame.WINDOWRESTORED):
                    needs_redraw = True

            needs_redraw |= self.starfield.handle_input(events)
            if self.starfield.quit_requested:
                self.running = False

            if self.running and needs_redraw:
                self.redraw()

        self.quit()

    def redraw(self):
        self.screen.fill(self.theme.colors.BG_DARK)
        self.starfield.render(self.screen)
        pygame.display.flip()

    def handle_resize(self, width: int, height: int) -> bool:
        """Handle window resize event"""
        self.screen = pygame.display.get_surface()
        logger.debug("Window resized to: %dx%d", width, height)
        return self.state_manager.on_resize(width, height)

    def quit(self):
        """Cleanup and quit"""
        logger.info("Shutting down. %s", self.state_manager.stats.summary())
        self.starfield.on_exit()
        pygame.quit()


def build_arg_parser() -> argparse.ArgumentParser:
    defaults = ChartConfig()
    ap = argparse.ArgumentParser(description="Star chart with a name-the-star quiz")
    ap.add_argument("--data", type=Path, default=defaults.data_path,
                    help="Star catalog JSON (default: %(default)s)")
    ap.add_argument("--width", type=int, default=defaults.width)
    ap.add_argument("--height", type=int, default=defaults.height)
    ap.add_argument("--grid", action="store_true", help="Start with the RA/Dec grid shown")
    ap.add_argument("--seed", type=int, default=None,
                    help="Seed for option shuffling (reproducible quizzes)")
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv=None):
    """Entry point"""
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    config = dataclasses.replace(
        ChartConfig(),
        data_path=args.data,
        width=args.width,
        height=args.height,
        show_grid=args.grid,
    )
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        app = StarQuizApp(config, rng)
        app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        pygame.quit()
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
