#!/usr/bin/env python3
"""Shape Recognition Drawing Pad.

Draw a single stroke with the mouse inside the canvas. When the button is
released the stroke is classified against the built-in templates and the
label is shown under the canvas.
"""

import logging
from typing import Optional, Tuple

import pygame

from shape_gestures.config.settings import GestureConfig
from shape_gestures.core.stroke_session import StrokeSession, load_stroke, save_stroke
from shape_gestures.gestures.template_library import get_template_library

logger = logging.getLogger(__name__)


class DrawingPad:
    """Interactive pygame canvas for single-stroke recognition."""

    def __init__(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(
            (GestureConfig.WINDOW_WIDTH, GestureConfig.WINDOW_HEIGHT)
        )
        pygame.display.set_caption("Gestures")

        self.session = StrokeSession()
        self.status: Optional[str] = None

        size = GestureConfig.CANVAS_SIZE
        left = (GestureConfig.WINDOW_WIDTH - size) // 2
        self.canvas = pygame.Rect(left, 60, size, size)

        # Colors
        self.BACKGROUND = (27, 27, 27)
        self.CANVAS = (10, 10, 10)
        self.BORDER = (60, 60, 60)
        self.STROKE = (210, 210, 210)
        self.TEXT = (230, 230, 230)
        self.FAINT = (90, 90, 90)

        # Fonts
        self.font = pygame.font.Font(None, 48)
        self.small_font = pygame.font.Font(None, 24)

        self.labels = get_template_library().labels()

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    if event.button == 1 and self.canvas.collidepoint(event.pos):
                        self.start_drawing(event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    if self.session.is_active:
                        self.continue_drawing(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    if event.button == 1:
                        self.finish_drawing()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_c:
                        self.clear_screen()
                    elif event.key == pygame.K_s:
                        self.save_drawing()
                    elif event.key == pygame.K_l:
                        self.load_drawing()

            self.draw()
            clock.tick(60)

    def start_drawing(self, pos: Tuple[int, int]) -> None:
        """Start a new stroke."""
        self.session.begin(*pos, t=pygame.time.get_ticks())
        self.status = None

    def continue_drawing(self, pos: Tuple[int, int]) -> None:
        """Add a point while drawing."""
        self.session.add(*pos, t=pygame.time.get_ticks())

    def finish_drawing(self) -> None:
        """Finish the stroke and show its label."""
        if not self.session.is_active:
            return
        label = self.session.end()
        self.status = label if label is not None else "No gesture"

    def clear_screen(self) -> None:
        """Clear the drawing and result."""
        self.session.cancel()
        self.session.last_path = []
        self.session.last_label = None
        self.status = None

    def save_drawing(self) -> None:
        """Save the last stroke to a JSON file."""
        if not self.session.last_path:
            return
        save_stroke(GestureConfig.SAVED_STROKE_FILE,
                    self.session.last_path, self.session.last_label)
        self.status = f"Saved to {GestureConfig.SAVED_STROKE_FILE}"

    def load_drawing(self) -> None:
        """Load a saved stroke and classify it again."""
        try:
            path = load_stroke(GestureConfig.SAVED_STROKE_FILE)
            label = self.session.classifier.classify(path)
        except FileNotFoundError:
            self.status = "No saved stroke found"
            return
        except ValueError as e:
            logger.warning(f"Could not load saved stroke: {e}")
            self.status = "Saved stroke is invalid"
            return

        self.session.last_path = path
        self.session.last_label = label
        self.status = label if label is not None else "No gesture"

    def draw(self) -> None:
        """Render the canvas, the stroke and the label."""
        self.screen.fill(self.BACKGROUND)
        self.screen.blit(self.font.render("Gestures", True, self.TEXT), (self.canvas.left, 15))

        pygame.draw.rect(self.screen, self.CANVAS, self.canvas)
        pygame.draw.rect(self.screen, self.BORDER, self.canvas, 1)

        path = self.session.current_path if self.session.is_active else self.session.last_path
        if path:
            pts = [(p["x"], p["y"]) for p in path]
            self.screen.set_clip(self.canvas)
            if len(pts) > 1:
                pygame.draw.lines(self.screen, self.STROKE, False, pts, GestureConfig.STROKE_WIDTH)
            start = (int(pts[0][0]), int(pts[0][1]))
            end = (int(pts[-1][0]), int(pts[-1][1]))
            # Hollow marker at the start, filled marker at the end
            pygame.draw.circle(self.screen, self.CANVAS, start, GestureConfig.MARKER_RADIUS)
            pygame.draw.circle(self.screen, self.STROKE, start, GestureConfig.MARKER_RADIUS, 1)
            pygame.draw.circle(self.screen, self.STROKE, end, GestureConfig.MARKER_RADIUS)
            self.screen.set_clip(None)
        else:
            hint = self.small_font.render("Draw a shape", True, self.FAINT)
            self.screen.blit(hint, hint.get_rect(center=self.canvas.center))

        if self.status:
            text = self.font.render(self.status, True, self.TEXT)
            self.screen.blit(text, (self.canvas.left, self.canvas.bottom + 12))

        shapes = self.small_font.render(
            "C: Clear   S: Save   L: Load   |   " + ", ".join(self.labels[:8]) + ", ...",
            True, self.FAINT,
        )
        self.screen.blit(shapes, (self.canvas.left, GestureConfig.WINDOW_HEIGHT - 22))
        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    logging.basicConfig(level=GestureConfig.LOG_LEVEL, format=GestureConfig.LOG_FORMAT)
    demo = DrawingPad()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
