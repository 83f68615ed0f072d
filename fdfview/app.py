"""The viewer window and the command that opens it."""

from __future__ import annotations

import sys
from pathlib import Path

from fdfview.camera import WINDOW_HEIGHT, WINDOW_WIDTH, Camera, Key
from fdfview.canvas import Canvas
from fdfview.errors import ExitCode, FdfError, message
from fdfview.mapfile import read_map, valid_map_name
from fdfview.render import Label, render

WINDOW_NAME = "FdF"
FRAMES_PER_SECOND = 30


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


class Viewer:
    """A loaded map with its camera and drawing surface."""

    def __init__(self, path: str | Path, bonus: bool = False) -> None:
        if not valid_map_name(path):
            raise FdfError(ExitCode.INVALID_NAME)
        self.path = Path(path)
        self.bonus = bonus
        self.heightmap = read_map(path, height_colors=bonus)
        self.canvas = Canvas(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.camera = Camera.for_map(self.heightmap)

    def press(self, key: int) -> bool:
        """Apply a key (an X keysym); return True if the view changed.

        Escape raises FdfError with the normal exit code.
        """
        return self.camera.handle_key(key, self.heightmap.max_z, self.bonus)

    def frame(self) -> list[Label]:
        """Draw the current view onto the canvas and return the menu text."""
        return render(self.canvas, self.heightmap, self.camera, self.bonus)

    def run(self) -> int:
        """Show the map in a window until it is closed; return the exit code."""
        import pygame

        pygame.init()
        try:
            size = (self.canvas.width, self.canvas.height)
            screen = pygame.display.set_mode(size)
            pygame.display.set_caption(WINDOW_NAME)
            font = pygame.font.Font(None, 18)
            special = {
                pygame.K_ESCAPE: Key.ESCAPE,
                pygame.K_UP: Key.UP,
                pygame.K_DOWN: Key.DOWN,
                pygame.K_LEFT: Key.LEFT,
                pygame.K_RIGHT: Key.RIGHT,
            }
            clock = pygame.time.Clock()
            dirty = True
            image = None
            labels: list[Label] = []
            while True:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return ExitCode.OK
                    if event.type != pygame.KEYDOWN:
                        continue
                    keysym = special.get(event.key)
                    if keysym is None and event.key < 0x100:
                        keysym = event.key
                    if keysym is None:
                        continue
                    try:
                        dirty |= self.press(keysym)
                    except FdfError as exc:
                        return exc.code
                if dirty or image is None:
                    labels = self.frame()
                    image = pygame.image.frombuffer(
                        self.canvas.to_bytes(), size, "BGRA"
                    ).convert()
                    dirty = False
                screen.blit(image, (0, 0))
                for label in labels:
                    text = font.render(label.text, True, _rgb(label.color))
                    screen.blit(text, (label.x, label.y - font.get_ascent()))
                pygame.display.flip()
                clock.tick(FRAMES_PER_SECOND)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Open the map named on the command line; ``--bonus`` enables all controls."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = "--bonus" in args
    names = [arg for arg in args if arg != "--bonus"]
    try:
        if len(names) != 1:
            raise FdfError(ExitCode.INVALID_NAME)
        code = Viewer(names[0], bonus).run()
    except FdfError as exc:
        code = exc.code
    sys.stdout.write(message(code))
    return int(code)