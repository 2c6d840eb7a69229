"""
gui.py - pygame window for playing dropfour

The window is both the input source and the renderer. Pointer coordinates
are turned into column indices here; the game session only ever sees
column numbers. Each frame reads at most one click, updates the session,
then draws a FrameView of the updated state.
"""

import math
from typing import Optional

import pygame

from dropfour.debug import debug
from dropfour.game.rules import GameSession, FrameView
from dropfour.utils import CELL_SIZE, GameConfig, Phase, Player

WINDOW_TITLE = "dropfour"
TARGET_FPS = 60

# Colors
BACKGROUND = (0, 0, 0)
GRID_LINE = (255, 255, 255)
LABEL = (255, 255, 255)
WIN_OUTLINE = (253, 249, 0)
BANNER_TEXT = (255, 255, 255)
BANNER_SHADE = (0, 0, 0, 170)

PIECE_COLORS = {
    Player.A: (230, 41, 55),   # red
    Player.B: (0, 121, 241),   # blue
}
HIGHLIGHT_COLORS = {
    Phase.TURN_A: (190, 33, 55),   # maroon
    Phase.TURN_B: (0, 82, 172),    # dark blue
}


def column_at(x: float, cell_size: int = CELL_SIZE) -> int:
    """Map a horizontal pixel coordinate to a board column (may be out of range)."""
    return int(math.floor(x / cell_size))


def window_size(config: GameConfig, cell_size: int = CELL_SIZE):
    return config.board_width * cell_size, config.board_height * cell_size


class Renderer:
    """Draws FrameViews onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, cell_size: int = CELL_SIZE):
        self.surface = surface
        self.cell_size = cell_size
        self.label_font = pygame.font.SysFont(None, 16)
        self.banner_font = pygame.font.SysFont(None, max(32, cell_size))

    def draw(self, view: FrameView) -> None:
        size = self.cell_size
        height, width = view.grid.shape
        surf_w, surf_h = self.surface.get_size()

        self.surface.fill(BACKGROUND)

        if view.highlight_column is not None:
            pygame.draw.rect(self.surface, HIGHLIGHT_COLORS[view.phase],
                             (view.highlight_column * size, 0, size, surf_h))

        for row in range(height):
            pygame.draw.line(self.surface, GRID_LINE, (0, row * size), (surf_w, row * size))
        for col in range(width):
            pygame.draw.line(self.surface, GRID_LINE, (col * size, 0), (col * size, surf_h))

        for row in range(height):
            for col in range(width):
                occupant = Player(int(view.grid[row, col]))
                if occupant != Player.EMPTY:
                    pygame.draw.rect(self.surface, PIECE_COLORS[occupant],
                                     (col * size, row * size, size, size))
                label = self.label_font.render(f"{row}, {col}", True, LABEL)
                self.surface.blit(label, (col * size + 5, row * size + 5))

        for row, col in view.winning_line:
            pygame.draw.rect(self.surface, WIN_OUTLINE,
                             (col * size, row * size, size, size), 4)

        if view.banner:
            self._draw_banner(view.banner)

    def _draw_banner(self, text: str) -> None:
        surf_w, surf_h = self.surface.get_size()
        rendered = self.banner_font.render(text, True, BANNER_TEXT)
        box = rendered.get_rect(center=(surf_w // 2, surf_h // 2)).inflate(40, 24)

        shade = pygame.Surface(box.size, pygame.SRCALPHA)
        shade.fill(BANNER_SHADE)
        self.surface.blit(shade, box.topleft)
        self.surface.blit(rendered, rendered.get_rect(center=box.center))


class GameWindow:
    """Main loop: read input, update the session, draw."""

    def __init__(self, config: Optional[GameConfig] = None, cell_size: int = CELL_SIZE):
        self.config = config or GameConfig()
        self.cell_size = cell_size

        pygame.init()
        self.screen = pygame.display.set_mode(window_size(self.config, cell_size))
        pygame.display.set_caption(WINDOW_TITLE)
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen, cell_size)
        self.session = GameSession(self.config)
        self.running = True
        debug.info(f"Opened {self.screen.get_size()} window for a "
                   f"{self.config.board_height}x{self.config.board_width} board", "gui")

    def new_game(self) -> None:
        debug.info("Starting a new game", "gui")
        self.session = GameSession(self.config)

    def run(self) -> None:
        try:
            while self.running:
                clicked = self.handle_events()
                self.session.tick(clicked)
                pointer = column_at(pygame.mouse.get_pos()[0], self.cell_size)
                self.renderer.draw(self.session.view(pointer))
                pygame.display.flip()
                self.clock.tick(TARGET_FPS)
        finally:
            self.quit()

    def handle_events(self) -> Optional[int]:
        """Drain the event queue; return the column of the first left click, if any."""
        clicked = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_r:
                    self.new_game()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and clicked is None:
                x, y = event.pos
                clicked = column_at(x, self.cell_size)
                debug.debug(f"Click at ({x}, {y}) -> column {clicked}", "gui")
        return clicked

    def quit(self) -> None:
        pygame.quit()
