"""Drawing a board onto a pygame surface."""

from __future__ import annotations

import pygame

from .board import BOARD_SIZE, BOX_SIZE, CELL_SIZE, FONT_PATH, WINDOW_HEIGHT, WINDOW_WIDTH, SudokuBoard

_WHITE = (255, 255, 255)
_BLACK = (0, 0, 0)
_BLUE = (0, 0, 255)
_FONT_SIZE = 30
_BORDER = 5
_SELECTION_OUTLINE = 2


def _load_font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(FONT_PATH, _FONT_SIZE)
    except (OSError, pygame.error):
        return pygame.font.Font(None, _FONT_SIZE)


class Graphics:
    """Renders the grid, its numbers and the selected cell."""

    def __init__(self, board: SudokuBoard):
        self.board = board

    def draw(self, surface):
        """Draw the board onto surface."""
        font = _load_font()
        extent = CELL_SIZE * BOARD_SIZE

        pygame.draw.rect(surface, _WHITE, (0, 0, extent, extent))
        pygame.draw.rect(
            surface,
            _BLACK,
            (-_BORDER, -_BORDER, extent + 2 * _BORDER, extent + 2 * _BORDER),
            _BORDER,
        )

        for i, row in enumerate(self.board.grid):
            for j, cell in enumerate(row):
                if cell.value == 0:
                    continue
                colour = _BLUE if cell.initial else _BLACK
                text = font.render(str(cell.value), True, colour)
                surface.blit(text, (int(j * CELL_SIZE + 0.4 * CELL_SIZE), i * CELL_SIZE))

        for i in range(1, BOARD_SIZE):
            pygame.draw.line(surface, _BLACK, (i * CELL_SIZE, 0), (i * CELL_SIZE, WINDOW_HEIGHT))
        for i in range(1, BOARD_SIZE):
            pygame.draw.line(surface, _BLACK, (0, i * CELL_SIZE), (WINDOW_WIDTH, i * CELL_SIZE))

        pygame.draw.rect(surface, _BLACK, (0, 0, _BORDER, extent))
        pygame.draw.rect(surface, _BLACK, (0, 0, extent, _BORDER))
        for i in range(1, BOARD_SIZE // BOX_SIZE):
            offset = i * BOX_SIZE * CELL_SIZE - 2
            pygame.draw.rect(surface, _BLACK, (offset, 0, _BORDER, extent))
            pygame.draw.rect(surface, _BLACK, (0, offset, extent, _BORDER))

        if self.board.selected_cell is not None:
            row, col = self.board.selected_cell
            x, y = col * CELL_SIZE, row * CELL_SIZE
            overlay = pygame.Surface((CELL_SIZE, CELL_SIZE), pygame.SRCALPHA)
            overlay.fill((255, 255, 255, 128))
            surface.blit(overlay, (x, y))
            pygame.draw.rect(
                surface,
                _BLUE,
                (
                    x - _SELECTION_OUTLINE,
                    y - _SELECTION_OUTLINE,
                    CELL_SIZE + 2 * _SELECTION_OUTLINE,
                    CELL_SIZE + 2 * _SELECTION_OUTLINE,
                ),
                _SELECTION_OUTLINE,
            )