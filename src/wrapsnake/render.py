# render.py
from __future__ import annotations
from typing import Tuple

import pygame  # type: ignore

from .config import (
    GRID_SIZE, CELL_SIZE, BOARD_PX, WIDTH, PANEL_H,
    BG, GRID_LINE, PANEL_BG, HEAD, BODY, FOOD, TEXT, MUTED, SCORE_TEXT, HIGH_TEXT,
)
from .game import GameSnapshot

HELP_TEXT = "Arrows/WASD move   Space pause   R restart"


# ---------- Helpers ----------
def cell_rect(cell: Tuple[int, int]) -> pygame.Rect:
    """Pixel rect of a grid cell, inset by one pixel on each side."""
    gx, gy = cell
    return pygame.Rect(gx * CELL_SIZE + 1, gy * CELL_SIZE + 1, CELL_SIZE - 2, CELL_SIZE - 2)

def cell_center(cell: Tuple[int, int]) -> Tuple[int, int]:
    gx, gy = cell
    return (gx * CELL_SIZE + CELL_SIZE // 2, gy * CELL_SIZE + CELL_SIZE // 2)

def _overlay(surface: pygame.Surface, alpha: int) -> None:
    dim = pygame.Surface((BOARD_PX, BOARD_PX), pygame.SRCALPHA)
    dim.fill((0, 0, 0, alpha))  # RGBA
    surface.blit(dim, (0, 0))

def _blit_centered(surface: pygame.Surface, font: pygame.font.Font, text: str,
                   color: Tuple[int, int, int], center: Tuple[int, int]) -> None:
    img = font.render(text, True, color)
    surface.blit(img, img.get_rect(center=center))

# ---------- Layers ----------
def draw_grid(surface: pygame.Surface) -> None:
    for i in range(GRID_SIZE + 1):
        pygame.draw.line(surface, GRID_LINE, (i * CELL_SIZE, 0), (i * CELL_SIZE, BOARD_PX))
        pygame.draw.line(surface, GRID_LINE, (0, i * CELL_SIZE), (BOARD_PX, i * CELL_SIZE))

def draw_board(surface: pygame.Surface, snap: GameSnapshot) -> None:
    pygame.draw.rect(surface, BG, pygame.Rect(0, 0, BOARD_PX, BOARD_PX))
    draw_grid(surface)
    # body first so the head stays on top
    for segment in snap.snake[1:]:
        pygame.draw.rect(surface, BODY, cell_rect(segment))
    pygame.draw.rect(surface, HEAD, cell_rect(snap.head))
    if not snap.won:
        pygame.draw.circle(surface, FOOD, cell_center(snap.food), CELL_SIZE // 2 - 2)

def draw_panel(surface: pygame.Surface, font: pygame.font.Font, snap: GameSnapshot, high_score: int) -> None:
    pygame.draw.rect(surface, PANEL_BG, pygame.Rect(0, BOARD_PX, WIDTH, PANEL_H))
    score = font.render(f"Score: {snap.score}", True, SCORE_TEXT)
    best = font.render(f"Best: {max(high_score, snap.score)}", True, HIGH_TEXT)
    surface.blit(score, (8, BOARD_PX + 6))
    surface.blit(best, best.get_rect(topright=(WIDTH - 8, BOARD_PX + 6)))
    _blit_centered(surface, font, HELP_TEXT, MUTED, (WIDTH // 2, BOARD_PX + PANEL_H - 16))

def draw_pause(surface: pygame.Surface, font: pygame.font.Font) -> None:
    _overlay(surface, 128)
    _blit_centered(surface, font, "PAUSED", TEXT, (BOARD_PX // 2, BOARD_PX // 2))

def draw_game_over(surface: pygame.Surface, font: pygame.font.Font, snap: GameSnapshot) -> None:
    _overlay(surface, 180)
    title = "YOU WIN" if snap.won else "GAME OVER"
    _blit_centered(surface, font, title, HEAD if snap.won else FOOD, (BOARD_PX // 2, BOARD_PX // 2 - 40))
    _blit_centered(surface, font, f"Final Score: {snap.score}", TEXT, (BOARD_PX // 2, BOARD_PX // 2 + 20))
    _blit_centered(surface, font, "Press R to restart", MUTED, (BOARD_PX // 2, BOARD_PX // 2 + 48))

def draw_game(surface: pygame.Surface, font: pygame.font.Font, snap: GameSnapshot, high_score: int) -> None:
    draw_board(surface, snap)
    draw_panel(surface, font, snap, high_score)
    if snap.game_over:
        draw_game_over(surface, font, snap)
    elif snap.paused:
        draw_pause(surface, font)
