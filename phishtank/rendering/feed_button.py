"""The "Feed the Phish!" toggle drawn in the corner of the tank."""

from __future__ import annotations

from typing import Tuple

import pygame

from ..config import settings

IDLE_LABEL = "Feed the Phish!"
ACTIVE_LABEL = "Feeding Mode On!"


class FeedButton:
    def __init__(self, font: pygame.font.Font, *, margin: int = 16, size: Tuple[int, int] = (190, 40)) -> None:
        self.font = font
        self.margin = margin
        self.rect = pygame.Rect(0, 0, *size)

    def layout(self, window_width: int, window_height: int) -> None:
        """Pin the button to the bottom-right corner of the window."""

        self.rect.bottomright = (window_width - self.margin, window_height - self.margin)

    def hit(self, position: Tuple[int, int]) -> bool:
        return self.rect.collidepoint(position)

    @staticmethod
    def label_for(active: bool) -> str:
        return ACTIVE_LABEL if active else IDLE_LABEL

    def draw(self, surface: pygame.Surface, active: bool) -> None:
        color = settings.BUTTON_ACTIVE if active else settings.BUTTON_IDLE
        pygame.draw.rect(surface, color, self.rect, border_radius=8)
        pygame.draw.rect(surface, settings.WHITE, self.rect, 1, border_radius=8)
        label_surface = self.font.render(self.label_for(active), True, settings.WHITE)
        surface.blit(
            label_surface,
            (
                self.rect.centerx - label_surface.get_width() // 2,
                self.rect.centery - label_surface.get_height() // 2,
            ),
        )
