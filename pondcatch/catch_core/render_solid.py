"""
Solid Renderer
==============

Fast numpy-based renderer that draws the pond as solid-color rectangles:
side columns, the fish, the net outline, floating score markers and hearts.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple
import numpy as np

from pondcatch.catch_core.config_loader import GameConfig, get_config


# Fill color per species
KIND_COLORS: Dict[str, Tuple[int, int, int]] = {
    "carp": (235, 140, 60),
    "grasscarp": (120, 170, 80),
    "catfish": (130, 100, 80),
    "beta": (170, 70, 200),
}


class SolidRenderer:
    """
    Renders the play area to an RGB array.

    Uses numpy slicing only, no pygame, so it is safe for headless training.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize renderer.

        Args:
            config: Game configuration. Uses default if None.
        """
        if config is None:
            config = get_config()

        self._config = config

        self._bg_color = np.array([40, 90, 120], dtype=np.uint8)
        self._column_color = np.array([30, 60, 50], dtype=np.uint8)
        self._net_color = np.array([230, 230, 230], dtype=np.uint8)
        self._heart_color = np.array([255, 75, 75], dtype=np.uint8)

    def render(
        self,
        render_data: Dict[str, Any],
        width: int,
        height: int
    ) -> np.ndarray:
        """
        Render the game state to an RGB array.

        Args:
            render_data: Data from CoreGame.get_render_data().
            width: Output image width.
            height: Output image height.

        Returns:
            (height, width, 3) uint8 array.
        """
        img = np.zeros((height, width, 3), dtype=np.uint8)
        img[:] = self._bg_color

        # Play area is stretched to the full image
        sx = width / render_data["play_width"]
        sy = height / render_data["play_height"]

        # Side columns
        left = int(render_data["margin_left"] * sx)
        right = int(render_data["margin_right"] * sx)
        img[:, :left] = self._column_color
        if right > 0:
            img[:, width - right:] = self._column_color

        # Fish
        fish = render_data["fish"]
        color = np.array(KIND_COLORS.get(fish["kind"], (200, 200, 200)), dtype=np.uint8)
        self._fill_rect(
            img,
            fish["x"] * sx, fish["y"] * sy,
            (fish["x"] + fish["size"]) * sx, (fish["y"] + fish["size"]) * sy,
            color
        )

        # Net
        net = render_data["net"]
        if net["visible"]:
            self._outline_rect(
                img,
                net["x"] * sx, net["y"] * sy,
                (net["x"] + net["width"]) * sx, (net["y"] + net["height"]) * sy,
                self._net_color,
                thickness=2
            )

        # Floating score markers
        marker = max(2, int(6 * min(sx, sy)))
        for particle in render_data["particles"]:
            px = particle["x"] * sx
            py = particle["y"] * sy
            self._fill_rect(
                img,
                px - marker, py - marker, px + marker, py + marker,
                np.array(particle["color"], dtype=np.uint8)
            )

        # Hearts
        heart = max(3, int(12 * min(sx, sy)))
        for i in range(render_data["lives"]):
            x0 = 4 + i * (heart + 4)
            self._fill_rect(img, x0, 4, x0 + heart, 4 + heart, self._heart_color)

        # Dim the board when paused or over
        if render_data["ended"]:
            img = (img * 0.3).astype(np.uint8)
        elif render_data["paused"]:
            img = (img * 0.6).astype(np.uint8)

        return img

    def _fill_rect(
        self,
        img: np.ndarray,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        color: np.ndarray
    ) -> None:
        """Draw a filled rectangle, clipped to the image."""
        height, width = img.shape[:2]

        xa = max(0, int(x0))
        xb = min(width, int(x1))
        ya = max(0, int(y0))
        yb = min(height, int(y1))

        if xa >= xb or ya >= yb:
            return

        img[ya:yb, xa:xb] = color

    def _outline_rect(
        self,
        img: np.ndarray,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        color: np.ndarray,
        thickness: int = 1
    ) -> None:
        """Draw a rectangle outline."""
        self._fill_rect(img, x0, y0, x1, y0 + thickness, color)
        self._fill_rect(img, x0, y1 - thickness, x1, y1, color)
        self._fill_rect(img, x0, y0, x0 + thickness, y1, color)
        self._fill_rect(img, x1 - thickness, y0, x1, y1, color)

    def close(self) -> None:
        """Clean up resources (no-op for solid renderer)."""
        pass
