"""
Human Play Mode
================

Play the pond catch game with the mouse (or a touch screen).

Controls:
    - Mouse / touch: Move the net
    - ESC: Pause / resume
    - R: Restart game
    - Q: Quit

Usage:
    python -m tools.play_human [--seed SEED] [--width WIDTH] [--height HEIGHT]
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Tuple

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from pondcatch.catch_core.config_loader import load_config, GameConfig
from pondcatch.catch_core.game import CoreGame
from pondcatch.catch_core.render_solid import KIND_COLORS


class PondRenderer:
    """
    Draws the pond, fish, net and HUD with plain pygame shapes and text.
    """

    def __init__(self, config: GameConfig):
        """Initialize fonts and palette."""
        self._config = config

        # Colors
        self._water_top = (70, 140, 170)
        self._water_bottom = (30, 80, 110)
        self._column = (40, 80, 60)
        self._net_frame = (235, 225, 200)
        self._net_mesh = (200, 190, 170)
        self._heart = (255, 75, 75)
        self._text = (255, 255, 255)
        self._score_glow = (79, 172, 254)

        # Fonts
        pygame.font.init()
        self._font_huge = pygame.font.Font(None, 72)
        self._font_large = pygame.font.Font(None, 44)
        self._font_medium = pygame.font.Font(None, 34)
        self._font_small = pygame.font.Font(None, 22)

        self._bg_surface: Optional[pygame.Surface] = None
        self._bg_size: Tuple[int, int] = (0, 0)

    def _background(self, width: int, height: int) -> pygame.Surface:
        """Vertical water gradient, cached per window size."""
        if self._bg_surface is None or self._bg_size != (width, height):
            surface = pygame.Surface((width, height))
            for y in range(height):
                t = y / max(1, height)
                color = tuple(
                    int(a * (1 - t) + b * t)
                    for a, b in zip(self._water_top, self._water_bottom)
                )
                pygame.draw.line(surface, color, (0, y), (width, y))
            self._bg_surface = surface
            self._bg_size = (width, height)
        return self._bg_surface

    def render(self, screen: pygame.Surface, render_data: dict) -> None:
        """Render the complete scene."""
        width = int(render_data["play_width"])
        height = int(render_data["play_height"])

        screen.blit(self._background(width, height), (0, 0))
        self._draw_columns(screen, render_data, height)
        self._draw_fish(screen, render_data["fish"])

        if render_data["net"]["visible"]:
            self._draw_net(screen, render_data["net"])

        self._draw_hud(screen, render_data)
        self._draw_particles(screen, render_data["particles"])

        if render_data["ended"]:
            self._draw_overlay(screen, 180, "GAME OVER", "Press R to restart")
        elif render_data["paused"]:
            self._draw_overlay(screen, 100, "PAUSED", "Press ESC to resume")

    def _draw_columns(self, screen: pygame.Surface, render_data: dict, height: int) -> None:
        left = int(render_data["margin_left"])
        right = int(render_data["margin_right"])
        width = int(render_data["play_width"])
        pygame.draw.rect(screen, self._column, (0, 0, left, height))
        pygame.draw.rect(screen, self._column, (width - right, 0, right, height))

    def _draw_fish(self, screen: pygame.Surface, fish: dict) -> None:
        """Draw the fish as a rounded body with a tail and its species name."""
        x, y, size = int(fish["x"]), int(fish["y"]), int(fish["size"])
        color = KIND_COLORS.get(fish["kind"], (200, 200, 200))

        body = pygame.Rect(x + size // 10, y + size // 4, size * 7 // 10, size // 2)
        pygame.draw.ellipse(screen, color, body)
        pygame.draw.polygon(screen, color, [
            (body.right - 4, body.centery),
            (x + size, y + size // 5),
            (x + size, y + size * 4 // 5),
        ])
        pygame.draw.circle(screen, (20, 20, 20), (body.left + size // 8, body.centery - 4), 4)

        label = self._font_small.render(fish["kind"], True, self._text)
        screen.blit(label, (x + (size - label.get_width()) // 2, y + size * 3 // 4 + 4))

    def _draw_net(self, screen: pygame.Surface, net: dict) -> None:
        """Draw the net as a frame with a mesh."""
        rect = pygame.Rect(int(net["x"]), int(net["y"]), int(net["width"]), int(net["height"]))
        spacing = 20
        for mx in range(rect.left + spacing, rect.right, spacing):
            pygame.draw.line(screen, self._net_mesh, (mx, rect.top), (mx, rect.bottom), 1)
        for my in range(rect.top + spacing, rect.bottom, spacing):
            pygame.draw.line(screen, self._net_mesh, (rect.left, my), (rect.right, my), 1)
        pygame.draw.rect(screen, self._net_frame, rect, 4, border_radius=12)

    def _draw_heart(self, screen: pygame.Surface, cx: int, cy: int, r: int) -> None:
        pygame.draw.circle(screen, self._heart, (cx - r // 2, cy - r // 3), r // 2 + 1)
        pygame.draw.circle(screen, self._heart, (cx + r // 2, cy - r // 3), r // 2 + 1)
        pygame.draw.polygon(screen, self._heart, [
            (cx - r, cy - r // 4), (cx + r, cy - r // 4), (cx, cy + r)
        ])

    def _draw_hud(self, screen: pygame.Surface, render_data: dict) -> None:
        """Hearts, score and portrait level."""
        start_x = 30

        for i in range(render_data["lives"]):
            self._draw_heart(screen, start_x + 14 + i * 45, 45, 16)

        score_text = f"Score: {render_data['score']}"
        glow = self._font_medium.render(score_text, True, self._score_glow)
        screen.blit(glow, (start_x + 2, 92))
        score = self._font_medium.render(score_text, True, self._text)
        screen.blit(score, (start_x, 90))

        level = render_data["portrait_tier"] + 1
        level_text = self._font_small.render(f"Angler level {level}", True, self._text)
        screen.blit(level_text, (start_x, 130))

    def _draw_particles(self, screen: pygame.Surface, particles: list) -> None:
        """Floating score text with a dark outline."""
        for particle in particles:
            shadow = self._font_large.render(particle["text"], True, (0, 0, 0))
            text = self._font_large.render(particle["text"], True, particle["color"])
            x, y = int(particle["x"]), int(particle["y"])
            screen.blit(shadow, (x + 2, y + 2))
            screen.blit(text, (x, y))

    def _draw_overlay(self, screen: pygame.Surface, alpha: int, title: str, hint: str) -> None:
        width, height = screen.get_size()
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, alpha))
        screen.blit(overlay, (0, 0))

        title_surf = self._font_huge.render(title, True, self._text)
        screen.blit(title_surf, ((width - title_surf.get_width()) // 2, height // 2 - 40))
        hint_surf = self._font_medium.render(hint, True, self._text)
        screen.blit(hint_surf, ((width - hint_surf.get_width()) // 2, height // 2 + 20))


class HumanPlayer:
    """
    Interactive session: pumps one game tick per displayed frame.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        seed: Optional[int] = None,
        window_width: Optional[int] = None,
        window_height: Optional[int] = None,
        target_fps: int = 60
    ):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required. Install: pip install pygame")

        if config is None:
            config = load_config()

        self._config = config
        self._seed = seed
        self._target_fps = target_fps

        width = window_width or config.board.width
        height = window_height or config.board.height

        self._game = CoreGame(config=config, seed=seed)
        self._game.resize(width, height)
        self._game.restart(seed=seed)

        pygame.init()
        self._screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Pond Catch")
        self._clock = pygame.time.Clock()

        self._renderer = PondRenderer(config)
        self._running = True
        self._announced_end = False

    def run(self) -> int:
        """Run the game loop. Returns final score."""
        print("=== Pond Catch ===")
        print("Move the mouse to catch fish")
        print("ESC to pause, R to restart, Q to quit")
        print()

        while self._running:
            self._handle_events()
            self._update()
            self._renderer.render(self._screen, self._game.get_render_data())
            pygame.display.flip()
            self._clock.tick(self._target_fps)

        pygame.quit()
        return self._game.score

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.VIDEORESIZE:
                self._game.resize(event.w, event.h)

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_q:
                    self._running = False
                elif event.key == pygame.K_ESCAPE:
                    self._game.toggle()
                elif event.key == pygame.K_r:
                    self._restart()

            elif event.type == pygame.MOUSEMOTION:
                self._move_net(*event.pos)

            elif event.type == pygame.FINGERMOTION:
                width, height = self._screen.get_size()
                self._move_net(event.x * width, event.y * height)

    def _move_net(self, x: float, y: float) -> None:
        """Center the net on the pointer. Ignored while paused."""
        if self._game.paused:
            return
        net = self._game.session.net
        self._game.set_catcher_position(x - net.width / 2, y - net.height / 2)

    def _update(self) -> None:
        """Advance one frame and report catches and the end of the session."""
        result = self._game.tick()

        if result.caught:
            print(f"  +{result.catch.points} (Total: {self._game.score})")

        if result.missed and not result.ended:
            print(f"  Missed! Lives left: {self._game.lives}")

        if result.ended and not self._announced_end:
            self._announced_end = True
            print(f"\nGAME OVER - Score: {self._game.score}")

    def _restart(self) -> None:
        """Restart the game."""
        self._game.restart()
        self._announced_end = False
        print("\n=== Game Restarted ===\n")


def main():
    parser = argparse.ArgumentParser(description="Play pond catch interactively")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--width", type=int, default=None, help="Window width (default: config)")
    parser.add_argument("--height", type=int, default=None, help="Window height (default: config)")
    parser.add_argument("--fps", type=int, default=60, help="Target FPS")

    args = parser.parse_args()

    try:
        config = load_config()
        player = HumanPlayer(
            config=config,
            seed=args.seed,
            window_width=args.width,
            window_height=args.height,
            target_fps=args.fps
        )
        score = player.run()
        print(f"\nFinal Score: {score}")
        return 0
    except (ImportError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
