"""
Configuration Loader
====================

Loads and validates game_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple, Optional

import yaml


# Species the game knows how to draw and score
KNOWN_SPECIES = ("carp", "grasscarp", "catfish", "beta")


@dataclass(frozen=True)
class BoardConfig:
    """Default play area geometry and spawn margins."""
    width: int                   # Play area width in pixels
    height: int                  # Play area height in pixels
    margin_left: int             # Spawn-free column on the left
    margin_right: int            # Spawn-free column on the right


@dataclass(frozen=True)
class FishConfig:
    """Falling fish size and difficulty ramp."""
    size: float
    base_speed: float            # Pixels per frame
    speed_increment: float       # Added on every catch


@dataclass(frozen=True)
class NetConfig:
    """Catcher base bounds."""
    width: float
    height: float
    scale: float


@dataclass(frozen=True)
class LivesConfig:
    """Hearts."""
    max: int


@dataclass(frozen=True)
class ParticleConfig:
    """Floating score text parameters."""
    life: int                    # Frames
    rise_speed: float            # Pixels per frame
    capacity: int                # Initial arena slots


@dataclass(frozen=True)
class SpeciesConfig:
    """Configuration for a single fish species."""
    id: int
    name: str
    value: int
    probability: float


@dataclass(frozen=True)
class ColorConfig:
    """Score-tier colors for floating text."""
    default: Tuple[int, int, int]
    tiers: Tuple[Tuple[int, Tuple[int, int, int]], ...]

    def for_value(self, value: int) -> Tuple[int, int, int]:
        """Color used to draw a score of the given value."""
        for tier_value, color in self.tiers:
            if tier_value == value:
                return color
        return self.default


@dataclass(frozen=True)
class PortraitConfig:
    """Score thresholds for the portrait shown beside the pond."""
    thresholds: Tuple[int, ...]


@dataclass(frozen=True)
class CapsConfig:
    """Episode limits."""
    max_ticks: int


@dataclass(frozen=True)
class ObservationConfig:
    """Observation space parameters."""
    max_particles: int
    image_enabled: bool
    image_width: int
    image_height: int


@dataclass(frozen=True)
class GameConfig:
    """
    Complete game configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    board: BoardConfig
    fish: FishConfig
    net: NetConfig
    lives: LivesConfig
    particles: ParticleConfig
    species: Tuple[SpeciesConfig, ...]
    colors: ColorConfig
    portraits: PortraitConfig
    caps: CapsConfig
    observation: ObservationConfig

    @property
    def num_species(self) -> int:
        """Total number of fish species."""
        return len(self.species)

    @property
    def min_play_width(self) -> float:
        """Narrowest play area that still leaves room to spawn a fish."""
        return self.board.margin_left + self.board.margin_right + self.fish.size

    def get_species(self, species_id: int) -> SpeciesConfig:
        """Get species config by ID."""
        if 0 <= species_id < len(self.species):
            return self.species[species_id]
        raise ValueError(f"Invalid species ID: {species_id}")


def _parse_color(color_data: List) -> Tuple[int, int, int]:
    """Parse RGB color from YAML."""
    if len(color_data) != 3:
        raise ValueError(f"Color must have 3 values [R, G, B], got {color_data}")
    return (int(color_data[0]), int(color_data[1]), int(color_data[2]))


def _parse_species(index: int, species_data: dict) -> SpeciesConfig:
    """Parse a single species entry from YAML."""
    return SpeciesConfig(
        id=index,
        name=str(species_data["name"]).lower(),
        value=int(species_data["value"]),
        probability=float(species_data["probability"])
    )


def _parse_colors(colors_data: dict) -> ColorConfig:
    """Parse the value -> color tier table."""
    tiers_data: Dict = colors_data.get("tiers", {})
    tiers = tuple(
        (int(value), _parse_color(color))
        for value, color in sorted(tiers_data.items(), key=lambda item: int(item[0]))
    )
    return ColorConfig(
        default=_parse_color(colors_data.get("default", [255, 255, 255])),
        tiers=tiers
    )


def _validate_config(config: GameConfig) -> None:
    """Validate configuration consistency."""
    if config.fish.size <= 0:
        raise ValueError(f"fish.size must be positive, got {config.fish.size}")

    if config.fish.base_speed <= 0:
        raise ValueError(f"fish.base_speed must be positive, got {config.fish.base_speed}")

    if config.fish.speed_increment < 0:
        raise ValueError(
            f"fish.speed_increment must not be negative, got {config.fish.speed_increment}"
        )

    if config.net.width <= 0 or config.net.height <= 0 or config.net.scale <= 0:
        raise ValueError("net width, height and scale must be positive")

    if config.lives.max < 1:
        raise ValueError(f"lives.max must be at least 1, got {config.lives.max}")

    if config.particles.life < 1:
        raise ValueError(f"particles.life must be at least 1, got {config.particles.life}")

    if not config.species:
        raise ValueError("At least one species must be configured")

    for species in config.species:
        if species.name not in KNOWN_SPECIES:
            raise ValueError(
                f"Unknown species '{species.name}', expected one of {KNOWN_SPECIES}"
            )
        if species.value < 1:
            raise ValueError(f"Species '{species.name}' must be worth at least 1 point")
        if species.probability < 0:
            raise ValueError(f"Species '{species.name}' has a negative probability")

    # Cumulative table must cover [0, 1)
    total = sum(s.probability for s in config.species)
    if not math.isclose(total, 1.0, abs_tol=1e-9):
        raise ValueError(f"Species probabilities must sum to 1.0, got {total}")

    thresholds = config.portraits.thresholds
    if list(thresholds) != sorted(thresholds):
        raise ValueError(f"portraits.thresholds must be ascending, got {list(thresholds)}")

    if config.caps.max_ticks < 1:
        raise ValueError(f"caps.max_ticks must be at least 1, got {config.caps.max_ticks}")

    if config.observation.max_particles < 1:
        raise ValueError(
            f"observation.max_particles must be at least 1, "
            f"got {config.observation.max_particles}"
        )


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """
    Load and validate game configuration from YAML.

    Args:
        config_path: Path to game_config.yaml. If None, uses default location.

    Returns:
        Validated GameConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "game_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    board_data = raw["board"]
    board = BoardConfig(
        width=int(board_data["width"]),
        height=int(board_data["height"]),
        margin_left=int(board_data.get("margin_left", 50)),
        margin_right=int(board_data.get("margin_right", 50))
    )

    fish_data = raw["fish"]
    fish = FishConfig(
        size=float(fish_data["size"]),
        base_speed=float(fish_data["base_speed"]),
        speed_increment=float(fish_data.get("speed_increment", 0.2))
    )

    net_data = raw["net"]
    net = NetConfig(
        width=float(net_data["width"]),
        height=float(net_data["height"]),
        scale=float(net_data.get("scale", 1.0))
    )

    lives = LivesConfig(max=int(raw["lives"]["max"]))

    particles_data = raw.get("particles", {})
    particles = ParticleConfig(
        life=int(particles_data.get("life", 40)),
        rise_speed=float(particles_data.get("rise_speed", 2.0)),
        capacity=int(particles_data.get("capacity", 16))
    )

    species = tuple(
        _parse_species(i, s) for i, s in enumerate(raw["species"])
    )

    colors = _parse_colors(raw.get("colors", {}))

    portraits_data = raw.get("portraits", {})
    portraits = PortraitConfig(
        thresholds=tuple(int(t) for t in portraits_data.get("thresholds", []))
    )

    caps_data = raw.get("caps", {})
    caps = CapsConfig(
        max_ticks=int(caps_data.get("max_ticks", 20000))
    )

    obs_data = raw.get("observation", {})
    observation = ObservationConfig(
        max_particles=int(obs_data.get("max_particles", 8)),
        image_enabled=bool(obs_data.get("image_enabled", False)),
        image_width=int(obs_data.get("image_width", 320)),
        image_height=int(obs_data.get("image_height", 240))
    )

    config = GameConfig(
        board=board,
        fish=fish,
        net=net,
        lives=lives,
        particles=particles,
        species=species,
        colors=colors,
        portraits=portraits,
        caps=caps,
        observation=observation
    )

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[GameConfig] = None


def get_config() -> GameConfig:
    """Get the cached game configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> GameConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
