"""
Fish Spawner
============

Produces the next falling fish: a uniform X between the side margins, a
fixed Y just above the play area, and a species from the weighted table.
"""

from __future__ import annotations

from typing import Optional, Protocol

from pondcatch.catch_core.config_loader import GameConfig, get_config
from pondcatch.catch_core.rng import UniformSource, fold_unit
from pondcatch.catch_core.rules import SpawnRules
from pondcatch.catch_core.session import FallingObject, SessionState
from pondcatch.catch_core.species_catalog import SpeciesCatalog, get_catalog


class RandomSource(Protocol):
    """Anything with a random() method returning floats in [0, 1)."""

    def random(self) -> float:
        ...

    def reset(self, seed: Optional[int] = None) -> None:
        ...


def spawn(
    play_width: float,
    play_height: float,
    fish_size: float,
    margin_left: float,
    margin_right: float,
    rng: RandomSource,
    catalog: SpeciesCatalog
) -> FallingObject:
    """
    Create the next fish.

    Draws two samples, X first and species second.

    Args:
        play_width: Current play area width.
        play_height: Current play area height (spawning is independent of it).
        fish_size: Side of the fish square.
        margin_left: Spawn-free column on the left.
        margin_right: Spawn-free column on the right.
        rng: Uniform random source.
        catalog: Species table.

    Returns:
        A new FallingObject. The caller replaces the session's fish with it.
    """
    x = SpawnRules.sample_to_spawn_x(
        fold_unit(rng.random()),
        play_width,
        fish_size,
        margin_left,
        margin_right
    )
    species = catalog.select(fold_unit(rng.random()))

    return FallingObject(
        x=x,
        y=SpawnRules.spawn_y(fish_size),
        kind=species.kind,
        value=species.value,
        size=fish_size,
        species_id=species.id
    )


class FishSpawner:
    """Spawner bound to a configuration, species table and random source."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[RandomSource] = None,
        catalog: Optional[SpeciesCatalog] = None
    ):
        """
        Initialize spawner.

        Args:
            config: Game configuration. Uses default if None.
            rng: Uniform random source. Unseeded UniformSource if None.
            catalog: Species table. Built from config if None.
        """
        if config is None:
            config = get_config()

        self._config = config
        self._rng = rng if rng is not None else UniformSource()
        self._catalog = catalog if catalog is not None else get_catalog(config)

    @property
    def rng(self) -> RandomSource:
        return self._rng

    @property
    def catalog(self) -> SpeciesCatalog:
        return self._catalog

    def spawn(self, play_width: float, play_height: float) -> FallingObject:
        """Spawn a fish for a play area of the given size."""
        return spawn(
            play_width,
            play_height,
            self._config.fish.size,
            self._config.board.margin_left,
            self._config.board.margin_right,
            self._rng,
            self._catalog
        )

    def spawn_for(self, state: SessionState) -> FallingObject:
        """Spawn a fish for the session's current play area."""
        return self.spawn(state.play_width, state.play_height)
