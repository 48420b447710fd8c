"""
Species Catalog
===============

Provides convenient access to fish species definitions loaded from config,
including the cumulative probability table used when spawning.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Optional

from pondcatch.catch_core.config_loader import (
    GameConfig,
    SpeciesConfig,
    get_config
)


class FishKind(str, Enum):
    """Sprite class of a falling fish."""
    CARP = "carp"
    GRASSCARP = "grasscarp"
    CATFISH = "catfish"
    BETA = "beta"


@dataclass
class FishSpecies:
    """
    Runtime representation of a fish species.

    Wraps SpeciesConfig with the upper bound of its slice of the spawn table.
    """
    config: SpeciesConfig
    cumulative: float

    @property
    def id(self) -> int:
        return self.config.id

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def kind(self) -> FishKind:
        return FishKind(self.config.name)

    @property
    def value(self) -> int:
        return self.config.value

    @property
    def probability(self) -> float:
        return self.config.probability

    def __repr__(self) -> str:
        return f"FishSpecies({self.id}: {self.name}, +{self.value})"


class SpeciesCatalog:
    """
    Ordered collection of all fish species.

    The order of the config list defines the cumulative table: a uniform
    draw r selects the first species whose cumulative bound exceeds r.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize catalog from game config.

        Args:
            config: GameConfig instance. If None, loads from default location.
        """
        if config is None:
            config = get_config()

        self._config = config

        species = []
        cumulative = 0.0
        for species_config in config.species:
            cumulative += species_config.probability
            species.append(FishSpecies(species_config, cumulative))
        self._species: Tuple[FishSpecies, ...] = tuple(species)

    def __len__(self) -> int:
        """Total number of species."""
        return len(self._species)

    def __getitem__(self, species_id: int) -> FishSpecies:
        """Get species by ID."""
        if 0 <= species_id < len(self._species):
            return self._species[species_id]
        raise IndexError(f"Species ID {species_id} out of range [0, {len(self._species)})")

    def __iter__(self):
        """Iterate over all species."""
        return iter(self._species)

    def select(self, r: float) -> FishSpecies:
        """
        Pick the species for a uniform sample.

        Args:
            r: Uniform sample in [0, 1).

        Returns:
            The species whose slice of the table contains r.
        """
        for species in self._species:
            if r < species.cumulative:
                return species
        # Rounding in the cumulative sum can leave a sliver just under 1.0
        return self._species[-1]

    def get_by_kind(self, kind: FishKind) -> Optional[FishSpecies]:
        """Get species by kind."""
        for species in self._species:
            if species.kind is kind:
                return species
        return None

    def get_by_name(self, name: str) -> Optional[FishSpecies]:
        """Get species by name (case-insensitive)."""
        name_lower = name.lower()
        for species in self._species:
            if species.name == name_lower:
                return species
        return None


# Module-level singleton
_cached_catalog: Optional[SpeciesCatalog] = None


def get_catalog(config: Optional[GameConfig] = None) -> SpeciesCatalog:
    """
    Get the species catalog singleton.

    Args:
        config: Optional config to use. If None, uses cached or default config.

    Returns:
        SpeciesCatalog instance.
    """
    global _cached_catalog
    if _cached_catalog is None or config is not None:
        _cached_catalog = SpeciesCatalog(config)
    return _cached_catalog
