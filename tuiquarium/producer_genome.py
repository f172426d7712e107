"""Producer genomes: evolvable blueprints for sessile photosynthetic colonies.

Morphology genes parameterise colony shape; physiology genes encode trade-offs
between competitive, stress-tolerant and ruderal strategies.
"""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass
class ProducerGenome:
    """Complete genome of an aquatic producer colony."""

    stem_thickness: float
    """Support density / attachment strength proxy (0.0–1.0)."""
    height_factor: float
    """Vertical profile: low = mat-like, high = plume-like."""
    leaf_area: float
    """Active photosynthetic surface proxy."""
    branching: float
    """Colony roughness / branching heterogeneity."""
    curvature: float
    """Irregularity of the colony outline."""
    primary_hue: float
    photosynthesis_rate: float
    """Light-to-reserve conversion rate (0.5–2.0)."""
    max_energy_factor: float
    """Storage capacity factor (0.5–2.0)."""
    hardiness: float
    """Stress tolerance (0.0–1.0)."""
    seed_range: float
    """Propagule dispersal range factor (0.5–2.0)."""
    seed_count: float
    """Propagule count factor (0.3–2.0)."""
    seed_size: float
    """Investment per propagule (0.3–2.0)."""
    lifespan_factor: float
    """Turnover resistance factor (0.5–2.0)."""
    nutritional_value: float
    """Grazer reward from active biomass (0.3–1.5)."""
    clonal_spread: float
    """Lateral spread tendency (0.0–1.0)."""
    nutrient_affinity: float
    """Growth under low dissolved N/P (0.3–1.5)."""
    epiphyte_resistance: float
    """Resistance to fouling and shading load (0.0–1.0)."""
    reserve_allocation: float
    """Share of surplus reserve diverted into propagules (0.0–1.0)."""
    complexity: float
    """Master complexity gate (0.0–1.0)."""
    generation: int = 0
    mutation_rate_factor: float = 1.0
    """Scales the base mutation rate (0.5–2.0)."""

    @classmethod
    def random(cls, rng: random.Random) -> "ProducerGenome":
        """A genome with every gene drawn across its full range."""
        return cls(
            stem_thickness=rng.uniform(0.0, 1.0),
            height_factor=rng.uniform(0.0, 1.0),
            leaf_area=rng.uniform(0.0, 1.0),
            branching=rng.uniform(0.0, 1.0),
            curvature=rng.uniform(0.0, 1.0),
            primary_hue=rng.uniform(0.0, 1.0),
            photosynthesis_rate=rng.uniform(0.5, 2.0),
            max_energy_factor=rng.uniform(0.5, 2.0),
            hardiness=rng.uniform(0.0, 1.0),
            seed_range=rng.uniform(0.5, 2.0),
            seed_count=rng.uniform(0.3, 2.0),
            seed_size=rng.uniform(0.3, 2.0),
            lifespan_factor=rng.uniform(0.5, 2.0),
            nutritional_value=rng.uniform(0.3, 1.5),
            clonal_spread=rng.uniform(0.0, 1.0),
            nutrient_affinity=rng.uniform(0.3, 1.5),
            epiphyte_resistance=rng.uniform(0.0, 1.0),
            reserve_allocation=rng.uniform(0.0, 1.0),
            complexity=rng.uniform(0.0, 1.0),
            generation=0,
            mutation_rate_factor=rng.uniform(0.5, 2.0),
        )

    @classmethod
    def minimal_producer(cls, rng: random.Random) -> "ProducerGenome":
        """A low-profile, fast-turnover founder colony."""
        return cls(
            stem_thickness=rng.uniform(0.2, 0.6),
            height_factor=rng.uniform(0.1, 0.5),
            leaf_area=rng.uniform(0.3, 0.7),
            branching=rng.uniform(0.1, 0.5),
            curvature=rng.uniform(0.1, 0.6),
            primary_hue=rng.uniform(0.0, 1.0),
            photosynthesis_rate=rng.uniform(0.8, 1.2),
            max_energy_factor=rng.uniform(0.8, 1.2),
            hardiness=rng.uniform(0.2, 0.6),
            seed_range=rng.uniform(0.7, 1.4),
            seed_count=rng.uniform(0.5, 1.1),
            seed_size=rng.uniform(0.3, 0.8),
            lifespan_factor=rng.uniform(0.8, 1.2),
            nutritional_value=rng.uniform(0.5, 1.0),
            clonal_spread=rng.uniform(0.2, 0.8),
            nutrient_affinity=rng.uniform(0.7, 1.1),
            epiphyte_resistance=rng.uniform(0.2, 0.6),
            reserve_allocation=rng.uniform(0.3, 0.7),
            complexity=rng.uniform(0.05, 0.25),
            generation=0,
            mutation_rate_factor=rng.uniform(0.8, 1.2),
        )

    def producer_mass(self) -> float:
        """Allometric mass derived from stem thickness and height."""
        base = self.stem_thickness * 0.5 + 0.1
        height = self.height_factor * 0.8 + 0.2
        return base * height

    def effective_capture_area(self) -> float:
        """Light-capturing area from leaf area, branching and height."""
        return (
            self.leaf_area
            * (1.0 + self.branching * 0.5)
            * (0.5 + self.height_factor * 0.5)
        )

    def support_target_biomass(self) -> float:
        """Target structural biomass for this morphology."""
        return 0.6 + self.producer_mass() * 5.0 + self.height_factor * 1.5

    def active_target_biomass(self) -> float:
        """Target photosynthetic biomass for this morphology."""
        return 0.5 + self.effective_capture_area() * 3.5

    def color_index(self) -> int:
        """Palette index used to draw the producer, chosen by hue."""
        hue = self.primary_hue
        if hue < 0.2:
            return 5
        if hue < 0.4:
            return 8
        if hue < 0.55:
            return 9
        if hue < 0.7:
            return 10
        if hue < 0.85:
            return 6
        return 11