"""Genetic operations on producer genomes: mutation and distance.

Producers reproduce asexually, so mutation is their only source of genetic
variation. Each gene is clamped to a range that encodes an ecological
trade-off.
"""

from __future__ import annotations

import random
from typing import Dict, Tuple

from tuiquarium.producer_genome import ProducerGenome

# Rate at which the mutation-rate gene itself mutates, independent of its value.
_META_MUTATION_RATE = 0.05

# Size of the complexity step applied on every mutation.
_COMPLEXITY_STEP = 0.15

# Genes in mutation order, each with its allowed range.
_MUTABLE_RANGES: Dict[str, Tuple[float, float]] = {
    # Morphology
    "stem_thickness": (0.0, 1.0),
    "height_factor": (0.0, 1.0),
    "leaf_area": (0.0, 1.0),
    "branching": (0.0, 1.0),
    "curvature": (0.0, 1.0),
    "primary_hue": (0.0, 1.0),
    # Physiology
    "photosynthesis_rate": (0.5, 2.0),
    "max_energy_factor": (0.5, 2.0),
    "hardiness": (0.0, 1.0),
    "seed_range": (0.5, 2.0),
    "seed_count": (0.3, 2.0),
    "seed_size": (0.3, 2.0),
    "lifespan_factor": (0.5, 2.0),
    "nutritional_value": (0.3, 1.5),
    "clonal_spread": (0.0, 1.0),
    "nutrient_affinity": (0.3, 1.5),
    "epiphyte_resistance": (0.0, 1.0),
    "reserve_allocation": (0.0, 1.0),
}

_MUTATION_RATE_RANGE = (0.5, 2.0)

_DISTANCE_GENES = (
    "stem_thickness",
    "height_factor",
    "leaf_area",
    "branching",
    "curvature",
    "photosynthesis_rate",
    "max_energy_factor",
    "hardiness",
    "nutritional_value",
    "clonal_spread",
    "nutrient_affinity",
    "epiphyte_resistance",
    "reserve_allocation",
    "complexity",
)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _perturb(
    genome: ProducerGenome,
    name: str,
    bounds: Tuple[float, float],
    rate: float,
    rng: random.Random,
) -> None:
    """With probability ``rate``, nudge a gene by up to 10% of its range."""
    if rng.random() < rate:
        low, high = bounds
        delta = rng.uniform(-0.1, 0.1)
        current = getattr(genome, name)
        setattr(genome, name, _clamp(current + delta * (high - low), low, high))


def mutate_producer(genome: ProducerGenome, rate: float, rng: random.Random) -> None:
    """Mutate ``genome`` in place.

    Each gene is perturbed with probability ``rate``; the mutation-rate gene
    uses a fixed low rate, and complexity is perturbed every time.
    """
    for name, bounds in _MUTABLE_RANGES.items():
        _perturb(genome, name, bounds, rate, rng)
    _perturb(
        genome, "mutation_rate_factor", _MUTATION_RATE_RANGE, _META_MUTATION_RATE, rng
    )
    delta = rng.uniform(-_COMPLEXITY_STEP, _COMPLEXITY_STEP)
    genome.complexity = _clamp(genome.complexity + delta, 0.0, 1.0)


def producer_genomic_distance(a: ProducerGenome, b: ProducerGenome) -> float:
    """Sum of absolute differences over the genes used for producer speciation."""
    return sum(abs(getattr(a, name) - getattr(b, name)) for name in _DISTANCE_GENES)