"""Genetic operations on creature genomes: crossover, mutation and distance.

Every gene is a continuous float, so mutation is always a gradual perturbation
clamped to the gene's range.
"""

from __future__ import annotations

import random
from dataclasses import fields, replace
from typing import Dict, Tuple, TypeVar

from tuiquarium.genome import AnimGenome, ArtGenome, BehaviorGenome, CreatureGenome

# Genomic distance above which two creatures count as different species.
CREATURE_SPECIES_THRESHOLD = 1.5

# Rate at which the mutation-rate gene itself mutates, independent of its value.
_META_MUTATION_RATE = 0.05

# Size of the complexity step applied on every mutation.
_COMPLEXITY_STEP = 0.15

_ART_RANGES: Dict[str, Tuple[float, float]] = {
    "body_elongation": (0.0, 1.0),
    "body_height_ratio": (0.0, 1.0),
    "body_size": (0.2, 5.0),
    "tail_fork": (0.0, 1.0),
    "tail_length": (0.0, 1.5),
    "top_appendage": (0.0, 1.0),
    "side_appendages": (0.0, 1.0),
    "pattern_density": (0.0, 1.0),
    "eye_size": (0.0, 1.0),
    "primary_hue": (0.0, 1.0),
    "secondary_hue": (0.0, 1.0),
    "color_brightness": (0.0, 1.0),
}

_ANIM_RANGES: Dict[str, Tuple[float, float]] = {
    "swim_speed": (0.3, 2.0),
    "tail_amplitude": (0.0, 1.0),
    "idle_sway": (0.0, 1.0),
    "undulation": (0.0, 1.0),
}

_BEHAVIOR_RANGES: Dict[str, Tuple[float, float]] = {
    "schooling_affinity": (0.0, 1.0),
    "aggression": (0.0, 1.0),
    "timidity": (0.0, 1.0),
    "speed_factor": (0.5, 2.0),
    "metabolism_factor": (0.5, 2.0),
    "max_lifespan_factor": (0.5, 2.0),
    "reproduction_rate": (0.2, 1.0),
    "mouth_size": (0.0, 1.0),
    "hunting_instinct": (0.0, 1.0),
    "mutation_rate_factor": (0.5, 2.0),
    "mate_preference_hue": (0.0, 1.0),
    "learning_rate": (0.0, 0.1),
    "pheromone_sensitivity": (0.0, 1.0),
}

_DISTANCE_ART_GENES = (
    "body_elongation",
    "body_height_ratio",
    "body_size",
    "tail_length",
    "color_brightness",
    "top_appendage",
    "side_appendages",
)

_DISTANCE_BEHAVIOR_GENES = (
    "schooling_affinity",
    "aggression",
    "speed_factor",
    "mouth_size",
    "hunting_instinct",
)

_G = TypeVar("_G", ArtGenome, AnimGenome, BehaviorGenome)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _uniform_crossover(a: _G, b: _G, rng: random.Random) -> _G:
    """Take each gene from one parent or the other with equal chance."""
    chosen = {
        f.name: getattr(a if rng.random() < 0.5 else b, f.name) for f in fields(a)
    }
    return replace(a, **chosen)


def crossover(
    a: CreatureGenome, b: CreatureGenome, rng: random.Random
) -> CreatureGenome:
    """Uniform crossover: every gene comes from parent ``a`` or ``b`` at random."""
    return CreatureGenome(
        art=_uniform_crossover(a.art, b.art, rng),
        anim=_uniform_crossover(a.anim, b.anim, rng),
        behavior=_uniform_crossover(a.behavior, b.behavior, rng),
        complexity=a.complexity if rng.random() < 0.5 else b.complexity,
        generation=max(a.generation, b.generation) + 1,
    )


def _perturb(
    target: object,
    name: str,
    bounds: Tuple[float, float],
    rate: float,
    rng: random.Random,
) -> None:
    """With probability ``rate``, nudge a gene by up to 10% of its range."""
    if rng.random() < rate:
        low, high = bounds
        delta = rng.uniform(-0.1, 0.1)
        setattr(target, name, _clamp(getattr(target, name) + delta * (high - low), low, high))


def _mutate_part(
    part: object,
    ranges: Dict[str, Tuple[float, float]],
    rate: float,
    rng: random.Random,
    fixed_rates: Dict[str, float] | None = None,
) -> None:
    fixed_rates = fixed_rates or {}
    for name, bounds in ranges.items():
        _perturb(part, name, bounds, fixed_rates.get(name, rate), rng)


def mutate(genome: CreatureGenome, rate: float, rng: random.Random) -> None:
    """Mutate ``genome`` in place.

    Each gene is perturbed with probability ``rate``; the mutation-rate gene
    uses a fixed low rate, and complexity is perturbed every time.
    """
    _mutate_part(genome.art, _ART_RANGES, rate, rng)
    _mutate_part(genome.anim, _ANIM_RANGES, rate, rng)
    _mutate_part(
        genome.behavior,
        _BEHAVIOR_RANGES,
        rate,
        rng,
        fixed_rates={"mutation_rate_factor": _META_MUTATION_RATE},
    )
    delta = rng.uniform(-_COMPLEXITY_STEP, _COMPLEXITY_STEP)
    genome.complexity = _clamp(genome.complexity + delta, 0.0, 1.0)


def genomic_distance(a: CreatureGenome, b: CreatureGenome) -> float:
    """Sum of absolute differences over the genes that define a species."""
    art = sum(abs(getattr(a.art, n) - getattr(b.art, n)) for n in _DISTANCE_ART_GENES)
    behavior = sum(
        abs(getattr(a.behavior, n) - getattr(b.behavior, n))
        for n in _DISTANCE_BEHAVIOR_GENES
    )
    return art + behavior + abs(a.complexity - b.complexity)