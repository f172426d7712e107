"""Creature genomes: evolvable blueprints for body plan, motion and behaviour.

Every gene is a continuous float, so mutation is always a gradual perturbation.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass


@dataclass
class ArtGenome:
    """Visual appearance and body morphology."""

    body_elongation: float
    """0.0 = round, 1.0 = elongated."""
    body_height_ratio: float
    """0.0 = flat, 1.0 = tall."""
    body_size: float
    """Overall body size scale factor (0.2–5.0)."""
    tail_fork: float
    """Rear protrusion fork level: 0.0 = pointed, 1.0 = forked."""
    tail_length: float
    """Rear protrusion length (0.0–1.5)."""
    top_appendage: float
    side_appendages: float
    pattern_density: float
    eye_size: float
    primary_hue: float
    secondary_hue: float
    color_brightness: float

    @classmethod
    def random(cls, rng: random.Random) -> "ArtGenome":
        """Draw every gene uniformly across its full range."""
        return cls(
            body_elongation=rng.uniform(0.0, 1.0),
            body_height_ratio=rng.uniform(0.0, 1.0),
            body_size=rng.uniform(0.2, 5.0),
            tail_fork=rng.uniform(0.0, 1.0),
            tail_length=rng.uniform(0.0, 1.5),
            top_appendage=rng.uniform(0.0, 1.0),
            side_appendages=rng.uniform(0.0, 1.0),
            pattern_density=rng.uniform(0.0, 1.0),
            eye_size=rng.uniform(0.0, 1.0),
            primary_hue=rng.uniform(0.0, 1.0),
            secondary_hue=rng.uniform(0.0, 1.0),
            color_brightness=rng.uniform(0.0, 1.0),
        )

    def eye_char(self) -> str:
        """Character used to draw the eye, chosen by eye size."""
        if self.eye_size < 0.25:
            return "."
        if self.eye_size < 0.5:
            return "o"
        if self.eye_size < 0.75:
            return "*"
        return "O"

    def color_index(self) -> int:
        """Palette index 0–7 derived from the primary hue."""
        value = self.primary_hue * 8.0
        if math.isnan(value) or value <= 0.0:
            return 0
        return min(int(math.floor(value)), 7)


@dataclass
class AnimGenome:
    """Movement style."""

    swim_speed: float
    """Animation speed multiplier (0.3–2.0)."""
    tail_amplitude: float
    idle_sway: float
    undulation: float

    @classmethod
    def random(cls, rng: random.Random) -> "AnimGenome":
        """Draw every gene uniformly across its full range."""
        return cls(
            swim_speed=rng.uniform(0.3, 2.0),
            tail_amplitude=rng.uniform(0.0, 1.0),
            idle_sway=rng.uniform(0.0, 1.0),
            undulation=rng.uniform(0.0, 1.0),
        )


@dataclass
class BehaviorGenome:
    """Personality and ecological traits."""

    schooling_affinity: float
    aggression: float
    timidity: float
    speed_factor: float
    """0.5–2.0."""
    metabolism_factor: float
    """0.5–2.0."""
    max_lifespan_factor: float
    """0.5–2.0."""
    reproduction_rate: float
    """0.2–1.0."""
    mouth_size: float
    """Mouth size relative to body; bounds the largest prey."""
    hunting_instinct: float
    """Willingness to pursue mobile prey."""
    mutation_rate_factor: float
    """Scales the base mutation rate (0.5–2.0)."""
    mate_preference_hue: float
    """Preferred hue in a mate."""
    learning_rate: float
    """Lifetime weight plasticity (0.0–0.1)."""
    pheromone_sensitivity: float
    """Sensitivity to chemical signals (0.0–1.0)."""

    @classmethod
    def random(cls, rng: random.Random) -> "BehaviorGenome":
        """Draw every gene uniformly across its full range."""
        return cls(
            schooling_affinity=rng.uniform(0.0, 1.0),
            aggression=rng.uniform(0.0, 1.0),
            timidity=rng.uniform(0.0, 1.0),
            speed_factor=rng.uniform(0.5, 2.0),
            metabolism_factor=rng.uniform(0.5, 2.0),
            max_lifespan_factor=rng.uniform(0.5, 2.0),
            reproduction_rate=rng.uniform(0.2, 1.0),
            mouth_size=rng.uniform(0.0, 1.0),
            hunting_instinct=rng.uniform(0.0, 1.0),
            mutation_rate_factor=rng.uniform(0.5, 2.0),
            mate_preference_hue=rng.uniform(0.0, 1.0),
            learning_rate=rng.uniform(0.0, 0.1),
            pheromone_sensitivity=rng.uniform(0.0, 1.0),
        )


@dataclass
class CreatureGenome:
    """Complete creature genome: appearance, animation, behaviour and complexity."""

    art: ArtGenome
    anim: AnimGenome
    behavior: BehaviorGenome
    complexity: float
    """Master complexity gate (0.0–1.0) for expressed morphology."""
    generation: int = 0

    @classmethod
    def random(cls, rng: random.Random) -> "CreatureGenome":
        """A genome with every gene drawn across its full range."""
        return cls(
            art=ArtGenome.random(rng),
            anim=AnimGenome.random(rng),
            behavior=BehaviorGenome.random(rng),
            complexity=rng.uniform(0.0, 1.0),
            generation=0,
        )

    @classmethod
    def minimal_cell(cls, rng: random.Random) -> "CreatureGenome":
        """A small, simple, passive grazer: the starting point of evolution."""
        art = ArtGenome(
            body_elongation=rng.uniform(0.3, 0.7),
            body_height_ratio=rng.uniform(0.3, 0.7),
            body_size=rng.uniform(0.3, 0.5),
            tail_fork=0.0,
            tail_length=0.0,
            top_appendage=0.0,
            side_appendages=0.0,
            pattern_density=0.0,
            eye_size=rng.uniform(0.0, 0.3),
            primary_hue=rng.uniform(0.0, 1.0),
            secondary_hue=rng.uniform(0.0, 1.0),
            color_brightness=rng.uniform(0.3, 0.6),
        )
        anim = AnimGenome(
            swim_speed=rng.uniform(0.3, 0.8),
            tail_amplitude=0.0,
            idle_sway=rng.uniform(0.1, 0.4),
            undulation=rng.uniform(0.1, 0.5),
        )
        behavior = BehaviorGenome(
            schooling_affinity=rng.uniform(0.0, 0.3),
            aggression=rng.uniform(0.0, 0.2),
            timidity=rng.uniform(0.2, 0.6),
            speed_factor=rng.uniform(0.5, 1.0),
            metabolism_factor=rng.uniform(0.8, 1.2),
            max_lifespan_factor=rng.uniform(0.6, 1.2),
            reproduction_rate=rng.uniform(0.5, 1.0),
            mouth_size=rng.uniform(0.0, 0.2),
            hunting_instinct=rng.uniform(0.0, 0.1),
            mutation_rate_factor=rng.uniform(0.8, 1.2),
            mate_preference_hue=rng.uniform(0.0, 1.0),
            learning_rate=rng.uniform(0.0, 0.05),
            pheromone_sensitivity=rng.uniform(0.0, 0.5),
        )
        return cls(
            art=art,
            anim=anim,
            behavior=behavior,
            complexity=rng.uniform(0.0, 0.1),
            generation=0,
        )