"""Tank environment: day/night cycle, temperature, currents, random events and substrate."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

# One in-game day lasts 300 real seconds.
HOURS_PER_SECOND = 24.0 / 300.0

# Average interval between random events, in seconds.
EVENT_INTERVAL = 60.0

# Depth fraction below which the water counts as the deep zone.
DEEP_ZONE_FRACTION = 0.7

# Metabolic multiplier in the cooler deep zone.
DEEP_METABOLISM = 0.85

# Clonal spread multiplier on planted substrate.
PLANTED_CLONAL_BONUS = 1.3

_MASK64 = (1 << 64) - 1


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class EventKind(Enum):
    """Kinds of temporary environmental events."""

    ALGAE_BLOOM = "algae_bloom"
    FEEDING_FRENZY = "feeding_frenzy"
    COLD_SNAP = "cold_snap"
    EARTHQUAKE = "earthquake"

    def duration(self) -> float:
        """Duration of this event kind in seconds."""
        return _EVENT_DURATIONS[self]

    @classmethod
    def random(cls, rng: random.Random) -> "EventKind":
        """Pick an event kind uniformly at random."""
        return _EVENT_ORDER[rng.randrange(len(_EVENT_ORDER))]


_EVENT_ORDER = (
    EventKind.ALGAE_BLOOM,
    EventKind.FEEDING_FRENZY,
    EventKind.COLD_SNAP,
    EventKind.EARTHQUAKE,
)

_EVENT_DURATIONS = {
    EventKind.ALGAE_BLOOM: 30.0,
    EventKind.FEEDING_FRENZY: 15.0,
    EventKind.COLD_SNAP: 25.0,
    EventKind.EARTHQUAKE: 5.0,
}


@dataclass
class EnvironmentEvent:
    """An active event and the seconds it has left."""

    kind: EventKind
    remaining: float


@dataclass
class Environment:
    """Global environment state of the aquarium."""

    time_of_day: float = 8.0
    light_level: float = 0.8
    temperature: float = 25.0
    current: Tuple[float, float] = (0.0, 0.0)
    active_event: Optional[EnvironmentEvent] = None
    _sim_time: float = field(default=0.0, repr=False)
    _event_cooldown: float = field(default=60.0, repr=False)
    _random_events_enabled: bool = field(default=True, repr=False)

    @property
    def random_events_enabled(self) -> bool:
        """Whether stochastic events may start."""
        return self._random_events_enabled

    @random_events_enabled.setter
    def random_events_enabled(self, enabled: bool) -> None:
        self._random_events_enabled = enabled
        if not enabled:
            self.active_event = None

    def tick(self, dt: float, rng: random.Random) -> None:
        """Advance the environment by ``dt`` seconds."""
        self._sim_time += dt

        self.time_of_day += HOURS_PER_SECOND * dt
        if self.time_of_day >= 24.0:
            self.time_of_day -= 24.0

        # Peak light at noon, trough at midnight.
        hour_angle = (self.time_of_day - 6.0) * math.pi / 12.0
        base_light = _clamp(math.sin(hour_angle) * 0.5 + 0.5, 0.0, 1.0)

        event = self.active_event
        light_modifier = 0.6 if event and event.kind is EventKind.ALGAE_BLOOM else 1.0
        self.light_level = _clamp(base_light * light_modifier, 0.05, 1.0)

        base_temp = 25.0 + math.sin(hour_angle) * 1.5
        if event and event.kind is EventKind.COLD_SNAP:
            self.temperature = base_temp - 10.0
        else:
            self.temperature = base_temp

        current_angle = self._sim_time * 0.05
        strength = 0.3
        self.current = (
            math.cos(current_angle) * strength,
            math.sin(current_angle) * strength * 0.3,
        )

        if self.active_event is not None:
            self.active_event.remaining -= dt
            if self.active_event.remaining <= 0.0:
                self.active_event = None

        if self._random_events_enabled and self.active_event is None:
            self._event_cooldown -= dt
            if self._event_cooldown <= 0.0:
                kind = EventKind.random(rng)
                self.active_event = EnvironmentEvent(kind=kind, remaining=kind.duration())
                self._event_cooldown = EVENT_INTERVAL + rng.uniform(-20.0, 20.0)

    def is_night(self) -> bool:
        """True roughly between 20:00 and 06:00."""
        return self.time_of_day >= 20.0 or self.time_of_day < 6.0

    def temperature_modifier(self) -> float:
        """Metabolic multiplier from water temperature relative to 25 °C."""
        delta = self.temperature - 25.0
        return _clamp(1.0 + delta * 0.02, 0.5, 2.0)

    def light_at_depth(self, y: float, tank_height: float) -> float:
        """Light reaching depth ``y`` in a tank of ``tank_height``."""
        depth_fraction = y / tank_height
        if depth_fraction < 0.3:
            depth_factor = 1.0
        elif depth_fraction < 0.7:
            depth_factor = 0.7
        else:
            depth_factor = 0.4
        return self.light_level * depth_factor

    def metabolism_at_depth(self, y: float, tank_height: float) -> float:
        """Metabolic multiplier at depth; the deep zone is slower."""
        depth_fraction = y / tank_height
        if depth_fraction > DEEP_ZONE_FRACTION:
            modifier = DEEP_METABOLISM
        else:
            modifier = 1.0
        return modifier


class Substrate(Enum):
    """Substrate type of a bottom column."""

    SANDY = "sandy"
    ROCKY = "rocky"
    PLANTED = "planted"


_SUBSTRATE_ORDER = (Substrate.SANDY, Substrate.ROCKY, Substrate.PLANTED)


@dataclass
class SubstrateGrid:
    """Substrate type for each column across the tank bottom."""

    cols: list

    @classmethod
    def generate(cls, tank_width: int, seed: int) -> "SubstrateGrid":
        """Deterministically lay out substrate patches 5–15 columns wide."""
        width = max(0, int(tank_width))
        cols = [Substrate.SANDY] * width
        state = (seed * 6364136223846793005 + 1442695040888963407) & _MASK64
        x = 0
        while x < width:
            state ^= (state << 13) & _MASK64
            state ^= state >> 7
            state ^= (state << 17) & _MASK64

            zone_width = 5 + state % 11
            substrate = _SUBSTRATE_ORDER[(state >> 8) % 3]
            end = min(x + zone_width, width)
            cols[x:end] = [substrate] * (end - x)
            x = end
        return cls(cols)

    def at(self, x: float) -> Substrate:
        """Substrate at horizontal position ``x`` (clamped to the grid)."""
        if not self.cols:
            raise IndexError("substrate grid is empty")
        last = len(self.cols) - 1
        if math.isnan(x) or x <= 0:
            idx = 0
        elif math.isinf(x):
            idx = last
        else:
            idx = min(int(x), last)
        return self.cols[idx]

    def establishment_modifier(self, x: float, hardiness: float) -> float:
        """Producer establishment multiplier at ``x`` for the given hardiness."""
        substrate = self.at(x)
        if substrate is Substrate.ROCKY:
            return 0.8 + 0.4 * hardiness
        if substrate is Substrate.PLANTED:
            return 1.15
        return 1.0

    def clonal_bonus(self, x: float) -> float:
        """Clonal spread multiplier at ``x``."""
        substrate = self.at(x)
        if substrate is Substrate.PLANTED:
            bonus = PLANTED_CLONAL_BONUS
        else:
            bonus = 1.0
        return bonus