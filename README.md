# tuiquarium

The core building blocks of an evolving aquarium. It provides:

- a tank environment with a day/night cycle, temperature, a slowly turning water current and random events;
- substrate zones along the tank bottom;
- genomes for creatures and for aquatic producer colonies, all made of continuous genes;
- genetic operators: crossover, mutation and genomic distance.

The package needs nothing beyond the standard library. Every function that uses randomness takes a `random.Random` instance, so you can reproduce a run from its seed.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

### `tuiquarium.environment`

- `Environment` is a dataclass that holds the tank state: `time_of_day`, `light_level`, `temperature`, `current` and `active_event`.
  - `tick(dt, rng)` advances the clock. One in-game day lasts 300 seconds. It recomputes light and temperature, rotates the current, counts down the active event and, when events are enabled, may start a new one at roughly 60-second intervals.
  - When an algae bloom is active, light is dimmed to 60%. A cold snap lowers the temperature by 10 °C.
  - `random_events_enabled` is a property. Setting it to `False` also clears any active event.
  - `is_night()` is true from 20:00 until 06:00.
  - `temperature_modifier()` gives a metabolic multiplier of 2% per degree away from 25 °C, clamped to 0.5–2.0.
  - `light_at_depth(y, tank_height)` applies a light factor by depth: 1.0 in the top 30% of the tank, 0.7 in the middle and 0.4 below 70%.
  - `metabolism_at_depth(y, tank_height)` returns 0.85 below 70% depth and 1.0 above it.
- `EventKind` has four members: `ALGAE_BLOOM`, `FEEDING_FRENZY`, `COLD_SNAP` and `EARTHQUAKE`. Each has a `duration()`. `EventKind.random(rng)` picks one of them.
- `EnvironmentEvent` is the active event: its `kind` and the seconds it has `remaining`.
- `Substrate` has three members: `SANDY`, `ROCKY` and `PLANTED`.
- `SubstrateGrid.generate(tank_width, seed)` lays out zones 5–15 columns wide. The same seed always gives the same layout.
  - `at(x)` returns the substrate at position `x`. Positions outside the grid are clamped to its edges. On an empty grid it raises `IndexError`.
  - `establishment_modifier(x, hardiness)` returns 1.0 on sandy ground, `0.8 + 0.4 * hardiness` on rocky ground and 1.15 on planted ground.
  - `clonal_bonus(x)` returns 1.3 on planted ground and 1.0 elsewhere.

### `tuiquarium.genome`

- `CreatureGenome` combines three parts with a `complexity` gene and a `generation` count:
  - `ArtGenome`: body plan and colour;
  - `AnimGenome`: movement style;
  - `BehaviorGenome`: personality and ecology.
- `CreatureGenome.random(rng)` draws every gene across its full range.
- `CreatureGenome.minimal_cell(rng)` gives a small, simple, passive grazer.
- `ArtGenome.eye_char()` maps eye size to one of `.`, `o`, `*` or `O`.
- `ArtGenome.color_index()` maps the primary hue to a palette index from 0 to 7.

### `tuiquarium.producer_genome`

- `ProducerGenome` holds the morphology and physiology genes of a sessile producer colony.
- `ProducerGenome.random(rng)` draws every gene across its full range.
- `ProducerGenome.minimal_producer(rng)` gives a low-profile founder colony.
- Derived quantities:
  - `producer_mass()`
  - `effective_capture_area()`
  - `support_target_biomass()`
  - `active_target_biomass()`
  - `color_index()`, a palette index chosen by hue.

### `tuiquarium.genetics`

- `crossover(a, b, rng)` does uniform crossover. The child's generation is one more than the older parent's.
- `mutate(genome, rate, rng)` changes the genome in place:
  - each gene is nudged with probability `rate`, by up to 10% of its range, and clamped to that range;
  - `mutation_rate_factor` mutates at a fixed 5% rate;
  - `complexity` drifts by up to ±0.15 on every call.
- `genomic_distance(a, b)` sums the absolute differences over the genes used for speciation.
- `CREATURE_SPECIES_THRESHOLD` (1.5) is the distance above which two creatures count as different species.

### `tuiquarium.producer_genetics`

Producers reproduce asexually, so there is no crossover for them.

- `mutate_producer(genome, rate, rng)` follows the same rules as `mutate`.
- `producer_genomic_distance(a, b)` sums the absolute differences over the producer speciation genes.

## Example

```python
import random

from tuiquarium.environment import Environment
from tuiquarium.genome import CreatureGenome
from tuiquarium.genetics import crossover, genomic_distance, mutate

rng = random.Random(42)
env = Environment()
env.tick(1.0, rng)
print(env.time_of_day, env.light_level, env.is_night())

a = CreatureGenome.minimal_cell(rng)
b = CreatureGenome.minimal_cell(rng)
child = crossover(a, b, rng)
mutate(child, 0.25, rng)
print(child.generation, genomic_distance(a, child))
```

## What this package does not do

This package is a library of parts, not a running aquarium. It does not include any of the following:

- organisms that live in the tank, and the systems that would act on them: metabolism, feeding, hunting, growth or death;
- nutrient pools;
- neural brains for creatures;
- a screen or display;
- a command to start a simulation.

You supply the simulation loop that uses these parts.