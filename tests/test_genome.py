import random

import pytest

from tuiquarium.genome import AnimGenome, ArtGenome, BehaviorGenome, CreatureGenome


def test_random_genome_in_range():
    rng = random.Random(42)
    for _ in range(200):
        g = CreatureGenome.random(rng)
        assert 0.2 <= g.art.body_size <= 5.0
        assert 0.0 <= g.art.body_elongation <= 1.0
        assert 0.0 <= g.art.body_height_ratio <= 1.0
        assert 0.0 <= g.art.color_brightness <= 1.0
        assert 0.3 <= g.anim.swim_speed <= 2.0
        assert 0.5 <= g.behavior.speed_factor <= 2.0
        assert 0.0 <= g.behavior.schooling_affinity <= 1.0
        assert 0.0 <= g.behavior.mouth_size <= 1.0
        assert 0.0 <= g.complexity <= 1.0
        assert g.generation == 0


def test_minimal_cell_is_simple():
    rng = random.Random(42)
    for _ in range(100):
        cell = CreatureGenome.minimal_cell(rng)
        assert cell.complexity <= 0.1
        assert cell.art.body_size <= 0.5
        assert cell.art.tail_length == 0.0
        assert cell.art.top_appendage == 0.0
        assert cell.behavior.mouth_size <= 0.2
        assert cell.generation == 0


@pytest.mark.parametrize(
    "eye_size, expected",
    [(0.1, "."), (0.3, "o"), (0.6, "*"), (0.9, "O")],
)
def test_eye_char_ranges(eye_size, expected):
    art = ArtGenome.random(random.Random(42))
    art.eye_size = eye_size
    assert art.eye_char() == expected


@pytest.mark.parametrize("hue, expected", [(0.0, 0), (0.5, 4), (0.99, 7), (1.0, 7)])
def test_color_index(hue, expected):
    art = ArtGenome.random(random.Random(42))
    art.primary_hue = hue
    assert art.color_index() == expected


def test_anim_genome_random_in_range():
    rng = random.Random(7)
    for _ in range(100):
        anim = AnimGenome.random(rng)
        assert 0.3 <= anim.swim_speed <= 2.0
        assert 0.0 <= anim.tail_amplitude <= 1.0
        assert 0.0 <= anim.idle_sway <= 1.0
        assert 0.0 <= anim.undulation <= 1.0


def test_behavior_genome_random_in_range():
    rng = random.Random(7)
    for _ in range(100):
        beh = BehaviorGenome.random(rng)
        assert 0.2 <= beh.reproduction_rate <= 1.0
        assert 0.5 <= beh.mutation_rate_factor <= 2.0
        assert 0.0 <= beh.learning_rate <= 0.1
        assert 0.0 <= beh.pheromone_sensitivity <= 1.0


def test_same_seed_gives_same_genome():
    a = CreatureGenome.random(random.Random(123))
    b = CreatureGenome.random(random.Random(123))
    assert a == b


def test_minimal_cell_same_seed_same_genome():
    a = CreatureGenome.minimal_cell(random.Random(5))
    b = CreatureGenome.minimal_cell(random.Random(5))
    assert a == b
    assert a.anim.tail_amplitude == 0.0