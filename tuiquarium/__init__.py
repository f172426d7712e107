"""Aquarium building blocks: environment, substrate, genomes and genetic operators."""

__version__ = "0.1.0"
__all__ = [
    "environment",
    "genome",
    "producer_genome",
    "genetics",
    "producer_genetics",
]