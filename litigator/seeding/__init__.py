"""
Development fixture generation and database seeding.
"""

from .fixtures import FixtureGenerator, FixtureSet, seed_database

__all__ = ["FixtureGenerator", "FixtureSet", "seed_database"]
