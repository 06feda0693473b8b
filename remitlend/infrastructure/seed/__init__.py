"""Demo data seeding for the scores and remittance_history tables."""

from .runner import SeedReport, seed_database, seed_remittances, seed_scores

__all__ = [
    "SeedReport",
    "seed_database",
    "seed_remittances",
    "seed_scores",
]
