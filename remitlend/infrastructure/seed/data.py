"""Demo users and remittance history loaded by the seeding utility."""

from decimal import Decimal

from remitlend.domain.entities import RemittanceRecord, RemittanceStatus, ScoreRecord

MONTHS = ("January", "February", "March", "April", "May")

C = RemittanceStatus.COMPLETED
L = RemittanceStatus.LATE
M = RemittanceStatus.MISSED

SEED_SCORES = (
    ("user_001", 750),
    ("user_002", 680),
    ("user_003", 820),
    ("user_004", 590),
    ("user_005", 710),
    ("demo_user", 700),
    ("test_user", 650),
    ("alice_stellar", 800),
    ("bob_remit", 720),
    ("charlie_test", 680),
)

# One (amount, status) pair per month in MONTHS.
SEED_REMITTANCES = {
    "user_001": ((500, C), (500, C), (500, C), (600, C), (550, C)),
    "user_002": ((300, C), (300, C), (300, L), (350, C), (300, C)),
    "user_003": ((1000, C), (1000, C), (1000, C), (1200, C), (1100, C)),
    "user_004": ((200, M), (200, C), (200, L), (250, M), (200, C)),
    "demo_user": ((450, C), (450, C), (500, C), (450, C), (475, C)),
    "test_user": ((250, C), (250, L), (300, C), (275, C), (250, C)),
    "alice_stellar": ((800, C), (850, C), (900, C), (875, C), (950, C)),
    "bob_remit": ((600, C), (550, C), (600, C), (650, C), (600, C)),
    "charlie_test": ((400, C), (450, C), (400, C), (425, C), (400, C)),
    "user_005": ((350, C), (350, C), (400, C), (375, C), (350, C)),
}


def seed_score_records() -> list[ScoreRecord]:
    return [
        ScoreRecord(user_id=user_id, current_score=score)
        for user_id, score in SEED_SCORES
    ]


def seed_remittance_records() -> list[RemittanceRecord]:
    return [
        RemittanceRecord(
            user_id=user_id,
            amount=Decimal(amount),
            month=month,
            status=status,
        )
        for user_id, entries in SEED_REMITTANCES.items()
        for month, (amount, status) in zip(MONTHS, entries)
    ]
