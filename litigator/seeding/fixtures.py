"""
Deterministic development fixtures for attorneys, clients, cases and deadlines.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal

from psycopg import Connection

from litigator.db import queries
from litigator.db.models import AttorneyRecord, CaseRecord, ClientRecord, DeadlineRecord

logger = logging.getLogger(__name__)

ATTORNEY_ROSTER = (
    ("Sarah", "Johnson", "12345", "sjohnson@firm.com"),
    ("Michael", "Davis", "67890", "mdavis@firm.com"),
    ("Emily", "Brown", "54321", "ebrown@firm.com"),
    ("Robert", "Wilson", "RW11111", "rwilson@lawfirm.com"),
    ("Jennifer", "Martinez", "JM22222", "jmartinez@lawfirm.com"),
)
CLIENT_ROSTER = (
    ("John", "Smith", "johnsmith@acmecorp.com"),
    ("Linda", "Taylor", "ltaylor@globalind.com"),
    ("James", "Smith", "jsmith@smithtrust.com"),
)
FIRST_NAMES = (
    "Avery", "Blake", "Carmen", "Dana", "Elliot", "Farah", "Gavin", "Hana", "Isaac", "Jada",
    "Kiran", "Luis", "Maya", "Noah", "Olivia", "Priya", "Quinn", "Rosa", "Samir", "Tessa",
)
LAST_NAMES = (
    "Anderson", "Baker", "Chen", "Diaz", "Evans", "Foster", "Garcia", "Hughes", "Ibrahim", "Jensen",
    "Kowalski", "Lee", "Morales", "Nguyen", "Okafor", "Patel", "Reyes", "Sullivan", "Tanaka", "Walsh",
)
COMPANY_NAMES = (
    "Acme Corp", "Global Industries", "Northwind Traders", "Summit Holdings", "Bluewater Logistics",
    "Pioneer Health", "Crescent Realty", "Ironclad Manufacturing",
)
CASE_TYPES = (
    "Civil", "Criminal", "Family", "Corporate", "Personal Injury", "Contract Dispute",
    "Employment", "Real Estate", "Intellectual Property",
)
CASE_STATUSES = ("Active", "Pending", "Closed", "On Hold")
DEADLINE_TYPES = (
    "Discovery Deadline", "Motion Filing", "Hearing Date", "Deposition", "Trial Date",
    "Settlement Conference", "Mediation", "Expert Witness Disclosure",
)


@dataclass(slots=True)
class FixtureSet:
    attorneys: list[AttorneyRecord]
    clients: list[ClientRecord]
    cases: list[CaseRecord]


class FixtureGenerator:
    """Builds a reproducible fixture set from a seed and a reference time."""

    def __init__(self, seed: int = 42, now: datetime | None = None) -> None:
        self.rng = random.Random(seed)
        self.now = now or datetime.now()

    def generate(self) -> FixtureSet:
        attorneys = [AttorneyRecord(first, last, bar, email) for first, last, bar, email in ATTORNEY_ROSTER]
        clients = [ClientRecord(first, last, email) for first, last, email in CLIENT_ROSTER]
        clients.extend(self._client() for _ in range(self.rng.randint(30, 50)))

        case_numbers: set[str] = set()
        cases = []
        for _ in range(self.rng.randint(80, 100)):
            case = self._case(len(clients), len(attorneys), case_numbers)
            case.deadlines = [self._deadline(case) for _ in range(self.rng.randint(1, 5))]
            cases.append(case)
        return FixtureSet(attorneys=attorneys, clients=clients, cases=cases)

    def _client(self) -> ClientRecord:
        first = self.rng.choice(FIRST_NAMES)
        last = self.rng.choice(LAST_NAMES)
        return ClientRecord(first, last, f"{first}.{last}{self.rng.randint(1, 999)}@example.com".lower())

    def _party(self) -> str:
        if self.rng.random() < 0.6:
            return self.rng.choice(LAST_NAMES)
        return self.rng.choice(COMPANY_NAMES)

    def _case_number(self, taken: set[str]) -> str:
        while True:
            number = f"{self.rng.randint(0, 9999):04d}-CV-{self.rng.randint(0, 9999):04d}"
            if number not in taken:
                taken.add(number)
                return number

    def _between(self, start: datetime, end: datetime) -> datetime:
        if end <= start:
            return start
        span = (end - start).total_seconds()
        return start + timedelta(seconds=self.rng.uniform(0, span))

    def _case(self, client_count: int, attorney_count: int, taken: set[str]) -> CaseRecord:
        filing_date = self._between(self.now - timedelta(days=730), self.now)
        estimated_value = None
        if self.rng.random() < 0.8:
            estimated_value = Decimal(str(round(self.rng.uniform(5000, 2000000), 2)))
        return CaseRecord(
            case_number=self._case_number(taken),
            case_title=f"{self._party()} v. {self._party()}",
            case_type=self.rng.choice(CASE_TYPES),
            filing_date=filing_date,
            status=self.rng.choice(CASE_STATUSES),
            estimated_value=estimated_value,
            client_index=self.rng.randrange(client_count),
            attorney_index=self.rng.randrange(attorney_count),
        )

    def _deadline(self, case: CaseRecord) -> DeadlineRecord:
        deadline_type = self.rng.choice(DEADLINE_TYPES)
        deadline_date = self._between(case.filing_date + timedelta(days=30), self.now + timedelta(days=365))
        is_completed = self.rng.random() < 0.3
        completed_date = None
        # Only deadlines already past due carry a completion date.
        if is_completed and deadline_date < self.now:
            completed_date = self._between(deadline_date - timedelta(days=5), self.now)
        return DeadlineRecord(
            deadline_type=deadline_type,
            description=f"{deadline_type} for {case.case_title}",
            deadline_date=deadline_date,
            is_completed=is_completed,
            is_critical=self.rng.random() < 0.25,
            completed_date=completed_date,
        )


def seed_database(conn: Connection, fixtures: FixtureSet, drop_existing: bool = False) -> dict:
    """
    Persist a fixture set inside a single transaction and return row counts.

    Schema creation, the optional truncate and every insert are committed
    together; any failure rolls all of them back.
    """
    try:
        queries.ensure_schema(conn)
        if drop_existing:
            queries.delete_all(conn)

        attorney_ids = [queries.insert_attorney(conn, record) for record in fixtures.attorneys]
        client_ids = [queries.insert_client(conn, record) for record in fixtures.clients]

        deadline_count = 0
        for case in fixtures.cases:
            case_id = queries.insert_case(
                conn,
                case,
                client_id=client_ids[case.client_index],
                attorney_id=attorney_ids[case.attorney_index],
            )
            deadline_count += queries.insert_deadlines(conn, case_id, case.deadlines)
    except Exception as exc:
        logger.error("Seeding failed, rolling back: %s", exc)
        conn.rollback()
        raise
    conn.commit()

    summary = {
        "attorneys": len(attorney_ids),
        "clients": len(client_ids),
        "cases": len(fixtures.cases),
        "deadlines": deadline_count,
    }
    logger.info("Seeded %s", summary)
    return summary
