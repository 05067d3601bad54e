"""
Database query helpers for attorneys, clients, cases and deadlines.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Optional, Sequence

from psycopg import Connection

from litigator.analytics.models import AttorneyAggregate, CaseSnapshot, CaseStatus, DeadlineSnapshot
from litigator.db.models import AttorneyRecord, CaseRecord, ClientRecord, DeadlineRecord
from litigator.db.schema import POSTGRES_SCHEMA

logger = logging.getLogger(__name__)

CASE_SELECT = """
    SELECT
        c.id,
        c.case_number,
        c.case_title,
        c.filing_date,
        c.status,
        c.estimated_value,
        c.assigned_attorney_id,
        NULLIF(TRIM(CONCAT_WS(' ', cl.first_name, cl.last_name)), '') AS client_name,
        NULLIF(TRIM(CONCAT_WS(' ', a.first_name, a.last_name)), '') AS attorney_name
    FROM cases c
    LEFT JOIN clients cl ON cl.id = c.client_id
    LEFT JOIN attorneys a ON a.id = c.assigned_attorney_id
"""


def ensure_schema(conn: Connection) -> None:
    """Create tables and indexes if they do not exist yet. The caller commits."""
    conn.execute(POSTGRES_SCHEMA)


def _parse_status(raw: Optional[str], case_number: str) -> Optional[CaseStatus]:
    status = CaseStatus.parse(raw)
    if status is None:
        logger.warning("Unrecognised status %r on case %s", raw, case_number)
    return status


def _fetch_deadlines(conn: Connection, case_ids: Sequence[int]) -> dict[int, list[DeadlineSnapshot]]:
    if not case_ids:
        return {}
    with conn.cursor() as cur:
        cur.execute(
            """
            SELECT case_id, deadline_date, is_completed, completed_date, is_critical, description
            FROM deadlines
            WHERE case_id = ANY(%s)
            ORDER BY case_id, id
            """,
            (list(case_ids),),
        )
        rows = cur.fetchall()

    deadlines: dict[int, list[DeadlineSnapshot]] = defaultdict(list)
    for row in rows:
        deadlines[row[0]].append(
            DeadlineSnapshot(
                due_date=row[1],
                is_completed=row[2],
                completed_date=row[3],
                is_critical=row[4],
                description=row[5],
            )
        )
    return deadlines


def _rows_to_snapshots(conn: Connection, rows: Sequence[tuple]) -> list[CaseSnapshot]:
    deadlines = _fetch_deadlines(conn, [row[0] for row in rows])
    return [
        CaseSnapshot(
            case_id=row[0],
            case_number=row[1],
            case_title=row[2],
            filing_date=row[3],
            status=_parse_status(row[4], row[1]),
            estimated_value=row[5],
            attorney_id=row[6],
            client_name=row[7],
            attorney_name=row[8],
            deadlines=deadlines.get(row[0], []),
        )
        for row in rows
    ]


def fetch_case_snapshots(conn: Connection) -> list[CaseSnapshot]:
    """Return every case with its client, attorney and deadlines."""
    with conn.cursor() as cur:
        cur.execute(CASE_SELECT + " ORDER BY c.id")
        rows = cur.fetchall()
    return _rows_to_snapshots(conn, rows)


def fetch_case_snapshot(conn: Connection, case_number: str) -> Optional[CaseSnapshot]:
    """Fetch a single case by its case number."""
    with conn.cursor() as cur:
        cur.execute(CASE_SELECT + " WHERE c.case_number = %s", (case_number,))
        row = cur.fetchone()
    if row is None:
        return None
    return _rows_to_snapshots(conn, [row])[0]


def fetch_attorney_aggregates(
    conn: Connection,
    cases: Optional[Sequence[CaseSnapshot]] = None,
) -> list[AttorneyAggregate]:
    """Return active attorneys with the cases assigned to them."""
    if cases is None:
        cases = fetch_case_snapshots(conn)
    with conn.cursor() as cur:
        cur.execute(
            """
            SELECT id, first_name, last_name, bar_number, email, is_active
            FROM attorneys
            WHERE is_active
            ORDER BY id
            """
        )
        rows = cur.fetchall()

    by_attorney: dict[int, list[CaseSnapshot]] = defaultdict(list)
    for case in cases:
        if case.attorney_id is not None:
            by_attorney[case.attorney_id].append(case)

    return [
        AttorneyAggregate(
            attorney_id=row[0],
            display_name=f"{row[1]} {row[2]}",
            bar_number=row[3],
            email=row[4],
            is_active=row[5],
            cases_assigned=by_attorney.get(row[0], []),
        )
        for row in rows
    ]


def insert_attorney(conn: Connection, record: AttorneyRecord) -> int:
    """Insert a single attorney row and return its ID."""
    with conn.cursor() as cur:
        cur.execute(
            """
            INSERT INTO attorneys (first_name, last_name, bar_number, email, is_active)
            VALUES (%s, %s, %s, %s, %s)
            RETURNING id
            """,
            (record.first_name, record.last_name, record.bar_number, record.email, record.is_active),
        )
        attorney_id = cur.fetchone()[0]
    return int(attorney_id)


def insert_client(conn: Connection, record: ClientRecord) -> int:
    """Insert a single client row and return its ID."""
    with conn.cursor() as cur:
        cur.execute(
            """
            INSERT INTO clients (first_name, last_name, email)
            VALUES (%s, %s, %s)
            RETURNING id
            """,
            (record.first_name, record.last_name, record.email),
        )
        client_id = cur.fetchone()[0]
    return int(client_id)


def insert_case(conn: Connection, record: CaseRecord, *, client_id: int, attorney_id: int) -> int:
    """Insert a single case row and return its ID."""
    with conn.cursor() as cur:
        cur.execute(
            """
            INSERT INTO cases (case_number, case_title, case_type, filing_date, status,
                               estimated_value, client_id, assigned_attorney_id)
            VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
            RETURNING id
            """,
            (
                record.case_number,
                record.case_title,
                record.case_type,
                record.filing_date,
                record.status,
                record.estimated_value,
                client_id,
                attorney_id,
            ),
        )
        case_id = cur.fetchone()[0]
    return int(case_id)


def insert_deadlines(conn: Connection, case_id: int, deadlines: Iterable[DeadlineRecord]) -> int:
    """Insert deadline rows linked to a case. Returns number of inserted deadlines."""
    rows = [
        (
            case_id,
            d.deadline_type,
            d.description,
            d.deadline_date,
            d.completed_date,
            d.is_completed,
            d.is_critical,
        )
        for d in deadlines
    ]
    if not rows:
        return 0

    with conn.cursor() as cur:
        cur.executemany(
            """
            INSERT INTO deadlines (case_id, deadline_type, description, deadline_date,
                                   completed_date, is_completed, is_critical)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
            """,
            rows,
        )
    return len(rows)


def delete_all(conn: Connection) -> None:
    """Remove all deadlines, cases, clients and attorneys. The caller commits."""
    with conn.cursor() as cur:
        cur.execute("TRUNCATE deadlines, cases, clients, attorneys RESTART IDENTITY CASCADE;")
