"""
Dataclasses mirroring database tables, used when writing fixtures.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(slots=True)
class AttorneyRecord:
    first_name: str
    last_name: str
    bar_number: str
    email: Optional[str]
    is_active: bool = True


@dataclass(slots=True)
class ClientRecord:
    first_name: str
    last_name: str
    email: Optional[str]


@dataclass(slots=True)
class DeadlineRecord:
    deadline_type: str
    description: Optional[str]
    deadline_date: datetime
    is_completed: bool
    is_critical: bool
    completed_date: Optional[datetime] = None


@dataclass(slots=True)
class CaseRecord:
    case_number: str
    case_title: str
    case_type: str
    filing_date: datetime
    status: str
    estimated_value: Optional[Decimal]
    client_index: int
    attorney_index: int
    deadlines: list[DeadlineRecord] = field(default_factory=list)
