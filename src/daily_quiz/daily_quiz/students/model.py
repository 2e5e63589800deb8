from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StudentProfile:
    """Provisioned student record, keyed by official email."""

    profile_id: int
    name: str
    official_email: str
    class_name: str
    department: str
    reg_no: Optional[str] = None
