from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import StudentProfile


class StudentProfileRepository(Protocol):
    def get_by_email(self, official_email: str) -> Optional[StudentProfile]:
        raise NotImplementedError

    def list_all(self) -> Sequence[StudentProfile]:
        raise NotImplementedError
