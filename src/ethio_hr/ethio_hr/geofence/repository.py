from __future__ import annotations

from typing import Protocol, Sequence

from .model import WorkSite


class WorkSiteRepository(Protocol):
    def find_work_sites(self, employee_id: str) -> Sequence[WorkSite]:
        """Sites the employee is authorized to check in at."""

        raise NotImplementedError
