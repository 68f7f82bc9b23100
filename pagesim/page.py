"""A virtual memory page owned by a process."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Page:
    """A page with reference and dirty bits."""

    process_id: int
    page_number: int
    used: bool = False
    dirty: bool = False

    @property
    def id(self) -> str:
        """Key identifying the page: ``<process>-<page>``."""
        return f"{self.process_id}-{self.page_number}"