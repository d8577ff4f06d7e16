"""Task source interface."""

from typing import Protocol

from mdagenda.core.tasks import Task


class TaskSource(Protocol):
    """Interface for producing tasks from any document store."""

    def fetch_all(self) -> list[Task]:
        """Fetch all tasks."""
        ...
