"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from enum import Enum

# Sort position for tasks without a priority (after every real priority)
NO_PRIORITY_ORDER = 999


class TaskType(Enum):
    """Task status keyword."""

    TODO = "TODO"
    DONE = "DONE"

    @classmethod
    def from_str(cls, value: str) -> "TaskType | None":
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Priority:
    """A priority cookie such as [#A]. A is highest, C is lowest."""

    letter: str

    @classmethod
    def from_char(cls, c: str) -> "Priority":
        return cls(c)

    @property
    def order(self) -> int:
        """Numeric order for sorting (lower is higher priority)."""
        # A, B, C map to 0, 1, 2; anything else ranks by distance from 'A'
        return max(ord(self.letter) - ord("A"), 0)

    @property
    def is_other(self) -> bool:
        return self.letter not in ("A", "B", "C")

    def __str__(self) -> str:
        if self.is_other:
            return f"Other({self.letter})"
        return self.letter


@dataclass
class Task:
    """A task extracted from a document heading."""

    file: str
    line: int
    heading: str
    content: str = ""
    task_type: TaskType | None = None
    priority: Priority | None = None
    created: str | None = None
    timestamp: str | None = None
    timestamp_type: str | None = None
    timestamp_date: str | None = None
    timestamp_time: str | None = None
    timestamp_end_time: str | None = None

    @property
    def is_open(self) -> bool:
        return self.task_type is TaskType.TODO

    @property
    def priority_order(self) -> int:
        if self.priority is None:
            return NO_PRIORITY_ORDER
        return self.priority.order

    def to_dict(self) -> dict:
        """Serializable form with unset fields omitted."""
        data = {
            "file": self.file,
            "line": self.line,
            "heading": self.heading,
            "content": self.content,
            "task_type": self.task_type.value if self.task_type else None,
            "priority": self.priority.letter if self.priority else None,
            "created": self.created,
            "timestamp": self.timestamp,
            "timestamp_type": self.timestamp_type,
            "timestamp_date": self.timestamp_date,
            "timestamp_time": self.timestamp_time,
            "timestamp_end_time": self.timestamp_end_time,
        }
        return {k: v for k, v in data.items() if v is not None}


def filter_open(tasks: list[Task]) -> list[Task]:
    """Filter to TODO tasks only."""
    return [t for t in tasks if t.is_open]


def sort_by_priority(tasks: list[Task]) -> list[Task]:
    """
    Sort tasks by priority, highest first, tasks without priority last.

    Stable: tasks with equal priority keep their relative order.
    Pure function - no I/O.
    """
    return sorted(tasks, key=lambda t: t.priority_order)
