"""Markdown document scanner adapter."""

import logging
import re
from pathlib import Path

from mdagenda.config import MAX_FILE_SIZE, MAX_TASKS
from mdagenda.core.extract import (
    WeekdayMappings,
    apply_timestamp_fields,
    extract_created,
    extract_timestamp,
)
from mdagenda.core.tasks import Priority, Task, TaskType
from mdagenda.errors import InvalidDirectoryError

logger = logging.getLogger(__name__)

# "## TODO [#A] Title": keyword and priority cookie are optional
_HEADING_RE = re.compile(r"^#{1,6}\s+(?:(TODO|DONE)\s+)?(?:\[#(.)\]\s*)?(.*?)\s*$")


def parse_document(text: str, file: str, mappings: WeekdayMappings = ()) -> list[Task]:
    """
    Extract tasks from one markdown document.

    A heading is a task when it has a TODO/DONE keyword, a priority cookie or
    a timestamp line in its body. Body lines run until the next heading.
    """
    tasks: list[Task] = []
    current: Task | None = None
    body: list[str] = []

    def close() -> None:
        if current is None:
            return
        current.content = "\n".join(body).strip()
        if current.task_type or current.priority or current.timestamp:
            tasks.append(apply_timestamp_fields(current, mappings))

    for lineno, line in enumerate(text.splitlines(), start=1):
        m = _HEADING_RE.match(line)
        if m:
            close()
            keyword, cookie, title = m.groups()
            current = Task(
                file=file,
                line=lineno,
                heading=title,
                task_type=TaskType.from_str(keyword) if keyword else None,
                priority=Priority.from_char(cookie) if cookie else None,
            )
            body = []
            continue

        if current is None:
            continue

        if current.created is None:
            created = extract_created(line, mappings)
            if created:
                current.created = created
                continue

        if current.timestamp is None:
            timestamp = extract_timestamp(line, mappings)
            if timestamp:
                current.timestamp = timestamp
                continue

        if line.strip() or body:
            body.append(line.rstrip())

    close()
    return tasks


class MarkdownTaskSource:
    """
    Directory of markdown documents.

    Implements TaskSource protocol. Files matching the glob are scanned
    recursively in sorted order; hidden directories are skipped.
    """

    def __init__(
        self,
        root: Path | str,
        glob: str = "*.md",
        mappings: WeekdayMappings = (),
        max_file_size: int = MAX_FILE_SIZE,
        max_tasks: int = MAX_TASKS,
    ):
        self.root = Path(root).expanduser()
        if not self.root.is_dir():
            raise InvalidDirectoryError(f"Invalid directory: {self.root}")
        self.glob = glob
        self.mappings = list(mappings)
        self.max_file_size = max_file_size
        self.max_tasks = max_tasks

    def _paths(self) -> list[Path]:
        """Matching files under root, excluding hidden directories."""
        paths = []
        for path in self.root.rglob(self.glob):
            relative = path.relative_to(self.root)
            if any(part.startswith(".") for part in relative.parts[:-1]):
                continue
            if path.is_file():
                paths.append(path)
        return sorted(paths)

    def _read(self, path: Path) -> str | None:
        """Read a document, or None if it should be skipped."""
        try:
            size = path.stat().st_size
            if size > self.max_file_size:
                logger.warning(f"Skipping {path}: {size} bytes exceeds {self.max_file_size}")
                return None
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            logger.warning(f"Skipping {path}: not valid UTF-8")
        except OSError as e:
            logger.warning(f"Skipping {path}: {e}")
        return None

    def fetch_all(self) -> list[Task]:
        """Fetch tasks from every matching document."""
        tasks: list[Task] = []
        for path in self._paths():
            text = self._read(path)
            if text is None:
                continue
            tasks.extend(parse_document(text, str(path), self.mappings))
            if len(tasks) >= self.max_tasks:
                logger.warning(f"Task limit {self.max_tasks} reached, stopping scan")
                return tasks[: self.max_tasks]
        logger.debug(f"Found {len(tasks)} tasks under {self.root}")
        return tasks
