"""Pure rendering of task lists - no I/O dependencies."""

import html
import json
from enum import Enum

from .tasks import Task


class OutputFormat(Enum):
    JSON = "json"
    MARKDOWN = "md"
    HTML = "html"

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        match value.lower():
            case "json":
                return cls.JSON
            case "md" | "markdown":
                return cls.MARKDOWN
            case "html":
                return cls.HTML
        raise ValueError(f"Invalid format: {value}. Valid formats: json, md, html")


def render_json(tasks: list[Task]) -> str:
    return json.dumps([t.to_dict() for t in tasks], indent=2, ensure_ascii=False)


def _detail_lines(task: Task) -> list[tuple[str, str]]:
    """Label/value pairs shown under each heading."""
    details = [("File", f"{task.file}:{task.line}")]
    if task.task_type:
        details.append(("Type", task.task_type.value))
    if task.priority:
        details.append(("Priority", str(task.priority)))
    if task.created:
        details.append(("Created", task.created))
    if task.timestamp:
        details.append(("Time", task.timestamp))
    return details


def render_markdown(tasks: list[Task]) -> str:
    lines = ["# Tasks", ""]
    for task in tasks:
        lines.append(f"## {task.heading}")
        for label, value in _detail_lines(task):
            lines.append(f"**{label}:** {value}")
        if task.content:
            lines.extend(["", task.content])
        lines.append("")
    return "\n".join(lines) + "\n"


def render_html(tasks: list[Task]) -> str:
    parts = ["<html><body><h1>Tasks</h1>"]
    for task in tasks:
        parts.append(f"<h2>{html.escape(task.heading)}</h2>")
        for label, value in _detail_lines(task):
            parts.append(f"<p><strong>{label}:</strong> {html.escape(value)}</p>")
        if task.content:
            parts.append(f"<p>{html.escape(task.content)}</p>")
    parts.append("</body></html>")
    return "\n".join(parts)


def render(tasks: list[Task], fmt: OutputFormat) -> str:
    match fmt:
        case OutputFormat.JSON:
            return render_json(tasks)
        case OutputFormat.MARKDOWN:
            return render_markdown(tasks)
        case OutputFormat.HTML:
            return render_html(tasks)
    raise ValueError(f"Unsupported format: {fmt}")
