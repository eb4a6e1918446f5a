"""Stage status tracking shared by the pipeline and the CLI commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from rich.tree import Tree

STATUS_SYMBOLS = {
    "pending": "[green dim]○[/green dim]",
    "running": "[cyan]○[/cyan]",
    "done": "[green]●[/green]",
    "error": "[red]●[/red]",
    "skipped": "[yellow]○[/yellow]",
}


@dataclass
class TrackedStep:
    key: str
    label: str
    status: str = "pending"
    detail: str = ""


class StepTracker:
    """Track the pipeline stages and render them as a Rich tree."""

    def __init__(self, title: str):
        self.title = title
        self.steps: List[TrackedStep] = []

    def add(self, key: str, label: str) -> None:
        if self.get(key) is None:
            self.steps.append(TrackedStep(key, label))

    def get(self, key: str) -> Optional[TrackedStep]:
        return next((step for step in self.steps if step.key == key), None)

    def status_of(self, key: str) -> Optional[str]:
        step = self.get(key)
        return step.status if step else None

    def start(self, key: str, detail: str = "") -> None:
        self._update(key, "running", detail)

    def complete(self, key: str, detail: str = "") -> None:
        self._update(key, "done", detail)

    def error(self, key: str, detail: str = "") -> None:
        self._update(key, "error", detail)

    def skip(self, key: str, detail: str = "") -> None:
        self._update(key, "skipped", detail)

    def _update(self, key: str, status: str, detail: str) -> None:
        step = self.get(key)
        if step is None:
            step = TrackedStep(key, key)
            self.steps.append(step)
        step.status = status
        if detail:
            step.detail = detail

    def render(self) -> Tree:
        tree = Tree(f"[cyan]{self.title}[/cyan]", guide_style="grey50")
        for step in self.steps:
            symbol = STATUS_SYMBOLS.get(step.status, " ")
            detail = step.detail.strip()
            if step.status == "pending":
                text = f"{step.label} ({detail})" if detail else step.label
                tree.add(f"{symbol} [bright_black]{text}[/bright_black]")
            elif detail:
                tree.add(f"{symbol} [white]{step.label}[/white] [bright_black]({detail})[/bright_black]")
            else:
                tree.add(f"{symbol} [white]{step.label}[/white]")
        return tree


__all__ = ["STATUS_SYMBOLS", "StepTracker", "TrackedStep"]
