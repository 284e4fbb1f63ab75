# src/taskorder/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class Task:
    name: str
    priority: int
    deadline: int
    dependencies: tuple[str, ...] = ()

    def sort_key(self) -> tuple[int, int, str]:
        """
        Frontier ordering used by the scheduler (smallest first):
        - earlier deadline
        - then higher priority
        - then name, so equal tasks still come out in a stable order
        """
        return (self.deadline, -self.priority, self.name)

    def describe(self) -> str:
        return f"{self.name} | Priority: {self.priority} | Deadline: {self.deadline}"


@dataclass(slots=True)
class AddTaskResult:
    """
    Outcome of TaskRegistry.add_task.

    skipped_dependencies lists names that were requested but not registered;
    they were dropped from the task (advisory, the task itself was added).
    """

    task: Task
    skipped_dependencies: list[str] = field(default_factory=list)

    @property
    def warnings(self) -> list[str]:
        return [
            f"Dependency '{dep}' not found. Skipping."
            for dep in self.skipped_dependencies
        ]
