# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

COMPLETED_MARK = "[X] "
PENDING_MARK = "[ ] "

FIELD_SEP = ","
TRUE_LITERAL = "true"
FALSE_LITERAL = "false"


@dataclass(slots=True)
class Task:
    description: str
    completed: bool = False

    def display(self) -> str:
        mark = COMPLETED_MARK if self.completed else PENDING_MARK
        return mark + self.description

    def to_line(self) -> str:
        """Encode as one line of the task file (without the newline)."""
        flag = TRUE_LITERAL if self.completed else FALSE_LITERAL
        return f"{self.description}{FIELD_SEP}{flag}"

    @classmethod
    def from_line(cls, line: str) -> Task:
        """
        Decode one line of the task file.

        Notes:
        - splits on the LAST comma: the flag never contains one, so commas
          inside the description survive
        - anything other than the literal "true" is pending
        - a line without a comma is a pending task with the whole line as text
        """
        line = line.rstrip("\r\n")
        description, sep, flag = line.rpartition(FIELD_SEP)
        if not sep:
            return cls(description=line, completed=False)
        return cls(description=description, completed=flag == TRUE_LITERAL)
