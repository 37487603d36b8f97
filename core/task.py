from dataclasses import dataclass
from typing import Optional


@dataclass
class Task:
    label: str
    details: Optional[str] = None
    done: bool = False

    def toggle(self) -> None:
        self.done = not self.done

    @property
    def has_details(self) -> bool:
        return bool(self.details)


__all__ = ["Task"]
