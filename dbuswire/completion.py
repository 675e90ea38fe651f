"""Listeners notified when an asynchronous task completes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

__all__ = ["CompletionListener", "CompletionFunc"]


class CompletionListener(ABC):
    """Receives a notification carrying the task that has completed."""

    @abstractmethod
    def handle_completion(self, task: Any) -> None:
        """Handle completion of ``task``."""


class CompletionFunc(CompletionListener):
    """A completion listener that forwards to a callable, if one is set."""

    def __init__(self, func: Optional[Callable[[Any], None]]) -> None:
        self.func = func

    def handle_completion(self, task: Any) -> None:
        if self.func:
            self.func(task)