"""Base sender interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict


class Sender(ABC):
    """Abstract base class for span batch senders."""

    @abstractmethod
    def send(self, payload: bytes) -> None:
        """Transmit one encoded batch of spans."""

    def close(self) -> None:
        """Close sender resources if needed."""

    def as_dict(self) -> Dict[str, Any]:
        return {"sender": type(self).__name__}

    def __enter__(self) -> "Sender":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
