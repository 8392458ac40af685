"""Binary operations held as objects and evaluated on demand."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BinaryOperator(ABC):
    """An operation on two operands, evaluated by execute()."""

    def __init__(self, a: Any, b: Any) -> None:
        self.a = a
        self.b = b

    @abstractmethod
    def execute(self) -> Any:
        """Apply the operation to the two operands."""


class Add(BinaryOperator):
    """Addition of the two operands."""

    def execute(self) -> Any:
        return self.a + self.b