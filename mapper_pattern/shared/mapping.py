"""
Generic mapper contract.

A mapper is a pure, total function from one shape to another.
Every layer boundary in the pipeline is crossed through one.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Generic, TypeVar

I = TypeVar("I")  # noqa: E741
O = TypeVar("O")  # noqa: E741


class Mapper(ABC, Generic[I, O]):
    """Convert a single ``I`` into an ``O`` without side effects."""

    @abstractmethod
    def map(self, input: I) -> O:  # noqa: A002
        """Return the mapped value for ``input``."""
        raise NotImplementedError


class ListMapper(Mapper[Sequence[I], list[O]]):
    """Lift a scalar mapper over a sequence.

    Order and length are preserved and each element is mapped
    independently of its neighbours.
    """

    def __init__(self, mapper: Mapper[I, O]) -> None:
        self._mapper = mapper

    def map(self, input: Sequence[I]) -> list[O]:  # noqa: A002
        return [self._mapper.map(item) for item in input]
