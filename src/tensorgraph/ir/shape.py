from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True, slots=True)
class Static:
	"""An axis with a concrete, non-negative extent."""

	extent: int

	def __post_init__(self) -> None:
		if isinstance(self.extent, bool) or not isinstance(self.extent, int):
			raise TypeError(f"Static extent must be an int, got {type(self.extent).__name__}")
		if self.extent < 0:
			raise ValueError(f"Static extent must be >= 0, got {self.extent}")

	def __str__(self) -> str:
		return str(self.extent)


@dataclass(frozen=True, slots=True)
class Dynamic:
	"""An axis whose size is unknown here, identified only by its symbol.

	Two dynamic axes are the same axis iff their symbols are identical; no
	other equivalence is inferred.
	"""

	symbol: str

	def __post_init__(self) -> None:
		if not isinstance(self.symbol, str):
			raise TypeError(f"Dynamic symbol must be a str, got {type(self.symbol).__name__}")
		if not self.symbol:
			raise ValueError("Dynamic symbol must be non-empty")

	def __str__(self) -> str:
		return f"<{self.symbol}>"


Dimension = Union[Static, Dynamic]
Shape = tuple[Dimension, ...]


def as_dim(d: Dimension | int | str) -> Dimension:
	if isinstance(d, (Static, Dynamic)):
		return d
	if isinstance(d, str):
		return Dynamic(d)
	return Static(d)


def as_shape(dims: Iterable[Dimension | int | str]) -> Shape:
	return tuple(as_dim(d) for d in dims)


def rank(shape: Shape) -> int:
	return len(shape)


def format_shape(shape: Shape) -> str:
	return "[" + ", ".join(str(d) for d in shape) + "]"


def is_static(shape: Shape) -> bool:
	return all(isinstance(d, Static) for d in shape)


def numel(shape: Shape) -> int | None:
	"""Element count of a fully static shape, or None if any axis is dynamic."""

	n = 1
	for dim in shape:
		if not isinstance(dim, Static):
			return None
		n *= dim.extent
	return n
