from __future__ import annotations

from typing import TYPE_CHECKING

from .shape import Shape, format_shape

if TYPE_CHECKING:
	from .dtypes import DType


class IRValidationError(ValueError):
	"""Base class for every rejected graph-construction request."""


class BroadcastError(IRValidationError):
	"""Shapes cannot be broadcast together.

	`shapes` holds every shape handed to the engine; `lhs`/`rhs` are the two
	shapes whose combine failed (the left one may be an intermediate fold
	result) and `axis` is the failing position counted from the right (-1 is
	the trailing axis).
	"""

	def __init__(self, shapes: tuple[Shape, ...], lhs: Shape, rhs: Shape, axis: int) -> None:
		super().__init__(
			f"Cannot broadcast {format_shape(lhs)} with {format_shape(rhs)} at axis {axis}"
		)
		self.shapes = shapes
		self.lhs = lhs
		self.rhs = rhs
		self.axis = axis


class DtypeMismatchError(IRValidationError):
	def __init__(self, op_name: str, position: int, expected: DType, actual: DType) -> None:
		super().__init__(
			f"Operand {position} dtype mismatch for operation '{op_name}': "
			f"expected {expected}, got {actual}"
		)
		self.op_name = op_name
		self.position = position
		self.expected = expected
		self.actual = actual


class ShapeIncompatibleError(IRValidationError):
	def __init__(self, op_name: str, shapes: tuple[Shape, ...]) -> None:
		rendered = ", ".join(format_shape(s) for s in shapes)
		super().__init__(f"Cannot broadcast shapes {rendered} for operation '{op_name}'")
		self.op_name = op_name
		self.shapes = shapes
