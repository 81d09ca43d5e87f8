from __future__ import annotations

import logging
from dataclasses import dataclass, fields

from .broadcast import broadcast_shapes
from .dtypes import DType
from .errors import BroadcastError, DtypeMismatchError, ShapeIncompatibleError
from .node import Binary, Node, Ternary, Unary
from .shape import Shape, format_shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Op:
	"""Base class for operator descriptors.

	A descriptor fixes an op name and its dtype signature. Applying it only
	builds a validated node: operand dtypes are checked left to right first, then
	operand shapes are broadcast in the same order. Either a complete node comes
	back or exactly one IRValidationError is raised.
	"""

	name: str

	def __post_init__(self) -> None:
		# Accept dtype names ("float32") the same way leaf() does.
		for f in fields(self):
			if f.name.endswith("_dtype"):
				object.__setattr__(self, f.name, DType.parse(getattr(self, f.name)))

	@property
	def kind(self) -> str:
		return self.__class__.__name__

	@property
	def input_dtypes(self) -> tuple[DType, ...]:
		raise NotImplementedError

	@property
	def arity(self) -> int:
		return len(self.input_dtypes)

	def _build(self, shape: Shape, operands: tuple[Node, ...]) -> Node:
		raise NotImplementedError

	def _apply(self, operands: tuple[Node, ...]) -> Node:
		for x in operands:
			if not isinstance(x, Node):
				raise TypeError(f"{self.kind} '{self.name}' expects Node operands, got {type(x).__name__}")

		for position, (x, expected) in enumerate(zip(operands, self.input_dtypes), start=1):
			if x.dtype != expected:
				logger.debug("%s rejected operand %d: %s != %s", self.name, position, x.dtype, expected)
				raise DtypeMismatchError(self.name, position, expected, x.dtype)

		shapes = tuple(x.shape for x in operands)
		try:
			shape = broadcast_shapes(*shapes)
		except BroadcastError as exc:
			logger.debug("%s rejected shapes: %s", self.name, exc)
			raise ShapeIncompatibleError(self.name, shapes) from exc

		node = self._build(shape, operands)
		logger.debug("%s -> %s %s", self.name, format_shape(shape), node.dtype)
		return node


@dataclass(frozen=True, slots=True)
class UnaryOp(Op):
	"""Elementwise one-operand op, e.g. relu or sigmoid."""

	input_dtype: DType
	output_dtype: DType

	@property
	def input_dtypes(self) -> tuple[DType, ...]:
		return (self.input_dtype,)

	def apply(self, operand: Node) -> Unary:
		return self._apply((operand,))

	__call__ = apply

	def _build(self, shape: Shape, operands: tuple[Node, ...]) -> Unary:
		(operand,) = operands
		return Unary(shape, self.output_dtype, name=self.name, operand=operand)


@dataclass(frozen=True, slots=True)
class BinaryOp(Op):
	"""Elementwise two-operand op with broadcasting, e.g. add or mul."""

	left_dtype: DType
	right_dtype: DType
	output_dtype: DType

	@property
	def input_dtypes(self) -> tuple[DType, ...]:
		return (self.left_dtype, self.right_dtype)

	def apply(self, left: Node, right: Node) -> Binary:
		return self._apply((left, right))

	__call__ = apply

	def _build(self, shape: Shape, operands: tuple[Node, ...]) -> Binary:
		left, right = operands
		return Binary(shape, self.output_dtype, name=self.name, left=left, right=right)


@dataclass(frozen=True, slots=True)
class TernaryOp(Op):
	"""Three-operand op with broadcasting, e.g. where(cond, x, y)."""

	first_dtype: DType
	second_dtype: DType
	third_dtype: DType
	output_dtype: DType

	@property
	def input_dtypes(self) -> tuple[DType, ...]:
		return (self.first_dtype, self.second_dtype, self.third_dtype)

	def apply(self, first: Node, second: Node, third: Node) -> Ternary:
		return self._apply((first, second, third))

	__call__ = apply

	def _build(self, shape: Shape, operands: tuple[Node, ...]) -> Ternary:
		first, second, third = operands
		return Ternary(shape, self.output_dtype, name=self.name, first=first, second=second, third=third)
