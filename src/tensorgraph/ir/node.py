from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .dtypes import DType
from .shape import Dimension, Shape, as_shape, format_shape


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Node:
	"""One point in an expression graph.

	Nodes are frozen once built and hold direct references to their operands, so
	a child may be shared by any number of parents. Since an operand must exist
	before the node that uses it, the graph is acyclic by construction.

	Equality is identity: two structurally equal nodes are still two distinct
	graph points.
	"""

	shape: Shape
	dtype: DType

	@property
	def kind(self) -> str:
		return self.__class__.__name__

	@property
	def rank(self) -> int:
		return len(self.shape)

	@property
	def children(self) -> tuple[Node, ...]:
		return ()

	@property
	def arity(self) -> int:
		return len(self.children)

	def describe(self) -> str:
		return describe_node(self)

	def __str__(self) -> str:
		return describe_node(self)

	def __repr__(self) -> str:
		return describe_node(self)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Leaf(Node):
	"""An external input; has no operands."""


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class Unary(Node):
	name: str
	operand: Node

	@property
	def children(self) -> tuple[Node, ...]:
		return (self.operand,)


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class Binary(Node):
	name: str
	left: Node
	right: Node

	@property
	def children(self) -> tuple[Node, ...]:
		return (self.left, self.right)


@dataclass(frozen=True, slots=True, eq=False, repr=False, kw_only=True)
class Ternary(Node):
	name: str
	first: Node
	second: Node
	third: Node

	@property
	def children(self) -> tuple[Node, ...]:
		return (self.first, self.second, self.third)


def describe_node(node: Node) -> str:
	"""Render `node` for logs and error messages. Not a persisted format."""

	shape = format_shape(node.shape)
	if isinstance(node, Leaf):
		return f"Leaf[shape: {shape}, dtype: {node.dtype}]"
	name = getattr(node, "name", "?")
	return f"{node.kind}[name: {name}, shape: {shape}, dtype: {node.dtype}]"


def leaf(shape: Iterable[Dimension | int | str], dtype: DType | str) -> Leaf:
	return Leaf(as_shape(shape), DType.parse(dtype))


def scalar(dtype: DType | str) -> Leaf:
	return Leaf((), DType.parse(dtype))
