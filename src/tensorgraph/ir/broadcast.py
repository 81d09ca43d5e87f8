"""Shape broadcasting over static and named dynamic axes.

Shapes are right-aligned by their trailing axis. Where one shape has fewer
axes, the other side's dimension is carried through as-is (a dynamic axis stays
dynamic; no extent-1 axis is synthesized for the missing side).

With more than two shapes the engine folds left to right, combining the running
result with each next shape in argument order. The order is part of the
contract: `BroadcastError.lhs` is always the running result at the point of
failure.
"""

from __future__ import annotations

from .errors import BroadcastError
from .shape import Dimension, Dynamic, Shape, Static, as_shape


def broadcast_dims(a: Dimension, b: Dimension) -> Dimension | None:
	"""Combine two aligned axes; None if they are incompatible."""

	if isinstance(a, Static) and isinstance(b, Static):
		if a.extent == b.extent or a.extent == 1 or b.extent == 1:
			return a if a.extent >= b.extent else b
		return None
	if isinstance(a, Static) and isinstance(b, Dynamic):
		return b if a.extent == 1 else None
	if isinstance(a, Dynamic) and isinstance(b, Static):
		return a if b.extent == 1 else None
	if isinstance(a, Dynamic) and isinstance(b, Dynamic):
		# Named axes match only by exact symbol.
		return a if a.symbol == b.symbol else None
	return None


def _combine(lhs: Shape, rhs: Shape, shapes: tuple[Shape, ...]) -> Shape:
	out: list[Dimension] = []
	for i in range(1, max(len(lhs), len(rhs)) + 1):
		if i > len(lhs):
			out.append(rhs[-i])
		elif i > len(rhs):
			out.append(lhs[-i])
		else:
			dim = broadcast_dims(lhs[-i], rhs[-i])
			if dim is None:
				raise BroadcastError(shapes, lhs, rhs, -i)
			out.append(dim)
	out.reverse()
	return tuple(out)


def broadcast_shapes(*shapes: Shape) -> Shape:
	"""Broadcast any number of shapes; raises BroadcastError on mismatch."""

	if not shapes:
		return ()
	shapes = tuple(as_shape(s) for s in shapes)
	result = shapes[0]
	for shape in shapes[1:]:
		result = _combine(result, shape, shapes)
	return result


def is_broadcastable(*shapes: Shape) -> bool:
	try:
		broadcast_shapes(*shapes)
	except BroadcastError:
		return False
	return True
