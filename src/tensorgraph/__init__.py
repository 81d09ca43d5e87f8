"""tensorgraph: symbolic tensor-expression IR.

Builds an immutable graph of tensor operations described only by shapes and
element types. Nothing here evaluates numbers; an executor walks the finished
graph later.
"""

from .ir.broadcast import broadcast_shapes
from .ir.dtypes import DType, float32
from .ir.errors import DtypeMismatchError, IRValidationError, ShapeIncompatibleError
from .ir.graph import Graph
from .ir.node import Node, leaf, scalar
from .ir.op import BinaryOp, TernaryOp, UnaryOp
from .ir.shape import Dynamic, Static

__all__ = [
	"DType",
	"float32",
	"Static",
	"Dynamic",
	"Node",
	"leaf",
	"scalar",
	"broadcast_shapes",
	"UnaryOp",
	"BinaryOp",
	"TernaryOp",
	"Graph",
	"IRValidationError",
	"DtypeMismatchError",
	"ShapeIncompatibleError",
]
