from .broadcast import broadcast_dims, broadcast_shapes, is_broadcastable
from .dtypes import DType, bfloat16, bool_, float16, float32, int32, int64, uint32, uint64
from .errors import BroadcastError, DtypeMismatchError, IRValidationError, ShapeIncompatibleError
from .graph import Graph
from .node import Binary, Leaf, Node, Ternary, Unary, describe_node, leaf, scalar
from .op import BinaryOp, Op, TernaryOp, UnaryOp
from .shape import Dimension, Dynamic, Shape, Static, as_shape, format_shape, is_static, numel, rank

__all__ = [
	"Static",
	"Dynamic",
	"Dimension",
	"Shape",
	"as_shape",
	"format_shape",
	"rank",
	"numel",
	"is_static",
	"DType",
	"float32",
	"float16",
	"bfloat16",
	"int32",
	"int64",
	"uint32",
	"uint64",
	"bool_",
	"Node",
	"Leaf",
	"Unary",
	"Binary",
	"Ternary",
	"leaf",
	"scalar",
	"describe_node",
	"broadcast_shapes",
	"broadcast_dims",
	"is_broadcastable",
	"Op",
	"UnaryOp",
	"BinaryOp",
	"TernaryOp",
	"Graph",
	"IRValidationError",
	"BroadcastError",
	"DtypeMismatchError",
	"ShapeIncompatibleError",
]
