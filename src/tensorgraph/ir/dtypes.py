from __future__ import annotations

from enum import Enum

import numpy as np


class DType(Enum):
	"""Element type of an IR tensor.

	The set is closed and members never coerce into one another: an op declared
	for float32 rejects a float16 operand outright.
	"""

	FLOAT32 = ("Float32", 4, "float32")
	FLOAT16 = ("Float16", 2, "float16")
	BFLOAT16 = ("BFloat16", 2, None)
	INT32 = ("Int32", 4, "int32")
	INT64 = ("Int64", 8, "int64")
	UINT32 = ("UInt32", 4, "uint32")
	UINT64 = ("UInt64", 8, "uint64")
	BOOL = ("Bool", 1, "bool")

	def __init__(self, label: str, itemsize: int, numpy_name: str | None) -> None:
		self.label = label
		self.itemsize = itemsize
		self._numpy_name = numpy_name

	@property
	def numpy_dtype(self) -> np.dtype | None:
		# NumPy has no native bfloat16.
		if self._numpy_name is None:
			return None
		return np.dtype(self._numpy_name)

	@classmethod
	def parse(cls, name: DType | str) -> DType:
		if isinstance(name, cls):
			return name
		if isinstance(name, str):
			key = name.strip().upper()
			for member in cls:
				if key == member.name:
					return member
		raise ValueError(f"Unknown dtype: {name!r}")

	def __str__(self) -> str:
		return self.label

	def __repr__(self) -> str:
		return f"DType.{self.name}"


float32 = DType.FLOAT32
float16 = DType.FLOAT16
bfloat16 = DType.BFLOAT16
int32 = DType.INT32
int64 = DType.INT64
uint32 = DType.UINT32
uint64 = DType.UINT64
bool_ = DType.BOOL
