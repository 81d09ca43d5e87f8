from __future__ import annotations

from dataclasses import dataclass, field

from .node import Leaf, Node
from .shape import format_shape


@dataclass
class Graph:
	"""A read-only view over the nodes reachable from some outputs.

	Design choices (on purpose):
	- Nodes are listed in topological order (operands before users), each shared
	  node exactly once. That is the order an executor allocates and runs in.
	- Building a view never touches the nodes; they stay immutable.
	"""

	name: str = "graph"
	outputs: tuple[Node, ...] = ()
	nodes: list[Node] = field(init=False, default_factory=list)
	_index: dict[int, int] = field(init=False, default_factory=dict, repr=False)
	_users: dict[int, list[Node]] = field(init=False, default_factory=dict, repr=False)

	@classmethod
	def from_outputs(cls, *outputs: Node, name: str = "graph") -> Graph:
		g = cls(name=name, outputs=tuple(outputs))
		for out in outputs:
			g._visit(out)
		return g

	def _visit(self, root: Node) -> None:
		# Iterative post-order so deep chains don't hit the recursion limit.
		stack: list[tuple[Node, bool]] = [(root, False)]
		while stack:
			node, expanded = stack.pop()
			if id(node) in self._index:
				continue
			if expanded:
				self._add(node)
				continue
			stack.append((node, True))
			for child in reversed(node.children):
				if id(child) not in self._index:
					stack.append((child, False))

	def _add(self, node: Node) -> None:
		self._index[id(node)] = len(self.nodes)
		self.nodes.append(node)
		self._users[id(node)] = []
		seen: set[int] = set()
		for child in node.children:
			if id(child) not in seen:
				seen.add(id(child))
				self._users[id(child)].append(node)

	@property
	def leaves(self) -> list[Leaf]:
		return [n for n in self.nodes if isinstance(n, Leaf)]

	def __contains__(self, node: Node) -> bool:
		return id(node) in self._index

	def __len__(self) -> int:
		return len(self.nodes)

	def index(self, node: Node) -> int:
		try:
			return self._index[id(node)]
		except KeyError:
			raise KeyError(f"{node} is not part of graph {self.name!r}") from None

	def users(self, node: Node) -> list[Node]:
		self.index(node)
		return list(self._users[id(node)])

	def summary(self) -> str:
		lines: list[str] = [f"Graph(name={self.name!r}, nodes={len(self.nodes)}, outputs={len(self.outputs)})"]
		for i, node in enumerate(self.nodes):
			out = f"%{i}: {format_shape(node.shape)} {node.dtype}"
			if isinstance(node, Leaf):
				lines.append(f"- {out} = input")
				continue
			ins = ", ".join(f"%{self._index[id(c)]}" for c in node.children)
			lines.append(f"- {out} = {node.name}({ins})")
		return "\n".join(lines)
