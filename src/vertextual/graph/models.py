"""Graph data models for diagram rendering."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..parser.models import Edge


@dataclass
class NodeSpec:
    """Specification for a named node."""
    label: str  # Node name as written in the input
    index: int  # Position in first-appearance order
    is_root: bool = False

    @property
    def safe_id(self) -> str:
        """Get ID safe for diagram rendering.

        Names may contain any characters, so IDs come from the node's
        position rather than its label.
        """
        return f"n{self.index}"


@dataclass
class EdgeSpec:
    """Specification for a directed edge."""
    from_node: str  # Source node label
    to_node: str    # Target node label

    @property
    def is_self_loop(self) -> bool:
        return self.from_node == self.to_node


@dataclass
class GraphSpec:
    """Complete graph specification for rendering."""
    title: str
    nodes: dict[str, NodeSpec] = field(default_factory=dict)
    edges: list[EdgeSpec] = field(default_factory=list)

    @classmethod
    def from_edges(cls, edges: Iterable[Edge], title: str = "") -> "GraphSpec":
        """Build a spec whose nodes are exactly the edge endpoints."""
        spec = cls(title=title)
        for edge in edges:
            spec.add_edge(EdgeSpec(from_node=edge.source, to_node=edge.target))
        return spec

    def add_node(self, label: str) -> NodeSpec:
        """Add a node to the graph unless it is already present."""
        if label not in self.nodes:
            self.nodes[label] = NodeSpec(
                label=label,
                index=len(self.nodes),
                is_root=not self.nodes,
            )
        return self.nodes[label]

    def add_edge(self, edge: EdgeSpec) -> None:
        """Add an edge to the graph along with its endpoints."""
        self.add_node(edge.from_node)
        self.add_node(edge.to_node)
        self.edges.append(edge)

    def get_self_loops(self) -> list[EdgeSpec]:
        return [edge for edge in self.edges if edge.is_self_loop]
