"""Graphviz DOT renderer."""

import logging

from ..config import AppearanceConfig, LineType, NodeShape
from .framework import GraphRenderer, plain_number
from .models import GraphSpec, NodeSpec

logger = logging.getLogger(__name__)

FONT = "sans-serif"
POINTS_PER_INCH = 72
BASE_FONT_PT = 10
DEFAULT_NODE_SIZE = 40  # Node size that maps to a one inch wide node
DEFAULT_CHARGE = 300

SHAPES = {
    NodeShape.RECTANGLE: "box",
    NodeShape.CIRCLE: "circle",
    NodeShape.SQUARE: "square",
    NodeShape.NONE: "plaintext",
}

EDGE_STYLES = {
    LineType.SOLID: "solid",
    LineType.DASHED: "dashed",
    LineType.DOTTED: "dotted",
    LineType.BLANK: "invis",
}


def dot_string(value: str) -> str:
    """Quote a value as a DOT string."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def dot_attributes(attributes: dict) -> str:
    parts = []
    for key, value in attributes.items():
        if isinstance(value, str):
            value = dot_string(value)
        else:
            value = plain_number(round(value, 3))
        parts.append(f"{key}={value}")
    return ", ".join(parts)


class GraphvizRenderer(GraphRenderer):
    """DOT digraph renderer for edge lists."""

    @property
    def format_name(self) -> str:
        return "graphviz"

    def get_file_extension(self) -> str:
        return ".dot"

    def render(self, spec: GraphSpec, appearance: AppearanceConfig) -> str:
        """Render graph specification as a DOT digraph."""
        lines = [f"digraph {dot_string(spec.title or 'vertextual')} {{"]
        lines.append(f"    graph [{dot_attributes(self._graph_attributes(spec, appearance))}];")
        lines.append(f"    node [{dot_attributes(self._node_attributes(appearance))}];")
        lines.append(f"    edge [{dot_attributes(self._edge_attributes(appearance))}];")

        if spec.nodes:
            lines.append("")
            for node in spec.nodes.values():
                lines.append(f"    {self._render_node(node, appearance)}")

        if spec.edges:
            lines.append("")
            for edge in spec.edges:
                from_safe = spec.nodes[edge.from_node].safe_id
                to_safe = spec.nodes[edge.to_node].safe_id
                lines.append(f"    {from_safe} -> {to_safe};")

        lines.append("}")
        return "\n".join(lines) + "\n"

    def _graph_attributes(self, spec: GraphSpec, appearance: AppearanceConfig) -> dict:
        distance = appearance.layout.node_distance / POINTS_PER_INCH
        attributes = {}
        if spec.title:
            attributes.update(label=spec.title, labelloc="t", fontname=FONT)
        attributes.update(
            splines="curved" if appearance.edges.curvature > 0 else "line",
            nodesep=distance,
            ranksep=distance,
            K=distance,
            repulsiveforce=abs(appearance.layout.charge) / DEFAULT_CHARGE,
        )
        return attributes

    def _node_attributes(self, appearance: AppearanceConfig) -> dict:
        nodes = appearance.nodes
        return {
            "shape": SHAPES[nodes.shape],
            "width": nodes.size / DEFAULT_NODE_SIZE,
            "fontname": FONT,
            "fontsize": nodes.label_size * BASE_FONT_PT,
            "style": "filled",
            "fillcolor": "white",
        }

    def _edge_attributes(self, appearance: AppearanceConfig) -> dict:
        edges = appearance.edges
        attributes = {
            "penwidth": edges.thickness,
            "arrowsize": edges.arrow_size,
            "style": EDGE_STYLES[edges.line_type],
        }
        if edges.arrow_size == 0:
            attributes["arrowhead"] = "none"
        return attributes

    def _render_node(self, node: NodeSpec, appearance: AppearanceConfig) -> str:
        attributes = {"label": node.label}
        if appearance.nodes.root_only and not node.is_root:
            attributes["shape"] = SHAPES[NodeShape.NONE]
        return f"{node.safe_id} [{dot_attributes(attributes)}];"
