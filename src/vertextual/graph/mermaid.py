"""Mermaid flowchart renderer."""

import json
import logging

from ..config import AppearanceConfig, LineType, NodeShape
from .framework import GraphRenderer, plain_number
from .models import EdgeSpec, GraphSpec, NodeSpec

logger = logging.getLogger(__name__)

BASE_FONT_PX = 12

# Mermaid has no square primitive; squares fall back to rectangles
SHAPES = {
    NodeShape.RECTANGLE: ('["', '"]'),
    NodeShape.SQUARE: ('["', '"]'),
    NodeShape.CIRCLE: ('(("', '"))'),
    NodeShape.NONE: ('["', '"]'),
}

DASH_PATTERNS = {
    LineType.DASHED: "6 4",
    LineType.DOTTED: "2 2",
}


class MermaidRenderer(GraphRenderer):
    """Mermaid diagram renderer for edge lists."""

    @property
    def format_name(self) -> str:
        return "mermaid"

    def get_file_extension(self) -> str:
        return ".mmd"

    def render(self, spec: GraphSpec, appearance: AppearanceConfig) -> str:
        """Render graph specification as Mermaid flowchart."""
        lines = []

        # Header
        if spec.title:
            lines.extend(["---", f"title: {json.dumps(spec.title)}", "---"])
        lines.append(self._render_init(appearance))
        lines.append("flowchart TD")

        # Nodes
        if spec.nodes:
            lines.append("    %% Nodes")
            for node in spec.nodes.values():
                lines.append(f"    {self._render_node(node, appearance)}")

        # Edges
        if spec.edges:
            lines.append("    %% Edges")
            arrow = self._arrow(appearance)
            for edge in spec.edges:
                lines.append(f"    {self._render_edge(edge, spec, arrow)}")

        lines.extend(self._render_styling(spec, appearance))

        return "\n".join(lines) + "\n"

    def _render_init(self, appearance: AppearanceConfig) -> str:
        """Render the init directive carrying spacing and curve settings."""
        distance = plain_number(appearance.layout.node_distance)
        flowchart = {
            "curve": "basis" if appearance.edges.curvature > 0 else "linear",
            "nodeSpacing": distance,
            "rankSpacing": distance,
        }
        return f"%%{{init: {json.dumps({'flowchart': flowchart})}}}%%"

    def _shape_for(self, node: NodeSpec, appearance: AppearanceConfig) -> NodeShape:
        if appearance.nodes.root_only and not node.is_root:
            return NodeShape.NONE
        return appearance.nodes.shape

    def _render_node(self, node: NodeSpec, appearance: AppearanceConfig) -> str:
        """Render a single node."""
        opening, closing = SHAPES[self._shape_for(node, appearance)]
        return f"{node.safe_id}{opening}{self._escape_label(node.label)}{closing}"

    def _arrow(self, appearance: AppearanceConfig) -> str:
        if appearance.edges.line_type == LineType.BLANK:
            return "~~~"
        if appearance.edges.arrow_size == 0:
            return "---"
        return "-->"

    def _render_edge(self, edge: EdgeSpec, spec: GraphSpec, arrow: str) -> str:
        """Render a single edge."""
        from_safe = spec.nodes[edge.from_node].safe_id
        to_safe = spec.nodes[edge.to_node].safe_id
        return f"{from_safe} {arrow} {to_safe}"

    def _render_styling(self, spec: GraphSpec, appearance: AppearanceConfig) -> list[str]:
        """Render node and link styling from the appearance settings."""
        lines = []
        if not spec.nodes:
            return lines

        font_px = round(appearance.nodes.label_size * BASE_FONT_PX)
        lines.append("    %% Styling")
        lines.append(f"    classDef default fill:#fff,font-size:{font_px}px")

        bare = [
            node.safe_id for node in spec.nodes.values()
            if self._shape_for(node, appearance) == NodeShape.NONE
        ]
        if bare:
            lines.append("    classDef bare fill:none,stroke:none")
            lines.append(f"    class {','.join(bare)} bare")

        if spec.edges and appearance.edges.line_type != LineType.BLANK:
            link_style = [f"stroke-width:{appearance.edges.thickness:g}px"]
            dash = DASH_PATTERNS.get(appearance.edges.line_type)
            if dash:
                link_style.append(f"stroke-dasharray:{dash}")
            lines.append(f"    linkStyle default {','.join(link_style)}")

        return lines

    def _escape_label(self, label: str) -> str:
        """Escape label for a quoted Mermaid node label."""
        label = label.replace("#", "#35;")  # Must run before the entity codes below
        label = label.replace('"', "#quot;")
        label = label.replace("<", "#lt;")
        label = label.replace(">", "#gt;")
        return label
