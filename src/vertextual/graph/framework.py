"""Graph rendering framework."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from ..config import AppearanceConfig
from ..parser.models import Edge
from .models import GraphSpec

logger = logging.getLogger(__name__)


def plain_number(value: float) -> int | float:
    """Drop a zero fractional part so settings render as written."""
    return int(value) if float(value).is_integer() else value


class GraphRenderer(ABC):
    """Abstract base class for graph renderers."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Name of the output format."""
        pass

    @abstractmethod
    def render(self, spec: GraphSpec, appearance: AppearanceConfig) -> str:
        """Render graph specification to string format."""
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get file extension for this format."""
        pass


class GraphGenerator:
    """Builds graph specifications from edges and dispatches to renderers."""

    def __init__(self, appearance: AppearanceConfig | None = None):
        self.appearance = appearance or AppearanceConfig()
        self.renderers: dict[str, GraphRenderer] = {}

    def add_renderer(self, renderer: GraphRenderer) -> None:
        """Add a graph renderer."""
        self.renderers[renderer.format_name] = renderer

    def build_spec(self, edges: Iterable[Edge], title: str = "") -> GraphSpec:
        """Generate graph specification from compiled edges."""
        spec = GraphSpec.from_edges(edges, title=title)
        logger.info(f"Generated graph with {len(spec.nodes)} nodes and {len(spec.edges)} edges")
        return spec

    def render_graph(self, spec: GraphSpec, format_name: str = "mermaid") -> str:
        """Render graph specification to string.

        Args:
            spec: Graph specification to render
            format_name: Output format ('mermaid', 'graphviz')

        Returns:
            Rendered graph as string
        """
        format_name = getattr(format_name, "value", format_name)
        if format_name not in self.renderers:
            available = list(self.renderers.keys())
            raise ValueError(f"Unknown format '{format_name}'. Available: {available}")

        renderer = self.renderers[format_name]
        logger.info(f"Rendering graph with {renderer.format_name} renderer")
        return renderer.render(spec, self.appearance)


def create_generator(appearance: AppearanceConfig | None = None) -> GraphGenerator:
    """Create a generator with all built-in renderers registered."""
    from .graphviz import GraphvizRenderer
    from .mermaid import MermaidRenderer

    generator = GraphGenerator(appearance)
    generator.add_renderer(MermaidRenderer())
    generator.add_renderer(GraphvizRenderer())
    return generator
