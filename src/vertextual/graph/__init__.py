"""Graph visualization module for vertextual.

Turns compiled edges into Mermaid or Graphviz diagram source. Appearance
settings only change how the diagram looks; nodes and edges always come
from the edge list.
"""

from .framework import GraphGenerator, GraphRenderer, create_generator
from .graphviz import GraphvizRenderer
from .mermaid import MermaidRenderer
from .models import EdgeSpec, GraphSpec, NodeSpec

__all__ = [
    "GraphGenerator",
    "GraphRenderer",
    "create_generator",
    "GraphvizRenderer",
    "MermaidRenderer",
    "GraphSpec",
    "NodeSpec",
    "EdgeSpec",
]
