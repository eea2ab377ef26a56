"""vertextual - Build network diagrams and mindmaps with plain text.

vertextual compiles a line-oriented shorthand (``Origin > Destination``,
``> Next``, ``^ Sibling``) into a deduplicated directed edge list, and renders
that list as a code literal or as Mermaid/Graphviz diagram source.
"""

__version__ = "0.1.0"
__description__ = "Build network diagrams and mindmaps with plain text"

from vertextual.config import VertextualConfig
from vertextual.parser import Edge, EdgeCompiler, SelfLoopPolicy, compile_edges

__all__ = [
    "__version__",
    "__description__",
    "VertextualConfig",
    "Edge",
    "EdgeCompiler",
    "SelfLoopPolicy",
    "compile_edges",
]
