"""Configuration management for vertextual using Pydantic models."""

import json
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vertextual.constants import CONFIG_FILENAME, DEFAULT_TITLE
from vertextual.parser.compiler import SelfLoopPolicy


class NodeShape(str, Enum):
    """Node shapes."""
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    SQUARE = "square"
    NONE = "none"


class LineType(str, Enum):
    """Edge line types."""
    SOLID = "solid"
    DASHED = "dashed"
    DOTTED = "dotted"
    BLANK = "blank"


class ExportFormat(str, Enum):
    """Code literal export formats."""
    TRIBBLE = "tribble"
    PYTHON = "python"
    CSV = "csv"


class DiagramFormat(str, Enum):
    """Diagram output formats."""
    MERMAID = "mermaid"
    GRAPHVIZ = "graphviz"


class LogLevel(str, Enum):
    """Logging levels."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"


class CompilerConfig(BaseModel):
    """Compiler configuration section."""
    self_loops: SelfLoopPolicy = Field(alias="selfLoops", default=SelfLoopPolicy.KEEP)

    model_config = ConfigDict(populate_by_name=True)


class NodeAppearance(BaseModel):
    """Node appearance section."""
    size: float = Field(default=40, ge=0, le=50)
    shape: NodeShape = NodeShape.RECTANGLE
    label_size: float = Field(alias="labelSize", default=1.5, ge=1, le=5)
    root_only: bool = Field(alias="rootOnly", default=True)

    model_config = ConfigDict(populate_by_name=True)


class EdgeAppearance(BaseModel):
    """Edge appearance section."""
    thickness: float = Field(default=1.5, ge=1, le=5)
    line_type: LineType = Field(alias="lineType", default=LineType.SOLID)
    arrow_size: float = Field(alias="arrowSize", default=1, ge=0, le=5)
    curvature: float = Field(default=0.1, ge=0, le=1)

    model_config = ConfigDict(populate_by_name=True)


class LayoutHints(BaseModel):
    """Spacing hints passed through to the diagram language."""
    node_distance: float = Field(alias="nodeDistance", default=50)
    charge: float = -300

    @field_validator("node_distance")
    @classmethod
    def validate_node_distance(cls, v):
        if v <= 0:
            raise ValueError("node_distance must be > 0")
        return v

    @field_validator("charge")
    @classmethod
    def validate_charge(cls, v):
        """Charge is a repulsion, so it can't be positive."""
        if v > 0:
            raise ValueError(f"charge must be <= 0, got: {v}")
        return v

    model_config = ConfigDict(populate_by_name=True)


class AppearanceConfig(BaseModel):
    """Everything that changes how a graph looks, never what it contains."""
    nodes: NodeAppearance = Field(default_factory=NodeAppearance)
    edges: EdgeAppearance = Field(default_factory=EdgeAppearance)
    layout: LayoutHints = Field(default_factory=LayoutHints)

    model_config = ConfigDict(extra="forbid")


class ExportConfig(BaseModel):
    """Export configuration section."""
    format: ExportFormat = ExportFormat.TRIBBLE
    variable: str = "edges"
    indent: int = 4

    @field_validator("variable")
    @classmethod
    def validate_variable(cls, v):
        if not v.isidentifier():
            raise ValueError(f"variable must be a valid identifier, got: {v!r}")
        return v

    @field_validator("indent")
    @classmethod
    def validate_indent(cls, v):
        if not (0 <= v <= 16):
            raise ValueError(f"indent must be between 0-16, got: {v}")
        return v


class GraphConfig(BaseModel):
    """Graph output configuration section."""
    title: str = DEFAULT_TITLE
    format: DiagramFormat = DiagramFormat.MERMAID


class LoggingConfig(BaseModel):
    """Logging configuration section."""
    level: LogLevel = LogLevel.WARN

    model_config = ConfigDict(use_enum_values=True)


class VertextualConfig(BaseModel):
    """Complete vertextual configuration model."""
    compiler: CompilerConfig = Field(default_factory=CompilerConfig)
    appearance: AppearanceConfig = Field(default_factory=AppearanceConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    graph: GraphConfig = Field(default_factory=GraphConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


def load_config(config_path: str | Path | None = None) -> VertextualConfig:
    """Load configuration from file with fallback to defaults.

    Args:
        config_path: Optional path to configuration file. If None, searches
                    current directory and parents for .vertextual.json

    Returns:
        VertextualConfig: Loaded and validated configuration

    Raises:
        ValueError: If an explicit config file is missing or the configuration is invalid
    """
    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            return VertextualConfig()
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ValueError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = json.load(f)
        return VertextualConfig(**config_data)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file {config_path}: {e}")
    except Exception as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Find .vertextual.json by searching up the directory tree."""
    if start_dir is None:
        start_dir = Path.cwd()

    current = Path(start_dir).resolve()

    while True:
        config_file = current / CONFIG_FILENAME
        if config_file.exists():
            return config_file

        parent = current.parent
        if parent == current:  # Reached root directory
            break
        current = parent

    return None
