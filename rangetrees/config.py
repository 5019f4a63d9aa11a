"""
Configuration parser for the range tree viewer.

Reads a TOML file with [General], [Generator], [Query], [Viewer] and
[Colors] sections. Every key is optional.
"""

import tomllib
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

STRUCTURES = ("range1d", "range2d", "interval", "segment")


@dataclass
class GeneratorConfig:
    """Sizes and seed for the generated scene."""
    seed: int = 0
    count: int = 10
    limit: int = 40         # Coordinates are drawn from [0, limit)
    max_length: int = 20    # Segment extent along each axis is below this


@dataclass
class QueryConfig:
    """Default window and query line."""
    window: tuple[int, int, int, int] = (7, 7, 30, 30)  # start_x start_y end_x end_y
    line: tuple[int, int, int] = (15, 10, 40)           # x start_y end_y


@dataclass
class ViewerConfig:
    """Viewer window geometry."""
    width: int = 800
    height: int = 800
    margin: int = 24
    point_radius: int = 4
    window_title: str = "Layered Range Trees"


@dataclass
class ColorsConfig:
    """Viewer colours."""
    background: str = "#ffffff"
    grid: str = "#e8e8e8"
    item: str = "#999999"
    reported: str = "#d32f2f"
    query: str = "#1976d2"


@dataclass
class Config:
    """Main configuration container."""

    structure: str = "range2d"
    debug: bool = False
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    query: QueryConfig = field(default_factory=QueryConfig)
    viewer: ViewerConfig = field(default_factory=ViewerConfig)
    colors: ColorsConfig = field(default_factory=ColorsConfig)

    @classmethod
    def get_default_config_path(cls) -> Path:
        """Get the default configuration file path."""
        xdg_config = os.environ.get('XDG_CONFIG_HOME', os.path.expanduser('~/.config'))
        return Path(xdg_config) / 'layered-range-trees' / 'range-trees.toml'

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from a TOML file.

        An explicitly given path must exist; when the default file is missing
        the built-in defaults are used.
        """
        if config_path is None:
            config_path = cls.get_default_config_path()
            if not config_path.exists():
                return cls()
        elif not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'rb') as f:
            data = tomllib.load(f)
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        # Parse General section
        general = data.get('General', {})
        structure = general.get('structure', cls.structure)
        if structure not in STRUCTURES:
            raise ValueError(f"Unknown structure '{structure}', expected one of {', '.join(STRUCTURES)}")

        # Parse Generator section
        generator_data = data.get('Generator', {})
        generator = GeneratorConfig(
            seed=generator_data.get('seed', GeneratorConfig.seed),
            count=generator_data.get('count', GeneratorConfig.count),
            limit=generator_data.get('limit', GeneratorConfig.limit),
            max_length=generator_data.get('max_length', GeneratorConfig.max_length),
        )

        # Parse Query section
        query_data = data.get('Query', {})
        window = tuple(query_data.get('window', QueryConfig.window))
        line = tuple(query_data.get('line', QueryConfig.line))
        if len(window) != 4:
            raise ValueError(f"Query.window needs 4 numbers, got {len(window)}")
        if len(line) != 3:
            raise ValueError(f"Query.line needs 3 numbers, got {len(line)}")
        query = QueryConfig(window=window, line=line)

        # Parse Viewer section
        viewer_data = data.get('Viewer', {})
        viewer = ViewerConfig(
            width=viewer_data.get('width', ViewerConfig.width),
            height=viewer_data.get('height', ViewerConfig.height),
            margin=viewer_data.get('margin', ViewerConfig.margin),
            point_radius=viewer_data.get('point_radius', ViewerConfig.point_radius),
            window_title=viewer_data.get('window_title', ViewerConfig.window_title),
        )

        # Parse Colors section
        colors_data = data.get('Colors', {})
        colors = ColorsConfig(
            background=colors_data.get('background', ColorsConfig.background),
            grid=colors_data.get('grid', ColorsConfig.grid),
            item=colors_data.get('item', ColorsConfig.item),
            reported=colors_data.get('reported', ColorsConfig.reported),
            query=colors_data.get('query', ColorsConfig.query),
        )

        return cls(
            structure=structure,
            debug=general.get('debug', False),
            generator=generator,
            query=query,
            viewer=viewer,
            colors=colors,
        )
