"""Configuration Management with Pydantic.

This module implements the configuration models for the demonstration CLI:
the sample graph and sources fed to the reachability query, the initial
linked list contents, and logging settings. Configuration is read from YAML
with environment variable overrides.
"""

import os
import threading
from pathlib import Path

import structlog
import yaml
from pydantic import BaseModel, Field, model_validator

logger = structlog.get_logger(__name__)

# Edges of the 13-vertex sample digraph used by the demo
SAMPLE_EDGES: list[tuple[int, int]] = [
    (4, 2),
    (2, 3),
    (3, 2),
    (6, 0),
    (0, 1),
    (2, 0),
    (11, 12),
    (12, 9),
    (9, 10),
    (9, 11),
    (8, 9),
    (10, 12),
    (11, 4),
    (4, 3),
    (3, 5),
    (7, 8),
    (8, 7),
    (5, 4),
    (0, 5),
    (6, 4),
    (6, 9),
    (7, 6),
]
SAMPLE_VERTEX_COUNT = 13
SAMPLE_SOURCES = [1, 2, 6]
TRUTHY_VALUES = ("true", "1", "yes")


class GraphConfig(BaseModel):
    """Digraph and source vertices for the reachability demo.

    Attributes:
        vertex_count: Number of vertices in the graph
        edges: Directed edges as ``[from, to]`` pairs
        sources: Source vertices for the reachability query
    """

    vertex_count: int = Field(
        default=SAMPLE_VERTEX_COUNT,
        ge=0,
        description="Number of vertices",
    )
    edges: list[tuple[int, int]] = Field(
        default_factory=lambda: list(SAMPLE_EDGES),
        description="Directed edges as [from, to] pairs",
    )
    sources: list[int] = Field(
        default_factory=lambda: list(SAMPLE_SOURCES),
        description="Source vertices",
    )

    @model_validator(mode="after")
    def validate_vertices(self) -> "GraphConfig":
        """Validate that every edge endpoint and source is a vertex.

        Raises:
            ValueError: If any vertex falls outside ``[0, vertex_count)``
        """
        for v, w in self.edges:
            for endpoint in (v, w):
                if not 0 <= endpoint < self.vertex_count:
                    msg = f"Edge {v}->{w} references vertex {endpoint} outside graph"
                    raise ValueError(msg)
        for s in self.sources:
            if not 0 <= s < self.vertex_count:
                msg = f"Source vertex {s} outside graph of {self.vertex_count} vertices"
                raise ValueError(msg)
        return self


class LinkedListConfig(BaseModel):
    """Initial contents of the linked list demo.

    Attributes:
        values: Values appended to the list in order
    """

    values: list[int] = Field(
        default_factory=lambda: [1, 2, 3],
        description="Initial list values",
    )


class AppConfig(BaseModel):
    """Top-level configuration combining all settings.

    Attributes:
        graph: Reachability demo settings
        linked_list: Linked list demo settings
        logging_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Render logs as JSON instead of console text
    """

    graph: GraphConfig = Field(default_factory=GraphConfig)
    linked_list: LinkedListConfig = Field(default_factory=LinkedListConfig)
    logging_level: str = Field(
        default="INFO",
        description="Logging level",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
    )
    json_logs: bool = Field(
        default=False,
        description="Render logs as JSON",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AppConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed and validated AppConfig instance

        Raises:
            FileNotFoundError: If configuration file doesn't exist
            ValueError: If the file is empty, malformed or invalid
        """
        config_path = Path(path)

        if not config_path.exists():
            msg = f"Configuration file not found: {config_path}"
            raise FileNotFoundError(msg)

        logger.info("loading_configuration", path=str(config_path))

        try:
            with config_path.open() as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.exception("yaml_parse_error", error=str(e), path=str(config_path))
            msg = f"Invalid YAML in configuration file: {e}"
            raise ValueError(msg) from e

        if not config_data:
            msg = "Configuration file is empty"
            raise ValueError(msg)

        if not isinstance(config_data, dict):
            msg = "Configuration file must contain a mapping"
            raise ValueError(msg)

        config_data = cls._apply_env_overrides(config_data)
        config = cls(**config_data)

        logger.info(
            "configuration_loaded",
            vertex_count=config.graph.vertex_count,
            edge_count=len(config.graph.edges),
            logging_level=config.logging_level,
        )
        return config

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build the default configuration with environment overrides applied."""
        return cls(**cls._apply_env_overrides({}))

    @classmethod
    def _apply_env_overrides(cls, config_data: dict) -> dict:
        """Apply environment variable overrides to configuration.

        Environment variables follow the pattern: REACHLIST_<SECTION>_<KEY>

        Args:
            config_data: Base configuration dictionary from file

        Returns:
            Configuration dictionary with environment overrides applied
        """
        env_overrides = {
            ("logging_level",): "REACHLIST_LOGGING_LEVEL",
            ("json_logs",): "REACHLIST_JSON_LOGS",
            ("graph", "sources"): "REACHLIST_GRAPH_SOURCES",
        }

        for path, env_var in env_overrides.items():
            value = os.environ.get(env_var)
            if value is None:
                continue

            current = config_data
            for key in path[:-1]:
                current = current.setdefault(key, {})
                if not isinstance(current, dict):
                    msg = f"Section {key!r} must be a mapping"
                    raise ValueError(msg)

            if env_var.endswith("_SOURCES"):
                current[path[-1]] = [int(part) for part in value.split(",") if part.strip()]
            elif env_var.endswith("_JSON_LOGS"):
                current[path[-1]] = value.lower() in TRUTHY_VALUES
            else:
                current[path[-1]] = value.upper()

            logger.debug(
                "env_override_applied",
                env_var=env_var,
                config_path=".".join(path),
            )

        return config_data


class ConfigManager:
    """Configuration manager using singleton pattern."""

    _instance: AppConfig | None = None
    _init_lock: threading.Lock = threading.Lock()

    @classmethod
    def load_config(cls, config_path: str | Path | None = None) -> AppConfig:
        """Load configuration from file, or fall back to the defaults.

        Args:
            config_path: Path to configuration file. If None, looks for
                config.yaml or config.yml in the current directory and uses
                the built-in sample configuration when neither exists.

        Returns:
            Loaded AppConfig instance

        Raises:
            FileNotFoundError: If an explicit config file is not found
            ValueError: If the config file is invalid
        """
        if config_path is None:
            for default_name in ["config.yaml", "config.yml"]:
                default_path = Path(default_name)
                if default_path.exists():
                    config_path = default_path
                    break
            else:
                logger.debug("using_default_configuration")
                return AppConfig.from_env()

        return AppConfig.from_yaml(config_path)

    @classmethod
    def get_config(
        cls,
        config_path: str | Path | None = None,
        reload: bool = False,
    ) -> AppConfig:
        """Get configuration instance (singleton pattern).

        Uses double-checked locking so concurrent first calls load once.

        Args:
            config_path: Path to configuration file. Only used on first call or when reload=True.
            reload: If True, force reload configuration from file.

        Returns:
            AppConfig instance
        """
        if cls._instance is not None and not reload:
            return cls._instance

        with cls._init_lock:
            if cls._instance is None or reload:
                cls._instance = cls.load_config(config_path)

            return cls._instance

    @classmethod
    def reset_config(cls) -> None:
        """Reset the configuration instance."""
        cls._instance = None


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load configuration from file."""
    return ConfigManager.load_config(config_path)


def get_config(config_path: str | Path | None = None, reload: bool = False) -> AppConfig:
    """Get configuration instance (singleton pattern)."""
    return ConfigManager.get_config(config_path, reload)


def reset_config() -> None:
    """Reset the configuration instance."""
    ConfigManager.reset_config()


__all__ = [
    "AppConfig",
    "ConfigManager",
    "GraphConfig",
    "LinkedListConfig",
    "get_config",
    "load_config",
    "reset_config",
]
