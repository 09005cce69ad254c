"""Configuration management for catalog reflection."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional
from pathlib import Path

import yaml

VARIANTS = ("pgdg", "redshift")


@dataclass
class DataSourceConfig:
    """Connection settings for the source database."""

    name: str = "source"
    host: str = "localhost"
    port: int = 5432
    database: str = "postgres"
    user: str = "postgres"
    password: Optional[str] = None
    options: Dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "database": self.database,
            "user": self.user,
            "password": self.password,
            "options": dict(self.options),
        }


@dataclass
class SelectionConfig:
    """Which objects to discover."""

    table: Optional[str] = None
    including: Optional[Dict[str, List[str]]] = None
    excluding: Optional[Dict[str, List[str]]] = None
    with_views: bool = False
    variant: str = "pgdg"

    def __post_init__(self):
        if self.table is not None and self.including:
            raise ValueError("Selection accepts either 'table' or 'including', not both")
        if self.variant not in VARIANTS:
            raise ValueError(f"Unsupported source variant: {self.variant}")
        for label, expression in (("including", self.including), ("excluding", self.excluding)):
            if expression is not None:
                _check_expression(label, expression)


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    structured: bool = False
    log_file: Optional[str] = None


@dataclass
class Config:
    """Main configuration class."""

    datasource: DataSourceConfig = field(default_factory=DataSourceConfig)
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _check_expression(label: str, expression: Any) -> None:
    if not isinstance(expression, dict):
        raise ValueError(f"'{label}' must map schema names to lists of patterns")
    for schema_name, patterns in expression.items():
        if not isinstance(patterns, list) or not all(isinstance(p, str) for p in patterns):
            raise ValueError(f"'{label}.{schema_name}' must be a list of patterns")


def _load_section(data: Dict[str, Any], section: str, config_class):
    # An empty YAML section parses as None.
    values = data.get(section) or {}
    if not isinstance(values, dict):
        raise ValueError(f"'{section}' must be a mapping")
    known = {f.name for f in fields(config_class)}
    unknown = [str(key) for key in values if key not in known]
    if unknown:
        raise ValueError(f"Unknown key(s) in '{section}': {', '.join(unknown)}")
    return config_class(**values)


def load_config(config_path: str) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Parsed configuration

    Example YAML format:
        datasource:
          name: shop
          host: localhost
          port: 5432
          database: shop
          user: reader
          password: secret
          options:
            sslmode: prefer

        selection:
          including:
            public: ["^orders$", "^customers$"]
          excluding:
            public: ["^tmp_"]
          with_views: false
          variant: pgdg

        logging:
          level: INFO
          structured: false
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping")

    datasource = _load_section(data, "datasource", DataSourceConfig)
    selection = _load_section(data, "selection", SelectionConfig)
    logging_config = _load_section(data, "logging", LoggingConfig)

    return Config(datasource=datasource, selection=selection, logging=logging_config)
