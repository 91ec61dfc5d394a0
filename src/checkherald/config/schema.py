"""Pydantic models for checkherald configuration.

Every field has a working default, so an empty (or absent) config file yields
a usable configuration pointing at local Elasticsearch and a scratch sandbox.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from checkherald._constants import (
    DEFAULT_QUERY_DIR,
    DEFAULT_QUERY_PERIOD,
    DEFAULT_SANDBOX_DIR,
    HISTORICAL_WINDOW,
    MAX_RENDER_DEPTH,
)

# =============================================================================
# Enums
# =============================================================================


class StateType(str, Enum):
    """Kind of object the alert was raised for.

    Selects which ``NAGIOS_<STATE>OUTPUT`` variable carries the check output.
    """

    SERVICE = "SERVICE"
    HOST = "HOST"


# =============================================================================
# Collaborator Configuration
# =============================================================================


class GraphiteConfig(BaseModel):
    """Graph download configuration."""

    sandbox_dir: str = DEFAULT_SANDBOX_DIR
    historical_window: str = HISTORICAL_WINDOW
    timeout: float = 30.0


class ElasticsearchConfig(BaseModel):
    """Search backend configuration."""

    url: str = Field(
        default="http://localhost:9200",
        description="Elasticsearch base URL (e.g., http://es.example.com:9200)",
    )
    index: str = "logstash-*"
    timestamp_field: str = "@timestamp"
    size: int = 10
    timeout: float = 30.0
    query_dir: str = DEFAULT_QUERY_DIR
    default_period: str = DEFAULT_QUERY_PERIOD

    @field_validator("url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class VariablesConfig(BaseModel):
    """Names of the alerting-system variables the formatter reads."""

    state_type: StateType = StateType.SERVICE
    check_command: str = "NAGIOS_SERVICECHECKCOMMAND"
    queries: str = "NAGIOS_ELASTICSEARCH_QUERIES"
    output_prefix: str = "NAGIOS_"
    output_suffix: str = "OUTPUT"

    def output_variable(self) -> str:
        """Name of the variable holding the check output, e.g. NAGIOS_SERVICEOUTPUT."""
        return f"{self.output_prefix}{self.state_type.value}{self.output_suffix}"


class RenderConfig(BaseModel):
    """Table rendering configuration."""

    max_depth: int = Field(default=MAX_RENDER_DEPTH, ge=1)


# =============================================================================
# Root Configuration
# =============================================================================


class HeraldConfig(BaseModel):
    """Root configuration for checkherald."""

    model_config = ConfigDict(extra="forbid")

    graphite: GraphiteConfig = Field(default_factory=GraphiteConfig)
    elasticsearch: ElasticsearchConfig = Field(default_factory=ElasticsearchConfig)
    variables: VariablesConfig = Field(default_factory=VariablesConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)

    # Number of search queries run concurrently; 1 keeps execution sequential
    max_workers: int = Field(default=1, ge=1)
