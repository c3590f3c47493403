"""Configuration for the Redex CLI and HTTP service."""

from dataclasses import dataclass


@dataclass
class ServiceConfig:
    """Settings shared by the command line and HTTP front ends."""
    max_expression_length: int = 10_000
    log_level: str = "WARNING"
    host: str = "0.0.0.0"
    port: int = 8000


DEFAULT_CONFIG = ServiceConfig()
