"""Library configuration."""

from .settings import Settings, cfg, configure_logging

__all__ = ["Settings", "cfg", "configure_logging"]
