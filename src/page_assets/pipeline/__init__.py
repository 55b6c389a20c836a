"""Pipeline wiring for page asset processing."""

from .orchestrator import TRANSFORMERS, Orchestrator, rendered_path

__all__ = ["Orchestrator", "TRANSFORMERS", "rendered_path"]
