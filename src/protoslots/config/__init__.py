"""Configuration module using Pydantic Settings.

Usage:
    from protoslots.config import EvaluatorSettings

    settings = EvaluatorSettings(max_depth=500)
"""

from protoslots.config.settings import EvaluatorSettings

__all__ = [
    "EvaluatorSettings",
]
