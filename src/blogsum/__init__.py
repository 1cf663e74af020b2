"""
blogsum - blog summarization with English and Urdu output.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import Config
from .container import DependencyContainer
from .pipeline import BlogPipeline, PipelineResult

__all__ = ["__version__", "BlogPipeline", "Config", "DependencyContainer", "PipelineResult"]
