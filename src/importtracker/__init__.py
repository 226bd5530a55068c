"""
importtracker: incremental import-dependency tracking for stylesheet builds.
"""

from importtracker.core.extraction.parser import DependencyParser
from importtracker.core.pipeline.engine import process_file, process_stream
from importtracker.core.tracker.tracker import DependencyTracker
from importtracker.domain.errors import ConfigurationError, ImportTrackerError, InvalidArgumentError
from importtracker.domain.models import PipelineOptions, SourceFile
from importtracker.domain.parser_config import ParserConfig

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "DependencyParser",
    "DependencyTracker",
    "ImportTrackerError",
    "InvalidArgumentError",
    "ParserConfig",
    "PipelineOptions",
    "SourceFile",
    "process_file",
    "process_stream",
]
