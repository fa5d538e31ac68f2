"""Filter pipeline interfaces and runner."""

from teammention.pipeline.interfaces import HTMLFilterInterface, MentionResolverInterface
from teammention.pipeline.runner import HTMLPipeline, PipelineResult

__all__ = [
    "HTMLFilterInterface",
    "MentionResolverInterface",
    "HTMLPipeline",
    "PipelineResult",
]
