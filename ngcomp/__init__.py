"""Extract selected template markup into a new Angular component."""

from .models import ComponentName, GeneratedArtifactSet, SourceDocument
from .naming import classify, dasherize
from .orchestrator import ExtractionOrchestrator
from .rewriter import RewriteOptions, prepare_component_code

__version__ = "0.1.0"

__all__ = [
    "ComponentName",
    "ExtractionOrchestrator",
    "GeneratedArtifactSet",
    "RewriteOptions",
    "SourceDocument",
    "classify",
    "dasherize",
    "prepare_component_code",
]
