"""Extract package version criteria from OVAL vulnerability definitions."""

__version__ = "0.1.0"

from .errors import MissingSectionsError, OvalError, OvalParseError, OvalStructureError
from .index import ReferenceIndex, build_index
from .models import Criterion, Definition
from .criteria import resolve_criterion, walk_criteria
from .updater import extract_definitions, process_oval_file

__all__ = [
    "Criterion",
    "Definition",
    "MissingSectionsError",
    "OvalError",
    "OvalParseError",
    "OvalStructureError",
    "ReferenceIndex",
    "build_index",
    "extract_definitions",
    "process_oval_file",
    "resolve_criterion",
    "walk_criteria",
]
