# models.py
"""
Data structures produced while extracting OVAL vulnerability definitions.
A Definition owns its Criterion entries; both hold plain strings copied out
of the parsed document so they outlive it.
"""

from dataclasses import asdict, dataclass, field
from typing import List, Optional

from .logging import SUMMARY, VERBOSE, logger

NULL_VERSION = "0:0"
DESCRIPTION_WIDTH = 150


def truncate(text: str, width: int = DESCRIPTION_WIDTH) -> str:
    """Cut text to width characters, marking the cut with '...'."""
    if len(text) > width:
        return text[:width] + "..."
    return text


@dataclass
class Criterion:
    """One criterion leaf joined against the test, object and state tables."""
    test_ref: str
    state_ref: Optional[str] = None
    object_ref: Optional[str] = None
    object_name: Optional[str] = None
    operation: Optional[str] = None
    version: Optional[str] = None
    null_version: str = field(default=NULL_VERSION, repr=False, compare=False)

    @property
    def complete(self) -> bool:
        fields = (self.test_ref, self.state_ref, self.object_ref,
                  self.object_name, self.operation, self.version)
        return all(f is not None for f in fields) and self.version != self.null_version

    def to_dict(self):
        data = asdict(self)
        del data["null_version"]
        data["complete"] = self.complete
        return data

    def render(self):
        if self.complete:
            logger.log(SUMMARY, f"  {self.test_ref}")
            logger.log(SUMMARY, f"    {self.object_ref}")
            logger.log(SUMMARY, f"      {self.object_name}")
            logger.log(SUMMARY, f"    {self.state_ref}")
            logger.log(SUMMARY, f"      {self.operation} '{self.version}'")
            return

        # Only the parts that resolved
        logger.log(VERBOSE, f"  {self.test_ref}")
        if self.object_ref is not None:
            logger.log(VERBOSE, f"    {self.object_ref}")
            if self.object_name is not None:
                logger.log(VERBOSE, f"      {self.object_name}")
        if self.state_ref is not None:
            logger.log(VERBOSE, f"    {self.state_ref}")
            if self.version is not None:
                logger.log(VERBOSE, f"      {self.operation} '{self.version}'")


@dataclass
class Definition:
    """A class="vulnerability" definition and its flattened criteria."""
    identifier: Optional[str] = None
    description: Optional[str] = None
    criteria: List[Criterion] = field(default_factory=list)
    complete: bool = False

    def add_criterion(self, criterion: Criterion) -> None:
        self.criteria.append(criterion)
        if criterion.complete:
            self.complete = True

    def to_dict(self):
        return {
            "identifier": self.identifier,
            "description": self.description,
            "complete": self.complete,
            "criteria": [c.to_dict() for c in self.criteria],
        }

    def render(self, width: int = DESCRIPTION_WIDTH) -> None:
        """Log the definition; complete ones at the summary tier."""
        level = SUMMARY if self.complete else VERBOSE
        if self.identifier is not None:
            logger.log(level, self.identifier)
        if self.description is not None:
            logger.log(level, f"  {truncate(self.description, width)}")
        for criterion in self.criteria:
            criterion.render()
