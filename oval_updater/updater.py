"""Walk an OVAL definitions file and report what each vulnerability definition depends on."""
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from lxml import etree

from .config import DEFAULTS, UpdaterConfig
from .criteria import walk_criteria
from .errors import MissingSectionsError, OvalError, OvalParseError, OvalStructureError
from .index import ReferenceIndex, build_index, elements, localname, text_content
from .logging import logger
from .models import Definition

ROOT_TAG = "oval_definitions"
# Order in which missing sections are reported
SECTIONS = ("definitions", "objects", "tests", "states")


@dataclass
class ExtractionResult:
    counts: Dict[str, int] = field(default_factory=dict)
    definitions: List[Definition] = field(default_factory=list)
    definition_count: int = 0
    complete_count: int = 0


def load_document(path):
    """Parse path and return its root element."""
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        tree = etree.parse(str(path), parser)
    except (OSError, etree.XMLSyntaxError) as e:
        raise OvalParseError(path, e) from e
    root = tree.getroot()
    if root is None:
        raise OvalStructureError("empty OVAL document")
    return root


def locate_sections(root):
    """Find the four required top-level sections by tag."""
    if localname(root) != ROOT_TAG:
        raise OvalStructureError(f"no {ROOT_TAG} element found")

    sections = {}
    for child in elements(root):
        tag = localname(child)
        if tag in SECTIONS:
            sections[tag] = child

    missing = [name for name in SECTIONS if name not in sections]
    if missing:
        raise MissingSectionsError(missing)
    return sections


def _read_metadata(definition, metadata, found):
    # Repeated children overwrite earlier ones
    for child in elements(metadata):
        tag = localname(child)
        if tag == "reference":
            found["cve_ref"] = child.get("ref_id")
        elif tag == "title":
            found["title"] = text_content(child)
        elif tag == "description":
            definition.description = text_content(child)


def build_definition(node, index, config=DEFAULTS):
    """Collect metadata and resolved criteria of one <definition> element."""
    definition = Definition()
    meta = {"cve_ref": None, "title": None}

    for child in elements(node):
        tag = localname(child)
        if tag == "metadata":
            _read_metadata(definition, child, meta)
            definition.identifier = meta["cve_ref"] if meta["cve_ref"] is not None else meta["title"]
        elif tag == "criteria":
            walk_criteria(definition, child, index, config.max_depth, config.null_version)

    return definition


def iter_definitions(definitions, index, config=DEFAULTS) -> Iterator[Definition]:
    """Yield a Definition for every class="vulnerability" definition, in document order."""
    for node in elements(definitions):
        if localname(node) != "definition" or node.get("class") != "vulnerability":
            continue
        yield build_definition(node, index, config)


def _open(path):
    root = load_document(path)
    sections = locate_sections(root)
    index = build_index(sections["tests"], sections["objects"], sections["states"])
    return sections, index


def _log_counts(index: ReferenceIndex):
    for name, count in index.counts().items():
        logger.info(f"{count} {name}")


def extract_definitions(path, config=None):
    """Parse path and return every vulnerability definition with run counters.

    Raises OvalError subclasses for unreadable or structurally invalid
    documents.
    """
    config = config or DEFAULTS
    sections, index = _open(path)

    result = ExtractionResult(counts=index.counts())
    for definition in iter_definitions(sections["definitions"], index, config):
        result.definitions.append(definition)
        result.definition_count += 1
        if definition.complete:
            result.complete_count += 1
    return result


def process_oval_file(path, os, uri, config: UpdaterConfig = None):
    """Render the definitions in path to the log; return a process exit status.

    os and uri are accepted for the package fetcher and not used here.
    """
    config = config or DEFAULTS
    try:
        sections, index = _open(path)
    except MissingSectionsError as e:
        for message in e.messages():
            logger.error(f"  {message}")
        return 1
    except OvalError as e:
        logger.error(f"  {e}")
        return 1

    _log_counts(index)

    definition_count = complete_count = 0
    for definition in iter_definitions(sections["definitions"], index, config):
        definition_count += 1
        if definition.complete:
            complete_count += 1
        definition.render(config.description_width)

    logger.info(f"{complete_count} of {definition_count} definitions are complete")
    return 0
