"""Lookup tables for the tests, objects and states sections of an OVAL document."""
from dataclasses import dataclass, field

from lxml import etree

# Namespaces of the OVAL definitions documents this tool reads
NAMESPACES = {
    "oval-def": "http://oval.mitre.org/XMLSchema/oval-definitions-5",
    "oval": "http://oval.mitre.org/XMLSchema/oval-common-5",
    "linux-def": "http://oval.mitre.org/XMLSchema/oval-definitions-5#linux",
}

TEST_TAG = "dpkginfo_test"
OBJECT_TAG = "dpkginfo_object"
STATE_TAG = "dpkginfo_state"


def localname(node):
    """Tag of an element without its namespace."""
    return etree.QName(node).localname


def elements(node):
    """Element children of node; comments and processing instructions are skipped."""
    return [child for child in node if isinstance(child.tag, str)]


def text_content(node):
    """All text below node, like libxml's node content."""
    return "".join(node.itertext())


@dataclass
class ReferenceIndex:
    """id -> element tables for one document; read-only once built."""
    tests: dict = field(default_factory=dict)
    objects: dict = field(default_factory=dict)
    states: dict = field(default_factory=dict)

    def counts(self):
        return {"tests": len(self.tests), "objects": len(self.objects), "states": len(self.states)}


def build_table(section, tag, key, value):
    """Map key(node) -> value(node) for every child of section named tag.

    Children with another tag, and children for which key or value yields
    None, are left out. Later duplicates overwrite earlier ones.
    """
    table = {}
    for node in elements(section):
        if localname(node) != tag:
            continue
        node_key = key(node)
        if node_key is None:
            continue
        node_value = value(node)
        if node_value is None:
            continue
        table[node_key] = node_value
    return table


def _node_id(node):
    return node.get("id")


def _object_name(node):
    name = None
    for child in elements(node):
        if localname(child) == "name":
            name = text_content(child)
    return name


def index_tests(section):
    """Pre-processes all <dpkginfo_test> elements into a map for quick lookup."""
    return build_table(section, TEST_TAG, _node_id, lambda node: node)


def index_objects(section):
    """Pre-processes all <dpkginfo_object> elements into id -> package name."""
    return build_table(section, OBJECT_TAG, _node_id, _object_name)


def index_states(section):
    """Pre-processes all <dpkginfo_state> elements into a map for quick lookup."""
    return build_table(section, STATE_TAG, _node_id, lambda node: node)


def build_index(tests, objects, states):
    return ReferenceIndex(
        tests=index_tests(tests),
        objects=index_objects(objects),
        states=index_states(states),
    )
