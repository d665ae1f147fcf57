# tests/conftest.py
import sys
from pathlib import Path

import pytest
from lxml import etree

# Ensure the repo root is in sys.path for imports
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from oval_updater.logging import logger  # noqa: E402

OPENSSL_OBJECT = '<dpkginfo_object id="obj1"><name>openssl</name></dpkginfo_object>'
OPENSSL_STATE = '<dpkginfo_state id="ste1"><evr operation="less than">{version}</evr></dpkginfo_state>'
OPENSSL_TEST = (
    '<dpkginfo_test id="tst1" check="at least one">'
    '<object object_ref="obj1"/><state state_ref="ste1"/>'
    '</dpkginfo_test>'
)


def vulnerability(criteria, cve="CVE-2020-0001", title=None, description=None, cls="vulnerability"):
    meta = []
    if title is not None:
        meta.append(f"<title>{title}</title>")
    if cve is not None:
        meta.append(f'<reference source="CVE" ref_id="{cve}"/>')
    if description is not None:
        meta.append(f"<description>{description}</description>")
    return (
        f'<definition class="{cls}" id="oval:def:{cve or title}">'
        f'<metadata>{"".join(meta)}</metadata>'
        f'{criteria}'
        '</definition>'
    )


def oval_document(definitions="", objects="", tests="", states="", omit=()):
    """Assemble an un-namespaced oval_definitions document."""
    parts = ["<oval_definitions>"]
    for name, body in (("definitions", definitions), ("tests", tests),
                       ("objects", objects), ("states", states)):
        if name in omit:
            continue
        parts.append(f"\n  <{name}>\n    {body}\n  </{name}>")
    parts.append("\n</oval_definitions>\n")
    return "".join(parts)


def openssl_document(version="1.0.0", criteria='<criteria><criterion test_ref="tst1"/></criteria>', **kwargs):
    return oval_document(
        definitions=vulnerability(criteria),
        objects=OPENSSL_OBJECT,
        tests=OPENSSL_TEST,
        states=OPENSSL_STATE.format(version=version),
        **kwargs,
    )


def section(xml):
    return etree.fromstring(xml)


@pytest.fixture
def write_oval(tmp_path):
    """Write an OVAL document to a temp file and return its path."""
    def _write(text, name="oval.xml"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def log_records():
    """Capture loguru output as (level, message) tuples."""
    records = []

    def sink(message):
        record = message.record
        records.append((record["level"].name, record["message"]))

    handler_id = logger.add(sink, level="TRACE", format="{message}")
    yield records
    logger.remove(handler_id)
