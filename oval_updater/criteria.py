"""Resolution of <criterion> leaves and the recursive walk over <criteria> groups."""
from .index import elements, localname, text_content
from .logging import VERBOSE, logger
from .models import NULL_VERSION, Criterion


def _resolve_state(index, state_ref):
    """(operation, version) of the last <evr> in the referenced state, or None."""
    state = index.states.get(state_ref)
    if state is None:
        return None
    found = None
    for child in elements(state):
        if localname(child) == "evr":
            found = (child.get("operation"), text_content(child))
    return found


def resolve_criterion(index, test_ref, null_version=NULL_VERSION):
    """Join a test reference against the index.

    Never raises: references that do not resolve leave the corresponding
    fields unset, which makes the criterion incomplete.
    """
    criterion = Criterion(test_ref=test_ref, null_version=null_version)

    test = index.tests.get(test_ref)
    if test is None:
        return criterion

    for child in elements(test):
        tag = localname(child)
        if tag == "object":
            criterion.object_ref = child.get("object_ref")
            criterion.object_name = index.objects.get(criterion.object_ref)
        elif tag == "state":
            criterion.state_ref = child.get("state_ref")
            evr = _resolve_state(index, criterion.state_ref)
            if evr is not None:
                criterion.operation, criterion.version = evr

    return criterion


def walk_criteria(definition, criteria_node, index, max_depth=64, null_version=NULL_VERSION, depth=0):
    """Recursively parses a <criteria> element into definition's criterion list.

    Operators on nested groups are not evaluated; leaves are appended in
    document order.
    """
    if depth >= max_depth:
        logger.warning(
            f"criteria of {definition.identifier or 'unnamed definition'} "
            f"nested deeper than {max_depth} levels, skipping"
        )
        return

    for child in elements(criteria_node):
        tag = localname(child)
        if tag == "criterion":
            test_ref = child.get("test_ref")
            if not test_ref:
                logger.log(VERBOSE, "  criterion without test_ref ignored")
                continue
            definition.add_criterion(resolve_criterion(index, test_ref, null_version))
        elif tag == "criteria":
            walk_criteria(definition, child, index, max_depth, null_version, depth + 1)
