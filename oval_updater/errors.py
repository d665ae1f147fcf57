"""Exceptions raised while loading an OVAL definitions document."""


class OvalError(Exception):
    """Base class for document-level failures."""


class OvalParseError(OvalError):
    """The file could not be read or is not well-formed XML."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f'could not be parsed "{path}": {reason}')


class OvalStructureError(OvalError):
    """The document parsed but is not an oval_definitions document."""


class MissingSectionsError(OvalStructureError):
    """One or more of the required top-level sections is absent."""

    def __init__(self, missing):
        self.missing = tuple(missing)
        super().__init__("missing sections: " + ", ".join(self.missing))

    def messages(self):
        return [f"no {name} element found" for name in self.missing]
