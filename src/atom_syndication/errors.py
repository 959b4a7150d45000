"""Exceptions raised while mapping Atom documents."""


class AtomError(Exception):
    """Base class for every error raised by atom_syndication."""


class MissingRequiredField(AtomError):
    """Raised when a required element or attribute is absent."""

    def __init__(self, field: str, entity: str):
        self.field = field
        self.entity = entity
        super().__init__(f"<{entity}> is missing required <{field}>")


class NestedConversionFailure(AtomError):
    """Raised when a nested entity fails its own required-field checks.

    ``path`` locates the failing element below the entity being converted,
    e.g. ``entry[1]/source/link[0]``. ``cause`` is the innermost
    MissingRequiredField.
    """

    def __init__(self, path: str, cause: MissingRequiredField):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")

    @property
    def field(self) -> str:
        return self.cause.field

    @property
    def entity(self) -> str:
        return self.cause.entity


class NoTopLevelElement(AtomError):
    """Raised when a document yields no element at all."""


class MalformedDocument(NoTopLevelElement):
    """Raised when the XML tokenizer rejects the input."""


class UnserializableValue(AtomError):
    """Raised when a model holds text XML cannot represent."""
