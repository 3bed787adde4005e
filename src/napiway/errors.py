"""Exception taxonomy shared by the validator, IR builder and emitters."""


class NapiwayError(Exception):
    """Base class for every error the tool reports to the user."""


class ConfigError(NapiwayError):
    """The config file could not be read, parsed or is missing a target field."""


class SpecValidationError(ConfigError):
    """A structural or semantic violation in the API specification.

    ``path`` holds the location segments from the outermost entity inwards,
    e.g. ``["endpoint GetUser", "response 200", "body", "property Name"]``.
    """

    def __init__(self, reason: str, path: list[str] | None = None):
        self.reason = reason
        self.path = list(path or [])
        super().__init__(str(self))

    def __str__(self) -> str:
        return ": ".join(self.path + [self.reason])

    def wrap(self, segment: str) -> "SpecValidationError":
        """Return a copy of this error with ``segment`` prepended to the path."""
        return SpecValidationError(self.reason, [segment] + self.path)


class UnsupportedTypeError(NapiwayError):
    """A type tag reached the resolver that validation should have rejected."""

    def __init__(self, kind: str, tag: object):
        self.kind = kind
        self.tag = tag
        super().__init__(f"unsupported {kind} type: {tag}")


class GenerationError(NapiwayError):
    """An emitter failed to write its output."""
