"""Exception types raised by the shape engine."""


class ShapeLibError(Exception):
    """Base class for all shape engine errors."""


class ColorParseError(ShapeLibError, ValueError):
    """A color string could not be parsed.

    Callers that render can catch this and fall back to a safe solid
    color instead of pushing NaN channels through the pipeline.
    """

    def __init__(self, text):
        super().__init__(f"Cannot parse color: {text!r}")
        self.text = text


class DocumentError(ShapeLibError):
    """A persisted shape document was rejected.

    Attributes:
        kind: 'ParseError' when the text is not JSON, 'SchemaError' when the
            JSON does not describe a shape document.
    """
    kind = 'DocumentError'

    def to_dict(self) -> dict:
        return {'kind': self.kind, 'message': str(self)}


class DocumentParseError(DocumentError):
    kind = 'ParseError'


class DocumentSchemaError(DocumentError):
    kind = 'SchemaError'


class ExportError(ShapeLibError):
    """An export was requested with parameters the format cannot encode."""
