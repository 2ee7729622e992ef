"""Errors raised while interpreting note, key and shorthand strings."""


class ChordBuilderError(ValueError):
    pass


class UnknownNoteError(ChordBuilderError):
    """The string is not a note name, or the note cannot be placed in a key."""


class InvalidKeyError(ChordBuilderError):
    """The string does not name one of the 30 major/minor keys."""


class UnknownShorthandError(ChordBuilderError):
    """The chord suffix has no entry in the shorthand table."""
