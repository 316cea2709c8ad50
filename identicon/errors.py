"""Exception types.

Two families are kept apart:

* :class:`StagePreconditionError` signals misuse of the pure pipeline (a stage
  called before its predecessor). It is a ``ValueError`` and is never caught
  by the library.
* :class:`IdenticonError` and its subclasses wrap environmental failures of
  the rendering / persistence wrappers. The original exception is kept as
  ``__cause__``.
"""


class StagePreconditionError(ValueError):
    """A stage received a descriptor that is not at its predecessor stage."""


class IdenticonError(Exception):
    """Base class for failures outside the pure pipeline."""


class RenderError(IdenticonError):
    """Drawing or encoding the bitmap failed."""


class PersistError(IdenticonError):
    """Writing the encoded image to storage failed."""
