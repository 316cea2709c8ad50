"""Stage precondition helpers."""

from identicon.errors import StagePreconditionError
from identicon.image import ImageDescriptor
from identicon.types import Stage


def require_stage(image: ImageDescriptor, expected: Stage, operation: str) -> None:
    """Raise :class:`StagePreconditionError` unless ``image`` is at ``expected``.

    Arguments:
        image: Descriptor handed to a stage.
        expected: Stage the descriptor must currently be at.
        operation: Name of the calling stage, used in the error message.
    """
    if image.stage != expected:
        raise StagePreconditionError(
            f"{operation} requires a {expected} descriptor, got {image.stage}"
        )
