"""Custom exceptions for the content context."""

from typing import Optional


class ContentDefinitionError(ValueError):
    """
    Exception raised when the content definition does not match the entry shapes.

    Content is fixed at load time, so any shape mismatch is a definition defect
    and stops the build rather than being recovered from during rendering.

    Attributes:
        message: Error description
        collection: Collection being loaded (e.g., 'careers', 'profile'), or the
            content file path for YAML errors
        index: Position of the offending record within the collection
        field: Name of the missing or malformed field
    """

    def __init__(
        self,
        message: str,
        collection: Optional[str] = None,
        index: Optional[int] = None,
        field: Optional[str] = None,
    ):
        self.message = message
        self.collection = collection
        self.index = index
        self.field = field

        location = collection or ""
        if index is not None:
            location += f"[{index}]"
        if field:
            location += f".{field}" if location else field

        super().__init__(f"{location}: {message}" if location else message)
