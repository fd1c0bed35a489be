"""Custom exceptions for the rendering context."""

from pathlib import Path
from typing import Optional


class RenderError(Exception):
    """
    Exception raised when building an output document fails.

    Attributes:
        message: Error description
        output_path: Where the document was being written, if anywhere
        original_error: The underlying exception
    """

    def __init__(
        self,
        message: str,
        output_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.output_path = output_path
        self.original_error = original_error

        parts = [message]

        if output_path:
            parts.append(f"\nOutput: {output_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))
