"""
Value objects for the document server.

Principles:
- Immutable data structures
- Named instead of primitive types (no Primitive Obsession)
"""

from dataclasses import dataclass

ERROR_PREFIX = "Error:"

@dataclass(frozen=True)
class DocumentResult:
    """Outcome of one document request.

    Success and failure travel the same way: a single text payload.
    Failures carry a description starting with "Error:".
    """
    text: str
    is_error: bool = False

    @classmethod
    def success(cls, text: str) -> 'DocumentResult':
        """Create a result carrying file contents."""
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> 'DocumentResult':
        """Create a result carrying an error description."""
        if not message.startswith(ERROR_PREFIX):
            message = f"{ERROR_PREFIX} {message}"
        return cls(text=message, is_error=True)

    @property
    def succeeded(self) -> bool:
        return not self.is_error

    @property
    def failed(self) -> bool:
        return self.is_error

    def __str__(self) -> str:
        return self.text
