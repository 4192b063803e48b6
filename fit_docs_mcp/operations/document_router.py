"""Document routing service

Maps an operation name plus enumerated arguments to exactly one file
beneath the document root and returns its text.
"""
import asyncio
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from fit_docs_mcp.operations.catalog import OPERATIONS, OPERATIONS_BY_NAME, OperationSpec
from fit_docs_mcp.value_objects import DocumentResult

logger = logging.getLogger(__name__)


class InvalidRequestError(ValueError):
    """Operation name or argument outside the closed set"""
    pass


class DocumentRouter:
    """Resolves document operations against a fixed root

    Stateless apart from the root, so one instance serves every request.
    Path segments come only from enumeration values; request text never
    reaches the filesystem.
    """

    def __init__(self, docs_root: Path):
        self.docs_root = Path(docs_root)

    def list_operations(self) -> List[OperationSpec]:
        """Static catalog of supported operations (no I/O)"""
        return list(OPERATIONS)

    async def call(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> DocumentResult:
        """Resolve and read one document; never raises for bad input or I/O"""
        try:
            path = self.resolve(name, arguments or {})
        except InvalidRequestError as e:
            logger.warning(f"Rejected {name!r}: {e}")
            return DocumentResult.failure(str(e))
        return await asyncio.to_thread(self.read, path)

    def resolve(self, name: str, arguments: Mapping[str, Any]) -> Path:
        """Build the single candidate path for an operation

        Raises:
            InvalidRequestError: unknown operation, missing or illegal argument
        """
        spec = self._get_spec(name)
        values = self._validate_arguments(spec, arguments)
        segments = [segment.format(**values) for segment in spec.template]
        path = self.docs_root.joinpath(*segments)
        logger.debug(f"{name} -> {path}")
        return path

    def read(self, path: Path) -> DocumentResult:
        """Read a whole file as UTF-8 text"""
        try:
            return DocumentResult.success(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {path}: {e}")
            return DocumentResult.failure(self._describe(path, e))

    @staticmethod
    def _get_spec(name: str) -> OperationSpec:
        """Look up operation by name"""
        if not isinstance(name, str):
            raise InvalidRequestError(f"Unknown tool: {name!r}")
        spec = OPERATIONS_BY_NAME.get(name)
        if spec is None:
            raise InvalidRequestError(f"Unknown tool: {name}")
        return spec

    @staticmethod
    def _validate_arguments(spec: OperationSpec, arguments: Mapping[str, Any]) -> Dict[str, str]:
        """Check every required argument against its enumeration"""
        if not isinstance(arguments, Mapping):
            raise InvalidRequestError(f"Arguments for {spec.name} must be an object")

        values = {}
        for arg_name, enum_cls in spec.arguments:
            if arg_name not in arguments:
                raise InvalidRequestError(f"Missing required argument '{arg_name}' for {spec.name}")
            raw = arguments[arg_name]
            try:
                member = enum_cls(raw) if isinstance(raw, str) else None
            except ValueError:
                member = None
            if member is None:
                legal = ", ".join(m.value for m in enum_cls)
                raise InvalidRequestError(
                    f"Invalid value {raw!r} for '{arg_name}' (expected one of: {legal})"
                )
            values[arg_name] = member.value
        return values

    @staticmethod
    def _describe(path: Path, error: Exception) -> str:
        """Human-readable read failure"""
        if isinstance(error, FileNotFoundError):
            return f"Error: File not found: {path}"
        if isinstance(error, IsADirectoryError):
            return f"Error: Not a regular file: {path}"
        if isinstance(error, PermissionError):
            return f"Error: Permission denied: {path}"
        if isinstance(error, UnicodeDecodeError):
            return f"Error: File is not valid UTF-8 text: {path} ({error.reason})"
        return f"Error: {error}"
