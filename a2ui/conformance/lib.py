"""JSON Schema cross-validation against the A2UI v0.9 schema documents.

The hand-written validator in `a2ui.validation` gives friendly, field-named
errors. This module checks the same messages against the formal schemas with
format checks enabled. It catches drift between the two, and it enforces the
canonical field names and the v0.9 action shape.

Schemas are loaded from a directory (packaged ``a2ui/schemas/v0_9`` by
default, or ``A2UI_SCHEMA_DIR``) and compiled once per validator instance.
"""

import json
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import SchemaError
from jsonschema.exceptions import ValidationError as JsonSchemaValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

from a2ui.config import EnvVar, get_environment

logger = logging.getLogger(__name__)

PACKAGED_SCHEMA_DIR = Path(__file__).resolve().parent.parent / "schemas" / "v0_9"

COMMON_TYPES = "common_types.json"
STANDARD_CATALOG = "standard_catalog_definition.json"
SERVER_TO_CLIENT = "server_to_client.json"
CLIENT_TO_SERVER = "client_to_server.json"

SCHEMA_FILES = (COMMON_TYPES, STANDARD_CATALOG, SERVER_TO_CLIENT, CLIENT_TO_SERVER)


class SchemaLoadError(RuntimeError):
    """Raised when a schema document is missing, unreadable or invalid."""


@dataclass
class SchemaValidationError:
    """A normalized schema violation.

    Attributes:
        path: JSON Pointer to the offending instance location ("/" for root).
        message: Message from the schema engine.
        keyword: The failing schema keyword (e.g. "required", "oneOf").
        expected: The keyword's value in the schema.
    """

    path: str
    message: str
    keyword: str
    expected: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "message": self.message,
            "keyword": self.keyword,
            "expected": self.expected,
        }


@dataclass
class SchemaValidationResult:
    """Outcome of a schema check."""

    errors: list[SchemaValidationError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "errors": [e.to_dict() for e in self.errors]}


def json_pointer(parts: Any) -> str:
    """Build a JSON Pointer from path segments; the empty path is "/"."""
    escaped = [str(p).replace("~", "~0").replace("/", "~1") for p in parts]
    return "/" + "/".join(escaped) if escaped else "/"


def _normalize(error: JsonSchemaValidationError) -> SchemaValidationError:
    return SchemaValidationError(
        path=json_pointer(error.absolute_path),
        message=error.message,
        keyword=str(error.validator),
        expected=error.validator_value,
    )


class SchemaValidator:
    """Validates messages against the server and client envelope schemas.

    Compilation happens lazily on first use, at most once per instance, and
    is guarded by a lock so racing threads never compile twice.

    Example:
        >>> validator = SchemaValidator()
        >>> validator.validate_server_message(
        ...     {"deleteSurface": {"surfaceId": "s1"}}
        ... ).valid
        True
    """

    def __init__(self, schema_dir: Path | str | None = None):
        """Initialize the validator.

        Args:
            schema_dir: Directory holding the four schema documents.
                Defaults to A2UI_SCHEMA_DIR or the packaged schemas.
        """
        configured = get_environment(EnvVar.A2UI_SCHEMA_DIR)
        self._schema_dir = Path(schema_dir or configured or PACKAGED_SCHEMA_DIR)
        self._lock = threading.Lock()
        self._server: Draft202012Validator | None = None
        self._client: Draft202012Validator | None = None
        self.compile_count = 0

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    @property
    def is_compiled(self) -> bool:
        return self._server is not None

    def compile(self) -> None:
        """Load and compile the schemas if not already done.

        Raises:
            SchemaLoadError: If a document is missing, not JSON, or not a
                valid Draft 2020-12 schema.
        """
        if self._server is not None:
            return
        with self._lock:
            if self._server is not None:
                return
            documents = {name: self._load(name) for name in SCHEMA_FILES}
            registry = Registry().with_resources(
                (
                    doc.get("$id", name),
                    Resource.from_contents(doc, default_specification=DRAFT202012),
                )
                for name, doc in documents.items()
            )
            self._client = Draft202012Validator(
                documents[CLIENT_TO_SERVER],
                registry=registry,
                format_checker=Draft202012Validator.FORMAT_CHECKER,
            )
            self._server = Draft202012Validator(
                documents[SERVER_TO_CLIENT],
                registry=registry,
                format_checker=Draft202012Validator.FORMAT_CHECKER,
            )
            self.compile_count += 1
            logger.debug(f"Compiled A2UI schemas from {self._schema_dir}")

    def _load(self, filename: str) -> dict[str, Any]:
        path = self._schema_dir / filename
        try:
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        except FileNotFoundError as e:
            raise SchemaLoadError(f"Schema file not found: {path}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise SchemaLoadError(f"Failed to read schema {path}: {e}") from e
        try:
            Draft202012Validator.check_schema(document)
        except SchemaError as e:
            raise SchemaLoadError(f"Invalid schema {path}: {e.message}") from e
        return document

    def _check(self, validator: Draft202012Validator, message: Any) -> SchemaValidationResult:
        return SchemaValidationResult(
            errors=[_normalize(e) for e in validator.iter_errors(message)]
        )

    def validate_server_message(self, message: Any) -> SchemaValidationResult:
        """Validate a server-to-client message."""
        self.compile()
        return self._check(self._server, message)

    def validate_client_message(self, message: Any) -> SchemaValidationResult:
        """Validate a client-to-server message."""
        self.compile()
        return self._check(self._client, message)

    def validate_messages(self, messages: Any) -> SchemaValidationResult:
        """Validate a batch of server-to-client messages.

        Paths are prefixed with ``/messages/<index>``.
        """
        if not isinstance(messages, list):
            return SchemaValidationResult(
                errors=[
                    SchemaValidationError(
                        path="/",
                        message="messages must be an array",
                        keyword="type",
                        expected="array",
                    )
                ]
            )
        combined = SchemaValidationResult()
        for index, message in enumerate(messages):
            for error in self.validate_server_message(message).errors:
                suffix = "" if error.path == "/" else error.path
                error.path = f"/messages/{index}{suffix}"
                combined.errors.append(error)
        return combined


# =============================================================================
# Default instance
# =============================================================================

_default_validator: SchemaValidator | None = None
_default_lock = threading.Lock()


def get_schema_validator() -> SchemaValidator:
    """Get the shared default validator, creating it on first use."""
    global _default_validator
    if _default_validator is None:
        with _default_lock:
            if _default_validator is None:
                _default_validator = SchemaValidator()
    return _default_validator


def reset_schema_validator() -> None:
    """Drop the shared default validator so the next call rebuilds it."""
    global _default_validator
    with _default_lock:
        _default_validator = None


def validate_with_schema(message: Any) -> SchemaValidationResult:
    """Validate a server-to-client message with the default validator."""
    return get_schema_validator().validate_server_message(message)


def validate_client_message(message: Any) -> SchemaValidationResult:
    """Validate a client-to-server message with the default validator."""
    return get_schema_validator().validate_client_message(message)


def validate_messages_with_schema(messages: Any) -> SchemaValidationResult:
    """Validate a batch of server-to-client messages with the default validator."""
    return get_schema_validator().validate_messages(messages)


__all__ = [
    "PACKAGED_SCHEMA_DIR",
    "SCHEMA_FILES",
    "SchemaLoadError",
    "SchemaValidationError",
    "SchemaValidationResult",
    "SchemaValidator",
    "json_pointer",
    "get_schema_validator",
    "reset_schema_validator",
    "validate_with_schema",
    "validate_client_message",
    "validate_messages_with_schema",
]
