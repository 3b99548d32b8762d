"""Message validation for A2UI server-to-client messages.

This module provides validation functions for single messages and batches,
dispatching on the message's single top-level kind key. Validation never
raises for JSON-shaped input: malformed top levels become INVALID_MESSAGE_TYPE.
"""

import logging
import re
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any

from a2ui.messages import MESSAGE_KINDS_BY_VERSION, MessageKind, recognized_kinds
from a2ui.schema import ProtocolVersion

from .components import validate_components
from .models import ValidationCode, ValidationOptions, ValidationResult

logger = logging.getLogger(__name__)

HEX_COLOR_PATTERN = re.compile(r"^#[0-9a-fA-F]{6}$")
DATA_MODEL_OPS = ("add", "replace", "remove")

OptionsLike = ValidationOptions | Mapping[str, Any] | None
_Check = Callable[[Mapping[str, Any], ValidationOptions, ValidationResult], None]


def validate_message(
    message: Any,
    options: OptionsLike = None,
    *,
    version: ProtocolVersion | str | None = None,
) -> ValidationResult:
    """Validate a single server-to-client message.

    Args:
        message: Any JSON-shaped value claiming to be a message.
        options: Validation options, or a mapping of them.
        version: Protocol version to validate against. When None, the version
            is inferred from the kind key (see `a2ui.messages`).

    Returns:
        ValidationResult: Errors and warnings (valid when no errors).

    Example:
        >>> result = validate_message(
        ...     {"createSurface": {"surfaceId": "s1", "catalogId": "c1"}}
        ... )
        >>> result.valid
        True
    """
    opts = ValidationOptions.coerce(options)
    pinned = ProtocolVersion.parse(version) if version is not None else None
    result = ValidationResult()

    kinds = recognized_kinds(message, pinned)
    if len(kinds) != 1:
        result.error(
            ValidationCode.INVALID_MESSAGE_TYPE,
            _invalid_type_message(kinds, pinned),
        )
        return result

    kind = kinds[0]
    if pinned is ProtocolVersion.V0_8:
        checks = _V08_CHECKS
    elif pinned is ProtocolVersion.V0_9 or kind in _V09_CHECKS:
        checks = _V09_CHECKS
    else:
        checks = _V08_CHECKS

    body = message[kind.value]
    if not isinstance(body, Mapping):
        body = {}

    checks[kind](body, opts, result)
    logger.debug(
        f"Validated {kind.value}: {len(result.errors)} errors, "
        f"{len(result.warnings)} warnings"
    )
    return result


def validate_v09_message(message: Any, options: OptionsLike = None) -> ValidationResult:
    """Validate a message against protocol v0.9 only."""
    return validate_message(message, options, version=ProtocolVersion.V0_9)


def validate_v08_message(message: Any, options: OptionsLike = None) -> ValidationResult:
    """Validate a message against protocol v0.8 only."""
    return validate_message(message, options, version=ProtocolVersion.V0_8)


def validate_messages(
    messages: Any,
    options: OptionsLike = None,
    *,
    version: ProtocolVersion | str | None = None,
    max_workers: int | None = None,
) -> ValidationResult:
    """Validate a batch of messages.

    Each message is validated independently with the same options. Issue
    paths are prefixed with ``messages[<index>]`` and ordered by index.

    Args:
        messages: The batch. A non-list yields INVALID_MESSAGE_TYPE.
        options: Validation options, or a mapping of them.
        version: Protocol version for every message, or None to infer.
        max_workers: Validate on a thread pool of this size when greater
            than 1. Output order is the same as sequential validation.

    Returns:
        ValidationResult: Aggregated; valid only when every message is.
    """
    opts = ValidationOptions.coerce(options)
    combined = ValidationResult()

    if not isinstance(messages, list):
        combined.error(
            ValidationCode.INVALID_MESSAGE_TYPE,
            "messages must be an array",
            "messages",
        )
        return combined

    if max_workers is not None and max_workers > 1 and len(messages) > 1:
        results = _validate_concurrently(messages, opts, version, max_workers)
    else:
        results = [validate_message(m, opts, version=version) for m in messages]

    for index, result in enumerate(results):
        combined.extend(result, prefix=f"messages[{index}]")

    logger.debug(
        f"Validated batch of {len(messages)}: {len(combined.errors)} errors, "
        f"{len(combined.warnings)} warnings"
    )
    return combined


def is_valid(
    message: Any,
    options: OptionsLike = None,
    *,
    version: ProtocolVersion | str | None = None,
) -> bool:
    """Check if a message is valid.

    Convenience function that returns True if no validation errors exist.

    Example:
        >>> if is_valid(message):
        ...     stream.write(messages_to_jsonl([message]))
    """
    return validate_message(message, options, version=version).valid


def _validate_concurrently(
    messages: list[Any],
    opts: ValidationOptions,
    version: ProtocolVersion | str | None,
    max_workers: int,
) -> list[ValidationResult]:
    """Validate on a thread pool and reassemble results by input index."""
    results: list[ValidationResult | None] = [None] * len(messages)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(validate_message, message, opts, version=version): idx
            for idx, message in enumerate(messages)
        }
        for future in as_completed(futures):
            results[futures[future]] = future.result()
    return results  # type: ignore[return-value]


def _invalid_type_message(
    kinds: list[MessageKind], version: ProtocolVersion | None
) -> str:
    if kinds:
        found = ", ".join(kind.value for kind in kinds)
        return f"Message must contain exactly one message type, found: {found}"
    if version is None:
        expected = MessageKind
    else:
        expected = MESSAGE_KINDS_BY_VERSION[version]
    names = ", ".join(kind.value for kind in expected)
    return f"Message must contain one of: {names}"


# =============================================================================
# Per-kind checks
# =============================================================================


def _check_surface_id(
    kind: MessageKind, body: Mapping[str, Any], result: ValidationResult
) -> None:
    if not body.get("surfaceId"):
        result.error(
            ValidationCode.MISSING_SURFACE_ID,
            f"{kind.value}.surfaceId is required",
            f"{kind.value}.surfaceId",
        )


def _check_primary_color(
    container: Any, path: str, result: ValidationResult
) -> None:
    if not isinstance(container, Mapping) or "primaryColor" not in container:
        return
    color = container["primaryColor"]
    if not isinstance(color, str) or not HEX_COLOR_PATTERN.fullmatch(color):
        result.warn(
            ValidationCode.INVALID_PRIMARY_COLOR,
            f"primaryColor must be a hex color like #1A2B3C, got {color!r}",
            f"{path}.primaryColor",
        )


def _check_component_list(
    kind: MessageKind,
    body: Mapping[str, Any],
    opts: ValidationOptions,
    result: ValidationResult,
    version: ProtocolVersion,
) -> None:
    components = body.get("components")
    result.extend(
        validate_components(
            components,
            opts,
            version=version,
            base_path=f"{kind.value}.components",
        )
    )


def _check_create_surface(
    body: Mapping[str, Any], opts: ValidationOptions, result: ValidationResult
) -> None:
    _check_surface_id(MessageKind.CREATE_SURFACE, body, result)
    if not body.get("catalogId"):
        result.error(
            ValidationCode.MISSING_CATALOG_ID,
            "createSurface.catalogId is required",
            "createSurface.catalogId",
        )
    _check_primary_color(body.get("theme"), "createSurface.theme", result)


def _check_update_components(
    body: Mapping[str, Any], opts: ValidationOptions, result: ValidationResult
) -> None:
    _check_surface_id(MessageKind.UPDATE_COMPONENTS, body, result)
    _check_component_list(
        MessageKind.UPDATE_COMPONENTS, body, opts, result, ProtocolVersion.V0_9
    )


def _check_update_data_model(
    body: Mapping[str, Any], opts: ValidationOptions, result: ValidationResult
) -> None:
    _check_surface_id(MessageKind.UPDATE_DATA_MODEL, body, result)
    if "op" not in body:
        return
    op = body["op"]
    if not isinstance(op, str) or op not in DATA_MODEL_OPS:
        result.error(
            ValidationCode.INVALID_OP,
            f"updateDataModel.op must be one of {', '.join(DATA_MODEL_OPS)}, "
            f"got {op!r}",
            "updateDataModel.op",
        )
    elif op == "remove" and "value" in body:
        result.warn(
            ValidationCode.UNNECESSARY_VALUE,
            "updateDataModel.value is ignored for op 'remove'",
            "updateDataModel.value",
        )
    elif op == "add" and "value" not in body:
        result.error(
            ValidationCode.MISSING_VALUE,
            "updateDataModel.value is required for op 'add'",
            "updateDataModel.value",
        )


def _check_delete_surface(
    body: Mapping[str, Any], opts: ValidationOptions, result: ValidationResult
) -> None:
    _check_surface_id(MessageKind.DELETE_SURFACE, body, result)


def _check_begin_rendering(
    body: Mapping[str, Any], opts: ValidationOptions, result: ValidationResult
) -> None:
    _check_surface_id(MessageKind.BEGIN_RENDERING, body, result)
    if not body.get("root"):
        result.error(
            ValidationCode.MISSING_ROOT,
            "beginRendering.root is required",
            "beginRendering.root",
        )
    _check_primary_color(body.get("styles"), "beginRendering.styles", result)


def _check_surface_update(
    body: Mapping[str, Any], opts: ValidationOptions, result: ValidationResult
) -> None:
    _check_surface_id(MessageKind.SURFACE_UPDATE, body, result)
    _check_component_list(
        MessageKind.SURFACE_UPDATE, body, opts, result, ProtocolVersion.V0_8
    )


def _check_data_model_update(
    body: Mapping[str, Any], opts: ValidationOptions, result: ValidationResult
) -> None:
    _check_surface_id(MessageKind.DATA_MODEL_UPDATE, body, result)
    if not isinstance(body.get("contents"), list):
        result.error(
            ValidationCode.INVALID_CONTENTS,
            "dataModelUpdate.contents must be an array",
            "dataModelUpdate.contents",
        )


_V09_CHECKS: dict[MessageKind, _Check] = {
    MessageKind.CREATE_SURFACE: _check_create_surface,
    MessageKind.UPDATE_COMPONENTS: _check_update_components,
    MessageKind.UPDATE_DATA_MODEL: _check_update_data_model,
    MessageKind.DELETE_SURFACE: _check_delete_surface,
}

_V08_CHECKS: dict[MessageKind, _Check] = {
    MessageKind.BEGIN_RENDERING: _check_begin_rendering,
    MessageKind.SURFACE_UPDATE: _check_surface_update,
    MessageKind.DATA_MODEL_UPDATE: _check_data_model_update,
    MessageKind.DELETE_SURFACE: _check_delete_surface,
}


__all__ = [
    "validate_message",
    "validate_v09_message",
    "validate_v08_message",
    "validate_messages",
    "is_valid",
    "HEX_COLOR_PATTERN",
    "DATA_MODEL_OPS",
]
