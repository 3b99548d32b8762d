"""Component list validation.

A single linear pass over a flat component list. Every component and every
field check runs regardless of earlier failures, so one call reports the
complete set of problems.

v0.9 components are flat: ``{"id": ..., "component": "Text", "text": ...}``.
v0.8 components nest their properties under the kind:
``{"id": ..., "component": {"Text": {"text": ...}}}``.
"""

import logging
from collections.abc import Mapping
from typing import Any

from a2ui.components import classify_action, is_action_valid_for
from a2ui.schema import (
    DEFAULT_PROTOCOL_VERSION,
    ProtocolVersion,
    get_requirements,
    resolve_component_type,
)

from .models import ValidationCode, ValidationOptions, ValidationResult

logger = logging.getLogger(__name__)

ROOT_COMPONENT_ID = "root"

DEFAULT_BASE_PATHS: dict[ProtocolVersion, str] = {
    ProtocolVersion.V0_9: "updateComponents.components",
    ProtocolVersion.V0_8: "surfaceUpdate.components",
}


def validate_components(
    components: Any,
    options: ValidationOptions | Mapping[str, Any] | None = None,
    *,
    version: ProtocolVersion = DEFAULT_PROTOCOL_VERSION,
    base_path: str | None = None,
) -> ValidationResult:
    """Validate a flat component list.

    Checks, per component at index ``i``:
        - ``id`` present, a non-empty string, and unique in the list
        - kind present and a non-empty string
        - every required property of a standard kind is present (JSON null
          counts as present)
        - strict mode: unknown kinds not on the allow-list, and action values
          whose shape the protocol version does not accept

    After the pass, strict mode warns when no component has ID ``root`` (v0.9
    only; in v0.8 the root is named by ``beginRendering``).

    Args:
        components: The component list. A non-list yields INVALID_COMPONENTS.
        options: Validation options, or a mapping of them.
        version: Protocol version of the component shapes.
        base_path: Path prefix for issues. Defaults to the list's location in
            the version's component message.

    Returns:
        ValidationResult with every issue found.
    """
    opts = ValidationOptions.coerce(options)
    version = ProtocolVersion.parse(version)
    base = base_path if base_path is not None else DEFAULT_BASE_PATHS[version]
    result = ValidationResult()

    if not isinstance(components, list):
        result.error(
            ValidationCode.INVALID_COMPONENTS,
            f"{base} must be an array",
            base,
        )
        return result

    seen_ids: set[str] = set()
    has_root = False

    for index, component in enumerate(components):
        path = f"{base}[{index}]"

        if not isinstance(component, Mapping):
            result.error(
                ValidationCode.MISSING_COMPONENT_ID,
                f"Component at index {index} is not an object",
                f"{path}.id",
            )
            result.error(
                ValidationCode.MISSING_COMPONENT_TYPE,
                f"Component at index {index} is not an object",
                f"{path}.component",
            )
            continue

        component_id = _check_id(component, path, seen_ids, result)
        if component_id == ROOT_COMPONENT_ID:
            has_root = True

        if version is ProtocolVersion.V0_8:
            _check_v08_body(component, component_id, path, opts, result)
        else:
            _check_v09_body(component, component_id, path, opts, result)

    if opts.strict and not has_root and version is ProtocolVersion.V0_9:
        result.warn(
            ValidationCode.MISSING_ROOT_COMPONENT,
            f'No component with id "{ROOT_COMPONENT_ID}" found',
            base,
        )

    logger.debug(
        f"Validated {len(components)} components: "
        f"{len(result.errors)} errors, {len(result.warnings)} warnings"
    )
    return result


def _check_id(
    component: Mapping[str, Any],
    path: str,
    seen_ids: set[str],
    result: ValidationResult,
) -> str | None:
    """Check presence and uniqueness of a component ID.

    Returns:
        The ID when it is a non-empty string, else None.
    """
    component_id = component.get("id")
    if not isinstance(component_id, str) or not component_id:
        result.error(
            ValidationCode.MISSING_COMPONENT_ID,
            "Component id is required",
            f"{path}.id",
        )
        return None
    if component_id in seen_ids:
        result.error(
            ValidationCode.DUPLICATE_COMPONENT_ID,
            f"Duplicate component id: {component_id}",
            f"{path}.id",
        )
    else:
        seen_ids.add(component_id)
    return component_id


def _check_v09_body(
    component: Mapping[str, Any],
    component_id: str | None,
    path: str,
    opts: ValidationOptions,
    result: ValidationResult,
) -> None:
    kind = component.get("component")
    if not isinstance(kind, str) or not kind:
        result.error(
            ValidationCode.MISSING_COMPONENT_TYPE,
            "Component type is required",
            f"{path}.component",
        )
        return
    _check_kind(
        kind,
        component,
        component_id,
        path,
        ProtocolVersion.V0_9,
        opts,
        result,
    )


def _check_v08_body(
    component: Mapping[str, Any],
    component_id: str | None,
    path: str,
    opts: ValidationOptions,
    result: ValidationResult,
) -> None:
    wrapper = component.get("component")
    kinds = list(wrapper) if isinstance(wrapper, Mapping) else []
    if len(kinds) != 1 or not isinstance(kinds[0], str) or not kinds[0]:
        result.error(
            ValidationCode.MISSING_COMPONENT_TYPE,
            "Component definition must hold exactly one component kind",
            f"{path}.component",
        )
        return
    kind = kinds[0]
    properties = wrapper[kind]
    if not isinstance(properties, Mapping):
        properties = {}
    _check_kind(
        kind,
        properties,
        component_id,
        f"{path}.component.{kind}",
        ProtocolVersion.V0_8,
        opts,
        result,
        kind_path=f"{path}.component",
    )


def _check_kind(
    kind: str,
    properties: Mapping[str, Any],
    component_id: str | None,
    properties_path: str,
    version: ProtocolVersion,
    opts: ValidationOptions,
    result: ValidationResult,
    kind_path: str | None = None,
) -> None:
    """Run the kind-dependent checks against a component's properties."""
    component_type = resolve_component_type(kind)
    if component_type is None:
        if opts.strict and not opts.allows(kind):
            result.warn(
                ValidationCode.UNKNOWN_COMPONENT_TYPE,
                f"Unknown component type: {kind}",
                kind_path or f"{properties_path}.component",
            )
        return

    label = f"'{component_id}'" if component_id else "(no id)"
    for requirement in get_requirements(component_type, version):
        if not requirement.is_satisfied_by(properties):
            result.error(
                ValidationCode.MISSING_REQUIRED_PROPERTY,
                f"{kind} component {label} is missing required property "
                f"'{requirement.name}'",
                f"{properties_path}.{requirement.name}",
            )

    if opts.strict and "action" in properties:
        action = properties["action"]
        if not is_action_valid_for(action, version):
            result.warn(
                ValidationCode.INVALID_ACTION_SHAPE,
                f"{kind} component {label} uses a "
                f"{classify_action(action).value} action, "
                f"which protocol {version.value} does not accept",
                f"{properties_path}.action",
            )


__all__ = ["validate_components", "ROOT_COMPONENT_ID", "DEFAULT_BASE_PATHS"]
