"""Validates raw parsed model output against the form invariants."""

from typing import Any

from intelliforms.generation.exceptions import (
    InvalidFieldOptions,
    InvalidFieldSpec,
    InvalidModelOutput,
)
from intelliforms.generation.models import (
    CHOICE_FIELD_TYPES,
    FIELD_TYPES,
    FieldOption,
    FieldSpec,
    FormSpec,
)


def validate_and_build(data: dict[str, Any]) -> FormSpec:
    """Validate raw parsed JSON and build a FormSpec.

    Fields are checked one by one; the first failure aborts the whole form.

    Raises:
        InvalidModelOutput: if ``title`` or the ``fields`` list is missing.
        InvalidFieldSpec: if a field lacks id/label/type or has an unknown type.
        InvalidFieldOptions: if a choice field has no valid options.
    """
    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        raise InvalidModelOutput("The generated form has no title")
    raw_fields = data.get("fields")
    if not isinstance(raw_fields, list):
        raise InvalidModelOutput("The generated form has no 'fields' list")
    fields = tuple(_build_field(raw, i) for i, raw in enumerate(raw_fields))
    return FormSpec(title=title, fields=fields)


def _field_ref(raw: Any, index: int) -> str:
    if isinstance(raw, dict) and isinstance(raw.get("id"), str) and raw["id"]:
        return raw["id"]
    return f"#{index}"


def _build_field(raw: Any, index: int) -> FieldSpec:
    ref = _field_ref(raw, index)
    if not isinstance(raw, dict):
        raise InvalidFieldSpec(f"Field {ref} must be an object", ref)
    for key in ("id", "label", "type"):
        value = raw.get(key)
        if not isinstance(value, str) or not value.strip():
            raise InvalidFieldSpec(
                f"Field {ref} is missing a non-empty '{key}'", ref
            )
    ftype = raw["type"]
    if ftype not in FIELD_TYPES:
        raise InvalidFieldSpec(
            f"Field {ref} has an unsupported type {ftype!r}; "
            f"expected one of {sorted(FIELD_TYPES)}",
            ref,
        )

    required = raw.get("required", False)
    if required is None:
        required = False
    if not isinstance(required, bool):
        raise InvalidFieldSpec(f"Field {ref}: 'required' must be a boolean", ref)
    placeholder = raw.get("placeholder")
    if placeholder is not None and not isinstance(placeholder, str):
        raise InvalidFieldSpec(f"Field {ref}: 'placeholder' must be a string", ref)

    options: tuple[FieldOption, ...] = ()
    if ftype in CHOICE_FIELD_TYPES:
        options = _build_options(raw.get("options"), ref)

    return FieldSpec(
        id=raw["id"],
        label=raw["label"],
        type=ftype,
        required=required,
        placeholder=placeholder,
        options=options,
    )


def _build_options(raw: Any, ref: str) -> tuple[FieldOption, ...]:
    if not isinstance(raw, list) or not raw:
        raise InvalidFieldOptions(f"Field {ref} needs a non-empty 'options' list", ref)
    return tuple(_build_option(item, i, ref) for i, item in enumerate(raw))


def _build_option(raw: Any, index: int, ref: str) -> FieldOption:
    if not isinstance(raw, dict):
        raise InvalidFieldOptions(f"Option {index} of field {ref} must be an object", ref)
    value = raw.get("value")
    label = raw.get("label")
    if isinstance(value, bool) or not isinstance(value, (str, int, float)) or value == "":
        raise InvalidFieldOptions(f"Option {index} of field {ref} has no 'value'", ref)
    if not isinstance(label, str) or not label:
        raise InvalidFieldOptions(f"Option {index} of field {ref} has no 'label'", ref)
    return FieldOption(value=str(value), label=label)
