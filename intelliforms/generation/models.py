from dataclasses import dataclass, field

FIELD_TYPES = frozenset(
    {"text", "email", "number", "textarea", "select", "radio", "checkbox"}
)
CHOICE_FIELD_TYPES = frozenset({"select", "radio", "checkbox"})


@dataclass(frozen=True)
class FieldOption:
    """A selectable option of a choice field."""

    value: str
    label: str


@dataclass(frozen=True)
class FieldSpec:
    """A single form field."""

    id: str
    label: str
    type: str
    required: bool = False
    placeholder: str | None = None
    options: tuple[FieldOption, ...] = ()

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {
            "id": self.id,
            "label": self.label,
            "type": self.type,
            "required": self.required,
        }
        if self.placeholder is not None:
            data["placeholder"] = self.placeholder
        if self.type in CHOICE_FIELD_TYPES:
            data["options"] = [
                {"value": o.value, "label": o.label} for o in self.options
            ]
        return data


@dataclass(frozen=True)
class FormSpec:
    """Output of the form generator, consumed by the frontend renderer."""

    title: str
    fields: tuple[FieldSpec, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        return {"title": self.title, "fields": [f.to_dict() for f in self.fields]}
