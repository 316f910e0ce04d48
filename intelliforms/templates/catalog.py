from dataclasses import dataclass
from pathlib import Path

from intelliforms.logging.logger import Log


@dataclass(frozen=True)
class Template:
    """A presentation template the frontend can render a form with."""

    id: str
    nombre: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "nombre": self.nombre}


DEFAULT_TEMPLATES: tuple[Template, ...] = (
    Template(id="moderna", nombre="Moderna y Limpia"),
    Template(id="clasica", nombre="Clásica Corporativa"),
    Template(id="creativa", nombre="Creativa y Colorida"),
)


class TemplateCatalog:
    """Lists available templates.

    With a ``templates_dir`` the list is a scan of its ``*.html`` files,
    otherwise the built-in list is returned.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        self._templates_dir = templates_dir

    def list_templates(self) -> list[Template]:
        if self._templates_dir is None:
            return list(DEFAULT_TEMPLATES)
        if not self._templates_dir.is_dir():
            Log.warning(f"Templates directory not found: {self._templates_dir}")
            return []
        return [
            Template(id=path.stem, nombre=path.stem.replace("_", " ").replace("-", " ").title())
            for path in sorted(self._templates_dir.glob("*.html"))
        ]
