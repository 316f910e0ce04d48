from fastapi import APIRouter, File, Form, Request, UploadFile

from intelliforms.api.dependencies import get_services
from intelliforms.exceptions import FileTooLarge, MissingParameter
from intelliforms.logging.logger import Log
from intelliforms.uploads.mime_types import MAX_FILE_SIZE_BYTES

router = APIRouter(tags=["Forms"])


@router.post("/generarFormularioHttp")
def generate_form(
    request: Request,
    file: UploadFile | None = File(default=None),
    plantilla: str | None = Form(default=None),
) -> dict[str, object]:
    """Extract text from an uploaded file and generate its form synchronously."""
    if file is None or not file.filename:
        raise MissingParameter("No file was received.")
    data = file.file.read(MAX_FILE_SIZE_BYTES + 1)
    if not data:
        raise MissingParameter("No file was received.")
    if len(data) > MAX_FILE_SIZE_BYTES:
        raise FileTooLarge(
            f"File exceeds the maximum allowed size ({MAX_FILE_SIZE_BYTES // (1024 * 1024)} MB)"
        )
    if not plantilla or not plantilla.strip():
        raise MissingParameter("No template was specified.")

    services = get_services(request)
    Log.info(f"Synchronous form generation for {file.filename}", template=plantilla)
    text = services.extractor.extract_bytes(data, file.filename)
    form = services.generator.generate(
        text[: services.settings.max_text_chars], plantilla.strip()
    )
    return {"success": True, "formulario": form.to_dict()}


@router.get("/getTemplates")
def get_templates(request: Request) -> dict[str, object]:
    templates = get_services(request).templates.list_templates()
    return {"success": True, "templates": [t.to_dict() for t in templates]}


@router.get("/generarFormularioSimulado")
def generate_sample_form(request: Request) -> dict[str, object]:
    """Return the fixed sample form without calling the AI provider."""
    form = get_services(request).sample_generator.generate("", "moderna")
    return {"success": True, "formulario": form.to_dict()}
