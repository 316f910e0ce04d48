from fastapi import APIRouter, Depends, Request
from starlette.concurrency import run_in_threadpool

from intelliforms.api.dependencies import get_services, read_json_body, require_api_key
from intelliforms.api.schemas import NotifyUploadRequest, UploadUrlRequest
from intelliforms.exceptions import MethodNotAllowed

router = APIRouter(tags=["Uploads"], dependencies=[Depends(require_api_key)])


@router.post("/generateUploadUrl")
async def generate_upload_url(request: Request) -> dict[str, object]:
    body = await read_json_body(request, UploadUrlRequest)
    services = get_services(request)
    grant = await run_in_threadpool(
        services.issuer.issue, body.file_name, body.file_extension, body.file_size
    )
    return {
        "success": True,
        "signedUrl": grant.url,
        "fileName": grant.full_file_name,
        "mimeType": grant.mime_type,
        "expirationTime": grant.expires_at.isoformat(timespec="milliseconds").replace(
            "+00:00", "Z"
        ),
        "message": "Upload URL generated. Use it to upload your file.",
    }


@router.post("/notifyFileUploaded")
async def notify_file_uploaded(request: Request) -> dict[str, object]:
    body = await read_json_body(request, NotifyUploadRequest)
    services = get_services(request)
    message_id = await run_in_threadpool(
        services.notifier.notify, body.file_name, body.template
    )
    return {
        "success": True,
        "message": f"File {body.file_name} accepted for processing.",
        "messageId": message_id,
    }


@router.api_route(
    "/generateUploadUrl",
    methods=["GET", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
@router.api_route(
    "/notifyFileUploaded",
    methods=["GET", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
def reject_method(request: Request) -> None:
    """Wrong-method calls still pass the router's key check first."""
    raise MethodNotAllowed(f"Method {request.method} not allowed.")
