import hmac
import json
from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from intelliforms.exceptions import ClientInputError, Unauthorized
from intelliforms.services import Services

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_services(request: Request) -> Services:
    return request.app.state.services


def require_api_key(request: Request) -> None:
    """Reject the request unless ``x-api-key`` matches the configured key.

    Runs before the body is read, so a bad key wins over a bad body.
    """
    expected = get_services(request).settings.api_key
    provided = request.headers.get("x-api-key", "")
    if not expected or not provided or not hmac.compare_digest(
        provided.encode("utf-8"), expected.encode("utf-8")
    ):
        raise Unauthorized("Unauthorized. Invalid API key.")


async def read_json_body(request: Request, model: type[ModelT]) -> ModelT:
    """Parse and validate a JSON request body.

    Raises:
        ClientInputError: on wrong content type, malformed JSON or bad shape.
    """
    content_type = request.headers.get("content-type", "")
    if "application/json" not in content_type:
        raise ClientInputError("Content-Type must be application/json")
    try:
        payload: Any = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ClientInputError(f"Request body is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ClientInputError("Request body must be a JSON object")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise ClientInputError(f"Invalid request body: {problems}") from exc
