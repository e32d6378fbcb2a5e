"""Creator studio proxy backend using FastAPI + Mangum for AWS Lambda."""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Body, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from mangum import Mangum
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from studio_api.constants import (
    AUDIO_MIME_TYPE,
    METHOD_NOT_ALLOWED_MESSAGE,
    MISSING_API_KEY_MESSAGE,
    MISSING_ELEVENLABS_KEY_MESSAGE,
    MISSING_YOUTUBE_KEY_MESSAGE,
)
from studio_api.errors import BadRequestError, ProxyError, TransportError
from studio_api.infra.runtime import get_http_client
from studio_api.orchestration.base import GenerationOrchestrator
from studio_api.orchestration.direct import DirectGenerationOrchestrator
from studio_api.orchestration.langgraph_flow import LangGraphGenerationOrchestrator
from studio_api.provider_registry import ProviderConfig, build_provider_configs
from studio_api.providers.adapters import build_provider_adapters
from studio_api.schemas import (
    ErrorResponse,
    GenerationRequest,
    GenerationResponse,
    ProviderMetadata,
    SpeechRequest,
    VideoSearchRequest,
    VideoStatsRequest,
)
from studio_api.services.generation_service import GenerationService
from studio_api.services.speech_service import SpeechService
from studio_api.services.youtube_service import YouTubeService
from studio_api.settings import get_settings

logger = logging.getLogger(__name__)
logger.setLevel(get_settings().log_level)
logging.getLogger("studio_api").setLevel(get_settings().log_level)
# httpx logs full request URLs, which carry query-param API keys.
logging.getLogger("httpx").setLevel(logging.WARNING)

app = FastAPI()
router = APIRouter(prefix="/api")


@lru_cache(maxsize=1)
def get_provider_configs() -> dict[str, ProviderConfig]:
    return build_provider_configs(get_settings())


def _build_orchestrator() -> GenerationOrchestrator:
    if get_settings().orchestrator == "langgraph":
        return LangGraphGenerationOrchestrator(get_http_client=get_http_client)
    return DirectGenerationOrchestrator(get_http_client=get_http_client)


@lru_cache(maxsize=1)
def get_generation_service() -> GenerationService:
    configs = get_provider_configs()
    return GenerationService(
        provider_configs=configs,
        adapters=build_provider_adapters(configs),
        orchestrator=_build_orchestrator(),
        default_persona=get_settings().default_persona,
    )


@lru_cache(maxsize=1)
def get_youtube_service() -> YouTubeService:
    return YouTubeService(get_http_client=get_http_client)


@lru_cache(maxsize=1)
def get_speech_service() -> SpeechService:
    return SpeechService(get_http_client=get_http_client, model_id=get_settings().elevenlabs_model)


def _error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


def _first_validation_message(errors: list[Any]) -> str:
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query"))
    return f"{location}: {first['msg']}" if location else str(first["msg"])


def _validated(model: type[BaseModel], values: Mapping[str, Any]) -> Any:
    """Validate client input keyed by its wire names so errors name what the client sent."""
    try:
        return model.model_validate(values)
    except ValidationError as e:
        raise BadRequestError(_first_validation_message(e.errors())) from e


@contextmanager
def _translate_unexpected_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except ProxyError:
        raise
    except Exception as e:
        logger.exception("Proxy call failed", extra={"operation": operation})
        raise TransportError(str(e) or type(e).__name__) from e


@app.exception_handler(ProxyError)
async def handle_proxy_error(request: Request, exc: ProxyError) -> JSONResponse:
    logger.warning(
        "Request failed",
        extra={
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "status_code": exc.status_code,
            "upstream_detail_provided": getattr(exc, "detail_provided", None),
        },
    )
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(400, _first_validation_message(list(exc.errors())))


@app.exception_handler(StarletteHTTPException)
async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        return _error_response(405, METHOD_NOT_ALLOWED_MESSAGE, headers=exc.headers)
    return _error_response(exc.status_code, str(exc.detail), headers=exc.headers)


def _raw_body(payload: Any) -> dict[str, Any]:
    return payload if isinstance(payload, dict) else {}


def _require_credential(value: Any, message: str) -> None:
    """Reject a missing credential before any other field is looked at."""
    if not isinstance(value, str) or not value:
        raise BadRequestError(message)


@router.post("/ai", response_model=GenerationResponse)
def generate_text(payload: Any = Body(default=None)) -> GenerationResponse:
    """Relay a prompt to the named LLM provider and return its text."""
    body = _raw_body(payload)
    service = get_generation_service()
    service.resolve_callable_provider(body.get("provider"))
    _require_credential(body.get("apiKey"), MISSING_API_KEY_MESSAGE)
    request = _validated(GenerationRequest, body)
    with _translate_unexpected_errors("text-generation"):
        return service.handle_generation(request)


@router.get("/youtube")
def search_videos(http_request: Request) -> Any:
    """Relay a YouTube search and return the upstream payload unchanged."""
    params = dict(http_request.query_params)
    _require_credential(params.get("ytKey"), MISSING_YOUTUBE_KEY_MESSAGE)
    request = _validated(VideoSearchRequest, params)
    with _translate_unexpected_errors("video-search"):
        return get_youtube_service().search(request)


@router.get("/youtube-stats")
def video_statistics(http_request: Request) -> Any:
    """Relay a bulk statistics lookup for comma-joined video ids."""
    params = http_request.query_params
    _require_credential(params.get("ytKey"), MISSING_YOUTUBE_KEY_MESSAGE)
    request = VideoStatsRequest.from_query(params["ytKey"], params.get("ids", ""))
    with _translate_unexpected_errors("video-statistics"):
        return get_youtube_service().statistics(request)


@router.post("/elevenlabs")
def synthesize_speech(payload: Any = Body(default=None)) -> Response:
    """Relay text to ElevenLabs and stream back the MP3 bytes."""
    body = _raw_body(payload)
    _require_credential(body.get("elKey"), MISSING_ELEVENLABS_KEY_MESSAGE)
    request = _validated(SpeechRequest, body)
    with _translate_unexpected_errors("speech-synthesis"):
        audio = get_speech_service().synthesize(request)
    return Response(content=audio, media_type=AUDIO_MIME_TYPE)


@router.get("/providers", response_model=list[ProviderMetadata])
def providers() -> list[ProviderMetadata]:
    """List text-generation providers and whether this deployment can call them."""
    return [
        ProviderMetadata(
            id=config.id,
            label=config.label,
            model=config.model,
            supported=config.supported,
            unsupported_reason=config.unsupported_reason,
        )
        for config in get_provider_configs().values()
    ]


@router.get("/health")
def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


app.include_router(router)


handler = Mangum(app)
