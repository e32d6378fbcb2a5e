"""Application service for ElevenLabs speech synthesis."""

import logging
from collections.abc import Callable

import httpx

from studio_api.constants import MISSING_ELEVENLABS_KEY_MESSAGE
from studio_api.errors import BadRequestError
from studio_api.extractors import ELEVENLABS_ERROR_PATH, extract_audio, raise_for_upstream_error
from studio_api.infra.runtime import send_upstream
from studio_api.normalizers import build_speech_request
from studio_api.schemas import SpeechRequest

logger = logging.getLogger(__name__)

ELEVENLABS_LABEL = "ElevenLabs"


class SpeechService:
    def __init__(self, get_http_client: Callable[[], httpx.Client], model_id: str) -> None:
        self._get_http_client = get_http_client
        self._model_id = model_id

    def synthesize(self, request: SpeechRequest) -> bytes:
        if not request.el_key:
            raise BadRequestError(MISSING_ELEVENLABS_KEY_MESSAGE)
        if not request.voice_id:
            raise BadRequestError("Voice ID required")
        if not request.text:
            raise BadRequestError("Text required")

        logger.info("Speech request received", extra={"text_length": len(request.text)})
        response = send_upstream(
            self._get_http_client(),
            build_speech_request(request, self._model_id),
            upstream=ELEVENLABS_LABEL,
        )
        raise_for_upstream_error(response, ELEVENLABS_LABEL, ELEVENLABS_ERROR_PATH)
        audio = extract_audio(response)
        logger.info("Speech audio relayed", extra={"audio_bytes": len(audio)})
        return audio
