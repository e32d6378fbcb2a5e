"""Application service for YouTube Data API search and statistics lookups."""

import logging
from collections.abc import Callable
from typing import Any

import httpx

from studio_api.constants import MISSING_YOUTUBE_KEY_MESSAGE
from studio_api.errors import BadRequestError
from studio_api.extractors import extract_json_payload, raise_for_upstream_error
from studio_api.infra.runtime import send_upstream
from studio_api.normalizers import (
    WireRequest,
    build_video_search_request,
    build_video_stats_request,
)
from studio_api.schemas import VideoSearchRequest, VideoStatsRequest

logger = logging.getLogger(__name__)

YOUTUBE_LABEL = "YouTube"


class YouTubeService:
    def __init__(self, get_http_client: Callable[[], httpx.Client]) -> None:
        self._get_http_client = get_http_client

    def search(self, request: VideoSearchRequest) -> Any:
        if not request.yt_key:
            raise BadRequestError(MISSING_YOUTUBE_KEY_MESSAGE)
        if not request.query.strip():
            raise BadRequestError("Search query required")

        logger.info(
            "Video search request received",
            extra={"result_type": request.result_type, "max_results": request.max_results},
        )
        return self._relay(build_video_search_request(request))

    def statistics(self, request: VideoStatsRequest) -> Any:
        if not request.yt_key:
            raise BadRequestError(MISSING_YOUTUBE_KEY_MESSAGE)
        if not request.video_ids:
            return {"items": []}

        logger.info("Video statistics request received", extra={"id_count": len(request.video_ids)})
        return self._relay(build_video_stats_request(request))

    def _relay(self, wire_request: WireRequest) -> Any:
        response = send_upstream(self._get_http_client(), wire_request, upstream=YOUTUBE_LABEL)
        raise_for_upstream_error(response, YOUTUBE_LABEL)
        return extract_json_payload(response)
