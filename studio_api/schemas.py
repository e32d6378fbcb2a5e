"""Pydantic schemas for the studio proxy API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import DEFAULT_MAX_RESULTS, MAX_SEARCH_RESULTS, SearchResultType


class GenerationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Left loose so unknown or missing providers surface as UnknownProviderError.
    provider: str | None = None
    api_key: str = Field(default="", alias="apiKey")
    prompt: str = ""
    system: str | None = None


class GenerationResponse(BaseModel):
    text: str


class ErrorResponse(BaseModel):
    error: str


class VideoSearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    yt_key: str = Field(default="", alias="ytKey")
    query: str = ""
    max_results: int = Field(
        default=DEFAULT_MAX_RESULTS, alias="maxResults", ge=1, le=MAX_SEARCH_RESULTS
    )
    result_type: SearchResultType = Field(default="video", alias="type")
    published_after: str | None = Field(default=None, alias="publishedAfter")

    @field_validator("published_after")
    @classmethod
    def validate_published_after(cls, value: str | None) -> str | None:
        if not value:
            return None
        try:
            datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"publishedAfter must be an ISO-8601 timestamp: {value}") from e
        return value


class VideoStatsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    yt_key: str = Field(default="", alias="ytKey")
    video_ids: list[str] = Field(default_factory=list, alias="videoIds")

    @classmethod
    def from_query(cls, yt_key: str, ids: str) -> "VideoStatsRequest":
        video_ids = [video_id.strip() for video_id in ids.split(",")]
        return cls(yt_key=yt_key, video_ids=[video_id for video_id in video_ids if video_id])


class VoiceSettings(BaseModel):
    # ElevenLabs accepts more knobs (style, use_speaker_boost); pass them through.
    model_config = ConfigDict(extra="allow")

    stability: float = Field(default=0.5, ge=0, le=1)
    similarity_boost: float = Field(default=0.75, ge=0, le=1)
    speed: float = Field(default=1.0, gt=0)


class SpeechRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    el_key: str = Field(default="", alias="elKey")
    voice_id: str = Field(default="", alias="voiceId")
    text: str = ""
    voice_settings: VoiceSettings | None = None


class ProviderMetadata(BaseModel):
    id: str
    label: str
    model: str
    supported: bool
    unsupported_reason: str | None = Field(default=None, serialization_alias="unsupportedReason")
