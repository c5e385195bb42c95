"""
Pydantic models for probed streams, per-file verdicts and run statistics
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class MediaType(str, Enum):
    VIDEO = "video"
    AUDIO = "audio"
    SUBTITLE = "subtitle"
    OTHER = "other"


class Outcome(Enum):
    OK = "ok"
    NOT_SUPPORTED = "not_supported"
    ERROR = "error"


class StreamInfo(BaseModel):
    """Single stream as reported by ffprobe"""
    model_config = ConfigDict(frozen=True)

    index: int
    media_type: MediaType
    codec_id: str
    codec_tag: Optional[str] = None
    profile: Optional[int] = None
    language: str = "und"

    @field_validator('language')
    @classmethod
    def default_language(cls, v):
        return v or "und"


class ProbedMedia(BaseModel):
    """Container name and streams of one probed file"""
    model_config = ConfigDict(frozen=True)

    path: Path
    container_name: str = "unknown"
    streams: List[StreamInfo] = Field(default_factory=list)


class ClassifiedStream(BaseModel):
    """A media stream together with its verdict"""
    model_config = ConfigDict(frozen=True)

    stream: StreamInfo
    category: str
    supported: bool
    bitmap_subtitle: bool = False


class FileVerdict(BaseModel):
    """Compatibility verdict for one file"""
    model_config = ConfigDict(frozen=True)

    path: Path
    container_name: str
    container_supported: bool
    streams: List[ClassifiedStream] = Field(default_factory=list)
    all_supported: bool
    can_transcode: bool
    has_unfixable_bitmap_subtitle: bool
    has_video: bool = False
    has_audio: bool = False

    @property
    def outcome(self) -> Outcome:
        return Outcome.OK if self.all_supported else Outcome.NOT_SUPPORTED

    @property
    def has_unsupported(self) -> bool:
        return not self.all_supported

    @property
    def needs_remux_suggestion(self) -> bool:
        return not self.all_supported and (self.has_video or self.has_audio)

    @property
    def needs_transcode_suggestion(self) -> bool:
        return self.needs_remux_suggestion and self.can_transcode


class CheckConfig(BaseModel):
    """Options for a checking run"""
    model_config = ConfigDict(frozen=True)

    exclude: List[str] = Field(default_factory=list)
    full_path: bool = False
    brief: bool = False
    skip_ok: bool = False
    skip_unfixable: bool = False
    no_color: bool = False
    ffprobe: str = "ffprobe"

    @field_validator('ffprobe')
    @classmethod
    def validate_ffprobe(cls, v):
        if not v.strip():
            raise ValueError('ffprobe executable must not be empty')
        return v


class Summary(BaseModel):
    """Counters for a checking run"""
    total: int = 0
    ok: int = 0
    not_supported: int = 0
    errors: int = 0

    def add_result(self, outcome: Outcome):
        """Count one examined file"""
        if outcome == Outcome.OK:
            self.ok += 1
        elif outcome == Outcome.NOT_SUPPORTED:
            self.not_supported += 1
        else:
            self.errors += 1

        self.total += 1
