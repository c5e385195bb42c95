"""
Samsung Frame TV compatibility checker

Probes video files with ffprobe, classifies container and streams and
suggests ffmpeg commands for files that will not play.
"""

# Import all public interfaces for easy access
from .models import (
    MediaType, Outcome, StreamInfo, ProbedMedia, ClassifiedStream, FileVerdict,
    CheckConfig, Summary,
)
from .compat_tables import (
    is_video_codec_supported, is_audio_codec_supported, is_subtitle_codec_supported,
    is_text_subtitle, is_bitmap_subtitle, is_container_supported,
)
from .ffmpeg_runner import ProbeError, ProbeOpenError, StreamInfoError, probe_media, run_simple
from .media_analyzer import classify, classify_streams, build_verdict, is_media_stream
from .ffmpeg_builder import shell_escape, build_remux_cmd, build_transcode_cmd
from .rich_console import RichOutput, make_console
from .processor import check_file, scan_dir
from .file_utils import VIDEO_EXTS, has_supported_extension, display_name, is_excluded

__all__ = [
    'MediaType', 'Outcome', 'StreamInfo', 'ProbedMedia', 'ClassifiedStream', 'FileVerdict',
    'CheckConfig', 'Summary',
    'is_video_codec_supported', 'is_audio_codec_supported', 'is_subtitle_codec_supported',
    'is_text_subtitle', 'is_bitmap_subtitle', 'is_container_supported',
    'ProbeError', 'ProbeOpenError', 'StreamInfoError', 'probe_media', 'run_simple',
    'classify', 'classify_streams', 'build_verdict', 'is_media_stream',
    'shell_escape', 'build_remux_cmd', 'build_transcode_cmd',
    'RichOutput', 'make_console',
    'check_file', 'scan_dir',
    'VIDEO_EXTS', 'has_supported_extension', 'display_name', 'is_excluded',
]
