"""
Codec and container tables for Samsung Frame (2024) playback

Codec identifiers are FFmpeg codec names as reported by ffprobe.
"""

from typing import Optional

SUPPORTED_VIDEO_CODECS = {'h264', 'hevc', 'mpeg2video', 'vp9', 'av1', 'mjpeg', 'png'}

# MPEG-4 part 2 is shared by many encoders; only some variants play
MPEG4_CODEC = 'mpeg4'
UNSUPPORTED_MPEG4_TAGS = {'XVID', 'xvid', 'DIVX', 'divx', 'DX50', 'MP4V', 'mp4v', 'FMP4', 'fmp4'}
MPEG4_PROFILE_SIMPLE_STUDIO = 14
MPEG4_PROFILE_ADVANCED_SIMPLE = 15
UNSUPPORTED_MPEG4_PROFILES = {MPEG4_PROFILE_SIMPLE_STUDIO, MPEG4_PROFILE_ADVANCED_SIMPLE}

SUPPORTED_AUDIO_CODECS = {
    'aac', 'ac3', 'eac3', 'mp3', 'pcm_s16le', 'flac', 'vorbis', 'opus', 'wmav2'
}

SUPPORTED_SUBTITLE_CODECS = {'subrip', 'ass', 'ssa', 'webvtt', 'mov_text', 'microdvd', 'text'}
# text subtitles ffmpeg can convert to srt, supported or not
TEXT_SUBTITLE_CODECS = SUPPORTED_SUBTITLE_CODECS | {
    'mpl2', 'jacosub', 'sami', 'realtext', 'subviewer', 'subviewer1',
    'vplayer', 'pjs', 'stl', 'ttml',
}
BITMAP_SUBTITLE_CODECS = {'hdmv_pgs_subtitle', 'dvd_subtitle'}

SUPPORTED_CONTAINERS = (
    'matroska', 'mp4', 'mov', 'mpegts', 'webm', 'avi',
    'asf', 'wav', 'flac', 'mp3', 'ogg', 'wmv',
)


def is_video_codec_supported(codec_id: str, codec_tag: Optional[str] = None,
                             profile: Optional[int] = None) -> bool:
    if codec_id in SUPPORTED_VIDEO_CODECS:
        return True
    if codec_id == MPEG4_CODEC:
        return codec_tag not in UNSUPPORTED_MPEG4_TAGS and profile not in UNSUPPORTED_MPEG4_PROFILES
    return False


def is_audio_codec_supported(codec_id: str) -> bool:
    return codec_id in SUPPORTED_AUDIO_CODECS


def is_subtitle_codec_supported(codec_id: str) -> bool:
    return codec_id in SUPPORTED_SUBTITLE_CODECS


def is_text_subtitle(codec_id: str) -> bool:
    return codec_id in TEXT_SUBTITLE_CODECS


def is_bitmap_subtitle(codec_id: str) -> bool:
    """Bitmap subtitles cannot be fixed by converting them to srt"""
    return codec_id in BITMAP_SUBTITLE_CODECS


def is_container_supported(format_name: Optional[str]) -> bool:
    """Substring match, ffprobe reports names such as 'mov,mp4,m4a,3gp,3g2,mj2'"""
    if not format_name:
        return False
    return any(name in format_name for name in SUPPORTED_CONTAINERS)
