"""
Stream classification and per-file compatibility verdicts
"""

from .compat_tables import (
    is_audio_codec_supported, is_bitmap_subtitle, is_container_supported,
    is_subtitle_codec_supported, is_video_codec_supported,
)
from .models import ClassifiedStream, FileVerdict, MediaType, ProbedMedia, StreamInfo


def is_media_stream(stream: StreamInfo) -> bool:
    return stream.media_type in (MediaType.VIDEO, MediaType.AUDIO, MediaType.SUBTITLE)


def classify(stream: StreamInfo):
    """Return (category label, supported) for a video, audio or subtitle stream"""
    if stream.media_type == MediaType.VIDEO:
        return 'video', is_video_codec_supported(stream.codec_id, stream.codec_tag, stream.profile)
    if stream.media_type == MediaType.AUDIO:
        return 'audio', is_audio_codec_supported(stream.codec_id)
    if stream.media_type == MediaType.SUBTITLE:
        return 'subtitle', is_subtitle_codec_supported(stream.codec_id)
    raise ValueError(f'Not a media stream: {stream.media_type.value}')


def classify_streams(streams):
    """Classify media streams, skipping data and attachment streams"""
    classified = []
    for stream in streams:
        if not is_media_stream(stream):
            continue
        category, supported = classify(stream)
        classified.append(ClassifiedStream(
            stream=stream,
            category=category,
            supported=supported,
            bitmap_subtitle=(stream.media_type == MediaType.SUBTITLE
                             and is_bitmap_subtitle(stream.codec_id)),
        ))
    return classified


def build_verdict(media: ProbedMedia) -> FileVerdict:
    """Analyze probed media and decide whether it plays and how it can be fixed"""
    container_ok = is_container_supported(media.container_name)
    classified = classify_streams(media.streams)

    all_supported = container_ok
    has_video = has_audio = False
    can_transcode = False
    has_bitmap_issue = False

    for item in classified:
        if item.category == 'video':
            has_video = True
        elif item.category == 'audio':
            has_audio = True

        if item.supported:
            continue
        all_supported = False
        if item.bitmap_subtitle:
            has_bitmap_issue = True
        else:
            # video, audio and text subtitles can be re-encoded
            can_transcode = True

    return FileVerdict(
        path=media.path,
        container_name=media.container_name,
        container_supported=container_ok,
        streams=classified,
        all_supported=all_supported,
        can_transcode=can_transcode,
        has_unfixable_bitmap_subtitle=has_bitmap_issue,
        has_video=has_video,
        has_audio=has_audio,
    )
