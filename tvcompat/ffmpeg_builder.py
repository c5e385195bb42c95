"""
FFmpeg command suggestions for unsupported files
"""

from pathlib import Path
from typing import Optional

from .compat_tables import is_text_subtitle
from .models import FileVerdict

FALLBACK_VIDEO_ENCODER = 'libx264'
FALLBACK_AUDIO_ENCODER = 'aac'
FALLBACK_SUBTITLE_ENCODER = 'srt'

CATEGORY_SPECIFIERS = {'video': 'v', 'audio': 'a', 'subtitle': 's'}


def shell_escape(text: str) -> str:
    """Single-quote text for a POSIX shell"""
    return "'" + str(text).replace("'", "'\\''") + "'"


def remux_output_name(path: Path) -> str:
    return f'remuxed_{Path(path).name}.mkv'


def transcode_output_name(path: Path) -> str:
    return f'fixed_{Path(path).stem}.mkv'


def target_codec(item) -> str:
    """Encoder for one classified stream in the transcode suggestion"""
    if item.supported:
        return 'copy'
    if item.category == 'video':
        return FALLBACK_VIDEO_ENCODER
    if item.category == 'audio':
        return FALLBACK_AUDIO_ENCODER
    if is_text_subtitle(item.stream.codec_id):
        return FALLBACK_SUBTITLE_ENCODER
    # bitmap subtitles cannot become text, keep them as they are
    return 'copy'


def build_remux_cmd(verdict: FileVerdict) -> Optional[str]:
    """Container change only, all streams copied"""
    if not verdict.needs_remux_suggestion:
        return None
    return 'ffmpeg -i {} -map 0 -c copy {}'.format(
        shell_escape(verdict.path), shell_escape(remux_output_name(verdict.path)))


def build_transcode_cmd(verdict: FileVerdict) -> Optional[str]:
    """Re-encode unsupported streams, copy everything else"""
    if not verdict.needs_transcode_suggestion:
        return None

    map_args = []
    codec_args = {'video': [], 'audio': [], 'subtitle': []}
    for item in verdict.streams:
        stype = CATEGORY_SPECIFIERS[item.category]
        if f'0:{stype}' not in map_args:
            map_args.extend(['-map', f'0:{stype}'])
        # per-type stream number, not the file-wide index
        opts = codec_args[item.category]
        opts.append(f'-c:{stype}:{len(opts)} {target_codec(item)}')

    parts = ['ffmpeg', '-i', shell_escape(verdict.path)] + map_args
    for category in ('video', 'audio', 'subtitle'):
        parts.extend(codec_args[category])
    parts.append(shell_escape(transcode_output_name(verdict.path)))
    return ' '.join(parts)
