"""
ffprobe execution and stream metadata extraction
"""

import json
import re
import shutil
import subprocess
from pathlib import Path

from .models import MediaType, ProbedMedia, StreamInfo

PROBE_ENTRIES = (
    'format=format_name'
    ':stream=index,codec_type,codec_name,codec_tag,codec_tag_string,profile'
    ':stream_tags=language'
)

# libavcodec profile ids for MPEG-4 part 2, ffprobe prints the names
MPEG4_PROFILE_IDS = {
    'Simple Profile': 0,
    'Simple Scalable Profile': 1,
    'Core Profile': 2,
    'Main Profile': 3,
    'N-bit Profile': 4,
    'Scalable Texture Profile': 5,
    'Simple Face Animation Profile': 6,
    'Basic Animated Texture Profile': 7,
    'Hybrid Profile': 8,
    'Advanced Real Time Simple Profile': 9,
    'Core Scalable Profile': 10,
    'Advanced Coding Profile': 11,
    'Advanced Core Profile': 12,
    'Advanced Scalable Texture Profile': 13,
    'Simple Studio Profile': 14,
    'Advanced Simple Profile': 15,
}

MEDIA_TYPES = {
    'video': MediaType.VIDEO,
    'audio': MediaType.AUDIO,
    'subtitle': MediaType.SUBTITLE,
}

_PRINTABLE_TAG = re.compile(r'^[\x20-\x7e]{4}$')


class ProbeError(RuntimeError):
    """ffprobe could not analyze a file"""

    def __init__(self, message: str, code=None):
        super().__init__(message)
        self.message = message
        self.code = code


class ProbeOpenError(ProbeError):
    """The container could not be opened"""


class StreamInfoError(ProbeError):
    """The container opened but stream information could not be read"""


def run_simple(cmd):
    """Run a command and capture its text output"""
    cmd_str = [str(c) for c in cmd]
    p = subprocess.run(cmd_str, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
    return p.returncode, p.stdout, p.stderr


def ffprobe_available(ffprobe_bin: str = 'ffprobe') -> bool:
    return shutil.which(ffprobe_bin) is not None


def map_media_type(codec_type) -> MediaType:
    return MEDIA_TYPES.get(codec_type, MediaType.OTHER)


def parse_codec_tag(stream: dict):
    """Return the 4 character codec tag, None for a zero or binary tag"""
    if stream.get('codec_tag') in (None, '0x0000', '0x00000000'):
        return None
    tag = stream.get('codec_tag_string') or ''
    if not _PRINTABLE_TAG.match(tag):
        return None
    return tag


def parse_profile(value):
    """Map an ffprobe profile (name or number) to the libavcodec profile id"""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    value = str(value).strip()
    if value in MPEG4_PROFILE_IDS:
        return MPEG4_PROFILE_IDS[value]
    try:
        return int(value)
    except ValueError:
        return None


def stream_language(stream: dict) -> str:
    tags = stream.get('tags') or {}
    return tags.get('language') or 'und'


def parse_stream(stream: dict) -> StreamInfo:
    media_type = map_media_type(stream.get('codec_type'))
    is_video = media_type == MediaType.VIDEO
    return StreamInfo(
        index=int(stream.get('index', 0)),
        media_type=media_type,
        codec_id=stream.get('codec_name') or 'unknown',
        codec_tag=parse_codec_tag(stream) if is_video else None,
        profile=parse_profile(stream.get('profile')) if is_video else None,
        language=stream_language(stream),
    )


def parse_probe_output(path: Path, out: str, code: int = 0) -> ProbedMedia:
    """Build a ProbedMedia from ffprobe JSON output"""
    try:
        data = json.loads(out or '')
    except json.JSONDecodeError as e:
        raise StreamInfoError(f'ffprobe output was not valid JSON: {e}', code=code)

    if not isinstance(data, dict) or 'streams' not in data or 'format' not in data:
        raise StreamInfoError('no stream information found', code=code)

    streams = data.get('streams') or []
    fmt = data.get('format') or {}
    return ProbedMedia(
        path=path,
        container_name=fmt.get('format_name') or 'unknown',
        streams=[parse_stream(s) for s in streams if isinstance(s, dict)],
    )


def probe_media(path: Path, ffprobe_bin: str = 'ffprobe') -> ProbedMedia:
    """Get container and stream information from a media file"""
    cmd = [
        ffprobe_bin, '-v', 'error',
        '-show_entries', PROBE_ENTRIES,
        '-of', 'json',
        str(path)
    ]
    try:
        code, out, err = run_simple(cmd)
    except OSError as e:
        raise ProbeOpenError(f'ffprobe exec error: {e}', code=e.errno)

    if code != 0:
        lines = (err or '').strip().splitlines()
        message = lines[-1] if lines else f'ffprobe exited {code}'
        # ffprobe prefixes errors with the input path
        prefix = f'{path}: '
        if message.startswith(prefix):
            message = message[len(prefix):]
        raise ProbeOpenError(message, code=code)

    return parse_probe_output(path, out, code)
