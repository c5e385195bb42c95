"""
Test ffprobe output parsing and error mapping
"""

import json
import pytest
from pathlib import Path
from unittest.mock import patch

from tvcompat import MediaType, ProbeOpenError, StreamInfoError, probe_media
from tvcompat.ffmpeg_runner import parse_codec_tag, parse_profile, map_media_type


def ffprobe_json(format_name, *streams):
    return json.dumps({'streams': list(streams), 'format': {'format_name': format_name}})


class TestProbeMedia:

    def test_streams_parsed(self):
        out = ffprobe_json(
            'avi',
            {'index': 0, 'codec_type': 'video', 'codec_name': 'mpeg4',
             'profile': 'Advanced Simple Profile', 'codec_tag_string': 'XVID', 'codec_tag': '0x44495658'},
            {'index': 1, 'codec_type': 'audio', 'codec_name': 'mp3', 'profile': 'unknown',
             'codec_tag_string': 'U[0][0][0]', 'codec_tag': '0x0055', 'tags': {'language': 'eng'}},
            {'index': 2, 'codec_type': 'data', 'codec_name': 'bin_data'},
        )
        with patch('tvcompat.ffmpeg_runner.run_simple', return_value=(0, out, '')) as mock_run:
            media = probe_media(Path('/m/old.avi'))

        cmd = mock_run.call_args[0][0]
        assert cmd[0] == 'ffprobe'
        assert cmd[-1] == '/m/old.avi'
        assert media.container_name == 'avi'

        video, audio, data = media.streams
        assert video.media_type == MediaType.VIDEO
        assert video.codec_tag == 'XVID'
        assert video.profile == 15
        assert video.language == 'und'
        assert audio.media_type == MediaType.AUDIO
        assert audio.codec_tag is None
        assert audio.profile is None
        assert audio.language == 'eng'
        assert data.media_type == MediaType.OTHER

    def test_custom_ffprobe_binary(self):
        out = ffprobe_json('matroska,webm')
        with patch('tvcompat.ffmpeg_runner.run_simple', return_value=(0, out, '')) as mock_run:
            probe_media(Path('x.mkv'), '/opt/ffmpeg/bin/ffprobe')

        assert mock_run.call_args[0][0][0] == '/opt/ffmpeg/bin/ffprobe'

    def test_open_failure(self):
        err = 'x.mkv: Invalid data found when processing input\n'
        with patch('tvcompat.ffmpeg_runner.run_simple', return_value=(1, '{}', err)):
            with pytest.raises(ProbeOpenError) as exc_info:
                probe_media(Path('x.mkv'))

        assert exc_info.value.code == 1
        assert exc_info.value.message == 'Invalid data found when processing input'

    def test_missing_executable(self):
        with patch('tvcompat.ffmpeg_runner.run_simple', side_effect=FileNotFoundError(2, 'No such file')):
            with pytest.raises(ProbeOpenError):
                probe_media(Path('x.mkv'), 'no-such-ffprobe')

    @pytest.mark.parametrize("out", ['', 'not json', '{"format": {}}', '[]'])
    def test_stream_info_failure(self, out):
        with patch('tvcompat.ffmpeg_runner.run_simple', return_value=(0, out, '')):
            with pytest.raises(StreamInfoError) as exc_info:
                probe_media(Path('x.mkv'))
        assert exc_info.value.code == 0

    def test_missing_format_name(self):
        out = json.dumps({'streams': [], 'format': {}})
        with patch('tvcompat.ffmpeg_runner.run_simple', return_value=(0, out, '')):
            media = probe_media(Path('x.mkv'))

        assert media.container_name == 'unknown'
        assert media.streams == []


class TestFieldMapping:

    @pytest.mark.parametrize("value,expected", [
        ('Advanced Simple Profile', 15),
        ('Simple Studio Profile', 14),
        ('Simple Profile', 0),
        ('3', 3),
        (2, 2),
        ('unknown', None),
        ('High', None),
        (None, None),
    ])
    def test_parse_profile(self, value, expected):
        assert parse_profile(value) == expected

    @pytest.mark.parametrize("stream,expected", [
        ({'codec_tag_string': 'DIVX', 'codec_tag': '0x58564944'}, 'DIVX'),
        ({'codec_tag_string': '[0][0][0][0]', 'codec_tag': '0x0000'}, None),
        ({'codec_tag_string': 'avc1', 'codec_tag': '0x31637661'}, 'avc1'),
        ({'codec_tag_string': '[27][0][0][0]', 'codec_tag': '0x001b'}, None),
        ({}, None),
    ])
    def test_parse_codec_tag(self, stream, expected):
        assert parse_codec_tag(stream) == expected

    @pytest.mark.parametrize("codec_type,expected", [
        ('video', MediaType.VIDEO),
        ('audio', MediaType.AUDIO),
        ('subtitle', MediaType.SUBTITLE),
        ('attachment', MediaType.OTHER),
        ('data', MediaType.OTHER),
        (None, MediaType.OTHER),
    ])
    def test_map_media_type(self, codec_type, expected):
        assert map_media_type(codec_type) == expected
