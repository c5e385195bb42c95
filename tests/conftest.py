"""
pytest configuration and fixtures for the compatibility checker tests

Unit tests build probe results directly. Integration tests generate small
media files with ffmpeg and are skipped when ffmpeg/ffprobe are missing.
"""

import io
import pytest
import subprocess
from pathlib import Path
import sys

# Add the project root to path for importing
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))
from tvcompat import RichOutput, StreamInfo, ProbedMedia, MediaType, make_console
from generate_test_files import generate_test_files


class CapturedOutput(RichOutput):
    """RichOutput writing plain text into buffers"""

    def __init__(self):
        self.out_buffer = io.StringIO()
        self.err_buffer = io.StringIO()
        super().__init__(
            console=make_console(no_color=True, file=self.out_buffer),
            err_console=make_console(no_color=True, file=self.err_buffer),
        )

    @property
    def text(self) -> str:
        return self.out_buffer.getvalue()

    @property
    def err_text(self) -> str:
        return self.err_buffer.getvalue()


@pytest.fixture
def output():
    """Report output captured as plain text"""
    return CapturedOutput()


@pytest.fixture
def make_stream():
    """Factory for StreamInfo records"""
    def _make_stream(index, media_type, codec_id, codec_tag=None, profile=None, language='und'):
        return StreamInfo(
            index=index,
            media_type=MediaType(media_type),
            codec_id=codec_id,
            codec_tag=codec_tag,
            profile=profile,
            language=language,
        )
    return _make_stream


@pytest.fixture
def make_media(make_stream):
    """Factory for ProbedMedia: streams given as (media_type, codec_id[, extra kwargs])"""
    def _make_media(path, container_name, *streams):
        infos = []
        for i, entry in enumerate(streams):
            media_type, codec_id = entry[0], entry[1]
            extra = entry[2] if len(entry) > 2 else {}
            infos.append(make_stream(i, media_type, codec_id, **extra))
        return ProbedMedia(path=Path(path), container_name=container_name, streams=infos)
    return _make_media


@pytest.fixture(scope="session")
def check_ffmpeg():
    """Check if ffmpeg is available before running tests"""
    try:
        subprocess.run(['ffmpeg', '-version'], capture_output=True, check=True)
        subprocess.run(['ffprobe', '-version'], capture_output=True, check=True)
    except (subprocess.CalledProcessError, FileNotFoundError):
        pytest.skip("ffmpeg and/or ffprobe not available")


@pytest.fixture(scope="session")
def video_files_dir(check_ffmpeg, tmp_path_factory):
    """Directory tree of generated sample files"""
    video_dir = tmp_path_factory.mktemp('video_files')
    if not generate_test_files(video_dir):
        pytest.skip("Could not generate sample video files with ffmpeg")
    return video_dir


@pytest.fixture
def run_checker():
    """Fixture to run the checker as a subprocess"""
    def _run_checker(args: list, expect_error: bool = False):
        script_path = Path(__file__).parent.parent / 'main.py'
        cmd = [sys.executable, str(script_path)] + [str(a) for a in args]
        result = subprocess.run(cmd, capture_output=True, text=True)

        if not expect_error and result.returncode != 0:
            pytest.fail(f"Checker failed: {result.stderr}")

        return result

    return _run_checker
