#!/usr/bin/env python3
"""
Samsung Frame (2024) TV compatibility checker

Checks containers and video/audio/subtitle streams against what the TV plays
and suggests ffmpeg commands for unsupported files:
- Remux: change the container only, streams are copied
- Transcode: H.264 for video, AAC for audio, SRT for text subtitles
- Bitmap subtitles (PGS, DVD) cannot be fixed by re-encoding

Usage:
  python main.py /path/to/folder [options]
  python main.py /path/to/file.mkv [options]
  python main.py /path/to/folder --exclude '*/Extras' --brief
  python main.py /path/to/folder --skip-ok --skip-unfixable

Requires: ffprobe in PATH
"""

from tvcompat.cli import main

if __name__ == '__main__':
    main()
