"""
Command line entry point for the Samsung Frame TV compatibility checker
"""

import argparse
import os
import stat
import sys

from pydantic import ValidationError

from .ffmpeg_runner import ffprobe_available
from .models import CheckConfig, Summary
from .processor import check_file, scan_dir
from .rich_console import RichOutput, make_console

USAGE_EXIT_CODE = 1


class ArgumentParser(argparse.ArgumentParser):
    """argparse with usage errors exiting 1"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f'{self.prog}: error: {message}\n')


def build_arg_parser():
    ap = ArgumentParser(
        prog='tv-compat-check',
        description='Check video files against Samsung Frame (2024) TV codec and container support '
                    'and suggest ffmpeg remux/transcode commands.'
    )
    ap.add_argument('path', nargs='?', help='File or directory (scanned recursively)')
    ap.add_argument('--exclude', action='append', default=[], metavar='GLOB',
                    help='Skip paths matching this shell glob (repeatable)')
    ap.add_argument('--fullpath', action='store_true', help='Show the full path instead of the file name')
    ap.add_argument('--brief', action='store_true',
                    help='One line per unsupported file, no summary')
    ap.add_argument('--skip-ok', action='store_true', help='Do not show fully supported files')
    ap.add_argument('--skip-unfixable', action='store_true',
                    help='Do not show files whose only problem is a bitmap subtitle')
    ap.add_argument('--no-color', action='store_true', help='Disable colored output')
    ap.add_argument('--ffprobe', default='ffprobe', metavar='PATH',
                    help='ffprobe executable (default: ffprobe)')
    return ap


def parse_arguments(argv=None):
    """Parse command line arguments into a CheckConfig"""
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    if not args.path:
        print('No file or directory specified.', file=sys.stderr)
        ap.print_usage(sys.stderr)
        sys.exit(USAGE_EXIT_CODE)

    try:
        config = CheckConfig(
            exclude=args.exclude,
            full_path=args.fullpath,
            brief=args.brief,
            skip_ok=args.skip_ok,
            skip_unfixable=args.skip_unfixable,
            no_color=args.no_color,
            ffprobe=args.ffprobe,
        )
    except ValidationError as e:
        ap.error(str(e))

    return args.path, config


def main(argv=None):
    root, config = parse_arguments(argv)
    output = RichOutput(
        console=make_console(no_color=config.no_color),
        err_console=make_console(no_color=config.no_color, stderr=True),
    )

    try:
        st = os.stat(root)
    except OSError as e:
        output.print_error(f"Could not stat '{root}': {e.strerror or e}")
        sys.exit(USAGE_EXIT_CODE)

    if not (stat.S_ISDIR(st.st_mode) or stat.S_ISREG(st.st_mode)):
        output.print_error(f"'{root}' is not a regular file or directory.")
        sys.exit(USAGE_EXIT_CODE)

    if not ffprobe_available(config.ffprobe):
        output.print_error(f'ffprobe not found: {config.ffprobe}. Please make it available in PATH.')
        sys.exit(USAGE_EXIT_CODE)

    summary = run_check(root, config, output, is_dir=stat.S_ISDIR(st.st_mode))

    if not config.brief:
        output.print_summary(summary)


def run_check(root, config: CheckConfig, output: RichOutput, is_dir: bool) -> Summary:
    """Check a file or walk a directory, returning the run counters"""
    summary = Summary()
    if is_dir:
        scan_dir(root, config, summary, output)
    else:
        check_file(root, config, summary, output)
    return summary


if __name__ == '__main__':
    main()
