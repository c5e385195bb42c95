"""
Per-file checking and directory traversal
"""

from .ffmpeg_runner import ProbeError, probe_media
from .file_utils import display_name, has_supported_extension, is_excluded, list_dir
from .media_analyzer import build_verdict
from .models import CheckConfig, Outcome, Summary
from .rich_console import RichOutput


def check_file(path, config: CheckConfig, summary: Summary, output: RichOutput):
    """Probe one file, report it and count the result"""
    if not has_supported_extension(path):
        return None

    name = display_name(path, config.full_path)
    try:
        media = probe_media(path, config.ffprobe)
    except ProbeError as e:
        output.print_probe_error(name, e, brief=config.brief)
        summary.add_result(Outcome.ERROR)
        return Outcome.ERROR

    verdict = build_verdict(media)
    outcome = verdict.outcome
    summary.add_result(outcome)

    if config.brief:
        # fully supported files only count
        if verdict.has_unsupported:
            output.print_brief(verdict, name)
        return outcome

    if config.skip_ok and verdict.all_supported:
        return outcome
    if (config.skip_unfixable and not verdict.all_supported
            and not verdict.can_transcode and verdict.has_unfixable_bitmap_subtitle):
        return outcome

    output.print_verdict(verdict, name)
    return outcome


def scan_dir(dirpath, config: CheckConfig, summary: Summary, output: RichOutput):
    """Depth-first walk, excluded entries are pruned with their subtrees"""
    try:
        entries = list_dir(dirpath)
    except OSError as e:
        output.print_diagnostic(f"Could not open directory: {dirpath} ({e.strerror or e})")
        return

    for entry in entries:
        if is_excluded(entry.path, config.exclude):
            continue
        try:
            is_dir = entry.is_dir()
            is_file = entry.is_file()
        except OSError:
            continue
        if is_dir:
            scan_dir(entry.path, config, summary, output)
        elif is_file:
            check_file(entry.path, config, summary, output)
