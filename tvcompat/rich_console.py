"""
Rich console output for compatibility reports
"""

from typing import Optional
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from .ffmpeg_builder import build_remux_cmd, build_transcode_cmd
from .ffmpeg_runner import ProbeError, ProbeOpenError
from .models import FileVerdict, Summary

SEPARATOR = "----------------"


def make_console(no_color: bool = False, stderr: bool = False, file=None) -> Console:
    """Console without highlighting, emoji codes or wrapping, commands stay copy-pasteable"""
    kwargs = dict(stderr=stderr, highlight=False, emoji=False, soft_wrap=True, file=file)
    if no_color:
        kwargs['color_system'] = None
    return Console(**kwargs)


def verdict_label(supported: bool) -> str:
    return "[green]OK[/green]" if supported else "[red]NOT SUPPORTED[/red]"


class RichOutput:
    """Rich console output manager"""

    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None):
        self.console = console or make_console()
        self.err_console = err_console or make_console(stderr=True)

    def print_verdict(self, verdict: FileVerdict, name: str):
        """Print the verbose tree for one file"""
        out = self.console
        out.print(f"{SEPARATOR}\n")
        out.print(escape(name))
        out.print(f"  container: {escape(verdict.container_name)} | "
                  f"{verdict_label(verdict.container_supported)}")

        for item in verdict.streams:
            s = item.stream
            out.print(f"    [{s.index}] {item.category} | {escape(s.codec_id)} | "
                      f"{escape(s.language)} | {verdict_label(item.supported)}")
            if not item.supported and item.bitmap_subtitle:
                out.print(f"[yellow]  Note: Subtitle stream {s.index} ({escape(s.codec_id)}) "
                          f"is bitmap-based and cannot be converted to srt. It will be copied "
                          f"as-is (may not be supported on your TV).[/yellow]")

        overall = ("[green]ALL TRACKS SUPPORTED[/green]" if verdict.all_supported
                   else "[red]SOME TRACKS UNSUPPORTED[/red]")
        out.print(f"  overall: {overall}")

        remux_cmd = build_remux_cmd(verdict)
        if remux_cmd:
            out.print("\n  Suggested remuxing command:")
            out.print(f"    {escape(remux_cmd)}")
            out.print("[yellow]    (This changes only the container; streams are copied "
                      "without re-encoding)[/yellow]")

        transcode_cmd = build_transcode_cmd(verdict)
        if transcode_cmd:
            out.print("\n  Suggested ffmpeg command:")
            out.print(f"    {escape(transcode_cmd)}")

        out.print()

    def format_brief(self, verdict: FileVerdict, name: str) -> str:
        """One markup line listing the container (if unsupported) and every stream"""
        parts = [f"{escape(name)}:"]
        if not verdict.container_supported:
            parts.append(f"[red]{escape(f'[container:{verdict.container_name}]')}[/red]")
        for item in verdict.streams:
            s = item.stream
            color = "green" if item.supported else "red"
            tag = escape(f"[{s.index}:{item.category}:{s.codec_id}:{s.language}]")
            parts.append(f"[{color}]{tag}[/{color}]")
        return "".join(parts)

    def print_brief(self, verdict: FileVerdict, name: str):
        self.console.print(self.format_brief(verdict, name))

    def print_probe_error(self, name: str, error: ProbeError, brief: bool = False):
        """Single yellow line for a file ffprobe could not analyze"""
        if not brief:
            detail = error.message
        elif isinstance(error, ProbeOpenError):
            detail = f"could not open ({error.code})"
        else:
            detail = f"could not read stream info ({error.code})"
        self.console.print(f"{escape(name)}: [yellow]error: {escape(detail)}[/yellow]")

    def print_summary(self, summary: Summary):
        """Print end-of-run counters"""
        table = Table(show_header=True, header_style="bold magenta", box=box.ROUNDED)
        table.add_column("Result", style="cyan")
        table.add_column("Count", justify="right")

        table.add_row("Total checked", str(summary.total))
        table.add_row("OK", f"[green]{summary.ok}[/green]")
        table.add_row("NOT SUPPORTED", f"[red]{summary.not_supported}[/red]")
        table.add_row("Errors", f"[yellow]{summary.errors}[/yellow]")

        self.console.print()
        self.console.print(Panel(
            table,
            title="[bold blue]Summary[/bold blue]",
            border_style="blue",
            expand=False
        ))

    def print_diagnostic(self, message: str):
        """Print a diagnostic on stderr"""
        self.err_console.print(f"[yellow]{escape(message)}[/yellow]")

    def print_error(self, message: str):
        self.err_console.print(f"[bold red]{escape(message)}[/bold red]")
