"""Terminal renderer for runtime configs."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from oci_gen.models.spec import SpecDocument
from oci_gen.renderers.base import BaseRenderer, OutputFormat, RenderContext


class TerminalRenderer(BaseRenderer):
    """Renderer for rich terminal output.

    Prints a summary of a runtime config: process, mounts, namespaces,
    resources and the seccomp filter.

    Example:
        renderer = TerminalRenderer()
        renderer.render(generator.spec, RenderContext(format=OutputFormat.TERMINAL))
    """

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    @property
    def format(self) -> OutputFormat:
        """The output format this renderer produces."""
        return OutputFormat.TERMINAL

    def render(self, data: Any, context: RenderContext) -> str:
        """Print data to the console.

        Returns:
            Empty string (output is printed to console)
        """
        if isinstance(data, SpecDocument):
            self._render_spec(data)
        else:
            self._console.print(data)
        return ""

    def render_to_file(self, data: Any, context: RenderContext) -> None:
        """Capture the terminal output and write it to a file."""
        if context.output_path is None:
            raise ValueError("output_path must be set in context for file rendering")

        file_console = Console(record=True, force_terminal=context.color)
        original_console = self._console
        self._console = file_console

        try:
            self.render(data, context)
            context.output_path.write_text(file_console.export_text(styles=context.color))
        finally:
            self._console = original_console

    def _render_spec(self, spec: SpecDocument) -> None:
        process = spec.process
        user = process.user
        gids = ",".join(str(g) for g in user.additional_gids or [])

        self._console.print()
        self._console.print(
            Panel(
                f"[bold]Version:[/bold] {spec.oci_version}\n"
                f"[bold]Platform:[/bold] {spec.platform.os}/{spec.platform.arch}\n"
                f"[bold]Hostname:[/bold] {spec.hostname or '-'}\n"
                f"[bold]Root:[/bold] {spec.root.path or '-'}"
                f"{' (read-only)' if spec.root.readonly else ''}",
                title="Runtime Config",
            )
        )

        self._console.print()
        self._console.print("[bold]Process[/bold]")
        self._console.print(f"  args: {' '.join(process.args or []) or '-'}")
        self._console.print(f"  cwd: {process.cwd or '-'}")
        self._console.print(f"  user: {user.uid}:{user.gid}{f' ({gids})' if gids else ''}")
        self._console.print(f"  terminal: {process.terminal}  noNewPrivileges: {process.no_new_privileges}")
        if process.selinux_label:
            self._console.print(f"  selinux: {process.selinux_label}")
        if process.apparmor_profile:
            self._console.print(f"  apparmor: {process.apparmor_profile}")
        if process.capabilities is not None:
            self._console.print(f"  capabilities ({len(process.capabilities)}): {', '.join(process.capabilities)}")
        for rlimit in process.rlimits or []:
            self._console.print(f"  {rlimit.type}: soft={rlimit.soft} hard={rlimit.hard}")

        if spec.mounts:
            self._console.print()
            table = Table(title="Mounts")
            table.add_column("Destination", style="bold")
            table.add_column("Type")
            table.add_column("Source")
            table.add_column("Options")
            for mount in spec.mounts:
                table.add_row(mount.destination, mount.type, mount.source, ",".join(mount.options or []))
            self._console.print(table)

        linux = spec.linux
        if linux is None:
            return

        if linux.namespaces:
            self._console.print()
            table = Table(title="Namespaces")
            table.add_column("Type", style="bold")
            table.add_column("Path")
            for ns in linux.namespaces:
                table.add_row(ns.type.value, ns.path or "[dim]new[/dim]")
            self._console.print(table)

        if linux.resources is not None:
            self._render_resources(linux.resources)

        seccomp = linux.seccomp
        if seccomp is not None:
            self._console.print()
            default = seccomp.default_action.value if seccomp.default_action else "-"
            arches = ", ".join(a.value for a in seccomp.architectures or []) or "-"
            self._console.print(f"[bold]Seccomp[/bold] default={default} architectures={arches}")
            for rule in seccomp.syscalls or []:
                style = "green" if rule.action.value == "SCMP_ACT_ALLOW" else "red"
                self._console.print(f"  [{style}]{rule.action.value}[/{style}] {rule.name}")

    def _render_resources(self, resources: Any) -> None:
        rows: list[tuple[str, str]] = []
        for category in ("cpu", "memory", "pids", "network"):
            section = getattr(resources, category)
            if section is None:
                continue
            for key, value in section.model_dump(by_alias=True, exclude_none=True).items():
                rows.append((f"{category}.{key}", str(value)))
        if resources.disable_oom_killer is not None:
            rows.append(("disableOOMKiller", str(resources.disable_oom_killer)))
        if resources.oom_score_adj is not None:
            rows.append(("oomScoreAdj", str(resources.oom_score_adj)))

        if not rows:
            return
        self._console.print()
        table = Table(title="Resources")
        table.add_column("Setting", style="bold")
        table.add_column("Value")
        for key, value in rows:
            table.add_row(key, value)
        self._console.print(table)
