"""CLI command for generating runtime configs."""

from pathlib import Path
from typing import Optional

import typer

from oci_gen.cli.utils import console, fail, parse_int, split_fields, split_key_value
from oci_gen.utils.errors import OciGenError


def generate_cmd(
    template: Optional[Path] = typer.Option(
        None,
        "--template",
        "-t",
        help="Base runtime config to start from (default: built-in defaults)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (default: stdout)",
    ),
    host_specific: bool = typer.Option(
        False,
        "--host-specific",
        help="Reject capabilities the host kernel does not support",
    ),
    seccomp_only: bool = typer.Option(
        False,
        "--seccomp-only",
        help="Export only the seccomp configuration",
    ),
    hostname: Optional[str] = typer.Option(None, "--hostname", help="Container hostname"),
    rootfs: Optional[str] = typer.Option(None, "--rootfs", help="Root filesystem path"),
    read_only: bool = typer.Option(False, "--read-only", help="Make the root filesystem read-only"),
    args: Optional[list[str]] = typer.Option(
        None,
        "--args",
        help="Command to run; repeat for each argument",
    ),
    env: Optional[list[str]] = typer.Option(None, "--env", "-e", help="Environment variable NAME=value"),
    cwd: Optional[str] = typer.Option(None, "--cwd", help="Working directory"),
    uid: Optional[int] = typer.Option(None, "--uid", help="User ID"),
    gid: Optional[int] = typer.Option(None, "--gid", help="Group ID"),
    groups: Optional[list[int]] = typer.Option(None, "--groups", help="Additional group ID"),
    tty: bool = typer.Option(False, "--tty", help="Allocate a terminal"),
    no_new_privileges: bool = typer.Option(
        False,
        "--no-new-privileges",
        help="Set no_new_privileges for the process",
    ),
    apparmor: Optional[str] = typer.Option(None, "--apparmor", help="AppArmor profile"),
    selinux_label: Optional[str] = typer.Option(None, "--selinux-label", help="SELinux process label"),
    privileged: bool = typer.Option(
        False,
        "--privileged",
        help="Grant all capabilities and remove confinement",
    ),
    cap_add: Optional[list[str]] = typer.Option(None, "--cap-add", help="Capability to add"),
    cap_drop: Optional[list[str]] = typer.Option(None, "--cap-drop", help="Capability to drop"),
    namespaces: Optional[list[str]] = typer.Option(
        None,
        "--ns",
        help="Namespace KIND[:PATH] to add or replace",
    ),
    ns_remove: Optional[list[str]] = typer.Option(None, "--ns-remove", help="Namespace kind to remove"),
    tmpfs: Optional[list[str]] = typer.Option(
        None,
        "--tmpfs",
        help="tmpfs mount DEST[:OPT,OPT...]",
    ),
    bind: Optional[list[str]] = typer.Option(
        None,
        "--bind",
        help="Bind mount SOURCE:DEST[:OPT,OPT...]",
    ),
    mount_cgroups: Optional[str] = typer.Option(
        None,
        "--mount-cgroups",
        help="Mount cgroups (ro, rw, no)",
    ),
    rlimits: Optional[list[str]] = typer.Option(
        None,
        "--rlimit",
        help="Resource limit TYPE:HARD:SOFT",
    ),
    sysctl: Optional[list[str]] = typer.Option(None, "--sysctl", help="Kernel parameter KEY=value"),
    rootfs_propagation: Optional[str] = typer.Option(
        None,
        "--rootfs-propagation",
        help="Rootfs propagation mode",
    ),
    uidmappings: Optional[list[str]] = typer.Option(
        None,
        "--uidmappings",
        help="UID mapping HOST:CONTAINER:SIZE",
    ),
    gidmappings: Optional[list[str]] = typer.Option(
        None,
        "--gidmappings",
        help="GID mapping HOST:CONTAINER:SIZE",
    ),
    annotations: Optional[list[str]] = typer.Option(None, "--label", help="Annotation KEY=value"),
    cgroups_path: Optional[str] = typer.Option(None, "--cgroups-path", help="Cgroups path"),
    cpu_shares: Optional[int] = typer.Option(None, "--cpu-shares", help="CPU shares"),
    cpu_quota: Optional[int] = typer.Option(None, "--cpu-quota", help="CPU quota"),
    cpu_period: Optional[int] = typer.Option(None, "--cpu-period", help="CPU period"),
    cpus: Optional[str] = typer.Option(None, "--cpus", help="CPUs to use (e.g. 0-3)"),
    mems: Optional[str] = typer.Option(None, "--mems", help="Memory nodes to use"),
    memory_limit: Optional[int] = typer.Option(None, "--memory-limit", help="Memory limit in bytes"),
    memory_reservation: Optional[int] = typer.Option(
        None,
        "--memory-reservation",
        help="Memory reservation in bytes",
    ),
    memory_swap: Optional[int] = typer.Option(None, "--memory-swap", help="Memory plus swap limit in bytes"),
    memory_swappiness: Optional[int] = typer.Option(None, "--memory-swappiness", help="Swappiness (0-100)"),
    oom_score_adj: Optional[int] = typer.Option(None, "--oom-score-adj", help="OOM score adjustment"),
    disable_oom_kill: bool = typer.Option(False, "--disable-oom-kill", help="Disable the OOM killer"),
    pids_limit: Optional[int] = typer.Option(None, "--pids-limit", help="Maximum number of processes"),
    net_classid: Optional[int] = typer.Option(None, "--linux-network-classid", help="Network class ID"),
    net_priorities: Optional[list[str]] = typer.Option(
        None,
        "--linux-network-priorities",
        help="Interface priority NAME:PRIORITY",
    ),
    seccomp_default: Optional[str] = typer.Option(
        None,
        "--seccomp-default",
        help="Default seccomp action (kill, trap, errno, trace, allow)",
    ),
    seccomp_default_force: Optional[str] = typer.Option(
        None,
        "--seccomp-default-force",
        help="Default seccomp action, keeping rules that repeat it",
    ),
    seccomp_arch: Optional[list[str]] = typer.Option(
        None,
        "--seccomp-arch",
        help="Seccomp architectures, comma separated",
    ),
    seccomp_allow: Optional[list[str]] = typer.Option(
        None,
        "--seccomp-allow",
        help="Syscalls to allow, comma separated",
    ),
    seccomp_errno: Optional[list[str]] = typer.Option(
        None,
        "--seccomp-errno",
        help="Syscalls that fail with an errno, comma separated",
    ),
    seccomp_kill: Optional[list[str]] = typer.Option(
        None,
        "--seccomp-kill",
        help="Syscalls that kill the process, comma separated",
    ),
    seccomp_trap: Optional[list[str]] = typer.Option(
        None,
        "--seccomp-trap",
        help="Syscalls that raise SIGSYS, comma separated",
    ),
    seccomp_trace: Optional[list[str]] = typer.Option(
        None,
        "--seccomp-trace",
        help="Syscalls reported to a tracer, comma separated",
    ),
    seccomp_rule: Optional[list[str]] = typer.Option(
        None,
        "--seccomp-rule",
        help="Conditional rule ACTION:SYSCALLS:INDEX:VALUE:VALUE2:OP",
    ),
    seccomp_remove: Optional[list[str]] = typer.Option(
        None,
        "--seccomp-remove",
        help="Syscalls whose rules are removed, comma separated",
    ),
    seccomp_remove_all: bool = typer.Option(
        False,
        "--seccomp-remove-all",
        help="Remove all seccomp rules",
    ),
) -> None:
    """
    Generate an OCI runtime config.

    Starts from the built-in defaults or a template, applies every
    option, and writes the result as JSON.

    Example:
        oci-gen generate --cap-add net_admin --ns network:/var/run/netns/web -o config.json
    """
    from oci_gen.core.generator import Generator
    from oci_gen.core.seccomp import SyscallOpts
    from oci_gen.renderers.base import ExportOptions
    from oci_gen.utils.config import get_config

    config = get_config()
    host_specific = host_specific or config.generator.host_specific
    template = template or config.generator.template

    try:
        if template is not None:
            g = Generator.from_file(template, host_specific=host_specific)
        else:
            g = Generator.new(host_specific=host_specific)

        # Root, hostname and annotations
        if rootfs is not None:
            g.set_root_path(rootfs)
        if read_only:
            g.set_root_readonly(True)
        if hostname is not None:
            g.set_hostname(hostname)
        for item in annotations or []:
            key, value = split_key_value(item, "--label")
            g.add_annotation(key, value)

        # Process
        if args:
            g.set_process_args(args)
        for item in env or []:
            name, value = split_key_value(item, "--env")
            g.add_process_env(name, value)
        if cwd is not None:
            g.set_process_cwd(cwd)
        if uid is not None:
            g.set_process_uid(uid)
        if gid is not None:
            g.set_process_gid(gid)
        for group in groups or []:
            g.add_process_additional_gid(group)
        if tty:
            g.set_process_terminal(True)
        if no_new_privileges:
            g.set_process_no_new_privileges(True)
        for item in rlimits or []:
            kind, hard, soft = split_fields(item, "--rlimit", 3)
            g.add_process_rlimits(kind, parse_int(hard, "--rlimit"), parse_int(soft, "--rlimit"))

        # Privileged mode comes before explicit confinement and capability edits
        g.setup_privileged(privileged)
        if apparmor is not None:
            g.set_process_apparmor_profile(apparmor)
        if selinux_label is not None:
            g.set_process_selinux_label(selinux_label)
        for cap in cap_add or []:
            g.add_process_capability(cap)
        for cap in cap_drop or []:
            g.drop_process_capability(cap)

        # Namespaces
        for item in namespaces or []:
            kind, _, path = item.partition(":")
            g.add_or_replace_linux_namespace(kind, path)
        for kind in ns_remove or []:
            g.remove_linux_namespace(kind)

        # Mounts
        for item in tmpfs or []:
            dest, _, opts = item.partition(":")
            g.add_tmpfs_mount(dest, opts.split(",") if opts else [])
        for item in bind or []:
            parts = split_fields(item, "--bind", 3, minimum=2)
            opts = parts[2].split(",") if len(parts) > 2 and parts[2] else []
            g.add_bind_mount(parts[0], parts[1], opts)
        if mount_cgroups is not None:
            g.add_cgroups_mount(mount_cgroups)

        # Linux
        if cgroups_path is not None:
            g.set_linux_cgroups_path(cgroups_path)
        if rootfs_propagation is not None:
            g.set_linux_root_propagation(rootfs_propagation)
        for item in sysctl or []:
            key, value = split_key_value(item, "--sysctl")
            g.add_linux_sysctl(key, value)
        for item in uidmappings or []:
            host_id, container_id, size = (parse_int(v, "--uidmappings") for v in split_fields(item, "--uidmappings", 3))
            g.add_linux_uid_mapping(host_id, container_id, size)
        for item in gidmappings or []:
            host_id, container_id, size = (parse_int(v, "--gidmappings") for v in split_fields(item, "--gidmappings", 3))
            g.add_linux_gid_mapping(host_id, container_id, size)

        # Resources
        if cpu_shares is not None:
            g.set_linux_resources_cpu_shares(cpu_shares)
        if cpu_quota is not None:
            g.set_linux_resources_cpu_quota(cpu_quota)
        if cpu_period is not None:
            g.set_linux_resources_cpu_period(cpu_period)
        if cpus is not None:
            g.set_linux_resources_cpu_cpus(cpus)
        if mems is not None:
            g.set_linux_resources_cpu_mems(mems)
        if memory_limit is not None:
            g.set_linux_resources_memory_limit(memory_limit)
        if memory_reservation is not None:
            g.set_linux_resources_memory_reservation(memory_reservation)
        if memory_swap is not None:
            g.set_linux_resources_memory_swap(memory_swap)
        if memory_swappiness is not None:
            g.set_linux_resources_memory_swappiness(memory_swappiness)
        if oom_score_adj is not None:
            g.set_linux_resources_oom_score_adj(oom_score_adj)
        if disable_oom_kill:
            g.set_linux_resources_disable_oom_killer(True)
        if pids_limit is not None:
            g.set_linux_resources_pids_limit(pids_limit)
        if net_classid is not None:
            g.set_linux_resources_network_class_id(net_classid)
        for item in net_priorities or []:
            name, priority = split_fields(item, "--linux-network-priorities", 2)
            g.add_linux_resources_network_priorities(name, parse_int(priority, "--linux-network-priorities"))

        # Seccomp; skipped entirely when privileged removed the filter
        if not privileged:
            if seccomp_default is not None:
                g.set_default_seccomp_action(seccomp_default)
            if seccomp_default_force is not None:
                g.set_default_seccomp_action_force(seccomp_default_force)
            for item in seccomp_arch or []:
                g.set_seccomp_architecture(item)
            if seccomp_remove_all:
                g.remove_all_seccomp_rules()
            for item in seccomp_remove or []:
                g.remove_seccomp_rule(item)
            for action, values in (
                ("allow", seccomp_allow),
                ("errno", seccomp_errno),
                ("kill", seccomp_kill),
                ("trap", seccomp_trap),
                ("trace", seccomp_trace),
            ):
                for item in values or []:
                    g.set_syscall_action(SyscallOpts(action=action, syscall=item))
            for item in seccomp_rule or []:
                action, syscall, index, value, value_two, operator = split_fields(item, "--seccomp-rule", 6)
                g.set_syscall_action(
                    SyscallOpts(
                        action=action,
                        syscall=syscall,
                        index=index,
                        value=value,
                        value_two=value_two,
                        operator=operator,
                    )
                )

        export = ExportOptions(seccomp=seccomp_only)
        if output is not None:
            g.save_to_file(output, export=export, indent=config.output.indent)
            console.print(f"[green]Runtime config written to {output}[/green]")
        else:
            typer.echo(g.to_json(export=export, indent=config.output.indent))
    except OciGenError as e:
        fail(e)
