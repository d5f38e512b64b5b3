"""Generator for assembling OCI runtime configs."""

from __future__ import annotations

import io
from pathlib import Path
from typing import IO

from oci_gen.core import seccomp
from oci_gen.core.capabilities import (
    CapabilityRegistry,
    check_capability,
    get_default_registry,
    privileged_capabilities,
)
from oci_gen.core.seccomp import SyscallOpts
from oci_gen.core.validation import (
    parse_cgroup_mount_mode,
    parse_namespace_type,
    parse_rootfs_propagation,
)
from oci_gen.knowledge.defaults import (
    DEFAULT_ARGS,
    DEFAULT_CAPABILITIES,
    DEFAULT_ENV,
    DEFAULT_HOSTNAME,
    DEFAULT_NAMESPACES,
    get_default_mounts,
    get_default_rlimits,
    get_host_platform,
)
from oci_gen.knowledge.seccomp_profile import get_default_profile
from oci_gen.models.seccomp import LinuxSeccomp
from oci_gen.models.spec import (
    CPU,
    OCI_VERSION,
    CgroupMountMode,
    DeviceCgroup,
    Hook,
    IDMapping,
    InterfacePriority,
    Linux,
    Memory,
    Mount,
    Namespace,
    NamespaceType,
    Network,
    Pids,
    Platform,
    Process,
    Resources,
    Rlimit,
    RootfsPropagation,
    SpecDocument,
    prune_empty,
)
from oci_gen.renderers.base import ExportOptions
from oci_gen.renderers.json import decode_spec, encode_spec
from oci_gen.utils.errors import SpecIOError, TemplateNotFoundError, ValidationError
from oci_gen.utils.logging import get_logger, get_logger_with_context

logger = get_logger("generator")


def _check_unsigned(field: str, *values: int) -> None:
    for value in values:
        if value < 0:
            logger.warning(f"Rejected negative {field} {value}")
            raise ValidationError(f"{field} must not be negative, got {value}", field=field)


class Generator:
    """Mutation and validation facade over one runtime config.

    Every setter allocates the optional branches it writes into, so callers
    never have to care whether ``linux``, ``linux.resources`` or
    ``linux.seccomp`` exist yet. Clear and remove operations on branches
    that do not exist are no-ops. Empty optional branches are pruned right
    before the config is saved.

    Example:
        g = Generator.new()
        g.set_hostname("web")
        g.add_process_capability("net_admin")
        g.add_or_replace_linux_namespace("network", "/var/run/netns/web")
        g.add_bind_mount("/srv/data", "/data", [])
        g.save_to_file("config.json")

    Not thread safe; a Generator must be used from one thread at a time.
    """

    def __init__(
        self,
        spec: SpecDocument | None = None,
        host_specific: bool = False,
        capabilities: CapabilityRegistry | None = None,
    ) -> None:
        """Wrap a runtime config.

        Args:
            spec: Config to edit in place; allocated on first write if None
            host_specific: Reject capabilities the host kernel does not support
            capabilities: Capability registry (defaults to the Linux table)
        """
        self._spec = spec
        self.host_specific = host_specific
        self._capabilities = capabilities or get_default_registry()

    @classmethod
    def new(
        cls,
        host_specific: bool = False,
        capabilities: CapabilityRegistry | None = None,
    ) -> "Generator":
        """Create a Generator holding the default runtime config."""
        host = get_host_platform()
        linux = Linux(
            resources=Resources(devices=[DeviceCgroup(allow=False, access="rwm")]),
            namespaces=[Namespace(type=NamespaceType(ns)) for ns in DEFAULT_NAMESPACES],
            seccomp=get_default_profile(host["arch"]),
        )
        spec = SpecDocument(
            oci_version=OCI_VERSION,
            platform=Platform(os=host["os"], arch=host["arch"]),
            process=Process(
                args=list(DEFAULT_ARGS),
                env=list(DEFAULT_ENV),
                cwd="/",
                capabilities=list(DEFAULT_CAPABILITIES),
                rlimits=[Rlimit(**rlimit) for rlimit in get_default_rlimits()],
            ),
            hostname=DEFAULT_HOSTNAME,
            mounts=[Mount(**mount) for mount in get_default_mounts()],
            linux=linux,
        )
        return cls(spec, host_specific=host_specific, capabilities=capabilities)

    @classmethod
    def from_spec(
        cls,
        spec: SpecDocument,
        host_specific: bool = False,
        capabilities: CapabilityRegistry | None = None,
    ) -> "Generator":
        """Create a Generator editing an existing runtime config in place."""
        return cls(spec, host_specific=host_specific, capabilities=capabilities)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        host_specific: bool = False,
        capabilities: CapabilityRegistry | None = None,
    ) -> "Generator":
        """Load a template runtime config from a JSON file.

        Raises:
            TemplateNotFoundError: If the file does not exist
            SpecIOError: If the file cannot be read
            DecodeError: If the file is not a valid runtime config
        """
        path = Path(path)
        log = get_logger_with_context("generator", path=str(path))
        try:
            with path.open("rb") as f:
                generator = cls.from_template(f, host_specific=host_specific, capabilities=capabilities)
        except FileNotFoundError:
            log.warning("Template not found")
            raise TemplateNotFoundError(str(path)) from None
        except OSError as e:
            raise SpecIOError(f"Failed to read template {path}: {e}", path=str(path)) from e
        log.debug("Loaded template file")
        return generator

    @classmethod
    def from_template(
        cls,
        stream: IO[str] | IO[bytes],
        host_specific: bool = False,
        capabilities: CapabilityRegistry | None = None,
    ) -> "Generator":
        """Load a template runtime config from a text or binary stream.

        Raises:
            DecodeError: If the stream is not a valid runtime config
        """
        name = getattr(stream, "name", None)
        source = str(name) if name is not None else None
        spec = decode_spec(stream.read(), source=source)
        logger.debug(f"Loaded template from {source or 'stream'}")
        return cls(spec, host_specific=host_specific, capabilities=capabilities)

    @property
    def spec(self) -> SpecDocument | None:
        """The runtime config being edited. Never allocates."""
        return self._spec

    def set_spec(self, spec: SpecDocument | None) -> None:
        """Replace the runtime config being edited."""
        self._spec = spec

    # Saving

    def to_json(self, export: ExportOptions | None = None, indent: int | str | None = "\t") -> str:
        """Prune empty branches and encode the runtime config as JSON."""
        spec = self._init_spec()
        prune_empty(spec)
        return encode_spec(spec, export, indent)

    def save(
        self,
        stream: IO[str] | IO[bytes],
        export: ExportOptions | None = None,
        indent: int | str | None = "\t",
    ) -> None:
        """Write the runtime config to a stream.

        Raises:
            SerializationError: If the config cannot be encoded
            SpecIOError: If writing fails
        """
        data = self.to_json(export, indent)
        try:
            if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
                stream.write(data.encode("utf-8"))
            else:
                stream.write(data)
        except OSError as e:
            raise SpecIOError(f"Failed to write runtime config: {e}") from e

    def save_to_file(
        self,
        path: str | Path,
        export: ExportOptions | None = None,
        indent: int | str | None = "\t",
    ) -> None:
        """Write the runtime config to a file, replacing it.

        Raises:
            SerializationError: If the config cannot be encoded
            SpecIOError: If the file cannot be written
        """
        data = self.to_json(export, indent)
        try:
            Path(path).write_text(data, encoding="utf-8")
        except OSError as e:
            raise SpecIOError(f"Failed to write {path}: {e}", path=str(path)) from e
        get_logger_with_context("generator", path=str(path)).debug("Saved runtime config")

    # Lazy initialization

    def _init_spec(self) -> SpecDocument:
        if self._spec is None:
            self._spec = SpecDocument()
        return self._spec

    def _init_annotations(self) -> dict[str, str]:
        spec = self._init_spec()
        if spec.annotations is None:
            spec.annotations = {}
        return spec.annotations

    def _init_linux(self) -> Linux:
        spec = self._init_spec()
        if spec.linux is None:
            spec.linux = Linux()
        return spec.linux

    def _init_linux_sysctl(self) -> dict[str, str]:
        linux = self._init_linux()
        if linux.sysctl is None:
            linux.sysctl = {}
        return linux.sysctl

    def _init_linux_seccomp(self) -> LinuxSeccomp:
        linux = self._init_linux()
        if linux.seccomp is None:
            linux.seccomp = LinuxSeccomp()
        return linux.seccomp

    def _init_linux_resources(self) -> Resources:
        linux = self._init_linux()
        if linux.resources is None:
            linux.resources = Resources()
        return linux.resources

    def _init_linux_resources_cpu(self) -> CPU:
        resources = self._init_linux_resources()
        if resources.cpu is None:
            resources.cpu = CPU()
        return resources.cpu

    def _init_linux_resources_memory(self) -> Memory:
        resources = self._init_linux_resources()
        if resources.memory is None:
            resources.memory = Memory()
        return resources.memory

    def _init_linux_resources_network(self) -> Network:
        resources = self._init_linux_resources()
        if resources.network is None:
            resources.network = Network()
        return resources.network

    def _init_linux_resources_pids(self) -> Pids:
        resources = self._init_linux_resources()
        if resources.pids is None:
            resources.pids = Pids()
        return resources.pids

    # Top-level fields

    def set_version(self, version: str) -> None:
        """Set the OCI runtime specification version (ociVersion)."""
        self._init_spec().oci_version = version

    def set_root_path(self, path: str) -> None:
        """Set the root filesystem path, relative to the bundle or absolute."""
        self._init_spec().root.path = path

    def set_root_readonly(self, readonly: bool) -> None:
        """Mount the root filesystem read-only (or read-write)."""
        self._init_spec().root.readonly = readonly

    def set_hostname(self, hostname: str) -> None:
        """Set the container hostname."""
        self._init_spec().hostname = hostname

    def set_platform_os(self, os: str) -> None:
        """Set the platform operating system, e.g. "linux"."""
        self._init_spec().platform.os = os

    def set_platform_arch(self, arch: str) -> None:
        """Set the platform architecture in Go notation, e.g. "amd64"."""
        self._init_spec().platform.arch = arch

    def clear_annotations(self) -> None:
        """Remove all annotations; a config without any is left untouched."""
        if self._spec is None:
            return
        self._spec.annotations = {}

    def add_annotation(self, key: str, value: str) -> None:
        """Set an annotation, replacing any existing value for key.

        Args:
            key: Annotation key, conventionally reverse-DNS (org.example.owner)
            value: Annotation value
        """
        self._init_annotations()[key] = value

    def remove_annotation(self, key: str) -> None:
        """Remove an annotation; a missing key is a no-op."""
        if self._spec is None or self._spec.annotations is None:
            return
        self._spec.annotations.pop(key, None)

    # Process

    def set_process_uid(self, uid: int) -> None:
        """Set the user ID the process runs as.

        Raises:
            ValidationError: If uid is negative
        """
        _check_unsigned("uid", uid)
        self._init_spec().process.user.uid = uid

    def set_process_gid(self, gid: int) -> None:
        """Set the group ID the process runs as.

        Raises:
            ValidationError: If gid is negative
        """
        _check_unsigned("gid", gid)
        self._init_spec().process.user.gid = gid

    def set_process_cwd(self, cwd: str) -> None:
        """Set the working directory of the process."""
        self._init_spec().process.cwd = cwd

    def set_process_no_new_privileges(self, enabled: bool) -> None:
        self._init_spec().process.no_new_privileges = enabled

    def set_process_terminal(self, enabled: bool) -> None:
        self._init_spec().process.terminal = enabled

    def set_process_apparmor_profile(self, profile: str) -> None:
        """Set the AppArmor profile the process is confined by."""
        self._init_spec().process.apparmor_profile = profile

    def set_process_selinux_label(self, label: str) -> None:
        """Set the SELinux label of the process."""
        self._init_spec().process.selinux_label = label

    def set_process_args(self, args: list[str]) -> None:
        """Set the command and its arguments.

        Args:
            args: argv of the process; the list is copied
        """
        self._init_spec().process.args = list(args)

    def clear_process_env(self) -> None:
        """Remove all environment variables."""
        if self._spec is None:
            return
        self._spec.process.env = []

    def add_process_env(self, name: str, value: str) -> None:
        """Set an environment variable, replacing an existing entry for name.

        Args:
            name: Variable name
            value: Variable value; stored as "name=value"
        """
        process = self._init_spec().process
        entry = f"{name}={value}"
        if process.env is None:
            process.env = []
        for i, existing in enumerate(process.env):
            if existing.startswith(f"{name}="):
                process.env[i] = entry
                return
        process.env.append(entry)

    def add_process_rlimits(self, rlimit_type: str, hard: int, soft: int) -> None:
        """Set an rlimit, updating the existing entry of the same type in place.

        Args:
            rlimit_type: Limit type, e.g. "RLIMIT_NOFILE"
            hard: Hard limit
            soft: Soft limit

        Raises:
            ValidationError: If either limit is negative
        """
        _check_unsigned("rlimit", hard, soft)

        process = self._init_spec().process
        if process.rlimits is None:
            process.rlimits = []
        for rlimit in process.rlimits:
            if rlimit.type == rlimit_type:
                rlimit.hard = hard
                rlimit.soft = soft
                return
        process.rlimits.append(Rlimit(type=rlimit_type, hard=hard, soft=soft))

    def remove_process_rlimits(self, rlimit_type: str) -> None:
        """Remove the rlimit of a type; a type not present is a no-op."""
        if self._spec is None or self._spec.process.rlimits is None:
            return
        rlimits = self._spec.process.rlimits
        for i, rlimit in enumerate(rlimits):
            if rlimit.type == rlimit_type:
                del rlimits[i]
                return

    def clear_process_rlimits(self) -> None:
        """Remove all rlimits, leaving an explicitly empty list."""
        if self._spec is None:
            return
        self._spec.process.rlimits = []

    def clear_process_additional_gids(self) -> None:
        if self._spec is None:
            return
        self._spec.process.user.additional_gids = []

    def add_process_additional_gid(self, gid: int) -> None:
        """Add a supplementary group; adding one already present is a no-op.

        Raises:
            ValidationError: If gid is negative
        """
        _check_unsigned("additional gid", gid)

        user = self._init_spec().process.user
        if user.additional_gids is None:
            user.additional_gids = []
        if gid not in user.additional_gids:
            user.additional_gids.append(gid)

    # Capabilities

    def clear_process_capabilities(self) -> None:
        if self._spec is None:
            return
        self._spec.process.capabilities = []

    def add_process_capability(self, capability: str) -> None:
        """Grant a capability; adding one that is already present is a no-op.

        Args:
            capability: Name in any case, with or without the CAP_ prefix

        Raises:
            ValidationError: If the capability is unknown
            HostUnsupportedCapabilityError: If host_specific is set and the
                host kernel does not support the capability
        """
        name = check_capability(capability, self._capabilities, self.host_specific)

        process = self._init_spec().process
        if process.capabilities is None:
            process.capabilities = []
        if any(cap.upper() == name for cap in process.capabilities):
            return
        process.capabilities.append(name)
        logger.debug(f"Added capability {name}")

    def drop_process_capability(self, capability: str) -> None:
        """Remove a capability; dropping one that is not granted is a no-op.

        Raises:
            ValidationError: If the capability is unknown
            HostUnsupportedCapabilityError: If host_specific is set and the
                host kernel does not support the capability
        """
        name = check_capability(capability, self._capabilities, self.host_specific)

        if self._spec is None or self._spec.process.capabilities is None:
            return
        caps = self._spec.process.capabilities
        for i, cap in enumerate(caps):
            if cap.upper() == name:
                del caps[i]
                logger.debug(f"Dropped capability {name}")
                return

    def setup_privileged(self, privileged: bool) -> None:
        """Make the container privileged.

        Grants every known capability (only those the host supports when
        host_specific is set) and removes all confinement: the SELinux
        label, the AppArmor profile and the seccomp filter. Passing False
        does nothing; it does not restore an earlier configuration.
        """
        if not privileged:
            return

        caps = privileged_capabilities(self._capabilities, self.host_specific)
        spec = self._init_spec()
        linux = self._init_linux()

        spec.process.capabilities = caps
        spec.process.selinux_label = None
        spec.process.apparmor_profile = None
        linux.seccomp = None
        logger.debug(f"Privileged mode: granted {len(caps)} capabilities, confinement removed")

    # Mounts

    def _append_mount(self, mount: Mount) -> None:
        spec = self._init_spec()
        if spec.mounts is None:
            spec.mounts = []
        spec.mounts.append(mount)
        logger.debug(f"Added {mount.type} mount at {mount.destination}")

    def add_tmpfs_mount(self, dest: str, options: list[str] | None) -> None:
        """Append a tmpfs mount with the given options, unchanged."""
        self._append_mount(
            Mount(
                destination=dest,
                type="tmpfs",
                source="tmpfs",
                options=list(options) if options is not None else None,
            )
        )

    def add_cgroups_mount(self, mode: str | CgroupMountMode) -> None:
        """Append a cgroup filesystem mount.

        Args:
            mode: "ro" or "rw"; "no" adds nothing

        Raises:
            ValidationError: For any other mode
        """
        mount_mode = parse_cgroup_mount_mode(mode)
        if mount_mode is CgroupMountMode.DISABLED:
            return

        self._append_mount(
            Mount(
                destination="/sys/fs/cgroup",
                type="cgroup",
                source="cgroup",
                options=["nosuid", "noexec", "nodev", "relatime", mount_mode.value],
            )
        )

    def add_bind_mount(self, source: str, dest: str, options: list[str] | None) -> None:
        """Append a bind mount.

        Without options the mount is read-write. A ``bind`` option is
        appended unless ``bind`` or ``rbind`` is already present, since the
        mount would otherwise not be a bind mount at all.
        """
        opts = list(options) if options else ["rw"]
        if "bind" not in opts and "rbind" not in opts:
            opts.append("bind")

        self._append_mount(Mount(destination=dest, type="bind", source=source, options=opts))

    # Hooks

    def clear_prestart_hooks(self) -> None:
        if self._spec is None:
            return
        self._spec.hooks.prestart = []

    def add_prestart_hook(self, path: str, args: list[str] | None = None) -> None:
        """Append a hook run after the container is created, before the process starts."""
        hooks = self._init_spec().hooks
        if hooks.prestart is None:
            hooks.prestart = []
        hooks.prestart.append(Hook(path=path, args=list(args) if args is not None else None))

    def clear_poststart_hooks(self) -> None:
        if self._spec is None:
            return
        self._spec.hooks.poststart = []

    def add_poststart_hook(self, path: str, args: list[str] | None = None) -> None:
        """Append a hook run after the user process has started."""
        hooks = self._init_spec().hooks
        if hooks.poststart is None:
            hooks.poststart = []
        hooks.poststart.append(Hook(path=path, args=list(args) if args is not None else None))

    def clear_poststop_hooks(self) -> None:
        if self._spec is None:
            return
        self._spec.hooks.poststop = []

    def add_poststop_hook(self, path: str, args: list[str] | None = None) -> None:
        """Append a hook run after the container is deleted."""
        hooks = self._init_spec().hooks
        if hooks.poststop is None:
            hooks.poststop = []
        hooks.poststop.append(Hook(path=path, args=list(args) if args is not None else None))

    # Linux

    def set_linux_cgroups_path(self, path: str) -> None:
        """Set the cgroups path, absolute or relative to the runtime's cgroup root."""
        self._init_linux().cgroups_path = path

    def set_linux_mount_label(self, label: str) -> None:
        """Set the SELinux context applied to mounts."""
        self._init_linux().mount_label = label

    def set_linux_root_propagation(self, propagation: str | RootfsPropagation) -> None:
        """Set the rootfs propagation mode; "" unsets it.

        Raises:
            ValidationError: If the mode is not a known propagation mode
        """
        mode = parse_rootfs_propagation(propagation)
        self._init_linux().rootfs_propagation = None if mode is RootfsPropagation.UNSET else mode

    def clear_linux_sysctl(self) -> None:
        if self._spec is None or self._spec.linux is None:
            return
        self._spec.linux.sysctl = {}

    def add_linux_sysctl(self, key: str, value: str) -> None:
        """Set a kernel parameter, replacing any existing value for key."""
        self._init_linux_sysctl()[key] = value

    def remove_linux_sysctl(self, key: str) -> None:
        """Remove a kernel parameter; a missing key is a no-op."""
        if self._spec is None or self._spec.linux is None or self._spec.linux.sysctl is None:
            return
        self._spec.linux.sysctl.pop(key, None)

    def clear_linux_uid_mappings(self) -> None:
        if self._spec is None or self._spec.linux is None:
            return
        self._spec.linux.uid_mappings = []

    def add_linux_uid_mapping(self, host_id: int, container_id: int, size: int) -> None:
        """Append a user namespace UID mapping.

        Args:
            host_id: First ID on the host
            container_id: First ID inside the container
            size: Number of IDs mapped

        Raises:
            ValidationError: If any value is negative
        """
        _check_unsigned("uid mapping", host_id, container_id, size)
        mapping = IDMapping(host_id=host_id, container_id=container_id, size=size)
        linux = self._init_linux()
        if linux.uid_mappings is None:
            linux.uid_mappings = []
        linux.uid_mappings.append(mapping)

    def clear_linux_gid_mappings(self) -> None:
        if self._spec is None or self._spec.linux is None:
            return
        self._spec.linux.gid_mappings = []

    def add_linux_gid_mapping(self, host_id: int, container_id: int, size: int) -> None:
        """Append a user namespace GID mapping; see add_linux_uid_mapping."""
        _check_unsigned("gid mapping", host_id, container_id, size)
        mapping = IDMapping(host_id=host_id, container_id=container_id, size=size)
        linux = self._init_linux()
        if linux.gid_mappings is None:
            linux.gid_mappings = []
        linux.gid_mappings.append(mapping)

    def add_linux_masked_paths(self, path: str) -> None:
        """Append a path that is masked inside the container."""
        linux = self._init_linux()
        if linux.masked_paths is None:
            linux.masked_paths = []
        linux.masked_paths.append(path)

    def add_linux_readonly_paths(self, path: str) -> None:
        """Append a path that is mounted read-only inside the container."""
        linux = self._init_linux()
        if linux.readonly_paths is None:
            linux.readonly_paths = []
        linux.readonly_paths.append(path)

    # Namespaces

    def clear_linux_namespaces(self) -> None:
        if self._spec is None or self._spec.linux is None:
            return
        self._spec.linux.namespaces = []

    def add_or_replace_linux_namespace(self, kind: str | NamespaceType, path: str = "") -> None:
        """Add a namespace, or update the path of the existing one of that kind.

        Args:
            kind: network, pid, mount, ipc, uts, user or cgroup
            path: Namespace to join; empty creates a new namespace

        Raises:
            ValidationError: If kind is not a namespace kind
        """
        ns_type = parse_namespace_type(kind)

        linux = self._init_linux()
        if linux.namespaces is None:
            linux.namespaces = []
        for ns in linux.namespaces:
            if ns.type is ns_type:
                ns.path = path or None
                logger.debug(f"Replaced {ns_type.value} namespace")
                return
        linux.namespaces.append(Namespace(type=ns_type, path=path or None))
        logger.debug(f"Added {ns_type.value} namespace")

    def remove_linux_namespace(self, kind: str | NamespaceType) -> None:
        """Remove the namespace of a kind; a kind not present is a no-op.

        Raises:
            ValidationError: If kind is not a namespace kind
        """
        ns_type = parse_namespace_type(kind)

        if self._spec is None or self._spec.linux is None or self._spec.linux.namespaces is None:
            return
        namespaces = self._spec.linux.namespaces
        for i, ns in enumerate(namespaces):
            if ns.type is ns_type:
                del namespaces[i]
                return

    # Resources

    def set_linux_resources_disable_oom_killer(self, disable: bool) -> None:
        """Disable (or re-enable) the OOM killer for the container."""
        self._init_linux_resources().disable_oom_killer = disable

    def set_linux_resources_oom_score_adj(self, adj: int) -> None:
        """Set the oom_score_adj of the container process."""
        self._init_linux_resources().oom_score_adj = adj

    def set_linux_resources_cpu_shares(self, shares: int) -> None:
        """Set the relative CPU weight of the container."""
        _check_unsigned("cpu shares", shares)
        self._init_linux_resources_cpu().shares = shares

    def set_linux_resources_cpu_quota(self, quota: int) -> None:
        """Set the CFS quota in microseconds per period; -1 means unlimited."""
        self._init_linux_resources_cpu().quota = quota

    def set_linux_resources_cpu_period(self, period: int) -> None:
        """Set the CFS period in microseconds."""
        _check_unsigned("cpu period", period)
        self._init_linux_resources_cpu().period = period

    def set_linux_resources_cpu_realtime_runtime(self, runtime: int) -> None:
        self._init_linux_resources_cpu().realtime_runtime = runtime

    def set_linux_resources_cpu_realtime_period(self, period: int) -> None:
        _check_unsigned("cpu realtime period", period)
        self._init_linux_resources_cpu().realtime_period = period

    def set_linux_resources_cpu_cpus(self, cpus: str) -> None:
        """Set the CPUs the container may run on, e.g. "0-3,7"."""
        self._init_linux_resources_cpu().cpus = cpus

    def set_linux_resources_cpu_mems(self, mems: str) -> None:
        self._init_linux_resources_cpu().mems = mems

    def set_linux_resources_memory_limit(self, limit: int) -> None:
        """Set the memory limit in bytes; -1 means unlimited."""
        self._init_linux_resources_memory().limit = limit

    def set_linux_resources_memory_reservation(self, reservation: int) -> None:
        self._init_linux_resources_memory().reservation = reservation

    def set_linux_resources_memory_swap(self, swap: int) -> None:
        """Set the memory plus swap limit in bytes."""
        self._init_linux_resources_memory().swap = swap

    def set_linux_resources_memory_kernel(self, kernel: int) -> None:
        self._init_linux_resources_memory().kernel = kernel

    def set_linux_resources_memory_kernel_tcp(self, kernel_tcp: int) -> None:
        self._init_linux_resources_memory().kernel_tcp = kernel_tcp

    def set_linux_resources_memory_swappiness(self, swappiness: int) -> None:
        """Set the swappiness, 0 to 100 on the kernels that honor it."""
        _check_unsigned("memory swappiness", swappiness)
        self._init_linux_resources_memory().swappiness = swappiness

    def set_linux_resources_network_class_id(self, class_id: int) -> None:
        _check_unsigned("network class id", class_id)
        self._init_linux_resources_network().class_id = class_id

    def add_linux_resources_network_priorities(self, name: str, priority: int) -> None:
        """Set an interface priority, updating an existing entry for name."""
        _check_unsigned("network priority", priority)

        network = self._init_linux_resources_network()
        if network.priorities is None:
            network.priorities = []
        for entry in network.priorities:
            if entry.name == name:
                entry.priority = priority
                return
        network.priorities.append(InterfacePriority(name=name, priority=priority))

    def drop_linux_resources_network_priorities(self, name: str) -> None:
        """Remove the priority of an interface; a missing name is a no-op."""
        linux = self._spec.linux if self._spec is not None else None
        if linux is None or linux.resources is None or linux.resources.network is None:
            return
        priorities = linux.resources.network.priorities or []
        for i, entry in enumerate(priorities):
            if entry.name == name:
                del priorities[i]
                return

    def set_linux_resources_pids_limit(self, limit: int) -> None:
        """Set the maximum number of tasks; -1 means unlimited."""
        self._init_linux_resources_pids().limit = limit

    # Seccomp

    def set_syscall_action(self, opts: SyscallOpts) -> None:
        """Add or update syscall rules; see seccomp.parse_syscall_flag."""
        seccomp.parse_syscall_flag(opts, self._init_linux_seccomp())

    def set_default_seccomp_action(self, action: str) -> None:
        """Set the default action and drop rules that now repeat it."""
        seccomp.parse_default_action(action, self._init_linux_seccomp())

    def set_default_seccomp_action_force(self, action: str) -> None:
        """Set the default action, keeping every existing rule."""
        seccomp.parse_default_action_force(action, self._init_linux_seccomp())

    def set_seccomp_architecture(self, architecture: str) -> None:
        """Add comma-separated architectures to the filter, skipping duplicates."""
        seccomp.parse_architecture_flag(architecture, self._init_linux_seccomp())

    def remove_seccomp_rule(self, syscalls: str) -> None:
        """Remove the rules for a comma-separated list of syscalls."""
        seccomp.remove_action(syscalls, self._init_linux_seccomp())

    def remove_all_seccomp_rules(self) -> None:
        """Remove every syscall rule, keeping the default action and architectures."""
        seccomp.remove_all_seccomp_rules(self._init_linux_seccomp())
