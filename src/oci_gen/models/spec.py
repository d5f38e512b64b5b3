"""Runtime configuration data models.

The models mirror the OCI runtime configuration schema. Python attribute
names are snake_case; the JSON field names are carried as aliases, and
``populate_by_name`` lets both forms be used on construction.

Optional branches default to ``None`` and are omitted from the encoding.
An explicitly cleared collection is an empty list or dict, which is still
encoded, so "cleared" stays distinguishable from "never set".
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from oci_gen.models.seccomp import LinuxSeccomp

OCI_VERSION = "1.0.0-rc5"


class NamespaceType(str, Enum):
    """Kinds of Linux namespace a process can be placed in."""

    NETWORK = "network"
    PID = "pid"
    MOUNT = "mount"
    IPC = "ipc"
    UTS = "uts"
    USER = "user"
    CGROUP = "cgroup"


class CgroupMountMode(str, Enum):
    """How the cgroup filesystem is exposed inside the container."""

    READ_ONLY = "ro"
    READ_WRITE = "rw"
    DISABLED = "no"


class RootfsPropagation(str, Enum):
    """Mount propagation applied to the root filesystem."""

    UNSET = ""
    PRIVATE = "private"
    RPRIVATE = "rprivate"
    SLAVE = "slave"
    RSLAVE = "rslave"
    SHARED = "shared"
    RSHARED = "rshared"


class _SpecModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)


class Platform(_SpecModel):
    """Target operating system and architecture."""

    os: str = Field(default="", description="Operating system")
    arch: str = Field(default="", description="CPU architecture")


class Root(_SpecModel):
    """Root filesystem of the container."""

    path: str = Field(default="", description="Path to the root filesystem")
    readonly: bool = Field(default=False, description="Mount the root filesystem read-only")


class Mount(_SpecModel):
    """A filesystem mounted into the container."""

    destination: str = Field(description="Mount point inside the container")
    type: str = Field(default="", description="Filesystem type")
    source: str = Field(default="", description="Device name, directory or dummy source")
    options: list[str] | None = Field(default=None, description="Mount options, in order")


class Hook(_SpecModel):
    """An executable run at a container lifecycle point."""

    path: str = Field(description="Absolute path of the executable")
    args: list[str] | None = Field(default=None, description="Arguments, including argv[0]")


class Hooks(_SpecModel):
    """Lifecycle hooks."""

    prestart: list[Hook] | None = Field(default=None)
    poststart: list[Hook] | None = Field(default=None)
    poststop: list[Hook] | None = Field(default=None)


class User(_SpecModel):
    """Identity the process runs as."""

    uid: int = Field(default=0, ge=0)
    gid: int = Field(default=0, ge=0)
    additional_gids: list[int] | None = Field(default=None, alias="additionalGids")


class Rlimit(_SpecModel):
    """A POSIX resource limit."""

    type: str = Field(description="Limit type, e.g. RLIMIT_NOFILE")
    hard: int = Field(ge=0)
    soft: int = Field(ge=0)


class Process(_SpecModel):
    """The container process."""

    terminal: bool = Field(default=False, description="Attach a terminal")
    user: User = Field(default_factory=User)
    args: list[str] | None = Field(default=None)
    env: list[str] | None = Field(default=None, description="NAME=value entries")
    cwd: str = Field(default="")
    capabilities: list[str] | None = Field(default=None, description="CAP_* names")
    rlimits: list[Rlimit] | None = Field(default=None)
    no_new_privileges: bool = Field(default=False, alias="noNewPrivileges")
    apparmor_profile: str | None = Field(default=None, alias="apparmorProfile")
    selinux_label: str | None = Field(default=None, alias="selinuxLabel")


class DeviceCgroup(_SpecModel):
    """Device cgroup allow/deny rule."""

    allow: bool = Field(default=False)
    type: str | None = Field(default=None, description="a (all), c (char) or b (block)")
    major: int | None = Field(default=None)
    minor: int | None = Field(default=None)
    access: str | None = Field(default=None, description="Combination of r, w and m")


class Memory(_SpecModel):
    """Memory cgroup limits."""

    limit: int | None = Field(default=None)
    reservation: int | None = Field(default=None)
    swap: int | None = Field(default=None)
    kernel: int | None = Field(default=None)
    kernel_tcp: int | None = Field(default=None, alias="kernelTCP")
    swappiness: int | None = Field(default=None, ge=0)


class CPU(_SpecModel):
    """CPU cgroup limits."""

    shares: int | None = Field(default=None, ge=0)
    quota: int | None = Field(default=None)
    period: int | None = Field(default=None, ge=0)
    realtime_runtime: int | None = Field(default=None, alias="realtimeRuntime")
    realtime_period: int | None = Field(default=None, ge=0, alias="realtimePeriod")
    cpus: str | None = Field(default=None)
    mems: str | None = Field(default=None)


class Pids(_SpecModel):
    """Pids cgroup limit."""

    limit: int | None = Field(default=None)


class InterfacePriority(_SpecModel):
    """Network priority of one interface."""

    name: str
    priority: int = Field(ge=0)


class Network(_SpecModel):
    """Network cgroup settings."""

    class_id: int | None = Field(default=None, ge=0, alias="classID")
    priorities: list[InterfacePriority] | None = Field(default=None)


class Resources(_SpecModel):
    """Cgroup resource restrictions."""

    devices: list[DeviceCgroup] | None = Field(default=None)
    disable_oom_killer: bool | None = Field(default=None, alias="disableOOMKiller")
    oom_score_adj: int | None = Field(default=None, alias="oomScoreAdj")
    memory: Memory | None = Field(default=None)
    cpu: CPU | None = Field(default=None)
    pids: Pids | None = Field(default=None)
    network: Network | None = Field(default=None)


class IDMapping(_SpecModel):
    """User namespace id mapping."""

    host_id: int = Field(ge=0, alias="hostID")
    container_id: int = Field(ge=0, alias="containerID")
    size: int = Field(ge=0)


class Namespace(_SpecModel):
    """A namespace the container joins or creates.

    A missing path means a new namespace; a path joins an existing one.
    """

    type: NamespaceType
    path: str | None = Field(default=None)


class Linux(_SpecModel):
    """Linux-specific configuration."""

    resources: Resources | None = Field(default=None)
    cgroups_path: str | None = Field(default=None, alias="cgroupsPath")
    mount_label: str | None = Field(default=None, alias="mountLabel")
    sysctl: dict[str, str] | None = Field(default=None)
    uid_mappings: list[IDMapping] | None = Field(default=None, alias="uidMappings")
    gid_mappings: list[IDMapping] | None = Field(default=None, alias="gidMappings")
    namespaces: list[Namespace] | None = Field(default=None)
    rootfs_propagation: RootfsPropagation | None = Field(default=None, alias="rootfsPropagation")
    masked_paths: list[str] | None = Field(default=None, alias="maskedPaths")
    readonly_paths: list[str] | None = Field(default=None, alias="readonlyPaths")
    seccomp: LinuxSeccomp | None = Field(default=None)


class SpecDocument(_SpecModel):
    """Complete runtime configuration for one container."""

    oci_version: str = Field(default="", alias="ociVersion")
    platform: Platform = Field(default_factory=Platform)
    process: Process = Field(default_factory=Process)
    root: Root = Field(default_factory=Root)
    hostname: str | None = Field(default=None)
    mounts: list[Mount] | None = Field(default=None)
    hooks: Hooks = Field(default_factory=Hooks)
    annotations: dict[str, str] | None = Field(default=None)
    linux: Linux | None = Field(default=None)


def is_zero(model: BaseModel) -> bool:
    """Check whether a model equals a freshly constructed instance of its type."""
    return model == type(model)()


def prune_empty(spec: SpecDocument) -> None:
    """Drop optional subtrees that are indistinguishable from untouched ones.

    Works bottom-up so that a branch emptied by pruning its children is
    itself removed.
    """
    if spec.annotations is not None and not spec.annotations:
        spec.annotations = None

    linux = spec.linux
    if linux is None:
        return

    resources = linux.resources
    if resources is not None:
        for category in ("memory", "cpu", "pids", "network"):
            value = getattr(resources, category)
            if value is not None and is_zero(value):
                setattr(resources, category, None)
        if is_zero(resources):
            linux.resources = None

    if linux.seccomp is not None and is_zero(linux.seccomp):
        linux.seccomp = None

    if is_zero(linux):
        spec.linux = None
