"""Default seccomp profile.

The default profile allows everything except a short list of syscalls
that can be used to escape the container or take down the host.
"""

from oci_gen.models.seccomp import LinuxSeccomp, SeccompAction, SeccompArch, Syscall

BLOCKED_SYSCALLS = [
    "acct",
    "bpf",
    "delete_module",
    "finit_module",
    "init_module",
    "kexec_file_load",
    "kexec_load",
    "mount",
    "pivot_root",
    "ptrace",
    "reboot",
    "swapoff",
    "swapon",
    "umount2",
]

# Native architecture first, then the compat ABIs the kernel also accepts.
_ARCH_FAMILIES: dict[str, list[SeccompArch]] = {
    "amd64": [SeccompArch.X86_64, SeccompArch.X86, SeccompArch.X32],
    "386": [SeccompArch.X86],
    "arm64": [SeccompArch.AARCH64, SeccompArch.ARM],
    "arm": [SeccompArch.ARM],
    "mips64": [SeccompArch.MIPS64, SeccompArch.MIPS64N32, SeccompArch.MIPS],
    "mips64le": [SeccompArch.MIPSEL64, SeccompArch.MIPSEL64N32, SeccompArch.MIPSEL],
    "ppc64": [SeccompArch.PPC64],
    "ppc64le": [SeccompArch.PPC64LE],
    "s390x": [SeccompArch.S390X, SeccompArch.S390],
}


def get_default_profile(arch: str) -> LinuxSeccomp:
    """Build the default seccomp profile for a platform architecture.

    Args:
        arch: Platform architecture in Go notation (amd64, arm64, ...)

    Returns:
        New LinuxSeccomp instance; unknown architectures get no arch list
    """
    architectures = _ARCH_FAMILIES.get(arch)
    return LinuxSeccomp(
        default_action=SeccompAction.ALLOW,
        architectures=list(architectures) if architectures else None,
        syscalls=[Syscall(name=name, action=SeccompAction.ERRNO) for name in BLOCKED_SYSCALLS],
    )
