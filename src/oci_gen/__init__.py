"""oci-gen: assemble and validate OCI runtime configurations.

This package builds the ``config.json`` an OCI runtime needs to launch a
container, one validated edit at a time:

- **Generator**: lazily grows the config tree and validates every edit
- **Capabilities**: canonical CAP_* names checked against the kernel table
- **Namespaces and mounts**: closed sets of kinds and modes, upsert rules
- **Seccomp**: syscall rules, default actions and architectures
- **Renderers**: JSON encoding and a rich terminal summary

Usage:
    from oci_gen import Generator, SyscallOpts

    g = Generator.new()
    g.set_hostname("web")
    g.add_process_capability("net_admin")
    g.add_or_replace_linux_namespace("network", "/var/run/netns/web")
    g.set_syscall_action(SyscallOpts(action="errno", syscall="keyctl"))
    g.save_to_file("config.json")

CLI:
    oci-gen generate --template base.json --cap-add net_admin --output config.json
    oci-gen show config.json
"""

__version__ = "0.1.0"

from oci_gen.core.generator import Generator
from oci_gen.core.capabilities import CapabilityRegistry, LinuxCapabilityRegistry
from oci_gen.core.seccomp import SyscallOpts

from oci_gen.models.spec import (
    CgroupMountMode,
    Linux,
    Mount,
    Namespace,
    NamespaceType,
    Process,
    RootfsPropagation,
    SpecDocument,
)
from oci_gen.models.seccomp import LinuxSeccomp, SeccompAction, SeccompArch

from oci_gen.renderers.base import ExportOptions, OutputFormat, RenderContext
from oci_gen.renderers.json import decode_spec, encode_spec

from oci_gen.utils.errors import (
    DecodeError,
    HostUnsupportedCapabilityError,
    OciGenError,
    SeccompRuleError,
    SerializationError,
    SpecIOError,
    TemplateNotFoundError,
    ValidationError,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Generator",
    "CapabilityRegistry",
    "LinuxCapabilityRegistry",
    "SyscallOpts",
    # Models
    "CgroupMountMode",
    "Linux",
    "Mount",
    "Namespace",
    "NamespaceType",
    "Process",
    "RootfsPropagation",
    "SpecDocument",
    "LinuxSeccomp",
    "SeccompAction",
    "SeccompArch",
    # Renderers
    "ExportOptions",
    "OutputFormat",
    "RenderContext",
    "decode_spec",
    "encode_spec",
    # Errors
    "OciGenError",
    "TemplateNotFoundError",
    "DecodeError",
    "ValidationError",
    "SeccompRuleError",
    "HostUnsupportedCapabilityError",
    "SerializationError",
    "SpecIOError",
]
