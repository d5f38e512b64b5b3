"""Shared test fixtures for oci-gen tests."""

import json
import logging
from pathlib import Path

import pytest

from oci_gen.core.generator import Generator
from oci_gen.knowledge.capabilities import get_capability_table
from oci_gen.utils.config import OciGenConfig, set_config


class FakeCapabilityRegistry:
    """Capability registry with a configurable host limit."""

    def __init__(self, last_supported: int = 40) -> None:
        self._table = get_capability_table()
        self.last_supported = last_supported

    def list(self) -> list[str]:
        return list(self._table)

    def index_of(self, name: str) -> int | None:
        return self._table.get(name)

    def last_supported_index(self) -> int:
        return self.last_supported


@pytest.fixture(autouse=True)
def default_config():
    """Isolate tests from config files and from logging set up by CLI runs."""
    set_config(OciGenConfig())
    yield
    set_config(None)

    logger = logging.getLogger("oci_gen")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def registry() -> FakeCapabilityRegistry:
    """Registry whose host supports every known capability."""
    return FakeCapabilityRegistry()


@pytest.fixture
def old_kernel_registry() -> FakeCapabilityRegistry:
    """Registry whose host stops at CAP_BLOCK_SUSPEND."""
    return FakeCapabilityRegistry(last_supported=36)


@pytest.fixture
def generator(registry: FakeCapabilityRegistry) -> Generator:
    """Generator holding the default runtime config."""
    return Generator.new(capabilities=registry)


@pytest.fixture
def empty_generator(registry: FakeCapabilityRegistry) -> Generator:
    """Generator without any runtime config yet."""
    return Generator(capabilities=registry)


@pytest.fixture
def sample_config() -> dict:
    """A small but complete runtime config as JSON data."""
    return {
        "ociVersion": "1.0.0",
        "platform": {"os": "linux", "arch": "amd64"},
        "process": {
            "terminal": False,
            "user": {"uid": 1000, "gid": 1000},
            "args": ["/bin/server", "--port", "8080"],
            "env": ["PATH=/usr/bin:/bin", "MODE=prod"],
            "cwd": "/srv",
            "capabilities": ["CAP_CHOWN", "CAP_NET_BIND_SERVICE"],
            "noNewPrivileges": True,
        },
        "root": {"path": "rootfs", "readonly": True},
        "hostname": "web",
        "mounts": [{"destination": "/proc", "type": "proc", "source": "proc"}],
        "linux": {
            "namespaces": [{"type": "pid"}, {"type": "network", "path": "/var/run/netns/web"}],
            "seccomp": {
                "defaultAction": "SCMP_ACT_ALLOW",
                "architectures": ["SCMP_ARCH_X86_64"],
                "syscalls": [{"name": "ptrace", "action": "SCMP_ACT_ERRNO"}],
            },
        },
    }


@pytest.fixture
def template_file(tmp_path: Path, sample_config: dict) -> Path:
    """The sample config written to a template file."""
    path = tmp_path / "template.json"
    path.write_text(json.dumps(sample_config))
    return path
