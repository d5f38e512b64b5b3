"""Unit tests for runtime config models."""

from oci_gen.models.seccomp import LinuxSeccomp, SeccompAction, SeccompArg, SeccompOperator
from oci_gen.models.spec import (
    CPU,
    Linux,
    Memory,
    Namespace,
    NamespaceType,
    Network,
    Pids,
    Process,
    Resources,
    SpecDocument,
    is_zero,
    prune_empty,
)


class TestAliases:
    """Tests for JSON field names."""

    def test_populate_by_name_and_alias(self):
        """Test both attribute and JSON names are accepted."""
        assert Process(no_new_privileges=True).no_new_privileges is True
        assert Process(noNewPrivileges=True).no_new_privileges is True

    def test_dump_uses_aliases(self):
        """Test encoding uses JSON field names and omits nulls."""
        arg = SeccompArg(index=1, value=2, value_two=3, op=SeccompOperator.EQUAL_TO)
        assert arg.model_dump(mode="json", by_alias=True) == {
            "index": 1,
            "value": 2,
            "valueTwo": 3,
            "op": "SCMP_CMP_EQ",
        }

    def test_namespace_type(self):
        """Test namespace kinds decode from strings."""
        assert Namespace(type="cgroup").type == NamespaceType.CGROUP


class TestIsZero:
    """Tests for is_zero."""

    def test_fresh_models(self):
        """Test freshly built models are zero."""
        assert is_zero(CPU())
        assert is_zero(Resources())
        assert is_zero(LinuxSeccomp())

    def test_set_values(self):
        """Test models with a set value are not zero."""
        assert not is_zero(CPU(shares=0))
        assert not is_zero(Network(priorities=[]))
        assert not is_zero(LinuxSeccomp(default_action=SeccompAction.ALLOW))


class TestPruneEmpty:
    """Tests for prune_empty."""

    def test_prunes_bottom_up(self):
        """Test empty categories, resources and linux are dropped."""
        spec = SpecDocument(linux=Linux(resources=Resources(memory=Memory(), pids=Pids())))
        prune_empty(spec)
        assert spec.linux is None

    def test_keeps_populated_categories(self):
        """Test only the empty categories are dropped."""
        spec = SpecDocument(linux=Linux(resources=Resources(cpu=CPU(), pids=Pids(limit=100))))
        prune_empty(spec)
        assert spec.linux.resources.cpu is None
        assert spec.linux.resources.pids.limit == 100

    def test_empty_seccomp_dropped(self):
        """Test an empty seccomp subtree is dropped."""
        spec = SpecDocument(linux=Linux(seccomp=LinuxSeccomp(), cgroups_path="/web"))
        prune_empty(spec)
        assert spec.linux.seccomp is None
        assert spec.linux.cgroups_path == "/web"

    def test_empty_annotations(self):
        """Test an empty annotations map is dropped."""
        spec = SpecDocument(annotations={})
        prune_empty(spec)
        assert spec.annotations is None

    def test_cleared_collections_kept(self):
        """Test explicitly cleared collections stay."""
        spec = SpecDocument(linux=Linux(namespaces=[]))
        prune_empty(spec)
        assert spec.linux.namespaces == []
