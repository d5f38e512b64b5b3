"""Unit tests for CLI commands."""

import json

from typer.testing import CliRunner

from oci_gen.cli.main import app


runner = CliRunner()


class TestMainCLI:
    """Tests for main CLI app."""

    def test_help(self):
        """Test --help flag."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "generate" in result.stdout

    def test_version(self):
        """Test the version command."""
        from oci_gen import __version__

        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestGenerateCommand:
    """Tests for generate command."""

    def test_generate_defaults(self):
        """Test generating the default config to stdout."""
        result = runner.invoke(app, ["generate"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["hostname"] == "mrsdalloway"
        assert data["linux"]["seccomp"]["defaultAction"] == "SCMP_ACT_ALLOW"

    def test_generate_options(self, tmp_path):
        """Test options are applied to the written config."""
        output = tmp_path / "config.json"
        result = runner.invoke(
            app,
            [
                "generate",
                "--hostname", "web",
                "--args", "/bin/server",
                "--args", "8080",
                "--env", "MODE=prod",
                "--cap-add", "net_admin",
                "--cap-drop", "kill",
                "--ns", "network:/var/run/netns/web",
                "--ns-remove", "ipc",
                "--bind", "/srv/data:/data:ro",
                "--tmpfs", "/run:nosuid,size=64m",
                "--rlimit", "RLIMIT_NPROC:100:50",
                "--sysctl", "net.ipv4.ip_forward=1",
                "--pids-limit", "64",
                "--seccomp-errno", "keyctl",
                "--output", str(output),
            ],
        )
        assert result.exit_code == 0, result.output

        data = json.loads(output.read_text())
        process = data["process"]
        assert data["hostname"] == "web"
        assert process["args"] == ["/bin/server", "8080"]
        assert "MODE=prod" in process["env"]
        assert "CAP_NET_ADMIN" in process["capabilities"]
        assert "CAP_KILL" not in process["capabilities"]
        assert {"type": "network", "path": "/var/run/netns/web"} in data["linux"]["namespaces"]
        assert {"type": "ipc"} not in data["linux"]["namespaces"]
        assert data["mounts"][-2]["options"] == ["nosuid", "size=64m"]
        assert data["mounts"][-1]["options"] == ["ro", "bind"]
        assert {"type": "RLIMIT_NPROC", "hard": 100, "soft": 50} in process["rlimits"]
        assert data["linux"]["sysctl"] == {"net.ipv4.ip_forward": "1"}
        assert data["linux"]["resources"]["pids"] == {"limit": 64}
        assert {"name": "keyctl", "action": "SCMP_ACT_ERRNO"} in data["linux"]["seccomp"]["syscalls"]

    def test_generate_seccomp_only(self):
        """Test exporting only the seccomp configuration."""
        result = runner.invoke(app, ["generate", "--seccomp-only", "--seccomp-remove-all"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["defaultAction"] == "SCMP_ACT_ALLOW"
        assert data["syscalls"] == []

    def test_generate_privileged(self):
        """Test privileged mode removes the seccomp filter."""
        result = runner.invoke(app, ["generate", "--privileged"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert "seccomp" not in data["linux"]
        assert "CAP_SYS_ADMIN" in data["process"]["capabilities"]

    def test_generate_invalid_capability(self):
        """Test an unknown capability fails with exit code 1."""
        result = runner.invoke(app, ["generate", "--cap-add", "teleport"])
        assert result.exit_code == 1

    def test_generate_invalid_cgroups_mode(self):
        """Test an unknown cgroup mount mode fails."""
        result = runner.invoke(app, ["generate", "--mount-cgroups", "bogus"])
        assert result.exit_code == 1

    def test_generate_missing_template(self, tmp_path):
        """Test a missing template fails."""
        result = runner.invoke(app, ["generate", "--template", str(tmp_path / "nope.json")])
        assert result.exit_code == 1

    def test_generate_from_template(self, template_file):
        """Test options are applied on top of a template."""
        result = runner.invoke(app, ["generate", "--template", str(template_file), "--cwd", "/app"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["hostname"] == "web"
        assert data["process"]["cwd"] == "/app"

    def test_generate_bad_rlimit(self):
        """Test a malformed rlimit is a usage error."""
        result = runner.invoke(app, ["generate", "--rlimit", "RLIMIT_NOFILE:many"])
        assert result.exit_code == 2


class TestShowCommand:
    """Tests for show command."""

    def test_show_json(self, template_file):
        """Test showing a config as JSON."""
        result = runner.invoke(app, ["show", str(template_file), "--format", "json"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["hostname"] == "web"

    def test_show_terminal(self, template_file):
        """Test showing a config summary."""
        result = runner.invoke(app, ["show", str(template_file), "--format", "terminal"])
        assert result.exit_code == 0
        assert "Runtime Config" in result.stdout

    def test_show_invalid_file(self, tmp_path):
        """Test a file that is not a runtime config fails."""
        path = tmp_path / "config.json"
        path.write_text("[1, 2, 3]")
        result = runner.invoke(app, ["show", str(path)])
        assert result.exit_code == 1

    def test_show_unknown_format(self, template_file):
        """Test an unknown format fails."""
        result = runner.invoke(app, ["show", str(template_file), "--format", "yaml"])
        assert result.exit_code == 1

    def test_show_json_prunes_empty_branches(self, tmp_path, sample_config):
        """Test empty annotations and resources are left out of the JSON."""
        sample_config["annotations"] = {}
        sample_config["linux"]["resources"] = {"memory": {}}
        path = tmp_path / "config.json"
        path.write_text(json.dumps(sample_config))

        result = runner.invoke(app, ["show", str(path), "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert "annotations" not in data
        assert "resources" not in data["linux"]
        assert json.loads(path.read_text())["annotations"] == {}


class TestLoggingOptions:
    """Tests for logging setup from the CLI."""

    def test_unknown_configured_level(self):
        """Test a bad log level in the configuration exits with an error."""
        from oci_gen.utils.config import LoggingConfig, OciGenConfig, set_config

        set_config(OciGenConfig(logging=LoggingConfig(level="chatty")))
        result = runner.invoke(app, ["generate"])
        assert result.exit_code == 1

    def test_verbose_overrides_configured_level(self):
        """Test --verbose wins over the configured level."""
        from oci_gen.utils.config import LoggingConfig, OciGenConfig, set_config

        set_config(OciGenConfig(logging=LoggingConfig(level="chatty")))
        result = runner.invoke(app, ["--verbose", "generate"])
        assert result.exit_code == 0
