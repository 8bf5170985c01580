"""Tests for the deployment engine."""

import pytest

from shipit.constants import LOGIN_SHELL_COMMAND
from shipit.core.engine import DeploymentEngine
from shipit.exceptions import (
    ConfigNotFoundError,
    DeploymentError,
    IncompleteConfigError,
    LocalFileNotFoundError,
    LocalScriptFailedError,
    RemoteDirectoryMissingError,
    RemoteScriptFailedError,
    TargetNotFoundError,
)


@pytest.fixture
def make_engine(config_dir, quiet_logger, local_runner, session_spy, copier_spy):
    def factory(**kwargs):
        kwargs.setdefault("start_dir", str(config_dir))
        return DeploymentEngine(
            logger=quiet_logger,
            local_runner=local_runner,
            session_factory=session_spy,
            copier_factory=copier_spy,
            **kwargs,
        )

    return factory


class TestDeploy:
    """Test the two-phase deploy contract."""

    def test_local_then_remote(self, make_engine, events):
        outcome = make_engine().deploy("deploy")

        assert events == [
            ("local", "npm run build"),
            ("remote", "git pull\nsystemctl restart app"),
        ]
        assert outcome.ran_local and outcome.ran_remote
        assert outcome.phases == ["local", "remote"]

    def test_local_failure_skips_remote(self, make_engine, local_runner, session_spy):
        local_runner.returncode = 2

        with pytest.raises(LocalScriptFailedError) as exc_info:
            make_engine().deploy("deploy")

        assert exc_info.value.returncode == 2
        assert exc_info.value.target == "deploy"
        assert session_spy.calls == []

    def test_remote_only_target_succeeds(self, make_engine, local_runner, session_spy):
        outcome = make_engine().deploy("migrate")

        assert local_runner.scripts == []
        assert session_spy.calls == [("php artisan migrate", False)]
        assert not outcome.ran_local
        assert outcome.ran_remote

    def test_local_only_target(self, tmp_path, make_engine, session_spy):
        (tmp_path / ".shipit").write_text("host = h\npath = /p\n\n[build:local]\nmake\n")

        outcome = make_engine(start_dir=str(tmp_path)).deploy("build")

        assert outcome.phases == ["local"]
        assert session_spy.calls == []

    def test_default_target_is_deploy(self, make_engine, session_spy):
        make_engine().deploy()

        assert session_spy.calls[0][0].startswith("git pull")

    def test_unknown_target(self, make_engine, local_runner, session_spy):
        with pytest.raises(TargetNotFoundError) as exc_info:
            make_engine().deploy("nope")

        assert exc_info.value.available == ["deploy", "migrate"]
        assert local_runner.scripts == []
        assert session_spy.calls == []

    def test_remote_failure(self, make_engine, session_spy):
        session_spy.returncode = 3

        with pytest.raises(RemoteScriptFailedError) as exc_info:
            make_engine().deploy("migrate")

        assert exc_info.value.returncode == 3
        assert exc_info.value.host == "example.com"

    def test_remote_directory_missing(self, make_engine, session_spy):
        session_spy.returncode = 66

        with pytest.raises(RemoteDirectoryMissingError) as exc_info:
            make_engine().deploy("migrate")

        assert isinstance(exc_info.value, RemoteScriptFailedError)
        assert exc_info.value.path == "/var/www/app"
        assert exc_info.value.returncode == 66

    def test_ssh_connection_failure(self, make_engine, session_spy):
        session_spy.returncode = 255

        with pytest.raises(RemoteScriptFailedError) as exc_info:
            make_engine().deploy("migrate")

        assert "Could not connect" in exc_info.value.context

    def test_phases_are_announced(self, make_engine, output):
        make_engine().deploy("deploy")

        text = output.getvalue()
        assert text.index("Running local script") < text.index("Running remote script")


class TestContext:
    """Test deployment context construction."""

    def test_from_header(self, make_engine):
        context = make_engine().build_context()

        assert context.ssh_host == "example.com"
        assert context.ssh_path == "/var/www/app"
        assert not context.verbose

    def test_host_override(self, make_engine, session_spy):
        make_engine(host_override="staging.example.com", verbose=True).deploy("migrate")

        context = session_spy.contexts[0]
        assert context.ssh_host == "staging.example.com"
        assert context.ssh_path == "/var/www/app"
        assert context.verbose

    def test_built_once(self, make_engine):
        engine = make_engine()

        assert engine.build_context() is engine.build_context()


class TestConfigLoading:
    """Test config discovery through the engine."""

    def test_found_from_subdirectory(self, config_dir, make_engine):
        nested = config_dir / "src" / "app"
        nested.mkdir(parents=True)

        engine = make_engine(start_dir=str(nested))

        assert engine.list_targets() == ["deploy", "migrate"]
        assert engine.config_path == (config_dir / ".shipit").resolve()

    def test_custom_config_name(self, tmp_path, make_engine):
        (tmp_path / "deploy.conf").write_text("host = h\npath = p\n\n[x]\nls\n")

        engine = make_engine(start_dir=str(tmp_path), config_name="deploy.conf")

        assert engine.list_targets() == ["x"]

    def test_config_not_found(self, tmp_path, make_engine):
        engine = make_engine(start_dir=str(tmp_path), config_name=".shipit-engine-missing-41c2")

        with pytest.raises(ConfigNotFoundError):
            engine.deploy("deploy")

    def test_incomplete_config(self, tmp_path, make_engine, session_spy):
        (tmp_path / ".shipit").write_text("host = h\n\n[deploy]\nls\n")

        with pytest.raises(IncompleteConfigError):
            make_engine(start_dir=str(tmp_path)).deploy("deploy")

        assert session_spy.calls == []


class TestRemoteOperations:
    """Test console, exec and copy."""

    def test_exec_command_is_literal(self, make_engine, session_spy):
        make_engine().exec_command("ls -la | grep app")

        assert session_spy.calls == [("ls -la | grep app", False)]

    def test_exec_failure(self, make_engine, session_spy):
        session_spy.returncode = 1

        with pytest.raises(RemoteScriptFailedError):
            make_engine().exec_command("false")

    def test_script_exit_66_mentions_script_status(self, make_engine, session_spy):
        """A script ending with status 66 shares the directory check status."""
        session_spy.returncode = 66

        with pytest.raises(RemoteDirectoryMissingError) as exc_info:
            make_engine().exec_command("exit 66")

        assert session_spy.calls == [("exit 66", False)]
        assert "script itself exits with status 66" in exc_info.value.context
        assert "example.com" in exc_info.value.context

    def test_open_console_requests_tty(self, make_engine, session_spy):
        make_engine().open_console()

        assert session_spy.calls == [(LOGIN_SHELL_COMMAND, True)]

    def test_copy_missing_file(self, make_engine, copier_spy):
        with pytest.raises(LocalFileNotFoundError) as exc_info:
            make_engine().copy_to_remote("missing.txt")

        assert exc_info.value.path == "missing.txt"
        assert copier_spy.calls == []

    def test_copy_file(self, config_dir, make_engine, copier_spy):
        (config_dir / "robots.txt").write_text("User-agent: *\n")

        make_engine().copy_to_remote("robots.txt")

        assert copier_spy.calls == [("robots.txt", False, str(config_dir))]
        assert copier_spy.contexts[0].remote_destination("robots.txt") == (
            "example.com:/var/www/app/robots.txt"
        )

    def test_copy_directory_is_recursive(self, config_dir, make_engine, copier_spy):
        (config_dir / "assets").mkdir()

        make_engine().copy_to_remote("assets")

        assert copier_spy.calls[0][1] is True

    def test_copy_failure(self, config_dir, make_engine, copier_spy):
        (config_dir / "robots.txt").write_text("")
        copier_spy.returncode = 1

        with pytest.raises(DeploymentError):
            make_engine().copy_to_remote("robots.txt")
