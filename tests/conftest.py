"""Shared fixtures for shipit tests."""

import io

import pytest
from rich.console import Console

from shipit.logger import DeployLogger
from shipit.models.results import ExecutionResult, SSHResult

SAMPLE_CONFIG = """host = example.com
path = /var/www/app

[deploy:local]
npm run build

[deploy]
git pull
systemctl restart app

[migrate]
php artisan migrate
"""


class FakeLocalRunner:
    """LocalRunner stand-in recording every script it is given."""

    def __init__(self, events):
        self.events = events
        self.returncode = 0
        self.scripts = []

    def run(self, script_body):
        self.scripts.append(script_body)
        self.events.append(("local", script_body))
        return ExecutionResult(returncode=self.returncode, command=script_body)


class SessionSpy:
    """Remote session factory and session in one, counting runs."""

    def __init__(self, events):
        self.events = events
        self.returncode = 0
        self.contexts = []
        self.calls = []

    def __call__(self, context):
        self.contexts.append(context)
        return self

    def run(self, script_body, tty=False):
        self.calls.append((script_body, tty))
        self.events.append(("remote", script_body))
        return SSHResult(
            returncode=self.returncode,
            host=self.contexts[-1].ssh_host,
            command=script_body,
        )


class CopierSpy:
    """File copier factory and copier in one."""

    def __init__(self):
        self.returncode = 0
        self.contexts = []
        self.calls = []

    def __call__(self, context):
        self.contexts.append(context)
        return self

    def copy(self, local_path, recursive=False, cwd=None):
        self.calls.append((local_path, recursive, cwd))
        return SSHResult(returncode=self.returncode, host=self.contexts[-1].ssh_host)


@pytest.fixture(autouse=True)
def no_config_env(monkeypatch):
    """Keep a developer's SHIPIT_CONFIG from leaking into tests."""
    monkeypatch.delenv("SHIPIT_CONFIG", raising=False)


@pytest.fixture
def config_dir(tmp_path):
    """Directory holding the sample .shipit file."""
    (tmp_path / ".shipit").write_text(SAMPLE_CONFIG)
    return tmp_path


@pytest.fixture
def events():
    return []


@pytest.fixture
def local_runner(events):
    return FakeLocalRunner(events)


@pytest.fixture
def session_spy(events):
    return SessionSpy(events)


@pytest.fixture
def copier_spy():
    return CopierSpy()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def quiet_logger(output):
    """Logger printing into a buffer instead of the terminal."""
    return DeployLogger("test", console=Console(file=output, width=200))
