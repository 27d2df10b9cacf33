"""Shared fixtures: a temporary host tree and a factory wired to it."""

import logging
from pathlib import Path

import pytest

from hosttune.discovery.filesystem import HostFilesystem
from hosttune.tuning.executor import ScriptRenderingExecutor
from hosttune.tuning.network import build_net_tuners_factory

from .mocks import MockProc

SCRIPT_PATH = "/tune.sh"


@pytest.fixture(autouse=True)
def _reset_hosttune_logger():
    # setup_logging() detaches the package logger from the root logger
    yield
    logger = logging.getLogger("hosttune")
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def host_root(tmp_path: Path) -> Path:
    root = tmp_path / "host"
    root.mkdir()
    return root


@pytest.fixture
def fs(host_root: Path) -> HostFilesystem:
    return HostFilesystem(str(host_root))


@pytest.fixture
def ethtool_available(monkeypatch):
    monkeypatch.setattr(
        "hosttune.discovery.ethtool.shutil.which", lambda binary: f"/usr/sbin/{binary}"
    )


@pytest.fixture
def script_executor(fs: HostFilesystem) -> ScriptRenderingExecutor:
    return ScriptRenderingExecutor(fs, SCRIPT_PATH)


@pytest.fixture
def factory(fs, script_executor, ethtool_available):
    return build_net_tuners_factory(fs, script_executor, proc=MockProc())
