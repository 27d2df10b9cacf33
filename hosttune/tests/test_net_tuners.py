"""Backlog tuners rendering into a shared script."""

import pytest

from hosttune.protocol.errors import ConstructionError, ReadError
from hosttune.tuning.executor import DirectExecutor, ScriptRenderingExecutor, script_header
from hosttune.tuning.network import (
    LISTEN_BACKLOG_FILE,
    SYN_BACKLOG_FILE,
    NetTunersFactory,
    build_net_tuners_factory,
)

from .conftest import SCRIPT_PATH
from .mocks import MockProc

HEADER = """#!/bin/bash

# Hosttune Tuning Script
# ----------------------------------
# This file was autogenerated by hosttune

"""

TUNERS = [
    ("new_syn_backlog_tuner", SYN_BACKLOG_FILE),
    ("new_listen_backlog_tuner", LISTEN_BACKLOG_FILE),
]

CASES = [
    pytest.param("20000000", False, id="current above reference"),
    pytest.param("4096", False, id="current equals reference"),
    pytest.param("12", True, id="current below reference"),
    pytest.param(" 12\n", True, id="surrounding whitespace"),
]


def test_header_matches_banner():
    assert script_header() == HEADER


@pytest.mark.parametrize("constructor, path", TUNERS)
@pytest.mark.parametrize("before, expect_change", CASES)
def test_backlog_tuner_script(fs, factory, constructor, path, before, expect_change):
    fs.write_text(path, before)

    result = getattr(factory, constructor)().tune()

    assert result.error is None
    assert result.changed is expect_change
    expected = HEADER
    if expect_change:
        expected += f"echo '4096' > {path}\n"
    assert fs.read_text(SCRIPT_PATH) == expected


@pytest.mark.parametrize("constructor, path", TUNERS)
def test_backlog_tuner_fails_when_file_missing(fs, factory, constructor, path):
    result = getattr(factory, constructor)().tune()

    assert not result.success
    assert isinstance(result.error, ReadError)
    assert path in str(result.error)
    assert result.changed is False
    assert fs.read_text(SCRIPT_PATH) == HEADER


def test_shared_executor_keeps_invocation_order(fs, factory):
    fs.write_text(SYN_BACKLOG_FILE, "128")
    fs.write_text(LISTEN_BACKLOG_FILE, "1024")

    assert factory.new_syn_backlog_tuner().tune().changed
    assert factory.new_listen_backlog_tuner().tune().changed

    assert fs.read_text(SCRIPT_PATH) == (
        HEADER
        + f"echo '4096' > {SYN_BACKLOG_FILE}\n"
        + f"echo '4096' > {LISTEN_BACKLOG_FILE}\n"
    )


def test_tuners_preserve_registration_order(factory):
    constructors = factory.tuners()

    assert list(constructors) == ["syn_backlog", "listen_backlog"]
    assert constructors["listen_backlog"]().target.path == LISTEN_BACKLOG_FILE


def test_factory_construction_performs_no_io(fs, host_root, ethtool_available):
    executor = ScriptRenderingExecutor(fs, SCRIPT_PATH)
    before = sorted(p.name for p in host_root.rglob("*"))

    factory = build_net_tuners_factory(fs, executor, proc=MockProc())
    factory.new_syn_backlog_tuner()
    factory.new_listen_backlog_tuner()

    assert isinstance(factory, NetTunersFactory)
    assert sorted(p.name for p in host_root.rglob("*")) == before


def test_factory_fails_without_ethtool(fs, monkeypatch):
    monkeypatch.setattr("hosttune.discovery.ethtool.shutil.which", lambda binary: None)

    with pytest.raises(ConstructionError, match="ethtool"):
        build_net_tuners_factory(fs, ScriptRenderingExecutor(fs, SCRIPT_PATH), proc=MockProc())


def test_factory_passes_timeout_to_collaborators(fs, script_executor, ethtool_available):
    factory = build_net_tuners_factory(fs, script_executor, proc=MockProc(), timeout=1.0)

    assert factory.balance_service.timeout == 1.0
    assert factory.cpu_masks.hwloc.timeout == 1.0
    assert factory.executor is script_executor


def test_with_executor_shares_collaborators(fs, factory, script_executor):
    direct = DirectExecutor()

    swapped = factory.with_executor(direct)

    assert swapped.executor is direct
    assert factory.executor is script_executor
    assert swapped.balance_service is factory.balance_service
    assert swapped.cpu_masks is factory.cpu_masks
    fs.write_text(SYN_BACKLOG_FILE, "12")
    assert swapped.new_syn_backlog_tuner().tune().changed
    assert fs.read_text(SYN_BACKLOG_FILE) == "4096"
    assert fs.read_text(SCRIPT_PATH) == HEADER
