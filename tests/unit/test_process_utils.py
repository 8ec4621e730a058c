"""Tests for signal delivery helpers."""

import os
import subprocess
import sys

import pytest

from ka.utils.process_utils import current_pid, send_signal


def test_current_pid():
    assert current_pid() == os.getpid()


def test_signal_zero_probes_without_effect():
    send_signal(os.getpid(), 0)


def test_terminates_child():
    child = subprocess.Popen([sys.executable, "-c", "import time; time.sleep(30)"])
    try:
        send_signal(child.pid, 15)
        assert child.wait(timeout=10) != 0
    finally:
        if child.poll() is None:
            child.kill()
            child.wait()


def test_missing_process_raises():
    child = subprocess.Popen(["true"])
    child.wait()

    with pytest.raises(ProcessLookupError):
        send_signal(child.pid, 0)
