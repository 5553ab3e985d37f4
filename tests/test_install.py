import json
import os
import sys

import pytest

pytest.importorskip("jupyter_client")

from lc3vm import install


class FakeKernelSpecManager(object):
    installed = []

    def install_kernel_spec(self, source_dir, kernel_name, user=False, prefix=None):
        with open(os.path.join(source_dir, "kernel.json")) as fp:
            spec = json.load(fp)
        self.installed.append((kernel_name, user, prefix, spec))


def test_install_user_kernel_spec(monkeypatch):
    FakeKernelSpecManager.installed = []
    monkeypatch.setattr(install, "KernelSpecManager", FakeKernelSpecManager)
    install.main([])
    name, user, prefix, spec = FakeKernelSpecManager.installed[0]
    assert name == "lc3vm"
    assert user
    assert prefix is None
    assert spec["argv"][1:3] == ["-m", "lc3vm.kernel"]

def test_install_sys_prefix(monkeypatch):
    FakeKernelSpecManager.installed = []
    monkeypatch.setattr(install, "KernelSpecManager", FakeKernelSpecManager)
    install.main(["--sys-prefix"])
    name, user, prefix, spec = FakeKernelSpecManager.installed[0]
    assert not user
    assert prefix == sys.prefix
