from __future__ import annotations

import os
import tempfile
from pathlib import Path

KUBECONFIG_ENV = "KUBECONFIG"
TEMP_DIR_PREFIX = "kubetest2-aks"


def kubeconfig_filename(group: str, cluster_name: str) -> str:
    return f"kubeconfig-{group}-{cluster_name}"


def write_kubeconfig(group: str, cluster_name: str, kubeconfig: bytes) -> Path:
    """Write ``kubeconfig`` to a fresh temp directory and export it.

    The directory is left in place: later test stages read the file after
    the deployer returns. ``KUBECONFIG`` is process-wide, so only one
    deployer per process may call this.
    """
    tmpdir = tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX)
    path = Path(tmpdir) / kubeconfig_filename(group, cluster_name)
    path.write_bytes(kubeconfig)
    path.chmod(0o644)
    os.environ[KUBECONFIG_ENV] = str(path)
    return path
