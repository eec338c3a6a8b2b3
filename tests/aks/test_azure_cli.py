from __future__ import annotations

import pytest

from kubetest_aks.aks.cli import AzureCLI

pytestmark = [pytest.mark.xdist_group("unit")]

RID = "/subscriptions/S/resourcegroups/rg1/providers/Microsoft.ContainerService/managedClusters/c1"


class TestAzureCLI:
    def test_submit_deployment(self, make_az):
        az = make_az(deploy=b"{}")
        assert AzureCLI(runner=az).submit_deployment("rg1", "/tmp/t.json") == b"{}"
        assert az.calls == [["az", "deployment", "group", "create", "-g", "rg1", "-f", "/tmp/t.json"]]

    def test_dry_run_deployment(self, make_az):
        az = make_az()
        AzureCLI(runner=az).dry_run_deployment("rg1", "/tmp/t.json")
        assert az.calls == [[
            "az", "deployment", "group", "create", "-w", "-r", "ResourceIdOnly",
            "-g", "rg1", "-f", "/tmp/t.json",
        ]]

    def test_show_resource(self, make_az):
        az = make_az()
        AzureCLI(runner=az).show_resource(RID)
        assert az.calls == [["az", "resource", "show", "--ids", RID]]

    def test_delete_resource(self, make_az):
        az = make_az()
        AzureCLI(runner=az).delete_resource(RID)
        assert az.calls == [["az", "resource", "delete", "--ids", RID]]

    def test_get_credentials_streams_to_stdout(self, make_az):
        az = make_az(credentials=b"apiVersion: v1\n")
        assert AzureCLI(runner=az).get_credentials("rg1", "c1") == b"apiVersion: v1\n"
        assert az.calls == [["az", "aks", "get-credentials", "-g", "rg1", "-n", "c1", "-f", "-"]]

    def test_custom_binary(self, make_az):
        az = make_az()
        AzureCLI(binary="/opt/az/bin/az", runner=az).show_resource(RID)
        assert az.calls[0][0] == "/opt/az/bin/az"

    def test_errors_propagate_unchanged(self, make_az, az_error):
        failure = az_error("ERROR: AuthorizationFailed")
        az = make_az(show=failure)
        with pytest.raises(type(failure)) as exc_info:
            AzureCLI(runner=az).show_resource(RID)
        assert exc_info.value is failure
