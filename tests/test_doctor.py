"""Tests for the ``shadnex doctor`` command (cli/doctor.py).

All tool probes are mocked — no system dependency.

Coverage:
* Doctor returns SUCCESS when node is present.
* Doctor returns GENERAL_ERROR when node is missing.
* A missing package manager only warns.
* Individual check functions return correct tuples.
* Plain-text fallback without Rich.
* CLI routing dispatches to ``run_doctor``.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from shadnex.cli import exit_codes
from shadnex.core.models import PackageManager
from shadnex.infra.toolchain_detector import ToolStatus


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _found(name: str) -> ToolStatus:
    return ToolStatus(name=name, found=True, path=Path(f"/usr/bin/{name}"), install_commands=())


def _missing(name: str) -> ToolStatus:
    return ToolStatus(name=name, found=False, path=None, install_commands=(f"install {name}",))


def _managers(missing: tuple[str, ...] = ()) -> dict[PackageManager, ToolStatus]:
    return {
        pm: _missing(pm.value) if pm.value in missing else _found(pm.value)
        for pm in PackageManager
    }


# ---------------------------------------------------------------------------
# Individual check functions
# ---------------------------------------------------------------------------

class TestPythonVersionCheck:
    def test_returns_tuple(self) -> None:
        from shadnex.cli.doctor import _python_version_check

        label, value, status = _python_version_check()
        assert label == "Python"
        assert isinstance(value, str)
        assert "OK" in status


class TestNodeCheck:
    @patch("shadnex.cli.doctor.detect_tool")
    def test_found(self, mock_detect: MagicMock) -> None:
        from shadnex.cli.doctor import _node_check

        mock_detect.return_value = _found("node")
        label, value, status = _node_check()
        assert label == "node"
        assert value == str(Path("/usr/bin/node"))
        assert "OK" in status

    @patch("shadnex.cli.doctor.detect_tool")
    def test_missing_fails(self, mock_detect: MagicMock) -> None:
        from shadnex.cli.doctor import _node_check

        mock_detect.return_value = _missing("node")
        assert "FAIL" in _node_check()[2]


class TestPackageManagerChecks:
    @patch("shadnex.cli.doctor.detect_package_managers")
    def test_missing_manager_warns(self, mock_detect: MagicMock) -> None:
        from shadnex.cli.doctor import _package_manager_checks

        mock_detect.return_value = _managers(missing=("bun",))
        rows = {label: status for label, _, status in _package_manager_checks()}
        assert set(rows) == {"npm", "pnpm", "yarn", "bun"}
        assert "WARN" in rows["bun"]
        assert "OK" in rows["npm"]


class TestOsCheck:
    @patch("shadnex.cli.doctor.platform.machine", return_value="arm64")
    @patch("shadnex.cli.doctor.platform.release", return_value="23.4.0")
    @patch("shadnex.cli.doctor.platform.system", return_value="Darwin")
    def test_darwin_is_displayed_as_macos(
        self,
        _mock_system: MagicMock,
        _mock_release: MagicMock,
        _mock_machine: MagicMock,
    ) -> None:
        from shadnex.cli.doctor import _os_check

        _label, value, _status = _os_check()
        assert value == "macOS 23.4.0 (arm64)"


class TestShadnexVersionCheck:
    def test_returns_current_version(self) -> None:
        from shadnex.cli.doctor import _shadnex_version_check
        from shadnex.version import __version__

        assert _shadnex_version_check() == ("shadnex", __version__, "[green]OK[/green]")


# ---------------------------------------------------------------------------
# run_doctor integration
# ---------------------------------------------------------------------------

class TestRunDoctor:
    @patch("shadnex.cli.doctor.detect_package_managers")
    @patch("shadnex.cli.doctor.detect_tool")
    def test_all_pass_returns_success(self, mock_tool: MagicMock, mock_pms: MagicMock) -> None:
        from shadnex.cli.doctor import run_doctor

        mock_tool.return_value = _found("node")
        mock_pms.return_value = _managers()
        assert run_doctor() == exit_codes.SUCCESS

    @patch("shadnex.cli.doctor.detect_package_managers")
    @patch("shadnex.cli.doctor.detect_tool")
    def test_missing_manager_still_succeeds(
        self,
        mock_tool: MagicMock,
        mock_pms: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from shadnex.cli.doctor import run_doctor

        mock_tool.return_value = _found("node")
        mock_pms.return_value = _managers(missing=("yarn",))
        assert run_doctor() == exit_codes.SUCCESS
        assert "install yarn" in capsys.readouterr().err

    @patch("shadnex.cli.doctor.detect_package_managers")
    @patch("shadnex.cli.doctor.detect_tool")
    def test_missing_node_fails(self, mock_tool: MagicMock, mock_pms: MagicMock) -> None:
        from shadnex.cli.doctor import run_doctor

        mock_tool.return_value = _missing("node")
        mock_pms.return_value = _managers()
        assert run_doctor() == exit_codes.GENERAL_ERROR

    @patch("shadnex.cli.doctor.platform.system", return_value="Darwin")
    @patch("shadnex.cli.doctor.detect_package_managers")
    @patch("shadnex.cli.doctor.detect_tool")
    @patch.dict("sys.modules", {"rich": None, "rich.console": None, "rich.table": None})
    def test_plain_output_without_rich(
        self,
        mock_tool: MagicMock,
        mock_pms: MagicMock,
        _mock_system: MagicMock,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from shadnex.cli.doctor import run_doctor

        mock_tool.return_value = _found("node")
        mock_pms.return_value = _managers(missing=("pnpm",))
        run_doctor()

        err = capsys.readouterr().err
        assert "shadnex doctor" in err
        assert "macOS" in err
        assert "WARN" in err
        assert "[yellow]" not in err


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestDoctorRouting:
    @patch("shadnex.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_dispatches(self, mock_run: MagicMock) -> None:
        from shadnex.cli.app import main

        assert main(["doctor"]) == exit_codes.SUCCESS
        mock_run.assert_called_once()

    @patch("shadnex.cli.doctor.run_doctor", return_value=exit_codes.GENERAL_ERROR)
    def test_doctor_failure_propagates(self, _mock_run: MagicMock) -> None:
        from shadnex.cli.app import main

        assert main(["doctor"]) == exit_codes.GENERAL_ERROR
