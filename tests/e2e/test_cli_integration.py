"""End-to-end tests running the CLI as a separate process."""
import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestCLIIntegration:
    """Run ``python -m pattern_catalog`` the way a user would."""

    def setup_method(self):
        self.env = dict(os.environ)
        self.env["PYTHONPATH"] = os.pathsep.join(
            filter(None, [str(PROJECT_ROOT / "src"), self.env.get("PYTHONPATH")])
        )
        for key in list(self.env):
            if key.startswith("PATTERN_CATALOG_"):
                del self.env[key]

    def run_cli(self, *args, cwd=None):
        return subprocess.run(
            [sys.executable, "-m", "pattern_catalog", *args],
            capture_output=True,
            text=True,
            env=self.env,
            cwd=cwd,
            timeout=60,
        )

    def test_run_all_succeeds(self, tmp_path):
        result = self.run_cli("run", "all", cwd=tmp_path)

        assert result.returncode == 0, result.stderr
        assert result.stdout.splitlines()[-1] == "4/4 demos passed"

    def test_run_factory_method(self, tmp_path):
        result = self.run_cli("run", "factory-method", cwd=tmp_path)

        assert result.returncode == 0, result.stderr
        assert "Selector A: ConcreteProductA operation." in result.stdout

    def test_run_unknown_pattern_exits_nonzero(self, tmp_path):
        result = self.run_cli("run", "nonexistent", cwd=tmp_path)

        assert result.returncode == 1
        assert "not found" in result.stderr

    def test_environment_override(self, tmp_path):
        self.env["PATTERN_CATALOG_OUTPUT__FORMAT"] = "json"

        result = self.run_cli("list", cwd=tmp_path)

        assert result.returncode == 0, result.stderr
        assert '"name": "observer"' in result.stdout

    @pytest.mark.parametrize("flag", ["--version", "--help"])
    def test_informational_flags(self, flag, tmp_path):
        result = self.run_cli(flag, cwd=tmp_path)

        assert result.returncode == 0
        assert "pattern-catalog" in result.stdout
