"""Tests for CLI commands — package managers, git and husky are mocked."""

from __future__ import annotations

import json
from unittest.mock import patch

from click.testing import CliRunner

from joylint.cli import main
from joylint.installer.models import DependencyDescriptor, PackageManager
from joylint.installer.presets import LINT_TOOLS, REACT_DEPS

# ── install ──


class TestInstall:
    def test_installs_missing(self, project):
        runner = CliRunner()
        with patch("joylint.installer.installer.run_command") as run:
            result = runner.invoke(
                main, ["install", "react", "eslint@8.0.0", "--cwd", str(project), "-m", "pnpm"]
            )
        assert result.exit_code == 0, result.output
        assert "Installed 1 dependencies." in result.output
        run.assert_called_once_with(["pnpm", "add", "-D", "eslint@8.0.0"], cwd=project)

    def test_detects_manager_from_lockfile(self, project):
        (project / "yarn.lock").write_text("")
        runner = CliRunner()
        with patch("joylint.installer.installer.run_command") as run:
            result = runner.invoke(main, ["install", "prettier", "--cwd", str(project)])
        assert result.exit_code == 0, result.output
        assert run.call_args.args[0][:2] == ["yarn", "add"]

    def test_detects_pnpm_workspace(self, project):
        (project / "pnpm-lock.yaml").write_text("")
        (project / "pnpm-workspace.yaml").write_text("packages: []\n")
        runner = CliRunner()
        with patch("joylint.installer.installer.run_command") as run:
            result = runner.invoke(main, ["install", "prettier", "--cwd", str(project)])
        assert result.exit_code == 0, result.output
        assert run.call_args.args[0] == ["pnpm", "add", "-w", "-D", "prettier@latest"]

    def test_nothing_to_install(self, project):
        runner = CliRunner()
        with patch("joylint.installer.installer.run_command") as run:
            result = runner.invoke(main, ["install", "react", "--cwd", str(project)])
        assert result.exit_code == 0
        assert "Installed 0 dependencies." in result.output
        run.assert_not_called()

    def test_missing_manifest_exits_1(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["install", "eslint", "--cwd", str(tmp_path)])
        assert result.exit_code == 1
        assert "package.json not found" in result.output

    def test_unsupported_manager(self, project):
        runner = CliRunner()
        result = runner.invoke(main, ["install", "eslint", "--cwd", str(project), "-m", "bun"])
        assert result.exit_code == 1
        assert "Unsupported package manager 'bun'" in result.output

    def test_propagates_child_exit_status(self, project):
        from joylint.exceptions import ExternalProcessError

        runner = CliRunner()
        with patch(
            "joylint.installer.installer.run_command",
            side_effect=ExternalProcessError(["npm", "install"], 7),
        ):
            result = runner.invoke(main, ["install", "eslint", "--cwd", str(project)])
        assert result.exit_code == 7


# ── lint / hooks / init ──


class TestLint:
    def test_framework_set(self, project):
        runner = CliRunner()
        with patch("joylint.hooks.bootstrap.install_dependencies", return_value=3) as install:
            result = runner.invoke(
                main, ["lint", "--framework", "react", "--cwd", str(project), "-m", "npm"]
            )
        assert result.exit_code == 0, result.output
        assert "[JOYLINT] Init lint tools success All tasks are already done." in result.output
        install.assert_called_once_with(
            PackageManager.NPM, project, [*LINT_TOOLS, *REACT_DEPS], False
        )

    def test_non_interactive_defaults(self, project):
        runner = CliRunner()
        with patch("joylint.hooks.bootstrap.install_dependencies", return_value=0) as install:
            result = runner.invoke(main, ["lint", "--cwd", str(project), "-y"])
        assert result.exit_code == 0, result.output
        assert "Already up-to-date." in result.output
        manager, _, deps, _ = install.call_args.args
        assert manager is PackageManager.NPM
        assert deps == LINT_TOOLS


class TestHooks:
    def test_hooks(self, project):
        runner = CliRunner()
        with (
            patch("joylint.hooks.bootstrap.install_dependencies", return_value=2),
            patch("joylint.hooks.bootstrap.run_command") as run,
        ):
            result = runner.invoke(main, ["hooks", "--cwd", str(project), "-m", "yarn"])
        assert result.exit_code == 0, result.output
        assert "[JOYLINT] Init Git process success" in result.output
        assert run.call_count == 4
        assert (project / ".joylint" / "verify_commit_msg.mjs").is_file()

    def test_joylint_file_blocks_hooks(self, project):
        (project / ".joylint").write_text("")
        runner = CliRunner()
        with (
            patch("joylint.hooks.bootstrap.install_dependencies", return_value=0),
            patch("joylint.hooks.bootstrap.run_command") as run,
        ):
            result = runner.invoke(main, ["hooks", "--cwd", str(project), "-m", "npm"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "not a directory" in result.output
        run.assert_not_called()


class TestInit:
    def test_lint_then_hooks(self, project):
        runner = CliRunner()
        with (
            patch("joylint.cli.setup_lint_packages", return_value=1) as lint_setup,
            patch("joylint.cli.setup_hooks", return_value=0) as hooks_setup,
        ):
            result = runner.invoke(
                main, ["init", "-f", "vue2", "--cwd", str(project), "-m", "pnpm", "--workspace"]
            )
        assert result.exit_code == 0, result.output
        lint_setup.assert_called_once_with(PackageManager.PNPM, project, "vue2", True)
        hooks_setup.assert_called_once_with(PackageManager.PNPM, project, True)
        assert "All tasks are already done." in result.output


# ── control ──


class TestControl:
    def test_unknown_verb_exits_zero(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["control", "deploy", "--cwd", str(tmp_path)])
        assert result.exit_code == 0
        assert "Please confirm your input!" in result.output
        assert "Support command ===> dev build tag deltag release" in result.output

    def test_build_analysis(self, tmp_path):
        runner = CliRunner()
        with patch("joylint.control.commands.run_command") as run:
            result = runner.invoke(main, ["control", "--cwd", str(tmp_path), "build", "--analysis"])
        assert result.exit_code == 0, result.output
        run.assert_called_once_with(["pnpm", "run", "analyze"], cwd=tmp_path)

    def test_prompts_when_no_args(self, tmp_path):
        runner = CliRunner()
        with patch("joylint.control.commands.run_command") as run:
            result = runner.invoke(main, ["control", "--cwd", str(tmp_path)], input="tag v9\n")
        assert result.exit_code == 0, result.output
        assert run.call_args_list[0].args[0][:4] == ["git", "tag", "-a", "v9"]

    def test_dev_uses_config_env(self, tmp_path):
        (tmp_path / "configs").mkdir()
        (tmp_path / "configs" / "env.json").write_text(
            json.dumps({"developmentEnv": {"PORT": "4000"}})
        )
        runner = CliRunner()
        with patch("joylint.control.commands.run_command") as run:
            result = runner.invoke(main, ["control", "dev", "--cwd", str(tmp_path)])
        assert result.exit_code == 0, result.output
        assert run.call_args.kwargs["env"]["PORT"] == "4000"

    def test_bad_config_exits_1(self, tmp_path):
        (tmp_path / "configs").mkdir()
        (tmp_path / "configs" / "env.json").write_text("{")
        runner = CliRunner()
        result = runner.invoke(main, ["control", "build", "--cwd", str(tmp_path)])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_release_without_target_exits_1(self, tmp_path):
        runner = CliRunner()
        with patch("joylint.control.commands.run_command") as run:
            result = runner.invoke(main, ["control", "release", "v1", "--cwd", str(tmp_path)])
        assert result.exit_code == 1
        assert "No upload target" in result.output
        run.assert_not_called()

    def test_option_like_tag_name_exits_1(self, tmp_path):
        runner = CliRunner()
        with (
            patch("joylint.control.commands.run_command") as run,
            patch("joylint.control.commands.capture_output") as capture,
        ):
            result = runner.invoke(main, ["control", "tag", "-x", "--cwd", str(tmp_path)])
        assert result.exit_code == 1
        assert "Error:" in result.output
        run.assert_not_called()
        capture.assert_not_called()


def test_descriptor_parse_used_for_specs():
    assert DependencyDescriptor.parse("@scope/pkg@1.2.3") == DependencyDescriptor(
        "@scope/pkg", "1.2.3"
    )
