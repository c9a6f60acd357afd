"""
Tests for the command-line interface.
"""

import logging

import pytest

from shadcn_ui import __version__
from shadcn_ui.cli import build_parser, main


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate each run from SHADCN_UI_ variables and restore root logging."""
    for key in ("LOG_LEVEL", "REGISTRY_FILE", "SOURCE_DIR", "DIFF_CONTEXT", "BACKUP_SUFFIX"):
        monkeypatch.delenv(f"SHADCN_UI_{key}", raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def project(tmp_path, capsys):
    """An initialized project directory."""
    assert main(["--cwd", str(tmp_path), "init"]) == 0
    capsys.readouterr()
    return tmp_path


def run(project, *args):
    return main(["--cwd", str(project), *args])


def test_parser_requires_command():
    """Test a subcommand is mandatory."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_version(capsys):
    """Test --version prints the package version."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


class TestInitCommand:
    """Test `shadcn-ui init`."""

    def test_init(self, tmp_path, capsys):
        """Test init reports the configured layout."""
        assert main(["--cwd", str(tmp_path), "init", "-c", "src/ui", "-b", "slate"]) == 0

        out = capsys.readouterr().out
        assert "Initialized shadcn-ui" in out
        assert "components: src/ui" in out
        assert "theme:      slate (radius md)" in out
        assert (tmp_path / "shadcn-ui.yaml").is_file()
        assert (tmp_path / "src/ui").is_dir()

    def test_init_twice(self, project, capsys):
        """Test a second init fails without --force."""
        assert run(project, "init") == 1
        assert "already exists" in capsys.readouterr().err

        assert run(project, "init", "--force") == 0


class TestAddCommand:
    """Test `shadcn-ui add`."""

    def test_add_with_dependency(self, project, capsys):
        """Test the dependency is reported alongside the requested component."""
        assert run(project, "add", "toggle_group") == 0

        out = capsys.readouterr().out
        assert "  + Added toggle (dependency of toggle_group)\n" in out
        assert "  + Added toggle_group\n" in out
        assert "Added 2 component(s)." in out
        assert (project / "src/components/ui/toggle_group.rs").is_file()

    def test_add_existing(self, project, capsys):
        """Test re-adding reports skipped files."""
        run(project, "add", "button")
        capsys.readouterr()

        assert run(project, "add", "button") == 0

        out = capsys.readouterr().out
        assert "  - Skipped button.rs (already exists)" in out
        assert "Skipped 1 component(s) (use --overwrite to replace)." in out

    def test_add_unknown(self, project, capsys):
        """Test unknown names exit with an error."""
        assert run(project, "add", "ghost") == 1

        err = capsys.readouterr().err
        assert "Error: Unknown component: 'ghost'" in err

    def test_add_nothing(self, project, capsys):
        """Test add without names or --all."""
        assert run(project, "add") == 1
        assert "--all" in capsys.readouterr().err

    def test_add_without_init(self, tmp_path, capsys):
        """Test add in an uninitialized directory."""
        assert main(["--cwd", str(tmp_path), "add", "button"]) == 1
        assert "shadcn-ui init" in capsys.readouterr().err


class TestListCommand:
    """Test `shadcn-ui list`."""

    def test_list_catalog(self, project, capsys):
        """Test the catalog is grouped by category with installed marks."""
        run(project, "add", "button")
        capsys.readouterr()

        assert run(project, "list") == 0

        out = capsys.readouterr().out
        assert "Available components (v0.2.0):" in out
        assert "  Display:" in out
        assert "  Navigation:" in out
        button_line = next(line for line in out.splitlines() if line.strip().startswith("button "))
        assert button_line.endswith("[installed]")
        assert "45 component(s) available, 1 installed." in out

    def test_list_installed_empty(self, tmp_path, capsys):
        """Test --installed without a project."""
        assert main(["--cwd", str(tmp_path), "list", "--installed"]) == 0
        assert "No components installed." in capsys.readouterr().out

    def test_list_installed(self, project, capsys):
        """Test --installed lists only local components."""
        run(project, "add", "card")
        capsys.readouterr()

        assert run(project, "list", "-i") == 0

        out = capsys.readouterr().out
        assert "Installed components:" in out
        assert "  card" in out
        assert "button" not in out
        assert "1 component(s) installed." in out


def append_local_change(project, name):
    path = project / "src/components/ui" / f"{name}.rs"
    path.write_text(path.read_text(encoding="utf-8") + "// local tweak\n", encoding="utf-8")
    return path


class TestDiffCommand:
    """Test `shadcn-ui diff`."""

    def test_diff_shows_changes(self, project, capsys):
        """Test a locally modified component prints a unified diff."""
        run(project, "add", "button", "card")
        append_local_change(project, "button")
        capsys.readouterr()

        assert run(project, "diff") == 0

        out = capsys.readouterr().out
        assert "--- a/button (registry)\n+++ b/button (local)\n" in out
        assert "+// local tweak\n" in out
        assert "  = card is up to date" in out
        assert "1 changed, 1 unchanged." in out

    def test_diff_missing_local_file(self, project, capsys):
        """Test a requested component that is not installed."""
        assert run(project, "diff", "dialog") == 1

        err = capsys.readouterr().err
        assert "  ! dialog:" in err

    def test_diff_uses_source_dir(self, project, capsys, monkeypatch, tmp_path_factory):
        """Test SHADCN_UI_SOURCE_DIR supplies the registry sources."""
        sources = tmp_path_factory.mktemp("sources")
        (sources / "label.rs").write_text("a\nb\nc\n", encoding="utf-8")
        monkeypatch.setenv("SHADCN_UI_SOURCE_DIR", str(sources))
        run(project, "add", "label")
        (project / "src/components/ui/label.rs").write_text("a\nx\nc\n", encoding="utf-8")
        capsys.readouterr()

        assert run(project, "diff", "label") == 0

        out = capsys.readouterr().out
        assert "--- a/label (registry)\n+++ b/label (local)\n@@ -1,3 +1,3 @@\n a\n-b\n+x\n c\n" in out


class TestUpdateCommand:
    """Test `shadcn-ui update`."""

    def test_update_yes(self, project, capsys):
        """Test --yes applies the update with a backup."""
        run(project, "add", "button")
        path = append_local_change(project, "button")
        capsys.readouterr()

        assert run(project, "update", "--yes") == 0

        out = capsys.readouterr().out
        assert "  + Updated button to v0.1.0 (backup: button.rs.bak)" in out
        assert "1 updated." in out
        assert "// local tweak" not in path.read_text(encoding="utf-8")
        assert "// local tweak" in path.with_name("button.rs.bak").read_text(encoding="utf-8")

    def test_update_prompt_declined(self, project, capsys, monkeypatch):
        """Test answering no keeps the local file."""
        run(project, "add", "button")
        path = append_local_change(project, "button")
        monkeypatch.setattr("builtins.input", lambda prompt: "n")
        capsys.readouterr()

        assert run(project, "update", "button") == 0

        out = capsys.readouterr().out
        assert "+// local tweak" in out
        assert "  - Kept local button" in out
        assert "1 declined." in out
        assert "// local tweak" in path.read_text(encoding="utf-8")

    def test_update_prompt_accepted(self, project, capsys, monkeypatch):
        """Test answering yes applies the update."""
        run(project, "add", "button")
        append_local_change(project, "button")
        monkeypatch.setattr("builtins.input", lambda prompt: "y")
        capsys.readouterr()

        assert run(project, "update") == 0
        assert "  + Updated button" in capsys.readouterr().out

    def test_update_prompt_eof(self, project, capsys, monkeypatch):
        """Test end of input counts as no."""
        run(project, "add", "button")
        append_local_change(project, "button")

        def no_input(prompt):
            raise EOFError

        monkeypatch.setattr("builtins.input", no_input)
        capsys.readouterr()

        assert run(project, "update") == 0
        assert "  - Kept local button" in capsys.readouterr().out


class TestRemoveCommand:
    """Test `shadcn-ui remove`."""

    def test_remove(self, project, capsys):
        """Test removing an installed component."""
        run(project, "add", "toggle_group")
        capsys.readouterr()

        assert run(project, "remove", "toggle") == 0

        captured = capsys.readouterr()
        assert "  - Removed toggle" in captured.out
        assert "warning: toggle is still used by: toggle_group" in captured.err
        assert not (project / "src/components/ui/toggle.rs").exists()

    def test_remove_not_installed(self, project, capsys):
        """Test removing an absent component."""
        assert run(project, "remove", "card") == 0
        assert "  = card was not installed" in capsys.readouterr().out


def test_registry_file_error(tmp_path, capsys, monkeypatch):
    """Test an unreadable registry catalog exits with an error."""
    monkeypatch.setenv("SHADCN_UI_REGISTRY_FILE", str(tmp_path / "missing.yaml"))

    assert main(["--cwd", str(tmp_path), "list"]) == 1
    assert "Error: Registry catalog not found" in capsys.readouterr().err
