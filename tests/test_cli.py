"""Tests for easycommit.cli module."""

import pytest
from typer.testing import CliRunner

from easycommit.cli import app, build_record, is_interactive
from easycommit.commit import EmptyDescriptionError, InvalidCommitTypeError
from easycommit.git import GitCommandError
from easycommit.orchestrator import CommitOrchestrator
from easycommit.validator import RuleValidator

runner = CliRunner()

# feat is the fifth default type
HAPPY_INPUT = "5\nadd integration test\ntest\n\n\n\n\n"


@pytest.fixture(autouse=True)
def no_config_file(mocker):
    """Keep real configuration files out of CLI tests."""
    mocker.patch("easycommit.config.find_config_file", return_value=None)


@pytest.fixture
def use_backend(mocker):
    """Route the CLI through a fake backend; returns a setter."""

    def install(backend):
        orchestrator = CommitOrchestrator(backend, RuleValidator())
        mocker.patch("easycommit.cli.main.build_orchestrator", return_value=orchestrator)
        mocker.patch("easycommit.cli.info.build_orchestrator", return_value=orchestrator)
        return backend

    return install


class TestHelpers:
    """Tests for is_interactive and build_record."""

    @pytest.mark.parametrize(
        "interactive,type_name,message,expected",
        [
            (False, None, None, True),
            (True, "feat", "x", True),
            (False, "feat", "x", False),
            (False, "feat", None, False),
            (False, None, "x", False),
        ],
    )
    def test_is_interactive(self, interactive, type_name, message, expected):
        """Test mode selection."""
        assert is_interactive(interactive, type_name, message) is expected

    def test_build_record(self, registry):
        """Test building a record from flags."""
        record = build_record(registry, "FEAT", "add thing", scope="api", body="text", breaking=True)

        assert record.type.name == "feat"
        assert record.format() == (
            "feat(api)!: add thing\n\ntext\n\nBREAKING CHANGE: This commit introduces a breaking change."
        )

    def test_build_record_missing_type(self, registry):
        """Test that a missing type is reported."""
        with pytest.raises(InvalidCommitTypeError) as exc_info:
            build_record(registry, None, "x")
        assert "--type" in str(exc_info.value)

    @pytest.mark.parametrize("message", [None, "", "   "])
    def test_build_record_missing_message(self, registry, message):
        """Test that a missing message is reported."""
        with pytest.raises(EmptyDescriptionError):
            build_record(registry, "feat", message)

    def test_build_record_unknown_type(self, registry):
        """Test that an unknown type is reported."""
        with pytest.raises(InvalidCommitTypeError):
            build_record(registry, "feature", "x")


class TestDirectMode:
    """Tests for committing from flags."""

    def test_commit(self, use_backend, make_backend):
        """Test creating a commit from flags."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, ["-t", "fix", "-s", "auth", "-m", "resolve authentication bug"])

        assert result.exit_code == 0
        assert "Commit created successfully" in result.output
        assert backend.messages == ["fix(auth): resolve authentication bug"]

    def test_breaking_with_note(self, use_backend, make_backend):
        """Test the breaking flags."""
        backend = use_backend(make_backend())

        result = runner.invoke(
            app, ["-t", "feat", "-m", "drop flag", "-b", "--breaking-note", "The --legacy flag is gone."]
        )

        assert result.exit_code == 0
        assert backend.messages == ["feat!: drop flag\n\nBREAKING CHANGE: The --legacy flag is gone."]

    def test_dry_run(self, use_backend, make_backend):
        """Test that dry-run prints the message without committing."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, ["-t", "feat", "-m", "add new feature", "--body", "Details here", "-n"])

        assert result.exit_code == 0
        assert "Preview (dry-run):" in result.output
        assert "feat: add new feature\n\nDetails here" in result.output
        assert backend.calls == []

    def test_dry_run_still_validates(self, use_backend, make_backend):
        """Test that dry-run rejects invalid records."""
        use_backend(make_backend())

        result = runner.invoke(app, ["-t", "feat", "-m", "a" * 73, "-n"])

        assert result.exit_code == 1
        assert "description too long: 73 characters (max 72)" in result.output

    def test_unknown_type(self, use_backend, make_backend):
        """Test that an unknown type exits with an error."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, ["-t", "feature", "-m", "x"])

        assert result.exit_code == 1
        assert "Error: invalid commit type: 'feature'" in result.output
        assert backend.messages == []

    def test_missing_message(self, use_backend, make_backend):
        """Test that a type without a message is an error, not interactive mode."""
        use_backend(make_backend())

        result = runner.invoke(app, ["-t", "feat"])

        assert result.exit_code == 1
        assert "commit description is required" in result.output

    def test_invalid_scope(self, use_backend, make_backend):
        """Test that an invalid scope exits with an error."""
        use_backend(make_backend())

        result = runner.invoke(app, ["-t", "feat", "-s", "my scope", "-m", "x"])

        assert result.exit_code == 1
        assert "scope contains invalid characters" in result.output

    def test_no_staged_changes(self, use_backend, make_backend):
        """Test the staging hint."""
        use_backend(make_backend(has_staged=False))

        result = runner.invoke(app, ["-t", "feat", "-m", "x"])

        assert result.exit_code == 1
        assert "nothing to commit" in result.output
        assert "git add" in result.output

    def test_not_a_repository(self, use_backend, make_backend):
        """Test running outside a repository."""
        use_backend(make_backend(is_repo=False))

        result = runner.invoke(app, ["-t", "feat", "-m", "x"])

        assert result.exit_code == 1
        assert "Error: not a git repository" in result.output

    def test_git_failure(self, use_backend, make_backend):
        """Test that git failures exit with an error."""
        use_backend(make_backend(commit_error=GitCommandError("Git command failed: git commit exited with code 1")))

        result = runner.invoke(app, ["-t", "feat", "-m", "x"])

        assert result.exit_code == 1
        assert "exited with code 1" in result.output


class TestInteractiveMode:
    """Tests for the prompt-driven flow."""

    def test_happy_path(self, use_backend, make_backend):
        """Test building a commit through the prompts."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, [], input=HAPPY_INPUT)

        assert result.exit_code == 0
        assert "Select commit type" in result.output
        assert "feat(test): add integration test" in result.output
        assert "Commit created successfully" in result.output
        assert backend.messages == ["feat(test): add integration test"]

    def test_forced_with_flags(self, use_backend, make_backend):
        """Test that -i runs the prompts even when flags are given."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, ["-i", "-t", "fix", "-m", "ignored"], input=HAPPY_INPUT)

        assert result.exit_code == 0
        assert backend.messages == ["feat(test): add integration test"]

    def test_type_by_name_and_retry(self, use_backend, make_backend):
        """Test typing a type name, with an invalid entry first."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, [], input="feature\nfix\nresolve bug\n\n\n\n\n\n")

        assert result.exit_code == 0
        assert "invalid commit type: 'feature'" in result.output
        assert backend.messages == ["fix: resolve bug"]

    def test_empty_description_reprompts(self, use_backend, make_backend):
        """Test that an empty description is asked for again."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, [], input="6\n\nresolve bug\n\n\n\n\n\n")

        assert result.exit_code == 0
        assert "description cannot be empty" in result.output
        assert backend.messages == ["fix: resolve bug"]

    def test_breaking_change(self, use_backend, make_backend):
        """Test answering yes to the breaking question."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, [], input="5\nnew api\n\nReworked.\n\ny\n\n\n")

        assert result.exit_code == 0
        assert backend.messages == [
            "feat!: new api\n\nReworked.\n\nBREAKING CHANGE: This commit introduces a breaking change."
        ]

    def test_go_back(self, use_backend, make_backend):
        """Test going back to change the type."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, [], input="5\n:b\n4\nupdate readme\n\n\n\n\n\n")

        assert result.exit_code == 0
        assert backend.messages == ["docs: update readme"]

    def test_multi_line_body(self, use_backend, make_backend):
        """Test entering a body over several lines, ended by an empty line."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, [], input="5\nadd thing\n\nfirst line\nsecond line\n\nn\n\ny\n")

        assert result.exit_code == 0
        assert "Please answer y or n." not in result.output
        assert backend.messages == ["feat: add thing\n\nfirst line\nsecond line"]

    def test_back_into_scope_keeps_value(self, use_backend, make_backend):
        """Test that pressing Enter after going back keeps the entered scope."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, [], input="5\nadd thing\napi\n:b\n\n\nn\n\ny\n")

        assert result.exit_code == 0
        assert backend.messages == ["feat(api): add thing"]

    def test_back_into_body_keeps_value(self, use_backend, make_backend):
        """Test that pressing Enter after going back keeps the entered body."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, [], input="5\nadd thing\n\nfirst\nsecond\n\n:b\n\nn\n\ny\n")

        assert result.exit_code == 0
        assert "Current body" in result.output
        assert backend.messages == ["feat: add thing\n\nfirst\nsecond"]

    def test_clear_scope_and_body(self, use_backend, make_backend):
        """Test that '-' empties a previously entered scope and body."""
        backend = use_backend(make_backend())

        result = runner.invoke(
            app, [], input="5\nadd thing\napi\ndetails\n\n:b\n:b\n-\n-\nn\n\ny\n"
        )

        assert result.exit_code == 0
        assert backend.messages == ["feat: add thing"]

    def test_cancel(self, use_backend, make_backend):
        """Test quitting from a prompt."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, [], input="5\n:q\n")

        assert result.exit_code == 1
        assert "Commit cancelled." in result.output
        assert backend.calls == []

    def test_decline_confirmation(self, use_backend, make_backend):
        """Test answering no at the final confirmation."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, [], input="5\nadd thing\n\n\n\n\nn\n")

        assert result.exit_code == 1
        assert "Commit cancelled." in result.output
        assert backend.messages == []

    def test_end_of_input_cancels(self, use_backend, make_backend):
        """Test that running out of input cancels the flow."""
        backend = use_backend(make_backend())

        result = runner.invoke(app, [], input="5\n")

        assert result.exit_code == 1
        assert backend.calls == []

    def test_no_staged_changes(self, use_backend, make_backend):
        """Test that the staging hint is shown when the commit fails."""
        use_backend(make_backend(has_staged=False))

        result = runner.invoke(app, [], input=HAPPY_INPUT)

        assert result.exit_code == 1
        assert "nothing to commit" in result.output


class TestInfoCommands:
    """Tests for the types and last subcommands."""

    def test_types(self):
        """Test listing commit types."""
        result = runner.invoke(app, ["types"])

        assert result.exit_code == 0
        assert "Commit types:" in result.output
        assert "feat" in result.output
        assert "A new feature" in result.output

    def test_last(self, use_backend, make_backend):
        """Test showing the last commit message."""
        use_backend(make_backend(last_message="fix: earlier change"))

        result = runner.invoke(app, ["last"])

        assert result.exit_code == 0
        assert "fix: earlier change" in result.output

    def test_last_git_error(self, use_backend, make_backend):
        """Test the error when there are no commits."""
        use_backend(make_backend(last_message=None))

        result = runner.invoke(app, ["last"])

        assert result.exit_code == 1
        assert "Git error:" in result.output


class TestGlobalOptions:
    """Tests for --version, --help and --config."""

    def test_version(self):
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "easy-commit version" in result.output

    def test_help(self):
        """Test the help text."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "--type" in result.output
        assert "types" in result.output

    def test_missing_config_file(self, temp_dir):
        """Test that an explicit missing config file is an error."""
        result = runner.invoke(app, ["--config", str(temp_dir / "missing.yaml"), "types"])

        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_config_limits_applied(self, temp_dir):
        """Test that config limits reach validation."""
        path = temp_dir / "easy-commit.yaml"
        path.write_text("commit:\n  max_description_length: 10\nlogger:\n  level: SILENT\n")

        result = runner.invoke(app, ["--config", str(path), "-t", "feat", "-m", "a" * 11, "-n"])

        assert result.exit_code == 1
        assert "description too long: 11 characters (max 10)" in result.output
