"""Tests for the injection CLI."""

from typer.testing import CliRunner

from injection import get_registry
from injection.cli import app

runner = CliRunner()


def _flat(output: str) -> str:
    """Collapse console line wrapping."""
    return " ".join(output.split())


class TestInspectCommand:
    def test_inspect_lists_registrations(self):
        result = runner.invoke(app, ["inspect", "composition_fixture:configure"])

        assert result.exit_code == 0, result.output
        assert "composition_fixture.Mailer" in result.output
        assert "composition_fixture.SmtpMailer" in result.output
        assert "composition_fixture.Clock" in result.output

    def test_inspect_runs_parameterless_root(self):
        result = runner.invoke(app, ["inspect", "composition_fixture:configure_globally"])

        assert result.exit_code == 0, result.output
        assert "composition_fixture.Clock" in result.output
        assert len(get_registry()) == 1

    def test_inspect_malformed_target(self):
        result = runner.invoke(app, ["inspect", "composition_fixture"])

        assert result.exit_code == 1
        assert "module:attribute" in _flat(result.output)

    def test_inspect_unknown_module(self):
        result = runner.invoke(app, ["inspect", "no_such_module_here:configure"])

        assert result.exit_code == 1
        assert "Cannot import module" in _flat(result.output)

    def test_inspect_unknown_attribute(self):
        result = runner.invoke(app, ["inspect", "composition_fixture:missing"])

        assert result.exit_code == 1
        assert "not found" in _flat(result.output)

    def test_inspect_not_callable(self):
        result = runner.invoke(app, ["inspect", "composition_fixture:NOT_CALLABLE"])

        assert result.exit_code == 1
        assert "not callable" in _flat(result.output)


class TestCheckCommand:
    def test_check_all_registered(self):
        result = runner.invoke(
            app,
            ["check", "composition_fixture:configure", "-r", "composition_fixture:Mailer", "-r", "composition_fixture:Clock"],
        )

        assert result.exit_code == 0, result.output
        assert "All 2 required dependencies are registered" in result.output

    def test_check_reports_missing(self):
        result = runner.invoke(
            app,
            ["check", "composition_fixture:configure", "--require", "composition_fixture:AuditLog"],
        )

        assert result.exit_code == 1
        assert "MISSING" in result.output
        assert "composition_fixture.AuditLog" in result.output

    def test_check_concrete_type_not_satisfied_by_capability(self):
        result = runner.invoke(
            app,
            ["check", "composition_fixture:configure", "-r", "composition_fixture:SmtpMailer"],
        )

        assert result.exit_code == 1
        assert "MISSING" in result.output


class TestCompositionRootErrors:
    def test_keyword_only_root_is_called_without_registry(self):
        result = runner.invoke(app, ["inspect", "composition_fixture:configure_with_options"])

        assert result.exit_code == 0, result.output
        assert "composition_fixture.AuditLog" in result.output

    def test_builtin_root(self):
        result = runner.invoke(app, ["inspect", "builtins:object"])

        assert result.exit_code == 0, result.output

    def test_failing_root_reports_error(self):
        result = runner.invoke(app, ["inspect", "composition_fixture:configure_failing"])

        assert result.exit_code == 1
        assert "Composition root failed: RuntimeError: mail relay [smtp] unreachable" in _flat(result.output)

    def test_module_failing_at_import_reports_error(self):
        result = runner.invoke(app, ["check", "eager_consumer_fixture:configure", "-r", "composition_fixture:Mailer"])

        assert result.exit_code == 1
        assert "Cannot import module eager_consumer_fixture" in _flat(result.output)
        assert "No provider registered for type composition_fixture.Mailer" in _flat(result.output)
