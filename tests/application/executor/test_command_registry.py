# tests/application/executor/test_command_registry.py
import pytest

from application.executor.command_registry import CommandRegistry
from domain.errors import CommandResolutionError
from tests.sample_commands import FailureCommand, SuccessCommand


class NotACommand:
    pass


class TestCommandRegistry:
    def test_resolve_registered_reference(self):
        registry = CommandRegistry().register("success", SuccessCommand)

        command = registry.resolve("success")

        assert isinstance(command, SuccessCommand)

    def test_resolve_creates_new_instances(self):
        registry = CommandRegistry({"success": SuccessCommand})
        assert registry.resolve("success") is not registry.resolve("success")

    def test_factory_callable(self):
        shared = FailureCommand()
        registry = CommandRegistry({"shared": lambda: shared})
        assert registry.resolve("shared") is shared

    def test_references(self):
        registry = CommandRegistry({"b": SuccessCommand, "a": FailureCommand})
        assert registry.references() == ["a", "b"]

    def test_duplicate_registration_rejected(self):
        registry = CommandRegistry({"success": SuccessCommand})
        with pytest.raises(ValueError, match="already registered"):
            registry.register("success", FailureCommand)

    def test_unknown_reference_raises(self):
        with pytest.raises(CommandResolutionError, match="No command registered"):
            CommandRegistry().resolve("tests.sample_commands:SuccessCommand")

    def test_non_command_rejected(self):
        registry = CommandRegistry({"bad": NotACommand})
        with pytest.raises(CommandResolutionError, match="Not a command"):
            registry.resolve("bad")

    def test_factory_error_wrapped(self):
        def broken():
            raise RuntimeError("no database")

        registry = CommandRegistry({"broken": broken})
        with pytest.raises(CommandResolutionError, match="no database"):
            registry.resolve("broken")

    @pytest.mark.parametrize(
        "reference",
        ["tests.sample_commands:SuccessCommand", "tests.sample_commands.SuccessCommand"],
    )
    def test_import_references(self, reference):
        registry = CommandRegistry(allow_import=True)
        assert isinstance(registry.resolve(reference), SuccessCommand)

    def test_import_missing_module(self):
        registry = CommandRegistry(allow_import=True)
        with pytest.raises(CommandResolutionError, match="Cannot import"):
            registry.resolve("no_such_package.commands:Thing")

    def test_import_missing_attribute(self):
        registry = CommandRegistry(allow_import=True)
        with pytest.raises(CommandResolutionError, match="has no command factory"):
            registry.resolve("tests.sample_commands:Nope")

    def test_import_needs_module_path(self):
        registry = CommandRegistry(allow_import=True)
        with pytest.raises(CommandResolutionError):
            registry.resolve("plainname")
