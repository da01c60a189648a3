# application/executor/command_registry.py
from __future__ import annotations

import importlib
from typing import Any, Callable, Dict, List

from application.commands.base import Command
from domain.errors import CommandResolutionError

CommandFactory = Callable[[], Any]


class CommandRegistry:
    """
    Maps command references used in process descriptions to factories.

    With `allow_import=True`, references that are not registered but look like
    `package.module:Name` or `package.module.Name` are imported on demand.
    """

    def __init__(self, factories: Dict[str, CommandFactory] | None = None, allow_import: bool = False):
        self._factories: Dict[str, CommandFactory] = {}
        self._allow_import = allow_import
        for reference, factory in (factories or {}).items():
            self.register(reference, factory)

    def register(self, reference: str, factory: CommandFactory) -> "CommandRegistry":
        if reference in self._factories:
            raise ValueError(f"Command already registered: {reference}")
        self._factories[reference] = factory
        return self

    def references(self) -> List[str]:
        return sorted(self._factories)

    def resolve(self, reference: str) -> Command:
        factory = self._factories.get(reference)
        if factory is None:
            factory = self._import_factory(reference)

        try:
            command = factory()
        except Exception as exc:
            raise CommandResolutionError(f"Failed to create command {reference}: {exc}") from exc

        if not isinstance(command, Command):
            raise CommandResolutionError(
                f"Not a command: {reference} ({type(command).__name__})"
            )
        return command

    def _import_factory(self, reference: str) -> CommandFactory:
        if not self._allow_import:
            raise CommandResolutionError(f"No command registered for: {reference}")
        return self.import_factory(reference)

    @staticmethod
    def import_factory(reference: str) -> CommandFactory:
        """Import `package.module:Name` (or `package.module.Name`)."""
        if ":" in reference:
            module_name, _, attr = reference.partition(":")
        else:
            module_name, _, attr = reference.rpartition(".")
        if not module_name or not attr:
            raise CommandResolutionError(f"No command registered for: {reference}")

        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise CommandResolutionError(f"Cannot import {module_name} for command {reference}") from exc

        factory = getattr(module, attr, None)
        if factory is None or not callable(factory):
            raise CommandResolutionError(f"{module_name} has no command factory {attr}")
        return factory
