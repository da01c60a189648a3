# tests/application/builder/test_process_builder.py
import pytest

from application.builder.process_builder import ProcessBuilder, UnresolvedCommand
from application.commands.base import Command, ProcessCommand
from domain.context import Context
from domain.errors import (
    CommandResolutionError,
    DescriptionLoadError,
    DescriptionNotFoundError,
    ProcessConfigError,
    StepBudgetExceededError,
    UnknownStepError,
    UnsupportedOperationError,
)
from domain.outcome import Outcome
from tests.sample_commands import RecordingLogger, resource_source, sample_registry


class CountingRegistry:
    def __init__(self):
        self._registry = sample_registry()
        self.resolved = []

    def resolve(self, reference):
        self.resolved.append(reference)
        return self._registry.resolve(reference)


def make_builder(source, logger=None, **kwargs):
    return ProcessBuilder(
        source,
        sample_registry(),
        description_source=resource_source(),
        logger=logger or RecordingLogger(),
        **kwargs,
    )


class TestBuild:
    def test_builder_is_a_process_command(self):
        builder = make_builder("")
        assert isinstance(builder, ProcessCommand)
        assert isinstance(builder, Command)

    def test_build_process_graph(self):
        builder = make_builder("/commandChainProcess.xml")

        graph = builder.build()

        assert graph.process_id == "sampleProcess"
        assert graph.start_step_id == "Start"
        assert [s.step_id for s in graph.steps] == ["Start", "Next", "Error"]
        assert graph.next_step_id("Start", Outcome.SUCCESS) == "Next"
        assert builder.process_id == "sampleProcess"

    def test_build_is_cached(self):
        registry = CountingRegistry()
        builder = ProcessBuilder("commandChainPriority.xml", registry, description_source=resource_source())

        first = builder.build()
        second = builder.build()

        assert first is second
        assert len(registry.resolved) == 3

    def test_missing_source_raises_on_build(self):
        with pytest.raises(DescriptionNotFoundError):
            make_builder("/notExists.xml").build()

    def test_malformed_source_raises_on_build(self):
        with pytest.raises(DescriptionLoadError):
            make_builder("invalidXMLDocument.xml").build()

    def test_unresolved_command_raises_in_strict_build(self):
        with pytest.raises(CommandResolutionError):
            make_builder("commandChainUnresolved.xml").build()

    def test_unresolved_command_becomes_placeholder_in_lenient_build(self):
        logger = RecordingLogger()
        graph = make_builder("commandChainUnresolved.xml", logger).build(strict=False)

        assert isinstance(graph.get_step("missing").command, UnresolvedCommand)
        assert "command.unresolved" in logger.names()

    def test_duplicate_transition_is_config_error(self):
        with pytest.raises(ProcessConfigError, match="Duplicate transition"):
            make_builder("duplicateTransition.xml").build()

    def test_builder_binds_source_to_log_events(self):
        logger = RecordingLogger()
        make_builder("commandChainProcess.xml", logger).build()
        built = [e for e in logger.events if e["event"] == "process.built"]
        assert built[0]["process_source"] == "commandChainProcess.xml"
        assert built[0]["process_id"] == "sampleProcess"


class TestChainMode:
    def test_same_priority_steps_all_run(self):
        builder = make_builder("/commandChainPriority.xml")
        context = Context()
        context.put("resultString", "")

        outcome = builder.execute_command(context)

        assert context.get_as_string("resultString") == "S-S-S-"
        assert outcome is Outcome.SUCCESS

    def test_priority_order(self):
        context = Context()

        make_builder("commandChainOrdered.xml").execute_command(context)

        assert context.get("order") == [1, 2, 3, 4]

    def test_abort_stops_later_priorities(self):
        context = Context()

        outcome = make_builder("commandChainAbort.xml").execute_command(context)

        assert outcome is Outcome.ABORT
        assert context.get("resultString") == "S-A-S-"

    def test_failure_continues_later_priorities(self):
        context = Context()

        outcome = make_builder("commandChainFailure.xml").execute_command(context)

        assert outcome is Outcome.FAILURE
        assert context.get("resultString") == "F-S-S-"

    def test_missing_source_yields_failure(self):
        builder = make_builder("notExists.xml")

        assert builder.execute_command(Context()) is Outcome.FAILURE
        assert builder.process_id is None

    def test_invalid_document_yields_failure(self):
        logger = RecordingLogger()
        builder = make_builder("invalidXMLDocument.xml", logger)

        assert builder.execute_command(Context.standard()) is Outcome.FAILURE
        failed = [e for e in logger.events if e["event"] == "process.build_failed"]
        assert failed[0]["mode"] == "chain"

    def test_config_error_yields_failure(self):
        assert make_builder("duplicateTransition.xml").execute_command(Context()) is Outcome.FAILURE

    def test_unresolved_command_counts_as_failed_step(self):
        logger = RecordingLogger()
        context = Context()

        outcome = make_builder("commandChainUnresolved.xml", logger).execute_command(context)

        assert outcome is Outcome.FAILURE
        assert context.get("resultString") == "S-"
        assert "step.failed" in logger.names()

    def test_execute_command_as_chain(self):
        assert make_builder("commandChainPriority.xml").execute_command_as_chain(Context()) is Outcome.NEXT
        assert make_builder("commandChainFailure.xml").execute_command_as_chain(Context()) is Outcome.DONE
        assert make_builder("commandChainAbort.xml").execute_command_as_chain(Context()) is Outcome.DONE
        assert make_builder("notExists.xml").execute_command_as_chain(Context()) is Outcome.DONE


class TestProcessMode:
    def test_two_step_process_terminates(self):
        context = Context()
        logger = RecordingLogger()

        result = make_builder("/commandChainProcess.xml", logger).execute_as_process("Start", context)

        assert result is None
        assert context.get("resultString") == "S-S-"
        assert logger.names().count("step.start") == 2

    def test_process_follows_outcomes(self):
        context = Context()

        make_builder("commandChainRouting.xml").execute_as_process("Check", context)

        # Check fails -> Repair -> Ship; Ship has no SUCCESS transition
        assert context.get("resultString") == "F-S-S-"

    def test_same_process_from_yaml_and_json(self):
        for source in ("sampleProcess.yaml", "sampleProcess.json"):
            context = Context()
            assert make_builder(source).execute_as_process("Start", context) is None
            assert context.get("resultString") == "S-S-"

    def test_context_created_when_omitted(self):
        assert make_builder("commandChainProcess.xml").execute_as_process("Start") is None

    def test_missing_source_yields_none(self):
        builder = make_builder("/commandChainProcessNotExists.xml")

        assert builder.execute_as_process("Start", Context()) is None
        assert builder.process_id is None

    def test_malformed_source_yields_none(self):
        assert make_builder("invalidXMLDocument.xml").execute_as_process("Start", Context()) is None

    def test_unknown_start_raises(self):
        with pytest.raises(UnknownStepError):
            make_builder("commandChainProcess.xml").execute_as_process("Nowhere", Context())

    def test_unresolved_command_raises(self):
        with pytest.raises(CommandResolutionError):
            make_builder("commandChainUnresolved.xml").execute_as_process("ok", Context())

    def test_unresolved_command_raises_after_lenient_chain_run(self):
        builder = make_builder("commandChainUnresolved.xml")
        builder.execute_command(Context())

        with pytest.raises(CommandResolutionError):
            builder.execute_as_process("ok", Context())

    def test_step_budget(self):
        builder = make_builder("commandChainCycle.xml", max_steps=4)
        with pytest.raises(StepBudgetExceededError):
            builder.execute_as_process("Ping", Context())

    def test_context_only_call_is_unsupported(self):
        builder = make_builder("/commandChainProcess.xml")

        with pytest.raises(UnsupportedOperationError) as excinfo:
            builder.execute_as_process(Context())

        assert str(excinfo.value) == "Use execute_as_process(start, context)"

    def test_unsupported_operation_is_not_implemented_error(self):
        with pytest.raises(NotImplementedError):
            make_builder("commandChainProcess.xml").execute_as_process(Context())


class TestProcessId:
    def test_set_process_id_is_unsupported(self):
        builder = make_builder("commandChainProcess.xml")

        with pytest.raises(UnsupportedOperationError) as excinfo:
            builder.set_process_id("")

        assert str(excinfo.value) == "Chainbuilder has no process id."

    def test_process_id_unset_before_build(self):
        assert make_builder("commandChainProcess.xml").process_id is None

    def test_process_id_after_chain_run(self):
        builder = make_builder("commandChainPriority.xml")
        builder.execute_command(Context())
        assert builder.process_id == "priorityChain"
