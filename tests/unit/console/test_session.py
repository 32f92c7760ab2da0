"""Tests for Session evaluation, binding switching and inspection."""

from unittest.mock import MagicMock, patch

import pytest

from evalconsole.audit.store import EvaluationAuditStore
from evalconsole.audit.stores import (
    InMemoryEvaluationAuditStore,
    SQLAlchemyEvaluationAuditStore,
)
from evalconsole.bootstrap import bootstrap
from evalconsole.config.settings import Settings
from evalconsole.console import (
    Binding,
    BindingIndexError,
    EvaluationError,
    InMemorySessionRegistry,
    NoBindingsError,
    Session,
    SessionFactory,
)


@pytest.fixture
def session(factory: SessionFactory, binding_a: Binding, binding_b: Binding) -> Session:
    return factory.from_bindings([binding_a, binding_b])


class TestConstruction:
    """Tests for Session construction."""

    def test_starts_on_first_binding(self, session: Session, binding_a: Binding) -> None:
        assert session.current_index == 0
        assert session.current_binding is binding_a

    def test_registers_itself(
        self, registry: InMemorySessionRegistry, binding_a: Binding
    ) -> None:
        """Should be findable by id as soon as it is constructed."""
        session = Session([binding_a], registry=registry)
        assert registry.find(session.id) is session

    def test_rejects_empty_bindings(self, registry: InMemorySessionRegistry) -> None:
        with pytest.raises(NoBindingsError):
            Session([], registry=registry)
        assert len(registry) == 0

    def test_bindings_are_fixed(self, binding_a: Binding, registry: InMemorySessionRegistry) -> None:
        """Should not follow later mutations of the caller's list."""
        bindings = [binding_a]
        session = Session(bindings, registry=registry)
        bindings.clear()
        assert session.bindings == (binding_a,)

    def test_describe(self, session: Session) -> None:
        info = session.describe()

        assert info.session_id == session.id
        assert info.current_index == 0
        assert [b.function for b in info.bindings] == ["show", "total"]


class TestEvaluate:
    """Tests for Session.evaluate."""

    def test_evaluates_against_current_binding(self, session: Session) -> None:
        assert session.evaluate("1+1") == "=> 2\n"
        assert session.evaluate("x") == "=> 1\n"

    def test_state_persists_between_calls(self, session: Session) -> None:
        session.evaluate("y = x * 10")
        assert session.evaluate("y") == "=> 10\n"

    def test_evaluation_error_propagates(self, session: Session) -> None:
        with pytest.raises(EvaluationError):
            session.evaluate("raise KeyError('k')")

    def test_without_audit_store_has_no_side_effect(self, binding_a: Binding) -> None:
        """Should never call an audit sink when auditing is disabled."""
        with (
            patch.object(InMemoryEvaluationAuditStore, "append") as inmemory_append,
            patch.object(SQLAlchemyEvaluationAuditStore, "append") as sqlalchemy_append,
        ):
            factory = bootstrap(Settings())
            session = factory.from_bindings([binding_a])

            assert session.evaluate("1+1", actor_id="u1") == "=> 2\n"
            assert session.evaluate("y = 3", actor_id="u1") == ""

        assert factory.audit_store is None
        inmemory_append.assert_not_called()
        sqlalchemy_append.assert_not_called()


class TestEvaluateWithAudit:
    """Tests for Session.evaluate with an audit store."""

    @pytest.fixture
    def audited_factory(
        self,
        registry: InMemorySessionRegistry,
        audit_store: InMemoryEvaluationAuditStore,
    ) -> SessionFactory:
        return SessionFactory(registry, audit_store=audit_store)

    def test_appends_one_record_per_call(
        self,
        audited_factory: SessionFactory,
        audit_store: InMemoryEvaluationAuditStore,
        binding_a: Binding,
    ) -> None:
        session = audited_factory.from_bindings([binding_a])

        session.evaluate("1+1", actor_id="user-7")
        session.evaluate("user", actor_id="user-7")

        records = audit_store.list_records()
        assert len(records) == 2
        assert records[0].input == "1+1"
        assert records[0].result == "=> 2\n"
        assert records[0].actor_id == "user-7"
        assert records[0].session_id == session.id
        assert records[1].result == "=> 'alice'\n"

    def test_actor_defaults_to_none(
        self,
        audited_factory: SessionFactory,
        audit_store: InMemoryEvaluationAuditStore,
        binding_a: Binding,
    ) -> None:
        audited_factory.from_bindings([binding_a]).evaluate("x")
        assert audit_store.list_records()[0].actor_id is None

    def test_failed_evaluation_is_not_recorded(
        self,
        audited_factory: SessionFactory,
        audit_store: InMemoryEvaluationAuditStore,
        binding_a: Binding,
    ) -> None:
        session = audited_factory.from_bindings([binding_a])
        with pytest.raises(EvaluationError):
            session.evaluate("1/0")
        assert audit_store.list_records() == []

    def test_audit_failure_propagates(
        self, registry: InMemorySessionRegistry, binding_a: Binding
    ) -> None:
        """Should fail the evaluation when the record can't be written."""
        store = MagicMock(spec=EvaluationAuditStore)
        store.append.side_effect = RuntimeError("database unavailable")
        session = SessionFactory(registry, audit_store=store).from_bindings([binding_a])

        with pytest.raises(RuntimeError, match="database unavailable"):
            session.evaluate("1+1")
        store.append.assert_called_once()


class TestSwitchBinding:
    """Tests for Session.switch_binding."""

    def test_switch_changes_evaluation_context(self, session: Session) -> None:
        assert session.evaluate("x") == "=> 1\n"

        session.switch_binding(1)

        assert session.current_index == 1
        assert session.evaluate("x") == "=> 2\n"
        assert session.evaluate("order_total") == "=> 99\n"

    def test_previous_evaluator_state_is_discarded(self, session: Session) -> None:
        session.evaluate("scratch = 5")
        session.switch_binding(1)
        session.switch_binding(0)

        with pytest.raises(EvaluationError) as exc_info:
            session.evaluate("scratch")
        assert exc_info.value.error_type == "NameError"

    def test_switch_to_same_index_rebuilds_evaluator(self, session: Session) -> None:
        session.evaluate("scratch = 5")
        session.switch_binding(0)

        assert session.current_index == 0
        with pytest.raises(EvaluationError):
            session.evaluate("scratch")

    def test_closes_previous_evaluator(
        self, registry: InMemorySessionRegistry, binding_a: Binding, binding_b: Binding
    ) -> None:
        evaluators: list[MagicMock] = []

        def evaluator_factory(binding: Binding) -> MagicMock:
            evaluator = MagicMock()
            evaluator.binding = binding
            evaluators.append(evaluator)
            return evaluator

        session = Session(
            [binding_a, binding_b],
            registry=registry,
            evaluator_factory=evaluator_factory,
        )
        session.switch_binding(1)

        assert evaluators[0].binding is binding_a
        assert evaluators[1].binding is binding_b
        evaluators[0].close.assert_called_once()
        evaluators[1].close.assert_not_called()

    def test_accepts_numeric_string(self, session: Session) -> None:
        session.switch_binding("1")
        assert session.current_index == 1

    @pytest.mark.parametrize("index", [1.9, 1.0, None])
    def test_rejects_non_integral_index(self, session: Session, index: object) -> None:
        """Should not truncate floats or coerce other values."""
        with pytest.raises(TypeError):
            session.switch_binding(index)  # type: ignore[arg-type]
        assert session.current_index == 0

    def test_rejects_non_numeric_string(self, session: Session) -> None:
        with pytest.raises(ValueError):
            session.switch_binding("first")
        assert session.current_index == 0

    @pytest.mark.parametrize("index", [2, -1, 100])
    def test_out_of_range_index(self, session: Session, index: int) -> None:
        """Should raise instead of clamping or wrapping around."""
        with pytest.raises(BindingIndexError) as exc_info:
            session.switch_binding(index)

        assert isinstance(exc_info.value, IndexError)
        assert session.current_index == 0
        assert session.evaluate("x") == "=> 1\n"


class TestInspect:
    """Tests for Session.inspect."""

    def test_inspects_current_binding(self, session: Session) -> None:
        assert session.inspect("")[0] == ["user", "x"]

        session.switch_binding(1)

        assert session.inspect("")[0] == ["order_total", "x"]

    def test_does_not_affect_evaluator(self, session: Session) -> None:
        session.evaluate("scratch = 1")
        session.inspect("user")
        assert session.evaluate("scratch") == "=> 1\n"


def test_two_frame_scenario(factory: SessionFactory, binding_a: Binding, binding_b: Binding) -> None:
    """Evaluate in the first frame, switch, evaluate in the second."""
    session = factory.from_bindings([binding_a, binding_b])
    assert factory.find(session.id) is session

    assert session.evaluate("1+1") == "=> 2\n"
    session.switch_binding(1)
    assert session.evaluate("x") == "=> 2\n"
