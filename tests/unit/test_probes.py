from __future__ import annotations

import pytest

from lib_test_contracts.domain.probes import DEFAULT_PROBE_VALUES, ConstructorProbe, ProbeValues


def test_probe_order_matches_verification_order() -> None:
    assert [probe.label for probe in ConstructorProbe] == [
        "no-args",
        "message-only",
        "cause-only",
        "message-and-cause",
    ]


def test_default_probe_values() -> None:
    assert DEFAULT_PROBE_VALUES == ProbeValues(message="abc", cause_message="def", cause_type=ValueError)


def test_arguments_follow_the_arity_of_each_role() -> None:
    for probe in ConstructorProbe:
        assert len(probe.arguments()) == probe.arity


def test_cause_only_arguments_are_fresh_per_call() -> None:
    (first,) = ConstructorProbe.CAUSE_ONLY.arguments()
    (second,) = ConstructorProbe.CAUSE_ONLY.arguments()
    assert isinstance(first, ValueError)
    assert first is not second
    assert str(first) == ""


def test_message_and_cause_arguments_use_custom_values() -> None:
    values = ProbeValues(message="outer", cause_message="inner", cause_type=KeyError)
    message, cause = ConstructorProbe.MESSAGE_AND_CAUSE.arguments(values)
    assert message == "outer"
    assert isinstance(cause, KeyError)
    assert cause.args == ("inner",)


def test_cause_type_must_be_an_exception_class() -> None:
    with pytest.raises(TypeError, match="cause_type"):
        ProbeValues(cause_type=int)  # type: ignore[arg-type]
