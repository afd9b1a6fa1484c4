import logging

from pathmask.adapters.observer_logging import LoggingObserver
from pathmask.core.config import MaskerConfig
from pathmask.core.masker import Masker, mask_document


def test_debug_mode_traces_visits_and_masks(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="pathmask.walk")

    output = mask_document(
        '{"user":{"password":"hunter2","name":"n"}}',
        ["$.user.password"],
        MaskerConfig(debug=True),
    )

    assert output == '{"user":{"password":"[REDACTED]","name":"n"}}'
    messages = [record.getMessage() for record in caplog.records if record.name == "pathmask.walk"]
    assert messages == [
        "visit $",
        "visit $.user",
        "visit $.user.password",
        "mask $.user.password (rule $.user.password)",
        "visit $.user.name",
    ]


def test_debug_trace_never_logs_values(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="pathmask.walk")

    mask_document('{"password":"hunter2","other":"visible-value"}', ["$.password"], MaskerConfig(debug=True))

    assert "hunter2" not in caplog.text
    assert "visible-value" not in caplog.text


def test_debug_mode_attaches_logging_observer() -> None:
    masker = Masker(["$.a"], MaskerConfig(debug=True))
    assert isinstance(masker.observer, LoggingObserver)


def test_debug_mode_does_not_change_output() -> None:
    document = '{"a":[{"b":1},{"b":2}],"c":"d"}'
    rules = ["$.a[].b"]
    assert mask_document(document, rules, MaskerConfig(debug=True)) == mask_document(
        document, rules, MaskerConfig(debug=False)
    )
