"""Tests for TemplateDataBuilder."""

from datetime import UTC, datetime

from departure_board.adapters.web.builders import TemplateDataBuilder
from departure_board.adapters.web.builders.template_data_builder import dom_id_for
from departure_board.adapters.web.formatters import DepartureFormatter
from departure_board.adapters.web.state import BoardState
from departure_board.domain.models import BoardEntry, BoardSnapshot, Theme
from tests.fakes import make_departure


def make_builder() -> TemplateDataBuilder:
    return TemplateDataBuilder(DepartureFormatter("UTC"))


def test_dom_id_is_stable_and_selector_safe() -> None:
    """Given a trip id with pipes, when deriving the DOM id, then it is stable and safe."""
    dom_id = dom_id_for("1|31707|4|86|19102026")

    assert dom_id == dom_id_for("1|31707|4|86|19102026")
    assert dom_id.startswith("departure-")
    assert "|" not in dom_id
    assert dom_id != dom_id_for("1|31707|4|86|20102026")


def test_entry_for_upcoming_departure() -> None:
    """Given a departure in 3 minutes, when building, then the countdown label is used."""
    entry = make_builder().build_entry(BoardEntry(make_departure("a", minutes=3, line_type="bus")))

    assert entry["css_class"] == "departure"
    assert entry["time_label"] == "3'"
    assert entry["time_class"] == "departure-time"
    assert entry["is_now"] is False
    assert entry["icon_src"] == "/static/icons/bus.svg"
    assert entry["clock_time"] == "10:03"


def test_entry_for_departure_leaving_now() -> None:
    """Given a departure at zero minutes, when building, then the now indicator is requested."""
    entry = make_builder().build_entry(BoardEntry(make_departure("a", minutes=0)))

    assert entry["is_now"] is True
    assert entry["time_label"] == ""
    assert entry["time_class"] == "departure-time now"


def test_entry_for_fading_cancelled_departure() -> None:
    """Given a fading cancelled row, when building, then both classes are set."""
    entry = make_builder().build_entry(
        BoardEntry(make_departure("a", is_cancelled=True), fading=True)
    )

    assert entry["css_class"] == "departure fade cancelled"


def test_build_from_state_with_error() -> None:
    """Given a state with an error, when building, then error flags are set."""
    state = BoardState(error_message="Only viewports with aspect ratios bigger than 1.2 are supported")

    assigns = make_builder().build(state)

    assert assigns["has_error"] is True
    assert assigns["update_time"] == "Never"
    assert assigns["theme"] == "light"


def test_build_from_applied_snapshot() -> None:
    """Given a snapshot applied to the state, when building, then entries and theme follow it."""
    state = BoardState()
    state.apply_snapshot(
        BoardSnapshot(
            entries=[BoardEntry(make_departure("a")), BoardEntry(make_departure("b"))],
            theme=Theme.DARK,
            api_status="success",
            last_update=datetime(2026, 10, 19, 10, 0, 5, tzinfo=UTC),
        )
    )

    assigns = make_builder().build(state)

    assert [entry["id"] for entry in assigns["entries"]] == ["a", "b"]
    assert assigns["theme"] == "dark"
    assert assigns["api_status"] == "success"
    assert assigns["update_time"] == "10:00:05"
    assert assigns["has_error"] is False
