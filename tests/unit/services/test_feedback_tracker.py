from src.app.services.feedback_tracker import (
    ConsoleError,
    FeedbackTracker,
    UserAction,
    UserActionDetails,
)


def test_actions_are_bounded_to_twenty():
    tracker = FeedbackTracker()

    for index in range(25):
        tracker.record_action(
            UserAction(type="click", timestamp=index, details=UserActionDetails(element=f"b{index}"))
        )

    actions = tracker.get_context().user_actions
    assert len(actions) == 20
    assert actions[0].details.element == "b5"
    assert actions[-1].details.element == "b24"


def test_console_errors_deduplicated_within_one_second():
    tracker = FeedbackTracker()

    assert tracker.record_console_error(ConsoleError(message="boom", timestamp=1000)) is True
    assert tracker.record_console_error(ConsoleError(message="boom", timestamp=1500)) is False
    assert tracker.record_console_error(ConsoleError(message="boom", timestamp=2100)) is True
    assert tracker.record_console_error(ConsoleError(message="other", timestamp=2200)) is True

    assert [e.timestamp for e in tracker.get_context().console_errors] == [1000, 2100, 2200]


def test_console_errors_bounded_to_ten():
    tracker = FeedbackTracker()

    for index in range(12):
        tracker.record_console_error(ConsoleError(message=f"error {index}", timestamp=index))

    errors = tracker.get_context().console_errors
    assert len(errors) == 10
    assert errors[0].message == "error 2"


def test_api_error_strips_domain():
    tracker = FeedbackTracker()

    error = tracker.record_api_error("https://api.example.com/rest/v1/items?id=1", "get", "HTTP 404", 404)

    assert error.endpoint == "/rest/v1/items?id=1"
    assert error.method == "GET"
    assert error.status == 404


def test_clear_empties_all_histories():
    tracker = FeedbackTracker()
    tracker.record_action(UserAction(type="navigate"))
    tracker.record_console_error(ConsoleError(message="boom"))
    tracker.record_api_error("/x", "POST", "HTTP 500", 500)

    tracker.clear()

    context = tracker.get_context()
    assert context.user_actions == []
    assert context.console_errors == []
    assert context.api_errors == []


def test_trackers_do_not_share_state():
    first = FeedbackTracker()
    second = FeedbackTracker()

    first.record_action(UserAction(type="click"))

    assert second.get_context().user_actions == []
