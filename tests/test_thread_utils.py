import threading

import pytest

from aphcore.thread_utils import MAX_NAME_LENGTH, get_name, set_name


def _run_in_thread(func):
    result = {}

    def target():
        try:
            result["value"] = func()
        except Exception as exc:  # handed back to the test
            result["error"] = exc

    thread = threading.Thread(target=target)
    thread.start()
    thread.join()
    return result


def test_set_then_get_round_trip():
    def body():
        set_name("worker:3")
        return get_name()

    assert _run_in_thread(body)["value"] == "worker:3"


def test_name_at_limit_is_accepted():
    name = "n" * MAX_NAME_LENGTH

    def body():
        set_name(name)
        return get_name()

    assert _run_in_thread(body)["value"] == name


def test_too_long_name_is_rejected_and_name_unchanged():
    def body():
        before = get_name()
        with pytest.raises(ValueError):
            set_name("n" * (MAX_NAME_LENGTH + 1))
        return before == get_name()

    assert _run_in_thread(body)["value"] is True


def test_names_are_per_thread():
    main_name = get_name()

    def body():
        set_name("other")
        return get_name()

    assert _run_in_thread(body)["value"] == "other"
    assert get_name() == main_name