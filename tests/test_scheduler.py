from ttakit.scheduler import Scheduler, get_instance


def test_get_instance_is_shared():
    first = get_instance()
    assert first is get_instance()
    assert isinstance(first, Scheduler)


def test_default_priority_is_normal():
    assert get_instance().current_priority() == 0


def test_idle_counts():
    sched = get_instance()
    assert sched.pending_count() == 0
    assert sched.running_count() == 0
    assert sched.load_average() == 0.0


def test_priority_override_leaves_state_unchanged():
    sched = get_instance()
    sched.set_priority_override(object(), 5)
    assert sched.current_priority() == 0
    assert sched.pending_count() == 0