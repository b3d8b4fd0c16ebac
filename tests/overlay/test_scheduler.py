"""Tests for the deferred task queue."""

from music_tab.overlay import DeferredTasks


class TestDeferredTasks:
    def test_invoke_runs_immediately(self) -> None:
        tasks = DeferredTasks()
        ran = []
        tasks.invoke(lambda: ran.append("now"))
        assert ran == ["now"]
        assert len(tasks) == 0

    def test_invoke_later_waits_for_tick(self) -> None:
        tasks = DeferredTasks()
        ran = []
        tasks.invoke_later(lambda: ran.append("a"))
        tasks.invoke_later(lambda: ran.append("b"))
        assert ran == []
        assert tasks.run_pending() == 2
        assert ran == ["a", "b"]

    def test_same_slot_replaces_pending_task(self) -> None:
        tasks = DeferredTasks()
        ran = []
        tasks.invoke_later(lambda: ran.append("h"), slot="filter")
        tasks.invoke_later(lambda: ran.append("other"))
        tasks.invoke_later(lambda: ran.append("harm"), slot="filter")
        tasks.run_pending()
        assert ran == ["other", "harm"]

    def test_tasks_queued_while_running_wait_for_next_tick(self) -> None:
        tasks = DeferredTasks()
        ran = []

        def first() -> None:
            ran.append("first")
            tasks.invoke_later(lambda: ran.append("second"))

        tasks.invoke_later(first)
        tasks.run_pending()
        assert ran == ["first"]
        tasks.run_pending()
        assert ran == ["first", "second"]

    def test_failing_task_does_not_stop_others(self) -> None:
        tasks = DeferredTasks()
        ran = []

        def boom() -> None:
            raise RuntimeError("widget gone")

        tasks.invoke_later(boom)
        tasks.invoke_later(lambda: ran.append("after"))
        assert tasks.run_pending() == 2
        assert ran == ["after"]
