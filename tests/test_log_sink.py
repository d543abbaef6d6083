"""Tests for the process-wide LogSink."""

import threading

from patterns import LogSink


class TestLogSinkInstance:
    def test_instance_is_shared(self):
        assert LogSink.instance() is LogSink.instance()

    def test_constructor_returns_shared_instance(self):
        assert LogSink() is LogSink.instance()

    def test_reset_creates_new_instance(self):
        first = LogSink.instance()
        LogSink.reset()
        assert LogSink.instance() is not first

    def test_concurrent_first_access_yields_one_instance(self):
        seen = []
        barrier = threading.Barrier(8)

        def grab():
            barrier.wait()
            seen.append(LogSink.instance())

        threads = [threading.Thread(target=grab) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len({id(s) for s in seen}) == 1


class TestLogSinkOutput:
    def test_log_prefixes_message(self, capsys):
        LogSink.instance().log("hello")
        assert capsys.readouterr().out == "[LOG]: hello\n"

    def test_empty_message(self, capsys):
        LogSink.instance().log("")
        assert capsys.readouterr().out == "[LOG]: \n"
