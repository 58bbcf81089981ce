"""Tests for the per-key lock."""

import threading
import time

from catalog.infrastructure.locking import FileKeyedLock, KeyedLock


class TestKeyedLock:

    def test_same_key_is_serialized(self):
        locks = KeyedLock()
        active = 0
        peak = 0
        counter_lock = threading.Lock()

        def work() -> None:
            nonlocal active, peak
            with locks.hold("a"):
                with counter_lock:
                    active += 1
                    peak = max(peak, active)
                time.sleep(0.01)
                with counter_lock:
                    active -= 1

        threads = [threading.Thread(target=work) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert peak == 1

    def test_different_keys_do_not_block(self):
        locks = KeyedLock()
        with locks.hold("a"):
            acquired = threading.Event()

            def other() -> None:
                with locks.hold("b"):
                    acquired.set()

            t = threading.Thread(target=other)
            t.start()
            assert acquired.wait(timeout=2)
            t.join()

    def test_idle_locks_are_dropped(self):
        locks = KeyedLock()
        with locks.hold(1):
            assert len(locks) == 1
        assert len(locks) == 0

    def test_released_after_exception(self):
        locks = KeyedLock()
        try:
            with locks.hold(1):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        with locks.hold(1):
            pass
        assert len(locks) == 0


class TestFileKeyedLock:

    def test_instances_on_one_directory_serialize_a_key(self, tmp_path):
        first = FileKeyedLock(tmp_path / "locks")
        second = FileKeyedLock(tmp_path / "locks")
        entered = threading.Event()

        def other() -> None:
            with second.hold(7):
                entered.set()

        with first.hold(7):
            t = threading.Thread(target=other)
            t.start()
            assert not entered.wait(timeout=0.2)
        assert entered.wait(timeout=2)
        t.join()

    def test_different_keys_do_not_block(self, tmp_path):
        first = FileKeyedLock(tmp_path / "locks")
        second = FileKeyedLock(tmp_path / "locks")
        with first.hold(1):
            acquired = threading.Event()

            def other() -> None:
                with second.hold(2):
                    acquired.set()

            t = threading.Thread(target=other)
            t.start()
            assert acquired.wait(timeout=2)
            t.join()
