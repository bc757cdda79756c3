from pathlib import Path
import pytest

pytest.importorskip("customtkinter")

import app as gui
from anagrams.engine import Engine


class FakeEntry:
    def __init__(self, text: str) -> None:
        self.text = text

    def get(self) -> str:
        return self.text


class FakeApp:
    """Stand-in for AnagramApp: the search methods without a Tk window."""
    _do_search = gui.AnagramApp._do_search
    _search_worker = gui.AnagramApp._search_worker
    _on_search_done = gui.AnagramApp._on_search_done

    def __init__(self, eng: Engine, text: str) -> None:
        self._engine = eng
        self._search_after_id = None
        self._search_gen = 0
        self.entry_query = FakeEntry(text)
        self.results = []
        self.status = []
        self.scheduled = []

    def after(self, _ms, fn):
        self.scheduled.append(fn)

    def _set_results(self, text: str) -> None:
        self.results.append(text)

    def _set_status(self, text: str) -> None:
        self.status.append(text)

    def _log(self, msg: str) -> None:
        pass


class RecordingThread:
    started = []

    def __init__(self, target, args=(), daemon=None) -> None:
        self.target, self.args = target, args

    def start(self) -> None:
        RecordingThread.started.append(self)


@pytest.fixture
def engine(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("I\nlove\nyou\nolive\n", encoding="utf-8")
    eng = Engine()
    eng.build(str(p))
    try:
        yield eng
    finally:
        eng.shutdown()


@pytest.fixture(autouse=True)
def record_threads(monkeypatch):
    RecordingThread.started = []
    monkeypatch.setattr(gui.threading, "Thread", RecordingThread)
    yield


@pytest.mark.e2e
def test_search_runs_in_worker_thread_not_inline(engine):
    fake = FakeApp(engine, "you olive")
    fake._do_search()

    # nothing searched on the calling (Tk) thread yet
    assert fake.results == []
    assert len(RecordingThread.started) == 1

    worker = RecordingThread.started[0]
    worker.target(*worker.args)
    assert len(fake.scheduled) == 1
    fake.scheduled[0]()
    assert "I love you" in fake.results[-1]
    assert "olive you" in fake.results[-1]


@pytest.mark.e2e
def test_stale_results_are_dropped(engine):
    fake = FakeApp(engine, "you olive")
    fake._do_search()
    first = RecordingThread.started[0]

    fake.entry_query.text = "xyz"
    fake._do_search()
    first.target(*first.args)
    fake.scheduled[-1]()
    assert fake.results == []

    second = RecordingThread.started[1]
    second.target(*second.args)
    fake.scheduled[-1]()
    assert fake.results == ["(no anagrams)"]


@pytest.mark.e2e
def test_run_query_word_hits_only_for_single_word(engine):
    hits, sentences = gui.run_query(engine, ["olive"])
    assert hits == ["olive"]
    assert ["olive"] in sentences
    hits, _ = gui.run_query(engine, ["you", "olive"])
    assert hits == []
