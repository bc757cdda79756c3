# app.py
# CustomTkinter GUI for the anagram engine (dark theme).
# - Load the bundled word list or any word list file.
# - Background loading thread (keeps UI responsive).
# - Live anagram search with debounce, run off the Tk thread; results & event log panes.

from __future__ import annotations
import threading
from typing import List, Optional, Tuple

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from anagrams.engine import Engine
from anagrams.config import DICTIONARY_PATH, MAX_RESULTS
from anagrams.models import Sentence
from anagrams.normalize import split_sentence


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def format_results(word_hits: List[str], sentences: List[Sentence]) -> str:
    lines: List[str] = []
    if word_hits:
        lines.append("word anagrams: " + ", ".join(word_hits))
        lines.append("")
    for i, s in enumerate(sentences, start=1):
        lines.append(f"{i:<4} {' '.join(s)}")
    return "\n".join(lines)


def run_query(eng: Engine, words: Sentence) -> Tuple[List[str], List[Sentence]]:
    """Word anagrams (single-word queries only) and up to MAX_RESULTS sentences."""
    word_hits = eng.word_anagrams(words[0]) if len(words) == 1 else []
    sentences = eng.sentence_anagrams(words, limit=MAX_RESULTS)
    return word_hits, sentences


# -------------------- main app --------------------

class AnagramApp(ctk.CTk):
    """Dark-themed GUI that loads a word list and queries the engine."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Anagram Engine")
        self.geometry("820x600")
        self.minsize(700, 500)

        # State
        self._engine: Optional[Engine] = None
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None
        self._search_gen: int = 0  # bumped per query; stale worker results are dropped

        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=0)  # log

        self._build_header()
        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)
        self._start_loading(DICTIONARY_PATH)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Anagram Engine", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(1, weight=1)

        ctk.CTkButton(bar, text="Choose Word List", command=self._choose_file).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )
        self.lbl_source = ctk.CTkLabel(bar, text="No word list", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate")
        self.progress.grid(row=0, column=2, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=3, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Sentence:", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )
        self.entry_query = ctk.CTkEntry(box, placeholder_text="e.g. Yes man")
        self.entry_query.grid(row=0, column=1, sticky="ew", padx=(6, 12), pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

    def _build_results(self) -> None:
        self.txt_results = ctk.CTkTextbox(self, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        self._set_results("(load a word list and start typing)")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=90, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("GUI ready.")

    # --------- loading pipeline (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose word list",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")],
        )
        if path:
            self._start_loading(path)

    def _start_loading(self, path: str) -> None:
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A word list is already loading. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(path))
        self._set_status("Loading…")
        self.progress.start()
        self._engine = None

        self._loading_thread = threading.Thread(target=self._load_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str) -> None:
        eng = Engine()
        try:
            eng.build(path)
        except (OSError, ValueError) as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        # hand the finished engine to the Tk thread; it is read-only from here on
        self.after(0, lambda: self._on_load_ok(eng))

    def _on_load_ok(self, eng: Engine) -> None:
        self.progress.stop()
        self._engine = eng
        n = eng.index.word_count if eng.index else 0
        self._set_status(f"Loaded {n:,} words.")
        self._log(f"Dictionary ready ({n} words).")
        self.entry_query.focus_set()
        self._do_search()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading word list.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load word list.\nSee event log for details.")

    # --------- search ---------

    def _on_query_changed(self, _ev=None) -> None:
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(200, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        self._search_gen += 1
        words = split_sentence(self.entry_query.get())
        if not words:
            self._set_results("")
            return
        if self._engine is None:
            self._set_results("error: please load a word list before searching.")
            return

        self._set_status("Searching…")
        threading.Thread(
            target=self._search_worker, args=(self._search_gen, self._engine, words), daemon=True
        ).start()

    def _search_worker(self, gen: int, eng: Engine, words: Sentence) -> None:
        word_hits, sentences = run_query(eng, words)
        self.after(0, lambda: self._on_search_done(gen, words, word_hits, sentences))

    def _on_search_done(self, gen: int, words: Sentence, word_hits: List[str], sentences: List[Sentence]) -> None:
        if gen != self._search_gen:
            # a newer query was typed while this one ran
            return
        n = self._engine.index.word_count if self._engine and self._engine.index else 0
        self._set_status(f"Loaded {n:,} words.")
        if not sentences and not word_hits:
            self._set_results("(no anagrams)")
            return
        self._set_results(format_results(word_hits, sentences))
        self._log(f"{' '.join(words)!r}: {len(sentences)} sentence(s)")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    def _on_close(self) -> None:
        if self._engine is not None:
            self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = AnagramApp()
    app.mainloop()
