# app.py
# CustomTkinter GUI for the Word Graph project (dark theme).
# - Load a text file in a background thread (keeps UI responsive).
# - Bridge words, new text, shortest path and PageRank from the query bar.
# - Random walk paced one word per tick with a Stop button.

from __future__ import annotations
import threading
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (pip install -e . or PYTHONPATH=src)
from wordgraph import Engine
from wordgraph import config as CFG
from wordgraph.errors import missing_message
from wordgraph.normalize import normalize_word
from wordgraph.walk import play_walk, save_walk


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


# -------------------- main app --------------------

class WordGraphApp(ctk.CTk):
    """Dark-themed GUI that loads a text file and queries the word graph engine."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Word Graph")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._engine = Engine()
        self._loading_thread: Optional[threading.Thread] = None
        self._walk_thread: Optional[threading.Thread] = None
        self._walk_stop = threading.Event()

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=1)  # log

        # Build UI
        self._build_header()
        self._build_source_bar()
        self._build_queries()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        title = ctk.CTkLabel(header, text="Word Graph", font=self.font_title)
        title.grid(row=0, column=0, sticky="w", padx=12, pady=10)

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(1, weight=1)

        btn_file = ctk.CTkButton(bar, text="Choose File", command=self._choose_file)
        btn_file.grid(row=0, column=0, padx=(12, 6), pady=10)

        self.lbl_source = ctk.CTkLabel(bar, text="No source selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=(6, 6), pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=2, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=3, sticky="e", padx=12, pady=10)

    def _build_queries(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=(6, 6))
        box.grid_columnconfigure(4, weight=1)

        self.entry_w1 = ctk.CTkEntry(box, placeholder_text="word1", width=140)
        self.entry_w1.grid(row=0, column=0, padx=(12, 6), pady=(10, 4))
        self.entry_w2 = ctk.CTkEntry(box, placeholder_text="word2", width=140)
        self.entry_w2.grid(row=0, column=1, padx=6, pady=(10, 4))

        ctk.CTkButton(box, text="Bridge words", width=110, command=self._do_bridge).grid(row=0, column=2, padx=6, pady=(10, 4))
        ctk.CTkButton(box, text="Shortest path", width=110, command=self._do_path).grid(row=0, column=3, padx=6, pady=(10, 4))
        ctk.CTkButton(box, text="Show graph", width=110, command=self._do_show).grid(row=0, column=5, padx=(6, 12), pady=(10, 4))

        self.entry_text = ctk.CTkEntry(box, placeholder_text="Text to enrich with bridge words…")
        self.entry_text.grid(row=1, column=0, columnspan=5, sticky="ew", padx=(12, 6), pady=4)
        ctk.CTkButton(box, text="Generate", width=110, command=self._do_generate).grid(row=1, column=5, padx=(6, 12), pady=4)

        self.entry_word = ctk.CTkEntry(box, placeholder_text="word for PageRank", width=140)
        self.entry_word.grid(row=2, column=0, padx=(12, 6), pady=(4, 10))
        ctk.CTkButton(box, text="PageRank", width=110, command=self._do_pagerank).grid(row=2, column=1, padx=6, pady=(4, 10))
        self.btn_walk = ctk.CTkButton(box, text="Random walk", width=110, command=self._start_walk)
        self.btn_walk.grid(row=2, column=2, padx=6, pady=(4, 10))
        self.btn_stop = ctk.CTkButton(box, text="Stop", width=110, state="disabled", command=self._stop_walk)
        self.btn_stop.grid(row=2, column=3, padx=6, pady=(4, 10))

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 6))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Results", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_results = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self.txt_results.configure(state="disabled")
        self._set_results("(no results yet — load a text file first)")

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready. Choose a text file to begin.")

    # --------- loading pipeline (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose text file",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )
        if not path:
            return
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A file is already loading. Please wait.")
            return
        self._stop_walk()

        self.lbl_source.configure(text=shorten_path(path))
        self._set_status("Building graph…")
        self.progress.start()

        self._loading_thread = threading.Thread(target=self._load_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str) -> None:
        try:
            self._engine.build(path)
        except Exception as exc:
            self.after(0, lambda err=exc: self._on_load_error(err))
            return
        self.after(0, self._on_load_ok)

    def _on_load_ok(self) -> None:
        self.progress.stop()
        g = self._engine.graph
        self._set_status(f"{len(g):,} words, {g.edge_count:,} edges.")
        self._log(f"Graph ready ({len(g)} words, {g.edge_count} edges).")
        self._set_results("")

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while building graph.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", f"Failed to build graph.\n{exc}")

    # --------- queries ---------

    def _ready(self) -> bool:
        if self._engine.graph is None:
            self._set_results("error: please load a text file first.")
            self._log("Query attempted before the graph was built.")
            return False
        return True

    def _do_show(self) -> None:
        if self._ready():
            self._set_results(self._engine.show_graph())

    def _do_bridge(self) -> None:
        if self._ready():
            self._set_results(self._engine.query_bridge_words(self.entry_w1.get(), self.entry_w2.get()))

    def _do_path(self) -> None:
        if self._ready():
            self._set_results(self._engine.calc_shortest_path(self.entry_w1.get(), self.entry_w2.get()))

    def _do_generate(self) -> None:
        if self._ready():
            self._set_results("Generated Text: " + self._engine.generate_new_text(self.entry_text.get()))

    def _do_pagerank(self) -> None:
        if not self._ready():
            return
        word = self.entry_word.get()
        pr = self._engine.cal_page_rank(word)
        if pr == CFG.PAGERANK_MISSING:
            self._set_results(missing_message([normalize_word(word)]))
        else:
            self._set_results(f'PageRank of "{word}": {pr:.4f}')

    # --------- random walk (threaded, cancellable) ---------

    def _start_walk(self) -> None:
        if not self._ready():
            return
        if self._walk_thread and self._walk_thread.is_alive():
            return
        self._walk_stop = threading.Event()
        self._set_results("Random Walk Path: ")
        self.btn_walk.configure(state="disabled")
        self.btn_stop.configure(state="normal")
        self._log("Random walk started.")
        self._walk_thread = threading.Thread(target=self._walk_worker, args=(self._walk_stop,), daemon=True)
        self._walk_thread.start()

    def _walk_worker(self, stop: threading.Event) -> None:
        emit = lambda word: self.after(0, lambda: self._append_result(word + " "))
        words = play_walk(self._engine.iter_random_walk(), emit, stop=stop, delay=CFG.WALK_DELAY)
        try:
            out = save_walk(words, CFG.WALK_OUTPUT)
            note = f"saved to {out}"
        except OSError as exc:
            note = f"failed saving file: {exc}"
        self.after(0, lambda: self._on_walk_done(len(words), stop.is_set(), note))

    def _stop_walk(self) -> None:
        self._walk_stop.set()

    def _on_walk_done(self, n: int, stopped: bool, note: str) -> None:
        self.btn_walk.configure(state="normal")
        self.btn_stop.configure(state="disabled")
        self._log(f"Random walk {'stopped' if stopped else 'finished'} after {n} words ({note}).")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _append_result(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.insert("end", text)
        self.txt_results.see("end")
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        self._stop_walk()
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = WordGraphApp()
    app.mainloop()
