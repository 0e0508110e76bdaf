# app.py
# CustomTkinter GUI for bkfuzzy (dark theme).
# - Load a word file; the BK-tree is built on a background thread.
# - Live lookup with debounce; distance selector and brute-force toggle.
# - Results & event log panes.

from __future__ import annotations
import threading
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from bkfuzzy import config as CFG
from bkfuzzy.engine import Engine
from bkfuzzy.models import QueryResult


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


# -------------------- main app --------------------

class LookupApp(ctk.CTk):
    """Dark-themed GUI: load a vocabulary, then query it as you type."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Fuzzy Word Lookup")
        self.geometry("760x600")
        self.minsize(640, 480)

        # State
        self._engine = Engine()
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None

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

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Fuzzy Word Lookup", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(1, weight=1)

        ctk.CTkButton(bar, text="Choose Word File", command=self._choose_file).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )
        self.lbl_source = ctk.CTkLabel(bar, text="No word file selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=2, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=3, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(0, weight=1)

        self.entry_query = ctk.CTkEntry(box, placeholder_text="Type a word…")
        self.entry_query.grid(row=0, column=0, sticky="ew", padx=(12, 6), pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

        self.opt_distance = ctk.CTkOptionMenu(
            box, values=[str(i) for i in range(CFG.MAX_WEB_DISTANCE + 1)],
            command=lambda _v: self._on_query_changed(), width=70,
        )
        self.opt_distance.set(str(CFG.DEFAULT_MAX_DISTANCE))
        self.opt_distance.grid(row=0, column=1, padx=6, pady=10)

        self.chk_brute = ctk.CTkCheckBox(box, text="Brute force", command=self._on_query_changed)
        self.chk_brute.grid(row=0, column=2, padx=(6, 12), pady=10)

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(0, weight=1)

        self.txt_results = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=0, column=0, sticky="nsew", padx=12, pady=12)
        self.txt_results.configure(state="disabled")
        self._set_results("(load a word file and start typing)")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=100, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("GUI ready. Choose a word file to begin.")

    # --------- loading pipeline (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(title="Choose word file",
                                  filetypes=[("Text files", "*.txt"), ("All files", "*")])
        if not path:
            return
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A word file is already loading. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(path))
        self._set_status("Building index…")
        self.progress.start()

        # a fresh Engine per load; the old tree stays queryable until the swap
        self._loading_thread = threading.Thread(target=self._load_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str) -> None:
        eng = Engine()
        try:
            eng.build(path)
            info = eng.stats()
        except Exception as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda: self._on_load_ok(eng, info))

    def _on_load_ok(self, eng: Engine, info: dict) -> None:
        self.progress.stop()
        self._engine.shutdown()
        self._engine = eng
        self._set_status(f"{info['size']:,} words, depth {info['depth']}")
        self._log(f"Index built in {info['build_ms']:.0f} ms ({info['size']} words, depth {info['depth']}).")
        self.entry_query.focus_set()
        self._do_search()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading.")
        self._log(f"ERROR: {exc}")
        mb.showerror("Load error", str(exc))

    # --------- search ---------

    def _on_query_changed(self, _ev=None) -> None:
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(160, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        q = self.entry_query.get().strip()
        if not q:
            self._set_results("")
            return
        if not self._engine.ready:
            self._set_results("error: please load a word file before searching.")
            return

        strategy = CFG.STRATEGY_BRUTE if self.chk_brute.get() else CFG.STRATEGY_INDEX
        res = self._engine.query(q, int(self.opt_distance.get()), strategy=strategy)
        self._set_results(self._fmt(res))
        self._log(f"{q!r}: {len(res.matches)} matches, {res.visited} compared, {res.elapsed_ms:.1f} ms ({strategy})")

    @staticmethod
    def _fmt(res: QueryResult) -> str:
        if not res.matches:
            return "(no matches)"
        return "\n".join(res.matches)

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
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = LookupApp()
    app.mainloop()
