# hex_text_converter/gui.py

from __future__ import annotations

import logging
import tkinter as tk
from tkinter import ttk

from .gui_menu import build_menubar, show_about_dialog, show_shortcuts_dialog
from .i18n import tr
from .session import ConverterSession, PreferenceStore
from .settings import ENCODINGS, ConversionMode

logger = logging.getLogger(__name__)

# background, foreground, field background, error
PALETTES = {
    "dark":  {"bg": "#0f172a", "fg": "#e2e8f0", "field": "#1e293b", "error": "#f87171"},
    "light": {"bg": "#f8fafc", "fg": "#0f172a", "field": "#ffffff", "error": "#8B0000"},
}


class ConverterApp:
    """Tkinter front-end over a :class:`ConverterSession`; holds no conversion logic."""

    def __init__(self, root: tk.Tk, session: ConverterSession | None = None) -> None:
        self.root = root
        self.session = session or ConverterSession(store=PreferenceStore())
        root.minsize(760, 520)

        self.style = ttk.Style(root)
        try:
            self.style.theme_use("clam")
        except tk.TclError:
            pass

        self.main = ttk.Frame(root, padding=12)
        self.main.grid(row=0, column=0, sticky="nsew")
        root.columnconfigure(0, weight=1)
        root.rowconfigure(0, weight=1)

        self._syncing = False
        self._render()

    def t(self, key: str) -> str:
        return tr(self.session.language, key)

    # ----------------- Layout -----------------
    def _render(self) -> None:
        """(Re)build every widget from session state; used on start and language switch."""
        for w in self.main.winfo_children():
            w.destroy()

        s = self.session
        self.root.title(self.t("title"))

        self.main.columnconfigure(0, weight=1)
        self.main.columnconfigure(2, weight=1)

        # Row 0: header + appearance toggles
        header = ttk.Frame(self.main)
        header.grid(row=0, column=0, columnspan=3, sticky="ew", pady=(0, 8))
        header.columnconfigure(0, weight=1)
        ttk.Label(header, text=self.t("title"), font=("TkDefaultFont", 16, "bold")).grid(row=0, column=0, sticky="w")
        ttk.Label(header, text=self.t("subtitle")).grid(row=1, column=0, sticky="w")
        ttk.Button(header, text=self.t("toggle_language"), command=self._toggle_language).grid(row=0, column=1, padx=(6, 0))
        ttk.Button(header, text=self.t("toggle_theme"), command=self._toggle_theme).grid(row=0, column=2, padx=(6, 0))

        # Row 1: mode radios
        self.mode_var = tk.StringVar(value=s.mode.value)
        mode_frame = ttk.Frame(self.main)
        mode_frame.grid(row=1, column=0, columnspan=3, sticky="w", pady=(0, 6))
        for m in ConversionMode:
            ttk.Radiobutton(
                mode_frame,
                text=self.t(m.value.lower()),
                value=m.value,
                variable=self.mode_var,
                command=lambda: self._set_mode(self.mode_var.get()),
            ).pack(side="left", padx=(0, 10))

        # Row 2: input | swap | output
        self.input_label = ttk.Label(self.main)
        self.input_label.grid(row=2, column=0, sticky="nw")
        self.input_box = tk.Text(self.main, height=10, wrap="word", undo=True)
        self.input_box.grid(row=3, column=0, sticky="nsew")
        self.input_box.insert("1.0", s.input_text)
        self.input_box.edit_modified(False)
        self.input_box.bind("<<Modified>>", self._on_input_modified)

        ttk.Button(self.main, text="⇆", width=3, command=self._swap_mode).grid(row=3, column=1, padx=8)

        self.output_label = ttk.Label(self.main)
        self.output_label.grid(row=2, column=2, sticky="nw")
        self.output_box = tk.Text(self.main, height=10, wrap="char", state="disabled")
        self.output_box.grid(row=3, column=2, sticky="nsew")
        self.main.rowconfigure(3, weight=1)

        # Row 4: input/output actions
        in_actions = ttk.Frame(self.main)
        in_actions.grid(row=4, column=0, sticky="w", pady=(4, 0))
        ttk.Button(in_actions, text=self.t("paste"), command=self._paste_input).pack(side="left")
        ttk.Button(in_actions, text=self.t("clear"), command=self._clear).pack(side="left", padx=(6, 0))
        self.count_var = tk.StringVar()
        ttk.Label(in_actions, textvariable=self.count_var).pack(side="left", padx=(10, 0))

        out_actions = ttk.Frame(self.main)
        out_actions.grid(row=4, column=2, sticky="ew", pady=(4, 0))
        self.copy_btn = ttk.Button(out_actions, text=self.t("copy"), command=self._copy_output)
        self.copy_btn.pack(side="left")
        self.convert_btn = ttk.Button(out_actions, text=self.t("convert_now"), command=self._convert_now)
        self.convert_btn.pack(side="left", padx=(6, 0))

        # Row 5: error messages
        self.error_var = tk.StringVar()
        self.error_label = ttk.Label(self.main, textvariable=self.error_var)
        self.error_label.grid(row=5, column=0, columnspan=3, sticky="w", pady=(4, 0))

        ttk.Separator(self.main, orient="horizontal").grid(
            row=6, column=0, columnspan=3, sticky="ew", pady=(8, 10)
        )

        # Row 7: settings | history
        self._build_settings(row=7)
        self._build_history(row=7)

        build_menubar(
            self.root, self, language=s.language,
            widgets=(self.input_box, self.delimiter_entry, self.prefix_entry),
        )
        self._apply_theme()
        self._refresh()
        self.input_box.focus()

    def _build_settings(self, row: int) -> None:
        s = self.session.settings
        frame = ttk.LabelFrame(self.main, text=self.t("settings"), padding=8)
        frame.grid(row=row, column=0, sticky="nsew")

        self.delimiter_var = tk.StringVar(value=s.delimiter)
        self.prefix_var = tk.StringVar(value=s.prefix)
        self.uppercase_var = tk.BooleanVar(value=s.uppercase)
        self.encoding_var = tk.StringVar(value=s.encoding)
        self.live_var = tk.BooleanVar(value=s.live_mode)

        ttk.Label(frame, text=self.t("delimiter")).grid(row=0, column=0, sticky="w", padx=(0, 8))
        self.delimiter_entry = ttk.Entry(frame, textvariable=self.delimiter_var, width=8)
        self.delimiter_entry.grid(row=0, column=1, sticky="w")
        ttk.Label(frame, text=self.t("prefix")).grid(row=1, column=0, sticky="w", padx=(0, 8))
        self.prefix_entry = ttk.Entry(frame, textvariable=self.prefix_var, width=8)
        self.prefix_entry.grid(row=1, column=1, sticky="w")
        ttk.Label(frame, text=self.t("encoding")).grid(row=2, column=0, sticky="w", padx=(0, 8))
        ttk.Combobox(
            frame, textvariable=self.encoding_var, values=ENCODINGS, state="readonly", width=8
        ).grid(row=2, column=1, sticky="w")
        ttk.Checkbutton(frame, text=self.t("uppercase"), variable=self.uppercase_var).grid(
            row=3, column=0, columnspan=2, sticky="w", pady=(4, 0)
        )
        ttk.Checkbutton(frame, text=self.t("live_mode"), variable=self.live_var).grid(
            row=4, column=0, columnspan=2, sticky="w"
        )

        for var in (self.delimiter_var, self.prefix_var, self.uppercase_var, self.encoding_var, self.live_var):
            var.trace_add("write", lambda *_: self._on_settings_changed())

    def _build_history(self, row: int) -> None:
        frame = ttk.LabelFrame(self.main, text=self.t("recent"), padding=8)
        frame.grid(row=row, column=2, sticky="nsew")
        frame.columnconfigure(0, weight=1)

        self.history_list = tk.Listbox(frame, height=6, activestyle="none")
        self.history_list.grid(row=0, column=0, sticky="nsew")
        self.history_list.bind("<<ListboxSelect>>", self._on_history_select)
        ttk.Button(frame, text=self.t("clear_history"), command=self._clear_history).grid(
            row=1, column=0, sticky="e", pady=(4, 0)
        )

    # ----------------- Sync session → widgets -----------------
    def _refresh(self) -> None:
        s = self.session
        to_hex = s.mode is ConversionMode.TEXT_TO_HEX
        self.input_label.config(text=self.t("input_text" if to_hex else "input_hex"))
        self.output_label.config(text=self.t("output_hex" if to_hex else "output_text"))
        self.mode_var.set(s.mode.value)

        current = self.input_box.get("1.0", "end-1c")
        if current != s.input_text:
            self._syncing = True
            self.input_box.delete("1.0", "end")
            self.input_box.insert("1.0", s.input_text)
            self.input_box.edit_modified(False)
            self._syncing = False

        self.output_box.config(state="normal")
        self.output_box.delete("1.0", "end")
        self.output_box.insert("1.0", s.output_text)
        self.output_box.config(state="disabled")

        self.error_var.set(s.error or "")
        self.count_var.set(f"{len(s.input_text)} {self.t('chars')}")
        self.convert_btn.config(state="disabled" if s.settings.live_mode else "normal")

        self.history_list.delete(0, "end")
        if s.history:
            for entry in s.history:
                self.history_list.insert("end", entry.summary())
        else:
            self.history_list.insert("end", self.t("no_history"))

    def _apply_theme(self) -> None:
        p = PALETTES[self.session.theme]
        self.root.configure(background=p["bg"])
        self.style.configure(".", background=p["bg"], foreground=p["fg"], fieldbackground=p["field"])
        self.style.configure("TLabelframe.Label", background=p["bg"], foreground=p["fg"])
        for box in (self.input_box, self.output_box, self.history_list):
            box.configure(background=p["field"], foreground=p["fg"])
        self.input_box.configure(insertbackground=p["fg"])
        self.error_label.configure(foreground=p["error"])

    # ----------------- Event handlers -----------------
    def _on_input_modified(self, _event=None) -> None:
        if not self.input_box.edit_modified():
            return
        self.input_box.edit_modified(False)
        if self._syncing:
            return
        self.session.set_input(self.input_box.get("1.0", "end-1c"))
        self._refresh()

    def _on_settings_changed(self) -> None:
        try:
            self.session.update_settings(
                delimiter=self.delimiter_var.get(),
                prefix=self.prefix_var.get(),
                uppercase=self.uppercase_var.get(),
                encoding=self.encoding_var.get(),
                live_mode=self.live_var.get(),
            )
        except ValueError as exc:
            # Keep the previous settings until the entry is valid again
            self.error_var.set(str(exc))
            return
        self._refresh()

    def _on_history_select(self, _event=None) -> None:
        sel = self.history_list.curselection()
        if not sel or not self.session.history:
            return
        self.session.restore(self.session.history[sel[0]])
        self._refresh()

    def _set_mode(self, mode: str) -> None:
        self.session.set_mode(mode)
        self._refresh()

    def _swap_mode(self) -> None:
        self.session.swap_mode()
        self._refresh()

    def _convert_now(self) -> None:
        self.session.set_input(self.input_box.get("1.0", "end-1c"))
        self.session.convert_now()
        self._refresh()

    def _toggle_live(self) -> None:
        self.live_var.set(not self.live_var.get())

    def _clear(self) -> None:
        self.session.clear()
        self._refresh()

    def _clear_history(self) -> None:
        self.session.clear_history()
        self._refresh()

    def _toggle_theme(self) -> None:
        self.session.toggle_theme()
        self._apply_theme()

    def _toggle_language(self) -> None:
        self.session.toggle_language()
        self._render()

    def _show_about(self) -> None:
        show_about_dialog(self.root)

    def _show_shortcuts(self) -> None:
        show_shortcuts_dialog(self.root, self.session.language)

    # ----------------- Clipboard helpers -----------------
    def _copy_output(self) -> None:
        value = self.session.output_text
        if not value:
            return
        self.root.clipboard_clear()
        self.root.clipboard_append(value)
        self.root.update()
        self.copy_btn.config(text=self.t("copied"))
        btn = self.copy_btn
        self.root.after(2000, lambda: btn.winfo_exists() and btn.config(text=self.t("copy")))

    def _paste_input(self) -> None:
        try:
            text = self.root.clipboard_get()
        except tk.TclError:
            logger.debug("clipboard empty or unavailable")
            return
        self.session.set_input(text)
        self._refresh()


def run() -> None:
    root = tk.Tk()
    ConverterApp(root)
    root.mainloop()


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    run()


if __name__ == "__main__":
    main()
