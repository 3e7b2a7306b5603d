# hex_text_converter/gui_menu.py

from __future__ import annotations

import platform
import tkinter as tk
import tkinter.messagebox as mbox
from typing import Callable, Sequence

from .__about__ import APP_NAME, about_text
from .i18n import tr


# Declarative menu spec.
# "label" is a translation key; "shortcut" is a token string like "MOD+L" or a list of them.
# Valid tokens: MOD, CTRL, CMD, ALT, SHIFT, letters (A-Z),
# named keys like ENTER, ESC, F1-F24, UP, DOWN, LEFT, RIGHT, SPACE, etc.
MENU_SPEC = [
    {
        "menu": "menu_view",
        "items": [
            {
                "label": "text_to_hex",
                "command": "_set_mode",
                "command_args": ["TEXT_TO_HEX"],
                "shortcut": "MOD+E",
            },
            {
                "label": "hex_to_text",
                "command": "_set_mode",
                "command_args": ["HEX_TO_TEXT"],
                "shortcut": "MOD+D",
            },
            {
                "label": "swap",
                "command": "_swap_mode",
                "shortcut": "MOD+SHIFT+S",
            },
            {"type": "separator"},
            {
                "label": "toggle_live",
                "command": "_toggle_live",
                "shortcut": "MOD+L",
            },
            {
                "label": "convert_now",
                "command": "_convert_now",
                "shortcut": ["MOD+ENTER", "F5"],
            },
            {"type": "separator"},
            {
                "label": "toggle_theme",
                "command": "_toggle_theme",
                "shortcut": "MOD+SHIFT+T",
            },
            {
                "label": "toggle_language",
                "command": "_toggle_language",
            },
        ],
    },
    {
        "menu": "menu_edit",
        "items": [
            {
                "label": "copy",
                "command": "_copy_output",
                "shortcut": "MOD+SHIFT+C",
            },
            {
                "label": "paste",
                "command": "_paste_input",
                "shortcut": "MOD+SHIFT+V",
            },
            {
                "label": "clear",
                "command": "_clear",
                "shortcut": "MOD+SHIFT+K",
            },
            {
                "label": "clear_history",
                "command": "_clear_history",
            },
        ],
    },
    {
        "menu": "menu_help",
        "items": [
            {"label": "about", "command": "_show_about"},
            {"label": "shortcuts", "command": "_show_shortcuts"},
        ],
    },
]

MOD_TOKENS = ("MOD", "CTRL", "CMD", "ALT", "SHIFT")

# token -> (menu label, Tk keysym)
KEYSYM_MAP = {
    "ENTER":  ("Enter",  "Return"),
    "RETURN": ("Return", "Return"),
    "ESC":    ("Esc",    "Escape"),
    "ESCAPE": ("Escape", "Escape"),
    "SPACE":  ("Space",  "space"),
    "TAB":    ("Tab",    "Tab"),
    "BACKSPACE": ("Backspace", "BackSpace"),
    "DELETE": ("Delete", "Delete"),
    "HOME":   ("Home",   "Home"),
    "END":    ("End",    "End"),
    "PGUP":   ("PgUp",   "Prior"),
    "PGDN":   ("PgDn",   "Next"),
    "UP":     ("Up",     "Up"),
    "DOWN":   ("Down",   "Down"),
    "LEFT":   ("Left",   "Left"),
    "RIGHT":  ("Right",  "Right"),
    **{f"F{i}": (f"F{i}", f"F{i}") for i in range(1, 25)},
    "COMMA":  (",", "comma"),
    "PERIOD": (".", "period"),
    "SLASH":  ("/", "slash"),
    "SEMICOLON": (";", "semicolon"),
    "MINUS":  ("-", "minus"),
    "EQUAL":  ("=", "equal"),
}


def _platform_keycfg(system: str | None = None) -> dict[str, str]:
    """Tk modifier names and menu labels for the current (or given) platform."""
    if (system or platform.system()) == "Darwin":
        return {
            "MOD": "Command",     "MOD_LABEL": "Cmd",
            "CTRL": "Control",    "CTRL_LABEL": "Ctrl",
            "CMD": "Command",     "CMD_LABEL": "Cmd",
            "ALT": "Option",      "ALT_LABEL": "Opt",
            "SHIFT": "Shift",     "SHIFT_LABEL": "Shift",
        }
    return {
        "MOD": "Control",     "MOD_LABEL": "Ctrl",
        "CTRL": "Control",    "CTRL_LABEL": "Ctrl",
        "CMD": "Control",     "CMD_LABEL": "Ctrl",  # no Command key off macOS
        "ALT": "Alt",         "ALT_LABEL": "Alt",
        "SHIFT": "Shift",     "SHIFT_LABEL": "Shift",
    }


def _resolve_shortcut(shortcut: str, keycfg: dict[str, str]) -> tuple[str, str]:
    """
    Turn 'MOD+SHIFT+S' into (menu accelerator label, Tk binding sequence),
    e.g. ('Cmd+Shift+S', '<Command-Shift-s>').
    Modifiers are emitted as CMD, CTRL, ALT, SHIFT (or MOD, ALT, SHIFT); the last
    non-modifier token is the key.
    """
    parts = [p.strip().upper() for p in shortcut.split("+") if p.strip()]
    mods = {p for p in parts if p in MOD_TOKENS}
    keys = [p for p in parts if p not in MOD_TOKENS]

    explicit = bool(mods & {"CMD", "CTRL"})
    order = ("CMD", "CTRL", "ALT", "SHIFT") if explicit else ("MOD", "ALT", "SHIFT")

    labels = [keycfg.get(f"{m}_LABEL", m.title()) for m in order if m in mods]
    binds = [keycfg.get(m, m.title()) for m in order if m in mods]

    if keys:
        key = keys[-1]
        if key in KEYSYM_MAP:
            label, keysym = KEYSYM_MAP[key]
        elif len(key) == 1:
            label, keysym = key.upper(), key.lower()
        else:
            label, keysym = key.title(), key
        labels.append(label)
        binds.append(keysym)

    return "+".join(labels), ("<" + "-".join(binds) + ">" if binds else "")


def _binding_variants(bind_seq: str) -> set[str]:
    """Upper- and lower-case variants of a letter binding (Caps Lock / Shift)."""
    variants = {bind_seq}
    parts = bind_seq[1:-1].split("-")
    key = parts[-1]
    if len(key) == 1 and key.isalpha():
        for k in (key.lower(), key.upper()):
            variants.add("<" + "-".join(parts[:-1] + [k]) + ">")
    return variants


def iter_shortcuts(spec: list[dict] = MENU_SPEC, keycfg: dict[str, str] | None = None):
    """Yield (label key, [accelerator labels]) for every menu item with a shortcut."""
    keycfg = keycfg or _platform_keycfg()
    for menu_def in spec:
        for item in menu_def.get("items", []):
            sc = item.get("shortcut")
            if item.get("type") == "separator" or not sc:
                continue
            shortcuts = sc if isinstance(sc, (list, tuple)) else [sc]
            yield item["label"], [_resolve_shortcut(s, keycfg)[0] for s in shortcuts]


def build_menubar(
    root: tk.Tk,
    app: object,
    spec: list[dict] = MENU_SPEC,
    language: str = "en",
    widgets: Sequence[tk.Misc] = (),
) -> tk.Menu:
    """
    Create and attach a menubar to `root` using `spec`, binding shortcuts to methods on `app`.
    Calling it again (e.g. after a language switch) replaces and destroys the previous menubar.

    Shortcuts are bound application-wide with ``bind_all`` and, for every widget in
    `widgets`, on the widget itself. Widget bindings run before class bindings, so
    returning "break" there keeps e.g. the Text class from also handling <Control-d>.
    """
    keycfg = _platform_keycfg()
    previous = root.cget("menu")
    menubar = tk.Menu(root)
    root.config(menu=menubar)
    if previous:
        root.nametowidget(previous).destroy()

    for menu_def in spec:
        m = tk.Menu(menubar, tearoff=False)
        menubar.add_cascade(label=tr(language, menu_def["menu"]), menu=m)

        for item in menu_def.get("items", []):
            if item.get("type") == "separator":
                m.add_separator()
                continue

            command: Callable = getattr(app, item["command"])
            args = item.get("command_args", [])

            def invoke(fn=command, args=args):
                fn(*args)

            def on_key(_event, inv=invoke) -> str:
                inv()
                return "break"

            sc = item.get("shortcut")
            shortcuts = sc if isinstance(sc, (list, tuple)) else ([sc] if sc else [])
            accel = ""
            for idx, s in enumerate(shortcuts):
                accel_label, bind_seq = _resolve_shortcut(s, keycfg)
                if idx == 0:
                    accel = accel_label
                if not bind_seq:
                    continue
                for v in _binding_variants(bind_seq):
                    root.bind_all(v, on_key)
                    for w in widgets:
                        w.bind(v, on_key)

            m.add_command(label=tr(language, item["label"]), command=invoke, accelerator=accel)

    return menubar


def show_about_dialog(root: tk.Misc) -> None:
    mbox.showinfo(f"About {APP_NAME}", about_text(), parent=root)


def show_shortcuts_dialog(root: tk.Misc, language: str = "en") -> None:
    """Popup listing the shortcuts declared in MENU_SPEC."""
    lines = [
        f"{tr(language, key)}: {', '.join(labels)}"
        for key, labels in iter_shortcuts()
    ]
    mbox.showinfo(tr(language, "shortcuts").rstrip("…"), "\n".join(lines), parent=root)
