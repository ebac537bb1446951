# hex_byte_counter/gui_menu.py

from __future__ import annotations

import platform
import tkinter as tk
import tkinter.messagebox as mbox

from .__about__ import APP_NAME, about_text


# Declarative menu spec.
# "shortcut" is a string like "MOD+O" or a list of them (e.g., ["MOD+K", "F5"]).
# Modifier tokens: MOD, CTRL, CMD, ALT, SHIFT. Anything else is the key:
# a single letter/digit or a named key from KEYSYM_MAP.
MENU_SPEC = [
    {
        "menu": "File",
        "items": [
            {"label": "Open…", "command": "_open_file", "shortcut": "MOD+O"},
            {"label": "Clear", "command": "_clear_text", "shortcut": "MOD+K"},
        ],
    },
    {
        "menu": "Edit",
        "items": [
            {"label": "Select All", "command": "_select_all", "shortcut": "MOD+A"},
            {"type": "separator"},
            {"label": "Copy Count", "command": "_copy_count", "shortcut": "MOD+SHIFT+C"},
        ],
    },
    {
        "menu": "Help",
        "items": [
            {"label": "About", "command": "_show_about"},
            {"label": "Shortcuts…", "command": "_show_shortcuts", "shortcut": "F1"},
        ],
    },
]

# token -> (menu label, Tk keysym)
KEYSYM_MAP: dict[str, tuple[str, str]] = {
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
    "BACKSLASH": ("\\", "backslash"),
    "MINUS":  ("-", "minus"),
    "EQUAL":  ("=", "equal"),
}

MOD_TOKENS = ("MOD", "CTRL", "CMD", "ALT", "SHIFT")


def _platform_keycfg(system: str | None = None) -> dict[str, str]:
    """Tk binding names and user-facing labels for each modifier token."""
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
    Turn 'MOD+SHIFT+C' into an accelerator label ('Cmd+Shift+C') and a
    Tk binding sequence ('<Command-Shift-c>').
    """
    tokens = [t.strip().upper() for t in shortcut.split("+") if t.strip()]
    mods = {t for t in tokens if t in MOD_TOKENS}
    keys = [t for t in tokens if t not in MOD_TOKENS]

    # Explicit CMD/CTRL replace the generic MOD
    if mods & {"CMD", "CTRL"}:
        order = ("CMD", "CTRL", "ALT", "SHIFT")
    else:
        order = ("MOD", "ALT", "SHIFT")
    present = [m for m in order if m in mods]

    labels = [keycfg.get(f"{m}_LABEL", m.title()) for m in present]
    binds = [keycfg.get(m, m.title()) for m in present]

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

    if not binds:
        return "", ""
    return "+".join(labels), "<" + "-".join(binds) + ">"

def _case_variants(bind_seq: str) -> set[str]:
    """Both letter cases of the final key, so Caps Lock does not break bindings."""
    head, _, key = bind_seq[1:-1].rpartition("-")
    if len(key) != 1 or not key.isalpha():
        return {bind_seq}
    prefix = f"{head}-" if head else ""
    return {f"<{prefix}{key.lower()}>", f"<{prefix}{key.upper()}>"}

def build_menubar(root: tk.Tk, app: object, spec: list[dict] = MENU_SPEC) -> tk.Menu:
    """
    Create and attach a menubar to `root` from `spec`, binding shortcuts to
    methods on `app`. Returns the created menubar.
    """
    keycfg = _platform_keycfg()
    menubar = tk.Menu(root)
    root.config(menu=menubar)

    for menu_def in spec:
        m = tk.Menu(menubar, tearoff=False)
        menubar.add_cascade(label=menu_def["menu"], menu=m)

        for item in menu_def.get("items", []):
            if item.get("type") == "separator":
                m.add_separator()
                continue

            command = getattr(app, item["command"], None) or (lambda *a, **k: None)
            args = item.get("command_args", [])

            def invoke(fn=command, args=args):
                fn(*args)

            sc = item.get("shortcut")
            shortcuts = sc if isinstance(sc, (list, tuple)) else ([sc] if sc else [])
            accel = ""
            for idx, s in enumerate(shortcuts):
                label, bind_seq = _resolve_shortcut(s, keycfg)
                if idx == 0:
                    accel = label
                if not bind_seq:
                    continue
                for v in _case_variants(bind_seq):
                    root.bind_all(v, lambda e, inv=invoke: (inv(), "break")[1])

            m.add_command(label=item["label"], command=invoke, accelerator=accel)

    return menubar

def shortcut_lines(spec: list[dict] = MENU_SPEC, keycfg: dict[str, str] | None = None) -> list[str]:
    """'Label: Shortcut' lines for every menu item that has a shortcut."""
    keycfg = keycfg or _platform_keycfg()
    lines = []
    for menu in spec:
        for item in menu.get("items", []):
            sc = item.get("shortcut")
            if item.get("type") == "separator" or not sc:
                continue
            shortcuts = sc if isinstance(sc, (list, tuple)) else [sc]
            labels = [_resolve_shortcut(s, keycfg)[0] for s in shortcuts]
            lines.append(f"{item['label']}: {', '.join(labels)}")
    return lines

def show_about_dialog(app, root):
    mbox.showinfo(f"About {APP_NAME}", about_text(), parent=root)

def show_shortcuts_dialog(app, root):
    mbox.showinfo("Keyboard Shortcuts", "\n".join(shortcut_lines()), parent=root)
