"""
Picker bar — the Amenu window.

Layout (one row pinned to the top of the screen):
  ┌──────────────────────────────────────────────────────────┐
  │ query▏  [ Greeting ]  Grocery list   Green tea   ...     │
  └──────────────────────────────────────────────────────────┘
     ↑ text box grows with the query; chips follow it, the
       highlighted one drawn on the accent colour
"""

import tkinter as tk
import tkinter.font as tkfont

# ── Themes ─────────────────────────────────────────────────────────────────────
DARK = dict(
    bg='#232429',        fg='#ffffff',
    hint_fg='#6b6f78',   cursor='#ffffff',
    chip_bg='#232429',   chip_fg='#abb2bf',
    second_fg='#e5c07b',
    select_bg='#d946ef', select_fg='#ffffff',
)
LIGHT = dict(
    bg='#f5f5f5',        fg='#1a1a1a',
    hint_fg='#999999',   cursor='#1a1a1a',
    chip_bg='#f5f5f5',   chip_fg='#555555',
    second_fg='#a0661b',
    select_bg='#d946ef', select_fg='#ffffff',
)

HINT_TEXT = 'Type...'
MIN_BOX_W = 50       # px
BOX_PAD = 20         # px added to the measured query width
CHIP_PADX, CHIP_PADY = 6, 3
POSITION_TICK = 16   # ms between startup position fixes


def chip_colors(C: dict, position: int, highlighted: bool) -> tuple:
    """(bg, fg) for the chip at `position`."""
    if highlighted:
        return C['select_bg'], C['select_fg']
    if position == 1:
        return C['chip_bg'], C['second_fg']
    return C['chip_bg'], C['chip_fg']


def hint_visible(query: str) -> bool:
    return not query


class PickerBar:
    def __init__(self, root: tk.Tk, controller, on_exit, theme: str = 'dark',
                 font_size: int = 14, bar_height: int = 36, position_frames: int = 5):
        self.root = root
        self.controller = controller
        self.on_exit = on_exit
        self._C = DARK if theme == 'dark' else LIGHT
        self._bar_height = bar_height
        self._position_frames = position_frames
        self._font = tkfont.Font(root=root, family='Courier', size=font_size)

        self._query_var = tk.StringVar()
        self._chips: list[tk.Label] = []
        self._closed = False

        self._build_window()

    # ── Window construction ────────────────────────────────────────────────

    def _build_window(self):
        C = self._C
        win = self.root
        win.title('Amenu')
        win.overrideredirect(True)
        win.attributes('-topmost', True)
        win.configure(bg=C['bg'])
        win.geometry(f'{win.winfo_screenwidth()}x{self._bar_height}+0+0')

        row = tk.Frame(win, bg=C['bg'], padx=4)
        row.pack(fill=tk.BOTH, expand=True)
        self._row = row

        self._entry = tk.Entry(
            row, textvariable=self._query_var,
            bg=C['bg'], fg=C['fg'], insertbackground=C['cursor'],
            font=self._font, relief=tk.FLAT, bd=0, highlightthickness=0,
        )
        self._entry.pack(side=tk.LEFT, padx=(0, 8))
        self._hint = tk.Label(row, text=HINT_TEXT, bg=C['bg'], fg=C['hint_fg'], font=self._font)

        # ── Bindings ─────────────────────────────────────────────────────
        for w in (win, self._entry):
            w.bind('<Escape>', lambda e: self._dispatch(self.controller.dismiss))
            w.bind('<Return>', lambda e: self._dispatch(self.controller.submit))
            w.bind('<Tab>',    self._on_tab)
        self._query_var.trace_add('write', lambda *_: self._on_text_changed())
        win.protocol('WM_DELETE_WINDOW', lambda: self._dispatch(self.controller.dismiss))

        self._render(self.controller.render_model())
        win.deiconify()
        win.lift()
        win.focus_force()
        self._entry.focus_set()
        self._pin_position(0)

    # ── Startup positioning ───────────────────────────────────────────────

    def _pin_position(self, frame: int):
        # Window managers like to centre new windows; keep forcing (0, 0)
        if self._closed or frame >= self._position_frames:
            return
        self.root.geometry('+0+0')
        self.root.after(POSITION_TICK, lambda: self._pin_position(frame + 1))

    # ── Events ────────────────────────────────────────────────────────────

    def _on_text_changed(self):
        self._dispatch(lambda: self.controller.change_query(self._query_var.get()))

    def _on_tab(self, _event=None):
        self._dispatch(self.controller.cycle)
        return 'break'   # keep focus in the text box

    def _dispatch(self, action):
        if self._closed:
            return 'break'
        model = action()
        if self.controller.terminating:
            self.close()
            self.on_exit(self.controller.termination)
        elif model is not None:
            self._render(model)
        return 'break'

    # ── Rendering ─────────────────────────────────────────────────────────

    def _resize_entry(self, text: str):
        width = max(self._font.measure(text) + BOX_PAD, MIN_BOX_W)
        # tk.Entry width is in characters; convert from pixels
        char_w = max(1, self._font.measure('0'))
        self._entry.configure(width=max(1, -(-width // char_w)))

    def _render(self, model):
        C = self._C
        self._resize_entry(model.query)
        if hint_visible(model.query):
            self._hint.pack(side=tk.LEFT, after=self._entry)
        else:
            self._hint.pack_forget()
        for chip in self._chips:
            chip.destroy()
        self._chips = []

        for i, (name, highlighted) in enumerate(model.items):
            bg, fg = chip_colors(C, i, highlighted)
            chip = tk.Label(self._row, text=name, bg=bg, fg=fg, font=self._font,
                            padx=CHIP_PADX, pady=CHIP_PADY)
            chip.pack(side=tk.LEFT, padx=(0, 8))
            self._chips.append(chip)

    def close(self):
        if self._closed:
            return
        self._closed = True
        try:
            self.root.withdraw()
        except tk.TclError:
            pass
