"""
GUI for DeskCalc
Tkinter front end: keypad, scientific rows, history and function graph panels
"""
import json
import tkinter as tk
from tkinter import ttk

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

import config
import constants
from dispatcher import ActionDispatcher
from errors import CalculatorError
from graph_generator import GraphGenerator

# (label, action, value, kind)
KEYPAD = [
    [("MC", "memory_clear", None, "mode"), ("MR", "memory_recall", None, "mode"),
     ("M+", "memory_add", None, "mode"), ("M-", "memory_subtract", None, "mode")],
    [("C", "clear", None, "danger"), ("⌫", "backspace", None, "mode"),
     ("MS", "memory_store", None, "mode"), ("÷", "operator", "/", "operator")],
    [("7", "digit", "7", "normal"), ("8", "digit", "8", "normal"),
     ("9", "digit", "9", "normal"), ("×", "operator", "*", "operator")],
    [("4", "digit", "4", "normal"), ("5", "digit", "5", "normal"),
     ("6", "digit", "6", "normal"), ("−", "operator", "-", "operator")],
    [("1", "digit", "1", "normal"), ("2", "digit", "2", "normal"),
     ("3", "digit", "3", "normal"), ("+", "operator", "+", "operator")],
    [("0", "digit", "0", "normal"), (".", "decimal", None, "normal"),
     ("=", "equals", None, "equals")],
]

SCIENTIFIC_ROWS = [
    [("sin", "sin"), ("cos", "cos"), ("tan", "tan"), ("√", "sqrt")],
    [("x²", "square"), ("log", "log10"), ("ln", "ln"), ("n!", "factorial")],
    [("|x|", "abs"), ("π", "pi"), ("e", "e"), ("📈", None)],
]


class DeskCalcGUI:
    def __init__(self, root, dispatcher=None):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        # One calculator instance, threaded explicitly through the UI
        self.dispatcher = dispatcher if dispatcher is not None else ActionDispatcher()
        self.graph_generator = GraphGenerator(self.dispatcher.engine.history)

        settings = self._load_settings()
        self.theme_name = settings.get("theme", config.DEFAULT_THEME)
        self.T = config.get_theme(self.theme_name)
        self.root.configure(bg=self.T["bg"])

        self.create_widgets()
        self.root.bind('<Key>', self.on_key_press)
        self.refresh()

    # ── Settings persistence ─────────────────────────────────────────────
    def _load_settings(self):
        try:
            with open(config.SETTINGS_FILE, "r") as f:
                return json.load(f)
        except (OSError, ValueError):
            return {}

    def _save_settings(self, data):
        existing = self._load_settings()
        existing.update(data)
        with open(config.SETTINGS_FILE, "w") as f:
            json.dump(existing, f, indent=2)

    # ── Theme helpers ────────────────────────────────────────────────────
    def cycle_theme(self):
        """dark -> light -> high-contrast, persisted across runs"""
        self.theme_name = config.next_theme(self.theme_name)
        self._save_settings({"theme": self.theme_name})
        self.T = config.get_theme(self.theme_name)
        self.root.configure(bg=self.T["bg"])
        for w in self.root.winfo_children():
            w.destroy()
        self.create_widgets()
        self.refresh()

    def _neu_btn(self, parent, text, command=None, kind="normal", **kw):
        """Create a flat styled button."""
        T = self.T
        if kind == "equals":
            bg, fg = T["equals_bg"], T["equals_fg"]
        elif kind == "operator":
            bg, fg = T["btn_bg"], T["operator_fg"]
        elif kind in ("mode", "function"):
            bg, fg = T["btn_bg"], T["function_fg"]
        elif kind == "danger":
            bg, fg = T["danger"], "#FFFFFF"
        else:
            bg, fg = T["btn_bg"], T["btn_fg"]
        return tk.Button(
            parent, text=text, command=command,
            font=kw.pop("font", config.BUTTON_FONT),
            bg=bg, fg=fg, activebackground=T["bg"], activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
            highlightthickness=1, highlightbackground=T["bg"],
            **kw
        )

    # ── Inline toast (transient error display) ───────────────────────────
    def _show_toast(self, msg, kind="error", duration=config.ERROR_DISPLAY_MS):
        """Show a banner over the display that removes itself after duration ms"""
        T = self.T
        bg = T["danger"] if kind == "error" else T["accent"]
        toast = tk.Frame(self.root, bg=bg)
        toast.place(relx=0.05, y=8, relwidth=0.9, height=36)
        toast.lift()
        icon = "✗" if kind == "error" else "✓"
        tk.Label(toast, text=f"  {icon}  {msg}",
                 font=(config.BUTTON_FONT[0], 9, "bold"),
                 bg=bg, fg="#FFFFFF", anchor="w").pack(side=tk.LEFT, fill=tk.X, expand=True)
        self.root.after(duration, lambda: toast.destroy() if toast.winfo_exists() else None)

    # ── Layout ───────────────────────────────────────────────────────────
    def create_widgets(self):
        """Create main UI components"""
        T = self.T

        top = tk.Frame(self.root, bg=T["bg"])
        top.pack(side=tk.TOP, fill=tk.X, padx=8, pady=(8, 0))
        self._neu_btn(top, "SCI", command=lambda: self.on_action("toggle_scientific"),
                      kind="mode", font=config.LABEL_FONT).pack(side=tk.LEFT)
        self._neu_btn(top, "History", command=self.show_history_panel,
                      kind="mode", font=config.LABEL_FONT).pack(side=tk.LEFT, padx=4)
        self._neu_btn(top, "Const", command=self.show_constants_panel,
                      kind="mode", font=config.LABEL_FONT).pack(side=tk.LEFT)
        self._neu_btn(top, "Theme", command=self.cycle_theme,
                      kind="mode", font=config.LABEL_FONT).pack(side=tk.RIGHT)

        # Display: pending expression, memory flag, current operand
        self.display_frame = tk.Frame(self.root, bg=T["display_bg"])
        self.display_frame.pack(side=tk.TOP, fill=tk.X, padx=8, pady=8)
        header = tk.Frame(self.display_frame, bg=T["display_bg"])
        header.pack(side=tk.TOP, fill=tk.X)
        self.memory_label = tk.Label(header, text="", font=config.LABEL_FONT,
                                     bg=T["display_bg"], fg=T["accent"], anchor=tk.W)
        self.memory_label.pack(side=tk.LEFT, padx=6)
        self.history_label = tk.Label(header, text="0", font=config.HISTORY_FONT,
                                      bg=T["display_bg"], fg=T["subtext"], anchor=tk.E)
        self.history_label.pack(side=tk.RIGHT, padx=6)
        self.display = tk.Label(self.display_frame, text="0", font=config.DISPLAY_FONT,
                                bg=T["display_bg"], fg=T["display_fg"], anchor=tk.E)
        self.display.pack(side=tk.TOP, fill=tk.X, padx=6, pady=(0, 6))

        # Scientific rows (hidden until toggled)
        self.scientific_frame = tk.Frame(self.root, bg=T["bg"])
        for r, row in enumerate(SCIENTIFIC_ROWS):
            for c, (label, name) in enumerate(row):
                command = (lambda n=name: self.on_action("function", n)) if name else self.show_graph_panel
                self._neu_btn(self.scientific_frame, label, command=command,
                              kind="function").grid(row=r, column=c, sticky="nsew", padx=2, pady=2)
        for c in range(4):
            self.scientific_frame.grid_columnconfigure(c, weight=1)

        self.keypad_frame = tk.Frame(self.root, bg=T["bg"])
        self.keypad_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=6, pady=(0, 6))
        for r, row in enumerate(KEYPAD):
            for c, (label, action, value, kind) in enumerate(row):
                btn = self._neu_btn(self.keypad_frame, label,
                                    command=lambda a=action, v=value: self.on_action(a, v), kind=kind)
                span = 2 if label == "=" else 1
                btn.grid(row=r, column=c, columnspan=span, sticky="nsew", padx=2, pady=2)
            self.keypad_frame.grid_rowconfigure(r, weight=1)
        for c in range(4):
            self.keypad_frame.grid_columnconfigure(c, weight=1)

    def refresh(self):
        """Render the dispatcher's current state"""
        state = self.dispatcher.snapshot()
        self.display.config(text=state['display'])
        self.history_label.config(text=state['history_label'])
        self.memory_label.config(text="M" if state['memory_indicator'] else "")
        if state['scientific_mode']:
            self.scientific_frame.pack(side=tk.TOP, fill=tk.X, padx=6, before=self.keypad_frame)
        else:
            self.scientific_frame.pack_forget()

    # ── Events ───────────────────────────────────────────────────────────
    def on_action(self, action, value=None):
        """Handle a button press"""
        try:
            self.dispatcher.dispatch(action, value)
        except CalculatorError as e:
            self._show_toast(e.message)
        self.refresh()

    def on_key_press(self, event):
        """Handle keyboard input"""
        key = event.keysym if event.keysym in ("Return", "Escape", "BackSpace") else event.char
        if not key:
            return
        try:
            handled = self.dispatcher.handle_key(key)
        except CalculatorError as e:
            self._show_toast(e.message)
            handled = True
        if handled:
            self.refresh()

    # ── Overlays ─────────────────────────────────────────────────────────
    def _open_overlay(self, title):
        T = self.T
        win = tk.Toplevel(self.root)
        win.title(title)
        win.configure(bg=T["bg"])
        win.geometry(f"{config.WINDOW_WIDTH}x{int(config.WINDOW_HEIGHT * 0.7)}")
        return win

    def show_history_panel(self):
        """List recent calculations; clicking one loads its result"""
        T = self.T
        win = self._open_overlay("History")
        entries = self.dispatcher.engine.get_history()

        listbox = tk.Listbox(win, font=config.HISTORY_FONT, bg=T["display_bg"],
                             fg=T["display_fg"], relief=tk.FLAT, bd=0)
        for line in self.dispatcher.engine.history.format_calculation_history():
            listbox.insert(tk.END, line)
        if not entries:
            listbox.insert(tk.END, "No calculations yet")
        listbox.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8, pady=8)

        def _use_selected(event=None):
            sel = listbox.curselection()
            if sel and entries:
                self.on_action("value", entries[sel[0]]['result'])
                win.destroy()

        def _clear():
            self.on_action("clear_history")
            win.destroy()

        listbox.bind("<Double-Button-1>", _use_selected)
        bar = tk.Frame(win, bg=T["bg"])
        bar.pack(side=tk.BOTTOM, fill=tk.X, padx=8, pady=(0, 8))
        self._neu_btn(bar, "Use", command=_use_selected, kind="equals").pack(side=tk.RIGHT)
        self._neu_btn(bar, "Clear", command=_clear, kind="danger").pack(side=tk.LEFT)

        if entries:
            fig = self.graph_generator.create_history_graph()
            canvas = FigureCanvasTkAgg(fig, master=win)
            canvas.draw()
            canvas.get_tk_widget().pack(side=tk.BOTTOM, fill=tk.X, padx=8)

    def show_constants_panel(self):
        """Pick a constant to load into the display"""
        T = self.T
        win = self._open_overlay("Constants")
        tree = ttk.Treeview(win, columns=("symbol", "value", "unit"), show="tree headings")
        tree.heading("#0", text="Name")
        tree.heading("symbol", text="")
        tree.heading("value", text="Value")
        tree.heading("unit", text="Unit")
        tree.column("symbol", width=40)
        for entry in constants.list_constants():
            tree.insert("", tk.END, iid=entry['key'], text=entry['name'],
                        values=(entry['symbol'], f"{entry['value']:.10g}", entry['unit']))
        tree.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8, pady=8)

        def _load(event=None):
            sel = tree.selection()
            if sel:
                self.on_action("constant", sel[0])
                win.destroy()

        tree.bind("<Double-Button-1>", _load)
        self._neu_btn(win, "Load", command=_load, kind="equals").pack(side=tk.BOTTOM, pady=(0, 8))
        win.configure(bg=T["bg"])

    def show_graph_panel(self):
        """Plot a scientific function over the configured degree range"""
        T = self.T
        win = self._open_overlay("Graph")
        choice = tk.StringVar(value="sin")
        names = [name for row in SCIENTIFIC_ROWS for _, name in row if name]
        ttk.Combobox(win, textvariable=choice, values=names, state="readonly").pack(side=tk.TOP, pady=8)
        graph_frame = tk.Frame(win, bg=T["bg"])
        graph_frame.pack(side=tk.TOP, fill=tk.BOTH, expand=True)

        def _draw(event=None):
            for w in graph_frame.winfo_children():
                w.destroy()
            fig = self.graph_generator.create_function_graph(choice.get())
            canvas = FigureCanvasTkAgg(fig, master=graph_frame)
            canvas.draw()
            canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)

        win.bind("<<ComboboxSelected>>", _draw)
        _draw()
