"""
Interfaz gráfica de la calculadora de bolsillo.

Usa tkinter. Cada clic o pulsación ejecuta una sola operación del
motor y después se vuelve a pintar la pantalla a partir del estado.
"""

import tkinter as tk
from tkinter import font as tkfont

from calculator_bindings import (
    KEYPAD,
    action_for_key,
    clear_label,
    dispatch,
    display_font_size,
    hint_text,
    is_operator_active,
)
from calculator_engine import CalculatorEngine


class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":          "#1E1E2E",
        "display_bg":  "#181825",
        "num":         "#313244",
        "num_fg":      "#CDD6F4",
        "op":          "#F38BA8",
        "op_fg":       "#1E1E2E",
        "op_active":   "#CDD6F4",
        "func":        "#45475A",
        "func_fg":     "#CDD6F4",
        "special":     "#585B70",
        "equals":      "#89B4FA",
        "equals_fg":   "#1E1E2E",
        "hint_fg":     "#BAC2DE",
        "value_fg":    "#A6E3A1",
    }

    TITLE = "Калькулятор"

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title(self.TITLE)
        self.root.configure(bg=self.C["bg"])

        self.engine = engine if engine is not None else CalculatorEngine()
        self._clear_button: tk.Button | None = None
        self._operator_buttons: dict[str, tk.Button] = {}

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._bind_keyboard()
        self._refresh()

        # Foco inicial en la ventana para recibir el teclado
        self.root.focus_set()

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_hint  = tkfont.Font(family="Segoe UI", size=13)
        self._f_value = tkfont.Font(family="Segoe UI", size=-64, weight="bold")
        self._f_btn   = tkfont.Font(family="Segoe UI", size=18)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        # Operación pendiente: "5 +"
        self.hint_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.hint_var, font=self._f_hint,
            bg=self.C["display_bg"], fg=self.C["hint_fg"], anchor="e",
        ).pack(fill="x")

        self.value_var = tk.StringVar(value="0")
        tk.Label(
            frame, textvariable=self.value_var, font=self._f_value,
            bg=self.C["display_bg"], fg=self.C["value_fg"], anchor="e",
        ).pack(fill="x")

    # ── Teclado numérico / operadores ────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(KEYPAD):
            spans = self._compute_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda a=action: self._on_key(a),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=8)
                col_pos += spans[idx]

                if action == "clear":
                    self._clear_button = btn
                elif action.startswith("operator:"):
                    self._operator_buttons[action[9:]] = btn

        for r in range(len(KEYPAD)):
            frame.rowconfigure(r, weight=1)

    @staticmethod
    def _compute_spans(cols_in_row: int, max_cols: int) -> list[int]:
        """Reparte max_cols entre cols_in_row botones."""
        base, extra = divmod(max_cols, cols_in_row)
        spans = [base] * cols_in_row
        # Las columnas sobrantes van al primer botón (el "0")
        spans[0] += extra
        return spans

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        self.root.bind("<Key>", self._on_keypress)

    def _on_keypress(self, event):
        action = action_for_key(event.char or "", event.keysym or "")
        if action is None:
            return None
        self._on_key(action)
        return "break"

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, action: str):
        dispatch(self.engine, action)
        self._refresh()

    def _refresh(self):
        state = self.engine.state
        text = state.current_entry

        self.value_var.set(text)
        self._f_value.configure(size=-display_font_size(text))
        self.hint_var.set(hint_text(state))

        if self._clear_button is not None:
            self._clear_button.config(text=clear_label(state))

        for symbol, btn in self._operator_buttons.items():
            if is_operator_active(state, symbol):
                btn.config(bg=self.C["op_active"])
            else:
                btn.config(bg=self.C["op"])
