"""Punto de entrada de la calculadora de bolsillo."""

import os
import tkinter as tk

from calculator_engine import CalculatorEngine
from calculator_ui import CalculatorApp
from logging_config import configure_logging


WINDOW_GEOMETRY = "340x520"
WINDOW_MIN_SIZE = (300, 460)
LOG_LEVEL = os.environ.get("CALCULADORA_LOG_LEVEL", "WARNING")


def main():
    configure_logging(LOG_LEVEL)
    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)
    CalculatorApp(root, engine=CalculatorEngine())
    root.mainloop()


if __name__ == "__main__":
    main()
