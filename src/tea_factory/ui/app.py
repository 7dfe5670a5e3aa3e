"""
Main Application Window - TeaFactory Simulator

Provides the main window where the batch count and coefficient profile are
chosen before opening the simulation dashboard.

Author: TeaFactory Simulator Project
Date: 2026-10-18
"""

import tkinter as tk
from tkinter import ttk

from tea_factory.core.config import MAX_BATCHES
from tea_factory.core.model_params import ModelType, model_type_from_name


class MainWindow:
    """
    Main application window for the tea manufacturing simulator.

    Opens one dashboard per click with the selected settings.
    """

    def __init__(self):
        """Initialize the main application window."""
        self.root = tk.Tk()
        self.root.title("TeaFactory Simulator")
        self.root.geometry("480x320")

        self.var_batches = tk.IntVar(value=1)
        self.var_model = tk.StringVar(value=ModelType.DEFAULT.value)

        self._setup_ui()

    def _setup_ui(self):
        """Set up the user interface components."""
        header = ttk.Label(
            self.root,
            text="TeaFactory Simulator",
            font=("Arial", 16, "bold"),
        )
        header.pack(pady=20)

        desc = ttk.Label(
            self.root,
            text="Steaming → Rolling → Drying",
            font=("Arial", 10),
        )
        desc.pack(pady=5)

        ttk.Separator(self.root, orient="horizontal").pack(fill="x", pady=15)

        settings_frame = ttk.LabelFrame(
            self.root,
            text="Run Settings",
            padding=20,
        )
        settings_frame.pack(padx=20, pady=10, fill="both", expand=True)

        ttk.Label(settings_frame, text="Batches:").grid(row=0, column=0, sticky="w", pady=5)
        ttk.Spinbox(
            settings_frame,
            from_=1,
            to=MAX_BATCHES,
            textvariable=self.var_batches,
            width=6,
            state="readonly",
        ).grid(row=0, column=1, sticky="w", padx=10)

        ttk.Label(settings_frame, text="Profile:").grid(row=1, column=0, sticky="w", pady=5)
        ttk.Combobox(
            settings_frame,
            textvariable=self.var_model,
            values=[m.value for m in ModelType],
            state="readonly",
            width=12,
        ).grid(row=1, column=1, sticky="w", padx=10)

        ttk.Button(
            settings_frame,
            text="🍵 Open Dashboard",
            command=self._open_dashboard,
            width=25,
        ).grid(row=2, column=0, columnspan=2, pady=15, sticky="ew")

        settings_frame.columnconfigure(1, weight=1)

        footer = ttk.Label(
            self.root,
            text="TeaFactory Simulator Project - 2026",
            font=("Arial", 8),
            foreground="gray",
        )
        footer.pack(side="bottom", pady=10)

    def _open_dashboard(self):
        """Open the simulation dashboard with the selected settings."""
        # Import here to avoid circular dependencies and allow headless testing
        from tea_factory.modules.simulator.view import open_simulator_dashboard

        open_simulator_dashboard(
            self.root,
            batch_count=self.var_batches.get(),
            model_type=model_type_from_name(self.var_model.get()),
        )

    def run(self):
        """Start the application main loop."""
        self.root.mainloop()


def main():
    """Entry point for the UI application."""
    app = MainWindow()
    app.run()


if __name__ == "__main__":
    main()
