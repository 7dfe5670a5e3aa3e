"""
Simulator Dashboard View

Tkinter UI for interactive runs with:
- Per-batch stage, elapsed time and progress bars
- Quality score and status
- Start / Pause / Reset and profile selection
- Matplotlib trend plot of the primary batch
- CSV log of the primary batch while running
"""

import logging
import time
import tkinter as tk
from tkinter import ttk
from typing import Dict, List

# Matplotlib integration
import matplotlib
matplotlib.use('TkAgg')
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure

from tea_factory.core.model_params import ModelType, model_type_from_name
from tea_factory.core.quality import QualityStatus
from tea_factory.modules.batch.model import TeaBatch
from tea_factory.modules.simulator.controller import SimulatorController
from tea_factory.modules.simulator.model import RunLog, TrendHistory


logger = logging.getLogger(__name__)

GUI_CSV_PATH = "tea_factory_gui.csv"

# Refresh period of the dashboard [ms]
TICK_MS = 100

# Trend plot is redrawn every N ticks
PLOT_EVERY_TICKS = 5

STATUS_COLORS = {
    QualityStatus.GOOD: 'green',
    QualityStatus.OK: 'orange',
    QualityStatus.BAD: 'red',
}


class SimulatorDashboardView:
    """Interactive run dashboard (Toplevel window)."""

    def __init__(
        self,
        parent,
        batch_count: int = 1,
        model_type: ModelType = ModelType.DEFAULT,
        csv_path: str = GUI_CSV_PATH,
    ):
        """
        Initialize dashboard window.

        Args:
            parent: Parent Tk window
            batch_count: Number of batches driven together
            model_type: Initial coefficient profile
            csv_path: CSV log written while running
        """
        self.parent = parent
        self.controller = SimulatorController(batch_count, model_type)
        self.history = TrendHistory()
        self.run_log = RunLog(csv_path)
        self.last_tick = time.perf_counter()
        self.tick_count = 0

        self.window = tk.Toplevel(parent)
        self.window.title("TeaFactory Simulator - Dashboard")
        self.window.geometry("1100x760")
        self.window.protocol("WM_DELETE_WINDOW", self._on_close)

        self.batch_widgets: List[Dict] = []

        self._build_ui()
        self._refresh()
        self._plot_trends()

        self._after_id = self.window.after(TICK_MS, self._tick)

    def _build_ui(self):
        """Build controls, batch panels and trend plot."""
        main_frame = ttk.Frame(self.window)
        main_frame.pack(fill=tk.BOTH, expand=True)

        main_frame.columnconfigure(0, weight=1)
        main_frame.columnconfigure(1, weight=2)
        main_frame.rowconfigure(1, weight=1)

        self._build_controls_section(main_frame)
        self._build_batches_section(main_frame)
        self._build_trend_section(main_frame)

    def _build_controls_section(self, parent):
        """Build Start/Pause/Reset buttons and profile selector (top)."""
        controls = ttk.Frame(parent, relief=tk.RIDGE, borderwidth=2, padding=10)
        controls.grid(row=0, column=0, columnspan=2, sticky='ew', padx=10, pady=10)

        self.btn_start = ttk.Button(controls, text="▶ Start", command=self._on_start)
        self.btn_start.pack(side=tk.LEFT, padx=2)
        self.btn_pause = ttk.Button(controls, text="⏸ Pause", command=self._on_pause)
        self.btn_pause.pack(side=tk.LEFT, padx=2)
        self.btn_reset = ttk.Button(controls, text="⟲ Reset", command=self._on_reset)
        self.btn_reset.pack(side=tk.LEFT, padx=2)

        ttk.Separator(controls, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=10)

        ttk.Label(controls, text="Profile:").pack(side=tk.LEFT, padx=5)
        self.var_model = tk.StringVar(value=self.controller.model_type.value)
        self.cmb_model = ttk.Combobox(
            controls,
            textvariable=self.var_model,
            values=[m.value for m in ModelType],
            state='readonly',
            width=12,
        )
        self.cmb_model.pack(side=tk.LEFT)
        self.cmb_model.bind("<<ComboboxSelected>>", self._on_model_selected)

        self.lbl_run_state = ttk.Label(controls, text="● Stopped", foreground='gray',
                                       font=('Arial', 10, 'bold'))
        self.lbl_run_state.pack(side=tk.RIGHT, padx=5)

    def _build_batches_section(self, parent):
        """Build one panel per batch (left)."""
        batches_frame = ttk.Frame(parent)
        batches_frame.grid(row=1, column=0, sticky='nsew', padx=(10, 5), pady=5)

        # Scrollable container for many batches
        canvas_scroll = tk.Canvas(batches_frame, borderwidth=0, highlightthickness=0)
        scrollbar = ttk.Scrollbar(batches_frame, orient="vertical", command=canvas_scroll.yview)
        scroll_frame = ttk.Frame(canvas_scroll)

        scroll_frame.bind(
            "<Configure>",
            lambda e: canvas_scroll.configure(scrollregion=canvas_scroll.bbox("all"))
        )

        canvas_scroll.create_window((0, 0), window=scroll_frame, anchor="nw")
        canvas_scroll.configure(yscrollcommand=scrollbar.set)

        canvas_scroll.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")

        for index, _ in enumerate(self.controller.batches, start=1):
            self.batch_widgets.append(self._build_batch_panel(scroll_frame, index))

    def _build_batch_panel(self, parent, index: int) -> Dict:
        """Build labels and bars of one batch."""
        panel = ttk.LabelFrame(parent, text=f"Batch #{index}", padding=10)
        panel.pack(fill=tk.X, padx=5, pady=5)

        widgets = {}
        widgets['process'] = ttk.Label(panel, text="--", font=('Arial', 12, 'bold'))
        widgets['process'].grid(row=0, column=0, columnspan=3, sticky='w')
        widgets['elapsed'] = ttk.Label(panel, text="-- s")
        widgets['elapsed'].grid(row=1, column=0, columnspan=3, sticky='w', pady=(0, 5))

        for row, (key, label) in enumerate(
            [('moisture', "Moisture"), ('temperature', "Temperature"),
             ('aroma', "Aroma"), ('color', "Color")],
            start=2,
        ):
            ttk.Label(panel, text=label, width=12).grid(row=row, column=0, sticky='w')
            bar = ttk.Progressbar(panel, orient=tk.HORIZONTAL, length=220, maximum=100.0)
            bar.grid(row=row, column=1, padx=5, pady=2)
            value = ttk.Label(panel, text="--", width=8)
            value.grid(row=row, column=2, sticky='e')
            widgets[f'{key}_bar'] = bar
            widgets[f'{key}_value'] = value

        widgets['score'] = ttk.Label(panel, text="Quality Score: --")
        widgets['score'].grid(row=6, column=0, columnspan=2, sticky='w', pady=(5, 0))
        widgets['status'] = ttk.Label(panel, text="--", font=('Arial', 10, 'bold'))
        widgets['status'].grid(row=6, column=2, sticky='e', pady=(5, 0))
        return widgets

    def _build_trend_section(self, parent):
        """Build trend plot of the primary batch (right)."""
        trend_frame = ttk.LabelFrame(parent, text="Trends - Batch #1", relief=tk.RIDGE, borderwidth=2)
        trend_frame.grid(row=1, column=1, sticky='nsew', padx=(5, 10), pady=5)

        self.fig = Figure(figsize=(7, 5), dpi=80)
        self.ax_state = self.fig.add_subplot(211)
        self.ax_moisture = self.fig.add_subplot(212, sharex=self.ax_state)
        self.canvas = FigureCanvasTkAgg(self.fig, master=trend_frame)
        self.canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)

    # ========== Run control ==========

    def _on_start(self):
        """Start the run and open the CSV log once per run."""
        self.controller.start()
        if self.controller.is_running:
            self.run_log.open()
        self._refresh()

    def _on_pause(self):
        self.controller.pause()
        self._refresh()

    def _on_reset(self):
        """Stop, reset batches and close the CSV log."""
        self.controller.reset()
        self.run_log.close()
        self.history.clear()
        self._refresh()
        self._plot_trends()

    def _on_model_selected(self, event=None):
        """Apply the selected profile; only allowed while paused."""
        model_type = model_type_from_name(self.var_model.get())
        if not self.controller.set_model(model_type):
            self.var_model.set(self.controller.model_type.value)
            return
        # Batches were reset: the next Start opens a fresh log
        self.run_log.close()
        self.history.clear()
        self._refresh()
        self._plot_trends()

    def _tick(self):
        """Advance the simulation by the wall-clock time since the last tick."""
        now = time.perf_counter()
        delta = now - self.last_tick
        self.last_tick = now

        self.controller.update(delta)

        snapshot = self.controller.batch.snapshot()
        self.history.record(snapshot)

        self.run_log.record(snapshot)

        self._refresh()
        self.tick_count += 1
        if self.tick_count % PLOT_EVERY_TICKS == 0:
            self._plot_trends()

        self._after_id = self.window.after(TICK_MS, self._tick)

    # ========== Display ==========

    def _refresh(self):
        """Update every batch panel and the run state badge."""
        for batch, widgets in zip(self.controller.batches, self.batch_widgets):
            self._update_batch_panel(batch, widgets)

        if self.controller.is_running:
            self.lbl_run_state.config(text="● Running", foreground='green')
        elif self.controller.all_finished:
            self.lbl_run_state.config(text="● Finished", foreground='blue')
        else:
            self.lbl_run_state.config(text="● Stopped", foreground='gray')

        combo_state = 'disabled' if self.controller.is_running else 'readonly'
        self.cmb_model.config(state=combo_state)

    @staticmethod
    def _update_batch_panel(batch: TeaBatch, widgets: Dict):
        widgets['process'].config(text=f"Current Process: {batch.process}")
        widgets['elapsed'].config(
            text=f"Elapsed Time: {batch.elapsed_seconds} / {batch.total_duration_seconds} s"
        )

        widgets['moisture_bar']['value'] = batch.moisture * 100.0
        widgets['moisture_value'].config(text=f"{batch.moisture * 100.0:.0f}%")
        widgets['temperature_bar']['value'] = min(max(batch.temperature_c, 0.0), 100.0)
        widgets['temperature_value'].config(text=f"{batch.temperature_c:.0f} °C")
        widgets['aroma_bar']['value'] = batch.aroma
        widgets['aroma_value'].config(text=f"{batch.aroma:.0f}")
        widgets['color_bar']['value'] = batch.color
        widgets['color_value'].config(text=f"{batch.color:.0f}")

        status = batch.quality_status
        widgets['score'].config(text=f"Quality Score: {batch.quality_score:.0f}")
        widgets['status'].config(text=status.value, foreground=STATUS_COLORS[status])

    def _plot_trends(self):
        """Redraw the trend plot from the history buffers."""
        data = self.history.as_arrays()
        t = data['elapsed']

        self.ax_state.clear()
        self.ax_state.set_ylabel('Index / °C')
        self.ax_state.set_title('Batch #1')
        self.ax_moisture.clear()
        self.ax_moisture.set_xlabel('Elapsed time [s]')
        self.ax_moisture.set_ylabel('Moisture [%]')

        if t.size == 0:
            self.ax_state.text(0.5, 0.5, 'Press Start',
                               transform=self.ax_state.transAxes, ha='center', va='center',
                               fontsize=14, color='gray')
        else:
            self.ax_state.plot(t, data['temperature_c'], 'r-', linewidth=2, label='Temperature')
            self.ax_state.plot(t, data['aroma'], 'g-', linewidth=2, label='Aroma')
            self.ax_state.plot(t, data['color'], color='saddlebrown', linewidth=2, label='Color')
            self.ax_state.plot(t, data['quality_score'], 'k--', linewidth=1, label='Quality')
            self.ax_state.legend(loc='upper left', fontsize=8)
            self.ax_moisture.plot(t, data['moisture'] * 100.0, 'b-', linewidth=2)
            self.ax_moisture.set_ylim(0.0, 100.0)

        self.ax_state.grid(True, alpha=0.3)
        self.ax_moisture.grid(True, alpha=0.3)
        self.canvas.draw()

    # ========== Shutdown ==========

    def _on_close(self):
        """Stop the timer, close the log and destroy the window."""
        self.window.after_cancel(self._after_id)
        self.run_log.close()
        self.window.destroy()


def open_simulator_dashboard(parent, batch_count: int = 1,
                             model_type: ModelType = ModelType.DEFAULT):
    """Open simulator dashboard window."""
    dashboard = SimulatorDashboardView(parent, batch_count, model_type)
    return dashboard
