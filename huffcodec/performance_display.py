import matplotlib.pyplot as plt
import numpy as np

from .logger import SymbolCodeLog, BenchmarkLog
from .models import ranked


def format_table(table, precision=4):
    """Render a symbol table as one line per symbol, highest value first."""
    lines = []
    for entry in ranked(table):
        value = entry.frequency
        if isinstance(value, float):
            value = f"{value:.{precision}f}"
        lines.append(f"{entry.symbol!r}: {value}")
    return "\n".join(lines)


class PerformanceDisplay:
    def __init__(self, logs,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 dot_size=5, dot_alpha=0.3,
                 dot_color='blue',
                 trend_line_color='red', trend_line_linewidth=2,
                 moving_avg_window=10):
        self.logs = logs
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.dot_size = dot_size
        self.dot_alpha = dot_alpha
        self.dot_color = dot_color
        self.trend_line_color = trend_line_color
        self.trend_line_linewidth = trend_line_linewidth
        self.moving_avg_window = moving_avg_window

    def _moving_average(self, data):
        window = self.moving_avg_window
        if window < 1:
            raise ValueError("moving_avg_window must be at least 1")
        # mode="same" returns max(len(data), window) points.
        window = min(window, len(data))
        return np.convolve(data, np.ones(window) / window, mode='same')

    def _finish(self, title, xlabel, ylabel, show_graph, save_path):
        plt.title(title, fontsize=self.font_size + 2)
        plt.xlabel(xlabel, fontsize=self.font_size)
        plt.ylabel(ylabel, fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        plt.tight_layout()

        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close()

    def _plot_graph(self, y_values, title, xlabel, ylabel, show_graph=False, save_path=None):
        if not y_values:
            print(f"No data available for {title}.")
            return

        x = np.arange(1, len(y_values) + 1)
        y = np.array(y_values)
        trend = self._moving_average(y)

        plt.figure(figsize=self.fig_size, dpi=self.dpi)

        plt.scatter(x, y, s=self.dot_size, alpha=self.dot_alpha, color=self.dot_color, label="Data points")
        plt.plot(x, trend, color=self.trend_line_color, linewidth=self.trend_line_linewidth, label="Moving Average Trend")

        self._finish(title, xlabel, ylabel, show_graph, save_path)

    def generate_code_length_plot(self, show_graphs=False, save_path=None):
        values = sorted(len(log.code) for log in self.logs if isinstance(log, SymbolCodeLog))
        self._plot_graph(values, "Huffman Code Lengths", "Symbol Rank", "Code Length (bits)", show_graphs, save_path)

    def generate_benchmark_plot(self, show_graphs=False, save_path=None):
        timings = {}
        for log in self.logs:
            if isinstance(log, BenchmarkLog):
                timings.setdefault(log.function_name, []).append((log.size, log.seconds))
        if not timings:
            print("No data available for Benchmark Timings.")
            return

        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        for name, points in timings.items():
            points.sort()
            sizes = np.array([size for size, _ in points])
            seconds = np.array([secs for _, secs in points])
            plt.loglog(sizes, seconds, marker='o', linewidth=self.trend_line_linewidth, label=name)

        self._finish("Benchmark Timings", "Input Size", "Seconds", show_graphs, save_path)
