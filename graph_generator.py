"""
Graph Generator for DeskCalc
Creates visualizations of the calculation history and of scientific functions
"""
import matplotlib.style as mplstyle
from matplotlib.figure import Figure

import config
import scientific
from errors import CalculatorError


class GraphGenerator:
    def __init__(self, history_manager):
        self.history = history_manager
        try:
            mplstyle.use('seaborn-v0_8-darkgrid')
        except OSError:
            try:
                mplstyle.use('seaborn-darkgrid')
            except OSError:
                mplstyle.use('ggplot')

    def _create_fig(self, figsize=None):
        """Internal helper to create a figure with optional custom size"""
        if figsize is None:
            figsize = config.GRAPH_FIGSIZE
        return Figure(figsize=figsize, dpi=config.GRAPH_DPI)

    def history_series(self):
        """Expressions and results of the stored history, oldest first"""
        entries = list(reversed(self.history.get_calculation_history()))
        return {
            'labels': [e['expression'] for e in entries],
            'values': [e['result'] for e in entries],
        }

    def function_series(self, name, start=None, stop=None, points=None):
        """Sample a scientific function; points outside its domain are None"""
        name = scientific.resolve(name)
        if start is None or stop is None:
            start, stop = config.GRAPH_RANGE
        if points is None:
            points = config.GRAPH_POINTS
        points = max(int(points), 2)

        step = (stop - start) / (points - 1)
        xs, ys = [], []
        for i in range(points):
            x = start + i * step
            try:
                y, _ = scientific.apply(name, x)
            except CalculatorError:
                y = None
            xs.append(x)
            ys.append(y)
        return {'x': xs, 'y': ys}

    def create_history_graph(self, figsize=None):
        """Create a bar chart of recent results"""
        series = self.history_series()

        fig = self._create_fig(figsize)
        ax = fig.add_subplot(111)

        x = range(len(series['values']))
        ax.bar(list(x), series['values'], color='#2E8B57')

        ax.set_xlabel('Calculation')
        ax.set_ylabel('Result')
        ax.set_title('Recent Results')
        ax.set_xticks(list(x))
        ax.set_xticklabels([str(i + 1) for i in x])
        ax.grid(True, alpha=0.3)

        fig.tight_layout()
        return fig

    def create_function_graph(self, name, start=None, stop=None, points=None, figsize=None):
        """Create a line graph of a scientific function over degrees"""
        series = self.function_series(name, start, stop, points)
        # None values become gaps in the line
        ys = [float('nan') if y is None else y for y in series['y']]

        fig = self._create_fig(figsize)
        ax = fig.add_subplot(111)
        ax.plot(series['x'], ys, color='#2C5F8A', linewidth=1.5, label=scientific.resolve(name))

        ax.set_xlabel('x')
        ax.set_ylabel('f(x)')
        ax.set_title(f"{scientific.resolve(name)}(x)")
        ax.legend()
        ax.grid(True, alpha=0.3)

        fig.tight_layout()
        return fig
