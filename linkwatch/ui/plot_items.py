"""Custom pyqtgraph items for LinkWatch charts."""

from datetime import datetime

import pyqtgraph as pg

from linkwatch.constants import TIME_LABEL_FORMAT


class TimeAxisItem(pg.AxisItem):
    """Bottom axis that renders POSIX timestamps as wall-clock labels."""

    def tickStrings(self, values, scale, spacing):
        if len(values) > 1 and values[-1] - values[0] > 86400:
            return [datetime.fromtimestamp(v).strftime("%d %H:%M") for v in values]
        return [datetime.fromtimestamp(v).strftime(TIME_LABEL_FORMAT) for v in values]


def make_plot(title: str, left_label: str) -> pg.PlotWidget:
    """Create a read-only time series plot."""
    plot = pg.PlotWidget(axisItems={"bottom": TimeAxisItem(orientation="bottom")})
    plot.setMenuEnabled(False)
    plot.setTitle(title, anchor="w")
    plot.setLabel("left", left_label)
    plot.showGrid(x=True, y=True, alpha=0.15)
    plot.setMouseEnabled(x=False, y=False)
    plot.hideButtons()
    return plot
