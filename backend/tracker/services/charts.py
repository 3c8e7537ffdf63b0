"""
SVG rendering of the dashboard charts.

Uses matplotlib's object API (Figure, no pyplot state) so rendering is
safe to call from request handlers.
"""

import io

from matplotlib.figure import Figure

COLORS = ["#4CAF50", "#F44336", "#FFEB3B", "#9C27B0"]  # green, red, yellow, purple
BAR_COLOR = "#4CAF50"
FIGSIZE = (6, 4)


def _to_svg(fig: Figure) -> str:
    buf = io.StringIO()
    fig.savefig(buf, format="svg", bbox_inches="tight", facecolor="white")
    return buf.getvalue()


def _empty(fig: Figure, title: str) -> str:
    ax = fig.add_subplot()
    ax.axis("off")
    ax.set_title(title)
    ax.text(0.5, 0.5, "No data", ha="center", va="center", fontsize=14, color="#6b7280")
    return _to_svg(fig)


def render_status_pie(counts: dict[str, int]) -> str:
    """Equipment Status Breakdown as a labelled pie chart."""
    title = "Equipment Status Breakdown"
    fig = Figure(figsize=FIGSIZE)
    if not counts:
        return _empty(fig, title)

    ax = fig.add_subplot()
    labels = list(counts)
    values = list(counts.values())
    colors = [COLORS[i % len(COLORS)] for i in range(len(values))]
    ax.pie(
        values,
        labels=[f"{label} ({value})" for label, value in zip(labels, values)],
        colors=colors,
        startangle=90,
        wedgeprops={"edgecolor": "white"},
    )
    ax.set_title(title)
    ax.axis("equal")
    ax.legend(labels, loc="center left", bbox_to_anchor=(1.0, 0.5), frameon=False)
    return _to_svg(fig)


def render_hours_bar(hours: dict[str, float]) -> str:
    """Maintenance Hours by Department as a bar chart."""
    title = "Maintenance Hours by Department"
    fig = Figure(figsize=FIGSIZE)
    if not hours:
        return _empty(fig, title)

    ax = fig.add_subplot()
    departments = list(hours)
    ax.bar(departments, list(hours.values()), color=BAR_COLOR, label="hours")
    ax.set_title(title)
    ax.set_ylabel("Hours")
    ax.legend(frameon=False)
    ax.spines[["top", "right"]].set_visible(False)
    return _to_svg(fig)
