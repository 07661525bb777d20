# -*- coding: utf-8 -*-
"""
Graphical window for a merge grid.

Draws each cell of the board as a coloured square labelled with its tile value, and forwards key presses to a
caller-supplied handler. Matplotlib does both the drawing and the event loop.
"""
from typing import Callable, Optional

from matplotlib import pyplot as plt
from matplotlib.backend_bases import Event
from numpy import ndarray


class WindowBoard:
    """
    A Matplotlib window showing a grid of tiles.

    Methods
    -------
    show_image(tiles: ndarray, score: int | None = None)
        Redraw the cells and, optionally, the score.
    register_key_handler(key_handler: Callable)
        Register a function called on every key press.
    show(block: bool = True)
        Display the window.
    close()
        Close the window.
    """

    # ##: Background of each cell, by tile value.
    COLORS = {
        0: "#CCC0B3",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
        4096: "#00A2D8",
    }
    DEFAULT_COLOR = "#3C3A32"

    def __init__(self, title: str, size: int):
        """
        Create the window.

        Parameters
        ----------
        title : str
            The title of the window.
        size : int
            Number of rows (and columns) of the grid.
        """
        self.size = size
        self.fig = plt.figure()
        self.fig.canvas.manager.set_window_title(title)
        self.fig.patch.set_facecolor("#BBADA0")
        self.fig.subplots_adjust(left=0.02, bottom=0.02, right=0.98, top=0.92, wspace=0.05, hspace=0.05)

        self.axes = [self.fig.add_subplot(size, size, r * size + c + 1) for r in range(size) for c in range(size)]
        self.texts = []
        for ax in self.axes:
            self.texts.append(ax.text(0.5, 0.5, "", ha="center", va="center", fontsize="x-large", fontweight="bold"))
            ax.set_xticks([])
            ax.set_yticks([])
        self.title = self.fig.suptitle("")

        self.closed = False
        self.fig.canvas.mpl_connect("close_event", self._close_handler)

    def _close_handler(self, event: Optional[Event] = None):
        """Mark the window closed when Matplotlib closes it."""
        self.closed = True

    def show_image(self, tiles: ndarray, score: Optional[int] = None):
        """
        Show or update the grid.

        Parameters
        ----------
        tiles : ndarray
            The current board, of shape ``(size, size)``.
        score : int, optional
            Score written above the grid when given.
        """
        for ax, text, value in zip(self.axes, self.texts, tiles.flat):
            value = int(value)
            text.set_text(str(value) if value != 0 else "")
            text.set_color("#776E65" if value in (2, 4) else "#F9F6F2")
            ax.set_facecolor(self.COLORS.get(value, self.DEFAULT_COLOR))

        if score is not None:
            self.title.set_text(f"score: {score}")

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler : Callable
            Called with the Matplotlib event whenever a key is pressed in the window.
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    @classmethod
    def show(cls, block: bool = True):
        """
        Show the window and start the Matplotlib event loop.

        Parameters
        ----------
        block : bool, optional
            If True, the event loop is blocking; otherwise, it's non-blocking (default is True).
        """
        if not block:
            plt.ion()
        plt.show()

    def close(self):
        """Close the window."""
        plt.close(self.fig)
        self.closed = True
