# -*- coding: utf-8 -*-
# Lagrangix/post/plot_structure.py

"""
Project: Lagrangix
Author: Erfan Vaezi
Date: 4/22/2026 (Updated: 6/3/2026)

Purpose
-------
Quick visual check of a generated structure with matplotlib: each wall chain is drawn as
a line with '*' markers on its points, inside the square [0, Lx] x [0, Lx] frame of the
fluid domain. Optionally highlights porous end points (nonzero porosity code).

Main Tasks
----------
    1) Import pyplot with a headless-safe backend.
    2) `plot_points`: draw an (N,2) point array, split by chain when chains are given.
    3) `plot_structure`: same for an ImmersedStructure, with porous ends marked.
"""

import os
from typing import Iterable, Optional
import numpy as np
from geometry.topology._validation import _assert_xy

__all__ = ["plot_points", "plot_structure"]

_CHAIN_STYLE = {
    "gut_top": "r",
    "gut_bottom": "r",
    "leg_top": "b",
    "leg_bottom": "b",
}


def _get_pyplot():
    """
    Import matplotlib.pyplot with a headless-safe backend if needed.

    Raises
    ------
    RuntimeError
        If matplotlib cannot be imported.
    """
    try:
        import matplotlib
        # Agg when DISPLAY is not set (CI, remote shells).
        if not os.environ.get("DISPLAY"):
            try:
                matplotlib.use("Agg")  # must be set before importing pyplot
            except Exception:
                pass
        import matplotlib.pyplot as plt
        return plt
    except Exception as e:
        raise RuntimeError("matplotlib is required for plotting: {}".format(e))


def _finish(plt, fig, created_fig, show, save_path):
    if save_path:
        fig.savefig(save_path, dpi=300, bbox_inches="tight")
    backend = plt.get_backend().lower()
    if created_fig:
        if show and not backend.startswith("agg"):
            plt.show()
        else:
            plt.close(fig)


def plot_points(points: np.ndarray,
                chains: Optional[Iterable] = None,
                *,
                Lx: Optional[float] = None,
                name: str = "structure",
                show: bool = True,
                save_path: Optional[str] = None,
                ax=None):
    """
    Plot Lagrangian points, one line per chain.

    Parameters
    ----------
    points : np.ndarray
        (N,2) array of (x,y) points.
    chains : Iterable[Chain], optional
        Chain ranges (1-based, inclusive). When None, all points form one polyline.
    Lx : float, optional
        Fluid domain length; frames the axes to [0, Lx] x [0, Lx] when given.
    name : str
        Title label for the figure.
    show : bool
        If True and we created the figure, display it (ignored on Agg).
    save_path : Optional[str]
        If given, save the figure to this path.
    ax : Optional[matplotlib.axes.Axes]
        Existing Axes to draw on; if None, a figure is created.

    Returns
    -------
    matplotlib.axes.Axes
    """
    P = np.asarray(points, dtype=float)
    _assert_xy(P)
    plt = _get_pyplot()

    created_fig = False
    if ax is None:
        fig = plt.figure(figsize=(6, 6))
        ax = fig.add_subplot(111)
        created_fig = True

    if chains is None:
        ax.plot(P[:, 0], P[:, 1], "r-", lw=1.0)
        ax.plot(P[:, 0], P[:, 1], "*", ms=3)
    else:
        for chain in chains:
            seg = P[chain.start - 1:chain.stop]
            color = _CHAIN_STYLE.get(chain.name, "k")
            ax.plot(seg[:, 0], seg[:, 1], color + "-", lw=1.0, label=chain.name)
            ax.plot(seg[:, 0], seg[:, 1], color + "*", ms=3)

    if Lx is not None:
        ax.set_xlim(0.0, float(Lx))
        ax.set_ylim(0.0, float(Lx))
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title("Lagrangian points: {}".format(name))

    _finish(plt, ax.figure, created_fig, show, save_path)
    return ax


def plot_structure(structure,
                   *,
                   show: bool = True,
                   save_path: Optional[str] = None,
                   ax=None,
                   mark_porous_ends: bool = True):
    """
    Plot an ImmersedStructure; porous end points (nonzero code) are ringed in black.

    Parameters
    ----------
    structure : ImmersedStructure
        Output of `structure.api.build_structure`.
    show, save_path, ax
        Same semantics as `plot_points`.
    mark_porous_ends : bool
        Overlay the eight coded porous points.
    """
    plt = _get_pyplot()
    created_fig = ax is None
    if created_fig:
        fig = plt.figure(figsize=(6, 6))
        ax = fig.add_subplot(111)

    plot_points(
        structure.points,
        structure.info.chains(),
        Lx=structure.geometry.params["Lx"],
        name=structure.name,
        show=False,
        save_path=None,
        ax=ax,
    )
    if mark_porous_ends:
        ends = [r.index - 1 for r in structure.porous if r.code != 0]
        if ends:
            P = structure.points[ends]
            ax.plot(P[:, 0], P[:, 1], "ko", mfc="none", ms=6, label="porous ends")
    ax.legend(loc="upper right", fontsize=8)

    _finish(plt, ax.figure, created_fig, show, save_path)
    return ax
