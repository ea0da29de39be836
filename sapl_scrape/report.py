# -*- coding: utf-8 -*-
"""
Category count report: CSV table + optional bar chart.
"""

from typing import Iterable

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from .models import CATEGORIES, LegislativeMatter

CATEGORY_COL = "Categoria"
COUNT_COL = "Indicações"


def counts_frame(matters: Iterable[LegislativeMatter]) -> pd.DataFrame:
    """One row per category (fixed order, zeros kept)."""
    df = pd.DataFrame([m.to_csv_row() for m in matters], columns=["Identificador", CATEGORY_COL])
    counts = (
        df[CATEGORY_COL]
        .value_counts()
        .reindex(list(CATEGORIES), fill_value=0)
        .astype(int)
    )
    return pd.DataFrame({CATEGORY_COL: counts.index, COUNT_COL: counts.values})


def write_counts_csv(frame: pd.DataFrame, path: str) -> None:
    frame.to_csv(path, index=False)


def plot_counts(frame: pd.DataFrame, path: str) -> None:
    fig, ax = plt.subplots(figsize=(9, 4.5))
    ax.barh(frame[CATEGORY_COL], frame[COUNT_COL])
    ax.invert_yaxis()
    ax.set_xlabel(COUNT_COL)
    ax.set_title("Indicações por categoria")
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)
