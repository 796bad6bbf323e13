"""Example: points shaded on a red -> pale -> blue diverging scale."""

import numpy as np

import ifc_plots as ifc

rng = np.random.default_rng(3)
x = rng.normal(0, 1, 120)
y = 0.6 * x + rng.normal(0, 0.5, 120)
change = y - 0.6 * x

ifc.scatter(
    x,
    y,
    color=change,
    scale=ifc.scale_color_continuous("diverging", second_col="brown", name="Residual"),
    title="Residuals",
    subtitle="Colored by distance from the trend",
    xlabel="Predicted",
    ylabel="Observed",
    filename="diverging-scatter.svg",
)
