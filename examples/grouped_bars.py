"""Example: grouped bars in the IFC fill order (green, purple, brown)."""

import ifc_plots as ifc

regions = ["Africa", "Asia", "Europe", "Latin America"]
commitments = {
    "2022": [6.1, 8.4, 3.2, 5.0],
    "2023": [6.8, 9.0, 2.9, 5.6],
    "2024": [7.5, 9.7, 3.4, 6.2],
}

ifc.bar(
    regions,
    commitments,
    scale=ifc.scale_fill(name="Fiscal year"),
    title="Long-term commitments",
    subtitle="USD billions",
    caption="Source: annual report",
    ylabel="Commitments",
    filename="grouped-bars.svg",
)
