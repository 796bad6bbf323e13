"""Example: preview the nine palette colors."""

import ifc_plots as ifc

fig, ax = ifc.show_palette()
ifc.save(fig, "ifc-palette.svg")
