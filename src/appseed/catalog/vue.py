"""Vue framework definition."""

from appseed.catalog.base import Framework, Variant

VUE = Framework(
    name="vue",
    display="Vue",
    color="green",
    variants=(
        Variant(name="vue", display="Web", color="blue"),
        Variant(name="electron-vue", display="Electron", color="yellow"),
    ),
)
