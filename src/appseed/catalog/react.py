"""React framework definition."""

from appseed.catalog.base import Framework, Variant

REACT = Framework(
    name="react",
    display="React",
    color="cyan",
    variants=(
        Variant(name="react", display="Web", color="blue"),
        Variant(name="electron-react", display="Electron", color="yellow"),
    ),
)
