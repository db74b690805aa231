"""Node library framework definition."""

from appseed.catalog.base import Framework, Variant

NODE = Framework(
    name="node",
    display="Node",
    color="blue",
    publish=True,
    test=True,
    variants=(
        Variant(name="node", display="Base", color="blue"),
        Variant(name="node-electron", display="Electron", color="yellow"),
    ),
)
