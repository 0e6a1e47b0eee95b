"""Visual constants for the teaching canvas.

Coordinates are canvas units (800×600 logical canvas). Offsets are relative
to the vertex centre.
"""

# Vertices: blue ring on a dark fill, bold white label.
VERTEX_RADIUS = 25.0
VERTEX_STROKE = "#4a9eff"
VERTEX_STROKE_WIDTH = 3.0
VERTEX_FILL = "#1a3a5a"
VERTEX_LABEL_SIZE = 18.0
VERTEX_LABEL_FILL = "white"

# Highlighted outline is thicker than the resting one.
HIGHLIGHT_STROKE_WIDTH = 5.0

# Edges
EDGE_STROKE = "#4a9eff"
EDGE_STROKE_WIDTH = 2.0
ARROW_SIZE = 12.0
# Arrowhead centre sits this far before the destination centre (radius + 5).
ARROW_SETBACK = 30.0
WEIGHT_LABEL_LIFT = 15.0
WEIGHT_LABEL_SIZE = 14.0
WEIGHT_LABEL_PADDING = 3.0

# Annotations and weight labels share the accent colour on a dark panel.
ACCENT_FILL = "#ffeb3b"
PANEL_BACKGROUND = "rgba(0,0,0,0.7)"
ANNOTATION_SIZE = 14.0
ANNOTATION_PADDING = 5.0
ANNOTATION_OFFSETS: dict[str, tuple[float, float]] = {
    "top": (0.0, -40.0),
    "bottom": (0.0, 60.0),
    "left": (-80.0, 0.0),
    "right": (80.0, 0.0),
}
DEFAULT_ANNOTATION_POSITION = "top"

# Formulas
FORMULA_SIZE = 18.0
FORMULA_FILL = "#4caf50"
FORMULA_BACKGROUND = "rgba(0,0,0,0.8)"
FORMULA_PADDING = 10.0
FORMULA_FONT = "Courier New"
