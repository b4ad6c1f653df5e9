"""
Reusable help strings for UI tooltips and glossary.
"""

# Short one-liners for widget help=
TOOLTIP_LABELS = "Comma-separated, one per plot. Use | inside a label for a line break, e.g. 'A)|top'."
TOOLTIP_LOCATION = "Where labels go relative to each axes box. 'Outside' keywords place the label beyond the box edge."
TOOLTIP_BUFFER = "Gap between the label's aligned side and the axes edge. Ignored for centered sides."
TOOLTIP_UNIT = "Unit of the buffer. 'normalized' is a fraction of the axes width or height."
TOOLTIP_SEED = "Only used by 'random'. Same seed, same positions."
TOOLTIP_CHECK = "Flag labels whose box spills out of (inside locations) or into (outside locations) the axes."

# Full glossary for Help & glossary expander
GLOSSARY_MD = """
### Anchor
The point, in axes fractions, that the label is aligned to, together with its horizontal and vertical alignment.

### Buffer
Distance between the axes edge and the aligned side of the label. A 'NorthEast' label with buffers (0.02, 0.02)
has its top-right corner 2% of the axes width from the right edge and 2% of the height from the top.

### Normalized coordinates
(0, 0) is the lower-left corner of the axes box and (1, 1) the upper-right. Outside locations use values beyond [0, 1].

### Numeric codes
1 = NorthEast, 2 = NorthWest, 3 = SouthWest, 4 = SouthEast, -1 = NorthEastOutside.
"""
