# Card size in SVG user units, matching the SVG-cards sprite sheet
CARD_W = 169.075
CARD_H = 244.64

# Table defaults
TABLE_W = 1024
TABLE_H = 768
TABLE_BG = "#0b6623"

# Pile outline styling
PILE_OUTLINE = "#cccccc"
PILE_OUTLINE_WIDTH = 2
PILE_OUTLINE_DASH = "4 2"

# Fan layout
FAN_STEP_X = 25
FAN_STEP_Y = 30
ARC_STEP = 10  # degrees between neighbouring cards
ARC_MAX_SPAN = 120  # degrees
ARC_MIN_RADIUS = CARD_H
ARC_SPACING = 30  # distance along the arc between neighbouring cards

# Element classes
TABLE_CLASS = "table"
PILE_CLASS = "pile"
CARD_CLASS = "card"
OUTLINE_CLASS = "outline"
