"""Hole geometry and growth configuration constants."""

# Initial hole placement and base radius (world units)
HOLE_START_X = 400.0
HOLE_START_Y = 300.0
HOLE_RADIUS = 50.0

# Circular containment requires the agent to clear the rim by this much.
# Compensates for the sprite rectangle being larger than its visual radius.
CAPTURE_MARGIN = 20.0

# Dying transition length in milliseconds
SWALLOW_DURATION_MS = 400.0

# Normal mode: multiply the hole scale at exactly these scores
NORMAL_GROWTH_THRESHOLDS = (20, 40, 80, 160, 320)
NORMAL_GROWTH_FACTOR = 1.2

# Shader mode: multiply the hole scale on every completed swallow
SHADER_GROWTH_FACTOR = 1.002

# Shader mode overlay spin period (one full turn), milliseconds
SHADER_SPIN_PERIOD_MS = 2000.0

# Shape mode: radial growth of one vertex per completed swallow
SHAPE_VERTEX_GROWTH = 4.0

# Shape mode polygon generation
SHAPE_SIDES = 12
LEGACY_SHAPE_MIN_SIDES = 5
LEGACY_SHAPE_MAX_SIDES = 8
LEGACY_SHAPE_MIN_RADIUS_RATIO = 0.5
