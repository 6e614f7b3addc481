"""Agent (zombie) population configuration constants."""

# Initial population spread over the whole world
AGENT_COUNT = 1000

# Capture width; the capture radius is half of it times the scale. The hole
# (radius 50, margin 20) can take an agent of width up to 60 at scale 1.
AGENT_WIDTH = 40.0

# Each velocity component is drawn uniformly from [-WANDER_SPEED, WANDER_SPEED]
WANDER_SPEED = 50.0

# Free agents within AVOID_RADIUS_FACTOR hole radii flee at this speed
AVOID_SPEED = 75.0
AVOID_RADIUS_FACTOR = 2.0

# Broad-phase hitbox: a tiny square around the agent position
AGENT_HITBOX_SIZE = 3.0
