"""Display and world configuration constants."""

# Window size of the pygame front end, in pixels
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

# The frame rate for the game loop, in frames per second
FRAME_RATE = 60

# The playable world is much larger than the window; the camera follows the hole
WORLD_WIDTH = 5000
WORLD_HEIGHT = 5000

# Colors
BACKGROUND_COLOR = (92, 52, 40)
BRICK_LINE_COLOR = (70, 38, 30)
HOLE_COLOR = (0, 0, 0)
HOLE_RIM_COLOR = (40, 40, 40)
SHADER_RING_COLOR = (120, 60, 200)
ZOMBIE_COLOR = (90, 160, 80)
ZOMBIE_EYE_COLOR = (230, 40, 40)
HUD_TEXT_COLOR = (255, 255, 255)

# Brick tile size for the background grid
BRICK_WIDTH = 64
BRICK_HEIGHT = 32
