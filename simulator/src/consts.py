# Window / scene size
WIDTH = 800
HEIGHT = 600

FPS = 60

# Colours
BG_COLOR = (30, 30, 30)
FONT_COLOR = (255, 255, 255)
OVERLAY_COLOR = (255, 255, 100)

# Lights
DEFAULT_LIGHT_RADIUS = 80
DEFAULT_BRIGHTNESS = 0.002  # modifier step per pixel in the falloff cone
NUM_RANDOM_LIGHTS = 3

# Output
HEATMAP_PATH = "heatmap.png"
SCREENSHOT_PATH = "lit_frame.png"
