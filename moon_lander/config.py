"""
Central configuration for simulation, terrain, HUD layout, audio and reports.

Keep ALL constants here so tuning doesn't require hunting through code.
"""
import math
from pathlib import Path

# Window
WIDTH, HEIGHT = 1024, 700
FPS = 60
CAPTION = "Moon Lander"

# Physics (per tick)
GRAVITY = 0.001
THRUST = -0.01  # negative: opposes gravity when upright
ROTATE_SPEED = 0.05

# Craft geometry
LANDER_WIDTH = 20
LANDER_HEIGHT = 30

# Spawn
SPAWN_Y = 100
SPAWN_VX = (-1.0, 1.0)
SPAWN_VY = (0.5, 2.0)
SPAWN_ANGLE = (-math.pi / 4, math.pi / 4)

# Landing thresholds
SAFE_LANDING_VY = 1.2
SAFE_LANDING_ANGLE = math.pi / 8  # ~22.5 deg

# Terrain
TERRAIN_STEP = 20
GROUND_MARGIN = 50  # ground_y = HEIGHT - GROUND_MARGIN
TERRAIN_START_DEPTH = 100
TERRAIN_MIN_DEPTH = 20
TERRAIN_MAX_DEPTH = 180
BASE_ROUGHNESS = 40
ROUGHNESS_PER_LEVEL = 10
BASE_PAD_COUNT = 3
BASE_PAD_WIDTH = 80
PAD_WIDTH_PER_LEVEL = 10
MIN_PAD_WIDTH = 40

# Progression
START_LEVEL = 0
START_DIFFICULTY = 1

# Collision: also sample terrain under both edges of the craft
CONTACT_FOOTPRINT = True

# Colours
BG_COLOR = (0, 0, 0)
TERRAIN_COLOR = (34, 34, 34)
TERRAIN_EDGE_COLOR = (120, 120, 120)
PAD_COLOR = (255, 255, 0)
LANDER_COLOR = (255, 255, 255)
LANDED_COLOR = (0, 255, 0)
CRASHED_COLOR = (255, 0, 0)
FLAME_COLOR = (255, 165, 0)
TEXT_COLOR = (255, 255, 255)

# HUD
HUD_FONT_SIZE = 24
BANNER_FONT_SIZE = 40
HINT_FONT_SIZE = 24
HUD_X = 20
HUD_Y = 20
HUD_LINE_H = 30

# Audio
MUTE = False
SAMPLE_RATE = 44100
THRUST_FREQ = 110
THRUST_VOLUME = 0.25
LANDED_FREQS = (523, 659, 784)
CRASH_FREQ = 80
CUE_VOLUME = 0.4

# Flight log
EP_N = 100
RUN_TAG = "play"
REPORTS_DIR = Path("reports")
EXPORT_CSV = True
EXPORT_JSON = True
