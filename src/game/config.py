# --- Display ---
WIDTH = 480                 # initial viewport, resized by the host window
HEIGHT = 640
FPS = 60
MIN_VIEWPORT = 1            # resize clamp (px) so aspect/random ranges stay valid

# --- World / Physics (per tick) ---
GRAVITY = 0.3               # px/tick^2
DRAG = 0.98                 # velocity multiplier, applied after gravity
FLAP_VY = -6.0              # impulse overwrites vy
SCROLL_PX_PER_TICK = 2.5    # obstacle speed
BG_SCROLL_PX_PER_TICK = 0.5 # ground band parallax (display only)

# --- Flyer ---
FLYER_X = 50                # fixed column (centre)
FLYER_START_Y = 150
FLYER_W = 34
FLYER_H = 24
ANGLE_PER_VY = 0.1          # display rotation in radians per px/tick

# --- Obstacles ---
GAP = 350
SPAWN_EVERY_TICKS = 100
TOP_MIN = 50                # top barrier height is drawn from [TOP_MIN, H/2 + TOP_MIN)
OBSTACLE_WIDTH_RATIO = 0.15
OBSTACLE_VARIANTS = 3
SEED_DEFAULT = 12345

# --- Terminal screen ---
BANNER_W = 300
BANNER_LIFT = 100           # banner centre sits this far above the screen centre
SCORE_TEXT_OFFSET = 20
RESTART_OFFSET = 50
RESTART_W = 160
RESTART_H = 44

# --- Colors (RGB / RGBA) ---
COLOR_SKY = (78, 192, 202)
COLOR_GROUND = (51, 170, 170)
GROUND_BAND_H = 100
COLOR_DIM = (0, 0, 0, 204)
COLOR_GOLD = (255, 215, 0)
COLOR_FG = (240, 240, 240)
COLOR_BUTTON = (40, 60, 90)
FONT_NAME = "arial"
