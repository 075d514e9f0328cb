"""Game-wide constants for Iso Drift."""

# --- Display ---
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
TITLE = "Iso Drift"

# --- Colors (RGB) ---
WHITE = (255, 255, 255)
SPACE_BG = (5, 6, 10)
LIGHT_GREY = (180, 180, 190)
STAR_DIM = (60, 60, 70)
GRID_LINE = (40, 42, 52)

# HUD / UI accent colors
AMBER = (255, 191, 0)
CYAN = (0, 200, 220)
RED_ALERT = (200, 40, 40)
HULL_GREEN = (40, 200, 80)
FUEL_YELLOW = (255, 220, 50)
SCRAP_GREY = (160, 160, 170)
FRAGMENT_VIOLET = (180, 100, 255)

# --- POI colors (keyed by PoiType.value) ---
POI_COLORS: dict[str, tuple[int, int, int]] = {
    "Station": (120, 200, 255),
    "Asteroids": (200, 200, 120),
    "Derelict": (200, 120, 200),
    "Far Corner": (255, 120, 120),
    "Relay": (120, 255, 180),
    "Wreckage": (180, 180, 180),
    "Gas": (120, 180, 255),
    "Beacon": (255, 220, 120),
}

# --- UI Panel ---
PANEL_BG = (20, 20, 30, 200)
PANEL_BORDER = (60, 60, 80)

# --- Grid & projection ---
GRID_W = 24
GRID_H = 24
TILE_W = 36  # Diamond width in pixels
TILE_H = 18  # Diamond height in pixels
ORIGIN_TOP = 80  # Where grid (0, 0) lands vertically

# --- Vessel ---
START_X = 12
START_Y = 12
ACCEL = 24.0
BOOST_ACCEL = 38.0
MAX_SPEED = 9.0
BOOST_MAX_SPEED = 14.0
DRAG = 3.2
BRAKE_DRAG = 14.0
OVERSPEED_DAMPING = 0.35
MAX_DT = 0.05  # Long pauses are integrated as a single short step
MOVE_EPSILON = 0.00005

# --- Ship economy ---
MAX_HULL = 10
MAX_FUEL = 30.0
FUEL_RATE = 1.0
BOOST_FUEL_RATE = 1.6
EMPTY_FUEL_DAMAGE_CHANCE = 0.02
FRAGMENT_TOTAL = 10

# --- Station services ---
REPAIR_COST = 3
REPAIR_AMOUNT = 5
REFUEL_COST = 2
REFUEL_AMOUNT = 10

# --- POI generation ---
EXTRA_POI_COUNT = 26
MIN_DIST_FROM_STATION = 4
MAX_PLACEMENT_ATTEMPTS = 5000

# --- Interaction & visibility ---
INTERACT_RADIUS = 0.70
VIS_RADIUS = 4  # Fog of war, in tiles

# --- Camera ---
CAMERA_FOLLOW = 8.5  # Higher is snappier
CAMERA_DEADZONE = 0.0  # Pixels; 20–60 gives a slack zone
ZOOM_MIN = 0.6
ZOOM_MAX = 2.6
ZOOM_STEP = 1.10

# --- Persistence ---
SAVE_INTERVAL = 0.25  # Minimum moving time between writes
LOG_LINES = 8

# --- Star field ---
NUM_BACKGROUND_STARS = 120
