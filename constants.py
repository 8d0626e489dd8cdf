# --- Window ---
TITLE = "N-Bodies Simulation"
FPS = 60
# Physics ticks per second, independent of the frame rate
UPS = 120
DT = 1.0 / UPS
MAX_FRAME_TIME = 0.25

# --- Colors ---
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

PARTICLE_RADIUS = 2.5
