"""
constants.py: Centralized configuration for game and window settings.
"""

# -------- Window & Render Config --------
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 800
RENDER_FPS = 60                 # Display refresh the driver aims for
WINDOW_TITLE = "Flappy Pombo"

# -------- Game World Config --------
BIRD_X = 50                     # Fixed bird X position (world scrolls)
BIRD_SIZE = 60                  # Square bounding box edge

# -------- Pipe Config --------
PIPE_WIDTH = 60
GAP_SIZE = 240
MIN_PIPE_HEIGHT = 50            # Smallest barrier above/below the gap
PIPE_SPEED = 2.5                # Horizontal speed (pixels/frame)
PIPE_SPAWN_INTERVAL_MS = 1800   # Wall-clock spawn period

# -------- Physics Config (Pixels / Frame) --------
GRAVITY = 0.3                   # Added to velocity every step
JUMP_IMPULSE = -6.0             # Velocity set by a flap

# -------- Scoring --------
CELEBRATION_SCORE = 5           # One-shot overlay threshold
