"""
Gameplay constants for the wave shooter.

Everything here is part of the observable behaviour of the simulation:
changing a value changes how the game plays.
"""

# Play field (pixels, y grows downward)
SCREEN_WIDTH = 800.0
SCREEN_HEIGHT = 600.0
FPS = 60

# Player
PLAYER_WIDTH = 50.0
PLAYER_BOTTOM_OFFSET = 50.0
PLAYER_Y = SCREEN_HEIGHT - PLAYER_BOTTOM_OFFSET
PLAYER_SPEED = 300.0          # px/s

# Bullets
BULLET_SPEED = 500.0          # px/s, upward
BULLET_SPAWN_OFFSET = 20.0    # spawn this far above the player

# Enemies
INITIAL_ENEMY_SPEED = 50.0    # px/s, base formation speed on wave 1
ENEMY_SPEED_INCREMENT = 10.0  # added to base speed on every wave clear
ENEMY_DROP = 20.0             # vertical drop when the formation reverses
ENEMY_EDGE_MARGIN = 30.0      # formation reverses outside [margin, width - margin]

# Collision
COLLISION_RADIUS = 20.0

# Game over when an enemy goes below SCREEN_HEIGHT - DEFENDER_LINE
DEFENDER_LINE = 100.0

# Wave grid
WAVE_COLUMNS = 10
WAVE_BASE_ROWS = 2            # rows = WAVE_BASE_ROWS + wave
GRID_ORIGIN_X = 50.0
GRID_ORIGIN_Y = 100.0
GRID_SPACING_X = 60.0
GRID_SPACING_Y = 50.0
