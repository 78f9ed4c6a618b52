"""Play the wave shooter: python -m game.wave_shooter"""

from .logger import init_logger
from .window import play

if __name__ == "__main__":
    init_logger()
    play()
