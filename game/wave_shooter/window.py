"""
Arcade window: keyboard input, drawing and the frame clock for a Simulation.

Arcade's y axis points up while the simulation's points down, so every
position is flipped on the way to the screen.
"""

from __future__ import annotations

import arcade
from loguru import logger

from .constants import FPS, PLAYER_WIDTH
from .palette import (
    BG,
    BULLET_C,
    BULLET_RADIUS,
    ENEMY_COLORS,
    HUD_C,
    LINE_C,
    PLAYER_C,
    PLAYER_HALF_HEIGHT,
    enemy_radius,
)
from .simulation import EventType, GameState, InputSnapshot, Simulation, TickResult

LEFT_KEYS = (arcade.key.LEFT, arcade.key.A)
RIGHT_KEYS = (arcade.key.RIGHT, arcade.key.D)


class ShooterWindow(arcade.Window):
    """Arcade window for playing or watching a wave shooter session"""

    def __init__(self, sim: Simulation, width: int, height: int, interactive: bool = True):
        super().__init__(width, height, "Wave Shooter - Arcade")
        self.sim = sim
        self.interactive = interactive

        self._left = False
        self._right = False
        self._fire = False
        self._reset = False

        self.background_color = BG
        if interactive:
            self.set_update_rate(1 / FPS)

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol in LEFT_KEYS:
            self._left = True
        elif symbol in RIGHT_KEYS:
            self._right = True
        elif symbol == arcade.key.SPACE:
            self._fire = True
        elif symbol == arcade.key.R:
            self._reset = True
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in LEFT_KEYS:
            self._left = False
        elif symbol in RIGHT_KEYS:
            self._right = False

    def _take_input(self) -> InputSnapshot:
        snap = InputSnapshot(
            move_left=self._left,
            move_right=self._right,
            fire=self._fire,
            reset=self._reset,
        )
        # fire and reset fire once per key press
        self._fire = False
        self._reset = False
        return snap

    # ----------------------------
    # Frame
    # ----------------------------

    def on_update(self, delta_time: float):
        if not self.interactive:
            return
        result = self.sim.tick(self._take_input(), delta_time)
        self._report(result)

    def _report(self, result: TickResult):
        for ev in result.events:
            if ev.type is EventType.ENEMY_DESTROYED:
                logger.debug("Enemy destroyed at ({:.0f}, {:.0f}) for {} points", ev.x, ev.y, ev.points)
            elif ev.type is EventType.WAVE_CLEARED:
                logger.info("Wave {} incoming", ev.wave)
            elif ev.type is EventType.GAME_OVER:
                logger.info("Game over - final score {} on wave {}", ev.score, ev.wave)

    def on_draw(self):
        self.clear()
        state = self.sim.snapshot()
        h = self.height

        line_y = h - (self.sim.screen_height - self.sim.defender_line)
        arcade.draw_line(0, line_y, self.width, line_y, LINE_C, 2)

        for x, y, enemy_type, health in state.enemies:
            arcade.draw_circle_filled(x, h - y, enemy_radius(health), ENEMY_COLORS[enemy_type])

        for x, y in state.bullets:
            arcade.draw_circle_filled(x, h - y, BULLET_RADIUS, BULLET_C)

        half = PLAYER_WIDTH * 0.5
        py = h - state.player_y
        arcade.draw_lrbt_rectangle_filled(
            state.player_x - half, state.player_x + half,
            py - PLAYER_HALF_HEIGHT, py + PLAYER_HALF_HEIGHT, PLAYER_C,
        )

        txt = f"Score: {state.score}  Wave: {state.wave}  Enemies: {len(state.enemies)}"
        arcade.draw_text(txt, 12, h - 24, HUD_C, 14)

        if state.state is GameState.GAME_OVER:
            arcade.draw_text("GAME OVER - press R", self.width / 2 - 120, h / 2, HUD_C, 22)


def play():
    """Open a window and play until it is closed"""
    sim = Simulation()
    window = ShooterWindow(sim, int(sim.screen_width), int(sim.screen_height))
    logger.info("Starting wave shooter")
    arcade.run()
    window.close()
