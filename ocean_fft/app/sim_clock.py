# -*- coding: utf-8 -*-

"""
Filename: sim_clock.py
Author: storro
Date: 2026-02-13
Description: Scaled, pausable simulation time fed to the ocean every frame
"""

from dataclasses import dataclass

MAX_TIME_SCALE = 3.0


@dataclass
class SimulationClock:
    time: float = 0.0
    # 1 = real time, 0 = frozen, up to MAX_TIME_SCALE
    time_scale: float = 1.0
    paused: bool = False

    def __post_init__(self) -> None:
        self.set_time_scale(self.time_scale)

    def set_time_scale(self, value: float) -> None:
        self.time_scale = min(MAX_TIME_SCALE, max(0.0, float(value)))

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def advance(self, dt: float) -> float:
        if not self.paused:
            self.time += float(dt) * self.time_scale
        return self.time
