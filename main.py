from __future__ import annotations

from api import AnimationConfig, run

config = AnimationConfig(
    animate_position=True,
    animate_rotation=True,
    animate_scale=True,
    position_amplitude=(0.0, 12.0),
    rotation_amplitude=6.0,
    scale_amplitude=(0.04, 0.04),
    position_frequency=0.5,
    rotation_frequency=0.25,
    scale_frequency=0.5,
)


if __name__ == "__main__":
    run(config, size=(160, 120), window_size=(480, 360))
