"""KTB! - Kill The Bullies!: a raycasting first-person shooter."""

__version__ = "1.0.0"