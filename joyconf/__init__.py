"""Configuration model for a programmable joystick controller: pins, buttons, encoders, LEDs and shift registers."""

__version__ = "1.7.1"