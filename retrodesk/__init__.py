"""RetroDesk - a retro desktop shell with a draggable window manager."""

__version__ = "0.1.0"
