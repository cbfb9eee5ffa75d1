"""Front ends: console loop and PyQt6 window."""
