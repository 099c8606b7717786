"""Front ends: terminal renderer and PyQt6 widgets."""
