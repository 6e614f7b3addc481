"""Pygame presentation layer: draws FrameSnapshots, never touches live state."""
