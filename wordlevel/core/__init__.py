"""Core — Settings, logging, scheduling and sessions."""
