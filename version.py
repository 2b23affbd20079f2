"""
version.py — PASSMETER
======================
Single source of truth for the version number.
Used by the window title and pyproject metadata.
"""

APP_NAME = "PASSMETER"
VERSION  = "1.0.0"
BUILD    = "2026.10.19"
