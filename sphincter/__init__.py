# =======================================================================================
# sphincter/__init__.py - Package Initialization
# =======================================================================================
"""
Sphincter - RFID door lock controller

Reads credentials from a serial RFID reader, pulses the lock actuator for
authorized tokens and exposes a small HTTP control surface for remote
unlock and door-state queries.
"""

__version__ = "1.0.0"
__author__ = "Sphincter Team"
