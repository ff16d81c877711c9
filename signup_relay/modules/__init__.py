"""
Signup Relay Modules
====================

Each module ships a Flask blueprint that SignupRelay registers on init.
"""
