"""
Controllers Package

Contains the Flask blueprints exposing the ladder engine.
"""
