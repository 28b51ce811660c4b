"""
Applications Package

Command-line entry points (API server and one-off scrapes). Import from
``fcm_scout.apps.cli`` directly.
"""

__all__: list[str] = []
