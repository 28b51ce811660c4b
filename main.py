"""
FCM Scout - Hauptanwendung

Startet die JSON-API unter Uvicorn. Für einzelne Scrapes siehe
``python -m fcm_scout.apps.cli --help``.
"""

import sys

from fcm_scout.apps.cli import main

if __name__ == "__main__":
    sys.exit(main(["serve", *sys.argv[1:]]))
