"""
FCM Scout
Scraping-Brücke für RenderZ-Spielerdaten und FC-Mobile-Redeem-Codes mit JSON-API
"""

__version__ = "1.0.0"
__author__ = "FCM Scout Team"

# NOTE:
# Keep "import fcm_scout" side-effect free: settings and the FastAPI app are
# only built when their modules are imported explicitly.

__all__: list[str] = []
