"""
Scrapers Package

RenderZ player scraping, forum redeem-code scraping and the shared
extraction strategies. Import concrete scrapers from their modules, e.g.:

    from fcm_scout.scrapers.renderz_scraper import RenderzScraper
"""

__all__: list[str] = []
