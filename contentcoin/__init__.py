"""
Content Coin Backend

A FastAPI backend for minting coins backed by web content.
Provides platform-aware scraping, scraped content storage, and coin records.
"""

__version__ = "1.0.0"
