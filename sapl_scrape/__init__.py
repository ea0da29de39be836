"""
Scraper for the indications registry of the Bento Goncalves city council (SAPL).

Pipeline: fetch listing pages -> extract rows -> classify -> consolidate,
then serve the result as JSON or filter it locally.
"""

__version__ = "0.1.0"
