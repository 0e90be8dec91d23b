"""
Stockchart App - Daily quote ingestion and chart alignment pipeline

Fetches daily closing prices for a ticker symbol, optionally smooths them
with a trailing moving average, and pads the leading edge with zero
sentinels so several series can share one date axis on a chart.
"""

__version__ = "0.1.0"
__author__ = "Stockchart Team"
