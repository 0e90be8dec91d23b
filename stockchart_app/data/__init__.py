"""
Quote data models, parsing and chart alignment.

Turns raw delimited provider responses into ordered date-keyed series and
shapes them so that independently fetched series share one date axis.
"""
