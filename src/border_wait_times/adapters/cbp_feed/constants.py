"""Constants for the CBP border wait time feeds.

Both endpoints are public and need no authentication.
"""

# Live RSS feed; each item describes one port (or its PedWest crossing) in free text.
DEFAULT_LIVE_FEED_URL = "https://bwt.cbp.gov/api/bwtRss/CSV/-1/57,55/57,55,106"

# Published spreadsheet export of historical average wait times.
DEFAULT_HISTORICAL_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vQgwjy1utMHHfGJuV_y7dlp_vQvpXo7jvNZ2BPK65BR-KWTgnFNPIk73hiMmX42dJddm5g_QtuUJjRv"
    "/pub?gid=993792785&single=true&output=csv"
)

# Query parameter appended to the historical URL so caches never serve a stale export.
CACHE_BUSTING_PARAM = "_"

DEFAULT_HEADERS = {
    "Accept": "application/rss+xml, application/xml, text/csv, text/plain, */*",
}
