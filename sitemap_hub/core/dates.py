from datetime import datetime, timezone


def format_w3c_datetime(dt: datetime) -> str:
    """
    Sitemap crawlers expect '2009-11-05T19:20:30+0100': numeric offset, no
    fractional seconds, never a literal 'Z'. Naive values are taken as UTC.
    Offsets with a seconds part are rounded to whole minutes.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    minutes = round(dt.utcoffset().total_seconds() / 60)
    sign = "-" if minutes < 0 else "+"
    hh, mm = divmod(abs(minutes), 60)
    return f"{dt.strftime('%Y-%m-%dT%H:%M:%S')}{sign}{hh:02d}{mm:02d}"
