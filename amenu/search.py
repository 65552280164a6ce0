"""
Incremental filter over entry names.
"""


def filter_names(all_names, query: str) -> list:
    """
    Names whose lowercase form contains the lowercase query, in store order.
    An empty query matches nothing, so the bar stays empty until typing starts.
    """
    if not query:
        return []
    q = query.lower()
    return [name for name in all_names if q in name.lower()]
