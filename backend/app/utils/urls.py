import re

# A run of slashes after any character other than ":" collapses to one,
# which leaves the "//" of a "scheme://" prefix alone.
_DUPLICATE_SLASHES = re.compile(r"([^:]/)/+")


def normalize_image_url(url: str) -> str:
    """Collapse duplicate slashes in an image URL.

    >>> normalize_image_url("https://a.com//img.png")
    'https://a.com/img.png'
    """
    return _DUPLICATE_SLASHES.sub(r"\1", url)


def normalize_image_urls(images: list) -> list:
    """Normalize every string entry; anything else is passed through untouched."""
    return [normalize_image_url(img) if isinstance(img, str) else img for img in images]
