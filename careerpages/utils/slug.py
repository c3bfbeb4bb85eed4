"""Company slug helpers."""

from slugify import slugify

# Top-level paths a company slug must not shadow
RESERVED_SLUGS = {"api", "login", "signup", "health", "docs", "redoc", "openapi.json", "static"}


def create_slug(text: str) -> str:
    """
    Normalize user input into the URL identifier of a careers page.

        >>> create_slug("TechCorp Solutions")
        'techcorp-solutions'
    """
    return slugify(text, lowercase=True, separator="-")


def is_reserved(slug: str) -> bool:
    return slug in RESERVED_SLUGS
