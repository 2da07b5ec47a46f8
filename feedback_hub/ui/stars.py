"""Star-rating rendering shared by the form and the table."""

FILLED_STAR = "★"
EMPTY_STAR = "☆"


def render_stars(
    rating: int | None,
    max_rating: int = 5,
    show_value: bool = True,
) -> str:
    """
    Render a rating as a row of stars.

    Stars 1..rating are filled, the rest empty. Ratings outside the
    scale are clamped for drawing but the numeric value is shown as-is.

    Examples:
        render_stars(4)                    -> "★★★★☆ 4"
        render_stars(2, show_value=False)  -> "★★☆☆☆"
    """
    value = rating or 0
    filled = max(0, min(value, max_rating))
    stars = FILLED_STAR * filled + EMPTY_STAR * (max_rating - filled)
    if show_value and rating:
        return f"{stars} {rating}"
    return stars
