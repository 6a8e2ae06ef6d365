"""City extraction from free-form addresses."""

UNKNOWN_CITY = "Unknown"


def _is_postcode(token: str) -> bool:
    return any(char.isdigit() for char in token)


def extract_city(address: str) -> str:
    """Best-effort city from the second address line.

    "12 Oak St\\n10115 Berlin\\nGermany" -> "Berlin". A leading token with a
    digit in it is treated as the postcode and dropped.
    """
    lines = address.splitlines()
    if len(lines) < 2:
        return UNKNOWN_CITY

    tokens = lines[1].split()
    if tokens and _is_postcode(tokens[0]):
        tokens = tokens[1:]
    city = " ".join(tokens)
    return city or UNKNOWN_CITY
