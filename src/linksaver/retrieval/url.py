from typing import Optional

URL_PREFIXES = ("http://", "https://")

# Only a plain space splits tokens; tabs and newlines stay inside a token.
TOKEN_SEPARATOR = " "

def extract_url(text: str) -> Optional[str]:
    """
    Returns the first space-separated token that starts with http:// or https://.
    The token is returned as-is, trailing punctuation included.
    Returns None when no token qualifies.
    """
    if not text:
        return None

    for token in text.split(TOKEN_SEPARATOR):
        if token.startswith(URL_PREFIXES):
            return token

    return None
