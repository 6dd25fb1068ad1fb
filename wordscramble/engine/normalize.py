"""
Input normalization shared by every validation step.

The normalized form is what the validator compares and what a round records:
lowercase, with leading/trailing whitespace (including newlines) removed.
"""


def normalize(raw: str) -> str:
    """
    Lowercase and trim a raw submission.

    normalize(normalize(x)) == normalize(x) for every string x.
    """
    return raw.lower().strip()
