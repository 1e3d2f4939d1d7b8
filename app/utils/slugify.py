import re
import unicodedata


def slugify(text: str) -> str:
    """Slug in the shape WordPress gives attribute terms.

    Accents are folded, whitespace runs become a dash, anything that is not a
    word character or dash is dropped and repeated dashes collapse.
    """
    text = unicodedata.normalize("NFKD", str(text)).encode("ascii", "ignore").decode("ascii")
    text = text.lower().strip()
    text = re.sub(r"\s+", "-", text)
    text = re.sub(r"[^\w\-]+", "", text)
    return re.sub(r"-{2,}", "-", text)


def normalize_key(key: str) -> str:
    return re.sub(r"\s+", "-", key.strip().lower())
