# word_shape.py
# Surface-shape categories for words the lexicon cannot resolve.
import enum
import re


class Category(enum.Enum):
    CARDINAL = "cardinal"
    CAPITALIZED = "capitalized"
    HYPHENATED = "hyphenated"
    LOWERCASE = "lowercase"


# Order matters: first match wins
CATEGORIES = [
    Category.CARDINAL,      # 12, 5., 3.14, 12-34, 1990s
    Category.CAPITALIZED,   # Apple
    Category.HYPHENATED,    # well-known
    Category.LOWERCASE,     # fallback
]

# digits | digits + period | digit/separator run ending in a digit | digits + 1-3 letters
_re_cardinal = re.compile(r'[0-9]+|[0-9]+\.|[0-9.,:-]+[0-9]+|[0-9]+[a-zA-Z]{1,3}')


def is_cardinal(w: str) -> bool:
    return _re_cardinal.fullmatch(w) is not None


def classify(w: str) -> Category:
    if not w:
        raise ValueError("Cannot classify an empty word")

    if is_cardinal(w):
        return Category.CARDINAL
    if w[0].isupper():
        return Category.CAPITALIZED
    if "-" in w:
        return Category.HYPHENATED

    return Category.LOWERCASE
