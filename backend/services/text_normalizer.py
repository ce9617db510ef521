"""Text normalization for job descriptions and candidate documents.

Lower-cases, blanks out characters outside a symbol allowlist, splits on
whitespace and drops stop-words. Two configurations are provided: the
scoring path (whose allowlist must stay fixed for score reproducibility)
and the looser coaching path.
"""

import re

# Closed English stop-word list: articles, conjunctions, pronouns, auxiliaries
STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "if", "then", "else", "when",
    "while", "of", "to", "in", "on", "for", "with", "by", "at", "from",
    "as", "is", "are", "was", "were", "be", "being", "been", "this", "that",
    "these", "those", "it", "its", "into", "over", "under", "about",
    "you", "your", "we", "our", "they", "their", "i", "me", "my", "mine",
    "he", "she", "his", "her", "them", "us", "do", "did", "done",
    "can", "could", "should", "would", "may", "might", "have", "has", "had",
    "will", "just", "than", "such", "also", "per", "via", "across",
})

# Symbols that carry meaning in technical terms: c++, c#, node.js, ci/cd, scikit-learn
SCORING_DISALLOWED = re.compile(r"[^a-z0-9\s+.#\-_/]")
COACH_DISALLOWED = re.compile(r"[^a-z0-9\s+#.\-]")

_SINGLE_QUOTES = re.compile("[‘’]")
_DOUBLE_QUOTES = re.compile("[“”]")


class Normalizer:
    """Turns raw text into an ordered list of tokens.

    Tokens never contain whitespace and never are the empty string;
    their relative order follows the source text.
    """

    def __init__(
        self,
        disallowed: re.Pattern,
        stop_words: frozenset[str] = STOP_WORDS,
        fold_quotes: bool = True,
    ) -> None:
        self.disallowed = disallowed
        self.stop_words = stop_words
        self.fold_quotes = fold_quotes

    def clean(self, text: str) -> str:
        text = (text or "").lower()
        if self.fold_quotes:
            text = _SINGLE_QUOTES.sub("'", text)
            text = _DOUBLE_QUOTES.sub('"', text)
        return self.disallowed.sub(" ", text)

    def tokenize(self, text: str) -> list[str]:
        tokens = []
        for raw in self.clean(text).split():
            # Sentence-ending periods only; keeps "node.js" and ".net"
            token = raw.rstrip(".")
            if token and token not in self.stop_words:
                tokens.append(token)
        return tokens


SCORING_NORMALIZER = Normalizer(SCORING_DISALLOWED)
COACH_NORMALIZER = Normalizer(COACH_DISALLOWED, fold_quotes=False)


def tokenize(text: str) -> list[str]:
    """Tokenize with the scoring-path configuration."""
    return SCORING_NORMALIZER.tokenize(text)
