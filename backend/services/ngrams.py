"""Unigram + adjacent-bigram term extraction."""

from services.text_normalizer import tokenize


def extract_terms(tokens: list[str]) -> list[str]:
    """Interleave each token with the bigram it starts.

    ``["fast", "api", "docker"]`` ->
    ``["fast", "fast api", "api", "api docker", "docker"]``.
    The interleaving fixes the first-occurrence order used when the
    vocabulary is deduplicated.
    """
    terms: list[str] = []
    for i, token in enumerate(tokens):
        terms.append(token)
        if i + 1 < len(tokens):
            terms.append(f"{token} {tokens[i + 1]}")
    return terms


def text_to_terms(text: str) -> list[str]:
    return extract_terms(tokenize(text))


def build_vocabulary(terms: list[str]) -> list[str]:
    """Ordered, deduplicated terms; first appearance wins."""
    return list(dict.fromkeys(terms))
