"""Seed data for the book catalog."""

import json
from pathlib import Path

DEFAULT_BOOKS: dict[str, dict[str, str]] = {
    "1": {"author": "Chinua Achebe", "title": "Things Fall Apart"},
    "2": {"author": "Hans Christian Andersen", "title": "Fairy tales"},
    "3": {"author": "Dante Alighieri", "title": "The Divine Comedy"},
    "4": {"author": "Unknown", "title": "The Epic Of Gilgamesh"},
    "5": {"author": "Unknown", "title": "The Book Of Job"},
    "6": {"author": "Unknown", "title": "One Thousand and One Nights"},
    "7": {"author": "Unknown", "title": "Njál's Saga"},
    "8": {"author": "Jane Austen", "title": "Pride and Prejudice"},
    "9": {"author": "Honoré de Balzac", "title": "Le Père Goriot"},
    "10": {
        "author": "Samuel Beckett",
        "title": "Molloy, Malone Dies, The Unnamable, the trilogy",
    },
}


def load_seed(path: str | None) -> dict[str, dict[str, object]]:
    """Return seed books from a JSON file, or the default catalog."""
    if path is None:
        return {key: dict(value) for key, value in DEFAULT_BOOKS.items()}
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("Seed file must contain a JSON object keyed by identifier")
    seed: dict[str, dict[str, object]] = {}
    for identifier, payload in raw.items():
        if not isinstance(payload, dict):
            raise ValueError(f"Seed entry {identifier!r} must be an object")
        seed[str(identifier)] = payload
    return seed
