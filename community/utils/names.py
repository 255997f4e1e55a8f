"""Helpers for the single ``fullName`` field the mobile client sends."""


def split_full_name(full_name):
    """``"Ada Lovelace King"`` -> ``("Ada", "Lovelace King")``, trimmed to the model's lengths."""
    first, _, last = (full_name or "").strip().partition(" ")
    return first[:50], last.strip()[:50]
